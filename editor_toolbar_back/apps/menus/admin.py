from django.contrib import admin
from .models import Menu, MenuPermission


# Admin 등록
@admin.register(Menu)
class MenuAdmin(admin.ModelAdmin):
    list_display = ("plugin_id", "title", "route_name", "parent", "weight", "is_active")
    list_filter = ("link_type", "is_active")
    search_fields = ("plugin_id", "title")


admin.site.register(MenuPermission)
