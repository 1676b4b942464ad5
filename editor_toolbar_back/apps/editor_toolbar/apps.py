from django.apps import AppConfig


class EditorToolbarConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.editor_toolbar"
    verbose_name = "에디터 툴바"
