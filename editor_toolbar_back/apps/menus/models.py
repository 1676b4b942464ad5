from django.db import models
from django.contrib.auth.models import Permission

# Menu 모델 설계(메뉴 링크 정의 + 권한 매핑)


# 메뉴 링크 정의 (plugin id, route, parent-child 구조)
class Menu(models.Model):
    class LinkType(models.TextChoices):
        DEFAULT = "default", "정적 링크"
        VIEWS = "views", "뷰 링크"

    id = models.BigAutoField(primary_key=True)  # PK는 숫자형
    plugin_id = models.CharField(max_length=150, unique=True)  # 'system.admin_content' 등
    title = models.CharField(max_length=100)
    route_name = models.CharField(max_length=150, default="<nolink>")  # '<nolink>' 이면 클릭 불가
    path = models.CharField(max_length=200, blank=True, null=True)
    icon = models.CharField(max_length=50, blank=True, null=True)
    description = models.CharField(max_length=200, blank=True)
    link_type = models.CharField(max_length=20, choices=LinkType.choices, default=LinkType.DEFAULT)
    parent = models.ForeignKey("self", related_name="children", on_delete=models.CASCADE, blank=True, null=True)
    weight = models.IntegerField(default=0)
    options = models.JSONField(default=dict, blank=True)  # plugin definition 추가 항목
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ["weight", "title"]

    def __str__(self):
        return self.plugin_id

    def get_plugin_definition(self):
        """트리 링크 생성용 plugin definition"""
        definition = dict(self.options or {})
        definition.update({
            "id": self.plugin_id,
            "title": self.title,
            "route_name": self.route_name,
            "path": self.path,
            "icon": self.icon,
            "description": self.description,
            "parent": self.parent.plugin_id if self.parent_id else "",
            "weight": self.weight,
        })
        return definition


# 메뉴와 Permission 매핑 (권한 기반 접근 제어)
class MenuPermission(models.Model):
    menu = models.ForeignKey(Menu, on_delete=models.CASCADE)
    permission = models.ForeignKey(Permission, on_delete=models.CASCADE)

    class Meta:
        unique_together = ("menu", "permission")

    def __str__(self):
        return f"{self.menu.plugin_id} - {self.permission.codename}"
