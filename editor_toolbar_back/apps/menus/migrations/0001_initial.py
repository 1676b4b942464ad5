# Generated manually - Menu, MenuPermission

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="Menu",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("plugin_id", models.CharField(max_length=150, unique=True)),
                ("title", models.CharField(max_length=100)),
                ("route_name", models.CharField(default="<nolink>", max_length=150)),
                ("path", models.CharField(blank=True, max_length=200, null=True)),
                ("icon", models.CharField(blank=True, max_length=50, null=True)),
                ("description", models.CharField(blank=True, max_length=200)),
                (
                    "link_type",
                    models.CharField(
                        choices=[("default", "정적 링크"), ("views", "뷰 링크")],
                        default="default",
                        max_length=20,
                    ),
                ),
                ("weight", models.IntegerField(default=0)),
                ("options", models.JSONField(blank=True, default=dict)),
                ("is_active", models.BooleanField(default=True)),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="children",
                        to="menus.menu",
                    ),
                ),
            ],
            options={
                "ordering": ["weight", "title"],
            },
        ),
        migrations.CreateModel(
            name="MenuPermission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("menu", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="menus.menu")),
                ("permission", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="auth.permission")),
            ],
            options={
                "unique_together": {("menu", "permission")},
            },
        ),
    ]
