from django.contrib.auth.models import Group, User
from django.test import TestCase
from rest_framework.test import APITestCase, APIRequestFactory
from rest_framework import status

from apps.editor_toolbar.conf import SETTINGS_KEY
from apps.menus.models import Menu
from utils.exceptions import MenuTreeCycleException
from utils.exception_handlers import custom_exception_handler
from .models import SystemConfig
from .permission import IsAdmin


class SystemConfigTest(TestCase):
    """SystemConfig 모델 테스트"""

    def test_set_and_get_json_value(self):
        SystemConfig.set_value("system.theme", {"admin": "themes/admin"}, description="테마")

        self.assertEqual(SystemConfig.get_value("system.theme"), {"admin": "themes/admin"})

    def test_missing_key_returns_default(self):
        self.assertEqual(SystemConfig.get_value("missing", {}), {})

    def test_non_json_value_returned_raw(self):
        SystemConfig.objects.create(key="raw", value="plain text")

        self.assertEqual(SystemConfig.get_value("raw"), "plain text")


class IsAdminPermissionTest(TestCase):
    """IsAdmin 권한 테스트"""

    def setUp(self):
        self.factory = APIRequestFactory()

    def check(self, user):
        request = self.factory.get("/")
        request.user = user
        return IsAdmin().has_permission(request, None)

    def test_admin_group(self):
        user = User.objects.create_user(username="manager", password="testpass123")
        user.groups.add(Group.objects.create(name="SYSTEMMANAGER"))

        self.assertTrue(self.check(user))

    def test_superuser(self):
        user = User.objects.create_superuser(username="root", password="testpass123")

        self.assertTrue(self.check(user))

    def test_regular_user(self):
        user = User.objects.create_user(username="editor", password="testpass123")

        self.assertFalse(self.check(user))


class ExceptionHandlerTest(TestCase):
    """커스텀 예외 핸들러 테스트"""

    def test_toolbar_exception_format(self):
        response = custom_exception_handler(MenuTreeCycleException(detail="key=a"), {})

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["error"]["code"], "ERR_601")
        self.assertEqual(response.data["error"]["detail"], "key=a")
        self.assertTrue(response.data["error"]["timestamp"].endswith("Z"))

    def test_unexpected_exception(self):
        response = custom_exception_handler(RuntimeError("boom"), {})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["error"]["code"], "ERR_500")


class HealthCheckTest(APITestCase):
    """헬스 체크 API 테스트"""

    def test_health_before_toolbar_registration(self):
        response = self.client.get("/health/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["database"], "connected")
        self.assertEqual(response.data["toolbar"], {"status": "unregistered", "settings": "default", "activeMenus": 0})

    def test_health_reports_toolbar_state(self):
        Menu.objects.create(plugin_id="system.admin_content", title="Content")
        Menu.objects.create(plugin_id="system.admin_structure", title="Structure", is_active=False)
        SystemConfig.set_value(SETTINGS_KEY, {"show_combined_add_content": True})

        response = self.client.get("/health/")

        self.assertEqual(response.data["status"], "healthy")
        self.assertEqual(response.data["toolbar"], {"status": "ready", "settings": "stored", "activeMenus": 1})
