from django.contrib.auth.models import Permission, User
from django.test import TestCase
from rest_framework.test import APITestCase
from rest_framework import status

from .models import Menu, MenuPermission
from .services import get_user_menus
from .tree import InaccessibleMenuLink, MenuAccess, MenuLinkDefault, ViewsMenuLink
from .utils import build_menu_tree, serialize_menu_tree


class MenuTreeBuildTest(TestCase):
    """메뉴 트리 생성 테스트"""

    def setUp(self):
        """테스트 데이터 설정"""
        self.content = Menu.objects.create(
            plugin_id="system.admin_content", title="Content",
            route_name="system.admin_content", path="/admin/content", weight=-10,
        )
        self.add = Menu.objects.create(
            plugin_id="node.add_page", title="Add content",
            route_name="node.add_page", path="/node/add", parent=self.content,
        )
        self.overview = Menu.objects.create(
            plugin_id="views_view:content", title="Overview", link_type=Menu.LinkType.VIEWS,
            route_name="view.content.page_1", path="/admin/content/list", parent=self.content, weight=1,
        )
        self.structure = Menu.objects.create(
            plugin_id="system.admin_structure", title="Structure", route_name="<nolink>",
        )
        self.editor = User.objects.create_user(username="editor", password="testpass123")

    def test_tree_structure(self):
        tree = build_menu_tree(get_user_menus(self.editor), self.editor)

        self.assertEqual(list(tree), ["system.admin_content", "system.admin_structure"])
        content = tree["system.admin_content"]
        self.assertTrue(content.has_children)
        self.assertEqual(list(content.subtree), ["node.add_page", "views_view:content"])
        self.assertEqual(content.depth, 1)
        self.assertEqual(content.subtree["node.add_page"].depth, 2)

    def test_link_variants_and_definition(self):
        tree = build_menu_tree(get_user_menus(self.editor), self.editor)
        content = tree["system.admin_content"]

        self.assertIsInstance(content.link, MenuLinkDefault)
        self.assertIsInstance(content.subtree["views_view:content"].link, ViewsMenuLink)
        self.assertEqual(content.subtree["node.add_page"].link.get_parent(), "system.admin_content")
        self.assertEqual(content.link.get_url(), "/admin/content")

    def test_inactive_parent_drops_children(self):
        self.content.is_active = False
        self.content.save()

        tree = build_menu_tree(get_user_menus(self.editor), self.editor)

        self.assertEqual(list(tree), ["system.admin_structure"])

    def test_permission_denied_link_is_inaccessible(self):
        permission = Permission.objects.get(codename="change_menu", content_type__app_label="menus")
        MenuPermission.objects.create(menu=self.add, permission=permission)

        tree = build_menu_tree(get_user_menus(self.editor), self.editor)
        element = tree["system.admin_content"].subtree["node.add_page"]

        self.assertIsInstance(element.link, InaccessibleMenuLink)
        self.assertEqual(element.access, MenuAccess.FORBIDDEN)
        self.assertEqual(element.plugin_id, "node.add_page")

    def test_permission_granted_link_is_allowed(self):
        permission = Permission.objects.get(codename="change_menu", content_type__app_label="menus")
        MenuPermission.objects.create(menu=self.add, permission=permission)
        self.editor.user_permissions.add(permission)
        editor = User.objects.get(pk=self.editor.pk)

        tree = build_menu_tree(get_user_menus(editor), editor)

        self.assertTrue(tree["system.admin_content"].subtree["node.add_page"].is_allowed())

    def test_serialize_skips_forbidden_nodes(self):
        tree = build_menu_tree(get_user_menus(self.editor), self.editor)
        tree["system.admin_content"].subtree["node.add_page"].forbid()

        items = serialize_menu_tree(tree)

        self.assertEqual([item["pluginId"] for item in items], ["system.admin_content", "system.admin_structure"])
        self.assertEqual([child["pluginId"] for child in items[0]["children"]], ["views_view:content"])
        self.assertTrue(items[0]["clickable"])
        self.assertFalse(items[1]["clickable"])
        self.assertIsNone(items[1]["path"])

    def test_serialize_flattens_wrapped_levels(self):
        tree = build_menu_tree(get_user_menus(self.editor), self.editor)
        content = tree["system.admin_content"]
        content.subtree = {"group": dict(content.subtree)}

        items = serialize_menu_tree({"root": [content]})

        self.assertEqual(items[0]["key"], "0")
        self.assertEqual([child["key"] for child in items[0]["children"]], ["node.add_page", "views_view:content"])


class UserMenuAPITest(APITestCase):
    """메뉴 API 테스트"""

    def setUp(self):
        Menu.objects.create(plugin_id="system.admin_content", title="Content", route_name="system.admin_content")
        self.user = User.objects.create_user(username="editor", password="testpass123")

    def test_menu_list(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.get("/api/menus/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["menus"][0]["pluginId"], "system.admin_content")

    def test_menu_list_requires_authentication(self):
        response = self.client.get("/api/menus/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
