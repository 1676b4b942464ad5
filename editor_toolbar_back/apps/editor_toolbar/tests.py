import json
import os
import tempfile
from io import StringIO

from django.contrib.auth.models import Group, User
from django.core.management import call_command
from django.test import SimpleTestCase, TestCase, override_settings
from rest_framework.test import APITestCase
from rest_framework import status

from apps.common.models import SystemConfig
from apps.menus.models import Menu
from apps.menus.tree import (
    InaccessibleMenuLink,
    MenuAccess,
    MenuLinkDefault,
    MenuLinkTreeElement,
    ViewsMenuLink,
    set_tree_depth,
)
from apps.menus.utils import serialize_menu_tree
from utils.exceptions import MenuTreeCycleException
from .conf import (
    DEFAULT_TOOLBAR_SETTINGS,
    SETTINGS_KEY,
    ToolbarSettings,
    load_toolbar_settings,
    merge_settings,
)
from .manipulators import EditorToolbarTreeManipulators, walk_tree
from .services import EditorToolbar, build_editor_toolbar_tree


def node(plugin_id, route_name="system.admin", subtree=None, link_class=MenuLinkDefault,
         access=MenuAccess.ALLOWED):
    """테스트용 트리 노드 생성"""
    link = link_class(plugin_id, {"title": plugin_id, "route_name": route_name, "parent": "system.admin"})
    return MenuLinkTreeElement(link, has_children=bool(subtree), subtree=subtree or {}, access=access)


def inaccessible(plugin_id):
    link = InaccessibleMenuLink(MenuLinkDefault(plugin_id, {"route_name": "system.admin"}))
    return MenuLinkTreeElement(link, access=MenuAccess.FORBIDDEN)


def manipulators(**settings_data):
    return EditorToolbarTreeManipulators(ToolbarSettings(merge_settings(DEFAULT_TOOLBAR_SETTINGS, settings_data)))


def access_map(tree):
    """(key, plugin_id) → access 값"""
    states = {}
    walk_tree(tree, lambda element, key: states.__setitem__((key, element.plugin_id), element.access))
    return states


class WalkTreeTest(SimpleTestCase):
    """트리 순회 테스트"""

    def test_pre_order_visits_parent_before_children(self):
        tree = {"a": node("a", subtree={"b": node("b", subtree={"c": node("c")})}), "d": node("d")}
        visited = []

        walk_tree(tree, lambda element, key: visited.append(key))

        self.assertEqual(visited, ["a", "b", "c", "d"])

    def test_post_order_visits_children_before_parent(self):
        tree = {"a": node("a", subtree={"b": node("b", subtree={"c": node("c")})}), "d": node("d")}
        visited = []

        walk_tree(tree, lambda element, key: visited.append(key), post_order=True)

        self.assertEqual(visited, ["c", "b", "a", "d"])

    def test_extra_nesting_is_flattened(self):
        """bare 컬렉션으로 한 번 더 감싼 레벨도 순회, callback 은 노드에만 호출"""
        tree = {"wrapper": {"a": node("a"), "b": node("b", subtree={"c": node("c")})}, "list": [node("d")]}
        visited = []

        walk_tree(tree, lambda element, key: visited.append((key, element.plugin_id)))

        self.assertEqual(visited, [("a", "a"), ("b", "b"), ("c", "c"), ("0", "d")])

    def test_non_node_values_are_ignored(self):
        tree = {"a": node("a"), "meta": "not-a-node", "count": 3}
        visited = []

        walk_tree(tree, lambda element, key: visited.append(key))

        self.assertEqual(visited, ["a"])

    def test_mutations_are_visible_after_walk(self):
        child = node("b")
        tree = {"a": node("a", subtree={"b": child})}

        walk_tree(tree, lambda element, key: element.forbid())

        self.assertEqual(child.access, MenuAccess.FORBIDDEN)
        self.assertEqual(tree["a"].access, MenuAccess.FORBIDDEN)

    def test_cycle_raises(self):
        parent = node("a")
        parent.subtree["self"] = parent

        with self.assertRaises(MenuTreeCycleException):
            walk_tree({"a": parent}, lambda element, key: None)

    def test_wrapper_cycle_raises(self):
        wrapper = {"a": node("a")}
        wrapper["self"] = wrapper

        with self.assertRaises(MenuTreeCycleException):
            walk_tree({"w": wrapper}, lambda element, key: None)

    def test_shared_node_at_two_positions_is_not_a_cycle(self):
        shared = node("shared")
        tree = {"a": node("a", subtree={"s": shared}), "b": node("b", subtree={"s": shared})}
        visited = []

        walk_tree(tree, lambda element, key: visited.append(element.plugin_id))

        self.assertEqual(visited.count("shared"), 2)


class RemoveMenuItemTest(SimpleTestCase):
    """remove_menu_item / remove_menu_items 테스트"""

    def test_nested_item_is_forbidden_parent_unchanged(self):
        tree = {"A": node("x", subtree={"B": node("y")})}

        manipulators().remove_menu_item(tree, "y")

        self.assertEqual(tree["A"].subtree["B"].access, MenuAccess.FORBIDDEN)
        self.assertEqual(tree["A"].access, MenuAccess.ALLOWED)

    def test_all_occurrences_are_forbidden(self):
        tree = {
            "first": node("dup"),
            "other": node("other", subtree={"second": node("dup")}),
        }

        manipulators().remove_menu_item(tree, "dup")

        self.assertEqual(access_map(tree), {
            ("first", "dup"): MenuAccess.FORBIDDEN,
            ("other", "other"): MenuAccess.ALLOWED,
            ("second", "dup"): MenuAccess.FORBIDDEN,
        })

    def test_remove_is_idempotent(self):
        tree = {"a": node("a", subtree={"b": node("b")}), "c": node("c")}
        toolbar = manipulators()

        once = access_map(toolbar.remove_menu_item(tree, "b"))
        twice = access_map(toolbar.remove_menu_item(tree, "b"))

        self.assertEqual(once, twice)

    def test_unknown_id_is_noop(self):
        tree = {"a": node("a", subtree={"b": node("b")})}
        before = access_map(tree)

        result = manipulators().remove_menu_item(tree, "missing")

        self.assertIs(result, tree)
        self.assertEqual(access_map(tree), before)

    def test_remove_menu_items_uses_configured_list(self):
        tree = {"a": node("a"), "b": node("b"), "c": node("c")}
        toolbar = manipulators(menu_items={"remove": ["a", "c", "a"]})

        toolbar.remove_menu_items(tree)

        self.assertFalse(tree["a"].is_allowed())
        self.assertTrue(tree["b"].is_allowed())
        self.assertFalse(tree["c"].is_allowed())

    def test_remove_never_restores_access(self):
        tree = {"a": node("a", access=MenuAccess.FORBIDDEN)}

        manipulators(menu_items={"remove": ["b"]}).remove_menu_items(tree)

        self.assertEqual(tree["a"].access, MenuAccess.FORBIDDEN)


class ExpandMenuItemTest(SimpleTestCase):
    """expand_menu_item 테스트"""

    def test_children_move_to_root_except_inaccessible(self):
        tree = {"menu": node("menu", subtree={"a": inaccessible("a"), "b": node("b")})}

        result = manipulators(menu_items={"expand": ["menu"]}).expand_menu_item(tree)

        self.assertIn("b", result)
        self.assertNotIn("menu", result)
        self.assertNotIn("a", result)

    def test_root_order_is_preserved(self):
        tree = {
            "first": node("first"),
            "menu": node("menu", subtree={"x": node("x"), "y": node("y")}),
            "last": node("last"),
        }

        result = manipulators(menu_items={"expand": ["menu"]}).expand_menu_item(tree)

        self.assertEqual(list(result), ["first", "last", "x", "y"])

    def test_missing_key_is_skipped(self):
        tree = {"a": node("a")}

        result = manipulators(menu_items={"expand": ["missing"]}).expand_menu_item(tree)

        self.assertEqual(list(result), ["a"])

    def test_only_root_level_is_expanded(self):
        tree = {"a": node("a", subtree={"menu": node("menu", subtree={"x": node("x")})})}

        result = manipulators(menu_items={"expand": ["menu"]}).expand_menu_item(tree)

        self.assertEqual(list(result), ["a"])
        self.assertIn("menu", result["a"].subtree)

    def test_key_collision_overwrites_root_item(self):
        """펼친 하위 항목 키가 루트 키와 같으면 하위 항목이 덮어쓴다"""
        root_item = node("root-b")
        child_item = node("child-b")
        tree = {"b": root_item, "menu": node("menu", subtree={"b": child_item})}

        result = manipulators(menu_items={"expand": ["menu"]}).expand_menu_item(tree)

        self.assertEqual(list(result), ["b"])
        self.assertIs(result["b"], child_item)

    def test_forbidden_children_promoted_but_stay_forbidden(self):
        """InaccessibleMenuLink 만 버리고, FORBIDDEN 자식은 그대로 올라온다"""
        forbidden_child = node("b", access=MenuAccess.FORBIDDEN)
        children = {"a": node("a"), "b": forbidden_child, "c": inaccessible("c")}
        tree = {"menu": node("menu", subtree=children)}

        result = manipulators(menu_items={"expand": ["menu"]}).expand_menu_item(tree)

        self.assertEqual(list(result), ["a", "b"])
        self.assertEqual({key for key, element in result.items() if element.is_allowed()}, {"a"})
        self.assertIs(result["b"], forbidden_child)
        self.assertEqual(result["b"].access, MenuAccess.FORBIDDEN)

    def test_wrapped_children_are_promoted(self):
        """bare 컬렉션으로 감싼 하위 레벨도 노드 단위로 펼친다"""
        tree = {"menu": node("menu", subtree={
            "group": {"b": node("b"), "c": inaccessible("c")},
            "list": [node("d")],
        })}

        result = manipulators(menu_items={"expand": ["menu"]}).expand_menu_item(tree)

        self.assertEqual(list(result), ["b", "0"])
        self.assertEqual(result["b"].plugin_id, "b")
        self.assertEqual(result["0"].plugin_id, "d")

    def test_promoted_children_take_root_depth(self):
        tree = {"menu": node("menu", subtree={"b": node("b", subtree={"c": node("c")})})}
        set_tree_depth(tree, 1)

        result = manipulators(menu_items={"expand": ["menu"]}).expand_menu_item(tree)

        self.assertEqual(result["b"].depth, 1)
        self.assertEqual(result["b"].subtree["c"].depth, 2)
        self.assertEqual(serialize_menu_tree(result)[0]["depth"], 1)


class MakeMenuItemsNotClickableTest(SimpleTestCase):
    """make_menu_items_not_clickable 테스트"""

    def test_default_link_is_rewritten(self):
        tree = {"a": node("a", subtree={"b": node("b", route_name="node.add_page")})}

        manipulators(menu_items={"unclickable": ["b"]}).make_menu_items_not_clickable(tree)

        link = tree["a"].subtree["b"].link
        self.assertIsInstance(link, MenuLinkDefault)
        self.assertEqual(link.get_plugin_id(), "b")
        self.assertEqual(link.get_route_name(), "<nolink>")
        self.assertEqual(link.get_parent(), "")
        self.assertEqual(link.get_title(), "b")
        self.assertIsNone(link.get_url())

    def test_other_variants_are_untouched(self):
        views_item = node("v", link_class=ViewsMenuLink)
        hidden_item = inaccessible("h")
        tree = {"v": views_item, "h": hidden_item}
        views_link, hidden_link = views_item.link, hidden_item.link

        manipulators(menu_items={"unclickable": ["v", "h"]}).make_menu_items_not_clickable(tree)

        self.assertIs(tree["v"].link, views_link)
        self.assertEqual(tree["v"].link.get_route_name(), "system.admin")
        self.assertIs(tree["h"].link, hidden_link)

    def test_unlisted_items_keep_their_link(self):
        tree = {"a": node("a")}
        link = tree["a"].link

        manipulators(menu_items={"unclickable": ["b"]}).make_menu_items_not_clickable(tree)

        self.assertIs(tree["a"].link, link)


class RemoveEmptyMenuItemsTest(SimpleTestCase):
    """remove_empty_menu_items 테스트"""

    def test_empty_nolink_item_is_forbidden(self):
        tree = {"parent": node("parent", route_name="<nolink>")}

        manipulators().remove_empty_menu_items(tree)

        self.assertEqual(tree["parent"].access, MenuAccess.FORBIDDEN)

    def test_item_with_only_forbidden_children_is_forbidden(self):
        tree = {"parent": node("parent", route_name="<none>", subtree={
            "child": node("child", access=MenuAccess.FORBIDDEN),
        })}

        manipulators().remove_empty_menu_items(tree)

        self.assertFalse(tree["parent"].is_allowed())

    def test_item_with_visible_child_is_kept(self):
        tree = {"parent": node("parent", route_name="<nolink>", subtree={"child": node("child")})}

        manipulators().remove_empty_menu_items(tree)

        self.assertTrue(tree["parent"].is_allowed())

    def test_wrapped_visible_child_keeps_parent(self):
        """감싼 레벨 안의 보이는 자식도 자식으로 센다"""
        tree = {"parent": node("parent", route_name="<nolink>", subtree={"group": {"c": node("c")}})}

        manipulators().remove_empty_menu_items(tree)

        self.assertEqual(tree["parent"].access, MenuAccess.ALLOWED)
        self.assertTrue(tree["parent"].subtree["group"]["c"].is_allowed())

    def test_wrapped_forbidden_children_do_not_keep_parent(self):
        tree = {"parent": node("parent", route_name="<nolink>", subtree={
            "list": [node("c", access=MenuAccess.FORBIDDEN)],
        })}

        manipulators().remove_empty_menu_items(tree)

        self.assertEqual(tree["parent"].access, MenuAccess.FORBIDDEN)

    def test_emptied_parents_are_removed_in_one_pass(self):
        """자식이 먼저 제거되면 부모도 같은 패스에서 제거"""
        tree = {"top": node("top", route_name="<nolink>", subtree={
            "middle": node("middle", route_name="<nolink>", subtree={
                "leaf": node("leaf", route_name="<nolink>"),
            }),
        })}

        manipulators().remove_empty_menu_items(tree)

        self.assertEqual(set(access_map(tree).values()), {MenuAccess.FORBIDDEN})

    def test_tree_without_sentinel_routes_is_unchanged(self):
        tree = {"a": node("a", subtree={"b": node("b")}), "c": node("c")}
        before = access_map(tree)

        manipulators().remove_empty_menu_items(tree)

        self.assertEqual(access_map(tree), before)


class CheckCustomMenuItemsAccessTest(SimpleTestCase):
    """통합 메뉴 노출 결정 테스트"""

    def build_tree(self):
        return {
            "overview": node("wienimal_editor_toolbar.content_overview"),
            "add": node("wienimal_editor_toolbar.content_add"),
            "content": node("system.admin_content", subtree={
                "builtin": node("admin_toolbar_tools.add_content"),
                "extra": node("admin_toolbar_tools.extra_links:node.add"),
            }),
            "taxonomy": node("entity.taxonomy_vocabulary.collection"),
        }

    def allowed_ids(self, tree):
        ids = []
        walk_tree(tree, lambda element, key: ids.append(element.plugin_id) if element.is_allowed() else None)
        return set(ids)

    def test_overview_hidden_when_disabled(self):
        tree = self.build_tree()

        manipulators(show_combined_content_overview=False).check_custom_menu_items_access(tree)

        self.assertFalse(tree["overview"].is_allowed())
        self.assertTrue(tree["content"].is_allowed())
        self.assertTrue(tree["taxonomy"].is_allowed())

    def test_taxonomy_hidden_when_overview_shows_all_terms(self):
        tree = self.build_tree()

        manipulators(
            show_combined_content_overview=True,
            content={"taxonomy_term": "all"},
        ).check_custom_menu_items_access(tree)

        self.assertTrue(tree["overview"].is_allowed())
        self.assertFalse(tree["taxonomy"].is_allowed())

    def test_taxonomy_kept_for_other_modes(self):
        tree = self.build_tree()

        manipulators(
            show_combined_content_overview=True,
            content={"taxonomy_term": "none"},
        ).check_custom_menu_items_access(tree)

        self.assertTrue(tree["taxonomy"].is_allowed())

    def test_combined_add_replaces_builtin_items(self):
        tree = self.build_tree()

        manipulators(show_combined_add_content=True).check_custom_menu_items_access(tree)

        self.assertEqual(self.allowed_ids(tree), {
            "wienimal_editor_toolbar.content_add",
            "system.admin_content",
            "entity.taxonomy_vocabulary.collection",
        })

    def test_builtin_add_items_kept_without_combined_add(self):
        tree = self.build_tree()

        manipulators(show_combined_add_content=False).check_custom_menu_items_access(tree)

        self.assertFalse(tree["add"].is_allowed())
        self.assertTrue(tree["content"].subtree["builtin"].is_allowed())
        self.assertTrue(tree["content"].subtree["extra"].is_allowed())


class ToolbarSettingsTest(SimpleTestCase):
    """설정 스냅샷 테스트"""

    def test_dotted_lookup(self):
        config = ToolbarSettings({"menu_items": {"expand": ["a"]}, "show_combined_add_content": True})

        self.assertEqual(config.get("menu_items.expand"), ["a"])
        self.assertTrue(config.get("show_combined_add_content"))
        self.assertIsNone(config.get("menu_items.missing"))
        self.assertIsNone(config.get("show_combined_add_content.nested"))

    def test_missing_values_are_empty(self):
        toolbar = EditorToolbarTreeManipulators(ToolbarSettings({}))

        self.assertEqual(toolbar.get_menu_items_to_remove(), [])
        self.assertEqual(toolbar.get_menu_items_to_expand(), [])
        self.assertEqual(toolbar.get_menu_items_to_make_unclickable(), [])
        self.assertFalse(toolbar.get_show_content_add())
        self.assertFalse(toolbar.get_show_content_overview())

    def test_snapshot_is_detached_from_source(self):
        data = {"menu_items": {"remove": ["a"]}}
        config = ToolbarSettings.from_dict(data)

        data["menu_items"]["remove"].append("b")

        self.assertEqual(config.get("menu_items.remove"), ["a"])


class LoadToolbarSettingsTest(TestCase):
    """SystemConfig 기반 설정 조회 테스트"""

    def test_defaults_when_not_stored(self):
        config = load_toolbar_settings()

        self.assertEqual(config.as_dict(), DEFAULT_TOOLBAR_SETTINGS)

    def test_stored_values_override_defaults(self):
        SystemConfig.set_value(SETTINGS_KEY, {"menu_items": {"remove": ["system.admin_config"]}})

        config = load_toolbar_settings()

        self.assertEqual(config.get("menu_items.remove"), ["system.admin_config"])
        self.assertEqual(config.get("menu_items.expand"), [])
        self.assertFalse(config.get("show_combined_add_content"))

    def test_invalid_stored_value_falls_back_to_defaults(self):
        SystemConfig.set_value(SETTINGS_KEY, ["not", "a", "dict"])

        config = load_toolbar_settings()

        self.assertEqual(config.as_dict(), DEFAULT_TOOLBAR_SETTINGS)


class EditorToolbarServiceTest(TestCase):
    """로고 / 버전 정보 / 툴바 트리 테스트"""

    def setUp(self):
        self.static_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.static_dir.cleanup)

    def make_file(self, relative_path, content=""):
        path = os.path.join(self.static_dir.name, relative_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_module_logo_is_the_fallback(self):
        self.assertEqual(EditorToolbar({}).get_logo(), "/static/editor_toolbar/logo.svg")

    def test_theme_logo_priority(self):
        self.make_file("themes/admin/logo.svg")
        self.make_file("themes/site/logo.png")

        with override_settings(STATICFILES_DIRS=[self.static_dir.name]):
            theme = {"admin": "themes/admin", "default": "themes/site"}
            self.assertEqual(EditorToolbar(theme).get_logo(), "/static/themes/admin/logo.svg")

            self.make_file("themes/site/logo-admin.jpg")
            self.assertEqual(EditorToolbar(theme).get_logo(), "/static/themes/site/logo-admin.jpg")

    def test_theme_config_read_from_system_config(self):
        self.make_file("themes/site/logo.png")
        SystemConfig.set_value("system.theme", {"default": "themes/site"})

        with override_settings(STATICFILES_DIRS=[self.static_dir.name]):
            self.assertEqual(EditorToolbar().get_logo(), "/static/themes/site/logo.png")

    def test_version_info(self):
        path = self.make_file("version.json", json.dumps({"version": "1.2.3", "commit": "abc"}))

        with override_settings(EDITOR_TOOLBAR_VERSION_FILE=path):
            self.assertEqual(EditorToolbar({}).get_version_info(), {"version": "1.2.3", "commit": "abc"})

    def test_version_info_missing_or_invalid(self):
        missing = os.path.join(self.static_dir.name, "missing.json")
        invalid = self.make_file("invalid.json", "{not json")

        with override_settings(EDITOR_TOOLBAR_VERSION_FILE=missing):
            self.assertFalse(EditorToolbar({}).get_version_info())
        with override_settings(EDITOR_TOOLBAR_VERSION_FILE=invalid):
            self.assertFalse(EditorToolbar({}).get_version_info())

    def test_manipulator_chain(self):
        call_command("register_toolbar_menu", stdout=StringIO())
        user = User.objects.create_user(username="editor", password="testpass123")
        config = ToolbarSettings(merge_settings(DEFAULT_TOOLBAR_SETTINGS, {
            "show_combined_add_content": True,
            "show_combined_content_overview": True,
            "menu_items": {
                "expand": ["system.admin_content"],
                "remove": ["system.admin_config"],
                "unclickable": ["system.admin_structure"],
            },
            "content": {"taxonomy_term": "all"},
        }))

        tree = build_editor_toolbar_tree(user, config)

        self.assertNotIn("system.admin_content", tree)
        self.assertEqual(tree["system.admin_structure"].link.get_route_name(), "<nolink>")
        self.assertEqual(
            [item["pluginId"] for item in serialize_menu_tree(tree)],
            ["wienimal_editor_toolbar.content_overview", "wienimal_editor_toolbar.content_add"],
        )


class RegisterToolbarMenuCommandTest(TestCase):
    """register_toolbar_menu 커맨드 테스트"""

    def test_registers_menus_and_settings(self):
        call_command("register_toolbar_menu", stdout=StringIO())

        self.assertEqual(Menu.objects.count(), 8)
        self.assertEqual(
            Menu.objects.get(plugin_id="entity.taxonomy_vocabulary.collection").parent.plugin_id,
            "system.admin_structure",
        )
        self.assertEqual(SystemConfig.get_value(SETTINGS_KEY), DEFAULT_TOOLBAR_SETTINGS)

    def test_is_idempotent_and_keeps_settings(self):
        call_command("register_toolbar_menu", stdout=StringIO())
        SystemConfig.set_value(SETTINGS_KEY, {"show_combined_add_content": True})

        call_command("register_toolbar_menu", stdout=StringIO())

        self.assertEqual(Menu.objects.count(), 8)
        self.assertEqual(SystemConfig.get_value(SETTINGS_KEY), {"show_combined_add_content": True})

    def test_reset_settings(self):
        SystemConfig.set_value(SETTINGS_KEY, {"show_combined_add_content": True})

        call_command("register_toolbar_menu", "--reset-settings", stdout=StringIO())

        self.assertEqual(SystemConfig.get_value(SETTINGS_KEY), DEFAULT_TOOLBAR_SETTINGS)


class EditorToolbarAPITest(APITestCase):
    """툴바 API 테스트"""

    def setUp(self):
        call_command("register_toolbar_menu", stdout=StringIO())
        self.editor = User.objects.create_user(username="editor", password="testpass123")
        self.admin = User.objects.create_user(username="manager", password="testpass123")
        self.admin.groups.add(Group.objects.create(name="ADMIN"))

    def test_toolbar_requires_authentication(self):
        response = self.client.get("/api/editor-toolbar/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_toolbar_returns_manipulated_menus(self):
        SystemConfig.set_value(SETTINGS_KEY, {"menu_items": {"remove": ["system.admin_config"]}})
        self.client.force_authenticate(user=self.editor)

        response = self.client.get("/api/editor-toolbar/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["logo"], "/static/editor_toolbar/logo.svg")
        plugin_ids = [item["pluginId"] for item in response.data["menus"]]
        self.assertNotIn("system.admin_config", plugin_ids)
        # 통합 메뉴 비활성(기본값) → 통합 메뉴 숨김
        self.assertNotIn("wienimal_editor_toolbar.content_overview", plugin_ids)
        self.assertNotIn("wienimal_editor_toolbar.content_add", plugin_ids)
        self.assertIn("system.admin_content", plugin_ids)

    def test_settings_forbidden_for_editor(self):
        self.client.force_authenticate(user=self.editor)

        response = self.client.get("/api/editor-toolbar/settings/")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_settings_get_returns_defaults(self):
        self.client.force_authenticate(user=self.admin)

        response = self.client.get("/api/editor-toolbar/settings/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, DEFAULT_TOOLBAR_SETTINGS)

    def test_settings_put_stores_values(self):
        self.client.force_authenticate(user=self.admin)
        payload = {
            "show_combined_add_content": True,
            "menu_items": {"expand": ["system.admin_content"], "remove": ["system.admin_config"]},
            "content": {"taxonomy_term": "all"},
        }

        response = self.client.put("/api/editor-toolbar/settings/", payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        stored = load_toolbar_settings()
        self.assertTrue(stored.get("show_combined_add_content"))
        self.assertFalse(stored.get("show_combined_content_overview"))
        self.assertEqual(stored.get("menu_items.expand"), ["system.admin_content"])
        self.assertEqual(stored.get("menu_items.unclickable"), [])
        self.assertEqual(stored.get("content.taxonomy_term"), "all")

    def test_settings_put_rejects_invalid_taxonomy_mode(self):
        self.client.force_authenticate(user=self.admin)

        response = self.client.put(
            "/api/editor-toolbar/settings/", {"content": {"taxonomy_term": "some"}}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "ERR_101")
        self.assertEqual(response.data["error"]["field"], "content")

    def test_settings_put_rejects_invalid_plugin_id(self):
        self.client.force_authenticate(user=self.admin)

        response = self.client.put(
            "/api/editor-toolbar/settings/", {"menu_items": {"remove": ["bad id"]}}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["field"], "menu_items")
        self.assertFalse(SystemConfig.objects.filter(key=SETTINGS_KEY, value__contains="bad id").exists())
