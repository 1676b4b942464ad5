"""
에디터 툴바 메뉴 트리 manipulator

편집자용 관리 메뉴에서 불필요한 항목을 숨기고(remove), 하위 메뉴를 루트로
펼치고(expand), 특정 링크를 클릭 불가로 바꾸고, 설정에 따라 통합 메뉴
(콘텐츠 개요 / 콘텐츠 추가) 노출 여부를 정한다.

모든 연산은 트리를 받아 같은 형태의 트리를 돌려준다. 노드는 참조로 수정되므로
호출한 쪽의 입력 트리도 바뀐다.
"""
import logging

from apps.menus.tree import (
    EMPTY_ROUTES,
    NO_LINK_ROUTE,
    MenuLinkTreeElement,
    create_menu_link,
    iter_tree_level,
    set_tree_depth,
)
from utils.exceptions import MenuTreeCycleException

logger = logging.getLogger(__name__)


# 통합 메뉴 / 기본 메뉴 plugin id
CONTENT_OVERVIEW_ITEM = "wienimal_editor_toolbar.content_overview"
CONTENT_ADD_ITEM = "wienimal_editor_toolbar.content_add"
TAXONOMY_COLLECTION_ITEM = "entity.taxonomy_vocabulary.collection"
BUILTIN_ADD_CONTENT_ITEMS = (
    "admin_toolbar_tools.add_content",
    "admin_toolbar_tools.extra_links:node.add",
)


def walk_tree(tree, callback, post_order=False):
    """
    메뉴 트리의 모든 노드에 callback(element, key) 적용 (깊이 우선)

    기본은 전위 순회(부모 → 자식), post_order=True 이면 후위 순회(자식 → 부모).
    노드가 아닌 dict/list 레벨은 callback 없이 그대로 내려간다.

    Raises:
        MenuTreeCycleException: 현재 경로에 이미 있는 노드를 다시 만난 경우
    """
    if isinstance(tree, MenuLinkTreeElement):
        tree = {None: tree}
    _walk_level(tree, callback, post_order, {id(tree)})


def _walk_level(level, callback, post_order, path):
    for key, element in iter_tree_level(level, path):
        if id(element) in path:
            raise MenuTreeCycleException(detail=f"key={key}")
        path.add(id(element))

        if not post_order:
            callback(element, key)
        _walk_level(element.subtree, callback, post_order, path)
        if post_order:
            callback(element, key)

        path.discard(id(element))


class EditorToolbarTreeManipulators:
    """설정 스냅샷(ToolbarSettings)에 따라 메뉴 트리를 재작성"""

    def __init__(self, config):
        self.config = config

    def remove_menu_items(self, tree):
        """설정된 불필요 메뉴 항목 제거"""
        for item in self.get_menu_items_to_remove():
            tree = self.remove_menu_item(tree, item)

        return tree

    def remove_menu_item(self, tree, item):
        """plugin id 가 일치하는 모든 노드를 접근 불가로 표시"""
        def forbid(element, key):
            if element.plugin_id == item:
                element.forbid()

        walk_tree(tree, forbid)
        return tree

    def expand_menu_item(self, tree):
        """메뉴 항목을 제거하고 하위 항목을 루트로 이동"""
        tree = dict(tree)

        for item in self.get_menu_items_to_expand():
            element = tree.get(item)
            if not isinstance(element, MenuLinkTreeElement):
                continue

            # 같은 키가 루트에 이미 있으면 나중 값으로 덮어쓴다
            for menu_item, value in iter_tree_level(element.subtree):
                if value.link.is_inaccessible:
                    continue
                set_tree_depth({menu_item: value}, element.depth)
                tree[menu_item] = value

            del tree[item]
            logger.debug(f"Expanded menu item {item} into root")

        return tree

    def make_menu_items_not_clickable(self, tree):
        """설정된 메뉴 항목을 클릭 불가(<nolink>)로 변경"""
        items = self.get_menu_items_to_make_unclickable()

        def make_unclickable(element, key):
            link = element.link
            if not link.supports_rewrite or link.get_plugin_id() not in items:
                return

            element.link = self.update_menu_link_plugin_definition(link, {
                "route_name": NO_LINK_ROUTE,
                "parent": "",
            })

        walk_tree(tree, make_unclickable)
        return tree

    def remove_empty_menu_items(self, tree):
        """링크도 없고 보이는 하위 항목도 없는 메뉴 제거 (자식 먼저 평가)"""
        def remove_if_empty(element, key):
            children = [
                child for _, child in iter_tree_level(element.subtree)
                if child.is_allowed()
            ]

            if element.link.get_route_name() in EMPTY_ROUTES and not children:
                element.forbid()
                self.remove_menu_item(tree, key)
                logger.debug(f"Removed empty menu item {key}")

        walk_tree(tree, remove_if_empty, post_order=True)
        return tree

    def check_custom_menu_items_access(self, tree):
        """'콘텐츠 개요' / '콘텐츠 추가' 통합 메뉴 노출 여부 결정"""
        if not self.get_show_content_overview():
            tree = self.remove_menu_item(tree, CONTENT_OVERVIEW_ITEM)

        if self.get_show_content_overview() and self.get_config_value("content.taxonomy_term") == "all":
            tree = self.remove_menu_item(tree, TAXONOMY_COLLECTION_ITEM)

        if self.get_show_content_add():
            for item in BUILTIN_ADD_CONTENT_ITEMS:
                tree = self.remove_menu_item(tree, item)
        else:
            tree = self.remove_menu_item(tree, CONTENT_ADD_ITEM)

        return tree

    def update_menu_link_plugin_definition(self, link, new_definition):
        """plugin definition 을 병합한 새 링크 생성"""
        definition = link.get_plugin_definition()
        definition.update(new_definition)
        return create_menu_link(link.get_plugin_id(), definition)

    def get_show_content_add(self):
        return bool(self.get_config_value("show_combined_add_content"))

    def get_show_content_overview(self):
        return bool(self.get_config_value("show_combined_content_overview"))

    def get_menu_items_to_expand(self):
        return list(self.get_config_value("menu_items.expand") or [])

    def get_menu_items_to_remove(self):
        return list(self.get_config_value("menu_items.remove") or [])

    def get_menu_items_to_make_unclickable(self):
        return list(self.get_config_value("menu_items.unclickable") or [])

    def get_config_value(self, key):
        return self.config.get(key)
