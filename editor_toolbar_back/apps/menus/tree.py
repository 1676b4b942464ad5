"""
메뉴 트리 자료구조

요청마다 build_menu_tree() 가 만들고, 툴바 manipulator 들이 재작성한 뒤
serialize_menu_tree() 가 프론트로 내려보내는 트리.

한 레벨은 ``{key: MenuLinkTreeElement}`` 형태의 dict 이고, 하위 레벨은
각 요소의 ``subtree`` 로 연결된다. dict 삽입 순서가 메뉴 표시 순서다.
레벨은 노드가 아닌 dict/list 로 한 번 더 감싸여 있을 수 있고, 레벨을 읽는
코드는 모두 iter_tree_level() 로 이를 풀어서 본다.
"""
from collections.abc import Mapping

from django.db import models

from utils.exceptions import MenuTreeCycleException


# 이동할 대상이 없는 링크를 나타내는 라우트 이름
NO_LINK_ROUTE = "<nolink>"
NONE_ROUTE = "<none>"
FRONT_ROUTE = "<front>"
EMPTY_ROUTES = (NO_LINK_ROUTE, NONE_ROUTE)


class MenuAccess(models.TextChoices):
    ALLOWED = "allowed", "허용"
    FORBIDDEN = "forbidden", "거부"


class MenuLinkBase:
    """메뉴 링크 공통 클래스 (plugin id + plugin definition)"""

    # plugin definition 을 바꿔 새 링크로 교체할 수 있는 변형인지 여부
    supports_rewrite = False
    is_inaccessible = False

    def __init__(self, plugin_id, plugin_definition=None):
        self._plugin_id = plugin_id
        self._plugin_definition = dict(plugin_definition or {})
        self._plugin_definition.setdefault("id", plugin_id)

    def get_plugin_id(self):
        return self._plugin_id

    def get_plugin_definition(self):
        return dict(self._plugin_definition)

    def get_route_name(self):
        return self._plugin_definition.get("route_name") or ""

    def get_title(self):
        return self._plugin_definition.get("title") or ""

    def get_parent(self):
        return self._plugin_definition.get("parent") or ""

    def get_url(self):
        if self.get_route_name() in EMPTY_ROUTES:
            return None
        return self._plugin_definition.get("path")

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._plugin_id!r} route={self.get_route_name()!r}>"


class MenuLinkDefault(MenuLinkBase):
    """직접 정의된(정적) 메뉴 링크"""
    supports_rewrite = True


class ViewsMenuLink(MenuLinkBase):
    """뷰(목록 페이지)에서 파생된 메뉴 링크"""


class InaccessibleMenuLink(MenuLinkBase):
    """접근 권한이 없는 링크를 감싼 대체 링크"""
    is_inaccessible = True

    def __init__(self, wrapped_link):
        self.wrapped_link = wrapped_link
        plugin_definition = wrapped_link.get_plugin_definition()
        plugin_definition["route_name"] = FRONT_ROUTE
        super().__init__(wrapped_link.get_plugin_id(), plugin_definition)

    def get_title(self):
        return "Inaccessible"


# Menu.link_type → 링크 클래스
LINK_TYPES = {
    "default": MenuLinkDefault,
    "views": ViewsMenuLink,
}


def create_menu_link(plugin_id, plugin_definition, link_type="default"):
    """plugin id 와 definition 으로 새 링크 생성"""
    link_class = LINK_TYPES.get(link_type, MenuLinkDefault)
    return link_class(plugin_id, plugin_definition)


class MenuLinkTreeElement:
    """메뉴 트리의 노드 (링크 + 접근 여부 + 하위 트리)"""

    def __init__(self, link, has_children=False, depth=1, in_active_trail=False,
                 subtree=None, access=MenuAccess.ALLOWED):
        self.link = link
        self.has_children = has_children
        self.depth = depth
        self.in_active_trail = in_active_trail
        self.subtree = subtree if subtree is not None else {}
        self.access = access

    @property
    def plugin_id(self):
        return self.link.get_plugin_id()

    def is_allowed(self):
        return self.access == MenuAccess.ALLOWED

    def forbid(self):
        self.access = MenuAccess.FORBIDDEN

    def __repr__(self):
        return f"<MenuLinkTreeElement {self.plugin_id!r} access={self.access.value}>"


def iter_tree_level(level, path=None):
    """
    한 레벨의 (key, MenuLinkTreeElement) 쌍을 순서대로 반환

    노드가 아닌 dict/list/tuple 로 한 번 더 감싼 레벨은 풀어서 안쪽 노드를
    그대로 내보낸다. list 인덱스는 문자열 키가 된다. 그 밖의 값은 무시.
    path 에는 현재 내려온 경로의 id 를 담는다.

    Raises:
        MenuTreeCycleException: 감싼 컬렉션이 자기 자신을 다시 포함하는 경우
    """
    path = set() if path is None else path

    if isinstance(level, Mapping):
        items = list(level.items())
    elif isinstance(level, (list, tuple)):
        items = [(str(index), value) for index, value in enumerate(level)]
    else:
        return

    for key, value in items:
        if isinstance(value, MenuLinkTreeElement):
            yield key, value
        elif isinstance(value, (Mapping, list, tuple)):
            if id(value) in path:
                raise MenuTreeCycleException(detail=f"key={key}")
            path.add(id(value))
            yield from iter_tree_level(value, path)
            path.discard(id(value))


def set_tree_depth(level, depth, path=None):
    """레벨의 노드에 depth 를 매기고 하위 레벨은 depth + 1 로 내려간다"""
    path = set() if path is None else path

    for key, element in iter_tree_level(level, path):
        if id(element) in path:
            raise MenuTreeCycleException(detail=f"key={key}")
        path.add(id(element))
        element.depth = depth
        set_tree_depth(element.subtree, depth + 1, path)
        path.discard(id(element))
