from .services import check_menu_access
from .tree import (
    InaccessibleMenuLink,
    MenuAccess,
    MenuLinkTreeElement,
    create_menu_link,
    iter_tree_level,
    set_tree_depth,
)


def build_menu_tree(menus, user=None):
    menu_map = {}
    tree = {}

    # 모든 메뉴 노드 생성 (권한 없는 링크는 InaccessibleMenuLink 로 교체)
    for menu in menus:
        link = create_menu_link(menu.plugin_id, menu.get_plugin_definition(), menu.link_type)
        access = MenuAccess.ALLOWED
        if user is not None and not check_menu_access(menu, user):
            link = InaccessibleMenuLink(link)
            access = MenuAccess.FORBIDDEN
        menu_map[menu.id] = MenuLinkTreeElement(link, access=access)

    # 메뉴 : 부모-자식 관계 연결 (키는 plugin id)
    for menu in menus:
        element = menu_map[menu.id]

        if menu.parent_id:
            parent = menu_map.get(menu.parent_id)
            if parent:
                parent.subtree[menu.plugin_id] = element
                parent.has_children = True
        else:
            tree[menu.plugin_id] = element

    set_tree_depth(tree, 1)
    return tree


# 프론트에 내려줄 형태 (접근 불가 노드는 제외)
def serialize_menu_tree(tree):
    items = []

    for key, element in iter_tree_level(tree):
        if not element.is_allowed():
            continue

        link = element.link
        definition = link.get_plugin_definition()
        url = link.get_url()
        items.append({
            "key": key,
            "pluginId": link.get_plugin_id(),
            "title": link.get_title(),
            "routeName": link.get_route_name(),
            "path": url,
            "icon": definition.get("icon"),
            "clickable": url is not None,
            "depth": element.depth,
            "children": serialize_menu_tree(element.subtree),
        })

    return items
