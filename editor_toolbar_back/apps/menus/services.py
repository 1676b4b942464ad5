from .models import Menu


# 특정 유저에게 보여줄 메뉴 후보를 반환하는 함수.
# 권한 체크는 트리 생성 시(build_menu_tree) 수행한다.
def get_user_menus(user):
    menus = (
        Menu.objects
        .filter(is_active=True)
        .select_related("parent")
        .prefetch_related("menupermission_set__permission__content_type")
        .order_by("weight", "title")
    )
    return menus


# 메뉴에 연결된 권한 중 하나라도 있으면 접근 가능 (연결된 권한이 없으면 모두 허용)
def check_menu_access(menu, user):
    required = [
        f"{mp.permission.content_type.app_label}.{mp.permission.codename}"
        for mp in menu.menupermission_set.all()
    ]
    if not required:
        return True
    if user is None or not user.is_authenticated:
        return False
    return any(user.has_perm(code) for code in required)
