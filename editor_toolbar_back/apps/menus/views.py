from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .services import get_user_menus
from .utils import build_menu_tree, serialize_menu_tree


# 메뉴 API (툴바 가공 전 원본 트리)
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def UserMenuView(request):
    user = request.user

    # 접근 가능한 메뉴 조회
    menus = get_user_menus(user)

    # 트리로 변환
    menu_tree = build_menu_tree(menus, user)

    return Response({
        "menus": serialize_menu_tree(menu_tree)
    })
