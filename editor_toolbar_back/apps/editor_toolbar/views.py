import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.common.permission import IsAdmin
from apps.menus.utils import serialize_menu_tree
from utils.exceptions import ValidationException
from .conf import load_toolbar_settings, save_toolbar_settings
from .serializers import EditorToolbarSettingsSerializer
from .services import EditorToolbar, build_editor_toolbar_tree

logger = logging.getLogger(__name__)


@extend_schema(
    tags=["Editor Toolbar"],
    summary="편집자 툴바 조회",
    description="로고, 버전 정보, 툴바 설정이 적용된 메뉴 트리를 조회합니다.",
    responses={
        200: OpenApiResponse(description="조회 성공"),
        401: OpenApiResponse(description="인증 필요"),
    }
)
class EditorToolbarView(APIView):
    """편집자 툴바 API"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        toolbar = EditorToolbar()
        menu_tree = build_editor_toolbar_tree(request.user)

        return Response({
            "logo": toolbar.get_logo(),
            "version": toolbar.get_version_info(),
            "menus": serialize_menu_tree(menu_tree),
        })


class EditorToolbarConfigView(APIView):
    """
    툴바 설정 API
    - GET: 현재 설정 조회
    - PUT: 설정 수정
    """
    permission_classes = [IsAdmin]

    @extend_schema(
        tags=["Editor Toolbar"],
        summary="툴바 설정 조회",
        responses={200: EditorToolbarSettingsSerializer},
    )
    def get(self, request):
        """툴바 설정 조회"""
        return Response(load_toolbar_settings().as_dict())

    @extend_schema(
        tags=["Editor Toolbar"],
        summary="툴바 설정 수정",
        request=EditorToolbarSettingsSerializer,
        responses={
            200: OpenApiResponse(description="저장 성공"),
            400: OpenApiResponse(description="입력값 오류"),
            403: OpenApiResponse(description="권한 없음"),
        }
    )
    def put(self, request):
        """툴바 설정 수정"""
        serializer = EditorToolbarSettingsSerializer(data=request.data)

        if not serializer.is_valid():
            field, errors = next(iter(serializer.errors.items()))
            raise ValidationException(
                detail=_first_error(errors),
                field=field,
            )

        toolbar_settings = save_toolbar_settings(serializer.validated_data, user=request.user)
        logger.info(f"Editor toolbar settings updated by {request.user}")

        return Response({'detail': '설정이 저장되었습니다.', 'data': toolbar_settings.as_dict()})


def _first_error(errors):
    # 중첩 serializer 오류는 dict, 필드 오류는 list
    if isinstance(errors, dict):
        return _first_error(next(iter(errors.values())))
    if isinstance(errors, list) and errors:
        return _first_error(errors[0])
    return str(errors)
