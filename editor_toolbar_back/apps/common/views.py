import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny
from django.db import DatabaseError
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.editor_toolbar.conf import SETTINGS_KEY
from apps.menus.models import Menu
from .models import SystemConfig

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    """
    헬스 체크 엔드포인트
    DB 연결과 함께 툴바 구성 상태(설정 저장 여부, 활성 메뉴 수)를 보고한다.
    메뉴 등록 전이면 toolbar.status 가 "unregistered".
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Health"],
        summary="서버 / 툴바 헬스 체크",
        description="데이터베이스 연결과 에디터 툴바 설정·메뉴 등록 상태를 확인합니다.",
        responses={
            200: OpenApiResponse(description="정상"),
            503: OpenApiResponse(description="서비스 불가"),
        }
    )
    def get(self, request):
        health_status = {
            "status": "healthy",
            "database": "unknown",
            "toolbar": None,
            "timestamp": timezone.now().isoformat(),
        }

        try:
            active_menus = Menu.objects.filter(is_active=True).count()
            settings_stored = SystemConfig.objects.filter(key=SETTINGS_KEY).exists()
        except DatabaseError as e:
            logger.error(f"Health check - DB error: {str(e)}")
            health_status["status"] = "unhealthy"
            health_status["database"] = "disconnected"
            return Response(health_status, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        health_status["database"] = "connected"
        health_status["toolbar"] = {
            "status": "ready" if active_menus else "unregistered",
            "settings": "stored" if settings_stored else "default",
            "activeMenus": active_menus,
        }
        return Response(health_status, status=status.HTTP_200_OK)
