from django.urls import path
from .views import EditorToolbarView, EditorToolbarConfigView

urlpatterns = [
    # 편집자용 툴바 (로고 + 버전 + 가공된 메뉴 트리)
    path("", EditorToolbarView.as_view(), name="editor-toolbar"),

    # 툴바 설정 조회/수정 (관리자)
    path("settings/", EditorToolbarConfigView.as_view(), name="editor-toolbar-settings"),
]
