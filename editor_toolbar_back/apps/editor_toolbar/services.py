import json
import logging
from pathlib import Path

from django.conf import settings
from django.contrib.staticfiles import finders
from django.templatetags.static import static

from apps.common.models import SystemConfig
from apps.menus.services import get_user_menus
from apps.menus.utils import build_menu_tree
from .conf import load_toolbar_settings
from .manipulators import EditorToolbarTreeManipulators

logger = logging.getLogger(__name__)


THEME_CONFIG_KEY = "system.theme"
MODULE_STATIC_DIR = "editor_toolbar"
LOGO_EXTENSIONS = ("svg", "png", "jpg")

# 툴바 트리 가공 순서
MANIPULATOR_CHAIN = (
    "remove_menu_items",
    "check_custom_menu_items_access",
    "expand_menu_item",
    "make_menu_items_not_clickable",
    "remove_empty_menu_items",
)


class EditorToolbar:
    """툴바 로고 / 버전 정보 조회"""

    def __init__(self, theme_config=None):
        if theme_config is None:
            theme_config = SystemConfig.get_value(THEME_CONFIG_KEY, {})
        self.config = theme_config if isinstance(theme_config, dict) else {}

    def get_logo(self):
        """
        테마/모듈 static 디렉터리에서 로고 파일 탐색

        우선순위: 기본 테마 logo-admin → 관리자 테마 logo → 기본 테마 logo → 모듈 logo,
        각각 svg, png, jpg 순. 찾으면 static URL, 없으면 False.
        """
        admin_theme = self.config.get("admin")
        active_theme = self.config.get("default")

        candidates = []
        if active_theme:
            candidates.append(f"{active_theme}/logo-admin")
        if admin_theme:
            candidates.append(f"{admin_theme}/logo")
        if active_theme:
            candidates.append(f"{active_theme}/logo")
        candidates.append(f"{MODULE_STATIC_DIR}/logo")

        possibilities = [
            f"{candidate}.{extension}"
            for candidate in candidates
            for extension in LOGO_EXTENSIONS
        ]

        for possibility in possibilities:
            if finders.find(possibility):
                return static(possibility)

        return False

    def get_version_info(self):
        """version.json 내용 (없으면 False)"""
        path = Path(settings.EDITOR_TOOLBAR_VERSION_FILE)

        if not path.is_file():
            return False

        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid version file {path}: {str(e)}")
            return False


def build_editor_toolbar_tree(user, toolbar_settings=None):
    """사용자 메뉴 트리를 만들고 툴바 manipulator 를 순서대로 적용"""
    if toolbar_settings is None:
        toolbar_settings = load_toolbar_settings()

    manipulators = EditorToolbarTreeManipulators(toolbar_settings)
    tree = build_menu_tree(get_user_menus(user), user)

    for name in MANIPULATOR_CHAIN:
        tree = getattr(manipulators, name)(tree)

    return tree
