"""
에디터 툴바 설정

SystemConfig 의 ``wienimal_editor_toolbar.settings`` 항목을 요청마다 한 번 읽어
ToolbarSettings 스냅샷으로 만든다. manipulator 는 이 스냅샷만 참조한다.
"""
import copy
import logging

from apps.common.models import SystemConfig

logger = logging.getLogger(__name__)


SETTINGS_KEY = "wienimal_editor_toolbar.settings"

# content.taxonomy_term 허용 값
TAXONOMY_TERM_MODES = ("all", "none")

DEFAULT_TOOLBAR_SETTINGS = {
    "show_combined_add_content": False,
    "show_combined_content_overview": False,
    "menu_items": {
        "expand": [],
        "remove": [],
        "unclickable": [],
    },
    "content": {
        "taxonomy_term": "none",
    },
}


def merge_settings(base, override):
    """중첩 dict 병합 (override 우선)"""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_settings(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ToolbarSettings:
    """읽기 전용 설정 스냅샷 (점 표기 키 조회)"""

    def __init__(self, data=None):
        self._data = copy.deepcopy(data or {})

    @classmethod
    def from_dict(cls, data):
        return cls(data)

    def get(self, key, default=None):
        value = self._data
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def as_dict(self):
        return copy.deepcopy(self._data)


def load_toolbar_settings():
    """저장된 설정을 기본값 위에 병합해 스냅샷 생성"""
    stored = SystemConfig.get_value(SETTINGS_KEY, {})

    if not isinstance(stored, dict):
        logger.warning(f"Invalid toolbar settings stored under {SETTINGS_KEY}, using defaults")
        stored = {}

    return ToolbarSettings(merge_settings(DEFAULT_TOOLBAR_SETTINGS, stored))


def save_toolbar_settings(data, user=None):
    settings_data = merge_settings(DEFAULT_TOOLBAR_SETTINGS, data)
    SystemConfig.set_value(
        key=SETTINGS_KEY,
        value=settings_data,
        description="에디터 툴바 메뉴 설정",
        user=user,
    )
    return ToolbarSettings(settings_data)
