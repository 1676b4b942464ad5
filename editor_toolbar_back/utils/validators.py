"""
공통 검증 유틸리티

목적: 툴바 설정 및 메뉴 등록에서 사용할 수 있는 재사용 가능한 검증 함수들
"""
import re
from rest_framework import serializers


class ValidationPatterns:
    """검증 정규표현식 패턴"""

    # 메뉴 링크 플러그인 ID (예: system.admin_content, admin_toolbar_tools.extra_links:node.add)
    PLUGIN_ID = r'^[A-Za-z0-9_][A-Za-z0-9_.:\-]*$'


def validate_plugin_id(value):
    """
    메뉴 링크 플러그인 ID 검증

    Args:
        value: 플러그인 ID 문자열

    Returns:
        검증된 플러그인 ID

    Raises:
        serializers.ValidationError: 형식이 올바르지 않은 경우
    """
    if not isinstance(value, str) or not re.match(ValidationPatterns.PLUGIN_ID, value):
        raise serializers.ValidationError(
            f'플러그인 ID 형식이 올바르지 않습니다: {value!r} (예: system.admin_content)'
        )
    return value


def validate_plugin_id_list(value, field_name='메뉴 항목'):
    """
    플러그인 ID 목록 검증 (중복 제거, 순서 유지)

    Args:
        value: 플러그인 ID 목록
        field_name: 필드명 (에러 메시지용)

    Returns:
        검증된 목록

    Raises:
        serializers.ValidationError: 목록이 아니거나 항목 형식이 올바르지 않은 경우
    """
    if value is None:
        return []

    if not isinstance(value, (list, tuple)):
        raise serializers.ValidationError(
            f'{field_name}은(는) 목록이어야 합니다.'
        )

    validated = []
    for item in value:
        validate_plugin_id(item)
        if item not in validated:
            validated.append(item)

    return validated
