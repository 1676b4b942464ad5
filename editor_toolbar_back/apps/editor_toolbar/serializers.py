from rest_framework import serializers

from utils.validators import validate_plugin_id_list
from .conf import TAXONOMY_TERM_MODES


# menu_items 설정 직렬화
class MenuItemsSettingsSerializer(serializers.Serializer):
    expand = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    remove = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    unclickable = serializers.ListField(child=serializers.CharField(), required=False, default=list)

    def validate_expand(self, value):
        return validate_plugin_id_list(value, "펼칠 메뉴 항목")

    def validate_remove(self, value):
        return validate_plugin_id_list(value, "제거할 메뉴 항목")

    def validate_unclickable(self, value):
        return validate_plugin_id_list(value, "클릭 불가 메뉴 항목")


# content 설정 직렬화
class ContentSettingsSerializer(serializers.Serializer):
    taxonomy_term = serializers.ChoiceField(choices=TAXONOMY_TERM_MODES, required=False, default="none")


# 툴바 설정 전체
class EditorToolbarSettingsSerializer(serializers.Serializer):
    show_combined_add_content = serializers.BooleanField(required=False, default=False)
    show_combined_content_overview = serializers.BooleanField(required=False, default=False)
    menu_items = MenuItemsSettingsSerializer(required=False)
    content = ContentSettingsSerializer(required=False)
