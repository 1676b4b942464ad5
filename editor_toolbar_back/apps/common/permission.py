from rest_framework.permissions import BasePermission


ADMIN_GROUPS = ['ADMIN', 'SYSTEMMANAGER']


class IsAdmin(BasePermission):
    """ADMIN 또는 SYSTEMMANAGER 그룹(또는 superuser)만 접근 가능"""
    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if user.is_superuser:
            return True
        return user.groups.filter(name__in=ADMIN_GROUPS).exists()
