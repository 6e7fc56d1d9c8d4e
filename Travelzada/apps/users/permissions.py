from rest_framework.permissions import AllowAny, BasePermission


class HasTabPermission(BasePermission):
    """
    Grants access to a dashboard section.

    The section comes from the permission's own ``tab`` (see
    ``tab_permission``) or from the view's ``tab`` attribute; admins pass
    every check, other users need the tab in their ``permissions`` list.
    """

    message = 'You do not have access to this section.'
    tab = None

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.has_tab(self.tab or getattr(view, 'tab', None))


def tab_permission(tab):
    """``HasTabPermission`` bound to ``tab``, for function based views."""
    return type(f'HasTabPermission_{tab}', (HasTabPermission,), {'tab': tab})


class TabPermissionMixin:
    """
    Mixin for viewsets that mix public and dashboard actions.

    Actions listed in ``public_actions`` are open to anyone, the rest require
    the view's ``tab``.
    """

    tab = None
    public_actions = ()

    def get_permissions(self):
        if self.action in self.public_actions:
            return [AllowAny()]
        return [HasTabPermission()]

    def has_dashboard_access(self):
        user = self.request.user
        return bool(user and user.is_authenticated and user.has_tab(self.tab))
