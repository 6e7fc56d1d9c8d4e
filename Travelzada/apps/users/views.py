# apps/users/views.py
import logging
from datetime import timedelta

from django.conf import settings
from django.core.mail import send_mail
from django.utils import timezone
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from apps.api.pagination import StandardPagination
from .filters import UserFilter
from .models import User, TAB_USERS
from .permissions import TabPermissionMixin
from .serializers import (
    PermissionsSerializer,
    SignupSerializer,
    UserCreateSerializer,
    UserListSerializer,
)

logger = logging.getLogger(__name__)


class UserViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    queryset = User.objects.filter(is_superuser=False).order_by('-created_at')
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = UserFilter
    ordering_fields = ['email', 'display_name', 'created_at', 'role', 'last_login']
    pagination_class = StandardPagination
    tab = TAB_USERS
    public_actions = ('signup',)

    def get_serializer_class(self):
        if self.action in ['list', 'retrieve']:
            return UserListSerializer
        if self.action == 'signup':
            return SignupSerializer
        return UserCreateSerializer

    def get_permissions(self):
        if self.action == 'me':
            return [IsAuthenticated()]
        return super().get_permissions()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = serializer.save()

        password = getattr(instance, 'generated_password', None)
        if password:
            message = (
                "Welcome,\n\n"
                "Your Travelzada dashboard account has been created.\n"
                f"Email: {instance.email}\n"
                f"Temporary password: {password}\n\n"
                "Please sign in and change your password."
            )
            try:
                send_mail(
                    "Your account has been created",
                    message,
                    settings.DEFAULT_FROM_EMAIL,
                    [instance.email],
                    fail_silently=False
                )
            except Exception:
                logger.exception("Could not send the welcome email to %s", instance.email)

        return Response(serializer.to_representation(instance), status=status.HTTP_201_CREATED)

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=['get'], url_path='resumen', pagination_class=None)
    def resumen(self, request):
        base_queryset = User.objects.filter(is_superuser=False)

        total = base_queryset.count()
        admins = base_queryset.filter(role=User.ROLE_ADMIN).count()
        active = base_queryset.filter(is_active=True).count()
        inactive = base_queryset.filter(is_active=False).count()

        last_30_days = timezone.now() - timedelta(days=30)
        new = base_queryset.filter(created_at__gte=last_30_days).count()

        data = [
            {'texto': 'Total', 'valor': str(total)},
            {'texto': 'Admins', 'valor': str(admins)},
            {'texto': 'Active', 'valor': str(active)},
            {'texto': 'Inactive', 'valor': str(inactive)},
            {'texto': 'New in the last 30 days', 'valor': str(new)},
        ]
        return Response(data)

    @action(detail=True, methods=['post'], url_path='toggle-role')
    def toggle_role(self, request, pk=None):
        """
        Switches a user between ``user`` and ``admin``.

        The change is only written when the request carries ``confirm: true``;
        otherwise the pending change is reported with 409 and nothing is saved.
        """
        user = self.get_object()
        new_role = User.ROLE_USER if user.role == User.ROLE_ADMIN else User.ROLE_ADMIN

        confirm = request.data.get('confirm')
        if confirm not in (True, 'true', 'True', '1', 1):
            return Response(
                {
                    'success': False,
                    'requires_confirmation': True,
                    'message': f'Change role of {user.email} to "{new_role}"? '
                               'The user will need to log out and log back in for the change to take effect.',
                    'current_role': user.role,
                    'new_role': new_role,
                },
                status=status.HTTP_409_CONFLICT
            )

        user.role = new_role
        user.save(update_fields=['role', 'updated_at'])
        logger.info("Role of %s changed to %s by %s", user.email, new_role, request.user.email)
        return Response({
            'success': True,
            'message': f'User role updated to {new_role}. '
                       'The user will need to log out and log back in for the change to take effect.',
            'user': UserListSerializer(user).data,
        })

    @action(detail=True, methods=['post'], url_path='toggle-active')
    def toggle_active(self, request, pk=None):
        user = self.get_object()
        user.is_active = not user.is_active
        user.save(update_fields=['is_active', 'updated_at'])
        return Response(UserListSerializer(user).data)

    @action(detail=True, methods=['post'], url_path='permissions')
    def set_permissions(self, request, pk=None):
        user = self.get_object()
        serializer = PermissionsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user.permissions = serializer.validated_data['permissions']
        user.save(update_fields=['permissions', 'updated_at'])
        return Response(UserListSerializer(user).data)

    @action(detail=False, methods=['post'], url_path='signup')
    def signup(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response(serializer.to_representation(user), status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'], url_path='me', pagination_class=None)
    def me(self, request):
        return Response(UserListSerializer(request.user).data)
