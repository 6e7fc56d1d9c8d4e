"""
Tests for dashboard accounts, role changes and section permissions.

Run:
    python manage.py test apps.users
"""
from unittest import mock

from django.core import mail
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import AdminUserFactory, UserFactory
from apps.users.models import User


class UserRoleToggleTestCase(APITestCase):
    """The role switch only writes after an explicit confirmation"""

    def setUp(self):
        self.admin = AdminUserFactory()
        self.user = UserFactory(email='traveller@travelzada.test')
        self.client.force_authenticate(user=self.admin)
        self.url = reverse('user-toggle-role', kwargs={'pk': self.user.pk})

    def test_without_confirmation_role_is_unchanged(self):
        response = self.client.post(self.url, {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertTrue(response.data['requires_confirmation'])
        self.assertEqual(response.data['new_role'], User.ROLE_ADMIN)
        self.user.refresh_from_db()
        self.assertEqual(self.user.role, User.ROLE_USER)

    def test_cancelled_confirmation_role_is_unchanged(self):
        response = self.client.post(self.url, {'confirm': False}, format='json')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.user.refresh_from_db()
        self.assertEqual(self.user.role, User.ROLE_USER)

    def test_confirmed_toggle_switches_both_ways(self):
        response = self.client.post(self.url, {'confirm': True}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual(self.user.role, User.ROLE_ADMIN)

        self.client.post(self.url, {'confirm': True}, format='json')
        self.user.refresh_from_db()
        self.assertEqual(self.user.role, User.ROLE_USER)


class UserSectionPermissionTestCase(APITestCase):

    def test_anonymous_cannot_list_users(self):
        response = self.client.get(reverse('user'))
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_user_without_tab_is_rejected(self):
        self.client.force_authenticate(user=UserFactory(permissions=['blogs']))
        response = self.client.get(reverse('user'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_user_with_tab_can_list(self):
        UserFactory.create_batch(3)
        self.client.force_authenticate(user=UserFactory(permissions=['users']))
        response = self.client.get(reverse('user'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['totalItems'], 4)
        self.assertIn('results', response.data)

    def test_inactive_admin_is_rejected(self):
        self.client.force_authenticate(user=AdminUserFactory(is_active=False))
        response = self.client.get(reverse('user'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_set_permissions_rejects_unknown_tabs(self):
        target = UserFactory()
        self.client.force_authenticate(user=AdminUserFactory())
        url = reverse('user-permissions', kwargs={'pk': target.pk})

        response = self.client.post(url, {'permissions': ['leads', 'billing']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.post(url, {'permissions': ['leads', 'blogs', 'leads']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        target.refresh_from_db()
        self.assertEqual(target.permissions, ['leads', 'blogs'])


class UserAccountTestCase(APITestCase):

    def test_signup_creates_plain_user(self):
        response = self.client.post(reverse('user-signup'), {
            'email': 'New.Person@Example.com',
            'password': 'sunset-beach-42',
            'display_name': 'New Person',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        user = User.objects.get(email='new.person@example.com')
        self.assertEqual(user.role, User.ROLE_USER)
        self.assertEqual(user.permissions, [])
        self.assertTrue(user.is_active)
        self.assertTrue(user.check_password('sunset-beach-42'))

    def test_signup_rejects_existing_email(self):
        UserFactory(email='taken@example.com')
        response = self.client.post(reverse('user-signup'), {
            'email': 'taken@example.com',
            'password': 'sunset-beach-42',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_toggle_active(self):
        target = UserFactory()
        self.client.force_authenticate(user=AdminUserFactory())
        response = self.client.post(reverse('user-toggle-active', kwargs={'pk': target.pk}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        target.refresh_from_db()
        self.assertFalse(target.is_active)

    def test_dashboard_create_returns_generated_password(self):
        self.client.force_authenticate(user=AdminUserFactory())
        response = self.client.post(reverse('user'), {
            'email': 'editor@travelzada.test',
            'permissions': ['blogs'],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn('generated_password', response.data)
        user = User.objects.get(email='editor@travelzada.test')
        self.assertTrue(user.check_password(response.data['generated_password']))

    def test_dashboard_create_emails_generated_password(self):
        self.client.force_authenticate(user=AdminUserFactory())
        response = self.client.post(reverse('user'), {'email': 'writer@travelzada.test'}, format='json')

        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.to, ['writer@travelzada.test'])
        self.assertIn(response.data['generated_password'], message.body)

    def test_generated_password_uses_secrets(self):
        self.client.force_authenticate(user=AdminUserFactory())
        with mock.patch('apps.users.serializers.secrets.choice', return_value='Q'):
            response = self.client.post(reverse('user'), {'email': 'writer@travelzada.test'}, format='json')

        self.assertEqual(response.data['generated_password'], 'Q' * 10)

    def test_mail_failure_keeps_the_account(self):
        self.client.force_authenticate(user=AdminUserFactory())
        with mock.patch('apps.users.views.send_mail', side_effect=OSError('SMTP down')) as send:
            with self.assertLogs('apps.users.views', level='ERROR'):
                response = self.client.post(reverse('user'), {'email': 'writer@travelzada.test'}, format='json')

        send.assert_called_once()
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(User.objects.filter(email='writer@travelzada.test').exists())

    def test_resumen_counts(self):
        AdminUserFactory()
        UserFactory(is_active=False)
        self.client.force_authenticate(user=AdminUserFactory())
        response = self.client.get(reverse('user-resumen'))

        cards = {card['texto']: card['valor'] for card in response.data}
        self.assertEqual(cards['Total'], '3')
        self.assertEqual(cards['Admins'], '2')
        self.assertEqual(cards['Inactive'], '1')
