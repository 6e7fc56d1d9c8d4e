from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory


class LoginTokenTestCase(APITestCase):

    def setUp(self):
        self.user = UserFactory(
            email='agent@travelzada.test',
            password='passport-ready-9',
            permissions=['leads', 'blogs'],
        )

    def test_login_returns_tokens_and_user_info(self):
        response = self.client.post(reverse('login_token'), {
            'email': 'Agent@Travelzada.test',
            'password': 'passport-ready-9',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)
        self.assertEqual(response.data['user']['email'], 'agent@travelzada.test')
        self.assertFalse(response.data['user']['is_admin'])
        self.assertEqual(response.data['user']['permissions'], ['leads', 'blogs'])

        self.user.refresh_from_db()
        self.assertIsNotNone(self.user.last_login)

    def test_wrong_password(self):
        response = self.client.post(reverse('login_token'), {
            'email': 'agent@travelzada.test',
            'password': 'wrong',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_inactive_user_cannot_login(self):
        self.user.is_active = False
        self.user.save()
        response = self.client.post(reverse('login_token'), {
            'email': 'agent@travelzada.test',
            'password': 'passport-ready-9',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
