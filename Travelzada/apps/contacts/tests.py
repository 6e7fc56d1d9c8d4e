from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory
from .factories import ContactMessageFactory
from .models import ContactMessage


class ContactFormTestCase(APITestCase):

    def test_submit_creates_one_new_unread_message(self):
        response = self.client.post(reverse('contact'), {
            'name': 'Nisha',
            'email': 'Nisha.Kapoor@Example.COM',
            'message': 'Planning a honeymoon in March.',
            'status': 'replied',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(ContactMessage.objects.count(), 1)
        message = ContactMessage.objects.get()
        self.assertEqual(message.email, 'nisha.kapoor@example.com')
        self.assertEqual(message.status, ContactMessage.STATUS_NEW)
        self.assertFalse(message.read)

    def test_required_fields(self):
        response = self.client.post(reverse('contact'), {'name': 'Nisha'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('email', response.data)
        self.assertIn('message', response.data)
        self.assertEqual(ContactMessage.objects.count(), 0)


class ContactDashboardTestCase(APITestCase):

    def setUp(self):
        self.client.force_authenticate(user=UserFactory(permissions=['contacts']))

    def test_mark_read(self):
        message = ContactMessageFactory()
        response = self.client.post(reverse('contact-mark-read', kwargs={'pk': message.pk}))
        self.assertTrue(response.data['read'])
        self.assertEqual(response.data['status'], 'read')

    def test_filter_by_status_and_search(self):
        ContactMessageFactory(status=ContactMessage.STATUS_REPLIED)
        ContactMessageFactory(destination='Ladakh')
        response = self.client.get(reverse('contact'), {'status': 'replied'})
        self.assertEqual(response.data['totalItems'], 1)
        response = self.client.get(reverse('contact'), {'search': 'ladakh'})
        self.assertEqual(response.data['totalItems'], 1)
