from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory
from .factories import SubscriberFactory
from .models import Subscriber


class SubscribeTestCase(APITestCase):

    def test_subscribe_defaults(self):
        response = self.client.post(reverse('subscriber'), {'email': 'Reader@Example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        subscriber = Subscriber.objects.get()
        self.assertEqual(subscriber.email, 'reader@example.com')
        self.assertEqual(subscriber.status, Subscriber.STATUS_ACTIVE)
        self.assertEqual(subscriber.source, 'blog_page')

    def test_custom_source(self):
        self.client.post(reverse('subscriber'), {'email': 'a@example.com', 'source': 'footer'}, format='json')
        self.assertEqual(Subscriber.objects.get().source, 'footer')

    def test_duplicate_email_conflicts(self):
        SubscriberFactory(email='reader@example.com')
        response = self.client.post(reverse('subscriber'), {'email': 'READER@example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['message'], 'This email is already subscribed!')
        self.assertEqual(Subscriber.objects.count(), 1)

    def test_invalid_email(self):
        response = self.client.post(reverse('subscriber'), {'email': 'not-an-email'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class SubscriberDashboardTestCase(APITestCase):

    def setUp(self):
        self.client.force_authenticate(user=UserFactory(permissions=['subscribers']))

    def test_toggle_status(self):
        subscriber = SubscriberFactory()
        url = reverse('subscriber-toggle-status', kwargs={'pk': subscriber.pk})
        self.assertEqual(self.client.post(url).data['status'], 'unsubscribed')
        self.assertEqual(self.client.post(url).data['status'], 'active')

    def test_filters(self):
        SubscriberFactory(email='first@travel.in')
        SubscriberFactory(status=Subscriber.STATUS_UNSUBSCRIBED)
        response = self.client.get(reverse('subscriber'), {'status': 'unsubscribed'})
        self.assertEqual(response.data['totalItems'], 1)
        response = self.client.get(reverse('subscriber'), {'search': 'travel.in'})
        self.assertEqual(response.data['totalItems'], 1)
