from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory
from .factories import LeadFactory
from .models import Lead


class LeadPublicCreateTestCase(APITestCase):

    def test_create_strips_mobile_and_starts_as_new(self):
        response = self.client.post(reverse('lead'), {
            'name': 'Asha Rao',
            'mobile': '(98) 7654-3210',
            'package_name': 'Bali Honeymoon',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        lead = Lead.objects.get()
        self.assertEqual(lead.mobile, '9876543210')
        self.assertEqual(lead.status, Lead.STATUS_NEW)
        self.assertFalse(lead.read)

    def test_visitors_cannot_set_status(self):
        self.client.post(reverse('lead'), {
            'name': 'Asha', 'mobile': '9876543210', 'status': 'converted', 'read': True,
        }, format='json')
        lead = Lead.objects.get()
        self.assertEqual(lead.status, Lead.STATUS_NEW)
        self.assertFalse(lead.read)

    def test_name_is_required(self):
        response = self.client.post(reverse('lead'), {'mobile': '9876543210'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['name'], ['Please enter your name.'])

    def test_mobile_is_required(self):
        response = self.client.post(reverse('lead'), {'name': 'Asha', 'mobile': ''}, format='json')
        self.assertEqual(response.data['mobile'], ['Please enter your mobile number.'])

    def test_mobile_needs_ten_digits(self):
        response = self.client.post(reverse('lead'), {'name': 'Asha', 'mobile': '98765-432'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['mobile'], ['Please enter a valid 10-digit mobile number.'])
        self.assertEqual(Lead.objects.count(), 0)

    def test_visitors_cannot_list(self):
        LeadFactory()
        response = self.client.get(reverse('lead'))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class LeadDashboardTestCase(APITestCase):

    def setUp(self):
        self.client.force_authenticate(user=UserFactory(permissions=['leads']))

    def test_users_without_tab_are_rejected(self):
        self.client.force_authenticate(user=UserFactory(permissions=['blogs']))
        response = self.client.get(reverse('lead'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_toggle_status_cycles(self):
        lead = LeadFactory()
        url = reverse('lead-toggle-status', kwargs={'pk': lead.pk})

        seen = [self.client.post(url).data['status'] for _ in range(4)]
        self.assertEqual(seen, ['contacted', 'converted', 'new', 'contacted'])

    def test_toggle_status_from_lost_restarts(self):
        lead = LeadFactory(status=Lead.STATUS_LOST)
        response = self.client.post(reverse('lead-toggle-status', kwargs={'pk': lead.pk}))
        self.assertEqual(response.data['status'], 'new')

    def test_mark_viewed(self):
        lead = LeadFactory()
        response = self.client.post(reverse('lead-mark-viewed', kwargs={'pk': lead.pk}))
        self.assertTrue(response.data['read'])
        self.assertEqual(response.data['status'], 'contacted')

        converted = LeadFactory(status=Lead.STATUS_CONVERTED)
        response = self.client.post(reverse('lead-mark-viewed', kwargs={'pk': converted.pk}))
        self.assertEqual(response.data['status'], 'converted')

    def test_edit_trims_and_clears(self):
        lead = LeadFactory(travelers_count=3, notes='call back')
        response = self.client.patch(reverse('lead-detail', kwargs={'pk': lead.pk}), {
            'destination': '  Goa  ',
            'notes': '',
            'travelers_count': '',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        lead.refresh_from_db()
        self.assertEqual(lead.destination, 'Goa')
        self.assertEqual(lead.notes, '')
        self.assertIsNone(lead.travelers_count)

    def test_travelers_count_must_be_positive(self):
        lead = LeadFactory()
        for value in (0, -2, 'many'):
            response = self.client.patch(
                reverse('lead-detail', kwargs={'pk': lead.pk}), {'travelers_count': value}, format='json'
            )
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data['travelers_count'], ['Travelers count must be a positive number'])

    def test_filters(self):
        LeadFactory(name='Kabir', status=Lead.STATUS_CONTACTED)
        LeadFactory(name='Meera', package_name='Kerala Backwaters')
        old = LeadFactory(name='Old lead')
        Lead.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=20))

        response = self.client.get(reverse('lead'), {'status': 'contacted'})
        self.assertEqual(response.data['totalItems'], 1)

        response = self.client.get(reverse('lead'), {'search': 'kerala'})
        self.assertEqual(response.data['totalItems'], 1)

        response = self.client.get(reverse('lead'), {'date': 'week'})
        self.assertEqual(response.data['totalItems'], 2)

        response = self.client.get(reverse('lead'), {'date': 'month'})
        self.assertEqual(response.data['totalItems'], 3)

    def test_resumen(self):
        LeadFactory.create_batch(2)
        LeadFactory(status=Lead.STATUS_CONVERTED, read=True)
        response = self.client.get(reverse('lead-resumen'))
        values = {item['texto']: item['valor'] for item in response.data}
        self.assertEqual(values['Total'], '3')
        self.assertEqual(values['Unread'], '2')
        self.assertEqual(values['Converted'], '1')
