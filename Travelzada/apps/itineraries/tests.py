from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory
from .factories import CustomerItineraryFactory
from .models import CustomerItinerary


class CustomerItineraryModelTestCase(APITestCase):

    def test_balance_due_follows_cost_and_advance(self):
        record = CustomerItineraryFactory(total_cost=Decimal('90000'), advance_paid=Decimal('15000'))
        self.assertEqual(record.balance_due, Decimal('75000'))

        record.advance_paid = Decimal('90000')
        record.save(update_fields=['advance_paid'])
        record.refresh_from_db()
        self.assertEqual(record.balance_due, Decimal('0'))

    def test_add_history_appends(self):
        record = CustomerItineraryFactory(history=[])
        record.add_history('Note added', 'Called the client', 'ops@travelzada.test')
        record.add_history('Status changed to sent', 'Previous status: draft')
        self.assertEqual([entry['action'] for entry in record.history], ['Note added', 'Status changed to sent'])
        self.assertEqual(record.history[1]['user'], 'admin')


class CustomerRecordsAPITestCase(APITestCase):

    def setUp(self):
        self.user = UserFactory(permissions=['customer-records'])
        self.client.force_authenticate(user=self.user)

    def test_requires_customer_records_tab(self):
        self.client.force_authenticate(user=UserFactory(permissions=['leads']))
        response = self.client.get(reverse('itinerary'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_update_recomputes_balance_and_logs_history(self):
        record = CustomerItineraryFactory(history=[])
        response = self.client.patch(reverse('itinerary-detail', kwargs={'pk': record.pk}), {
            'total_cost': '150000.00',
            'advance_paid': '50000.00',
            'balance_due': '1.00',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        record.refresh_from_db()
        self.assertEqual(record.balance_due, Decimal('100000'))
        self.assertEqual(record.history[-1]['action'], 'Record updated')
        self.assertEqual(record.history[-1]['details'], 'Customer details modified by admin')
        self.assertEqual(record.history[-1]['user'], self.user.email)

    def test_history_is_read_only(self):
        record = CustomerItineraryFactory(history=[])
        self.client.patch(reverse('itinerary-detail', kwargs={'pk': record.pk}), {'history': []}, format='json')
        record.refresh_from_db()
        self.assertEqual(len(record.history), 1)

    def test_change_status(self):
        record = CustomerItineraryFactory()
        response = self.client.post(
            reverse('itinerary-change-status', kwargs={'pk': record.pk}), {'status': 'confirmed'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'confirmed')
        self.assertEqual(response.data['history'][-1]['action'], 'Status changed to confirmed')
        self.assertEqual(response.data['history'][-1]['details'], 'Previous status: draft')

    def test_change_status_rejects_unknown(self):
        record = CustomerItineraryFactory()
        response = self.client.post(
            reverse('itinerary-change-status', kwargs={'pk': record.pk}), {'status': 'archived'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])

    def test_add_note(self):
        record = CustomerItineraryFactory(notes='')
        url = reverse('itinerary-add-note', kwargs={'pk': record.pk})
        self.client.post(url, {'note': 'Prefers a sea view'}, format='json')
        response = self.client.post(url, {'note': 'Paid advance'}, format='json')

        notes = response.data['notes'].split('\n\n')
        self.assertEqual(len(notes), 2)
        self.assertTrue(notes[0].startswith('['))
        self.assertTrue(notes[0].endswith('Prefers a sea view'))
        self.assertEqual(response.data['history'][-1]['action'], 'Note added')

    def test_stats(self):
        CustomerItineraryFactory(status='completed', total_cost=Decimal('100000'), advance_paid=Decimal('100000'))
        CustomerItineraryFactory(status='sent', total_cost=Decimal('80000'), advance_paid=Decimal('30000'))
        CustomerItineraryFactory(status='confirmed', total_cost=Decimal('60000'), advance_paid=Decimal('10000'))
        CustomerItineraryFactory(status='draft')

        response = self.client.get(reverse('itinerary-stats'))
        self.assertEqual(response.data['total'], 4)
        self.assertEqual(response.data['completed'], 1)
        self.assertEqual(response.data['totalRevenue'], 100000)
        self.assertEqual(response.data['pendingRevenue'], 100000)

    def test_search(self):
        CustomerItineraryFactory(client_name='Anaya Sharma')
        CustomerItineraryFactory(client_name='Vikram Rao', client_phone='9000000001')
        response = self.client.get(reverse('itinerary'), {'search': '9000000001'})
        self.assertEqual(response.data['totalItems'], 1)
        self.assertEqual(response.data['results'][0]['client_name'], 'Vikram Rao')

    def test_create_records_history(self):
        response = self.client.post(reverse('itinerary'), {
            'client_name': 'Tara',
            'total_cost': '50000',
            'flights': [{'type': 'outbound', 'airline': 'IndiGo', 'from': 'DEL', 'to': 'DPS'}],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        record = CustomerItinerary.objects.get()
        self.assertEqual(record.created_by, self.user.email)
        self.assertEqual(record.history[0]['action'], 'Record created')
        self.assertEqual(record.flights[0]['from'], 'DEL')
        self.assertEqual(record.balance_due, Decimal('50000'))
