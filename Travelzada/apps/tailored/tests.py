from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.packages.factories import PackageFactory
from apps.users.factories import UserFactory
from .factories import TailoredLeadFactory
from .models import TailoredLead
from .wizard import SESSION_KEY


class WizardTestCase(APITestCase):

    def step(self, number, data):
        return self.client.post(reverse('tailored-wizard-step', kwargs={'step': number}), data, format='json')

    def complete_steps(self):
        self.step(1, {'destinations': ['Bali', 'Gili'], 'date_range': 'March 2027'})
        self.step(2, {})
        self.step(3, {'group_type': 'couple', 'experiences': ['beach']})
        self.step(4, {'hotel_types': ['5-star'], 'passengers': {'adults': 2, 'kids': 0, 'rooms': 1}})

    def test_default_state(self):
        response = self.client.get(reverse('tailored-wizard'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['current_step'], 1)
        self.assertEqual(response.data['date_range'], 'Flexible')
        self.assertEqual(response.data['inclusions'], ['hotels', 'flights'])
        self.assertEqual(response.data['hotel_types'], ['4-star'])
        self.assertEqual(response.data['passengers'], {'adults': 2, 'kids': 0, 'rooms': 1})

    def test_step_one_requires_a_destination(self):
        response = self.step(1, {'destinations': []})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('destinations', response.data['errors'])

        state = self.client.get(reverse('tailored-wizard')).data
        self.assertEqual(state['current_step'], 1)
        self.assertEqual(state['destinations'], [])

    def test_route_defaults_to_two_nights(self):
        self.step(1, {'destinations': ['Bali', 'Gili']})
        response = self.step(2, {})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['route_items'], [
            {'destination': 'Bali', 'nights': 2},
            {'destination': 'Gili', 'nights': 2},
        ])
        self.assertEqual(response.data['current_step'], 3)

    def test_route_rejects_zero_nights(self):
        self.step(1, {'destinations': ['Bali']})
        response = self.step(2, {'route_items': [{'destination': 'Bali', 'nights': 0}]})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.client.session[SESSION_KEY]['route_items'], [])

    def test_group_type_is_required(self):
        self.step(1, {'destinations': ['Bali']})
        self.step(2, {})
        response = self.step(3, {'experiences': ['beach']})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.client.session[SESSION_KEY]['current_step'], 3)
        self.assertEqual(self.client.session[SESSION_KEY]['experiences'], [])

    def test_stay_requires_a_hotel_type(self):
        response = self.step(4, {'hotel_types': []})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_back_never_goes_below_one(self):
        self.step(1, {'destinations': ['Bali']})
        self.assertEqual(self.client.post(reverse('tailored-wizard-back')).data['current_step'], 1)
        self.assertEqual(self.client.post(reverse('tailored-wizard-back')).data['current_step'], 1)

    def test_contact_phone_needs_ten_characters(self):
        self.complete_steps()
        response = self.step(5, {'contact_name': 'Aarav', 'contact_phone': '98765'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('contact_phone', response.data['errors'])

    def test_submit_creates_lead_and_resets(self):
        self.complete_steps()
        response = self.client.post(reverse('tailored-wizard-submit'), {
            'contact_name': 'Aarav', 'contact_phone': '9876543210',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        lead = TailoredLead.objects.get()
        self.assertEqual(lead.status, 'new')
        self.assertEqual(lead.source, 'tailored_travel_wizard')
        self.assertEqual(lead.destinations, ['Bali', 'Gili'])
        self.assertEqual(lead.route_items[0]['nights'], 2)
        self.assertEqual(lead.hotel_types, ['5-star'])
        self.assertEqual(str(lead.lead_id), response.data['lead']['lead_id'])

        state = self.client.get(reverse('tailored-wizard')).data
        self.assertEqual(state['destinations'], [])
        self.assertEqual(state['current_step'], 1)

    def test_submit_rejects_incomplete_wizard(self):
        response = self.client.post(reverse('tailored-wizard-submit'), {
            'contact_name': 'Aarav', 'contact_phone': '9876543210',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('destinations', response.data['errors'])
        self.assertIn('group_type', response.data['errors'])
        self.assertEqual(TailoredLead.objects.count(), 0)


class FindPackagesTestCase(APITestCase):

    def setUp(self):
        self.luxury = PackageFactory(
            destination_id='BAL_002', destination_name='Bali Luxury Escape', star_category='5-Star',
            travel_type='Couple', budget_category='Premium', mood='Romantic beach', overview='', price_range_inr='₹1,40,000',
        )
        self.value = PackageFactory(
            destination_id='BAL_001', destination_name='Bali Explorer', star_category='3-Star',
            travel_type='Friends', budget_category='Budget', mood='Adventurous', overview='', price_range_inr='₹45,000',
        )
        PackageFactory(destination_id='GOA_001', destination_name='Goa Beaches')

    def test_no_destinations(self):
        response = self.client.post(reverse('tailored-find-packages'), {'destinations': []}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'No destinations provided.')

    def test_malformed_destinations(self):
        response = self.client.post(reverse('tailored-find-packages'), {
            'destinations': [{'name': 'Bali'}],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Invalid destinations.')
        self.assertIn('destinations', response.data['errors'])

    def test_numeric_destinations_do_not_fail(self):
        response = self.client.post(reverse('tailored-find-packages'), {
            'destinations': [123], 'group_type': 7, 'experiences': [1],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['packages'], [])

    def test_ranks_matching_packages(self):
        response = self.client.post(reverse('tailored-find-packages'), {
            'destinations': ['Bali'],
            'group_type': 'couple',
            'experiences': ['beach'],
            'hotel_types': ['5-star'],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        packages = response.data['packages']
        self.assertEqual([item['Destination_ID'] for item in packages], ['BAL_002', 'BAL_001'])
        self.assertEqual(packages[0]['matchScore'], 100)
        self.assertEqual(packages[1]['matchScore'], 40)
        self.assertIn('Bali Luxury Escape', packages[0]['matchReason'])

    def test_budget_in_body(self):
        response = self.client.post(reverse('tailored-find-packages'), {
            'destinations': ['bali'], 'budget': '50000', 'hotel_types': ['3-star'],
        }, format='json')
        packages = response.data['packages']
        self.assertEqual(packages[0]['Destination_ID'], 'BAL_001')
        self.assertEqual(packages[0]['matchScore'], 80)

    def test_uses_session_state_when_body_is_empty(self):
        self.client.post(reverse('tailored-wizard-step', kwargs={'step': 1}), {'destinations': ['Goa']}, format='json')
        response = self.client.post(reverse('tailored-find-packages'), {}, format='json')
        self.assertEqual(len(response.data['packages']), 1)
        self.assertEqual(response.data['packages'][0]['Destination_ID'], 'GOA_001')

    def test_at_most_three_results(self):
        PackageFactory.create_batch(4, destination_name='Bali Classic')
        response = self.client.post(reverse('tailored-find-packages'), {'destinations': ['Bali']}, format='json')
        self.assertEqual(len(response.data['packages']), 3)


class TailoredLeadDashboardTestCase(APITestCase):

    def test_list_requires_leads_tab(self):
        TailoredLeadFactory()
        response = self.client.get(reverse('tailored-lead'))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.force_authenticate(user=UserFactory(permissions=['leads']))
        response = self.client.get(reverse('tailored-lead'))
        self.assertEqual(response.data['totalItems'], 1)
