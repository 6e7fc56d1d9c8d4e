"""
Tests for the package API and the bulk import service.

Run:
    python manage.py test apps.packages
"""
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import AdminUserFactory, UserFactory
from .factories import PackageFactory
from .models import Package
from .services import import_packages
from .utils import derive_budget, normalize_package_id


class PackageImportServiceTestCase(APITestCase):
    """Duplicates are detected on the trimmed, upper-cased Destination_ID"""

    def setUp(self):
        PackageFactory(destination_id='BAL_001', destination_name='Bali')

    def test_duplicates_skipped_and_errors_collected(self):
        result = import_packages([
            {'Destination_ID': ' bal_001 ', 'Destination_Name': 'Bali'},
            {'Destination_ID': 'GOA_001', 'Destination_Name': 'Goa'},
            {'Destination_ID': 'goa_001', 'Destination_Name': 'Goa again'},
            {'Destination_ID': 'KER_001'},
        ], 'ops@travelzada.test')

        self.assertEqual(result['imported'], 1)
        self.assertEqual(result['skipped'], 2)
        self.assertEqual(result['skipped_ids'], ['bal_001', 'goa_001'])
        self.assertEqual(len(result['errors']), 1)
        self.assertTrue(result['errors'][0].startswith('KER_001:'))
        self.assertEqual(
            result['message'],
            'Imported 1 packages. Skipped 2 duplicates (bal_001, goa_001). 1 errors.'
        )

        goa = Package.objects.get(destination_id='GOA_001')
        self.assertEqual(goa.created_by, 'ops@travelzada.test')
        self.assertEqual(goa.last_updated, timezone.localdate())
        self.assertEqual(Package.objects.count(), 2)

    def test_message_without_skips_or_errors(self):
        result = import_packages([{'Destination_ID': 'MAL_001', 'Destination_Name': 'Maldives'}], 'AI Generator')
        self.assertEqual(result['message'], 'Imported 1 packages.')

    def test_itinerary_list_is_stored_as_text_and_details(self):
        import_packages([{
            'Destination_ID': 'THA_001',
            'Destination_Name': 'Thailand',
            'Day_Wise_Itinerary': [
                {'day': 1, 'description': 'Arrival in Phuket'},
                {'day': 2, 'description': 'Phi Phi island tour'},
            ],
            'Inclusions': ['Hotel', 'Breakfast'],
        }], 'Excel Import')

        package = Package.objects.get(destination_id='THA_001')
        self.assertEqual(package.day_wise_itinerary, 'Day 1: Arrival in Phuket | Day 2: Phi Phi island tour')
        self.assertEqual(len(package.day_wise_itinerary_details), 2)
        self.assertEqual(package.inclusions, 'Hotel, Breakfast')


class PackageHelpersTestCase(APITestCase):

    def test_normalize_package_id(self):
        self.assertEqual(normalize_package_id('  bal_001 '), 'BAL_001')
        self.assertEqual(normalize_package_id(None), '')

    def test_derive_budget(self):
        self.assertEqual(derive_budget('₹50,000 - ₹70,000'), 'Budget')
        self.assertEqual(derive_budget('₹90,000 - ₹1,10,000'), 'Mid')
        self.assertEqual(derive_budget('2,00,000'), 'Premium')
        self.assertEqual(derive_budget(''), 'Mid')
        self.assertEqual(derive_budget('On request'), 'Mid')


class PackageAPITestCase(APITestCase):

    def setUp(self):
        self.editor = UserFactory(email='editor@travelzada.test', permissions=['packages'])

    def test_public_list_and_detail(self):
        package = PackageFactory(destination_name='Bali')
        response = self.client.get(reverse('package'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['totalItems'], 1)
        self.assertEqual(response.data['results'][0]['Destination_Name'], 'Bali')

        response = self.client.get(reverse('package-detail', kwargs={'pk': package.pk}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['Destination_ID'], package.destination_id)

    def test_anonymous_cannot_create(self):
        response = self.client.post(reverse('package'), {
            'Destination_ID': 'BAL_009', 'Destination_Name': 'Bali',
        }, format='json')
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_user_without_tab_cannot_create(self):
        self.client.force_authenticate(user=UserFactory(permissions=['blogs']))
        response = self.client.post(reverse('package'), {
            'Destination_ID': 'BAL_009', 'Destination_Name': 'Bali',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_create_derives_slug_and_prices(self):
        self.client.force_authenticate(user=self.editor)
        response = self.client.post(reverse('package'), {
            'Destination_ID': 'BAL_009',
            'Destination_Name': 'Bali Honeymoon Escape',
            'Price_Range_INR': '₹45,000 - ₹60,000',
            'Booking_Policies': {'booking': ['50% advance']},
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['Slug'], 'bali-honeymoon-escape')
        self.assertEqual(response.data['Price_Min_INR'], 45000)
        self.assertEqual(response.data['Price_Max_INR'], 60000)
        self.assertEqual(response.data['Created_By'], 'editor@travelzada.test')
        self.assertEqual(
            response.data['Booking_Policies'],
            {'booking': ['50% advance'], 'payment': [], 'cancellation': []}
        )

    def test_editing_price_range_updates_bounds(self):
        package = PackageFactory(price_range_inr='50,000 - 70,000')
        self.assertEqual((package.price_min_inr, package.price_max_inr), (50000, 70000))

        self.client.force_authenticate(user=self.editor)
        response = self.client.patch(reverse('package-detail', kwargs={'pk': package.pk}), {
            'Price_Range_INR': '150,000 - 190,000',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        package.refresh_from_db()
        self.assertEqual((package.price_min_inr, package.price_max_inr), (150000, 190000))
        self.assertEqual(response.data['Price_Min_INR'], 150000)

    def test_explicit_bounds_win_over_price_range(self):
        package = PackageFactory(price_range_inr='50,000 - 70,000')

        self.client.force_authenticate(user=self.editor)
        self.client.patch(reverse('package-detail', kwargs={'pk': package.pk}), {
            'Price_Range_INR': '150,000 - 190,000',
            'Price_Min_INR': 140000,
        }, format='json')

        package.refresh_from_db()
        self.assertEqual((package.price_min_inr, package.price_max_inr), (140000, 190000))

    def test_create_requires_id_and_name(self):
        self.client.force_authenticate(user=self.editor)
        response = self.client.post(reverse('package'), {'Country': 'India'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Destination_ID', response.data)
        self.assertIn('Destination_Name', response.data)

    def test_search_and_ordering(self):
        PackageFactory(destination_id='GOA_001', destination_name='Goa', price_min_inr=30000)
        PackageFactory(destination_id='MAL_001', destination_name='Maldives', price_min_inr=90000)

        response = self.client.get(reverse('package'), {'search': 'mald'})
        self.assertEqual(response.data['totalItems'], 1)

        response = self.client.get(reverse('package'), {'ordering': '-price_min_inr'})
        self.assertEqual(response.data['results'][0]['Destination_ID'], 'MAL_001')

    def test_by_slug_is_public(self):
        PackageFactory(destination_id='BAL_001', destination_name='Bali', slug='bali-6n-7d-honeymoon')
        response = self.client.get(reverse('package-by-slug', kwargs={'slug': 'bali-6n-7d-honeymoon'}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['Destination_ID'], 'BAL_001')

        response = self.client.get(reverse('package-by-slug', kwargs={'slug': 'nowhere'}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_existing_ids_are_normalized(self):
        PackageFactory(destination_id='bal_001')
        PackageFactory(destination_id='GOA_002')
        self.client.force_authenticate(user=self.editor)

        response = self.client.get(reverse('package-existing-ids'))
        self.assertEqual(response.data, ['BAL_001', 'GOA_002'])

    def test_resumen(self):
        PackageFactory(budget_category='Budget')
        PackageFactory(budget_category='Premium', created_by='AI Generator')
        self.client.force_authenticate(user=AdminUserFactory())

        response = self.client.get(reverse('package-resumen'))
        cards = {card['texto']: card['valor'] for card in response.data}
        self.assertEqual(cards['Total'], '2')
        self.assertEqual(cards['Premium'], '1')
        self.assertEqual(cards['AI Generated'], '1')


class PackageBulkImportTestCase(APITestCase):

    def setUp(self):
        self.client.force_authenticate(user=AdminUserFactory())
        self.url = reverse('package-bulk-import')

    def test_body_must_be_an_array(self):
        response = self.client.post(self.url, {'Destination_ID': 'BAL_001'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'JSON must be an array of package objects')

    def test_empty_array(self):
        response = self.client.post(self.url, [], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'JSON array is empty')

    def test_invalid_items_reported_valid_items_imported(self):
        PackageFactory(destination_id='BAL_001')
        response = self.client.post(self.url, [
            {'Destination_ID': 'GOA_001', 'Destination_Name': 'Goa'},
            {'Destination_ID': 'KER_001'},
            {'Destination_ID': 'BAL_001', 'Destination_Name': 'Bali'},
        ], format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['imported'], 1)
        self.assertEqual(response.data['skipped_ids'], ['BAL_001'])
        self.assertIn(
            'Package 2: Missing required fields (Destination_ID or Destination_Name)',
            response.data['errors']
        )
        self.assertEqual(Package.objects.get(destination_id='GOA_001').created_by, 'Bulk Import')
