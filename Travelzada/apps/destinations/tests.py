from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.packages.factories import PackageFactory
from apps.users.factories import UserFactory
from .factories import DestinationFactory
from .models import Destination


class DestinationAPITestCase(APITestCase):

    def test_slug_is_derived_and_unique(self):
        first = DestinationFactory(name='Bali')
        second = DestinationFactory(name='Bali')
        self.assertEqual(first.slug, 'bali')
        self.assertEqual(second.slug, 'bali-2')

    def test_public_list_and_region_filter(self):
        DestinationFactory(name='Kerala')
        DestinationFactory(name='Maldives', country='Maldives', region=Destination.REGION_INTERNATIONAL)

        response = self.client.get(reverse('destination'), {'region': 'International'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['totalItems'], 1)
        self.assertEqual(response.data['results'][0]['name'], 'Maldives')

    def test_create_requires_tab(self):
        response = self.client.post(reverse('destination'), {'name': 'Goa'}, format='json')
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

        self.client.force_authenticate(user=UserFactory(permissions=['destinations']))
        response = self.client.post(reverse('destination'), {'name': 'Goa', 'region': 'India'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['slug'], 'goa')

    def test_by_slug_returns_matching_packages(self):
        destination = DestinationFactory(name='Bali', country='Indonesia', package_ids=['MIX_001'])
        PackageFactory(destination_id='BAL_001', destination_name='Bali Honeymoon')
        PackageFactory(destination_id='BAL_002', destination_name='Ubud Retreat')
        PackageFactory(destination_id='MIX_001', destination_name='Indonesia Explorer')
        PackageFactory(destination_id='GOA_001', destination_name='Goa Beaches')

        response = self.client.get(reverse('destination-by-slug', kwargs={'slug': destination.slug}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = sorted(pkg['Destination_ID'] for pkg in response.data['packages'])
        self.assertEqual(ids, ['BAL_001', 'MIX_001'])

    def test_by_slug_unknown(self):
        response = self.client.get(reverse('destination-by-slug', kwargs={'slug': 'atlantis'}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
