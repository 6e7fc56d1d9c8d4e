"""
Tests for the AI package completion endpoint. The OpenAI client is mocked.

Run:
    python manage.py test apps.packages.tests_generate
"""
import json
from types import SimpleNamespace
from unittest import mock

from django.test import SimpleTestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory
from .generator import DEFAULT_BOOKING_POLICIES, parse_completion
from .utils import resolve_duration, slugify_text


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def mocked_client(*contents):
    client = mock.MagicMock()
    client.chat.completions.create.side_effect = [
        item if isinstance(item, Exception) else completion(item)
        for item in contents
    ]
    return client


class DurationAndSlugTestCase(SimpleTestCase):

    def test_written_duration_wins(self):
        self.assertEqual(resolve_duration({'Duration': '4N / 5D', 'Duration_Nights': 9}), ('4N / 5D', 4, 5))

    def test_night_and_day_counts(self):
        self.assertEqual(resolve_duration({'Duration_Nights': 3}), ('3 Nights / 4 Days', 3, 4))
        self.assertEqual(resolve_duration({'Duration_Days': 7}), ('6 Nights / 7 Days', 6, 7))

    def test_itinerary_length(self):
        self.assertEqual(
            resolve_duration({'Day_Wise_Itinerary': [{'day': 1}, {'day': 2}, {'day': 3}]}),
            ('2 Nights / 3 Days', 2, 3)
        )

    def test_default(self):
        self.assertEqual(resolve_duration({}), ('5 Nights / 6 Days', 5, 6))

    def test_slugify(self):
        self.assertEqual(slugify_text('The Bali Honeymoon Package for Couples!'), 'bali-honeymoon-couples')
        self.assertEqual(slugify_text('a b c d e f g h i j'), 'a-b-c-d-e-f-g-h')

    def test_parse_completion(self):
        self.assertEqual(parse_completion('Sure! {"Mood": "Scenic"} Enjoy.'), {'Mood': 'Scenic'})
        self.assertEqual(parse_completion('no json here'), {})
        self.assertEqual(parse_completion('{"Mood": '), {})


@override_settings(SITE_URL='https://travelzada.com')
class GeneratePackagesTestCase(APITestCase):

    def setUp(self):
        self.client.force_authenticate(user=UserFactory(permissions=['ai-generator']))
        self.url = reverse('generate-packages')

    def test_requires_packages(self):
        for body in ({}, {'packages': []}, {'packages': 'BAL_001'}):
            response = self.client.post(self.url, body, format='json')
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data, {'error': 'No packages provided'})

    def test_requires_tab(self):
        self.client.force_authenticate(user=UserFactory(permissions=['blogs']))
        response = self.client.post(self.url, {'packages': [{'Destination_ID': 'BAL_001'}]}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_unparseable_reply_uses_fallbacks(self):
        client = mocked_client('I cannot help with that.')
        with mock.patch('apps.packages.generator.get_client', return_value=client):
            response = self.client.post(self.url, {'packages': [{
                'Destination_ID': 'BAL_001',
                'Destination_Name': 'Bali',
                'Inclusions': ['Villa', 'Breakfast'],
            }]}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['generated'], 1)
        self.assertEqual(response.data['errors'], 0)

        pkg = response.data['packages'][0]
        self.assertEqual(pkg['Overview'], 'Experience the magic of Bali with this premium package.')
        self.assertEqual(pkg['Mood'], 'Romantic')
        self.assertEqual(pkg['Travel_Type'], 'Couple')
        self.assertEqual(pkg['Star_Category'], '4-Star')
        self.assertEqual(pkg['Inclusions'], 'Villa, Breakfast')
        self.assertEqual(pkg['Exclusions'], 'Flights, Visa, Personal Expenses')
        self.assertEqual(pkg['Booking_Policies'], DEFAULT_BOOKING_POLICIES)
        self.assertEqual(pkg['SEO_Title'], 'Bali Honeymoon Package - 5 Nights / 6 Days | TravelZada')
        self.assertEqual(pkg['Slug'], 'bali')
        self.assertEqual(pkg['Booking_URL'], 'https://travelzada.com/packages/bali')
        self.assertEqual(pkg['Created_By'], 'AI Generator')

    def test_generated_values_merged_over_input(self):
        generated = {
            'Overview': 'Two lines of romance.',
            'Star_Category': '5-Star',
            'Slug': 'bali-6n-7d-honeymoon',
            'Day_Wise_Itinerary': [{'day': 1, 'description': 'Arrival'}, {'day': 2, 'description': 'Ubud'}],
            'FAQ_Items': [{'question': 'Is it worth it?', 'answer': 'Yes.'}],
            'Booking_Policies': {'booking': [], 'payment': ['UPI'], 'cancellation': []},
        }
        client = mocked_client('```json\n' + json.dumps(generated) + '\n```')
        with mock.patch('apps.packages.generator.get_client', return_value=client):
            response = self.client.post(self.url, {'packages': [{
                'Destination_ID': 'BAL_002',
                'Destination_Name': 'Bali',
                'Star_Category': '4-Star',
                'FAQ_Items': [{'question': 'Old?', 'answer': 'Old.'}],
                'Booking_Policies': {'booking': ['30% advance'], 'payment': [], 'cancellation': []},
            }]}, format='json')

        pkg = response.data['packages'][0]
        self.assertEqual(pkg['Overview'], 'Two lines of romance.')
        self.assertEqual(pkg['Star_Category'], '4-Star')
        self.assertEqual(pkg['Day_Wise_Itinerary'], 'Day 1: Arrival | Day 2: Ubud')
        self.assertEqual(pkg['FAQ_Items'], generated['FAQ_Items'])
        self.assertEqual(pkg['Booking_Policies']['booking'], ['30% advance'])
        self.assertEqual(pkg['Booking_URL'], 'https://travelzada.com/packages/bali-6n-7d-honeymoon')

        kwargs = client.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs['response_format'], {'type': 'json_object'})
        self.assertEqual(kwargs['messages'][0]['role'], 'system')
        self.assertIn('Bali (International)', kwargs['messages'][1]['content'])

    def test_failed_package_keeps_input_with_error(self):
        client = mocked_client('{"Mood": "Scenic"}', RuntimeError('upstream timeout'))
        with mock.patch('apps.packages.generator.get_client', return_value=client):
            response = self.client.post(self.url, {'packages': [
                {'Destination_ID': 'GOA_001', 'Destination_Name': 'Goa'},
                {'Destination_ID': 'KER_001', 'Destination_Name': 'Kerala'},
            ]}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['generated'], 1)
        self.assertEqual(response.data['errors'], 1)
        failed = response.data['packages'][1]
        self.assertEqual(failed['Destination_ID'], 'KER_001')
        self.assertEqual(failed['_error'], 'upstream timeout')
        self.assertEqual(response.data['packages'][0]['Mood'], 'Scenic')
