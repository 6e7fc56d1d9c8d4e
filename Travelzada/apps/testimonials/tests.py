from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory
from .factories import TestimonialFactory


class TestimonialTestCase(APITestCase):

    def test_public_list(self):
        TestimonialFactory.create_batch(3)
        response = self.client.get(reverse('testimonial'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['totalItems'], 3)

    def test_visitors_cannot_create(self):
        response = self.client.post(reverse('testimonial'), {'name': 'A', 'quote': 'B'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_rating_defaults_and_bounds(self):
        self.client.force_authenticate(user=UserFactory(permissions=['testimonials']))

        response = self.client.post(reverse('testimonial'), {'name': 'Ira', 'quote': 'Lovely trip'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['rating'], 5)

        for rating in (0, 6):
            response = self.client.post(
                reverse('testimonial'), {'name': 'Ira', 'quote': 'Lovely', 'rating': rating}, format='json'
            )
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_toggle_featured_and_filters(self):
        self.client.force_authenticate(user=UserFactory(permissions=['testimonials']))
        testimonial = TestimonialFactory(rating=4)
        TestimonialFactory(rating=5)

        response = self.client.post(reverse('testimonial-toggle-featured', kwargs={'pk': testimonial.pk}))
        self.assertTrue(response.data['featured'])

        response = self.client.get(reverse('testimonial'), {'rating': 4})
        self.assertEqual(response.data['totalItems'], 1)
        response = self.client.get(reverse('testimonial'), {'featured': 'true'})
        self.assertEqual(response.data['totalItems'], 1)
