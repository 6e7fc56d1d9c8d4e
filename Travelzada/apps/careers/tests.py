from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory
from .factories import JobApplicationFactory, JobOpeningFactory
from .models import JobApplication, JobOpening


class JobOpeningTestCase(APITestCase):

    def test_public_list_shows_active_openings(self):
        JobOpeningFactory.create_batch(2)
        JobOpeningFactory(status=JobOpening.STATUS_CLOSED)

        response = self.client.get(reverse('job'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['totalItems'], 2)

    def test_dashboard_sees_closed_openings(self):
        JobOpeningFactory(status=JobOpening.STATUS_CLOSED)
        self.client.force_authenticate(user=UserFactory(permissions=['careers']))
        response = self.client.get(reverse('job'))
        self.assertEqual(response.data['totalItems'], 1)

    def test_visitors_cannot_create_openings(self):
        response = self.client.post(reverse('job'), {'title': 'Guide'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class JobApplicationTestCase(APITestCase):

    def payload(self, **kwargs):
        data = {
            'name': 'Rohan Mehta',
            'email': 'rohan@example.com',
            'cover_letter': 'I have five years of experience selling holidays.',
        }
        data.update(kwargs)
        return data

    def test_public_create_defaults(self):
        response = self.client.post(reverse('application'), self.payload(status='shortlisted'), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        application = JobApplication.objects.get()
        self.assertEqual(application.position, 'General Application')
        self.assertEqual(application.status, JobApplication.STATUS_NEW)
        self.assertFalse(application.read)

    def test_required_fields(self):
        response = self.client.post(reverse('application'), self.payload(cover_letter=''), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['cover_letter'], ['Please fill in all required fields.'])

    def test_invalid_email(self):
        response = self.client.post(reverse('application'), self.payload(email='rohan@'), format='json')
        self.assertEqual(response.data['email'], ['Please enter a valid email address.'])

    def test_linkedin_must_point_to_linkedin(self):
        response = self.client.post(
            reverse('application'), self.payload(linkedin='https://github.com/rohan'), format='json'
        )
        self.assertEqual(response.data['linkedin'], ['Please enter a valid LinkedIn profile URL.'])

        response = self.client.post(
            reverse('application'), self.payload(linkedin='https://www.linkedin.com/in/rohan'), format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_mark_reviewed(self):
        application = JobApplicationFactory()
        self.client.force_authenticate(user=UserFactory(permissions=['careers']))
        response = self.client.post(reverse('application-mark-reviewed', kwargs={'pk': application.pk}))
        self.assertTrue(response.data['read'])
        self.assertEqual(response.data['status'], 'reviewed')
