from unittest import mock

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.packages.factories import PackageFactory
from apps.users.factories import UserFactory
from .factories import CustomerItineraryFactory
from .models import CustomerItinerary
from .pdf import ItineraryPDF, itinerary_filename, itinerary_rows, quoted_amount


class ItineraryRendererTestCase(TestCase):

    def test_filename(self):
        self.assertEqual(itinerary_filename('Riya  Kapoor'), 'Riya_Kapoor_Itinerary.pdf')

    def test_rows_prefer_custom_itinerary(self):
        record = CustomerItineraryFactory(custom_itinerary=[{'day': '1', 'title': 'Arrive', 'description': ''}])
        rows = itinerary_rows(record, record.package)
        self.assertEqual(rows, [{'day': 'Day 1', 'title': 'Arrive', 'description': ''}])

    def test_rows_fall_back_to_package_text(self):
        record = CustomerItineraryFactory(custom_itinerary=[])
        rows = itinerary_rows(record, record.package)
        self.assertEqual([row['day'] for row in rows], ['Day 1', 'Day 2', 'Day 3'])
        self.assertEqual(rows[1]['description'], 'City tour')

    def test_quoted_amount(self):
        package = PackageFactory(price_range_inr='₹45,000 - ₹60,000')
        record = CustomerItinerary(client_name='A', total_cost=0, package=package)
        self.assertEqual(quoted_amount(record, package), ('STARTING FROM', 45000))

        record.total_cost = 98000
        self.assertEqual(quoted_amount(record, package), ('TOTAL TRIP COST', 98000))

    def test_render_long_document(self):
        days = [{'day': str(n), 'title': f'Day {n} plan', 'description': 'Sightseeing ' * 40} for n in range(1, 16)]
        package = PackageFactory(
            faq_items=[{'question': 'Is it private?', 'answer': 'Yes.'}] * 7,
            guest_reviews=[{'name': 'Dev', 'review': 'Loved it'}] * 4,
            booking_policies={'booking': ['50% advance'], 'payment': ['UPI'], 'cancellation': ['No refund']},
        )
        record = CustomerItineraryFactory(
            package=package,
            custom_itinerary=days,
            flights=[{'type': 'outbound', 'airline': 'IndiGo', 'flight_number': '6E 101', 'from': 'DEL', 'to': 'DPS'}],
            hotels=[{'name': 'Ayana', 'city': 'Jimbaran', 'nights': 3}],
        )

        renderer = ItineraryPDF(record)
        pdf = renderer.render().getvalue()
        self.assertTrue(pdf.startswith(b"%PDF"))
        self.assertGreater(renderer.page, 4)

    def test_reviews_print_their_content(self):
        package = PackageFactory(guest_reviews=[
            {"name": "Asha", "content": "Best honeymoon we could ask for", "date": "2024-03-01", "rating": 5},
        ])
        renderer = ItineraryPDF(CustomerItineraryFactory(package=package))

        with mock.patch.object(renderer, "paragraph", wraps=renderer.paragraph) as paragraph:
            renderer.draw_reviews()

        drawn = [call.args[0] for call in paragraph.call_args_list]
        self.assertIn('"Best honeymoon we could ask for"', drawn)
        self.assertIn("- Asha", drawn)

    def test_long_inclusions_continue_on_next_page(self):
        items = [f"Inclusion item {n}" for n in range(1, 121)]
        package = PackageFactory(inclusions="\n".join(items), exclusions="Visa fees")
        renderer = ItineraryPDF(CustomerItineraryFactory(package=package))

        with mock.patch.object(renderer.canvas, "drawString", wraps=renderer.canvas.drawString) as draw:
            renderer.draw_inclusions()

        drawn = {call.args[2] for call in draw.call_args_list}
        self.assertTrue(set(items) <= drawn)
        self.assertIn("Visa fees", drawn)
        self.assertIn("Inclusions (continued)", drawn)
        self.assertGreater(renderer.page, 2)


class GenerateItineraryTestCase(APITestCase):

    def setUp(self):
        self.user = UserFactory(permissions=['create-itinerary'])
        self.client.force_authenticate(user=self.user)
        self.package = PackageFactory(destination_id='BAL_001', destination_name='Bali', price_range_inr='₹65,000 - ₹90,000')

    def test_generate_returns_pdf_and_saves_draft(self):
        response = self.client.post(reverse('itinerary-generate'), {
            'client_name': 'Riya Kapoor',
            'client_email': 'riya@example.com',
            'package_id': 'bal_001',
            'adults': 2,
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response['Content-Type'], 'application/pdf')
        self.assertIn('Riya_Kapoor_Itinerary.pdf', response['Content-Disposition'])
        self.assertTrue(b''.join(response.streaming_content).startswith(b'%PDF'))

        record = CustomerItinerary.objects.get()
        self.assertEqual(record.status, 'draft')
        self.assertEqual(record.package, self.package)
        self.assertEqual(record.total_cost, 65000)
        self.assertEqual(record.created_by, self.user.email)
        self.assertEqual(record.history[0]['action'], 'Itinerary generated')
        self.assertEqual(record.history[0]['details'], 'PDF created for Riya Kapoor')

    def test_generate_keeps_given_cost(self):
        self.client.post(reverse('itinerary-generate'), {
            'client_name': 'Riya', 'package_id': 'BAL_001', 'total_cost': '150000', 'advance_paid': '50000',
        }, format='json')
        record = CustomerItinerary.objects.get()
        self.assertEqual(record.balance_due, 100000)

    def test_unknown_package(self):
        response = self.client.post(reverse('itinerary-generate'), {
            'client_name': 'Riya', 'package_id': 'NOPE_1',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(CustomerItinerary.objects.count(), 0)

    def test_requires_create_itinerary_tab(self):
        self.client.force_authenticate(user=UserFactory(permissions=['customer-records']))
        response = self.client.post(reverse('itinerary-generate'), {'client_name': 'R', 'package_id': 'BAL_001'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_saved_record_pdf(self):
        record = CustomerItineraryFactory(client_name='Kabir Singh')
        self.client.force_authenticate(user=UserFactory(permissions=['customer-records']))
        response = self.client.get(reverse('itinerary-pdf', kwargs={'pk': record.pk}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('Kabir_Singh_Itinerary.pdf', response['Content-Disposition'])

    def test_packages_for_destination(self):
        PackageFactory(destination_id='GOA_001', destination_name='Goa Beaches')
        response = self.client.get(reverse('itinerary-packages-for-destination'), {'destination': 'bali'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

        response = self.client.get(reverse('itinerary-packages-for-destination'))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
