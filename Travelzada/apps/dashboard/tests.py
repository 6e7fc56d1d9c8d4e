from datetime import timedelta
from io import BytesIO

from django.urls import reverse
from django.utils import timezone
from openpyxl import load_workbook
from rest_framework import status
from rest_framework.test import APITestCase

from apps.blogs.factories import BlogPostFactory
from apps.itineraries.factories import CustomerItineraryFactory
from apps.leads.factories import LeadFactory
from apps.leads.models import Lead
from apps.packages.factories import PackageFactory
from apps.subscribers.factories import SubscriberFactory
from apps.users.factories import UserFactory
from .reports import build_leads_excel, leads_summary


class ResumenGeneralTestCase(APITestCase):

    def setUp(self):
        self.user = UserFactory(permissions=['dashboard'])
        self.client.force_authenticate(user=self.user)
        self.url = reverse('dashboard-resumen-general')

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_requires_dashboard_tab(self):
        self.client.force_authenticate(user=UserFactory(permissions=['leads']))
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_totals(self):
        PackageFactory.create_batch(2)
        LeadFactory.create_batch(2)
        LeadFactory(read=True)
        old = LeadFactory()
        Lead.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=10))
        SubscriberFactory()
        BlogPostFactory()
        CustomerItineraryFactory()

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        totals = response.data['totals']
        # the itinerary factory adds its own package
        self.assertEqual(totals['packages'], 3)
        self.assertEqual(totals['leads'], 4)
        self.assertEqual(totals['unreadLeads'], 3)
        self.assertEqual(totals['leadsThisWeek'], 3)
        self.assertEqual(totals['users'], 1)
        self.assertEqual(totals['subscribers'], 1)
        self.assertEqual(totals['blogs'], 1)
        self.assertEqual(totals['contacts'], 0)
        self.assertEqual(totals['applications'], 0)
        self.assertEqual(totals['itineraries'], 1)

    def test_recent_lists_are_capped(self):
        PackageFactory.create_batch(7)
        LeadFactory.create_batch(6)
        newest = LeadFactory(name='Newest Lead')
        Lead.objects.filter(pk=newest.pk).update(created_at=timezone.now() + timedelta(minutes=1))

        response = self.client.get(self.url)

        self.assertEqual(len(response.data['recentPackages']), 5)
        self.assertEqual(len(response.data['recentLeads']), 5)
        self.assertEqual(response.data['recentLeads'][0]['id'], newest.id)
        self.assertIn('Destination_Name', response.data['recentPackages'][0])


class LeadExportTestCase(APITestCase):

    def setUp(self):
        self.client.force_authenticate(user=UserFactory(permissions=['leads']))
        LeadFactory(name='Asha Rao', status=Lead.STATUS_NEW)
        LeadFactory(name='Vikram Shah', status=Lead.STATUS_CONVERTED, read=True)

    def test_excel_export(self):
        response = self.client.get(reverse('dashboard-leads-exportar-excel'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response['Content-Type'],
            'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )
        self.assertIn('attachment; filename="leads_', response['Content-Disposition'])

        wb = load_workbook(BytesIO(response.content))
        rows = list(wb['Leads'].iter_rows(values_only=True))
        self.assertEqual(rows[0][0], 'Name')
        self.assertEqual({row[0] for row in rows[1:]}, {'Asha Rao', 'Vikram Shah'})

    def test_excel_export_applies_filters(self):
        response = self.client.get(reverse('dashboard-leads-exportar-excel'), {'status': 'converted'})

        wb = load_workbook(BytesIO(response.content))
        rows = list(wb['Leads'].iter_rows(values_only=True))
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][0], 'Vikram Shah')
        self.assertEqual(rows[1][8], 'Converted')

    def test_pdf_export(self):
        response = self.client.get(reverse('dashboard-leads-exportar-pdf'), {'search': 'asha'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response['Content-Type'], 'application/pdf')
        self.assertTrue(response.content.startswith(b'%PDF'))

    def test_invalid_status_filter(self):
        response = self.client.get(reverse('dashboard-leads-exportar-pdf'), {'status': 'archived'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])

    def test_requires_leads_tab(self):
        self.client.force_authenticate(user=UserFactory(permissions=['blogs']))
        response = self.client.get(reverse('dashboard-leads-exportar-excel'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class LeadReportTestCase(APITestCase):

    def test_summary_counts(self):
        leads = [
            LeadFactory(status=Lead.STATUS_NEW),
            LeadFactory(status=Lead.STATUS_CONTACTED, read=True),
            LeadFactory(status=Lead.STATUS_CONTACTED),
        ]
        summary = leads_summary(leads)
        self.assertEqual(summary['total'], 3)
        self.assertEqual(summary['unread'], 2)
        self.assertEqual(summary['Contacted'], 2)
        self.assertEqual(summary['Lost'], 0)

    def test_excel_summary_lists_filters(self):
        buffer = build_leads_excel([LeadFactory()], {'status': 'new', 'search': None})
        ws = load_workbook(buffer)['Summary']
        values = [cell.value for cell in ws['A'] if cell.value]
        self.assertIn('Status:', values)
        self.assertNotIn('Search:', values)
