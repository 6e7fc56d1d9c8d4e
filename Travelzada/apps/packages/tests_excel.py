"""
Tests for the package workbook import.

Run:
    python manage.py test apps.packages.tests_excel
"""
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse
from openpyxl import Workbook, load_workbook
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory
from .excel import (
    build_template_workbook,
    classify_rows,
    find_sheet,
    format_review_date,
    load_package_workbook,
    prepare_import,
)
from .factories import PackageFactory
from .models import Package

XLSX = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def workbook_bytes(sheets):
    """``{sheet title: [header, row, ...]}`` -> xlsx bytes"""
    wb = Workbook()
    wb.remove(wb.active)
    for title, rows in sheets.items():
        ws = wb.create_sheet(title=title)
        for row in rows:
            ws.append(row)
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


SAMPLE_SHEETS = {
    'Destination_Master': [
        ['Destination_Code', 'Destination_Name', 'Country', 'Region'],
        ['BAL', 'Bali', 'Indonesia', 'International'],
    ],
    'Packages_Master': [
        ['Destination_ID', 'Destination_Name', 'Duration', 'Price_Range_INR', 'Inclusions'],
        ['BAL_001', '', '', '₹95,000 - ₹1,20,000', 'Hotel only'],
        ['BAL_002', 'Bali Escape', '4 Nights / 5 Days', '₹45,000', ''],
        ['', 'No ID', '', '', ''],
        [None, None, None, None, None],
    ],
    'Daywise_Itinerary': [
        ['Destination_ID', 'Day', 'Description'],
        ['BAL_001', 2, 'Ubud temples'],
        ['BAL_001', 1, 'Arrival in Bali'],
        ['BAL_001', 3, 'Departure'],
    ],
    'Inclusions_Exclusions': [
        ['Destination_ID', 'Inclusions', 'Exclusions'],
        ['BAL_002', 'Breakfast', 'Flights'],
        ['BAL_002', 'Airport Transfers', 'Visa'],
    ],
    'Guest_Reviews': [
        ['Destination_ID', 'Name', 'Content', 'Date', 'Rating'],
        ['BAL_001', 'Asha', 'Loved it', 45292, 5],
    ],
    'Booking_Policies': [
        ['Destination_ID', 'Policy_Type', 'Item'],
        ['BAL_001', 'Booking', '50% advance'],
        ['BAL_001', 'payment', 'UPI'],
        ['BAL_001', 'refund', 'Ignored'],
    ],
}


class WorkbookParsingTestCase(TestCase):

    def test_review_dates(self):
        self.assertEqual(format_review_date(45292), '01 January 2024')
        self.assertEqual(format_review_date('Last summer'), 'Last summer')
        self.assertEqual(format_review_date(None), '')

    def test_sheet_lookup_tries_terms_in_order(self):
        wb = Workbook()
        wb.active.title = 'Destinations Old'
        wb.create_sheet('Destination_Master')
        self.assertEqual(find_sheet(wb, ['destination_master', 'destinations']).title, 'Destination_Master')
        self.assertIsNone(find_sheet(wb, ['faq_items', 'faqs', 'faq']))

    def test_missing_sheets_give_empty_lists(self):
        sheets = load_package_workbook(BytesIO(workbook_bytes({
            'Packages_Master': [['Destination_ID', 'Destination_Name'], ['GOA_001', 'Goa']],
        })))
        self.assertEqual(len(sheets['packages']), 1)
        self.assertEqual(sheets['faqs'], [])
        self.assertEqual(sheets['why_book'], [])

    def test_package_inputs_join_child_sheets(self):
        sheets = load_package_workbook(BytesIO(workbook_bytes(SAMPLE_SHEETS)))
        result = prepare_import(sheets, set())
        packages = {pkg['Destination_ID']: pkg for pkg in result['packages']}

        self.assertEqual(result['new_ids'], ['BAL_001', 'BAL_002'])
        self.assertEqual(result['sheets']['packages'], 3)

        first = packages['BAL_001']
        self.assertEqual(first['Destination_Name'], 'Bali')
        self.assertEqual(first['Country'], 'Indonesia')
        self.assertEqual(first['Duration_Nights'], 3)
        self.assertEqual(first['Duration_Days'], 4)
        self.assertEqual(first['Duration'], '3 Nights / 4 Days')
        self.assertEqual(first['Budget_Category'], 'Mid')
        self.assertEqual(first['Inclusions'], 'Hotel only')
        self.assertEqual([day['day'] for day in first['Day_Wise_Itinerary']], [1, 2, 3])
        self.assertEqual(first['Guest_Reviews'][0]['date'], '01 January 2024')
        self.assertEqual(
            first['Booking_Policies'],
            {'booking': ['50% advance'], 'payment': ['UPI'], 'cancellation': []}
        )

        second = packages['BAL_002']
        self.assertEqual(second['Duration_Nights'], 4)
        self.assertEqual(second['Duration_Days'], 5)
        self.assertEqual(second['Duration'], '4 Nights / 5 Days')
        self.assertEqual(second['Budget_Category'], 'Budget')
        self.assertEqual(second['Inclusions'], 'Breakfast, Airport Transfers')
        self.assertEqual(second['Exclusions'], 'Flights, Visa')
        self.assertEqual(second['FAQ_Items'], [])

    def test_unknown_destination_code_falls_back_to_id(self):
        sheets = {'packages': [{'Destination_ID': 'ZZZ_001'}]}
        package = prepare_import(sheets, set())['packages'][0]
        self.assertEqual(package['Destination_Name'], 'ZZZ_001')
        self.assertEqual(package['Duration_Nights'], 0)
        self.assertEqual(package['Duration_Days'], 1)

    def test_classification(self):
        rows = [
            {'Destination_ID': ' bal_001 '},
            {'Destination_ID': 'BAL_0011'},
            {'Destination_ID': ''},
        ]
        new_rows, duplicates = classify_rows(rows, {'BAL_001'})
        self.assertEqual(duplicates, ['bal_001'])
        self.assertEqual([row['Destination_ID'] for row in new_rows], ['BAL_0011'])

    def test_template_has_eight_sheets_with_sample(self):
        wb = load_workbook(build_template_workbook())
        self.assertEqual(len(wb.sheetnames), 8)
        self.assertEqual(wb['Packages_Master']['A2'].value, 'BAL_001')
        self.assertEqual(wb['Destination_Master']['A2'].value, 'BAL')

        sheets = load_package_workbook(build_template_workbook())
        package = prepare_import(sheets, set())['packages'][0]
        self.assertEqual(package['Destination_Name'], 'Bali')
        self.assertEqual(package['Inclusions'], 'Breakfast, Airport Transfers')
        self.assertEqual(len(package['Why_Book_With_Us']), 1)


class ExcelEndpointsTestCase(APITestCase):

    def setUp(self):
        self.user = UserFactory(email='content@travelzada.test', permissions=['packages'])
        self.client.force_authenticate(user=self.user)

    def upload(self, content, name='packages.xlsx'):
        return SimpleUploadedFile(name, content, content_type=XLSX)

    def test_preview_lists_existing_ids_as_duplicates(self):
        PackageFactory(destination_id='BAL_001')
        response = self.client.post(
            reverse('package-excel-preview'),
            {'file': self.upload(workbook_bytes(SAMPLE_SHEETS))},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['new_ids'], ['BAL_002'])
        self.assertEqual(response.data['duplicate_ids'], ['BAL_001'])
        self.assertEqual(len(response.data['packages']), 1)

    def test_xls_is_rejected(self):
        response = self.client.post(
            reverse('package-excel-preview'),
            {'file': SimpleUploadedFile('old.xls', b'legacy', content_type='application/vnd.ms-excel')},
            format='multipart'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])
        self.assertIn('.xlsx', response.data['message'])

    def test_preview_without_file(self):
        response = self.client.post(reverse('package-excel-preview'), {}, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_import_creates_only_new_rows(self):
        PackageFactory(destination_id='BAL_001')
        response = self.client.post(
            reverse('package-excel-import'),
            {'file': self.upload(workbook_bytes(SAMPLE_SHEETS))},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['imported'], 1)
        package = Package.objects.get(destination_id='BAL_002')
        self.assertEqual(package.created_by, 'content@travelzada.test')
        self.assertEqual(package.inclusions, 'Breakfast, Airport Transfers')
        self.assertEqual(Package.objects.filter(destination_id='BAL_001').count(), 1)

    def test_import_generated_packages_json(self):
        response = self.client.post(reverse('package-excel-import'), {
            'packages': [
                {'Destination_ID': 'MAL_001', 'Destination_Name': 'Maldives', 'Created_By': 'AI Generator'},
                {'Destination_ID': 'MAL_002', 'Destination_Name': 'Maldives', 'Created_By': 'AI Generator',
                 '_error': 'timeout'},
            ],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['imported'], 1)
        self.assertEqual(Package.objects.get(destination_id='MAL_001').created_by, 'AI Generator')
        self.assertFalse(Package.objects.filter(destination_id='MAL_002').exists())

    def test_template_download(self):
        response = self.client.get(reverse('package-excel-template'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('Travelzada_Package_Template.xlsx', response['Content-Disposition'])
        wb = load_workbook(BytesIO(response.content))
        self.assertIn('Why_Book_With_Us', wb.sheetnames)
