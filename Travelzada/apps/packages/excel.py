"""
Spreadsheet import of packages.

The content team keeps packages in one workbook with a master sheet and one
sheet per nested list, all joined on ``Destination_ID``. This module reads
the workbook with openpyxl, joins the sheets into package inputs, splits them
into new and duplicate rows, and writes the blank template.
"""
import logging
from datetime import date, datetime, timedelta
from io import BytesIO

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from .utils import derive_budget, duration_label, first_int, normalize_package_id

logger = logging.getLogger(__name__)


SHEET_SEARCH_TERMS = {
    'destinations': ['destination_master', 'destinations', 'destination'],
    'packages': ['packages_master', 'packages', 'package'],
    'itinerary': ['daywise_itinerary', 'daywise', 'itinerary'],
    'inclusions': ['inclusions_exclusions', 'inclusions', 'inc_exc'],
    'reviews': ['guest_reviews', 'reviews'],
    'policies': ['booking_policies', 'policies'],
    'faqs': ['faq_items', 'faqs', 'faq'],
    'why_book': ['why_book_with_us', 'why_book'],
}

POLICY_TYPES = ('booking', 'payment', 'cancellation')

# Excel counts days from 1899-12-30; serial 25569 is 1970-01-01.
EXCEL_EPOCH_SERIAL = 25569

PACKAGE_TEMPLATE_HEADERS = [
    'Destination_ID', 'Destination_Name', 'Overview', 'Duration', 'Price_Range_INR',
    'Travel_Type', 'Mood', 'Occasion', 'Budget_Category', 'Theme', 'Adventure_Level',
    'Stay_Type', 'Star_Category', 'Meal_Plan', 'Group_Size', 'Child_Friendly',
    'Elderly_Friendly', 'Language_Preference', 'Seasonality', 'Hotel_Examples', 'Rating',
    'Location_Breakup', 'Airport_Code', 'Transfer_Type', 'Currency', 'Climate_Type',
    'Safety_Score', 'Sustainability_Score', 'Ideal_Traveler_Persona', 'Primary_Image_URL',
    'SEO_Title', 'SEO_Description', 'SEO_Keywords',
]

PACKAGE_TEMPLATE_SAMPLE = [
    'BAL_001', 'Bali', 'A beautiful escape...', '5 Nights / 6 Days', '₹50,000 - ₹70,000',
    'Family', 'Relax', 'Vacation', 'Mid', 'Beach', 'Light',
    'Resort', '4-Star', 'Breakfast', '2A 1C', 'Yes',
    'Yes', 'English', 'All Year', 'Sample Resort', '4.5/5',
    '3N Ubud', 'DPS', 'Private', 'INR', 'Tropical',
    '8/10', '7/10', 'Families', 'https://example.com/image.jpg',
    'Bali Package', 'Desc', 'bali, beach',
]

TEMPLATE_SHEETS = [
    ('Destination_Master', ['Destination_Code', 'Destination_Name', 'Country', 'Region'],
     [['BAL', 'Bali', 'Indonesia', 'International']]),
    ('Packages_Master', PACKAGE_TEMPLATE_HEADERS, [PACKAGE_TEMPLATE_SAMPLE]),
    ('Daywise_Itinerary', ['Destination_ID', 'Day', 'Description'],
     [['BAL_001', 1, 'Arrival in Bali']]),
    ('Inclusions_Exclusions', ['Destination_ID', 'Inclusions', 'Exclusions'],
     [['BAL_001', 'Breakfast, Airport Transfers', 'Flights, Personal Expenses']]),
    ('Guest_Reviews', ['Destination_ID', 'Name', 'Content', 'Date', 'Rating'],
     [['BAL_001', 'John Doe', 'Amazing trip!', '2024-01-01', 5]]),
    ('Booking_Policies', ['Destination_ID', 'Policy_Type', 'Item'],
     [['BAL_001', 'booking', '50% advance'],
      ['BAL_001', 'cancellation', 'No refund within 15 days']]),
    ('FAQ_Items', ['Destination_ID', 'Question', 'Answer'],
     [['BAL_001', 'Is breakfast included?', 'Yes']]),
    ('Why_Book_With_Us', ['Destination_ID', 'Label', 'Description'],
     [['BAL_001', '24/7 Support', 'We are always here']]),
]

TEMPLATE_FILENAME = 'Travelzada_Package_Template.xlsx'


class ExcelImportError(Exception):
    """Raised when the uploaded file cannot be read as a package workbook."""


def _clean(value):
    if value is None:
        return ''
    if isinstance(value, str):
        return value.strip()
    return value


def _text(value):
    value = _clean(value)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip() if value != '' else ''


def format_review_date(value):
    """Review dates as ``'01 January 2024'``; text is kept as written."""
    if value in (None, ''):
        return ''
    if isinstance(value, date):
        return value.strftime('%d %B %Y')
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        converted = datetime(1970, 1, 1) + timedelta(days=float(value) - EXCEL_EPOCH_SERIAL)
        return converted.strftime('%d %B %Y')
    return str(value).strip()


def find_sheet(workbook, search_terms):
    """First sheet whose lower-cased name contains one of ``search_terms``, tried in order."""
    names = workbook.sheetnames
    for term in search_terms:
        for name in names:
            if term in name.lower():
                return workbook[name]
    return None


def sheet_rows(worksheet):
    """Rows of a sheet as dicts keyed by the header row; empty rows are skipped."""
    if worksheet is None:
        return []

    rows = worksheet.iter_rows(values_only=True)
    try:
        header = next(rows)
    except StopIteration:
        return []

    keys = [_text(cell) for cell in header]
    result = []
    for row in rows:
        if row is None or all(_clean(cell) == '' for cell in row):
            continue
        record = {}
        for key, cell in zip(keys, row):
            if key:
                record[key] = _clean(cell)
        result.append(record)
    return result


def load_package_workbook(file_obj, filename=''):
    """
    Reads every known sheet of an uploaded workbook.

    Returns a dict with one list of row dicts per sheet key of
    ``SHEET_SEARCH_TERMS``; missing sheets give empty lists.
    """
    if filename and filename.lower().endswith('.xls'):
        raise ExcelImportError('Legacy .xls files are not supported. Please save the workbook as .xlsx.')

    if hasattr(file_obj, "read"):
        file_obj = BytesIO(file_obj.read())

    try:
        workbook = load_workbook(file_obj, read_only=True, data_only=True)
    except Exception as e:
        raise ExcelImportError(f'Could not read the Excel file: {e}') from e

    try:
        sheets = {
            key: sheet_rows(find_sheet(workbook, terms))
            for key, terms in SHEET_SEARCH_TERMS.items()
        }
    finally:
        workbook.close()

    logger.info(
        "Workbook read: %s",
        ", ".join(f"{key}={len(rows)}" for key, rows in sheets.items())
    )
    return sheets


def _group_by_destination(rows):
    grouped = {}
    for row in rows:
        dest_id = _text(row.get('Destination_ID'))
        if dest_id:
            grouped.setdefault(dest_id, []).append(row)
    return grouped


def build_lookups(sheets):
    """Indexes the child sheets by destination ID."""
    destinations = {}
    for row in sheets.get('destinations', []):
        code = _text(row.get('Destination_Code'))
        if code:
            destinations[code] = row

    itinerary = {}
    for dest_id, rows in _group_by_destination(sheets.get('itinerary', [])).items():
        days = [
            {'day': first_int(row.get('Day')) or 0, 'description': _text(row.get('Description'))}
            for row in rows
        ]
        itinerary[dest_id] = sorted(days, key=lambda item: item['day'])

    inclusions = {}
    exclusions = {}
    for dest_id, rows in _group_by_destination(sheets.get('inclusions', [])).items():
        inclusions[dest_id] = [_text(row.get('Inclusions')) for row in rows if _text(row.get('Inclusions'))]
        exclusions[dest_id] = [_text(row.get('Exclusions')) for row in rows if _text(row.get('Exclusions'))]

    reviews = {}
    for dest_id, rows in _group_by_destination(sheets.get('reviews', [])).items():
        reviews[dest_id] = [
            {
                'name': _text(row.get('Name')),
                'content': _text(row.get('Content')),
                'date': format_review_date(row.get('Date')),
                'rating': _text(row.get('Rating')),
            }
            for row in rows
        ]

    policies = {}
    for dest_id, rows in _group_by_destination(sheets.get('policies', [])).items():
        buckets = {policy_type: [] for policy_type in POLICY_TYPES}
        for row in rows:
            policy_type = _text(row.get('Policy_Type')).lower()
            item = _text(row.get('Item'))
            if policy_type in buckets and item:
                buckets[policy_type].append(item)
        policies[dest_id] = buckets

    faqs = {}
    for dest_id, rows in _group_by_destination(sheets.get('faqs', [])).items():
        faqs[dest_id] = [
            {'question': _text(row.get('Question')), 'answer': _text(row.get('Answer'))}
            for row in rows
        ]

    why_book = {}
    for dest_id, rows in _group_by_destination(sheets.get('why_book', [])).items():
        why_book[dest_id] = [
            {'label': _text(row.get('Label')), 'description': _text(row.get('Description'))}
            for row in rows
        ]

    return {
        'destinations': destinations,
        'itinerary': itinerary,
        'inclusions': inclusions,
        'exclusions': exclusions,
        'reviews': reviews,
        'policies': policies,
        'faqs': faqs,
        'why_book': why_book,
    }


def build_package_input(row, lookups):
    """Joins one ``Packages_Master`` row with its destination and child rows."""
    pkg_id = _text(row.get('Destination_ID'))
    dest_code = pkg_id[:3]
    destination = lookups['destinations'].get(dest_code) or {'Destination_Name': pkg_id}

    itinerary = lookups['itinerary'].get(pkg_id, [])
    inclusions = lookups['inclusions'].get(pkg_id, [])
    exclusions = lookups['exclusions'].get(pkg_id, [])

    nights = len(itinerary) or first_int(row.get('Duration')) or 0
    days = nights + 1
    price_range = _text(row.get('Price_Range_INR'))

    package = {key: _text(value) for key, value in row.items()}
    package.update({
        'Destination_ID': pkg_id,
        'Destination_Name': _text(row.get('Destination_Name')) or _text(destination.get('Destination_Name')),
        'Country': _text(destination.get('Country')),
        'Price_Range_INR': price_range,
        'Duration': _text(row.get('Duration')) or duration_label(nights, days),
        'Duration_Nights': nights,
        'Duration_Days': days,
        'Budget_Category': _text(row.get('Budget_Category')) or derive_budget(price_range),
        'Inclusions': ', '.join(inclusions) if inclusions else _text(row.get('Inclusions')),
        'Exclusions': ', '.join(exclusions) if exclusions else _text(row.get('Exclusions')),
        'Guest_Reviews': lookups['reviews'].get(pkg_id, []),
        'Booking_Policies': lookups['policies'].get(
            pkg_id, {policy_type: [] for policy_type in POLICY_TYPES}
        ),
        'FAQ_Items': lookups['faqs'].get(pkg_id, []),
        'Why_Book_With_Us': lookups['why_book'].get(pkg_id, []),
    })
    package['Day_Wise_Itinerary'] = itinerary if itinerary else _text(row.get('Day_Wise_Itinerary'))
    return package


def classify_rows(package_rows, existing_ids):
    """
    Splits master rows into ``(new_rows, duplicate_ids)``.

    ``existing_ids`` holds normalized IDs. Rows without an ID are in
    neither group.
    """
    existing = {normalize_package_id(value) for value in existing_ids}
    new_rows = []
    duplicate_ids = []
    for row in package_rows:
        pkg_id = _text(row.get('Destination_ID'))
        if not pkg_id:
            continue
        if normalize_package_id(pkg_id) in existing:
            duplicate_ids.append(pkg_id)
        else:
            new_rows.append(row)
    return new_rows, duplicate_ids


def prepare_import(sheets, existing_ids):
    """Package inputs for the new rows plus the preview summary."""
    new_rows, duplicate_ids = classify_rows(sheets.get('packages', []), existing_ids)
    lookups = build_lookups(sheets)
    packages = [build_package_input(row, lookups) for row in new_rows]
    return {
        'sheets': {key: len(rows) for key, rows in sheets.items()},
        'new_ids': [pkg['Destination_ID'] for pkg in packages],
        'duplicate_ids': duplicate_ids,
        'packages': packages,
    }


def build_template_workbook():
    """Blank import workbook with headers and one sample row per sheet, as bytes."""
    wb = Workbook()
    wb.remove(wb.active)

    header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF", size=11)
    header_alignment = Alignment(horizontal="center", vertical="center")

    for title, headers, samples in TEMPLATE_SHEETS:
        ws = wb.create_sheet(title=title)
        for col_num, header in enumerate(headers, 1):
            cell = ws.cell(row=1, column=col_num)
            cell.value = header
            cell.fill = header_fill
            cell.font = header_font
            cell.alignment = header_alignment
        for sample in samples:
            ws.append(sample)

        for col_num, header in enumerate(headers, 1):
            width = max(len(str(header)), *(len(str(sample[col_num - 1])) for sample in samples))
            ws.column_dimensions[get_column_letter(col_num)].width = min(width + 2, 50)

    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    return buffer
