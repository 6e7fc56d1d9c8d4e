"""
Lead report exports to PDF and Excel.
"""
from io import BytesIO
from datetime import datetime

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.enums import TA_CENTER

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill

from django.utils.html import escape

from apps.leads.models import Lead

HEADER_COLOR = '3498db'

LEAD_COLUMNS = [
    'Name', 'Mobile', 'Email', 'Package', 'Destination', 'Travel Date',
    'Travelers', 'Budget', 'Status', 'Read', 'Created',
]


def status_label(value):
    return dict(Lead.STATUS_CHOICES).get(value, value)


def lead_row(lead):
    return [
        lead.name,
        lead.mobile,
        lead.email,
        lead.package_name,
        lead.destination,
        lead.travel_date.strftime('%d/%m/%Y') if lead.travel_date else '',
        lead.travelers_count or '',
        lead.budget,
        status_label(lead.status),
        'Yes' if lead.read else 'No',
        lead.created_at.strftime('%d/%m/%Y %H:%M'),
    ]


def leads_summary(leads):
    summary = {'total': len(leads), 'unread': sum(1 for lead in leads if not lead.read)}
    for value, label in Lead.STATUS_CHOICES:
        summary[label] = sum(1 for lead in leads if lead.status == value)
    return summary


def filters_text(filters):
    parts = [f"<b>{key.replace('_', ' ').title()}:</b> {escape(value)}" for key, value in filters.items() if value]
    return ' | '.join(parts) or '<b>Filters:</b> none'


# ============================================================================
# PDF
# ============================================================================

def build_leads_pdf(leads, filters):
    """
    Landscape PDF with the lead list.

    Args:
        leads: Lead instances, already filtered
        filters: Dict with the query parameters applied

    Returns:
        BytesIO with the PDF
    """
    leads = list(leads)
    buffer = BytesIO()

    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        rightMargin=1*cm,
        leftMargin=1*cm,
        topMargin=2*cm,
        bottomMargin=2*cm
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'LeadsTitle',
        parent=styles['Heading1'],
        fontSize=16,
        textColor=colors.HexColor('#2c3e50'),
        spaceAfter=12,
        alignment=TA_CENTER
    )
    cell_style = ParagraphStyle('LeadCell', parent=styles['Normal'], fontSize=8, leading=10)

    story = [Paragraph("TRAVELZADA LEADS REPORT", title_style), Spacer(1, 0.5*cm)]
    story.append(Paragraph(filters_text(filters), styles['Normal']))
    story.append(Spacer(1, 0.3*cm))

    summary = leads_summary(leads)
    summary_text = f"<b>Total Leads:</b> {summary['total']} | <b>Unread:</b> {summary['unread']}"
    for _, label in Lead.STATUS_CHOICES:
        summary_text += f" | <b>{label}:</b> {summary[label]}"
    story.append(Paragraph(summary_text, styles['Normal']))
    story.append(Spacer(1, 0.5*cm))

    columns = ['Name', 'Mobile', 'Package', 'Destination', 'Travel Date', 'Travelers', 'Status', 'Created']
    table_data = [columns]
    for lead in leads:
        row = dict(zip(LEAD_COLUMNS, lead_row(lead)))
        table_data.append([
            Paragraph(escape(row['Name']), cell_style),
            row['Mobile'],
            Paragraph(escape(row['Package'][:60]), cell_style),
            Paragraph(escape(row['Destination']), cell_style),
            row['Travel Date'],
            str(row['Travelers']),
            row['Status'],
            row['Created'],
        ])

    table = Table(
        table_data,
        repeatRows=1,
        colWidths=[4.5*cm, 2.8*cm, 6*cm, 3.8*cm, 2.4*cm, 2*cm, 2.4*cm, 3.2*cm]
    )
    table.setStyle(TableStyle([
        # Header
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor(f'#{HEADER_COLOR}')),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (0, 0), (-1, 0), 'CENTER'),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, 0), 9),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 12),

        # Body
        ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
        ('FONTSIZE', (0, 1), (-1, -1), 8),
        ('VALIGN', (0, 1), (-1, -1), 'MIDDLE'),
        ('ALIGN', (4, 1), (6, -1), 'CENTER'),

        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),

        # Zebra stripes
        *[('BACKGROUND', (0, i), (-1, i), colors.HexColor('#ecf0f1'))
          for i in range(2, len(table_data), 2)]
    ]))
    story.append(table)

    story.append(Spacer(1, 1*cm))
    story.append(Paragraph(f"Generated: {datetime.now().strftime('%d/%m/%Y %H:%M')}", styles['Normal']))

    doc.build(story)
    buffer.seek(0)
    return buffer


# ============================================================================
# EXCEL
# ============================================================================

def build_leads_excel(leads, filters):
    """Workbook with a summary sheet and a data sheet of leads."""
    leads = list(leads)
    buffer = BytesIO()
    wb = Workbook()

    # ===== SHEET 1: SUMMARY =====
    ws_summary = wb.active
    ws_summary.title = "Summary"

    ws_summary['A1'] = "TRAVELZADA LEADS REPORT"
    ws_summary['A1'].font = Font(size=16, bold=True)
    ws_summary.merge_cells('A1:D1')

    summary = leads_summary(leads)
    rows = [("Total Leads:", summary['total']), ("Unread:", summary['unread'])]
    rows += [(f"{label}:", summary[label]) for _, label in Lead.STATUS_CHOICES]
    for offset, (label, value) in enumerate(rows):
        ws_summary.cell(row=3 + offset, column=1, value=label)
        ws_summary.cell(row=3 + offset, column=2, value=value)

    next_row = 4 + len(rows)
    for key, value in filters.items():
        if value:
            ws_summary.cell(row=next_row, column=1, value=f"{key.replace('_', ' ').title()}:")
            ws_summary.cell(row=next_row, column=2, value=str(value))
            next_row += 1
    ws_summary.column_dimensions['A'].width = 20

    # ===== SHEET 2: DATA =====
    ws_data = wb.create_sheet("Leads")
    ws_data.append(LEAD_COLUMNS)

    header_fill = PatternFill(start_color=HEADER_COLOR, end_color=HEADER_COLOR, fill_type="solid")
    header_font = Font(color="FFFFFF", bold=True)
    for cell in ws_data[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal='center', vertical='center')

    for lead in leads:
        ws_data.append(lead_row(lead))

    # Column widths
    for column in ws_data.columns:
        column_letter = column[0].column_letter
        max_length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column)
        ws_data.column_dimensions[column_letter].width = min(max_length + 2, 50)

    ws_data.auto_filter.ref = ws_data.dimensions

    wb.save(buffer)
    buffer.seek(0)
    return buffer
