"""
PDF rendering of customer itineraries.

The document is drawn on a reportlab canvas with a manually tracked ``y``
cursor: every block checks the room left above the bottom margin and opens a
new page when it would not fit. Each page carries the contact footer.
"""
import logging
import re
from io import BytesIO

import qrcode
from django.conf import settings
from django.utils import timezone
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas

from apps.packages.utils import duration_label, parse_itinerary_text, split_list_text

logger = logging.getLogger(__name__)


PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 50
BOTTOM_MARGIN = 60
CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN

TITLE_FONT = "Helvetica-Bold"
NORMAL_FONT = "Helvetica"

COLOR_INK = colors.HexColor("#1f2937")
COLOR_PRIMARY = colors.HexColor("#7c3aed")
COLOR_CREAM = colors.HexColor("#fbf7f2")
COLOR_MUTED = colors.HexColor("#4b5563")
COLOR_LINE = colors.HexColor("#e5e7eb")
COLOR_GREEN = colors.HexColor("#16a34a")
COLOR_RED = colors.HexColor("#ef4444")
COLOR_WHATSAPP = colors.HexColor("#25d366")

MAX_HIGHLIGHTS = 8
MAX_REVIEWS = 3
MAX_FAQS = 5
POLICY_MIN_SPACE = 120

POLICY_SECTIONS = (
    ("booking", "Booking Terms"),
    ("payment", "Payment Policy"),
    ("cancellation", "Cancellation Policy"),
)


def contact_digits():
    return re.sub(r"\D", "", settings.CONTACT_PHONE)


def whatsapp_url():
    return f"https://wa.me/{contact_digits()}"


def phone_url():
    return f"tel:+{contact_digits()}"


def footer_text():
    return f"Travelzada • {settings.CONTACT_PHONE_DISPLAY} • {settings.CONTACT_EMAIL}"


def itinerary_filename(client_name):
    name = re.sub(r"\s+", "_", (client_name or "Client").strip())
    return f"{name}_Itinerary.pdf"


def format_amount(amount):
    return f"INR {amount:,.0f}"


def qr_image(data):
    qr = qrcode.QRCode(version=1, box_size=10, border=4)
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    buffer.seek(0)
    return ImageReader(buffer)


def package_duration(package):
    if package is None:
        return ""
    if package.duration:
        return package.duration
    if package.duration_nights and package.duration_days:
        return duration_label(package.duration_nights, package.duration_days)
    return ""


def itinerary_rows(record, package):
    """Rows of the day-wise table: the custom plan, or the package itinerary text."""
    rows = []
    if record.custom_itinerary:
        for index, item in enumerate(record.custom_itinerary, start=1):
            rows.append({
                "day": item.get("day") or index,
                "title": item.get("title") or "",
                "description": item.get("description") or "",
            })
    elif package is not None:
        rows = parse_itinerary_text(package.day_wise_itinerary)

    for row in rows:
        day = str(row["day"])
        row["day"] = day if day.lower().startswith("day") else f"Day {day}"
    return rows


def quoted_amount(record, package):
    """``(label, amount)`` shown on the cover."""
    if record.total_cost and record.total_cost > 0:
        return "TOTAL TRIP COST", record.total_cost
    if package is not None and package.price_min_inr:
        return "STARTING FROM", package.price_min_inr
    return "STARTING FROM", None


class ItineraryPDF:
    """Renders one ``CustomerItinerary`` (and its package, when known) to PDF."""

    def __init__(self, record, package=None):
        self.record = record
        self.package = package if package is not None else record.package
        self.buffer = BytesIO()
        self.canvas = canvas.Canvas(self.buffer, pagesize=A4)
        self.canvas.setTitle(itinerary_filename(record.client_name))
        self.y = PAGE_HEIGHT - MARGIN
        self.page = 1
        self.draw_footer()

    # ----- page handling -----
    def draw_footer(self):
        c = self.canvas
        c.setFont(NORMAL_FONT, 8)
        c.setFillColor(COLOR_MUTED)
        c.drawCentredString(PAGE_WIDTH / 2, 25, footer_text())
        c.drawRightString(PAGE_WIDTH - MARGIN, 25, str(self.page))

    def new_page(self):
        self.canvas.showPage()
        self.page += 1
        self.y = PAGE_HEIGHT - MARGIN
        self.draw_footer()

    def ensure_space(self, height):
        if self.y - height < BOTTOM_MARGIN:
            self.new_page()

    def wrap(self, text, font, size, width):
        return simpleSplit(str(text or ""), font, size, width)

    def heading(self, text, size=20):
        self.ensure_space(size + 20)
        c = self.canvas
        c.setFont(TITLE_FONT, size)
        c.setFillColor(COLOR_INK)
        c.drawString(MARGIN, self.y, text)
        self.y -= size + 10

    def paragraph(self, text, size=10, x=MARGIN, width=CONTENT_WIDTH, color=COLOR_MUTED, font=NORMAL_FONT, leading=None):
        leading = leading or size + 4
        for line in self.wrap(text, font, size, width):
            self.ensure_space(leading)
            self.canvas.setFont(font, size)
            self.canvas.setFillColor(color)
            self.canvas.drawString(x, self.y, line)
            self.y -= leading

    # ----- sections -----
    def draw_cover(self):
        c = self.canvas
        record, package = self.record, self.package

        title = package.destination_name if package is not None else (record.package_name or record.destination_name)
        self.y = PAGE_HEIGHT - 180

        c.setFillColor(COLOR_INK)
        c.setFont(TITLE_FONT, 28)
        for line in self.wrap(title, TITLE_FONT, 28, CONTENT_WIDTH):
            c.drawCentredString(PAGE_WIDTH / 2, self.y, line)
            self.y -= 34

        if package is not None:
            tags = [package_duration(package), package.star_category, package.travel_type]
            c.setFont(NORMAL_FONT, 11)
            c.setFillColor(COLOR_MUTED)
            c.drawCentredString(PAGE_WIDTH / 2, self.y, " • ".join(tag for tag in tags if tag))
            self.y -= 30

        c.setFont(TITLE_FONT, 12)
        c.setFillColor(COLOR_PRIMARY)
        c.drawCentredString(PAGE_WIDTH / 2, self.y, f"Prepared for {record.client_name}")
        self.y -= 40

        label, amount = quoted_amount(record, package)
        c.setFont(TITLE_FONT, 10)
        c.setFillColor(COLOR_MUTED)
        c.drawCentredString(PAGE_WIDTH / 2, self.y, label)
        self.y -= 32

        c.setFont(TITLE_FONT, 26)
        c.setFillColor(COLOR_INK)
        c.drawCentredString(PAGE_WIDTH / 2, self.y, format_amount(amount) if amount else "On request")
        self.y -= 18

        c.setFont(NORMAL_FONT, 10)
        c.setFillColor(COLOR_MUTED)
        c.drawCentredString(PAGE_WIDTH / 2, self.y, "per person")
        self.y -= 16

        c.setFont(NORMAL_FONT, 9)
        c.drawCentredString(PAGE_WIDTH / 2, self.y, f"Quoted on {timezone.localdate().strftime('%d %B %Y')}")
        self.y -= 40

        if package is not None and package.overview:
            for line in self.wrap(package.overview, NORMAL_FONT, 11, CONTENT_WIDTH - 40):
                self.ensure_space(16)
                c.setFont(NORMAL_FONT, 11)
                c.setFillColor(COLOR_MUTED)
                c.drawCentredString(PAGE_WIDTH / 2, self.y, line)
                self.y -= 16

    def draw_trip_details(self):
        c = self.canvas
        record = self.record
        travellers = f"{record.adults} Adults"
        if record.children:
            travellers += f", {record.children} Children"

        cells = [
            ("Destination", record.destination_name or record.package_name),
            ("Travel Date", record.travel_date.strftime("%d %B %Y") if record.travel_date else "Flexible"),
            ("Travellers", travellers),
            ("Duration", package_duration(self.package) or "-"),
        ]

        box_height = 80
        self.ensure_space(box_height + 20)
        c.setFillColor(COLOR_CREAM)
        c.roundRect(MARGIN, self.y - box_height, CONTENT_WIDTH, box_height, 8, stroke=0, fill=1)

        col_x = (MARGIN + 15, MARGIN + CONTENT_WIDTH / 2 + 15)
        row_y = self.y - 22
        for index, (label, value) in enumerate(cells):
            x = col_x[index % 2]
            y = row_y - (index // 2) * 36
            c.setFont(TITLE_FONT, 10)
            c.setFillColor(COLOR_INK)
            c.drawString(x, y, label)
            c.setFont(NORMAL_FONT, 10)
            c.setFillColor(COLOR_MUTED)
            c.drawString(x, y - 14, str(value or "-"))

        self.y -= box_height + 30

    def draw_highlights(self):
        highlights = split_list_text(self.package.inclusions if self.package is not None else "")[:MAX_HIGHLIGHTS]
        if not highlights:
            return
        self.heading("Highlights")
        for item in highlights:
            self.ensure_space(16)
            self.canvas.setFont(TITLE_FONT, 11)
            self.canvas.setFillColor(COLOR_PRIMARY)
            self.canvas.drawString(MARGIN, self.y, "+")
            self.paragraph(item, size=11, x=MARGIN + 14, width=CONTENT_WIDTH - 14, color=COLOR_INK, leading=16)
        self.y -= 10

    def draw_card(self, title, lines):
        c = self.canvas
        height = 26 + 14 * len(lines)
        self.ensure_space(height + 10)
        c.setStrokeColor(COLOR_LINE)
        c.setFillColor(colors.white)
        c.roundRect(MARGIN, self.y - height, CONTENT_WIDTH, height, 6, stroke=1, fill=1)

        c.setFont(TITLE_FONT, 11)
        c.setFillColor(COLOR_INK)
        c.drawString(MARGIN + 12, self.y - 18, title)
        c.setFont(NORMAL_FONT, 9)
        c.setFillColor(COLOR_MUTED)
        line_y = self.y - 32
        for line in lines:
            c.drawString(MARGIN + 12, line_y, line)
            line_y -= 14
        self.y -= height + 10

    def draw_flights(self):
        if not self.record.flights:
            return
        self.heading("Flight Details", size=15)
        for flight in self.record.flights:
            title = " ".join(part for part in (flight.get("airline"), flight.get("flight_number")) if part) or "Flight"
            if flight.get("type"):
                title = f"{flight['type'].title()} - {title}"
            self.draw_card(title, [
                f"{flight.get('from') or '-'} to {flight.get('to') or '-'}",
                f"Date: {flight.get('date') or '-'}   Departure: {flight.get('departure_time') or '-'}"
                f"   Arrival: {flight.get('arrival_time') or '-'}",
            ])

    def draw_hotels(self):
        if not self.record.hotels:
            return
        self.heading("Accommodation", size=15)
        for hotel in self.record.hotels:
            nights = hotel.get("nights") or 0
            self.draw_card(hotel.get("name") or "Hotel", [
                f"{hotel.get('city') or '-'}   {hotel.get('room_type') or ''}".rstrip(),
                f"Check-in: {hotel.get('check_in') or '-'}   Check-out: {hotel.get('check_out') or '-'}"
                f"   {nights} Night{'s' if nights != 1 else ''}",
            ])

    def draw_itinerary(self):
        rows = itinerary_rows(self.record, self.package)
        if not rows:
            return

        c = self.canvas
        self.new_page()
        self.heading("Day-wise Itinerary")

        day_width = 70
        text_width = CONTENT_WIDTH - day_width - 20
        header_height = 22

        c.setFillColor(COLOR_PRIMARY)
        c.rect(MARGIN, self.y - header_height + 6, CONTENT_WIDTH, header_height, stroke=0, fill=1)
        c.setFont(TITLE_FONT, 9)
        c.setFillColor(colors.white)
        c.drawString(MARGIN + 8, self.y - 8, "Day")
        c.drawString(MARGIN + day_width + 8, self.y - 8, "Activities")
        self.y -= header_height

        for index, row in enumerate(rows):
            text = row["title"]
            if row["description"] and row["description"] != row["title"]:
                text = f"{row['title']}\n{row['description']}" if row["title"] else row["description"]
            lines = []
            for chunk in text.split("\n"):
                lines.extend(self.wrap(chunk, NORMAL_FONT, 9, text_width))
            row_height = max(24, len(lines) * 12 + 12)

            if self.y - row_height < BOTTOM_MARGIN:
                self.new_page()

            c.setFillColor(COLOR_CREAM if index % 2 == 0 else colors.white)
            c.rect(MARGIN, self.y - row_height + 6, CONTENT_WIDTH, row_height, stroke=0, fill=1)

            c.setFont(TITLE_FONT, 9)
            c.setFillColor(COLOR_PRIMARY)
            c.drawString(MARGIN + 8, self.y - 8, row["day"])

            c.setFont(NORMAL_FONT, 9)
            c.setFillColor(COLOR_INK)
            line_y = self.y - 8
            for line in lines:
                c.drawString(MARGIN + day_width + 8, line_y, line)
                line_y -= 12

            c.setStrokeColor(COLOR_LINE)
            c.setLineWidth(0.5)
            c.line(MARGIN, self.y - row_height + 6, MARGIN + CONTENT_WIDTH, self.y - row_height + 6)
            self.y -= row_height

        self.y -= 10

    def draw_inclusions(self):
        if self.package is None:
            return
        inclusions = split_list_text(self.package.inclusions)
        exclusions = split_list_text(self.package.exclusions)
        if not inclusions and not exclusions:
            return

        c = self.canvas
        self.new_page()
        col_width = (CONTENT_WIDTH - 20) / 2
        columns = (
            ("Inclusions", MARGIN, "+", COLOR_GREEN),
            ("Exclusions", MARGIN + col_width + 20, "-", COLOR_RED),
        )
        pending = [
            [self.wrap(item, NORMAL_FONT, 10, col_width - 24) for item in items]
            for items in (inclusions, exclusions)
        ]

        continued = False
        while any(pending):
            if continued:
                self.new_page()
            heights = [40 + sum(len(lines) * 13 + 4 for lines in column) for column in pending]
            box_height = min(max(heights + [100]), self.y - BOTTOM_MARGIN)

            top = self.y
            for index, ((title, x, marker, color), column) in enumerate(zip(columns, pending)):
                if continued and not column:
                    continue
                c.setFillColor(COLOR_CREAM)
                c.roundRect(x, top - box_height, col_width, box_height, 8, stroke=0, fill=1)
                c.setFont(TITLE_FONT, 16)
                c.setFillColor(COLOR_INK)
                c.drawString(x + 10, top - 24, f"{title} (continued)" if continued else title)

                y = top - 44
                drawn = 0
                for lines in column:
                    # at least one item per box
                    if drawn and y - len(lines) * 13 < top - box_height:
                        break
                    c.setFont(TITLE_FONT, 10)
                    c.setFillColor(color)
                    c.drawString(x + 10, y, marker)
                    c.setFont(NORMAL_FONT, 10)
                    c.setFillColor(COLOR_INK)
                    for line in lines:
                        c.drawString(x + 22, y, line)
                        y -= 13
                    y -= 4
                    drawn += 1
                pending[index] = column[drawn:]

            self.y = top - box_height - 20
            continued = True

    def draw_policies(self):
        policies = self.package.booking_policies if self.package is not None else None
        if not isinstance(policies, dict) or not any(policies.get(key) for key, _ in POLICY_SECTIONS):
            return

        if self.y - POLICY_MIN_SPACE < BOTTOM_MARGIN:
            self.new_page()
        self.heading("Booking Policies")

        for key, title in POLICY_SECTIONS:
            items = split_list_text(policies.get(key))
            if not items:
                continue
            self.ensure_space(40)
            self.canvas.setFont(TITLE_FONT, 12)
            self.canvas.setFillColor(COLOR_PRIMARY)
            self.canvas.drawString(MARGIN, self.y, title)
            self.y -= 16
            for item in items:
                self.ensure_space(14)
                self.canvas.setFont(NORMAL_FONT, 10)
                self.canvas.setFillColor(COLOR_PRIMARY)
                self.canvas.drawString(MARGIN, self.y, "•")
                self.paragraph(item, x=MARGIN + 10, width=CONTENT_WIDTH - 10)
            self.y -= 8

    def draw_reviews(self):
        reviews = self.package.guest_reviews if self.package is not None else []
        reviews = [review for review in reviews or [] if review][:MAX_REVIEWS]
        if not reviews:
            return
        self.heading("What Our Guests Say", size=16)
        for review in reviews:
            if isinstance(review, dict):
                text = (
                    review.get("content") or review.get("review") or review.get("text") or review.get("comment") or ""
                )
                author = review.get("name") or review.get("author") or "Guest"
            else:
                text, author = str(review), "Guest"
            self.paragraph(f'"{text}"', color=COLOR_INK)
            self.paragraph(f"- {author}", size=9, font=TITLE_FONT)
            self.y -= 6

    def draw_faqs(self):
        faqs = self.package.faq_items if self.package is not None else []
        faqs = [faq for faq in faqs or [] if isinstance(faq, dict)][:MAX_FAQS]
        if not faqs:
            return
        if self.y - POLICY_MIN_SPACE < BOTTOM_MARGIN:
            self.new_page()
        self.heading("Frequently Asked Questions")
        for faq in faqs:
            self.paragraph(f"Q: {faq.get('question', '')}", color=COLOR_INK, font=TITLE_FONT)
            self.paragraph(f"A: {faq.get('answer', '')}")
            self.y -= 8

    def draw_call_to_action(self):
        c = self.canvas
        qr_size = 90
        self.ensure_space(qr_size + 80)
        self.y -= 10

        c.setFont(TITLE_FONT, 16)
        c.setFillColor(COLOR_INK)
        c.drawCentredString(PAGE_WIDTH / 2, self.y, "Ready to book?")
        self.y -= 30

        button_width, button_height, gap = 140, 30, 20
        start_x = (PAGE_WIDTH - (button_width * 2 + gap)) / 2
        buttons = (
            ("WhatsApp Us", whatsapp_url(), COLOR_WHATSAPP, start_x),
            ("Call Us", phone_url(), COLOR_INK, start_x + button_width + gap),
        )
        for label, url, color, x in buttons:
            c.setFillColor(color)
            c.roundRect(x, self.y - button_height, button_width, button_height, 6, stroke=0, fill=1)
            c.setFont(TITLE_FONT, 11)
            c.setFillColor(colors.white)
            c.drawCentredString(x + button_width / 2, self.y - 19, label)
            c.linkURL(url, (x, self.y - button_height, x + button_width, self.y), relative=0)
        self.y -= button_height + 20

        c.drawImage(
            qr_image(whatsapp_url()),
            (PAGE_WIDTH - qr_size) / 2,
            self.y - qr_size,
            width=qr_size,
            height=qr_size
        )
        self.y -= qr_size + 12
        c.setFont(NORMAL_FONT, 8)
        c.setFillColor(COLOR_MUTED)
        c.drawCentredString(PAGE_WIDTH / 2, self.y, "Scan to chat with us on WhatsApp")

    def render(self):
        self.draw_cover()

        self.new_page()
        self.draw_trip_details()
        self.draw_highlights()
        self.draw_flights()
        self.draw_hotels()

        self.draw_itinerary()
        self.draw_inclusions()
        self.draw_policies()
        self.draw_reviews()
        self.draw_faqs()
        self.draw_call_to_action()

        self.canvas.save()
        self.buffer.seek(0)
        logger.info(
            "Itinerary PDF for %s rendered (%s pages)", self.record.client_name, self.page
        )
        return self.buffer


def render_itinerary_pdf(record, package=None):
    """BytesIO with the itinerary PDF of ``record``."""
    return ItineraryPDF(record, package).render()
