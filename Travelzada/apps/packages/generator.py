"""
Completion of package skeletons with OpenAI.

A skeleton (usually a row built from the import workbook) is sent to the chat
completions API with a prompt asking for the marketing and SEO fields as one
JSON object. Whatever the model leaves out is filled with fixed fallbacks, so
a package is always complete even when the reply cannot be parsed.
"""
import json
import logging
import re

import openai
from django.conf import settings
from django.utils import timezone

from .utils import itinerary_to_text, resolve_duration, slugify_text

logger = logging.getLogger(__name__)


SYSTEM_MESSAGE = 'You are a JSON-only API. return valid JSON. No markdown code blocks.'

MAX_ITINERARY_CHARS = 20000

JSON_BLOCK_RE = re.compile(r'\{[\s\S]*\}')
SLUG_RE = re.compile(r'^[-a-zA-Z0-9_]+$')

DEFAULT_INCLUSIONS = 'Accommodation, Breakfast, Private Transfers, Sightseeing'
DEFAULT_EXCLUSIONS = 'Flights, Visa, Personal Expenses'

DEFAULT_BOOKING_POLICIES = {
    'booking': ['50% advance to confirm', 'Balance 15 days before travel'],
    'payment': ['Bank Transfer', 'UPI', 'Credit Card'],
    'cancellation': ['Free cancellation up to 30 days', 'No refund within 15 days'],
}

PROMPT_TEMPLATE = """
You are the Lead Travel Content Strategist for **TravelZada**, a premium travel brand for couples and honeymooners.

**TARGET AUDIENCE:**
- Indian Honeymooners (primary) & Couples (secondary), age 25-40.
- Premium experiential travel with value-for-money positioning.

**INPUT DATA:**
- **Destination:** {destination} ({country})
- **Duration:** {duration}
- **Tone:** Romantic, Premium, Reassuring
- **Price Range:** {price}
- **Star Category:** {star}
- **Primary Image:** {image}
- **Full Itinerary:** {itinerary}

------------------------------------------------------------------
**TASK:**
Generate a JSON object for this holiday package. Follow these instructions STRICTLY:

1. **Overview**: a 2-line hook on why this is perfect for a honeymoon or a couple.
2. **SEO_Title**: max 60 characters, destination first, duration included, ending with "| TravelZada".
   Format: [Destination] [Duration] Honeymoon Package for Couples | TravelZada
3. **SEO_Description**: max 155 characters, saying what is included and who it is for.
4. **SEO_Keywords**: 5-8 high-intent keywords, no brand stuffing.
5. **Day_Wise_Itinerary**: if the input itinerary is missing, plan a realistic {days}-day trip.
   Format: "Day 1: [Title] - [Brief Activity] | Day 2: ..." matching the duration.
6. **FAQ_Items**: exactly 5 or 6 conversational questions real travellers ask, at least 3 of them
   about specific itinerary highlights, covering value, experiences, pace, privacy and transfers,
   customization and season. Answers are 2-3 honest sentences without sales language.
7. **Guest_Reviews**: return an empty array. Do NOT generate fake reviews.
8. **Why_Book_With_Us**: 3 strong USP points.
9. **Slug**: lowercase, hyphens only, no stop words, no brand name, max 6-8 words
   (example: bali-6n-7d-honeymoon-package).

**STRICT VALIDATION RULES:**
- Output ONLY valid JSON. NO markdown. NO explanations.

**JSON STRUCTURE & ENUMS:**
{{
  "Overview": "string",
  "Mood": "Choose ONE from: Romantic, Relaxing, Scenic, Experiential, Adventurous, Cultural",
  "Occasion": "Choose ONE from: Honeymoon, Minimoon, Anniversary, Proposal, Pre-Wedding Shoot, Birthday Getaway, Wedding Ritual, Family Blessing, Milestone Celebration",
  "Travel_Type": "Couple",
  "Budget_Category": "Choose ONE from: Mid, Premium, Luxury (based on price range)",
  "Adventure_Level": "Choose ONE from: Low, Med, High",
  "Stay_Type": "Choose ONE from: Resort, Hotel, Villa, Boutique Stay, Overwater Villa",
  "Star_Category": "Choose from: 3-Star, 4-Star, 5-Star, 5-Star Deluxe based on price",
  "Rating": "A rating between 4.7 and 5.0 (format: X.X/5)",
  "Slug": "string",
  "Inclusions": "string",
  "Exclusions": "string",
  "Day_Wise_Itinerary": "string",
  "Location_Breakup": "string",
  "Airport_Code": "string",
  "Primary_Image_URL": "Unsplash URL string",
  "SEO_Title": "string",
  "SEO_Description": "string",
  "SEO_Keywords": "string",
  "Guest_Reviews": [],
  "FAQ_Items": [ {{ "question": "string", "answer": "string" }} ],
  "Why_Book_With_Us": [ {{ "label": "string", "description": "string" }} ],
  "Booking_Policies": {{ "booking": [], "payment": [], "cancellation": [] }}
}}
"""


class GenerationError(Exception):
    """Raised when the completion API cannot be reached or refuses the request."""


def get_client():
    return openai.OpenAI(api_key=settings.OPENAI_API_KEY)


def _list_text(value):
    if isinstance(value, (list, tuple)):
        return ', '.join(str(item) for item in value)
    return value if isinstance(value, str) else ''


def _itinerary_text(value):
    if isinstance(value, list):
        return itinerary_to_text(value)
    return value if isinstance(value, str) else ''


def build_prompt(pkg, duration, days):
    itinerary = _itinerary_text(pkg.get('Day_Wise_Itinerary'))[:MAX_ITINERARY_CHARS]
    return PROMPT_TEMPLATE.format(
        destination=pkg.get('Destination_Name') or 'Unknown Destination',
        country=pkg.get('Country') or 'International',
        duration=duration,
        price=pkg.get('Price_Range_INR') or 'N/A',
        star=pkg.get('Star_Category') or 'N/A',
        image=pkg.get('Primary_Image_URL') or 'N/A',
        itinerary=itinerary or 'Design a balanced mix of leisure and sightseeing.',
        days=days,
    )


def parse_completion(text):
    """First ``{...}`` block of the reply as a dict; ``{}`` when it does not parse."""
    if not text:
        return {}
    match = JSON_BLOCK_RE.search(text)
    candidate = match.group(0) if match else text.strip()
    try:
        data = json.loads(candidate.strip())
    except ValueError:
        logger.warning("AI response could not be parsed as JSON: %.200s", candidate)
        return {}
    return data if isinstance(data, dict) else {}


def request_completion(prompt, client=None):
    client = client or get_client()
    try:
        completion = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            response_format={'type': 'json_object'},
            messages=[
                {'role': 'system', 'content': SYSTEM_MESSAGE},
                {'role': 'user', 'content': prompt},
            ],
            max_completion_tokens=settings.OPENAI_MAX_TOKENS,
        )
    except openai.OpenAIError as e:
        raise GenerationError(str(e)) from e

    if not completion.choices:
        return '{}'
    return completion.choices[0].message.content or '{}'


def _non_empty_list(value):
    return isinstance(value, list) and len(value) > 0


def _has_booking(policies):
    return isinstance(policies, dict) and _non_empty_list(policies.get('booking'))


def merge_generated(pkg, generated, duration):
    """Applies the fallbacks to the model output for one skeleton."""
    destination = pkg.get('Destination_Name') or 'Unknown Destination'

    itinerary = generated.get('Day_Wise_Itinerary') or ''
    if isinstance(itinerary, list):
        itinerary = itinerary_to_text(itinerary)
    elif not itinerary and isinstance(pkg.get('Day_Wise_Itinerary'), list):
        itinerary = itinerary_to_text(pkg['Day_Wise_Itinerary'])

    if _has_booking(generated.get('Booking_Policies')):
        policies = generated['Booking_Policies']
    elif _has_booking(pkg.get('Booking_Policies')):
        policies = pkg['Booking_Policies']
    else:
        policies = DEFAULT_BOOKING_POLICIES

    if _non_empty_list(generated.get('FAQ_Items')):
        faqs = generated['FAQ_Items']
    else:
        faqs = pkg.get('FAQ_Items') if _non_empty_list(pkg.get('FAQ_Items')) else []

    if _non_empty_list(generated.get('Why_Book_With_Us')):
        why_book = generated['Why_Book_With_Us']
    else:
        why_book = pkg.get('Why_Book_With_Us') or []

    return {
        'Overview': generated.get('Overview') or f'Experience the magic of {destination} with this premium package.',
        'Mood': generated.get('Mood') or 'Romantic',
        'Occasion': generated.get('Occasion') or 'Honeymoon',
        'Travel_Type': 'Couple',
        'Budget_Category': generated.get('Budget_Category') or 'Premium',
        'Theme': '',
        'Adventure_Level': generated.get('Adventure_Level') or 'Low',
        'Stay_Type': generated.get('Stay_Type') or 'Resort',
        'Star_Category': pkg.get('Star_Category') or generated.get('Star_Category') or '4-Star',
        'Meal_Plan': 'Breakfast',
        'Child_Friendly': '',
        'Elderly_Friendly': '',
        'Language_Preference': '',
        'Seasonality': '',
        'Hotel_Examples': '',
        'Location_Breakup': generated.get('Location_Breakup') or '',
        'Airport_Code': generated.get('Airport_Code') or '',
        'Climate_Type': '',
        'Safety_Score': '',
        'Sustainability_Score': '',
        'Ideal_Traveler_Persona': '',
        'Transfer_Type': 'Private',
        'Rating': generated.get('Rating') or '4.8/5',
        'Inclusions': (
            _list_text(generated.get('Inclusions'))
            or _list_text(pkg.get('Inclusions'))
            or DEFAULT_INCLUSIONS
        ),
        'Exclusions': (
            _list_text(generated.get('Exclusions'))
            or _list_text(pkg.get('Exclusions'))
            or DEFAULT_EXCLUSIONS
        ),
        'Day_Wise_Itinerary': itinerary,
        'Primary_Image_URL': pkg.get('Primary_Image_URL') or generated.get('Primary_Image_URL') or '',
        'SEO_Title': generated.get('SEO_Title') or f'{destination} Honeymoon Package - {duration} | TravelZada',
        'SEO_Description': (
            generated.get('SEO_Description')
            or f'Book your {duration} {destination} honeymoon. Best prices & premium service.'
        ),
        'SEO_Keywords': generated.get('SEO_Keywords') or f'{destination} packages, honeymoon, travelzada',
        'Guest_Reviews': pkg.get('Guest_Reviews') or [],
        'Booking_Policies': policies,
        'FAQ_Items': faqs,
        'Why_Book_With_Us': why_book,
        'Slug': generated.get('Slug') or '',
    }


def generate_package(pkg, client=None):
    """Completed package for one skeleton; raises on API failure."""
    duration, nights, days = resolve_duration(pkg)
    logger.info("Generating package %s - %s", pkg.get('Destination_ID'), pkg.get('Destination_Name'))

    response_text = request_completion(build_prompt(pkg, duration, days), client=client)
    completed = merge_generated(pkg, parse_completion(response_text), duration)

    slug = completed.pop('Slug')
    if not slug or not SLUG_RE.match(str(slug)):
        slug = slugify_text(pkg.get('Destination_Name') or '')

    return {
        **pkg,
        **completed,
        'Slug': slug,
        'Booking_URL': f'{settings.SITE_URL.rstrip("/")}/packages/{slug}',
        'Last_Updated': timezone.localdate().isoformat(),
        'Created_By': 'AI Generator',
    }


def generate_packages(packages, client=None):
    """
    Completes every skeleton of ``packages``.

    A package that fails keeps its input data plus an ``_error`` message;
    returns ``(packages, generated_count, error_count)``.
    """
    client = client or get_client()
    results = []
    for pkg in packages:
        if not isinstance(pkg, dict):
            results.append({'_error': 'Invalid package data'})
            continue
        try:
            results.append(generate_package(pkg, client=client))
        except Exception as e:
            logger.exception("Error generating package %s", pkg.get('Destination_ID'))
            results.append({**pkg, '_error': str(e) or 'Generation failed'})

    errors = sum(1 for item in results if '_error' in item)
    return results, len(results) - errors, errors
