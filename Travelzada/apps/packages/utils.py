"""
Small helpers shared by the package import, the AI generator and the
itinerary renderer.
"""
import re


SLUG_STOP_WORDS = {
    'and', 'for', 'the', 'travelzada', 'package', 'tour', 'trip',
    'with', 'from', 'to', 'in', 'on', 'at', 'by',
}

DEFAULT_NIGHTS = 5
DEFAULT_DAYS = 6

BUDGET_THRESHOLD = 60000
MID_THRESHOLD = 120000

ITINERARY_DAY_RE = re.compile(r'Day\s*(\d+):\s*(.+)', re.IGNORECASE)


def normalize_package_id(value):
    """Key used to detect duplicate packages: trimmed and upper-cased."""
    if value is None:
        return ''
    return str(value).strip().upper()


def slugify_text(text, max_parts=8):
    """
    URL slug for package pages.

    Keeps ``[a-z0-9]`` words, drops the common filler words and keeps at most
    ``max_parts`` words joined by ``-``.
    """
    if not text:
        return ''
    cleaned = re.sub(r'[^a-z0-9\s-]', '', str(text).lower())
    parts = [
        word for word in re.split(r'[\s-]+', cleaned)
        if word and word not in SLUG_STOP_WORDS
    ]
    return '-'.join(parts[:max_parts])


def first_int(value):
    """First integer found in ``value`` (commas ignored), or None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = re.search(r'\d+', str(value).replace(',', ''))
    return int(match.group()) if match else None


def last_int(value):
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    matches = re.findall(r'\d+', str(value).replace(',', ''))
    return int(matches[-1]) if matches else None


def digits_to_int(value):
    """All the digits of ``value`` as one integer: ``'₹45,000'`` -> 45000."""
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(value)
    digits = re.sub(r'\D', '', str(value))
    return int(digits) if digits else None


def derive_budget(price_range):
    """Budget category from the first amount of a price range."""
    amount = first_int(price_range) if price_range not in (None, '') else None
    if amount is None:
        return 'Mid'
    if amount < BUDGET_THRESHOLD:
        return 'Budget'
    if amount < MID_THRESHOLD:
        return 'Mid'
    return 'Premium'


def duration_label(nights, days):
    return f'{nights} Nights / {days} Days'


def resolve_duration(pkg):
    """
    Works out ``(duration, nights, days)`` for a package skeleton.

    A written ``Duration`` wins; then explicit night/day counts; then the
    length of an itinerary list; 5 nights / 6 days otherwise.
    """
    duration = str(pkg.get('Duration') or '').strip()
    nights = None
    days = None

    if len(duration) > 3:
        nights_match = re.search(r'(\d+)\s*N', duration, re.IGNORECASE)
        days_match = re.search(r'(\d+)\s*D', duration, re.IGNORECASE)
        nights = int(nights_match.group(1)) if nights_match else None
        days = int(days_match.group(1)) if days_match else None
        if nights is None and days:
            nights = days - 1
        if days is None and nights:
            days = nights + 1
    elif pkg.get('Duration_Nights') or pkg.get('Duration_Days'):
        given_nights = first_int(pkg.get('Duration_Nights'))
        given_days = first_int(pkg.get('Duration_Days'))
        nights = given_nights or ((given_days or 0) - 1)
        days = given_days or (nights + 1)
        duration = duration_label(nights, days)
    elif isinstance(pkg.get('Day_Wise_Itinerary'), list) and pkg['Day_Wise_Itinerary']:
        days = len(pkg['Day_Wise_Itinerary'])
        nights = max(1, days - 1)
        duration = duration_label(nights, days)

    if not nights or not days or nights < 0 or days < 0:
        nights, days = DEFAULT_NIGHTS, DEFAULT_DAYS
        if len(duration) <= 3:
            duration = duration_label(nights, days)

    return duration, nights, days


def itinerary_to_text(days):
    """``[{day, description}]`` -> ``'Day 1: ... | Day 2: ...'``"""
    parts = []
    for index, item in enumerate(days or [], start=1):
        if isinstance(item, dict):
            day = item.get('day') or item.get('Day') or index
            description = item.get('description') or item.get('Description') or item.get('title') or ''
        else:
            day, description = index, item
        parts.append(f'Day {day}: {str(description).strip()}')
    return ' | '.join(parts)


def parse_itinerary_text(text):
    """Parses ``'Day 1: Arrival | Day 2: ...'`` into ``[{day, title, description}]``."""
    rows = []
    for chunk in str(text or '').split('|'):
        match = ITINERARY_DAY_RE.search(chunk.strip())
        if not match:
            continue
        description = match.group(2).strip()
        title = description.split('.')[0].split(',')[0].strip()
        rows.append({
            'day': int(match.group(1)),
            'title': title,
            'description': description,
        })
    return rows


def split_list_text(text):
    """Splits inclusion-style text on newlines when present, otherwise on commas."""
    if not text:
        return []
    if isinstance(text, (list, tuple)):
        return [str(item).strip() for item in text if str(item).strip()]
    text = str(text)
    separator = '\n' if '\n' in text else ','
    return [item.strip(' •-\t\r') for item in text.split(separator) if item.strip(' •-\t\r')]
