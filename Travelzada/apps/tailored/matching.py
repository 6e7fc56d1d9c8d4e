"""
Ranking of packages against the preferences gathered by the wizard.

Each package whose name contains one of the requested destinations gets a
score out of 100: destination 40, hotel category 25, group and vibe 20,
budget 15. The three best are returned with the reasons that scored.
"""
import re

from apps.packages.models import Package
from apps.packages.utils import digits_to_int

DESTINATION_POINTS = 40
STAR_POINTS = 25
GROUP_POINTS = 12
VIBE_POINTS = 8
BUDGET_POINTS = 15
MAX_RESULTS = 3

# Budget category expected for each hotel tier of the wizard
TIER_BUDGETS = {
    3: {"budget"},
    4: {"mid"},
    5: {"premium", "luxury"},
}

GROUP_TRAVEL_TYPES = {
    "solo": ("solo",),
    "couple": ("couple", "honeymoon"),
    "friends": ("friends", "group"),
    "family": ("family",),
}


def as_list(value):
    return value if isinstance(value, list) else []


def star_number(value):
    match = re.search(r"(\d)", str(value or ""))
    return int(match.group(1)) if match else None


def package_price(package):
    return package.price_min_inr or digits_to_int(package.price_range_inr) or 0


def candidate_packages(destinations):
    wanted = [str(name).strip().lower() for name in destinations if str(name).strip()]
    return [
        package for package in Package.objects.all()
        if any(name in package.destination_name.lower() for name in wanted)
    ]


def score_package(package, preferences):
    """``(score, reasons)`` of one package."""
    reasons = []
    score = DESTINATION_POINTS
    reasons.append(f"it covers {package.destination_name}")

    tiers = {star_number(value) for value in as_list(preferences.get("hotel_types"))} - {None}
    package_star = star_number(package.star_category)
    if package_star in tiers:
        score += STAR_POINTS
        reasons.append(f"it uses the {package.star_category} stays you asked for")

    group = str(preferences.get("group_type") or "").strip().lower()
    travel_type = package.travel_type.lower()
    if group and any(word in travel_type for word in GROUP_TRAVEL_TYPES.get(group, (group,))):
        score += GROUP_POINTS
        reasons.append(f"it is designed for {group} travellers")

    vibe_text = " ".join([package.mood, package.theme, package.occasion, package.overview]).lower()
    experiences = [str(item).lower() for item in as_list(preferences.get("experiences")) if item]
    matched = [item for item in experiences if item in vibe_text]
    if matched:
        score += VIBE_POINTS
        reasons.append(f"it offers the {', '.join(matched)} experiences you want")

    budget = digits_to_int(preferences.get("budget"))
    if budget:
        if package_price(package) and package_price(package) <= budget:
            score += BUDGET_POINTS
            reasons.append("it fits your budget")
    elif tiers and package.budget_category.lower() in set().union(*(TIER_BUDGETS.get(tier, set()) for tier in tiers)):
        score += BUDGET_POINTS
        reasons.append(f"its {package.budget_category} pricing matches your hotel choice")

    return min(score, 100), reasons


def match_reason(reasons):
    if len(reasons) == 1:
        return f"Recommended because {reasons[0]}."
    return f"Recommended because {', '.join(reasons[:-1])} and {reasons[-1]}."


def find_packages(preferences):
    """Up to three ``(package, score, reason)`` tuples, best first."""
    ranked = []
    for package in candidate_packages(preferences.get("destinations") or []):
        score, reasons = score_package(package, preferences)
        ranked.append((package, score, match_reason(reasons)))

    ranked.sort(key=lambda item: (-item[1], package_price(item[0]), item[0].destination_id))
    return ranked[:MAX_RESULTS]
