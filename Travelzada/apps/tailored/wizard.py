"""
Session state of the tailored travel wizard.

The state lives in ``request.session`` under ``SESSION_KEY``. A step merges
its fields into a copy of the state and validates the step gate on the
merged copy; the session is only written when the gate passes.
"""
import copy
import logging

from .models import TailoredLead
from .serializers import (
    DEFAULT_ROUTE_NIGHTS,
    ContactStepSerializer,
    DestinationsStepSerializer,
    GroupStepSerializer,
    RouteStepSerializer,
    StayStepSerializer,
)

logger = logging.getLogger(__name__)


SESSION_KEY = "tailored_wizard_data"

FIRST_STEP = 1
CONTACT_STEP = 5

STEPS = {
    1: DestinationsStepSerializer,
    2: RouteStepSerializer,
    3: GroupStepSerializer,
    4: StayStepSerializer,
    CONTACT_STEP: ContactStepSerializer,
}


class WizardError(Exception):
    def __init__(self, errors):
        super().__init__(str(errors))
        self.errors = errors


def default_state():
    return {
        "destinations": [],
        "date_range": "Flexible",
        "experiences": [],
        "route_items": [],
        "group_type": "",
        "inclusions": ["hotels", "flights"],
        "hotel_types": ["4-star"],
        "passengers": {"adults": 2, "kids": 0, "rooms": 1},
        "contact_name": "",
        "contact_phone": "",
        "current_step": FIRST_STEP,
    }


def load_state(session):
    state = default_state()
    state.update(copy.deepcopy(session.get(SESSION_KEY) or {}))
    return state


def save_state(session, state):
    session[SESSION_KEY] = state


def reset_state(session):
    session.pop(SESSION_KEY, None)


def default_route(destinations):
    return [{"destination": name, "nights": DEFAULT_ROUTE_NIGHTS} for name in destinations]


def step_fields(step):
    return list(STEPS[step]().fields)


def validate_step(step, state):
    """Validated fields of ``step`` taken from ``state``; raises ``WizardError``."""
    data = {field: state.get(field) for field in step_fields(step)}
    if step == 2 and not data["route_items"]:
        data["route_items"] = default_route(state.get("destinations") or [])

    serializer = STEPS[step](data=data)
    if not serializer.is_valid():
        raise WizardError(serializer.errors)
    return serializer.validated_data


def _plain(value):
    """Serializer output as plain dicts and lists for the session."""
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def apply_step(session, step, payload):
    """
    Merges ``payload`` into the wizard state for ``step``.

    Returns the new state, with ``current_step`` moved past ``step``. A failed
    gate raises ``WizardError`` and leaves the session untouched.
    """
    if step not in STEPS:
        raise WizardError({"step": [f"Unknown step {step}."]})

    state = load_state(session)
    merged = dict(state)
    for field in step_fields(step):
        if field in payload:
            merged[field] = payload[field]

    validated = validate_step(step, merged)
    merged.update(_plain(dict(validated)))

    # A new destination list invalidates a route built for the old one
    if step == 1 and merged["destinations"] != state["destinations"]:
        merged["route_items"] = []

    merged["current_step"] = min(step + 1, CONTACT_STEP)
    save_state(session, merged)
    return merged


def go_back(session):
    state = load_state(session)
    state["current_step"] = max(FIRST_STEP, state["current_step"] - 1)
    save_state(session, state)
    return state


def submit(session, payload=None):
    """
    Validates every gate and stores a ``TailoredLead``.

    The contact fields may come with the submit request itself.
    """
    state = load_state(session)
    for field in step_fields(CONTACT_STEP):
        if payload and field in payload:
            state[field] = payload[field]

    cleaned = {}
    errors = {}
    for step in STEPS:
        try:
            cleaned.update(_plain(dict(validate_step(step, state))))
        except WizardError as e:
            errors.update(e.errors)
    if errors:
        raise WizardError(errors)

    lead = TailoredLead.objects.create(
        status=TailoredLead.STATUS_NEW,
        source=TailoredLead.SOURCE_WIZARD,
        **cleaned
    )

    reset_state(session)
    logger.info(
        "Tailored lead %s submitted for %s", lead.lead_id, ", ".join(lead.destinations)
    )
    return lead
