"""Validation agent that turns raw planner input into trip criteria."""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from wego_planner.log import get_logger
from wego_planner.schemas import (
    INTERESTS,
    TRIP_TYPES,
    ContactForm,
    ContactMessage,
    Criteria,
    PlannerForm,
    ValidationFailure,
)

logger = get_logger(__name__)

MAX_DESTINATION_LENGTH = 60
NIGHTS_RANGE = (1, 60)
TRAVELERS_RANGE = (1, 12)
MIN_BUDGET = 1000
MIN_CONTACT_MESSAGE_LENGTH = 10

_NUMBER_RE = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_TRIP_TYPE_LOOKUP = {label.lower(): label for label in TRIP_TYPES}
_INTEREST_LOOKUP = {label.lower(): label for label in INTERESTS}


def validate(raw_input: Any) -> Criteria | ValidationFailure:
    """Check every planner field and build a ``Criteria`` when all pass.

    Each field is evaluated independently so the caller always receives the
    complete error set for an attempt. ``raw_input`` may be a plain mapping
    (camelCase or snake_case keys) or a ``PlannerForm``; any other value is
    treated as an empty form. Bad values never raise; they are reported
    through the returned ``ValidationFailure``.
    """
    form = _coerce_form(raw_input)
    errors: Dict[str, str] = {}

    destination = "" if form.destination is None else str(form.destination).strip()
    if not destination:
        errors["destination"] = "Please enter a destination."
    elif len(destination) > MAX_DESTINATION_LENGTH:
        errors["destination"] = f"Destination is too long (max {MAX_DESTINATION_LENGTH} characters)."

    trip_type = _parse_trip_type(form.trip_type)
    if trip_type is None:
        errors["trip_type"] = "Choose a trip type: Domestic or International."

    nights = _parse_int_in_range(form.nights, *NIGHTS_RANGE)
    if nights is None:
        errors["nights"] = "Nights must be between 1 and 60."

    budget = _parse_number(form.budget)
    if budget is None or budget < MIN_BUDGET:
        errors["budget"] = "Budget must be at least 1,000."

    travelers = _parse_int_in_range(form.travelers, *TRAVELERS_RANGE)
    if travelers is None:
        errors["travelers"] = "Travelers must be between 1 and 12."

    start_date = _parse_date(form.start_date)
    if _is_blank(form.start_date):
        errors["start_date"] = "Select a start date."
    elif start_date is None:
        errors["start_date"] = "Enter a valid start date."

    end_date = _parse_date(form.end_date)
    if _is_blank(form.end_date):
        errors["end_date"] = "Select an end date."
    elif end_date is None:
        errors["end_date"] = "Enter a valid end date."

    if start_date and end_date and end_date < start_date:
        errors["dates"] = "End date cannot be before start date."

    interests, unknown = _normalize_interests(form.interests)
    if unknown:
        errors["interests"] = (
            f"Unknown interest(s): {', '.join(unknown)}. Choose from {', '.join(INTERESTS)}."
        )
    elif not interests:
        errors["interests"] = "Select at least one interest."

    if errors:
        logger.debug("Planner input rejected for fields: %s", ", ".join(sorted(errors)))
        return ValidationFailure(errors=errors)

    return Criteria(
        destination=destination,
        trip_type=trip_type,
        nights=nights,
        budget=budget,
        travelers=travelers,
        start_date=start_date,
        end_date=end_date,
        interests=tuple(interests),
    )


def validate_contact(raw_input: Any) -> ContactMessage | ValidationFailure:
    """Check the contact form: name, a plausible email and a short message."""
    if isinstance(raw_input, ContactForm):
        form = raw_input
    elif isinstance(raw_input, Mapping):
        form = ContactForm.model_validate(dict(raw_input))
    else:
        form = ContactForm()

    name = "" if form.name is None else str(form.name).strip()
    email = "" if form.email is None else str(form.email).strip()
    message = "" if form.message is None else str(form.message).strip()

    errors: Dict[str, str] = {}
    if not name:
        errors["name"] = "Name is required."
    if not email:
        errors["email"] = "Email is required."
    elif not _EMAIL_RE.match(email):
        errors["email"] = "Enter a valid email."
    if len(message) < MIN_CONTACT_MESSAGE_LENGTH:
        errors["message"] = "Message should be at least 10 characters."

    if errors:
        return ValidationFailure(errors=errors)
    return ContactMessage(name=name, email=email, message=message)


def _coerce_form(raw_input: Any) -> PlannerForm:
    if isinstance(raw_input, PlannerForm):
        return raw_input
    if hasattr(raw_input, "model_dump"):
        raw_input = raw_input.model_dump(mode="python")
    if isinstance(raw_input, Mapping):
        return PlannerForm.model_validate(dict(raw_input))
    # anything else carries no fields, so every field is reported missing
    logger.debug("Unsupported planner payload type: %s", type(raw_input).__name__)
    return PlannerForm()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_number(value: Any) -> Optional[float]:
    # bool is an int subclass but never a valid form number
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        try:
            number = float(value)
        except OverflowError:
            number = None
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        number = float(text) if _NUMBER_RE.match(text) else None
    else:
        number = None
    if number is None or not math.isfinite(number):
        return None
    return number


def _parse_int_in_range(value: Any, low: int, high: int) -> Optional[int]:
    number = _parse_number(value)
    if number is None or not number.is_integer():
        return None
    if number < low or number > high:
        return None
    return int(number)


def _parse_trip_type(value: Any) -> Optional[str]:
    if _is_blank(value):
        return "Domestic"
    if not isinstance(value, str):
        return None
    return _TRIP_TYPE_LOOKUP.get(value.strip().lower())


def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None


def _normalize_interests(value: Any) -> Tuple[List[str], List[str]]:
    """Return (canonical interests, unknown labels) preserving selection order."""
    if value is None:
        raw: List[Any] = []
    elif isinstance(value, str):
        raw = value.split(",")
    elif isinstance(value, (set, frozenset)):
        # sets carry no order; fall back to vocabulary order for stable tips
        raw = sorted(value, key=_vocabulary_rank)
    elif isinstance(value, (list, tuple)):
        raw = list(value)
    else:
        raw = [value]

    interests: List[str] = []
    unknown: List[str] = []
    for item in raw:
        label = str(item).strip()
        if not label:
            continue
        canonical = _INTEREST_LOOKUP.get(label.lower())
        if canonical is None:
            if label not in unknown:
                unknown.append(label)
        elif canonical not in interests:
            interests.append(canonical)
    return interests, unknown


def _vocabulary_rank(item: Any) -> Tuple[int, str]:
    label = str(item).strip()
    canonical = _INTEREST_LOOKUP.get(label.lower())
    if canonical is None:
        return len(INTERESTS), label
    return INTERESTS.index(canonical), label
