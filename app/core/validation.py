"""Declarative request-body rule sets.

A rule set is an ordered list of Rule(field, message, check). A field fails
when it is missing or falsy, or when its check returns False; only the first
failing rule per field is reported. validate() is pure; enforce() raises
and optionally parses the body into a pydantic schema.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Optional, Type

from pydantic import BaseModel, ValidationError as PydanticValidationError

from app.core.errors import ValidationFailedError


@dataclass(frozen=True)
class Rule:
    field: str
    message: str
    check: Optional[Callable[[Any], bool]] = None


def is_number(value: Any) -> bool:
    """Finite numbers and numeric strings; "nan", "Infinity" and overflowing literals fail."""
    if isinstance(value, bool) or not isinstance(value, (Real, str)):
        return False
    try:
        return math.isfinite(float(value))
    except (ValueError, OverflowError):
        return False


def is_short_name(value: Any) -> bool:
    return isinstance(value, str) and len(value) < 50


def is_star_rating(value: Any) -> bool:
    # JSON integers only; 4.0 and "4" are rejected
    return isinstance(value, int) and not isinstance(value, bool) and 0 < value < 6


SPOT_EDIT_RULES = [
    Rule("address", "Street address is required"),
    Rule("city", "City is required"),
    Rule("state", "State is required"),
    Rule("country", "Country is required"),
    Rule("lat", "Latitude is not valid", is_number),
    Rule("lng", "Longitude is not valid", is_number),
    Rule("name", "Name must be less than 50 characters", is_short_name),
    Rule("description", "Description is required"),
    Rule("price", "Price per day is required", is_number),
]

SPOT_CREATE_RULES = SPOT_EDIT_RULES + [
    Rule("previewImage", "Preview image url is required"),
]

REVIEW_CREATE_RULES = [
    Rule("review", "Review text is required"),
    Rule("stars", "Stars must be an integer from 1 to 5", is_star_rating),
]


def validate(rules: list[Rule], payload: Any) -> dict[str, str]:
    """Return {field: message} for every failing field, in rule order."""
    if not isinstance(payload, dict):
        payload = {}

    errors: dict[str, str] = {}
    for rule in rules:
        if rule.field in errors:
            continue
        value = payload.get(rule.field)
        if not value or (rule.check is not None and not rule.check(value)):
            errors[rule.field] = rule.message
    return errors


def enforce(rules: list[Rule], payload: Any, schema: Optional[Type[BaseModel]] = None):
    """
    Raise ValidationFailedError unless payload passes the rule set.
    With a schema, the payload is then parsed into it; a type mismatch the
    rules did not catch is reported under the rule's message for that field.
    """
    errors = validate(rules, payload)
    if errors:
        raise ValidationFailedError(errors)
    if schema is None:
        return payload

    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        messages = {rule.field: rule.message for rule in rules}
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "body"
            errors.setdefault(field, messages.get(field, err["msg"]))
        raise ValidationFailedError(errors) from exc
