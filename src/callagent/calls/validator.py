"""
Call event validation.

Rules run in a fixed order (direction, callerNumber, recipientNumber,
customMessage) and the first violation is reported, so error messages are
deterministic. Values are stored exactly as supplied, so phone numbers must match
the pattern as given; trimming is only used for the emptiness check.
"""

import re
from collections.abc import Mapping
from typing import Any

from callagent.calls.models import CallDirection, CallEvent
from callagent.shared.exceptions import ValidationError

# Syntactic floor only: optional leading "+" followed by digits
PHONE_PATTERN = re.compile(r"\+?[0-9]+")

_DIRECTIONS = {d.value: d for d in CallDirection}


def validate_call_event(raw: Any) -> CallEvent:
    """Validate an untyped payload and build a CallEvent.

    Args:
        raw: Decoded request body.

    Returns:
        The validated call event.

    Raises:
        ValidationError: On the first violated rule.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("not an object")

    direction = raw.get("direction")
    if not isinstance(direction, str) or direction not in _DIRECTIONS:
        raise ValidationError("invalid direction", field="direction")

    caller_number = _require_phone(raw, "callerNumber")
    recipient_number = _require_phone(raw, "recipientNumber")
    custom_message = _require_text(raw, "customMessage")

    return CallEvent(
        direction=_DIRECTIONS[direction],
        caller_number=caller_number,
        recipient_number=recipient_number,
        custom_message=custom_message,
    )


def _require_text(raw: Mapping[str, Any], field_name: str) -> str:
    value = raw.get(field_name)
    if value is None:
        raise ValidationError(f"{field_name} is required", field=field_name)
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string", field=field_name)
    if not value.strip():
        raise ValidationError(f"{field_name} is required", field=field_name)
    return value


def _require_phone(raw: Mapping[str, Any], field_name: str) -> str:
    value = _require_text(raw, field_name)
    if not PHONE_PATTERN.fullmatch(value):
        raise ValidationError(
            f"{field_name} must be a phone number (optional '+' followed by digits)",
            field=field_name,
        )
    return value
