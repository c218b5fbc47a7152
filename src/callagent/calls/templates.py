"""
Message templates and placeholder rendering.

Supported placeholders: {{caller}}, {{recipient}}, {{direction}}. Matching is
case-sensitive with no whitespace inside the braces. Anything else, including
unknown names and unterminated tokens, is left in the output verbatim so a
preview can always be rendered.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol

from callagent.calls.models import CallDirection

DIRECTION_LABELS: Mapping[CallDirection, str] = MappingProxyType(
    {
        CallDirection.INCOMING: "incoming call",
        CallDirection.OUTGOING: "outgoing call",
        CallDirection.MISSED: "missed call",
    }
)

DIRECTION_DESCRIPTIONS: Mapping[CallDirection, str] = MappingProxyType(
    {
        CallDirection.INCOMING: "Notify callers when their call is being received.",
        CallDirection.OUTGOING: "Confirm to contacts that you are calling them.",
        CallDirection.MISSED: "Apologise and reassure callers after a missed call.",
    }
)

DEFAULT_TEMPLATES: Mapping[CallDirection, str] = MappingProxyType(
    {
        CallDirection.INCOMING: (
            "Hi {{caller}}, your call to {{recipient}} is coming through now. "
            "Please stay on the line."
        ),
        CallDirection.OUTGOING: (
            "Hi {{caller}}, {{recipient}} is calling you now about your recent request."
        ),
        CallDirection.MISSED: (
            "Sorry we missed your call, {{caller}}. {{recipient}} will call you back shortly."
        ),
    }
)

for _table in (DIRECTION_LABELS, DIRECTION_DESCRIPTIONS, DEFAULT_TEMPLATES):
    if set(_table) != set(CallDirection):
        raise RuntimeError("Template tables must cover every CallDirection")

PLACEHOLDERS: tuple[str, ...] = ("{{caller}}", "{{recipient}}", "{{direction}}")

# Sample numbers used when a preview is requested with blank fields
SAMPLE_CALLER_NUMBER = "+15551234567"
SAMPLE_RECIPIENT_NUMBER = "+15559876543"

_PLACEHOLDER_PATTERN = re.compile(r"\{\{(caller|recipient|direction)\}\}")


class TemplateContext(Protocol):
    @property
    def direction(self) -> CallDirection: ...

    @property
    def caller_number(self) -> str: ...

    @property
    def recipient_number(self) -> str: ...


@dataclass(frozen=True)
class PreviewContext:
    """Minimal render context for previews (no custom message needed)."""

    direction: CallDirection
    caller_number: str
    recipient_number: str


def render_template(template: str, context: TemplateContext) -> str:
    """Substitute known placeholders in a single left-to-right pass.

    Substituted values are not re-scanned, so a phone number that happens to
    contain braces can never expand further.
    """
    values = {
        "caller": context.caller_number,
        "recipient": context.recipient_number,
        "direction": DIRECTION_LABELS[CallDirection(context.direction)],
    }
    return _PLACEHOLDER_PATTERN.sub(lambda m: values[m.group(1)], template)


def render_preview(
    direction: CallDirection,
    template: str | None = None,
    caller_number: str | None = None,
    recipient_number: str | None = None,
) -> tuple[str, str]:
    """Render a preview with sample fallbacks for blank inputs.

    Returns:
        (template used, rendered message)
    """
    used_template = template if template and template.strip() else DEFAULT_TEMPLATES[direction]
    context = PreviewContext(
        direction=direction,
        caller_number=caller_number or SAMPLE_CALLER_NUMBER,
        recipient_number=recipient_number or SAMPLE_RECIPIENT_NUMBER,
    )
    return used_template, render_template(used_template, context)
