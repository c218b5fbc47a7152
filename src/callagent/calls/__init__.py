"""
Call-event notifications: validation, templates and dispatch.
"""

from callagent.calls.models import (
    CallDirection,
    CallEvent,
    DryRunResult,
    NotificationResult,
    SentResult,
)

__all__ = [
    "CallDirection",
    "CallEvent",
    "DryRunResult",
    "NotificationResult",
    "SentResult",
]
