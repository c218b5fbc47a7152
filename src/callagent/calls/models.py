"""
Call event and notification result types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal


class CallDirection(str, Enum):
    """Direction of the call that triggers a notification."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"
    MISSED = "missed"


@dataclass(frozen=True)
class CallEvent:
    """One validated notification request.

    `caller_number` is the party that receives the SMS; `recipient_number`
    is the line that received the call. `custom_message` is template text
    and may contain placeholders.
    """

    direction: CallDirection
    caller_number: str
    recipient_number: str
    custom_message: str


@dataclass(frozen=True)
class SentResult:
    """Provider accepted the message."""

    to: str
    body: str
    provider_message_id: str

    kind: Literal["sent"] = "sent"
    dry_run: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "dryRun": self.dry_run,
            "to": self.to,
            "body": self.body,
            "providerMessageId": self.provider_message_id,
        }


@dataclass(frozen=True)
class DryRunResult:
    """Nothing was transmitted; `reason` says why."""

    to: str
    body: str
    reason: str

    kind: Literal["dry_run"] = "dry_run"
    dry_run: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "dryRun": self.dry_run,
            "to": self.to,
            "body": self.body,
            "reason": self.reason,
        }


NotificationResult = SentResult | DryRunResult
