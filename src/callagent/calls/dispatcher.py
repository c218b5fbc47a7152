"""
Notification dispatcher: validate, render, deliver, normalize.

Delivery policy:
- Missing provider credentials short-circuit to a dry-run, with no provider call.
- Exactly one provider attempt per dispatch, bounded by a timeout, no retry.
- Any provider failure (rejection, transport error, malformed response,
  timeout) is absorbed and reported as a dry-run carrying the error text.
  Only invalid input propagates as an error.
"""

from __future__ import annotations

from typing import Any

import anyio

from callagent.calls.models import CallEvent, DryRunResult, NotificationResult, SentResult
from callagent.calls.templates import render_template
from callagent.calls.validator import validate_call_event
from callagent.messaging.config import MessagingConfig
from callagent.messaging.factory import get_messaging_config, get_sms_provider
from callagent.messaging.interface import SmsProvider, SmsSendRequest
from callagent.shared.logging import get_logger

logger = get_logger(__name__)

DRY_RUN_NO_CREDENTIALS = "credentials not configured"


class NotificationDispatcher:
    """Sends the SMS for one call event and reports what happened."""

    def __init__(self, config: MessagingConfig, provider: SmsProvider) -> None:
        self._config = config
        self._provider = provider

    async def notify(self, raw: Any) -> NotificationResult:
        """Validate an untyped payload, then dispatch it.

        Raises:
            ValidationError: If the payload is not a valid call event.
        """
        event = validate_call_event(raw)
        return await self.dispatch(event)

    async def dispatch(self, event: CallEvent) -> NotificationResult:
        body = render_template(event.custom_message, event)
        to = event.caller_number

        if not self._config.has_credentials:
            logger.info(
                "SMS provider credentials missing; simulating send",
                extra={"direction": event.direction.value, "to": to},
            )
            return DryRunResult(to=to, body=body, reason=DRY_RUN_NO_CREDENTIALS)

        request = SmsSendRequest(
            to=to,
            from_number=self._config.twilio_from_number,
            body=body,
        )
        timeout = self._config.sms_timeout_seconds
        scope: anyio.CancelScope | None = None

        try:
            with anyio.fail_after(timeout) as scope:
                response = await self._provider.send_sms(request)
            if not response.message_id:
                raise ValueError("provider returned no message id")
        except Exception as exc:
            # A TimeoutError raised by the provider itself is an ordinary failure
            if isinstance(exc, TimeoutError) and scope is not None and scope.cancelled_caught:
                reason = f"provider call timed out after {timeout:g}s"
                logger.warning(
                    "SMS provider call timed out; degrading to dry-run",
                    extra={
                        "direction": event.direction.value,
                        "to": to,
                        "timeout_seconds": timeout,
                    },
                )
                return DryRunResult(to=to, body=body, reason=reason)

            reason = str(exc) or exc.__class__.__name__
            logger.warning(
                "SMS provider call failed; degrading to dry-run",
                extra={
                    "direction": event.direction.value,
                    "to": to,
                    "error": reason,
                    "error_code": getattr(exc, "error_code", None),
                },
            )
            return DryRunResult(to=to, body=body, reason=reason)

        logger.info(
            "SMS notification sent",
            extra={
                "direction": event.direction.value,
                "to": to,
                "provider_message_id": response.message_id,
            },
        )
        return SentResult(to=to, body=body, provider_message_id=response.message_id)


def get_notification_dispatcher() -> NotificationDispatcher:
    """FastAPI dependency: dispatcher wired to the cached config and provider."""
    return NotificationDispatcher(config=get_messaging_config(), provider=get_sms_provider())
