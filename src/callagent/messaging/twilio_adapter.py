"""
Twilio SMS provider adapter.

- Concrete adapter for Twilio's Messages REST API
- Uses a blocking httpx client; the async entrypoint comes from SmsProvider
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from callagent.messaging.config import MessagingConfig, get_messaging_config
from callagent.messaging.interface import (
    SmsProvider,
    SmsSendError,
    SmsSendRequest,
    SmsSendResponse,
)

logger = logging.getLogger(__name__)


class TwilioSmsAdapter(SmsProvider):
    """Twilio SMS provider adapter."""

    def __init__(
        self,
        config: MessagingConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or get_messaging_config()
        self._http_client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = httpx.Client(
                timeout=httpx.Timeout(self._config.sms_timeout_seconds)
            )
        return self._http_client

    def close(self) -> None:
        if self._owns_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def _get_auth(self) -> tuple[str, str]:
        return (self._config.twilio_account_sid, self._config.twilio_auth_token)

    def send_sms_sync(self, request: SmsSendRequest) -> SmsSendResponse:
        """Send an SMS via Twilio (sync)."""
        client = self._get_client()

        payload = {
            "To": request.to,
            "From": request.from_number,
            "Body": request.body,
        }

        logger.info(
            "Sending Twilio SMS",
            extra={"to": request.to, "body_length": len(request.body)},
        )

        try:
            response = client.post(
                self._config.get_messages_url(),
                data=payload,
                auth=self._get_auth(),
            )
        except httpx.HTTPError as e:
            logger.exception("HTTP error during Twilio SMS send", extra={"to": request.to})
            raise SmsSendError(
                message=f"HTTP error: {e!s}",
                error_code="HTTP_ERROR",
            ) from e

        if response.status_code >= 400:
            error_data = _json_or_empty(response)
            logger.error(
                "Twilio SMS send failed",
                extra={
                    "status_code": response.status_code,
                    "error": error_data,
                    "to": request.to,
                },
            )
            raise SmsSendError(
                message=error_data.get(
                    "message", f"Twilio API error: {response.status_code}"
                ),
                error_code=str(error_data.get("code", response.status_code)),
                provider_response=error_data,
            )

        data = _json_or_empty(response)
        message_sid = data.get("sid")
        if not message_sid:
            raise SmsSendError(
                message="Malformed Twilio response: missing message sid",
                error_code="MALFORMED_RESPONSE",
                provider_response=data,
            )

        return SmsSendResponse(
            message_id=str(message_sid),
            status=str(data.get("status", "queued")),
            raw_response=data,
        )


def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
