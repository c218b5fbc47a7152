"""
SMS provider interface definition.

- SmsProvider interface defines send_sms
- Providers report failures by raising SmsProviderError
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import anyio


@dataclass(frozen=True)
class SmsSendRequest:
    """Request to send one SMS."""

    to: str
    from_number: str
    body: str


@dataclass(frozen=True)
class SmsSendResponse:
    """Response from the provider for an accepted message."""

    message_id: str
    status: str = "queued"
    raw_response: dict[str, Any] = field(default_factory=dict)


class SmsProviderError(Exception):
    """Base exception for SMS provider errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        provider_response: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.provider_response = provider_response or {}


class SmsSendError(SmsProviderError):
    """Error while sending a message."""


class SmsProvider(ABC):
    """Abstract interface for SMS providers.

    `send_sms` is the async entrypoint used by the dispatcher. The default
    implementation runs `send_sms_sync` in a worker thread so adapters built
    on blocking clients stay usable from async code. If the caller is
    cancelled (e.g. on timeout) the thread is abandoned, not interrupted.
    """

    async def send_sms(self, request: SmsSendRequest) -> SmsSendResponse:
        """Send an SMS (async)."""
        return await anyio.to_thread.run_sync(
            self.send_sms_sync, request, abandon_on_cancel=True
        )

    def close(self) -> None:
        """Release provider resources. No-op unless the adapter holds any."""

    @abstractmethod
    def send_sms_sync(self, request: SmsSendRequest) -> SmsSendResponse:
        """Send an SMS (sync)."""
        ...
