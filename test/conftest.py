"""
Pytest configuration and fixtures for the call notification tests.
"""

from __future__ import annotations

from typing import Any

import pytest

from callagent.calls.dispatcher import NotificationDispatcher
from callagent.calls.models import CallDirection, CallEvent
from callagent.messaging.config import MessagingConfig, ProviderType
from callagent.messaging.interface import SmsProvider, SmsSendRequest, SmsSendResponse
from callagent.messaging.mock_adapter import MockSmsAdapter


class RecordingProvider(SmsProvider):
    """Provider double that counts invocations of the async entrypoint."""

    def __init__(
        self,
        message_id: str = "SM_TEST_MESSAGE_SID",
        error: Exception | None = None,
    ) -> None:
        self.message_id = message_id
        self.error = error
        self.requests: list[SmsSendRequest] = []

    @property
    def send_count(self) -> int:
        return len(self.requests)

    async def send_sms(self, request: SmsSendRequest) -> SmsSendResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return SmsSendResponse(message_id=self.message_id)

    def send_sms_sync(self, request: SmsSendRequest) -> SmsSendResponse:
        raise NotImplementedError("async only")


@pytest.fixture
def live_config() -> MessagingConfig:
    return MessagingConfig(
        _env_file=None,
        sms_provider=ProviderType.TWILIO,
        twilio_account_sid="AC_TEST_ACCOUNT_SID",
        twilio_auth_token="test_auth_token_12345",
        twilio_from_number="+14155550000",
        twilio_api_base_url="https://api.twilio.com",
        sms_timeout_seconds=10,
    )


@pytest.fixture
def no_credentials_config() -> MessagingConfig:
    return MessagingConfig(
        _env_file=None,
        sms_provider=ProviderType.TWILIO,
        twilio_account_sid="",
        twilio_auth_token="",
        twilio_from_number="",
    )


@pytest.fixture
def mock_provider() -> MockSmsAdapter:
    return MockSmsAdapter()


@pytest.fixture
def recording_provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def missed_call_event() -> CallEvent:
    return CallEvent(
        direction=CallDirection.MISSED,
        caller_number="+15551234567",
        recipient_number="+15559876543",
        custom_message="Sorry we missed you, {{caller}}!",
    )


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    return {
        "direction": "missed",
        "callerNumber": "+15551234567",
        "recipientNumber": "+15559876543",
        "customMessage": "Sorry we missed you, {{caller}}!",
    }


@pytest.fixture
def dry_run_dispatcher(
    no_credentials_config: MessagingConfig,
    mock_provider: MockSmsAdapter,
) -> NotificationDispatcher:
    return NotificationDispatcher(config=no_credentials_config, provider=mock_provider)


@pytest.fixture
def live_dispatcher(
    live_config: MessagingConfig,
    mock_provider: MockSmsAdapter,
) -> NotificationDispatcher:
    return NotificationDispatcher(config=live_config, provider=mock_provider)
