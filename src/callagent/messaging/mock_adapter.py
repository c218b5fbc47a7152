"""
Mock SMS provider adapter for local development and tests.

Never touches the network; records every request it receives.
"""

import logging
import threading

from callagent.messaging.interface import (
    SmsProvider,
    SmsSendError,
    SmsSendRequest,
    SmsSendResponse,
)

logger = logging.getLogger(__name__)


class MockSmsAdapter(SmsProvider):
    """Mock SMS provider for testing."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._requests: list[SmsSendRequest] = []
        self._next_message_id: int = 1
        self._should_fail: bool = False
        self._fail_error: str = "Mock failure"
        self._fail_code: str = "MOCK_ERROR"

    def reset(self) -> None:
        with self._lock:
            self._requests.clear()
            self._next_message_id = 1
        self._should_fail = False
        self._fail_error = "Mock failure"
        self._fail_code = "MOCK_ERROR"

    def configure_failure(
        self,
        should_fail: bool = True,
        error_message: str = "Mock failure",
        error_code: str = "MOCK_ERROR",
    ) -> None:
        self._should_fail = should_fail
        self._fail_error = error_message
        self._fail_code = error_code

    @property
    def requests(self) -> list[SmsSendRequest]:
        return self._requests.copy()

    @property
    def send_count(self) -> int:
        return len(self._requests)

    def get_last_request(self) -> SmsSendRequest | None:
        return self._requests[-1] if self._requests else None

    def send_sms_sync(self, request: SmsSendRequest) -> SmsSendResponse:
        logger.info("Mock: Sending SMS", extra={"to": request.to})

        # Sends run on worker threads; failed attempts still count as attempts
        with self._lock:
            self._requests.append(request)

            if self._should_fail:
                raise SmsSendError(
                    message=self._fail_error,
                    error_code=self._fail_code,
                )

            message_id = f"MOCK_SMS_{self._next_message_id:06d}"
            self._next_message_id += 1

        return SmsSendResponse(
            message_id=message_id,
            status="queued",
            raw_response={"mock": True, "sid": message_id, "to": request.to},
        )
