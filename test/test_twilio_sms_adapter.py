"""Tests for the Twilio SMS adapter (sync, no network)."""

from unittest.mock import MagicMock

import httpx
import pytest

from callagent.messaging.config import MessagingConfig
from callagent.messaging.interface import SmsSendError, SmsSendRequest
from callagent.messaging.twilio_adapter import TwilioSmsAdapter


@pytest.fixture
def sms_request() -> SmsSendRequest:
    return SmsSendRequest(
        to="+15551234567",
        from_number="+14155550000",
        body="Sorry we missed you, +15551234567!",
    )


def _adapter(config: MessagingConfig, response=None, side_effect=None) -> tuple[TwilioSmsAdapter, MagicMock]:
    mock_client = MagicMock(spec=httpx.Client)
    if side_effect is not None:
        mock_client.post.side_effect = side_effect
    else:
        mock_client.post.return_value = response
    return TwilioSmsAdapter(config=config, http_client=mock_client), mock_client


class TestTwilioSmsAdapterSendSync:
    def test_send_success(
        self,
        live_config: MessagingConfig,
        sms_request: SmsSendRequest,
    ) -> None:
        response = httpx.Response(
            status_code=201,
            json={"sid": "SM_TEST_MESSAGE_SID", "status": "queued", "to": sms_request.to},
        )
        adapter, mock_client = _adapter(live_config, response=response)

        result = adapter.send_sms_sync(sms_request)

        assert result.message_id == "SM_TEST_MESSAGE_SID"
        assert result.status == "queued"
        assert result.raw_response["sid"] == "SM_TEST_MESSAGE_SID"

        mock_client.post.assert_called_once()
        call_args = mock_client.post.call_args
        assert call_args[0][0] == (
            "https://api.twilio.com/2010-04-01/Accounts/AC_TEST_ACCOUNT_SID/Messages.json"
        )
        assert call_args[1]["data"] == {
            "To": "+15551234567",
            "From": "+14155550000",
            "Body": "Sorry we missed you, +15551234567!",
        }
        assert call_args[1]["auth"] == ("AC_TEST_ACCOUNT_SID", "test_auth_token_12345")

    def test_custom_base_url(
        self,
        live_config: MessagingConfig,
        sms_request: SmsSendRequest,
    ) -> None:
        config = live_config.model_copy(update={"twilio_api_base_url": "http://localhost:9999/"})
        response = httpx.Response(status_code=201, json={"sid": "SM1"})
        adapter, mock_client = _adapter(config, response=response)

        adapter.send_sms_sync(sms_request)

        assert mock_client.post.call_args[0][0].startswith(
            "http://localhost:9999/2010-04-01/Accounts/"
        )

    def test_api_error(
        self,
        live_config: MessagingConfig,
        sms_request: SmsSendRequest,
    ) -> None:
        response = httpx.Response(
            status_code=400,
            json={"code": 21211, "message": "Invalid 'To' Phone Number"},
        )
        adapter, _ = _adapter(live_config, response=response)

        with pytest.raises(SmsSendError) as exc_info:
            adapter.send_sms_sync(sms_request)

        assert "Invalid 'To' Phone Number" in str(exc_info.value)
        assert exc_info.value.error_code == "21211"
        assert exc_info.value.provider_response["code"] == 21211

    def test_api_error_without_json_body(
        self,
        live_config: MessagingConfig,
        sms_request: SmsSendRequest,
    ) -> None:
        response = httpx.Response(status_code=503, text="Service Unavailable")
        adapter, _ = _adapter(live_config, response=response)

        with pytest.raises(SmsSendError) as exc_info:
            adapter.send_sms_sync(sms_request)

        assert str(exc_info.value) == "Twilio API error: 503"
        assert exc_info.value.error_code == "503"

    def test_http_error(
        self,
        live_config: MessagingConfig,
        sms_request: SmsSendRequest,
    ) -> None:
        adapter, _ = _adapter(
            live_config, side_effect=httpx.ConnectError("Connection refused")
        )

        with pytest.raises(SmsSendError) as exc_info:
            adapter.send_sms_sync(sms_request)

        assert exc_info.value.error_code == "HTTP_ERROR"
        assert "Connection refused" in str(exc_info.value)

    def test_timeout_is_http_error(
        self,
        live_config: MessagingConfig,
        sms_request: SmsSendRequest,
    ) -> None:
        adapter, _ = _adapter(live_config, side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(SmsSendError) as exc_info:
            adapter.send_sms_sync(sms_request)

        assert exc_info.value.error_code == "HTTP_ERROR"

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(status_code=201, json={"status": "queued"}),
            httpx.Response(status_code=201, text="<html>not json</html>"),
            httpx.Response(status_code=201, json=["SM1"]),
            httpx.Response(status_code=201),
        ],
    )
    def test_malformed_response(
        self,
        live_config: MessagingConfig,
        sms_request: SmsSendRequest,
        response: httpx.Response,
    ) -> None:
        adapter, _ = _adapter(live_config, response=response)

        with pytest.raises(SmsSendError) as exc_info:
            adapter.send_sms_sync(sms_request)

        assert exc_info.value.error_code == "MALFORMED_RESPONSE"


class TestTwilioSmsAdapterAsync:
    @pytest.mark.asyncio
    async def test_async_entrypoint_delegates_to_sync(
        self,
        live_config: MessagingConfig,
        sms_request: SmsSendRequest,
    ) -> None:
        response = httpx.Response(status_code=201, json={"sid": "SM_ASYNC"})
        adapter, mock_client = _adapter(live_config, response=response)

        result = await adapter.send_sms(sms_request)

        assert result.message_id == "SM_ASYNC"
        mock_client.post.assert_called_once()


class TestTwilioSmsAdapterClose:
    def test_close_does_not_close_injected_client(self, live_config: MessagingConfig) -> None:
        mock_client = MagicMock(spec=httpx.Client)
        adapter = TwilioSmsAdapter(config=live_config, http_client=mock_client)

        adapter.close()

        mock_client.close.assert_not_called()

    def test_close_owned_client(self, live_config: MessagingConfig) -> None:
        adapter = TwilioSmsAdapter(config=live_config)
        client = adapter._get_client()

        adapter.close()

        assert client.is_closed
