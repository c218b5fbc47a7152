"""
Messaging provider configuration.

Credentials are read from the usual Twilio variables (TWILIO_ACCOUNT_SID,
TWILIO_AUTH_TOKEN, TWILIO_FROM_NUMBER). Their presence is the only switch
between live sending and dry-run mode.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderType(str, Enum):
    """Supported SMS provider types."""

    TWILIO = "twilio"
    MOCK = "mock"


class MessagingConfig(BaseSettings):
    """Messaging provider configuration from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Provider selection
    sms_provider: ProviderType = Field(default=ProviderType.TWILIO)

    # Provider credentials
    twilio_account_sid: str = Field(default="")
    twilio_auth_token: str = Field(default="")
    twilio_from_number: str = Field(default="")

    twilio_api_base_url: str = Field(default="https://api.twilio.com")

    # Upper bound for one provider call, in seconds
    sms_timeout_seconds: float = Field(default=10.0, ge=1, le=120)

    @property
    def has_credentials(self) -> bool:
        """True when account SID, auth token and sending number are all set."""
        return all(
            value.strip()
            for value in (
                self.twilio_account_sid,
                self.twilio_auth_token,
                self.twilio_from_number,
            )
        )

    def get_messages_url(self) -> str:
        base = self.twilio_api_base_url.rstrip("/")
        return f"{base}/2010-04-01/Accounts/{self.twilio_account_sid}/Messages.json"


def get_messaging_config() -> MessagingConfig:
    return MessagingConfig()
