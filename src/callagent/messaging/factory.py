"""
SMS provider factory.

Single source of truth for configuration:
- use MessagingConfig (Pydantic Settings) which loads from OS env + .env
- never read raw os.getenv("TWILIO_*") here
"""

from __future__ import annotations

import logging
from functools import lru_cache

from callagent.messaging.config import MessagingConfig, ProviderType
from callagent.messaging.config import get_messaging_config as _get_settings_messaging_config
from callagent.messaging.interface import SmsProvider
from callagent.messaging.mock_adapter import MockSmsAdapter
from callagent.messaging.twilio_adapter import TwilioSmsAdapter

logger = logging.getLogger(__name__)


def _mask(s: str, keep: int = 6) -> str:
    if not s:
        return ""
    if len(s) <= keep:
        return "*" * len(s)
    return f"{s[:keep]}***"


@lru_cache(maxsize=1)
def get_messaging_config() -> MessagingConfig:
    """Return cached MessagingConfig loaded from OS env + .env."""
    return _get_settings_messaging_config()


def build_sms_provider(cfg: MessagingConfig) -> SmsProvider:
    """Create the provider selected by `cfg.sms_provider`."""
    logger.info(
        "Messaging config resolved",
        extra={
            "sms_provider": cfg.sms_provider.value,
            "twilio_account_sid": _mask(cfg.twilio_account_sid),
            "twilio_from_number": cfg.twilio_from_number,
            "has_credentials": cfg.has_credentials,
            "sms_timeout_seconds": cfg.sms_timeout_seconds,
        },
    )

    if cfg.sms_provider == ProviderType.TWILIO:
        return TwilioSmsAdapter(cfg)

    if cfg.sms_provider == ProviderType.MOCK:
        return MockSmsAdapter()

    raise ValueError(f"Unsupported sms_provider: {cfg.sms_provider}")


@lru_cache(maxsize=1)
def get_sms_provider() -> SmsProvider:
    """Create and cache the SMS provider using MessagingConfig."""
    return build_sms_provider(get_messaging_config())


def close_sms_provider() -> None:
    """Close the cached provider, if one was built, and drop it from the cache."""
    if get_sms_provider.cache_info().currsize:
        get_sms_provider().close()
        get_sms_provider.cache_clear()
