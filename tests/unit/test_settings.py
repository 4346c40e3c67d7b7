import pytest

from report_hub.config.settings import AppSettings
from report_hub.config.validators import validate_channel_settings
from report_hub.core.errors import ConfigurationError


def test_settings_default_values() -> None:
    settings = AppSettings(SMTP_SERVER="smtp.example.com", TELEGRAM_CHAT_ID="-100200300")
    assert settings.smtp_server == "smtp.example.com"
    assert settings.smtp_port == 587
    assert settings.whatsapp_phone_number == "+1234567890"
    assert settings.telegram_chat_id == "-100200300"
    assert settings.demo_recipients == {
        "email": "usuario@email.com",
        "whatsapp": "+1234567890",
        "telegram": "123456789",
    }


def test_settings_reject_out_of_range_port() -> None:
    with pytest.raises(ValueError):
        AppSettings(SMTP_PORT=70000)


def test_validate_channel_settings_accepts_defaults() -> None:
    validate_channel_settings(AppSettings())


@pytest.mark.parametrize(
    "overrides",
    [
        {"SMTP_USERNAME": "no-at-sign"},
        {"WHATSAPP_PHONE_NUMBER": "12345"},
        {"TELEGRAM_CHAT_ID": "@channel"},
    ],
)
def test_validate_channel_settings_rejects_bad_sender(overrides: dict) -> None:
    with pytest.raises(ConfigurationError):
        validate_channel_settings(AppSettings(**overrides))
