from __future__ import annotations

from ..core.errors import ConfigurationError
from ..notifications.email import is_valid_email
from ..notifications.telegram import is_valid_chat_id
from ..notifications.whatsapp import is_valid_phone_number
from .settings import AppSettings


def validate_channel_settings(settings: AppSettings) -> None:
    """確認各通道的寄件端設定符合該通道的格式規則。"""

    if not is_valid_email(settings.smtp_username):
        raise ConfigurationError(f"SMTP_USERNAME 必須為電子郵件地址: {settings.smtp_username}")
    if not is_valid_phone_number(settings.whatsapp_phone_number):
        raise ConfigurationError(
            f"WHATSAPP_PHONE_NUMBER 格式錯誤: {settings.whatsapp_phone_number}"
        )
    if not is_valid_chat_id(settings.telegram_chat_id):
        raise ConfigurationError(f"TELEGRAM_CHAT_ID 格式錯誤: {settings.telegram_chat_id}")
