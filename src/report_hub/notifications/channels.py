"""Channel factory: maps a channel name to a configured notification service."""

from __future__ import annotations

from typing import Callable, Dict, List

from ..config.settings import AppSettings
from ..core.errors import UnsupportedChannelError
from ..core.utils import normalize_key
from .base import NotificationService
from .email import EmailNotificationService
from .telegram import TelegramAdapter
from .whatsapp import WhatsAppAdapter


ServiceBuilder = Callable[[AppSettings], NotificationService]


def _build_email(settings: AppSettings) -> NotificationService:
    return EmailNotificationService(
        smtp_server=settings.smtp_server,
        port=settings.smtp_port,
        username=settings.smtp_username,
        password=settings.smtp_password,
    )


def _build_whatsapp(settings: AppSettings) -> NotificationService:
    return WhatsAppAdapter(
        api_key=settings.whatsapp_api_key,
        phone_number=settings.whatsapp_phone_number,
    )


def _build_telegram(settings: AppSettings) -> NotificationService:
    return TelegramAdapter(
        bot_token=settings.telegram_bot_token,
        chat_id=settings.telegram_chat_id,
    )


_BUILDERS: Dict[str, ServiceBuilder] = {
    "email": _build_email,
    "whatsapp": _build_whatsapp,
    "telegram": _build_telegram,
}


def supported_channels() -> List[str]:
    return list(_BUILDERS)


def build_notification_service(channel: str, settings: AppSettings) -> NotificationService:
    """依通道名稱（不分大小寫）建立通知服務。"""

    builder = _BUILDERS.get(normalize_key(channel))
    if builder is None:
        raise UnsupportedChannelError(channel)
    return builder(settings)
