"""Notification channel exports."""

from .base import NotificationService
from .channels import build_notification_service, supported_channels
from .email import EmailNotificationService
from .telegram import TelegramAdapter, TelegramBotClient
from .whatsapp import WhatsAppAdapter, WhatsAppClient

__all__ = [
    "EmailNotificationService",
    "NotificationService",
    "TelegramAdapter",
    "TelegramBotClient",
    "WhatsAppAdapter",
    "WhatsAppClient",
    "build_notification_service",
    "supported_channels",
]
