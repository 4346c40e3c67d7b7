from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from .base import NotificationService


logger = logging.getLogger(__name__)

PHONE_NUMBER_PATTERN = re.compile(r"\+?[0-9]{10,15}")
CONNECTED_STATUS = "Connected"


def is_valid_phone_number(value: Optional[str]) -> bool:
    return value is not None and PHONE_NUMBER_PATTERN.fullmatch(value) is not None


class WhatsAppClient:
    """Simulated WhatsApp Business API client."""

    def __init__(self, *, api_key: str, sender_phone: str) -> None:
        self._api_key = api_key.strip()
        self._sender_phone = sender_phone.strip()

    def send_message(self, phone_number: str, message: str) -> bool:
        logger.info(
            "whatsapp_message_sent",
            extra={"to": phone_number, "sender": self._sender_phone, "length": len(message)},
        )
        return True

    def send_file(self, phone_number: str, file_path: Path) -> bool:
        logger.info("whatsapp_file_sent", extra={"to": phone_number, "path": str(file_path)})
        return True

    def get_status(self) -> str:
        return CONNECTED_STATUS


class WhatsAppAdapter(NotificationService):
    """將 WhatsAppClient 轉接為通用的通知介面。"""

    service_name = "WhatsApp"

    def __init__(
        self,
        *,
        api_key: str,
        phone_number: str,
        client: Optional[WhatsAppClient] = None,
    ) -> None:
        self._client = client or WhatsAppClient(api_key=api_key, sender_phone=phone_number)

    def send_notification(
        self,
        recipient: str,
        message: str,
        attachment: Optional[Path] = None,
    ) -> bool:
        logger.info("whatsapp_send_requested", extra={"recipient": recipient})
        if not is_valid_phone_number(recipient):
            logger.warning(
                "whatsapp_recipient_invalid recipient=%s", recipient, extra={"recipient": recipient}
            )
            return False

        message_sent = self._client.send_message(recipient, message)
        file_sent = True
        if attachment is not None:
            file_sent = self._client.send_file(recipient, attachment)
        return message_sent and file_sent

    def is_available(self) -> bool:
        return self._client.get_status() == CONNECTED_STATUS
