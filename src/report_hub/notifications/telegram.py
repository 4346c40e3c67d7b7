from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from ..core.types import BotInfo
from .base import NotificationService


logger = logging.getLogger(__name__)

CHAT_ID_PATTERN = re.compile(r"-?[0-9]+")


def is_valid_chat_id(value: Optional[str]) -> bool:
    return value is not None and CHAT_ID_PATTERN.fullmatch(value) is not None


class TelegramBotClient:
    """Simulated Telegram Bot API client."""

    def __init__(self, *, bot_token: str) -> None:
        self._bot_token = bot_token.strip()
        self._api_base = f"https://api.telegram.org/bot{self._bot_token}"

    def send_message(self, chat_id: str, text: str) -> bool:
        message = text.strip()
        # Telegram message limit is 4096 characters
        if len(message) > 4000:
            message = f"{message[:3900].rstrip()}\n\n...[truncated]"

        logger.info(
            "telegram_message_sent",
            extra={"url": f"{self._api_base}/sendMessage", "chat_id": chat_id, "length": len(message)},
        )
        return True

    def send_document(self, chat_id: str, file_path: Path, caption: Optional[str] = None) -> bool:
        logger.info(
            "telegram_document_sent",
            extra={"chat_id": chat_id, "path": str(file_path), "caption": caption},
        )
        return True

    def get_me(self) -> Optional[BotInfo]:
        return BotInfo(name="ReportBot", version="1.0")


class TelegramAdapter(NotificationService):
    """將 TelegramBotClient 轉接為通用的通知介面。"""

    service_name = "Telegram"

    def __init__(
        self,
        *,
        bot_token: str,
        chat_id: str,
        client: Optional[TelegramBotClient] = None,
    ) -> None:
        self._chat_id = chat_id.strip()
        self._client = client or TelegramBotClient(bot_token=bot_token)

    def send_notification(
        self,
        recipient: str,
        message: str,
        attachment: Optional[Path] = None,
    ) -> bool:
        logger.info("telegram_send_requested", extra={"recipient": recipient})
        if not is_valid_chat_id(recipient):
            logger.warning(
                "telegram_chat_id_invalid recipient=%s", recipient, extra={"recipient": recipient}
            )
            return False

        message_sent = self._client.send_message(recipient, message)
        document_sent = True
        if attachment is not None:
            document_sent = self._client.send_document(recipient, attachment)
        return message_sent and document_sent

    def is_available(self) -> bool:
        bot = self._client.get_me()
        logger.info("telegram_bot_checked", extra={"chat_id": self._chat_id, "bot": bot.name if bot else None})
        return bot is not None
