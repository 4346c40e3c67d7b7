"""Email channel backed by a simulated SMTP transport."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .base import NotificationService


logger = logging.getLogger(__name__)

EMAIL_SUBJECT = "Report generated"


def is_valid_email(address: Optional[str]) -> bool:
    return address is not None and "@" in address


class EmailNotificationService(NotificationService):
    service_name = "Email"

    def __init__(
        self,
        *,
        smtp_server: str,
        port: int,
        username: str,
        password: str,
    ) -> None:
        self._smtp_server = smtp_server.strip()
        self._port = port
        self._username = username
        self._password = password

    def send_notification(
        self,
        recipient: str,
        message: str,
        attachment: Optional[Path] = None,
    ) -> bool:
        logger.info("email_send_requested", extra={"recipient": recipient})
        if not is_valid_email(recipient):
            logger.warning(
                "email_recipient_invalid recipient=%s", recipient, extra={"recipient": recipient}
            )
            return False

        self._configure_smtp()
        return self._send_email(recipient, EMAIL_SUBJECT, message, attachment)

    def is_available(self) -> bool:
        return True

    def _configure_smtp(self) -> None:
        logger.info(
            "smtp_configured",
            extra={"server": self._smtp_server, "port": self._port, "username": self._username},
        )

    def _send_email(
        self,
        to_email: str,
        subject: str,
        body: str,
        attachment: Optional[Path],
    ) -> bool:
        logger.info(
            "email_sent",
            extra={
                "recipient": to_email,
                "subject": subject,
                "body_length": len(body),
                "attachment": attachment.name if attachment else None,
            },
        )
        return True
