from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """應用程式環境設定。"""

    smtp_server: str = Field("smtp.gmail.com", alias="SMTP_SERVER")
    smtp_port: Annotated[int, Field(ge=1, le=65535)] = Field(587, alias="SMTP_PORT")
    smtp_username: str = Field("user@gmail.com", alias="SMTP_USERNAME")
    smtp_password: str = Field("password", alias="SMTP_PASSWORD")

    whatsapp_api_key: str = Field("api_key_123", alias="WHATSAPP_API_KEY")
    whatsapp_phone_number: str = Field("+1234567890", alias="WHATSAPP_PHONE_NUMBER")

    telegram_bot_token: str = Field("bot_token_456", alias="TELEGRAM_BOT_TOKEN")
    telegram_chat_id: str = Field("123456789", alias="TELEGRAM_CHAT_ID")

    demo_project_data: str = Field("Informe del Proyecto XYZ - Q4 2024", alias="DEMO_PROJECT_DATA")
    demo_email_recipient: str = Field("usuario@email.com", alias="DEMO_EMAIL_RECIPIENT")
    demo_whatsapp_recipient: str = Field("+1234567890", alias="DEMO_WHATSAPP_RECIPIENT")
    demo_telegram_recipient: str = Field("123456789", alias="DEMO_TELEGRAM_RECIPIENT")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(env_file=(".env",), env_file_encoding="utf-8", extra="ignore")

    @property
    def demo_recipients(self) -> dict[str, str]:
        """示範流程中每個通道的收件者。"""

        return {
            "email": self.demo_email_recipient,
            "whatsapp": self.demo_whatsapp_recipient,
            "telegram": self.demo_telegram_recipient,
        }


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """載入並快取設定。"""

    return AppSettings()
