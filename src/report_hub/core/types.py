from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .utils import utc_now


class ReportFormat(str, Enum):
    """支援的報表輸出格式。"""

    PDF = "PDF"
    EXCEL = "Excel"
    WORD = "Word"


class StylingOptions(BaseModel):
    """報表樣式設定，由持有的報表或裝飾器自行修改。"""

    font_family: str = "Arial"
    font_size: int = 12
    color: str = "black"
    background_color: str = "white"
    border_style: str = "none"
    border_width: int = 0
    border_color: str = "black"

    model_config = ConfigDict(validate_assignment=True)

    def summarize(self) -> str:
        return f"{self.font_family} {self.font_size}pt {self.color}"


class Report(BaseModel):
    """產生器輸出的報表，建立後不可變更。"""

    content: Any
    format: ReportFormat
    styling: StylingOptions
    generated_at: datetime = Field(default_factory=utc_now)

    model_config = ConfigDict(frozen=True)

    @property
    def extension(self) -> str:
        return self.format.value.lower()

    def summarize(self) -> str:
        """回傳單行摘要。"""

        return f"{self.format.value} report content={self.content!r} styling=({self.styling.summarize()})"


class BotInfo(BaseModel):
    """Telegram bot 的基本資訊。"""

    name: str
    version: str
