from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class NotificationService(ABC):
    """所有通知通道共用的傳送介面。"""

    service_name: str

    @abstractmethod
    def send_notification(
        self,
        recipient: str,
        message: str,
        attachment: Optional[Path] = None,
    ) -> bool:
        """傳送通知；收件者格式不符時回傳 False 而非拋出例外。"""

    @abstractmethod
    def is_available(self) -> bool:
        """預先檢查通道是否可用，傳送流程本身不會呼叫。"""
