from __future__ import annotations


class ReportHubError(Exception):
    """報表系統的基底例外。"""


class ConfigurationError(ReportHubError):
    """設定或環境變數錯誤。"""


class UnsupportedFormatError(ReportHubError):
    """查無對應的報表格式。"""

    def __init__(self, identifier: str, kind: str = "report format") -> None:
        super().__init__(f"Unsupported {kind}: {identifier}")
        self.identifier = identifier


class UnsupportedChannelError(UnsupportedFormatError):
    """查無對應的通知通道。"""

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier, kind="notification channel")
