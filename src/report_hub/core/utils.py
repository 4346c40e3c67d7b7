from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """回傳目前 UTC 時間。"""

    return datetime.now(tz=timezone.utc)


def normalize_key(identifier: str) -> str:
    """將格式或通道識別字轉為查表用的小寫鍵值。"""

    return identifier.lower()
