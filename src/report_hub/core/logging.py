from __future__ import annotations

import logging

import structlog


def configure_logging(level: int = logging.INFO, *, json_output: bool = False) -> None:
    """設定 stdlib 與 structlog 的日誌輸出；json_output 時改用 JSON 格式。"""

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s %(message)s",
    )
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def resolve_level(name: str) -> int:
    """將 LOG_LEVEL 名稱轉換為 logging 等級。"""

    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"未知的日誌等級: {name}")
    return level
