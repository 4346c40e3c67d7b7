from __future__ import annotations

from typing import List, Optional, Tuple

import typer

from ..config.settings import AppSettings, get_settings
from ..config.validators import validate_channel_settings
from ..core.errors import ReportHubError
from ..core.logging import configure_logging, resolve_level
from ..core.types import StylingOptions
from ..services.report_manager import DemoResult, ReportManager

app = typer.Typer(help="Report generation and delivery CLI")


@app.command("demo")
def command_demo() -> None:
    """執行完整示範：產生、送出並裝飾報表。"""

    manager = _build_manager()
    result = manager.run_demo()
    _print_demo(result)
    if not result.all_delivered:
        raise typer.Exit(code=1)


@app.command("generate")
def command_generate(
    format_id: str = typer.Option("pdf", "--format", help="報表格式：pdf、excel、word"),
    data: Optional[str] = typer.Option(None, help="報表內容，預設使用 DEMO_PROJECT_DATA"),
    font_family: str = typer.Option("Arial", help="字型"),
    font_size: int = typer.Option(12, help="字級"),
    color: str = typer.Option("black", help="文字顏色"),
) -> None:
    """產生單一報表並輸出摘要。"""

    manager = _build_manager()
    styling = StylingOptions(font_family=font_family, font_size=font_size, color=color)
    try:
        report = manager.generate_report(data or get_settings().demo_project_data, format_id, styling)
    except ReportHubError as error:
        exit_with_error(error)
    typer.echo(report.summarize())


@app.command("send")
def command_send(
    recipient: str = typer.Option(..., help="收件者：電子郵件、電話號碼或 chat id"),
    channel: str = typer.Option("email", help="通知通道：email、whatsapp、telegram"),
    format_id: str = typer.Option("pdf", "--format", help="報表格式：pdf、excel、word"),
    data: Optional[str] = typer.Option(None, help="報表內容，預設使用 DEMO_PROJECT_DATA"),
) -> None:
    """產生報表後透過指定通道送出。"""

    manager = _build_manager()
    try:
        report = manager.generate_report(
            data or get_settings().demo_project_data, format_id, StylingOptions()
        )
    except ReportHubError as error:
        exit_with_error(error)

    delivered = manager.send_report(report, recipient, channel)
    typer.echo(f"channel={channel} recipient={recipient} delivered={delivered}")
    if not delivered:
        raise typer.Exit(code=1)


@app.command("decorate")
def command_decorate(
    content: str = typer.Option("Datos del proyecto", help="要裝飾的內容"),
) -> None:
    """逐層輸出裝飾鏈的渲染結果。"""

    manager = _build_manager()
    _print_layers(manager.demonstrate_decorator(content))


@app.command("channels")
def command_channels() -> None:
    """列出各通知通道的可用狀態。"""

    manager = _build_manager()
    for channel, available in manager.channel_status().items():
        typer.echo(f"{channel}: {'available' if available else 'unavailable'}")


def exit_with_error(error: ReportHubError) -> None:
    """輸出錯誤訊息並以代碼 2 結束程式。"""

    typer.echo(f"[ERROR] {error}", err=True)
    raise typer.Exit(code=2)


def _build_manager() -> ReportManager:
    try:
        settings: AppSettings = get_settings()
        configure_logging(resolve_level(settings.log_level), json_output=settings.log_json)
        validate_channel_settings(settings)
    except ValueError as error:
        typer.echo(f"[ERROR] {error}", err=True)
        raise typer.Exit(code=2)
    except ReportHubError as error:
        exit_with_error(error)
    return ReportManager(settings=settings)


def _print_demo(result: DemoResult) -> None:
    typer.echo("=== Demo Summary ===")
    typer.echo("--- Reports ---")
    for report in result.reports:
        typer.echo(report.summarize())
    typer.echo("--- Deliveries ---")
    for channel, delivered in result.deliveries.items():
        typer.echo(f"{channel}: {delivered}")
    typer.echo("--- Decoration ---")
    _print_layers(result.layers)


def _print_layers(layers: List[Tuple[str, str]]) -> None:
    for label, rendered in layers:
        typer.echo(f"{label}: {rendered}")
