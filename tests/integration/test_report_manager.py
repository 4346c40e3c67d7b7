import pytest
from structlog.testing import capture_logs

from report_hub.config.settings import AppSettings
from report_hub.core.errors import UnsupportedFormatError
from report_hub.core.types import ReportFormat, StylingOptions
from report_hub.reports import GeneratorRegistry, WordReportGenerator
from report_hub.services.report_manager import ReportManager


def _manager() -> ReportManager:
    return ReportManager(settings=AppSettings())


def test_generate_and_send_end_to_end() -> None:
    manager = _manager()
    styling = StylingOptions(font_family="Arial", font_size=12, color="blue")

    report = manager.generate_report("data", "PDF", styling)

    assert report.format is ReportFormat.PDF
    assert report.styling is styling
    assert manager.send_report(report, "user@x.com", "email") is True
    assert manager.send_report(report, "notanumber", "whatsapp") is False
    assert manager.send_report(report, "-100123", "Telegram") is True


def test_generate_report_raises_for_unknown_format() -> None:
    with pytest.raises(UnsupportedFormatError):
        _manager().generate_report("data", "csv", StylingOptions())


def test_send_report_logs_and_fails_for_unknown_channel() -> None:
    manager = _manager()
    report = manager.generate_report("data", "word", StylingOptions())

    with capture_logs() as logs:
        assert manager.send_report(report, "user@x.com", "fax") is False

    warning = next(entry for entry in logs if entry["event"] == "report_channel_unsupported")
    assert warning["channel"] == "fax"
    assert warning["log_level"] == "warning"


def test_send_report_derives_message_and_attachment() -> None:
    manager = _manager()
    report = manager.generate_report("data", "excel", StylingOptions())

    with capture_logs() as logs:
        assert manager.send_report(report, "+1234567890", "whatsapp") is True

    finished = next(entry for entry in logs if entry["event"] == "report_send_finished")
    assert finished["service"] == "WhatsApp"
    assert finished["format"] == "Excel"
    assert finished["delivered"] is True


def test_manager_uses_injected_registry() -> None:
    registry = GeneratorRegistry.with_defaults()
    registry.register_generator("docx", WordReportGenerator())
    manager = ReportManager(settings=AppSettings(), registry=registry)

    report = manager.generate_report("data", "DOCX", StylingOptions())

    assert report.format is ReportFormat.WORD
    assert manager.registry is registry


def test_demonstrate_decorator_renders_each_layer() -> None:
    layers = _manager().demonstrate_decorator()

    assert [label for label, _ in layers] == ["basic", "color", "font", "border"]
    rendered = dict(layers)
    assert rendered["basic"] == "Contenido básico del reporte: Datos del proyecto"
    assert rendered["color"].endswith("[blue]Datos del proyecto[/blue]")
    assert rendered["font"].endswith("[Times New Roman:14:bold]Datos del proyecto[/font]")
    assert rendered["border"].endswith("[solid:2:black]Datos del proyecto[/border]")


def test_run_demo_uses_configured_recipients() -> None:
    result = _manager().run_demo()

    assert [report.format for report in result.reports] == [
        ReportFormat.PDF,
        ReportFormat.EXCEL,
        ReportFormat.WORD,
    ]
    assert result.deliveries == {"email": True, "whatsapp": True, "telegram": True}
    assert result.all_delivered is True
    assert len(result.layers) == 4

    broken = ReportManager(settings=AppSettings(DEMO_TELEGRAM_RECIPIENT="@reports")).run_demo()
    assert broken.deliveries["telegram"] is False
    assert broken.all_delivered is False


def test_channel_status_reports_every_channel() -> None:
    assert _manager().channel_status() == {"email": True, "whatsapp": True, "telegram": True}
