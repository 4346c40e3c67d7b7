import logging

import pytest

from report_hub.core.errors import UnsupportedFormatError
from report_hub.core.types import Report, ReportFormat, StylingOptions
from report_hub.reports import (
    ExcelReportGenerator,
    GeneratorRegistry,
    PDFReportGenerator,
    WordReportGenerator,
)


@pytest.mark.parametrize(
    ("format_id", "expected_type"),
    [
        ("pdf", PDFReportGenerator),
        ("PDF", PDFReportGenerator),
        ("Excel", ExcelReportGenerator),
        ("WORD", WordReportGenerator),
    ],
)
def test_create_generator_is_case_insensitive(format_id: str, expected_type: type) -> None:
    registry = GeneratorRegistry.with_defaults()
    assert isinstance(registry.create_generator(format_id), expected_type)


def test_create_generator_returns_shared_instance() -> None:
    registry = GeneratorRegistry.with_defaults()
    assert registry.create_generator("pdf") is registry.create_generator("Pdf")


@pytest.mark.parametrize("format_id", ["csv", "", "pdfx"])
def test_create_generator_rejects_unknown_format(format_id: str) -> None:
    registry = GeneratorRegistry.with_defaults()
    with pytest.raises(UnsupportedFormatError) as excinfo:
        registry.create_generator(format_id)
    assert excinfo.value.identifier == format_id


def test_register_generator_inserts_and_replaces() -> None:
    registry = GeneratorRegistry.with_defaults()
    word = WordReportGenerator()

    registry.register_generator("DOCX", word)
    registry.register_generator("pdf", word)

    assert registry.create_generator("docx") is word
    assert registry.create_generator("PDF") is word
    assert "Docx" in registry
    assert registry.supported_formats() == ["docx", "excel", "pdf", "word"]


def test_registries_do_not_share_state() -> None:
    first = GeneratorRegistry.with_defaults()
    second = GeneratorRegistry.with_defaults()
    first.register_generator("docx", WordReportGenerator())
    assert "docx" not in second


@pytest.mark.parametrize(
    ("generator", "expected_format"),
    [
        (PDFReportGenerator(), ReportFormat.PDF),
        (ExcelReportGenerator(), ReportFormat.EXCEL),
        (WordReportGenerator(), ReportFormat.WORD),
    ],
)
def test_generate_tags_format_and_keeps_styling(generator, expected_format: ReportFormat) -> None:
    styling = StylingOptions(font_family="Arial", font_size=12, color="blue")
    report = generator.generate("Informe Q4", styling)

    assert isinstance(report, Report)
    assert report.format is expected_format
    assert report.styling is styling
    assert report.content == "Informe Q4"


def test_generate_logs_pipeline_steps(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="report_hub.reports.generator"):
        ExcelReportGenerator().generate({"rows": 3}, StylingOptions())

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "report_generation_started",
        "report_data_processing",
        "report_styling_applied",
        "excel_workbook_created",
        "excel_styling_applied",
    ]


def test_report_is_immutable() -> None:
    report = PDFReportGenerator().generate("data", StylingOptions())
    with pytest.raises(ValueError):
        report.content = "changed"
    assert report.extension == "pdf"


def test_styling_defaults() -> None:
    styling = StylingOptions()
    assert styling.font_family == "Arial"
    assert styling.font_size == 12
    assert styling.border_style == "none"
    assert styling.border_width == 0
    styling.color = "red"
    assert styling.color == "red"


def test_styling_accepts_negative_sizes() -> None:
    styling = StylingOptions(font_size=-1, border_width=-2)
    styling.font_size = -10
    styling.border_width = -3
    assert (styling.font_size, styling.border_width) == (-10, -3)

    report = PDFReportGenerator().generate("d", styling)
    assert report.styling is styling
