"""Report generation exports."""

from .generator import (
    ExcelReportGenerator,
    PDFReportGenerator,
    ReportGenerator,
    WordReportGenerator,
)
from .registry import GeneratorRegistry

__all__ = [
    "ExcelReportGenerator",
    "GeneratorRegistry",
    "PDFReportGenerator",
    "ReportGenerator",
    "WordReportGenerator",
]
