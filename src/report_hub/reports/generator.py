"""報表產生器：各格式共用同一條產生流程，只在文件建構步驟不同。"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..core.types import Report, ReportFormat, StylingOptions


logger = logging.getLogger(__name__)


class ReportGenerator(ABC):
    """報表產生器基底類別，產生器本身不保存狀態，可共用單一實例。"""

    format: ReportFormat

    def generate(self, data: Any, styling: StylingOptions) -> Report:
        """依固定流程產生報表並標記本產生器的格式。"""

        logger.info("report_generation_started", extra={"format": self.format.value})
        processed = self._process_data(data)
        styled = self._apply_styling(processed, styling)
        self._build_document(styling)
        return Report(content=styled, format=self.format, styling=styling)

    def _process_data(self, data: Any) -> Any:
        logger.info("report_data_processing")
        return data

    def _apply_styling(self, content: Any, styling: StylingOptions) -> Any:
        logger.info(
            "report_styling_applied",
            extra={"color": styling.color, "font_family": styling.font_family},
        )
        return content

    @abstractmethod
    def _build_document(self, styling: StylingOptions) -> None:
        """模擬各格式的文件建構。"""


class PDFReportGenerator(ReportGenerator):
    format = ReportFormat.PDF

    def _build_document(self, styling: StylingOptions) -> None:
        logger.info("pdf_document_created")
        logger.info("pdf_styling_applied", extra={"font_size": styling.font_size})


class ExcelReportGenerator(ReportGenerator):
    format = ReportFormat.EXCEL

    def _build_document(self, styling: StylingOptions) -> None:
        logger.info("excel_workbook_created")
        logger.info("excel_styling_applied", extra={"font_size": styling.font_size})


class WordReportGenerator(ReportGenerator):
    format = ReportFormat.WORD

    def _build_document(self, styling: StylingOptions) -> None:
        logger.info("word_document_created")
        logger.info("word_styling_applied", extra={"font_size": styling.font_size})
