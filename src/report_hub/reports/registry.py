from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from ..core.errors import UnsupportedFormatError
from ..core.utils import normalize_key
from .generator import (
    ExcelReportGenerator,
    PDFReportGenerator,
    ReportGenerator,
    WordReportGenerator,
)


class GeneratorRegistry:
    """依格式名稱（不分大小寫）查找報表產生器。"""

    def __init__(self, generators: Optional[Mapping[str, ReportGenerator]] = None) -> None:
        self._generators: Dict[str, ReportGenerator] = {}
        for format_id, generator in (generators or {}).items():
            self.register_generator(format_id, generator)

    @classmethod
    def with_defaults(cls) -> "GeneratorRegistry":
        """建立包含 pdf、excel、word 預設產生器的登錄表。"""

        return cls(
            {
                "pdf": PDFReportGenerator(),
                "excel": ExcelReportGenerator(),
                "word": WordReportGenerator(),
            }
        )

    def create_generator(self, format_id: str) -> ReportGenerator:
        generator = self._generators.get(normalize_key(format_id))
        if generator is None:
            raise UnsupportedFormatError(format_id)
        return generator

    def register_generator(self, format_id: str, generator: ReportGenerator) -> None:
        """新增或取代指定格式的產生器。"""

        self._generators[normalize_key(format_id)] = generator

    def supported_formats(self) -> List[str]:
        return sorted(self._generators)

    def __contains__(self, format_id: object) -> bool:
        return isinstance(format_id, str) and normalize_key(format_id) in self._generators
