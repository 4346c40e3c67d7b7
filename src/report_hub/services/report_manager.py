from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import structlog

from ..config.settings import AppSettings
from ..core.errors import UnsupportedChannelError
from ..core.types import Report, StylingOptions
from ..decoration.components import (
    BasicReport,
    BorderDecorator,
    ColorDecorator,
    FontDecorator,
    iter_layers,
)
from ..notifications.channels import build_notification_service, supported_channels
from ..reports.registry import GeneratorRegistry


# 示範流程中依序送出的格式與通道
DEMO_DELIVERIES: Tuple[Tuple[str, str], ...] = (
    ("pdf", "email"),
    ("excel", "whatsapp"),
    ("word", "telegram"),
)
DEMO_DECORATION_CONTENT = "Datos del proyecto"
LAYER_LABELS = ("basic", "color", "font", "border")


@dataclass
class DemoResult:
    """封裝示範流程輸出結果。"""

    reports: List[Report]
    deliveries: Dict[str, bool] = field(default_factory=dict)
    layers: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def all_delivered(self) -> bool:
        return all(self.deliveries.values())


class ReportManager:
    """串接報表產生、通知傳送與內容裝飾的協調者。"""

    def __init__(self, settings: AppSettings, registry: Optional[GeneratorRegistry] = None) -> None:
        self._settings = settings
        self._registry = registry or GeneratorRegistry.with_defaults()
        self._logger = structlog.get_logger(__name__)

    @property
    def registry(self) -> GeneratorRegistry:
        return self._registry

    def generate_report(self, data: Any, format_id: str, styling: StylingOptions) -> Report:
        """產生報表；不支援的格式會拋出 UnsupportedFormatError。"""

        log = self._logger.bind(format=format_id)
        log.info("report_generate_started")
        generator = self._registry.create_generator(format_id)
        report = generator.generate(data, styling)
        log.info("report_generated", summary=report.summarize())
        return report

    def send_report(self, report: Report, recipient: str, channel: str) -> bool:
        """透過指定通道送出報表；不支援的通道記錄後回傳 False。"""

        log = self._logger.bind(format=report.format.value, channel=channel)
        log.info("report_send_started", recipient=recipient)
        try:
            service = build_notification_service(channel, self._settings)
        except UnsupportedChannelError as error:
            log.warning("report_channel_unsupported", error=str(error))
            return False

        message = f"Your report {report.format.value} is ready"
        attachment = Path(f"report.{report.extension}")
        delivered = service.send_notification(recipient, message, attachment)
        log.info("report_send_finished", service=service.service_name, delivered=delivered)
        return delivered

    def demonstrate_decorator(self, content: Any = DEMO_DECORATION_CONTENT) -> List[Tuple[str, str]]:
        """建立四層裝飾鏈並逐層輸出渲染結果。"""

        basic = BasicReport(content, StylingOptions(font_family="Arial", font_size=12, color="black"))
        colored = ColorDecorator(basic, "blue", "lightblue")
        fonted = FontDecorator(colored, "Times New Roman", 14, "bold")
        bordered = BorderDecorator(fonted, "solid", 2, "black")

        layers: List[Tuple[str, str]] = []
        for label, component in zip(LAYER_LABELS, iter_layers(bordered)):
            rendered = component.render()
            self._logger.info("decoration_layer_rendered", layer=label, rendered=rendered)
            layers.append((label, rendered))
        return layers

    def channel_status(self) -> Dict[str, bool]:
        """回傳每個通道的可用狀態。"""

        return {
            channel: build_notification_service(channel, self._settings).is_available()
            for channel in supported_channels()
        }

    def run_demo(self) -> DemoResult:
        """執行完整示範：產生三種報表、分別送出並展示裝飾鏈。"""

        styling = StylingOptions(font_family="Arial", font_size=12, color="blue")
        recipients = self._settings.demo_recipients
        result = DemoResult(reports=[])
        for format_id, channel in DEMO_DELIVERIES:
            report = self.generate_report(self._settings.demo_project_data, format_id, styling)
            result.reports.append(report)
            result.deliveries[channel] = self.send_report(report, recipients[channel], channel)
        result.layers = self.demonstrate_decorator()
        return result
