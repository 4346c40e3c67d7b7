"""Report decoration exports."""

from .components import (
    BasicReport,
    BorderDecorator,
    ColorDecorator,
    FontDecorator,
    ReportComponent,
    ReportDecorator,
    iter_layers,
)

__all__ = [
    "BasicReport",
    "BorderDecorator",
    "ColorDecorator",
    "FontDecorator",
    "ReportComponent",
    "ReportDecorator",
    "iter_layers",
]
