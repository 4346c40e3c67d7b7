"""Report components and the decorators that wrap them.

Each decorator derives its marker from the base content returned by the wrapped
component, not from that component's rendered text, so only the outermost
decorator's marker appears in a rendered string.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, List

from ..core.types import StylingOptions


class ReportComponent(ABC):
    """可被裝飾的報表元件。"""

    @abstractmethod
    def render(self) -> str:
        ...

    @property
    @abstractmethod
    def content(self) -> Any:
        ...

    @property
    @abstractmethod
    def styling(self) -> StylingOptions:
        ...


class BasicReport(ReportComponent):
    def __init__(self, content: Any, styling: StylingOptions) -> None:
        self._content = content
        self._styling = styling

    def render(self) -> str:
        return f"Contenido básico del reporte: {self._content}"

    @property
    def content(self) -> Any:
        return self._content

    @property
    def styling(self) -> StylingOptions:
        return self._styling


class ReportDecorator(ReportComponent):
    """包裝單一元件；內容與樣式一律委派給被包裝的元件。"""

    def __init__(self, component: ReportComponent) -> None:
        self.component = component

    def render(self) -> str:
        return self.component.render()

    @property
    def content(self) -> Any:
        return self.component.content

    @property
    def styling(self) -> StylingOptions:
        return self.component.styling

    @abstractmethod
    def apply_decoration(self, content: Any) -> str:
        ...


class ColorDecorator(ReportDecorator):
    def __init__(self, component: ReportComponent, color: str, background_color: str) -> None:
        super().__init__(component)
        self.color = color
        self.background_color = background_color

    def render(self) -> str:
        decorated = self.apply_decoration(self.component.content)
        return f"Contenido con color {self.color} y fondo {self.background_color}: {decorated}"

    def apply_decoration(self, content: Any) -> str:
        return f"[{self.color}]{content}[/{self.color}]"

    def background_marker(self, text: str) -> str:
        # not part of render()
        marker = f"{self.background_color} background"
        return f"[{marker}]{text}[/{marker}]"


class FontDecorator(ReportDecorator):
    def __init__(
        self,
        component: ReportComponent,
        font_family: str,
        font_size: int,
        font_weight: str,
    ) -> None:
        super().__init__(component)
        self.font_family = font_family
        self.font_size = font_size
        self.font_weight = font_weight

    def render(self) -> str:
        decorated = self.apply_decoration(self.component.content)
        return f"Contenido con fuente {self.font_family} tamaño {self.font_size}: {decorated}"

    def apply_decoration(self, content: Any) -> str:
        return f"[{self.font_family}:{self.font_size}:{self.font_weight}]{content}[/font]"


class BorderDecorator(ReportDecorator):
    def __init__(
        self,
        component: ReportComponent,
        border_style: str,
        border_width: int,
        border_color: str,
    ) -> None:
        super().__init__(component)
        self.border_style = border_style
        self.border_width = border_width
        self.border_color = border_color

    def render(self) -> str:
        decorated = self.apply_decoration(self.component.content)
        return (
            f"Contenido con borde {self.border_style} {self.border_width}px "
            f"{self.border_color}: {decorated}"
        )

    def apply_decoration(self, content: Any) -> str:
        return f"[{self.border_style}:{self.border_width}:{self.border_color}]{content}[/border]"


def iter_layers(component: ReportComponent) -> Iterator[ReportComponent]:
    """由最內層的基礎元件依序產出到最外層的元件。"""

    chain: List[ReportComponent] = [component]
    while isinstance(chain[-1], ReportDecorator):
        chain.append(chain[-1].component)
    return reversed(chain)
