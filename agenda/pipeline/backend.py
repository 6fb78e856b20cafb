from __future__ import annotations

from pathlib import Path
from typing import List, Protocol

from reportlab.lib import colors
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from ..models import DrawPrimitive, LinePrimitive, RectPrimitive, TextPrimitive


class BackendUnavailableError(RuntimeError):
    pass


class DrawingBackend(Protocol):
    def text_width(self, text: str, font: str, size: float) -> float: ...

    def draw(self, primitive: DrawPrimitive) -> None: ...

    def new_page(self) -> None: ...

    def save(self) -> None: ...


def _hex(value: str, default=colors.black) -> colors.Color:
    if not value:
        return default
    try:
        return colors.HexColor("#" + str(value).lstrip("#"))
    except ValueError:
        return default


class ReportLabBackend:
    """Draws primitives onto a reportlab canvas, flipping y to its bottom-left origin."""

    def __init__(self, output_path: Path, page_size: tuple[float, float]) -> None:
        self.output_path = output_path
        self.page_width, self.page_height = page_size
        self.canv = canvas.Canvas(str(output_path), pagesize=page_size)

    def text_width(self, text: str, font: str, size: float) -> float:
        return self.canv.stringWidth(text, font, size)

    def _y(self, y: float) -> float:
        return self.page_height - y

    def draw(self, primitive: DrawPrimitive) -> None:
        canv = self.canv
        if isinstance(primitive, TextPrimitive):
            canv.setFont(primitive.font, primitive.size)
            canv.setFillColor(_hex(primitive.color))
            canv.drawString(primitive.x, self._y(primitive.y), primitive.text)
        elif isinstance(primitive, LinePrimitive):
            canv.setStrokeColor(_hex(primitive.color))
            canv.setLineWidth(primitive.width)
            canv.setDash(list(primitive.dash) if primitive.dash else [])
            canv.line(primitive.x1, self._y(primitive.y1), primitive.x2, self._y(primitive.y2))
        elif isinstance(primitive, RectPrimitive):
            canv.setStrokeColor(_hex(primitive.color))
            canv.setLineWidth(primitive.line_width)
            canv.setDash([])
            canv.rect(
                primitive.x,
                self._y(primitive.y + primitive.height),
                primitive.width,
                primitive.height,
                stroke=1,
                fill=0,
            )
        else:
            raise TypeError(f"Unsupported primitive: {primitive!r}")

    def new_page(self) -> None:
        self.canv.showPage()

    def save(self) -> None:
        # the last page is still open
        self.canv.showPage()
        self.canv.save()


class RecordingBackend:
    """Keeps primitives in memory, one list per page."""

    def __init__(self) -> None:
        self.pages: List[List[DrawPrimitive]] = [[]]
        self.saved = False

    def text_width(self, text: str, font: str, size: float) -> float:
        return stringWidth(text, font, size)

    def draw(self, primitive: DrawPrimitive) -> None:
        self.pages[-1].append(primitive)

    def new_page(self) -> None:
        self.pages.append([])

    def save(self) -> None:
        self.saved = True
