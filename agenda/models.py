from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from . import config


Week = Tuple[date, ...]


class ExportStatus(str, Enum):
    DONE = "DONE"
    FAILED = "FAILED"


@dataclass(frozen=True)
class CellRect:
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class PageLayout:
    """Page constants shared by every week page. Top-left origin, points."""

    page_width: float
    page_height: float
    margin: float
    header_height: float
    content_width: float
    grid_left: float
    grid_top: float
    grid_height: float
    row_height: float
    col_width: float

    def grid_rect(self) -> CellRect:
        return CellRect(self.grid_left, self.grid_top, self.content_width, self.grid_height)


@dataclass(frozen=True)
class TextPrimitive:
    text: str
    x: float
    y: float
    font: str
    size: float
    color: str
    kind: str = field(default="text", init=False)


@dataclass(frozen=True)
class LinePrimitive:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    color: str
    dash: Tuple[float, ...] = ()
    kind: str = field(default="line", init=False)


@dataclass(frozen=True)
class RectPrimitive:
    x: float
    y: float
    width: float
    height: float
    line_width: float
    color: str
    kind: str = field(default="rect", init=False)


DrawPrimitive = Union[TextPrimitive, LinePrimitive, RectPrimitive]


@dataclass(frozen=True)
class AgendaState:
    """Range, holiday toggle and computed weeks, passed between the pipeline steps.

    Editing the range does not recompute weeks; ``regenerate`` does.
    """

    start: str
    end: str
    show_holidays: bool = True
    weeks: Tuple[Week, ...] = ()

    @classmethod
    def default(cls) -> "AgendaState":
        return cls(config.DEFAULT_START, config.DEFAULT_END).regenerate()

    def with_range(self, start: str, end: str) -> "AgendaState":
        return replace(self, start=start, end=end)

    def with_holidays(self, show: bool) -> "AgendaState":
        return replace(self, show_holidays=show)

    def regenerate(self) -> "AgendaState":
        from .pipeline.weeks import partition_range

        return replace(self, weeks=tuple(partition_range(self.start, self.end)))

    def holiday_lookup(self):
        from .pipeline.holidays import HolidayLookup

        if self.weeks:
            return HolidayLookup.for_weeks(self.weeks, enabled=self.show_holidays)
        return HolidayLookup.for_range(self.start, self.end, enabled=self.show_holidays)


@dataclass
class ExportResult:
    path: Optional[Path]
    page_count: int
    status: ExportStatus
