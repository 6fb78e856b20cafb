from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from .. import config
from ..config import load_style_preset
from ..models import DrawPrimitive, LinePrimitive, PageLayout, RectPrimitive, TextPrimitive, Week
from .backend import DrawingBackend
from .formatting import DEFAULT_FORMATTER, DateFormatter, day_label, primary_month, week_range_label
from .holidays import HolidayLookup
from .layout import cell_rects


Measure = Callable[[str, str, float], float]
ProgressCallback = Callable[[int], None]


def _s(style: dict, key: str, default):
    return style.get(key, default)


def truncate_holiday(label: str, width: float, available: float) -> str:
    """
    Character-count truncation: labels wider than ``available`` keep their
    first HOLIDAY_LABEL_LIMIT characters plus an ellipsis. The result is not
    re-measured, so very wide glyphs can still overflow.
    """
    if width > available:
        return label[: config.HOLIDAY_LABEL_LIMIT] + config.ELLIPSIS
    return label


def _header(week: Week, layout: PageLayout, measure: Measure, style: dict, formatter: DateFormatter) -> List[DrawPrimitive]:
    font = str(_s(style, "font_name", "Helvetica-Bold"))
    ink = str(_s(style, "ink_color", "#1E293B"))
    margin = layout.margin
    baseline = margin + 40

    out: List[DrawPrimitive] = []
    month_text = primary_month(week, formatter).upper()
    out.append(TextPrimitive(month_text, margin + 5, baseline, font, float(_s(style, "month_size", 24)), ink))

    range_size = float(_s(style, "range_size", 14))
    range_text = week_range_label(week, formatter)
    range_width = measure(range_text, font, range_size)
    out.append(
        TextPrimitive(
            range_text,
            layout.page_width - margin - range_width - 5,
            baseline,
            font,
            range_size,
            str(_s(style, "range_color", "#475569")),
        )
    )

    out.append(
        LinePrimitive(
            margin,
            margin + 50,
            layout.page_width - margin,
            margin + 50,
            float(_s(style, "header_rule_width", 2)),
            ink,
        )
    )
    return out


def _grid(layout: PageLayout, style: dict) -> List[DrawPrimitive]:
    ink = str(_s(style, "ink_color", "#1E293B"))
    width = float(_s(style, "grid_line_width", 1))
    left = layout.grid_left
    right = layout.grid_left + layout.content_width
    top = layout.grid_top
    bottom = layout.grid_top + layout.grid_height
    middle = left + layout.col_width
    row = layout.row_height
    return [
        RectPrimitive(left, top, layout.content_width, layout.grid_height, width, ink),
        LinePrimitive(middle, top, middle, bottom, width, ink),
        LinePrimitive(left, top + row, right, top + row, width, ink),
        LinePrimitive(left, top + 2 * row, right, top + 2 * row, width, ink),
        LinePrimitive(middle, top + 2.5 * row, right, top + 2.5 * row, width, ink),
    ]


def _day_cells(
    week: Week,
    layout: PageLayout,
    lookup: HolidayLookup,
    measure: Measure,
    style: dict,
    formatter: DateFormatter,
) -> List[DrawPrimitive]:
    font = str(_s(style, "font_name", "Helvetica-Bold"))
    day_color = str(_s(style, "day_color", "#0F172A"))
    padding = float(_s(style, "cell_padding", 8))
    baseline = float(_s(style, "text_baseline", 16))
    header_h = float(_s(style, "cell_header_height", 24))
    weekday_size = float(_s(style, "weekday_size", 9))
    holiday_size = float(_s(style, "holiday_size", 8))
    date_size = float(_s(style, "date_size", 14))

    out: List[DrawPrimitive] = []
    for day, pos in zip(week, cell_rects(layout)):
        text_y = pos.y + baseline

        weekday = formatter.weekday_name(day).upper()
        out.append(TextPrimitive(weekday, pos.x + padding, text_y, font, weekday_size, day_color))

        holiday = lookup.get(day)
        if holiday:
            # weekday width measured at the holiday size
            weekday_width = measure(weekday, font, holiday_size)
            available = pos.width - weekday_width - float(_s(style, "date_reserve", 40))
            label = holiday.upper()
            label = truncate_holiday(label, measure(label, font, holiday_size), available)
            out.append(
                TextPrimitive(
                    label,
                    pos.x + padding + weekday_width + float(_s(style, "holiday_gap", 18)),
                    text_y,
                    font,
                    holiday_size,
                    str(_s(style, "holiday_color", "#DC2626")),
                )
            )

        date_text = day_label(day, formatter)
        date_width = measure(date_text, font, date_size)
        out.append(TextPrimitive(date_text, pos.x + pos.width - padding - date_width, text_y, font, date_size, day_color))

        out.append(
            LinePrimitive(
                pos.x,
                pos.y + header_h,
                pos.x + pos.width,
                pos.y + header_h,
                float(_s(style, "separator_width", 0.5)),
                str(_s(style, "separator_color", "#CBD5E1")),
            )
        )
    return out


def build_page(
    week: Week,
    layout: PageLayout,
    lookup: HolidayLookup,
    measure: Measure,
    style: Optional[dict] = None,
    formatter: DateFormatter = DEFAULT_FORMATTER,
) -> List[DrawPrimitive]:
    """Header, header rule, grid skeleton, then each day's content, in drawing order."""
    if style is None:
        style = load_style_preset()
    primitives: List[DrawPrimitive] = []
    primitives.extend(_header(week, layout, measure, style, formatter))
    primitives.extend(_grid(layout, style))
    primitives.extend(_day_cells(week, layout, lookup, measure, style, formatter))
    return primitives


def render_agenda(
    weeks: Sequence[Week],
    layout: PageLayout,
    lookup: HolidayLookup,
    backend: DrawingBackend,
    progress: Optional[ProgressCallback] = None,
    formatter: DateFormatter = DEFAULT_FORMATTER,
) -> int:
    style = load_style_preset()
    total = len(weeks)
    for index, week in enumerate(weeks):
        if index > 0:
            backend.new_page()
        for primitive in build_page(week, layout, lookup, backend.text_width, style, formatter):
            backend.draw(primitive)
        if progress is not None:
            # half-up, 12.5 reports 13
            progress(int((index + 1) * 100 / total + 0.5))
    return total
