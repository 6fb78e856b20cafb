from __future__ import annotations

from datetime import date
from types import MappingProxyType

import pytest

from agenda.models import LinePrimitive, RectPrimitive, TextPrimitive
from agenda.pipeline.backend import RecordingBackend
from agenda.pipeline.formatting import day_label, primary_month, week_range_label
from agenda.pipeline.holidays import HolidayLookup
from agenda.pipeline.layout import compute_geometry
from agenda.pipeline.render_pdf import build_page, render_agenda, truncate_holiday
from agenda.pipeline.weeks import partition_range


def fixed_measure(text: str, font: str, size: float) -> float:  # noqa: ARG001 - test helper
    return len(text) * size


@pytest.fixture
def layout():
    return compute_geometry()


def _week(start: str):
    return partition_range(start, start)[0]


def _texts(primitives):
    return [p for p in primitives if isinstance(p, TextPrimitive)]


def test_month_boundary_week_labels() -> None:
    week = _week("2025-10-27")
    assert week[3] == date(2025, 10, 30)
    assert primary_month(week) == "October"
    assert week_range_label(week) == "Oct 27 - Nov 2, 2025"


def test_same_month_and_year_boundary_labels() -> None:
    assert week_range_label(_week("2025-11-03")) == "Nov 3 - 9, 2025"
    assert week_range_label(_week("2025-12-29")) == "Dec 29 - Jan 4, 2026"
    assert primary_month(_week("2025-12-29")) == "January"


def test_day_label_first_of_month() -> None:
    assert day_label(date(2025, 11, 1)) == "Nov 1"
    assert day_label(date(2025, 11, 2)) == "2"


def test_page_primitive_order(layout) -> None:
    lookup = HolidayLookup.for_range("2025-11-24", "2025-11-30")
    primitives = build_page(_week("2025-11-24"), layout, lookup, fixed_measure)
    assert len(primitives) == 3 + 5 + 7 * 3 + 1
    assert [p.kind for p in primitives[:8]] == ["text", "text", "line", "rect", "line", "line", "line", "line"]
    header = primitives[0]
    assert header.text == "NOVEMBER"
    assert (header.x, header.y, header.size) == (41, 76, 24)
    rng = primitives[1]
    assert rng.text == "Nov 24 - 30, 2025"
    assert rng.x == 612 - 36 - len(rng.text) * 14 - 5
    rule = primitives[2]
    assert isinstance(rule, LinePrimitive)
    assert (rule.y1, rule.width) == (86, 2)
    assert isinstance(primitives[3], RectPrimitive)


def test_day_content_positions(layout) -> None:
    lookup = HolidayLookup.for_range("2025-11-24", "2025-11-30")
    primitives = build_page(_week("2025-11-24"), layout, lookup, fixed_measure)
    texts = _texts(primitives)
    monday = next(t for t in texts if t.text == "MONDAY")
    assert (monday.x, monday.y, monday.size) == (44, 132, 9)
    holiday = next(t for t in texts if t.text == "THANKSGIVING DAY")
    assert holiday.color == "#DC2626"
    assert holiday.size == 8
    assert holiday.x == 306 + 8 + len("THURSDAY") * 8 + 18
    date_text = next(t for t in texts if t.text == "24")
    assert date_text.x == 36 + 270 - 8 - 2 * 14
    separators = [p for p in primitives[8:] if isinstance(p, LinePrimitive)]
    assert len(separators) == 7
    assert separators[-1].y1 == pytest.approx(layout.grid_top + 2.5 * layout.row_height + 24)
    assert separators[-1].width == 0.5


def test_first_of_month_shows_month(layout) -> None:
    lookup = HolidayLookup(MappingProxyType({}), enabled=False)
    texts = _texts(build_page(_week("2025-10-27"), layout, lookup, fixed_measure))
    assert "Nov 1" in [t.text for t in texts]


def test_long_holiday_is_truncated(layout) -> None:
    name = "A very long made up holiday name for testing"
    lookup = HolidayLookup(MappingProxyType({"2025-11-27": name}))
    texts = _texts(build_page(_week("2025-11-24"), layout, lookup, fixed_measure))
    label = next(t for t in texts if t.color == "#DC2626")
    assert label.text == name.upper()[:20] + "..."


def test_truncate_keeps_label_that_fits() -> None:
    assert truncate_holiday("LABOR DAY", 40, 100) == "LABOR DAY"
    assert truncate_holiday("X" * 30, 200, 100) == "X" * 20 + "..."


def test_hidden_holidays_emit_no_labels(layout) -> None:
    lookup = HolidayLookup.for_range("2025-11-24", "2025-11-30", enabled=False)
    primitives = build_page(_week("2025-11-24"), layout, lookup, fixed_measure)
    assert len(primitives) == 3 + 5 + 7 * 3
    assert all(t.color != "#DC2626" for t in _texts(primitives))


def test_render_agenda_pages_and_progress(layout) -> None:
    weeks = partition_range("2025-11-03", "2025-11-30")
    backend = RecordingBackend()
    seen = []
    pages = render_agenda(weeks, layout, HolidayLookup.for_range("2025-11-03", "2025-11-30"), backend, progress=seen.append)
    assert pages == 4
    assert len(backend.pages) == 4
    assert seen == [25, 50, 75, 100]
    assert backend.pages[0][0].text == "NOVEMBER"


def test_progress_rounds_half_up(layout) -> None:
    weeks = partition_range("2025-01-06", "2025-03-02")
    seen = []
    render_agenda(weeks, layout, HolidayLookup.for_range("2025-01-06", "2025-03-02"), RecordingBackend(), progress=seen.append)
    assert len(weeks) == 8
    assert seen[0] == 13
    assert seen[-1] == 100
