from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..models import Week


class DateFormatter(Protocol):
    def weekday_name(self, day: date) -> str: ...

    def month_name(self, day: date) -> str: ...

    def month_abbr(self, day: date) -> str: ...


class EnglishFormatter:
    """en-US names, independent of the process locale."""

    WEEKDAYS: Sequence[str] = (
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    )
    MONTHS: Sequence[str] = (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    )

    def weekday_name(self, day: date) -> str:
        return self.WEEKDAYS[day.weekday()]

    def month_name(self, day: date) -> str:
        return self.MONTHS[day.month - 1]

    def month_abbr(self, day: date) -> str:
        return self.MONTHS[day.month - 1][:3]


DEFAULT_FORMATTER = EnglishFormatter()


def primary_month(week: Week, formatter: DateFormatter = DEFAULT_FORMATTER) -> str:
    # Thursday decides which month a boundary week belongs to
    return formatter.month_name(week[3])


def week_range_label(week: Week, formatter: DateFormatter = DEFAULT_FORMATTER) -> str:
    if not week:
        return ""
    first, last = week[0], week[-1]
    start_month = formatter.month_abbr(first)
    end_month = formatter.month_abbr(last)
    if start_month == end_month:
        return f"{start_month} {first.day} - {last.day}, {last.year}"
    return f"{start_month} {first.day} - {end_month} {last.day}, {last.year}"


def day_label(day: date, formatter: DateFormatter = DEFAULT_FORMATTER) -> str:
    if day.day == 1:
        return f"{formatter.month_abbr(day)} {day.day}"
    return str(day.day)
