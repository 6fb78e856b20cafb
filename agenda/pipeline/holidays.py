from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Union

from ..models import Week
from .weeks import partition_range


HolidayTable = Mapping[str, str]


def _sunday_based(day: date) -> int:
    # date.weekday() is Monday=0; holiday rules count from Sunday=0
    return (day.weekday() + 1) % 7


def holiday_key(day: date) -> str:
    return day.isoformat()


@dataclass(frozen=True)
class FixedDateRule:
    month: int
    day: int
    name: str

    def resolve(self, year: int) -> Optional[date]:
        return date(year, self.month, self.day)


@dataclass(frozen=True)
class NthWeekdayRule:
    """The n-th ``weekday`` (0=Sunday..6=Saturday) of ``month``."""

    month: int
    n: int
    weekday: int
    name: str

    def resolve(self, year: int) -> Optional[date]:
        count = 0
        current = date(year, self.month, 1)
        while current.month == self.month:
            if _sunday_based(current) == self.weekday:
                count += 1
                if count == self.n:
                    return current
            current += timedelta(days=1)
        # month has fewer than n occurrences
        return None


@dataclass(frozen=True)
class LastWeekdayRule:
    month: int
    weekday: int
    name: str

    def resolve(self, year: int) -> Optional[date]:
        last_day = calendar.monthrange(year, self.month)[1]
        current = date(year, self.month, last_day)
        while _sunday_based(current) != self.weekday:
            current -= timedelta(days=1)
        return current


HolidayRule = Union[FixedDateRule, NthWeekdayRule, LastWeekdayRule]

SUNDAY, MONDAY, THURSDAY = 0, 1, 4

# Applied in order; a later rule landing on the same date replaces the earlier name.
DEFAULT_RULES: Sequence[HolidayRule] = (
    FixedDateRule(1, 1, "New Year's Day"),
    FixedDateRule(2, 14, "Valentine's Day"),
    FixedDateRule(3, 17, "St. Patrick's Day"),
    FixedDateRule(6, 19, "Juneteenth"),
    FixedDateRule(7, 4, "Independence Day"),
    FixedDateRule(10, 31, "Halloween"),
    FixedDateRule(11, 11, "Veterans Day"),
    FixedDateRule(12, 25, "Christmas Day"),
    FixedDateRule(12, 31, "New Year's Eve"),
    NthWeekdayRule(1, 3, MONDAY, "Martin Luther King, Jr. Day"),
    NthWeekdayRule(2, 3, MONDAY, "Presidents' Day"),
    NthWeekdayRule(5, 2, SUNDAY, "Mother's Day"),
    LastWeekdayRule(5, MONDAY, "Memorial Day"),
    NthWeekdayRule(6, 3, SUNDAY, "Father's Day"),
    NthWeekdayRule(9, 1, MONDAY, "Labor Day"),
    NthWeekdayRule(10, 2, MONDAY, "Indigenous Peoples' Day"),
    NthWeekdayRule(11, 4, THURSDAY, "Thanksgiving Day"),
)


def holidays_for_year(year: int, rules: Sequence[HolidayRule] = DEFAULT_RULES) -> HolidayTable:
    holidays: Dict[str, str] = {}
    for rule in rules:
        resolved = rule.resolve(year)
        if resolved is not None:
            holidays[holiday_key(resolved)] = rule.name
    return MappingProxyType(holidays)


@lru_cache(maxsize=32)
def build_holiday_table(start_year: int, end_year: int) -> HolidayTable:
    """Union of the per-year tables for ``start_year..end_year`` inclusive."""
    merged: Dict[str, str] = {}
    for year in range(start_year, end_year + 1):
        merged.update(holidays_for_year(year))
    return MappingProxyType(merged)


@lru_cache(maxsize=64)
def _year_fallback(year: int) -> HolidayTable:
    return holidays_for_year(year)


class HolidayLookup:
    def __init__(self, table: HolidayTable, enabled: bool = True) -> None:
        self.table = table
        self.enabled = enabled

    @classmethod
    def for_weeks(cls, weeks: Sequence[Week], enabled: bool = True) -> "HolidayLookup":
        """Table covering only the years the given weeks touch."""
        if not weeks:
            return cls(MappingProxyType({}), enabled=enabled)
        return cls(build_holiday_table(weeks[0][0].year, weeks[-1][-1].year), enabled=enabled)

    @classmethod
    def for_range(cls, start: str, end: str, enabled: bool = True) -> "HolidayLookup":
        return cls.for_weeks(partition_range(start, end), enabled=enabled)

    def get(self, day: date) -> Optional[str]:
        if not self.enabled:
            return None
        key = holiday_key(day)
        name = self.table.get(key)
        if name:
            return name
        return _year_fallback(day.year).get(key)
