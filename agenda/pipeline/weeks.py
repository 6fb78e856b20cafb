from __future__ import annotations

import re
from datetime import date, timedelta
from typing import List, Optional

from .. import config
from ..models import Week


ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# the last Monday whose whole week is representable
LAST_MONDAY = date.max - timedelta(days=6)


def parse_iso_date(text: Optional[str]) -> Optional[date]:
    """``YYYY-MM-DD`` only; anything else, including other ISO forms, gives None."""
    if not text:
        return None
    value = str(text).strip()
    if not ISO_DATE_RE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def monday_on_or_before(day: date) -> date:
    return day - timedelta(days=day.weekday())


def partition_weeks(start: date, end: date, max_weeks: int = config.MAX_WEEKS) -> List[Week]:
    """
    Monday-aligned 7-day weeks covering ``start..end``.

    The week holding ``end`` is always included. Output stops silently at
    ``max_weeks`` or at the last week that fits before ``date.max``; an
    inverted range gives an empty list.
    """
    if start > end:
        return []
    weeks: List[Week] = []
    current = monday_on_or_before(start)
    while current <= end and current <= LAST_MONDAY and len(weeks) < max_weeks:
        weeks.append(tuple(current + timedelta(days=i) for i in range(7)))
        if current > date.max - timedelta(days=7):
            break
        current += timedelta(days=7)
    return weeks


def partition_range(start: Optional[str], end: Optional[str], max_weeks: int = config.MAX_WEEKS) -> List[Week]:
    start_day = parse_iso_date(start)
    end_day = parse_iso_date(end)
    if start_day is None or end_day is None:
        return []
    return partition_weeks(start_day, end_day, max_weeks=max_weeks)
