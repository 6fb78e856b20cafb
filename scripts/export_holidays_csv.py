from __future__ import annotations

import argparse
import csv
from datetime import date
from pathlib import Path
from typing import Dict, List

from agenda.pipeline.formatting import DEFAULT_FORMATTER
from agenda.pipeline.holidays import build_holiday_table


def holiday_rows(start_year: int, end_year: int) -> List[Dict[str, str]]:
    """
    Flatten the holiday table into CSV rows ordered by date.
    The weekday column makes floating holidays easy to check by eye.
    """
    table = build_holiday_table(start_year, end_year)
    rows: List[Dict[str, str]] = []
    for key in sorted(table):
        day = date.fromisoformat(key)
        rows.append({"date": key, "weekday": DEFAULT_FORMATTER.weekday_name(day), "name": table[key]})
    return rows


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--start-year", type=int, required=True, help="First year")
    parser.add_argument("--end-year", type=int, default=None, help="Last year (defaults to start year)")
    parser.add_argument("--out", dest="out_csv", type=str, default="out/holidays.csv", help="Output CSV")
    args = parser.parse_args()

    end_year = args.end_year if args.end_year is not None else args.start_year
    rows = holiday_rows(args.start_year, end_year)

    out_path = Path(args.out_csv)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=["date", "weekday", "name"])
        writer.writeheader()
        writer.writerows(rows)

    print(f"OK: wrote {len(rows)} rows -> {out_path}")


if __name__ == "__main__":
    main()
