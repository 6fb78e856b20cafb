from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple
import json


BASE_DIR = Path(__file__).resolve().parents[1]
OUT_DIR = BASE_DIR / "out"
STYLE_PRESET_PATH = BASE_DIR / "assets" / "style" / "agenda_style.json"

DEFAULT_START = "2025-12-29"
DEFAULT_END = "2027-01-03"

# 3 years of weekly pages
MAX_WEEKS = 156

HOLIDAY_LABEL_LIMIT = 20
ELLIPSIS = "..."

EXPORT_START_DELAY = 0.1
PROGRESS_STARTED = 10

PAPER_SIZES: Dict[str, Tuple[float, float]] = {
    "letter": (612.0, 792.0),
    "a4": (595.2756, 841.8898),
}

PAGE_MARGIN = 36.0
HEADER_HEIGHT = 60.0
GRID_GAP = 20.0


def load_style_preset() -> dict:
    with STYLE_PRESET_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def set_out_dir(path: Path) -> None:
    global OUT_DIR
    OUT_DIR = path
