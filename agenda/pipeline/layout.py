from __future__ import annotations

from typing import List

from .. import config
from ..models import CellRect, PageLayout


def compute_geometry(
    page_width: float = 612.0,
    page_height: float = 792.0,
    margin: float = config.PAGE_MARGIN,
    header_height: float = config.HEADER_HEIGHT,
    grid_gap: float = config.GRID_GAP,
) -> PageLayout:
    content_width = page_width - margin * 2
    grid_top = margin + header_height + grid_gap
    grid_height = page_height - grid_top - margin - grid_gap
    return PageLayout(
        page_width=page_width,
        page_height=page_height,
        margin=margin,
        header_height=header_height,
        content_width=content_width,
        grid_left=margin,
        grid_top=grid_top,
        grid_height=grid_height,
        row_height=grid_height / 3,
        col_width=content_width / 2,
    )


def cell_rects(layout: PageLayout) -> List[CellRect]:
    """
    Day cells in Monday..Sunday order.

    Two columns by three rows; the bottom-right cell is split into a
    Saturday half on top and a Sunday half below.
    """
    left = layout.grid_left
    right = layout.grid_left + layout.col_width
    top = layout.grid_top
    w = layout.col_width
    h = layout.row_height
    return [
        CellRect(left, top, w, h),
        CellRect(right, top, w, h),
        CellRect(left, top + h, w, h),
        CellRect(right, top + h, w, h),
        CellRect(left, top + 2 * h, w, h),
        CellRect(right, top + 2 * h, w, h / 2),
        CellRect(right, top + 2.5 * h, w, h / 2),
    ]


def layout_for_paper(paper: str) -> PageLayout:
    key = (paper or "letter").strip().lower()
    if key not in config.PAPER_SIZES:
        raise ValueError(f"Unknown paper size '{paper}'. Available: {list(config.PAPER_SIZES)}")
    width, height = config.PAPER_SIZES[key]
    return compute_geometry(width, height)
