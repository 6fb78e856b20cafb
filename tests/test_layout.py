from __future__ import annotations

from itertools import combinations

import pytest

from agenda.pipeline.layout import cell_rects, compute_geometry, layout_for_paper


@pytest.fixture
def letter():
    return compute_geometry(612, 792, 36)


def _overlap(a, b) -> float:
    w = min(a.right, b.right) - max(a.x, b.x)
    h = min(a.bottom, b.bottom) - max(a.y, b.y)
    return max(w, 0.0) * max(h, 0.0)


def test_letter_constants(letter) -> None:
    assert letter.content_width == 540
    assert letter.grid_top == 116
    assert letter.grid_height == 620
    assert letter.col_width == 270
    assert letter.row_height == pytest.approx(620 / 3)


def test_cell_assignment(letter) -> None:
    cells = cell_rects(letter)
    h = letter.row_height
    assert len(cells) == 7
    assert (cells[0].x, cells[0].y) == (36, 116)
    assert (cells[1].x, cells[1].y) == (306, 116)
    assert cells[3].y == pytest.approx(116 + h)
    assert cells[4].height == pytest.approx(h)
    assert cells[5].x == cells[6].x == 306
    assert cells[5].height == pytest.approx(h / 2)
    assert cells[6].y == pytest.approx(116 + 2.5 * h)


@pytest.mark.parametrize("paper", ["letter", "a4"])
def test_cells_tile_the_grid(paper) -> None:
    layout = layout_for_paper(paper)
    cells = cell_rects(layout)
    grid = layout.grid_rect()
    assert sum(c.area for c in cells) == pytest.approx(grid.area)
    for a, b in combinations(cells, 2):
        assert _overlap(a, b) == pytest.approx(0.0, abs=1e-6)
    for c in cells:
        assert c.x >= grid.x and c.right <= grid.right + 1e-9
        assert c.y >= grid.y and c.bottom <= grid.bottom + 1e-9


def test_weekend_pair_matches_friday_column(letter) -> None:
    cells = cell_rects(letter)
    fri, sat, sun = cells[4], cells[5], cells[6]
    assert sat.width == sun.width == fri.width
    assert sat.y == fri.y
    assert sat.height + sun.height == pytest.approx(fri.height)
    assert sun.bottom == pytest.approx(fri.bottom)


def test_unknown_paper_rejected() -> None:
    with pytest.raises(ValueError):
        layout_for_paper("tabloid")
