"""Solutions to problems on character grids."""

from __future__ import annotations

from collections.abc import Iterable


def hakkari(rows: Iterable[str]) -> list[tuple[int, int]]:
    """Return the 1-based (row, column) of every ``*``, row by row."""
    return [
        (row_number, column_number)
        for row_number, row in enumerate(rows, start=1)
        for column_number, cell in enumerate(row, start=1)
        if cell == "*"
    ]


def umferd(rows: Iterable[str]) -> float:
    """Return the fraction of cells in the grid that are ``.``."""
    cells = "".join(rows)
    if not cells:
        raise ValueError("grid has no cells")
    return cells.count(".") / len(cells)