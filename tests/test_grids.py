import pytest

from kattisolve import grids


def test_hakkari_positions_point_at_stars():
    rows = ["*..*", ".*..", "...."]
    positions = grids.hakkari(rows)
    assert len(positions) == sum(row.count("*") for row in rows)
    for row_number, column_number in positions:
        assert rows[row_number - 1][column_number - 1] == "*"


def test_hakkari_order_is_row_major():
    rows = [".*", "*.", "**"]
    positions = grids.hakkari(rows)
    assert positions == sorted(positions)


def test_hakkari_pinned_example():
    assert grids.hakkari(["*.", ".*"]) == [(1, 1), (2, 2)]


def test_hakkari_no_stars():
    assert grids.hakkari(["...", "..."]) == []


def test_umferd_all_empty_road():
    assert grids.umferd(["...", "..."]) == 1.0


def test_umferd_fully_blocked():
    assert grids.umferd(["##", "##"]) == 0.0


def test_umferd_matches_counts():
    rows = ["..#.", "#..#", "...."]
    cells = "".join(rows)
    result = grids.umferd(rows)
    assert result * len(cells) == pytest.approx(cells.count("."))
    assert 0.0 <= result <= 1.0


def test_umferd_half():
    assert grids.umferd([".#", "#."]) == pytest.approx(0.5)


def test_umferd_empty_grid_raises():
    with pytest.raises(ValueError):
        grids.umferd([])