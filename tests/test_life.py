import random

import pytest

from quadplay.life import CellState, LifeGrid, next_state

ALIVE = CellState.ALIVE
DEAD = CellState.DEAD


@pytest.mark.parametrize(
    "cell, neighbors, expected",
    [
        (ALIVE, 0, DEAD),
        (ALIVE, 1, DEAD),
        (ALIVE, 2, ALIVE),
        (ALIVE, 3, ALIVE),
        (ALIVE, 4, DEAD),
        (ALIVE, 8, DEAD),
        (DEAD, 2, DEAD),
        (DEAD, 3, ALIVE),
        (DEAD, 4, DEAD),
        (DEAD, 0, DEAD),
    ],
)
def test_next_state_rules(cell, neighbors, expected):
    assert next_state(cell, neighbors) is expected


def test_blinker_oscillates():
    vertical = [".....", "..#..", "..#..", "..#..", "....."]
    horizontal = [".....", ".....", ".###.", ".....", "....."]
    grid = LifeGrid.from_rows(vertical)
    grid.step()
    assert grid.cells == LifeGrid.from_rows(horizontal).cells
    grid.step()
    assert grid.cells == LifeGrid.from_rows(vertical).cells


def test_block_is_still_life():
    rows = ["....", ".##.", ".##.", "...."]
    grid = LifeGrid.from_rows(rows)
    grid.step()
    assert grid.cells == LifeGrid.from_rows(rows).cells


def test_single_cell_dies():
    grid = LifeGrid.from_rows(["...", ".#.", "..."])
    grid.step()
    assert grid.alive_cells() == set()


def test_neighbors_ignore_self_and_edges():
    grid = LifeGrid.from_rows(["###", "###", "###"])
    assert grid.neighbors(1, 1) == 8
    assert grid.neighbors(0, 0) == 3


def test_getitem_and_bounds():
    grid = LifeGrid.from_rows(["#.", ".."])
    assert grid[0, 0] is ALIVE
    assert grid[1, 0] is DEAD
    with pytest.raises(IndexError):
        grid[2, 0]


def test_random_grid_is_reproducible_and_sized():
    a = LifeGrid.random(20, 15, random.Random(7))
    b = LifeGrid.random(20, 15, random.Random(7))
    assert a.cells == b.cells
    assert len(a.cells) == 20 * 15
    alive = len(a.alive_cells())
    assert 0 < alive < 20 * 15


def test_mismatched_cells_rejected():
    with pytest.raises(ValueError):
        LifeGrid(2, 2, [ALIVE, DEAD, DEAD])


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        LifeGrid.from_rows(["##", "#"])