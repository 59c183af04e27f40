import random

import pytest

from quadkit.life import CellState, Grid, next_state

A = CellState.ALIVE
D = CellState.DEAD


@pytest.mark.parametrize(
    "cell, count, expected",
    [
        (A, 0, D),
        (A, 1, D),
        (A, 2, A),
        (A, 3, A),
        (A, 4, D),
        (A, 8, D),
        (D, 3, A),
        (D, 2, D),
        (D, 4, D),
        (D, 0, D),
    ],
)
def test_next_state_rules(cell, count, expected):
    assert next_state(cell, count) is expected


def _grid_with(width, height, alive):
    grid = Grid(width, height)
    for x, y in alive:
        grid.set(x, y, A)
    return grid


def _alive(grid):
    return {(x, y) for x, y, state in grid if state is A}


def test_blinker_oscillates():
    horizontal = {(1, 2), (2, 2), (3, 2)}
    vertical = {(2, 1), (2, 2), (2, 3)}
    grid = _grid_with(5, 5, horizontal)
    grid.step()
    assert _alive(grid) == vertical
    grid.step()
    assert _alive(grid) == horizontal


def test_block_is_still_life():
    block = {(1, 1), (2, 1), (1, 2), (2, 2)}
    grid = _grid_with(4, 4, block)
    grid.step()
    assert _alive(grid) == block


def test_lonely_cell_dies():
    grid = _grid_with(3, 3, {(1, 1)})
    grid.step()
    assert grid.population == 0


def test_neighbours_at_corner_ignore_outside():
    grid = _grid_with(3, 3, {(0, 1), (1, 0), (1, 1), (2, 2)})
    assert grid.neighbours(0, 0) == 3
    assert grid.neighbours(1, 1) == 3


def test_get_set_round_trip():
    grid = Grid(4, 3)
    grid.set(3, 2, A)
    assert grid.get(3, 2) is A
    assert grid.get(0, 0) is D


@pytest.mark.parametrize("x, y", [(-1, 0), (4, 0), (0, 3), (0, -1)])
def test_out_of_bounds_raises(x, y):
    grid = Grid(4, 3)
    with pytest.raises(IndexError):
        grid.get(x, y)
    with pytest.raises(IndexError):
        grid.set(x, y, A)


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Grid(0, 5)


def test_randomize_is_deterministic_for_seed():
    first = Grid(20, 20)
    second = Grid(20, 20)
    first.randomize(random.Random(42))
    second.randomize(random.Random(42))
    assert _alive(first) == _alive(second)
    assert 0 < first.population < 400