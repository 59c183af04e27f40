import random
from collections import deque

import pytest

from quadkit.snake import SQUARES, Direction, SnakeGame


@pytest.fixture
def game():
    g = SnakeGame(rng=random.Random(7), now=0.0)
    g.fruit = (10, 10)
    return g


def test_initial_state():
    g = SnakeGame(rng=random.Random(3))
    assert g.head == (0, 0)
    assert g.direction is Direction.RIGHT
    assert len(g.body) == 0
    assert g.score == 0
    assert g.speed == 0.3
    assert 0 <= g.fruit[0] < SQUARES and 0 <= g.fruit[1] < SQUARES


def test_advance_moves_head(game):
    game.advance()
    assert game.head == (1, 0)
    assert len(game.body) == 0
    assert not game.game_over


def test_eating_fruit_grows_and_scores(game):
    game.fruit = (1, 0)
    game.advance()
    assert game.score == 100
    assert list(game.body) == [(0, 0)]
    assert game.speed == pytest.approx(0.3 * 0.9)
    assert game.fruit != (1, 0) or len(game.body) == 1


def test_cannot_reverse(game):
    assert game.steer(Direction.LEFT) is False
    assert game.direction is Direction.RIGHT
    assert game.steer(Direction.DOWN) is True
    assert game.direction is Direction.DOWN


def test_leaving_board_ends_game(game):
    game.steer(Direction.UP)
    game.advance()
    assert game.game_over


def test_self_collision_ends_game(game):
    game.head = (1, 1)
    game.body = deque([(0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)])
    game.advance()
    assert game.head == (2, 1)
    assert game.game_over


def test_update_waits_for_speed(game):
    assert game.update(0.2) is False
    assert game.head == (0, 0)
    assert game.update(0.31) is True
    assert game.head == (1, 0)
    assert game.last_update == 0.31


def test_no_movement_after_game_over(game):
    game.steer(Direction.UP)
    game.advance()
    assert game.update(100.0) is False
    assert game.steer(Direction.RIGHT) is False


def test_restart_resets(game):
    game.fruit = (1, 0)
    game.advance()
    game.restart(5.0)
    assert game.head == (0, 0)
    assert game.score == 0
    assert game.speed == 0.3
    assert game.last_update == 5.0
    assert not game.game_over


@pytest.mark.parametrize("direction", list(Direction))
def test_opposites(direction):
    g = SnakeGame(rng=random.Random(5), now=0.0)
    g.direction = direction
    assert direction.opposite.opposite is direction
    assert direction.opposite is not direction
    assert g.steer(direction.opposite) is False
    assert g.direction is direction