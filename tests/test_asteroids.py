import math
import random

import pytest

from quadkit.asteroids import (
    ASTEROID_COUNT,
    MAX_SPEED,
    SHIP_BASE,
    SHIP_HEIGHT,
    SPLIT_RATIO,
    TURN_STEP,
    Asteroid,
    AsteroidsGame,
    Bullet,
    wrap_around,
)
from quadkit.geometry import Vec2

WIDTH = 800.0
HEIGHT = 600.0


def make_game() -> AsteroidsGame:
    game = AsteroidsGame(WIDTH, HEIGHT, random.Random(7), now=0.0)
    game.asteroids = [
        Asteroid(pos=Vec2(50.0, 50.0), vel=Vec2(), rot=0.0, rot_speed=0.0, size=10.0, sides=3)
    ]
    return game


def test_wrap_around_edges():
    assert wrap_around(Vec2(WIDTH + 1.0, 10.0), WIDTH, HEIGHT) == Vec2(0.0, 10.0)
    assert wrap_around(Vec2(-1.0, 10.0), WIDTH, HEIGHT) == Vec2(WIDTH, 10.0)
    assert wrap_around(Vec2(10.0, HEIGHT + 1.0), WIDTH, HEIGHT) == Vec2(10.0, 0.0)
    assert wrap_around(Vec2(10.0, -1.0), WIDTH, HEIGHT) == Vec2(10.0, HEIGHT)
    assert wrap_around(Vec2(10.0, 20.0), WIDTH, HEIGHT) == Vec2(10.0, 20.0)


def test_restart_spawns_ring_of_asteroids():
    game = AsteroidsGame(WIDTH, HEIGHT, random.Random(3))
    assert len(game.asteroids) == ASTEROID_COUNT
    assert game.ship.pos == game.center
    assert not game.game_over
    for asteroid in game.asteroids:
        assert 3 <= asteroid.sides < 8
        assert asteroid.size == pytest.approx(min(WIDTH, HEIGHT) / 10.0)
        distance = (asteroid.pos - game.center).length()
        assert distance == pytest.approx(min(WIDTH, HEIGHT) / 2.0)


def test_turning_changes_rotation():
    game = make_game()
    game.update(1.0, up=False, left=False, right=True, space=False)
    assert game.ship.rot == TURN_STEP
    game.update(1.1, up=False, left=True, right=False, space=False)
    assert game.ship.rot == 0.0


def test_speed_is_capped():
    game = make_game()
    for step in range(60):
        game.update(step * 0.01, up=True, left=False, right=False, space=False)
    assert game.ship.vel.length() <= MAX_SPEED + 1e-9
    assert game.ship.vel.length() > MAX_SPEED - 1e-6


def test_friction_slows_ship():
    game = make_game()
    game.ship.vel = Vec2(1.0, 0.0)
    game.update(1.0, up=False, left=False, right=False, space=False)
    assert 0.0 < game.ship.vel.x < 1.0


def test_shot_cooldown_and_lifetime():
    game = make_game()
    game.update(1.0, up=False, left=False, right=False, space=True)
    assert len(game.bullets) == 1
    game.update(1.2, up=False, left=False, right=False, space=True)
    assert len(game.bullets) == 1
    game.update(1.6, up=False, left=False, right=False, space=True)
    assert len(game.bullets) == 2
    game.update(3.0, up=False, left=False, right=False, space=False)
    assert [b.shot_at for b in game.bullets] == [1.6]


def test_bullet_splits_asteroid():
    game = make_game()
    big = Asteroid(pos=Vec2(100.0, 100.0), vel=Vec2(), rot=0.0, rot_speed=0.0, size=20.0, sides=5)
    game.asteroids.append(big)
    game.bullets = [Bullet(pos=Vec2(93.0, 100.0), vel=Vec2(7.0, 0.0), shot_at=1.0)]
    game.update(1.0, up=False, left=False, right=False, space=False)

    assert game.bullets == []
    fragments = [a for a in game.asteroids if a.sides == 4]
    assert len(fragments) == 2
    assert len(game.asteroids) == 3
    for fragment in fragments:
        assert fragment.pos == Vec2(100.0, 100.0)
        assert fragment.size == pytest.approx(20.0 * SPLIT_RATIO)
        assert abs(fragment.vel.x) < 1e-9
        assert 1.0 <= abs(fragment.vel.y) <= 3.0
    assert not game.game_over


def test_destroying_last_asteroid_wins():
    game = make_game()
    game.bullets = [Bullet(pos=Vec2(43.0, 50.0), vel=Vec2(7.0, 0.0), shot_at=1.0)]
    game.update(1.0, up=False, left=False, right=False, space=False)
    assert game.asteroids == []
    assert game.game_over
    assert game.won


def test_ship_collision_ends_game():
    game = make_game()
    game.asteroids[0].pos = game.ship.pos
    game.update(1.0, up=False, left=False, right=False, space=False)
    assert game.game_over
    assert not game.won
    frozen = game.ship.pos
    game.update(2.0, up=True, left=False, right=False, space=True)
    assert game.ship.pos == frozen
    assert game.bullets == []


def test_restart_after_game_over():
    game = make_game()
    game.asteroids[0].pos = game.ship.pos
    game.update(1.0, up=False, left=False, right=False, space=False)
    game.restart()
    assert not game.game_over
    assert len(game.asteroids) == ASTEROID_COUNT


@pytest.mark.parametrize("rot", [0.0, 45.0, 190.0])
def test_ship_vertices_shape(rot):
    game = make_game()
    game.ship.rot = rot
    nose, left, right = game.ship_vertices()
    assert (nose - game.ship.pos).length() == pytest.approx(SHIP_HEIGHT / 2.0)
    assert (left - right).length() == pytest.approx(SHIP_BASE)
    assert (nose - left).length() == pytest.approx((nose - right).length())
    heading = Vec2(math.sin(math.radians(rot)), -math.cos(math.radians(rot)))
    nose_dir = (nose - game.ship.pos).normalize()
    assert nose_dir.x == pytest.approx(heading.x)
    assert nose_dir.y == pytest.approx(heading.y)