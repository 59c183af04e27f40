"""Asteroids: a ship that turns, thrusts and shoots at breaking rocks.

The simulation advances one fixed step per call to `AsteroidsGame.update`,
with positions in screen pixels on a wrapping playfield.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from quadkit.geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
SHOT_COOLDOWN = 0.5
BULLET_LIFETIME = 1.5
BULLET_SPEED = 7.0
MAX_SPEED = 5.0
TURN_STEP = 5.0
THRUST = 1.0 / 3.0
FRICTION = 100.0
ASTEROID_COUNT = 10
SPLIT_RATIO = 0.8


def wrap_around(v: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the playfield to the opposite edge."""
    x, y = v.x, v.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    """The player's ship; rot is in degrees, 0 pointing up."""

    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = field(default_factory=Vec2)


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


class AsteroidsGame:
    """Ship, bullets and asteroids on a width x height playfield."""

    def __init__(
        self,
        width: float,
        height: float,
        rng: Optional[random.Random] = None,
        now: float = 0.0,
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.last_shot = now
        self.restart()

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        """True once the game ended with every asteroid destroyed."""
        return self.game_over and not self.asteroids

    def _random_direction(self) -> Vec2:
        while True:
            v = Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0))
            if v.length() > 0.0:
                return v.normalize()

    def restart(self) -> None:
        """Reset the ship and surround it with a fresh ring of asteroids."""
        self.ship = Ship(self.center)
        self.bullets: list[Bullet] = []
        self.game_over = False
        smaller_side = min(self.width, self.height)
        self.asteroids: list[Asteroid] = [
            Asteroid(
                pos=self.center + self._random_direction() * smaller_side / 2.0,
                vel=Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0)),
                rot=0.0,
                rot_speed=self._rng.uniform(-2.0, 2.0),
                size=smaller_side / 10.0,
                sides=self._rng.randrange(3, 8),
            )
            for _ in range(ASTEROID_COUNT)
        ]

    def _fragment(self, parent: Asteroid, direction: Vec2) -> Asteroid:
        return Asteroid(
            pos=parent.pos,
            vel=direction.normalize() * self._rng.uniform(1.0, 3.0),
            rot=self._rng.uniform(0.0, 360.0),
            rot_speed=self._rng.uniform(-2.0, 2.0),
            size=parent.size * SPLIT_RATIO,
            sides=parent.sides - 1,
        )

    def update(self, now: float, up: bool, left: bool, right: bool, space: bool) -> None:
        """Advance one step at time `now` with the given keys held."""
        if self.game_over:
            return
        ship = self.ship
        rotation = math.radians(ship.rot)
        heading = Vec2(math.sin(rotation), -math.cos(rotation))

        acc = -ship.vel / FRICTION
        if up:
            acc = heading * THRUST

        if space and now - self.last_shot > SHOT_COOLDOWN:
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * BULLET_SPEED,
                    shot_at=now,
                )
            )
            self.last_shot = now

        if right:
            ship.rot += TURN_STEP
        elif left:
            ship.rot -= TURN_STEP

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.game_over = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.append(
                            self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x))
                        )
                        fragments.append(
                            self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x))
                        )
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided] + fragments

        if not self.asteroids:
            self.game_over = True

    def ship_vertices(self) -> tuple[Vec2, Vec2, Vec2]:
        """Nose, left and right corners of the ship's triangle."""
        pos = self.ship.pos
        rotation = math.radians(self.ship.rot)
        sin_r, cos_r = math.sin(rotation), math.cos(rotation)
        half_h = SHIP_HEIGHT / 2.0
        half_b = SHIP_BASE / 2.0
        nose = Vec2(pos.x + sin_r * half_h, pos.y - cos_r * half_h)
        left = Vec2(
            pos.x - cos_r * half_b - sin_r * half_h,
            pos.y - sin_r * half_b + cos_r * half_h,
        )
        right = Vec2(
            pos.x + cos_r * half_b - sin_r * half_h,
            pos.y + sin_r * half_b + cos_r * half_h,
        )
        return nose, left, right