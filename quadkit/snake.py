"""Snake on a square board of SQUARES x SQUARES cells."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum
from typing import Optional

SQUARES = 16
START_SPEED = 0.3
FRUIT_SCORE = 100
SPEEDUP = 0.9

Point = tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class SnakeGame:
    """Game state: the snake, the fruit, the score and the step timer."""

    def __init__(self, rng: Optional[random.Random] = None, now: float = 0.0) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.restart(now)

    def _random_fruit(self) -> Point:
        return (self._rng.randrange(0, SQUARES), self._rng.randrange(0, SQUARES))

    def restart(self, now: float) -> None:
        """Put the snake back at the corner and reset score and speed."""
        self.head: Point = (0, 0)
        self.direction = Direction.RIGHT
        self.body: deque[Point] = deque()
        self.fruit: Point = self._random_fruit()
        self.score = 0
        self.speed = START_SPEED
        self.last_update = now
        self.game_over = False

    def steer(self, direction: Direction) -> bool:
        """Turn the snake unless that would reverse it; True if it turned."""
        if self.game_over or direction is self.direction.opposite:
            return False
        self.direction = direction
        return True

    def advance(self) -> None:
        """Move one cell, eating the fruit or dragging the tail along."""
        if self.game_over:
            return
        self.body.appendleft(self.head)
        dx, dy = self.direction.value
        self.head = (self.head[0] + dx, self.head[1] + dy)
        if self.head == self.fruit:
            self.fruit = self._random_fruit()
            self.score += FRUIT_SCORE
            self.speed *= SPEEDUP
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < SQUARES and 0 <= y < SQUARES):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True

    def update(self, now: float) -> bool:
        """Advance if more than `speed` seconds passed; True if it moved."""
        if self.game_over or now - self.last_update <= self.speed:
            return False
        self.last_update = now
        self.advance()
        return True