"""Breakout-style game in a 20 x 20 unit playfield."""

from __future__ import annotations

from quadkit.geometry import Rect

BLOCKS_W = 10
BLOCKS_H = 10
SCR_W = 20.0
SCR_H = 20.0
PLATFORM_SPEED = 3.0


class Arkanoid:
    """Ball, paddle and a wall of blocks; the ball rests on the paddle until launched."""

    def __init__(self) -> None:
        self.blocks = [[True] * BLOCKS_W for _ in range(BLOCKS_H)]
        self.ball_x = 12.0
        self.ball_y = 7.0
        self.dx = 3.5
        self.dy = -3.5
        self.platform_x = 10.0
        self.stick = True
        self.platform_width = 5.0
        self.platform_height = 0.2

    @staticmethod
    def block_rect(i: int, j: int) -> Rect:
        """Collision area of the block in column i, row j."""
        block_w = SCR_W / BLOCKS_W
        block_h = 7.0 / BLOCKS_H
        return Rect(i * block_w + 0.05, j * block_h + 0.05, block_w, block_h)

    def remaining_blocks(self) -> int:
        return sum(row.count(True) for row in self.blocks)

    def update(self, dt: float, left: bool, right: bool, space: bool) -> None:
        """Advance one frame of dt seconds with the given keys held."""
        half = self.platform_width / 2.0
        if right and self.platform_x < SCR_W - half:
            self.platform_x += PLATFORM_SPEED * dt
        if left and self.platform_x > half:
            self.platform_x -= PLATFORM_SPEED * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCR_H - 0.5
            self.stick = not space

        if self.ball_x <= 0.0 or self.ball_x > SCR_W:
            self.dx = -self.dx
        on_paddle = (
            self.ball_y > SCR_H - self.platform_height - 0.15 / 2.0
            and self.platform_x - half <= self.ball_x <= self.platform_x + half
        )
        if self.ball_y <= 0.0 or on_paddle:
            self.dy = -self.dy
        if self.ball_y >= SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for j, row in enumerate(self.blocks):
            for i, present in enumerate(row):
                if present and self.block_rect(i, j).contains_point(self.ball_x, self.ball_y):
                    self.dy = -self.dy
                    row[i] = False


def _contains_point(rect: Rect, x: float, y: float) -> bool:
    return rect.x <= x < rect.x + rect.w and rect.y <= y < rect.y + rect.h


Rect.contains_point = _contains_point  # type: ignore[attr-defined]