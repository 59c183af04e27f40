"""Angle smoothing and mouse-wheel handling for an interactive 2D camera."""

from __future__ import annotations

import math

FULL_TURN = 360.0
WHEEL_ROTATION_STEP = 10.0
WHEEL_ZOOM_FACTOR = 1.1


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest rotation in degrees from a0 to a1."""
    da = math.fmod(a1 - a0, FULL_TURN)
    return math.fmod(2.0 * da, FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from a0 towards a1 along the shorter way round."""
    return a0 + short_angle_dist(a0, a1) * t


def apply_wheel(
    rotation: float, zoom: float, wheel_y: float, ctrl: bool
) -> tuple[float, float]:
    """New (rotation, zoom) after a wheel movement; ctrl zooms, otherwise rotates."""
    if wheel_y == 0.0:
        return rotation, zoom
    if ctrl:
        return rotation, zoom * WHEEL_ZOOM_FACTOR**wheel_y
    rotation += WHEEL_ROTATION_STEP * wheel_y
    if rotation >= FULL_TURN:
        rotation -= FULL_TURN
    elif rotation < 0.0:
        rotation += FULL_TURN
    return rotation, zoom