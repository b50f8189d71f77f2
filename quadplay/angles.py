"""Angle helpers for smoothly rotating a camera, in degrees."""

from __future__ import annotations

import math

FULL_TURN = 360.0


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest distance from angle ``a0`` to ``a1``."""
    da = math.fmod(a1 - a0, FULL_TURN)
    return math.fmod(2.0 * da, FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from ``a0`` towards ``a1`` along the shortest way."""
    return a0 + short_angle_dist(a0, a1) * t


def wheel_rotation(rotation: float, wheel: float) -> float:
    """Apply a mouse-wheel step of ten degrees per notch, wrapped into 0..360."""
    if wheel == 0.0:
        return rotation
    rotation += 10.0 * wheel
    if rotation >= FULL_TURN:
        return rotation - FULL_TURN
    if rotation < 0.0:
        return rotation + FULL_TURN
    return rotation