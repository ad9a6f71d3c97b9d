"""Math helpers for camera smoothing, limits and pixel-grid snapping.

All functions are pure and work on floats or (x, y) tuples so they can be
used without a camera or a running game window.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pixelcam.types import Vec2


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value to the inclusive range [low, high]."""
    return max(low, min(high, value))


def clamp01(value: float) -> float:
    """Clamp value to [0.0, 1.0]."""
    return clamp(value, 0.0, 1.0)


def lerp(start: Vec2, end: Vec2, weight: float) -> Vec2:
    """Linearly interpolate between two positions.

    The interpolation formula is:
        new_position = start + (end - start) * weight

    A weight of 0.0 returns start, 1.0 returns end. The weight is not clamped
    here; callers decide whether values outside [0, 1] are allowed.

    Args:
        start: Position to interpolate from.
        end: Position to interpolate toward.
        weight: Fraction of the distance to cover.

    Returns:
        The interpolated position.
    """
    start_x, start_y = start
    end_x, end_y = end
    return (
        start_x + (end_x - start_x) * weight,
        start_y + (end_y - start_y) * weight,
    )


def round_half_away(value: float) -> float:
    """Round to the nearest integer, with halves rounded away from zero.

    Python's round() uses banker's rounding, which would make 0.5 and 1.5
    land on the same pixel. Pixel grids expect symmetric rounding instead.
    """
    return math.copysign(math.floor(abs(value) + 0.5), value)


def snap_to_grid(position: Vec2, pixel_size: float) -> Vec2:
    """Snap a world position to the nearest multiple of pixel_size per axis.

    Converts world units to pixel-grid units, rounds to the nearest whole
    pixel index and converts back.

    Args:
        position: World position to snap.
        pixel_size: World units per pixel. Must be greater than zero; this is
            checked when the camera is configured, not here.

    Returns:
        The snapped position.

    Example:
        >>> snap_to_grid((10.3, 5.7), 1.0)
        (10.0, 6.0)
        >>> snap_to_grid((13.0, -5.0), 4.0)
        (12.0, -4.0)
    """
    x, y = position
    return (
        round_half_away(x / pixel_size) * pixel_size,
        round_half_away(y / pixel_size) * pixel_size,
    )


def clamp_to_limits(
    position: Vec2,
    left: float,
    right: float,
    top: float,
    bottom: float,
) -> Vec2:
    """Clamp each axis of a position to its limit range independently.

    Args:
        position: World position to clamp.
        left: Minimum x.
        right: Maximum x.
        top: Minimum y.
        bottom: Maximum y.

    Returns:
        The clamped position.
    """
    x, y = position
    return (clamp(x, left, right), clamp(y, top, bottom))
