"""
Interpolation helpers shared by the color models.

``lerp`` and ``cerp`` also accept numpy arrays; the hue helpers work on
scalar degrees.
"""
from __future__ import annotations
from boundednumbers.functions import clamp01, cyclic_wrap_float

from ..types.color_types import HueDirection, HUE_360


def lerp(start, end, amount):
    """Linear interpolation, ``amount`` clamped to [0, 1]."""
    a = clamp01(amount)
    return start + (end - start) * a


def cerp(start, end, start_slope, end_slope, amount):
    """Cubic Hermite interpolation, ``amount`` clamped to [0, 1]."""
    a = clamp01(amount)
    a2 = a * a
    a3 = a2 * a
    return (
        (2.0 * a3 - 3.0 * a2 + 1.0) * start
        + (a3 - 2.0 * a2 + a) * start_slope
        + (-2.0 * a3 + 3.0 * a2) * end
        + (a3 - a2) * end_slope
    )


def hue_delta(h0, h1, direction: HueDirection = "shortest"):
    """
    Signed angular travel from ``h0`` to ``h1`` in degrees.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        direction: 'shortest', 'longest', 'cw' (increasing) or 'ccw' (decreasing)

    Returns:
        Travel in degrees; positive means increasing hue.
    """
    if direction == "shortest":
        return (h1 - h0 + HUE_360 / 2) % HUE_360 - HUE_360 / 2
    if direction == "longest":
        d = (h1 - h0 + HUE_360 / 2) % HUE_360 - HUE_360 / 2
        if d > 0:
            return d - HUE_360
        if d < 0:
            return d + HUE_360
        return d
    if direction == "cw":
        return (h1 - h0) % HUE_360
    if direction == "ccw":
        return -((h0 - h1) % HUE_360)
    raise ValueError(f"Invalid hue direction: {direction}")


def hue_lerp(h0, h1, amount, direction: HueDirection = "shortest"):
    """Interpolate hues along the circle, result wrapped into [0, 360)."""
    a = clamp01(amount)
    return cyclic_wrap_float(h0 + hue_delta(h0, h1, direction) * a, 0.0, HUE_360)
