import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp01

from .to_xyz import XYZ_TO_RGB, linear_to_srgb, np_linear_to_srgb

def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360

def _sector_rgb(h: float, c: float, x: float) -> tuple[float, float, float]:
    # chroma placement for each 60 degree sector of the hue circle
    sector = int(math.floor(h / 60)) % 6
    if sector == 0:
        return c, x, 0.0
    if sector == 1:
        return x, c, 0.0
    if sector == 2:
        return 0.0, c, x
    if sector == 3:
        return 0.0, x, c
    if sector == 4:
        return x, 0.0, c
    return c, 0.0, x

def _np_sector_rgb(h: NDArray, c: NDArray, x: NDArray) -> NDArray:
    sector = np.floor(h / 60).astype(int) % 6
    zero = np.zeros_like(c)
    r = np.select([sector == 0, sector == 1, sector == 2, sector == 3, sector == 4], [c, x, zero, zero, x], c)
    g = np.select([sector == 0, sector == 1, sector == 2, sector == 3, sector == 4], [x, c, c, x, zero], zero)
    b = np.select([sector == 0, sector == 1, sector == 2, sector == 3, sector == 4], [zero, zero, x, c, c], x)
    return np.stack([r, g, b], axis=-1)

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2
    r, g, b = _sector_rgb(h, c, x)
    return clamp01(r + m), clamp01(g + m), clamp01(b + m)

def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    c = (1 - np.abs(2 * l - 1)) * s
    x = c * (1 - np.abs((h / 60) % 2 - 1))
    m = l - c / 2
    return np.clip(_np_sector_rgb(h, c, x) + m[..., None], 0.0, 1.0)

## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c
    r, g, b = _sector_rgb(h, c, x)
    return clamp01(r + m), clamp01(g + m), clamp01(b + m)

def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Args:
        h, s, v: array-like or scalar

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    c = v * s
    x = c * (1 - np.abs((h / 60) % 2 - 1))
    m = v - c
    return np.clip(_np_sector_rgb(h, c, x) + m[..., None], 0.0, 1.0)

## CMYK to RGB conversions

def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """
    Convert CMYK to RGB.

    Args:
        c, m, y, k: Ink coverage in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    kn = 1 - k
    return (1 - c) * kn, (1 - m) * kn, (1 - y) * kn

def np_cmyk_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """Vectorized: Convert CMYK in [0, 1] to RGB in [0, 1]."""
    c = np.asarray(c, dtype=float)
    m = np.asarray(m, dtype=float)
    y = np.asarray(y, dtype=float)
    kn = 1 - np.asarray(k, dtype=float)
    return np.stack(np.broadcast_arrays((1 - c) * kn, (1 - m) * kn, (1 - y) * kn), axis=-1)

## XYZ to RGB conversions

def xyz_to_unit_rgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert CIE XYZ (D65) to sRGB.

    Colors outside the sRGB gamut are clipped to [0, 1].

    Args:
        x, y, z: Tristimulus values, white at (0.95047, 1.0, 1.08883)

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    r, g, b = (
        linear_to_srgb(row[0] * x + row[1] * y + row[2] * z)
        for row in XYZ_TO_RGB
    )
    return clamp01(r), clamp01(g), clamp01(b)

def np_xyz_to_unit_rgb(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """Vectorized: Convert CIE XYZ (D65) to sRGB in [0, 1]."""
    xyz = np.stack(np.broadcast_arrays(
        np.asarray(x, dtype=float),
        np.asarray(y, dtype=float),
        np.asarray(z, dtype=float),
    ), axis=-1)
    linear = xyz @ np.asarray(XYZ_TO_RGB).T
    return np.clip(np_linear_to_srgb(linear), 0.0, 1.0)
