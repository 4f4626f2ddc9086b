"""
sRGB <-> CIE XYZ under the D65 illuminant.

Matrices and companding thresholds follow IEC 61966-2-1 as tabulated by
Bruce Lindbloom.
"""
import numpy as np
from numpy import ndarray as NDArray

SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308
SRGB_GAMMA = 2.4

RGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

XYZ_TO_RGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# Reference white: XYZ of sRGB (1, 1, 1).
D65_WHITE = tuple(sum(row) for row in RGB_TO_XYZ)

def srgb_to_linear(c: float) -> float:
    """Remove the sRGB transfer curve from a component in [0, 1]."""
    if c <= SRGB_TO_LINEAR_TH:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** SRGB_GAMMA

def linear_to_srgb(c: float) -> float:
    """Apply the sRGB transfer curve to a linear component."""
    if c <= LINEAR_TO_SRGB_TH:
        return 12.92 * c
    return 1.055 * c ** (1 / SRGB_GAMMA) - 0.055

def np_srgb_to_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    return np.where(c <= SRGB_TO_LINEAR_TH, c / 12.92, ((np.maximum(c, SRGB_TO_LINEAR_TH) + 0.055) / 1.055) ** SRGB_GAMMA)

def np_linear_to_srgb(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    return np.where(c <= LINEAR_TO_SRGB_TH, 12.92 * c, 1.055 * np.maximum(c, LINEAR_TO_SRGB_TH) ** (1 / SRGB_GAMMA) - 0.055)

def unit_rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert sRGB to CIE XYZ (D65).

    Args:
        r, g, b: Components in [0, 1]

    Returns:
        Tuple[float, float, float]: (x, y, z), white at D65_WHITE
    """
    lin = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    x, y, z = (
        row[0] * lin[0] + row[1] * lin[1] + row[2] * lin[2]
        for row in RGB_TO_XYZ
    )
    return x, y, z

def np_unit_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert sRGB to CIE XYZ (D65).

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        xyz: array of shape (..., 3)
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)
    return np_srgb_to_linear(rgb) @ np.asarray(RGB_TO_XYZ).T
