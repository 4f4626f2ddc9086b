import numpy as np
from numpy import ndarray as NDArray

def unit_rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert RGB to CMYK.

    Black has no defined ink ratios and maps to (0, 0, 0, 1).

    Args:
        r, g, b: Components in [0, 1]

    Returns:
        Tuple[float, float, float, float]: (c, m, y, k) in [0, 1]
    """
    max_c = max(r, g, b)
    if max_c <= 0:
        return 0.0, 0.0, 0.0, 1.0
    k = 1 - max_c
    return (max_c - r) / max_c, (max_c - g) / max_c, (max_c - b) / max_c, k

def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to CMYK.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        cmyk: array of shape (..., 4) in [0, 1]
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )
    max_c = np.maximum.reduce([r, g, b])
    k = 1 - max_c

    mask = max_c > 0
    c = np.zeros(max_c.shape)
    m = np.zeros(max_c.shape)
    y = np.zeros(max_c.shape)
    c[mask] = (max_c[mask] - r[mask]) / max_c[mask]
    m[mask] = (max_c[mask] - g[mask]) / max_c[mask]
    y[mask] = (max_c[mask] - b[mask]) / max_c[mask]

    return np.stack([c, m, y, k], axis=-1)
