import logging
import numpy as np
from typing import Callable, Tuple

from .to_rgb import (
    hsl_to_unit_rgb, hsv_to_unit_rgb, cmyk_to_unit_rgb, xyz_to_unit_rgb,
    np_hsl_to_unit_rgb, np_hsv_to_unit_rgb, np_cmyk_to_unit_rgb, np_xyz_to_unit_rgb,
)
from .to_hsl import unit_rgb_to_hsl, hsv_to_hsl, np_unit_rgb_to_hsl, np_hsv_to_hsl
from .to_hsv import unit_rgb_to_hsv, hsl_to_hsv, np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk
from .to_xyz import unit_rgb_to_xyz, np_unit_rgb_to_xyz

from ..types.color_types import ColorSpace, ColorValue, FloatVector, ScalarVector, as_space, element_to_array
from ..utils.num_utils import round_half_up
from ..errors import InvalidChannelValue

logger = logging.getLogger(__name__)

HUB: ColorSpace = ColorSpace.RGB

# Channel scale between the unit form used by the conversion functions and
# the native form stored by the color models. Hue channels are never scaled.
NATIVE_SCALE: dict[ColorSpace, Tuple[float, ...]] = {
    ColorSpace.RGB: (255.0, 255.0, 255.0),
    ColorSpace.HSL: (1.0, 1.0, 1.0),
    ColorSpace.HSV: (1.0, 1.0, 1.0),
    ColorSpace.CMYK: (100.0, 100.0, 100.0, 100.0),
    ColorSpace.XYZ: (1.0, 1.0, 1.0),
}

CHANNEL_COUNT: dict[ColorSpace, int] = {space: len(s) for space, s in NATIVE_SCALE.items()}

# Directly defined edges of the conversion graph, on unit-form channels.
CONVERT_DIRECT: dict[tuple[ColorSpace, ColorSpace], Callable[..., Tuple[float, ...]]] = {
    (ColorSpace.RGB, ColorSpace.HSL): unit_rgb_to_hsl,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_unit_rgb,
    (ColorSpace.RGB, ColorSpace.HSV): unit_rgb_to_hsv,
    (ColorSpace.HSV, ColorSpace.RGB): hsv_to_unit_rgb,
    (ColorSpace.RGB, ColorSpace.CMYK): unit_rgb_to_cmyk,
    (ColorSpace.CMYK, ColorSpace.RGB): cmyk_to_unit_rgb,
    (ColorSpace.RGB, ColorSpace.XYZ): unit_rgb_to_xyz,
    (ColorSpace.XYZ, ColorSpace.RGB): xyz_to_unit_rgb,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv,
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl,
}

CONVERT_NUMPY: dict[tuple[ColorSpace, ColorSpace], Callable[..., np.ndarray]] = {
    (ColorSpace.RGB, ColorSpace.HSL): np_unit_rgb_to_hsl,
    (ColorSpace.HSL, ColorSpace.RGB): np_hsl_to_unit_rgb,
    (ColorSpace.RGB, ColorSpace.HSV): np_unit_rgb_to_hsv,
    (ColorSpace.HSV, ColorSpace.RGB): np_hsv_to_unit_rgb,
    (ColorSpace.RGB, ColorSpace.CMYK): np_unit_rgb_to_cmyk,
    (ColorSpace.CMYK, ColorSpace.RGB): np_cmyk_to_unit_rgb,
    (ColorSpace.RGB, ColorSpace.XYZ): np_unit_rgb_to_xyz,
    (ColorSpace.XYZ, ColorSpace.RGB): np_xyz_to_unit_rgb,
    (ColorSpace.HSL, ColorSpace.HSV): np_hsl_to_hsv,
    (ColorSpace.HSV, ColorSpace.HSL): np_hsv_to_hsl,
}


def conversion_path(from_space: ColorSpace | str, to_space: ColorSpace | str) -> Tuple[ColorSpace, ...]:
    """
    Spaces visited when converting ``from_space`` to ``to_space``.

    Identity is a single-element path, direct edges have two elements and
    everything else is routed through the RGB hub.
    """
    fs, ts = as_space(from_space), as_space(to_space)
    if fs == ts:
        return (fs,)
    if (fs, ts) in CONVERT_DIRECT:
        return (fs, ts)
    return (fs, HUB, ts)


def normalize(color: np.ndarray, space: ColorSpace) -> np.ndarray:
    return color / np.asarray(NATIVE_SCALE[space])


def scale(color: np.ndarray, space: ColorSpace) -> np.ndarray:
    scaled = color * np.asarray(NATIVE_SCALE[space])
    if space == ColorSpace.RGB:
        return np.floor(scaled + 0.5).astype(int)
    return scaled


def _check_channels(shape: Tuple[int, ...], space: ColorSpace) -> None:
    expected = CHANNEL_COUNT[space]
    if not shape or shape[-1] != expected:
        raise InvalidChannelValue(space.value, None, shape, f"expects last dimension to be {expected}")


def convert_unit(color: FloatVector, from_space: ColorSpace | str, to_space: ColorSpace | str) -> FloatVector:
    """Convert one color between spaces, both sides in unit form."""
    path = conversion_path(from_space, to_space)
    values = tuple(float(v) for v in color)
    for src, dst in zip(path, path[1:]):
        values = tuple(float(v) for v in CONVERT_DIRECT[(src, dst)](*values))
    return values


def convert(
    color: ScalarVector,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> ScalarVector:
    """
    Convert one color's native channels between color spaces.

    Args:
        color: Native channel tuple of ``from_space`` (e.g. RGB 0-255, CMYK 0-100)
        from_space: Source color space
        to_space: Target color space

    Returns:
        Native channel tuple of ``to_space``; RGB channels are ints.
    """
    fs, ts = as_space(from_space), as_space(to_space)
    if fs == ts:
        if fs == ColorSpace.RGB:
            return tuple(round_half_up(float(v)) for v in color)
        return tuple(color)
    _check_channels((len(color),), fs)
    unit_in = tuple(float(v) / s for v, s in zip(color, NATIVE_SCALE[fs]))
    path = conversion_path(fs, ts)
    if len(path) > 2:
        logger.debug("[convert] %s -> %s routed through %s", fs.value, ts.value, HUB.value)
    unit_out = convert_unit(unit_in, fs, ts)
    native = tuple(v * s for v, s in zip(unit_out, NATIVE_SCALE[ts]))
    if ts == ColorSpace.RGB:
        return tuple(round_half_up(v) for v in native)
    return native


def np_convert(
    color: ColorValue,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> np.ndarray:
    """
    Vectorized :func:`convert` over arrays of shape ``(..., channels)``.

    Returns:
        Array of shape ``(..., channels of to_space)``; int dtype for RGB.
    """
    fs, ts = as_space(from_space), as_space(to_space)
    arr = element_to_array(color)
    _check_channels(arr.shape, fs)
    if fs == ts:
        return np.floor(arr + 0.5).astype(int) if fs == ColorSpace.RGB else arr

    path = conversion_path(fs, ts)
    values = normalize(arr, fs)
    for src, dst in zip(path, path[1:]):
        values = CONVERT_NUMPY[(src, dst)](*(values[..., i] for i in range(values.shape[-1])))
    return scale(values, ts)
