from __future__ import annotations
from enum import Enum
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

from ..errors import UnsupportedOperation

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
FloatVector = Tuple[float, ...]
ColorValue = Union[ScalarVector, ndarray]
HueDirection = Literal["cw", "ccw", "shortest", "longest"]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    CMYK = "cmyk"
    XYZ = "xyz"


HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSV}
HUE_360 = 360.0

# Facade dispatch order for operation names defined by more than one model.
# The canonical space comes first so its operations never convert.
SPACE_PRECEDENCE: Tuple[ColorSpace, ...] = (
    ColorSpace.RGB,
    ColorSpace.HSL,
    ColorSpace.HSV,
    ColorSpace.CMYK,
    ColorSpace.XYZ,
)


def as_space(space: ColorSpace | str) -> ColorSpace:
    """Coerce a color space name (case-insensitive) to :class:`ColorSpace`."""
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise UnsupportedOperation(f"Unknown color space: {space!r}") from None


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: Color space name or enum member
    Returns:
        True if hue-based, False otherwise
    """
    return as_space(color_space) in HUE_SPACES


def element_to_array(element: Union[ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple of channels, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)
