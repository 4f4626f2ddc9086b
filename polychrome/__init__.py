"""Polychrome: color models, conversions and a space-agnostic color value."""

from .colors import (
    ColorBase,
    WithHue,
    Rgb,
    Hsl,
    Hsv,
    Cmyk,
    Xyz,
    Color,
    color_convert,
)
from .conversions import (
    ColorSpace,
    conversion_path,
    convert,
    convert_unit,
    np_convert,
    hsl_to_hsv,
    hsv_to_hsl,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_cmyk,
    unit_rgb_to_xyz,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    cmyk_to_unit_rgb,
    xyz_to_unit_rgb,
)
from .errors import PolychromeError, InvalidChannelValue, UnsupportedOperation

__all__ = [
    # color types
    "ColorBase",
    "WithHue",
    "Rgb",
    "Hsl",
    "Hsv",
    "Cmyk",
    "Xyz",
    "Color",
    "color_convert",
    # conversions
    "ColorSpace",
    "conversion_path",
    "convert",
    "convert_unit",
    "np_convert",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "unit_rgb_to_hsl",
    "unit_rgb_to_hsv",
    "unit_rgb_to_cmyk",
    "unit_rgb_to_xyz",
    "hsl_to_unit_rgb",
    "hsv_to_unit_rgb",
    "cmyk_to_unit_rgb",
    "xyz_to_unit_rgb",
    # errors
    "PolychromeError",
    "InvalidChannelValue",
    "UnsupportedOperation",
]
