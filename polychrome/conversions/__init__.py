"""
Polychrome Color Space Conversions
==================================

Scalar and vectorized (numpy) conversions between the RGB, HSL, HSV, CMYK and
XYZ color models.

Every low-level function works on *unit form* channels: RGB and CMYK in
[0, 1], hue in degrees [0, 360) with the remaining HSL/HSV channels in [0, 1],
and XYZ tristimulus values with the D65 white at (0.95047, 1.0, 1.08883).

Conversion Graph
----------------
Direct edges:
    RGB <-> HSL, RGB <-> HSV, RGB <-> CMYK, RGB <-> XYZ, HSL <-> HSV

Every other ordered pair is routed through RGB, in unit floats, so no 8-bit
quantisation happens mid-path. ``conversion_path`` reports the route.

Expected Lossiness
------------------
- Anything stored in ``Rgb`` is quantised to 8 bits per channel.
- XYZ colors outside the sRGB gamut are clipped on the way to RGB.
- Hue is undefined for achromatic colors and comes back as 0 through RGB;
  the direct HSL <-> HSV edges preserve it.

High-Level API
--------------
    convert(color, from_space, to_space)
        Native channel tuple in, native channel tuple out
    np_convert(color, from_space, to_space)
        Same for arrays of shape (..., channels)

Examples
--------
>>> from polychrome.conversions import convert, unit_rgb_to_hsl
>>> convert((255, 0, 0), "rgb", "hsl")
(0.0, 1.0, 0.5)
>>> convert((0.0, 0.0, 0.0, 100.0), "cmyk", "rgb")
(0, 0, 0)
"""

# RGB -> other models
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk
from .to_xyz import unit_rgb_to_xyz, np_unit_rgb_to_xyz, D65_WHITE

# other models -> RGB
from .to_rgb import (
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    cmyk_to_unit_rgb,
    xyz_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_cmyk_to_unit_rgb,
    np_xyz_to_unit_rgb,
)

# HSV <-> HSL
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

# High-level API
from .wrapper import convert, convert_unit, np_convert, conversion_path, CONVERT_DIRECT

from ..types.color_types import ColorSpace

__all__ = [
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_cmyk',
    'np_unit_rgb_to_cmyk',
    'unit_rgb_to_xyz',
    'np_unit_rgb_to_xyz',
    'D65_WHITE',

    'hsl_to_unit_rgb',
    'hsv_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'xyz_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'np_cmyk_to_unit_rgb',
    'np_xyz_to_unit_rgb',

    'hsl_to_hsv',
    'hsv_to_hsl',
    'np_hsl_to_hsv',
    'np_hsv_to_hsl',

    'convert',
    'convert_unit',
    'np_convert',
    'conversion_path',
    'CONVERT_DIRECT',

    'ColorSpace',
]
