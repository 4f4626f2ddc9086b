"""
Polychrome Color Classes
========================

Immutable color values for the RGB, HSL, HSV, CMYK and XYZ color models,
plus the space-agnostic :class:`Color` facade.

Features
--------
- Immutable instances (frozen after initialization)
- Out-of-range channels clamped, hues wrapped into [0, 360)
- Non-finite or non-numeric channels rejected with InvalidChannelValue
- Conversion between any two models via ``convert``
- Per-model interpolation (``lerp``, ``cubic``) and ``distance``
- Hue accessors and rotation with the WithHue mixin

Usage
-----
>>> from polychrome.colors import Rgb, Hsl, Color
>>>
>>> red = Rgb(255, 0, 0)
>>> red.convert("hsl")
Hsl(h=0.0, s=1.0, l=0.5)
>>>
>>> Hsl(120, 1.0, 0.25).convert("rgb")
Rgb(r=0, g=128, b=0)
>>>
>>> # The facade converts on demand
>>> color = Color.from_hex_code("#336699")
>>> round(color.hue, 6)
210.0
>>> color.shift_hue(180).hex_code()
'#996633'

Color Classes
-------------
    - Rgb: integer channels (0-255)
    - Hsl: hue (degrees), saturation and lightness (0-1)
    - Hsv: hue (degrees), saturation and value (0-1)
    - Cmyk: percentages (0-100)
    - Xyz: CIE XYZ, bounded by the D65 white point

Notes
-----
- ``Color`` stores an Rgb; other representations are derived and cached
- Operation names defined by several models resolve RGB, HSL, HSV, CMYK, XYZ
- All values are clamped to maxima during initialization
"""

from .color_base import ColorBase, WithHue
from .rgb import Rgb
from .hsl import Hsl
from .hsv import Hsv
from .cmyk import Cmyk
from .xyz import Xyz
from .registry import color_convert, unified_space_to_class, OPERATIONS
from .color import Color


__all__ = [
    'ColorBase', 'WithHue',
    'Rgb', 'Hsl', 'Hsv', 'Cmyk', 'Xyz',
    'Color', 'color_convert', 'unified_space_to_class', 'OPERATIONS',
]
