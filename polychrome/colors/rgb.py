from __future__ import annotations
import string
from typing import ClassVar, Tuple, Self

from boundednumbers.functions import clamp01

from ..errors import InvalidChannelValue
from ..types.color_types import ColorSpace
from .color_base import ColorBase

# Rec. 709 luma weights, applied to gamma-encoded channels.
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)


class Rgb(ColorBase):
    """
    8-bit sRGB color, the canonical encoding of the :class:`Color` facade.

    Channels are ints in [0, 255]; float input is rounded half-up and
    out-of-range input is clamped.

    >>> Rgb(255, 128, 0).hex_code()
    '#ff8000'
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = ColorSpace.RGB
    channels:   ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    operations: ClassVar[frozenset[str]] = frozenset({
        "with_red", "with_green", "with_blue",
        "octets", "ratios", "hex", "hex_code",
        "invert", "blend", "scale", "grayscale", "luma",
    })

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    red = r
    green = g
    blue = b

    def with_red(self, value: float) -> Self:
        return self._replace(0, value)

    def with_green(self, value: float) -> Self:
        return self._replace(1, value)

    def with_blue(self, value: float) -> Self:
        return self._replace(2, value)

    def octets(self) -> Tuple[int, int, int]:
        return self._value  # type: ignore[return-value]

    def ratios(self) -> Tuple[float, float, float]:
        """Channels scaled to [0, 1]."""
        r, g, b = self._value
        return r / 255, g / 255, b / 255

    def hex(self) -> int:
        """Channels packed as ``0xRRGGBB``."""
        r, g, b = self._value
        return (r << 16) | (g << 8) | b

    def hex_code(self, upper: bool = False) -> str:
        code = "#{:02x}{:02x}{:02x}".format(*self._value)
        return code.upper() if upper else code

    @classmethod
    def from_hex(cls, value: int) -> Self:
        """Unpack a ``0xRRGGBB`` integer; bits above 24 are ignored."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex_code(cls, code: str) -> Self:
        """
        Parse ``#rrggbb`` or the short form ``#rgb``.

        Raises:
            InvalidChannelValue: if the code is not one of those forms.
        """
        if not isinstance(code, str) or not code.startswith("#") or len(code) not in (4, 7):
            raise InvalidChannelValue(cls.__name__, None, code, "is not a '#rgb' or '#rrggbb' hex code")
        digits = code[1:]
        if not all(ch in string.hexdigits for ch in digits):
            raise InvalidChannelValue(cls.__name__, None, code, "is not a '#rgb' or '#rrggbb' hex code")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls.from_hex(int(digits, 16))

    def invert(self) -> Self:
        r, g, b = self._value
        return self.__class__(255 - r, 255 - g, 255 - b)

    def blend(self, other: object, amount: float = 0.5) -> Self:
        """Mix toward ``other`` by ``amount`` (0 keeps self, 1 gives other)."""
        return self.lerp(self, other, amount)

    def scale(self, factor: float) -> Self:
        """Multiply every channel by ``factor``; results are clamped."""
        return self.__class__(tuple(v * factor for v in self._value))

    def grayscale(self) -> Self:
        luma = sum(w * v for w, v in zip(LUMA_WEIGHTS, self._value))
        return self.__class__(luma, luma, luma)

    def luma(self) -> float:
        """Rec. 709 luma in [0, 1]."""
        return clamp01(sum(w * v for w, v in zip(LUMA_WEIGHTS, self.ratios())))


RGB = Rgb
