from __future__ import annotations
from typing import ClassVar, Tuple, Self

from ..types.color_types import ColorSpace
from ..utils import round_half_up
from .color_base import ColorBase


class Cmyk(ColorBase):
    """
    Subtractive CMYK color with each channel a percentage in [0, 100].

    The 8-bit encoding used by :meth:`octets` and :meth:`hex` maps 100% to 255.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace] = ColorSpace.CMYK
    channels:   ClassVar[Tuple[str, ...]] = ("c", "m", "y", "k")
    _type:      ClassVar[type] = float
    maxima:     ClassVar[Tuple[float, ...]] = (100.0, 100.0, 100.0, 100.0)
    null_value: ClassVar[Tuple[float, ...]] = (0.0, 0.0, 0.0, 100.0)
    operations: ClassVar[frozenset[str]] = frozenset({
        "with_cyan", "with_magenta", "with_yellow", "with_key",
        "percentages", "ratios", "octets", "hex", "invert",
    })

    @property
    def c(self) -> float:
        return self._value[0]

    @property
    def m(self) -> float:
        return self._value[1]

    @property
    def y(self) -> float:
        return self._value[2]

    @property
    def k(self) -> float:
        return self._value[3]

    cyan = c
    magenta = m
    yellow = y
    key = k

    def with_cyan(self, value: float) -> Self:
        return self._replace(0, value)

    def with_magenta(self, value: float) -> Self:
        return self._replace(1, value)

    def with_yellow(self, value: float) -> Self:
        return self._replace(2, value)

    def with_key(self, value: float) -> Self:
        return self._replace(3, value)

    def percentages(self) -> Tuple[float, float, float, float]:
        return self._value  # type: ignore[return-value]

    def ratios(self) -> Tuple[float, float, float, float]:
        c, m, y, k = self._value
        return c / 100, m / 100, y / 100, k / 100

    def octets(self) -> Tuple[int, int, int, int]:
        return tuple(round_half_up(v * 255 / 100) for v in self._value)  # type: ignore[return-value]

    def hex(self) -> int:
        """Octets packed as ``0xCCMMYYKK``."""
        c, m, y, k = self.octets()
        return (c << 24) | (m << 16) | (y << 8) | k

    @classmethod
    def from_hex(cls, value: int) -> Self:
        octets = ((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
        return cls(tuple(o * 100 / 255 for o in octets))

    def invert(self) -> Self:
        return self.__class__(tuple(100.0 - v for v in self._value))


CMYK = Cmyk
