from __future__ import annotations
from typing import ClassVar, Tuple, Self

from ..conversions.to_xyz import D65_WHITE
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class Xyz(ColorBase):
    """
    CIE 1931 XYZ under the D65 white point.

    Channels are bounded by the XYZ of sRGB white, so ``y`` doubles as
    relative luminance in [0, 1].
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = ColorSpace.XYZ
    channels:   ClassVar[Tuple[str, ...]] = ("x", "y", "z")
    _type:      ClassVar[type] = float
    maxima:     ClassVar[Tuple[float, float, float]] = D65_WHITE
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    operations: ClassVar[frozenset[str]] = frozenset({
        "with_x", "with_y", "with_z", "luminance", "chromaticity", "scale",
    })

    @property
    def x(self) -> float:
        return self._value[0]

    @property
    def y(self) -> float:
        return self._value[1]

    @property
    def z(self) -> float:
        return self._value[2]

    def with_x(self, value: float) -> Self:
        return self._replace(0, value)

    def with_y(self, value: float) -> Self:
        return self._replace(1, value)

    def with_z(self, value: float) -> Self:
        return self._replace(2, value)

    def luminance(self) -> float:
        return self._value[1]

    def chromaticity(self) -> Tuple[float, float]:
        """xy chromaticity coordinates; ``(0.0, 0.0)`` for black."""
        x, y, z = self._value
        total = x + y + z
        if total == 0:
            return 0.0, 0.0
        return x / total, y / total

    def scale(self, factor: float) -> Self:
        """Multiply every channel by ``factor``; results are clamped to the white point."""
        return self.__class__(tuple(v * factor for v in self._value))


XYZ = Xyz
