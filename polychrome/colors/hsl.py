from __future__ import annotations
from typing import ClassVar, Tuple, Self

from boundednumbers.functions import clamp01

from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithHue


class Hsl(WithHue, ColorBase):
    """Hue in degrees [0, 360), saturation and lightness in [0, 1]."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = ColorSpace.HSL
    channels:   ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    _type:      ClassVar[type] = float
    maxima:     ClassVar[Tuple[float, float, float]] = (360.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    hue_index:  ClassVar[int | None] = 0
    operations: ClassVar[frozenset[str]] = frozenset({
        "with_hue", "with_saturation", "with_lightness",
        "rotate_hue", "complement",
        "saturate", "desaturate", "lighten", "darken",
    })

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def lightness(self) -> float:
        return self._value[2]

    s = saturation
    l = lightness

    def with_saturation(self, value: float) -> Self:
        return self._replace(1, value)

    def with_lightness(self, value: float) -> Self:
        return self._replace(2, value)

    def saturate(self, amount: float) -> Self:
        """Increase saturation by ``amount`` of its current value (``amount`` in [0, 1])."""
        s = self.saturation
        return self._replace(1, s + s * clamp01(amount))

    def desaturate(self, amount: float) -> Self:
        """Decrease saturation by ``amount`` of its current value (``amount`` in [0, 1])."""
        s = self.saturation
        return self._replace(1, s - s * clamp01(amount))

    def lighten(self, amount: float) -> Self:
        """Increase lightness by ``amount`` of its current value (``amount`` in [0, 1])."""
        l = self.lightness
        return self._replace(2, l + l * clamp01(amount))

    def darken(self, amount: float) -> Self:
        """Decrease lightness by ``amount`` of its current value (``amount`` in [0, 1])."""
        l = self.lightness
        return self._replace(2, l - l * clamp01(amount))


HSL = Hsl
