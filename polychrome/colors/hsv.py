from __future__ import annotations
from typing import ClassVar, Tuple, Self

from boundednumbers.functions import clamp01

from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithHue


class Hsv(WithHue, ColorBase):
    """Hue in degrees [0, 360), saturation and value in [0, 1]."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = ColorSpace.HSV
    channels:   ClassVar[Tuple[str, ...]] = ("h", "s", "v")
    _type:      ClassVar[type] = float
    maxima:     ClassVar[Tuple[float, float, float]] = (360.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    hue_index:  ClassVar[int | None] = 0
    operations: ClassVar[frozenset[str]] = frozenset({
        "with_hue", "with_saturation", "with_value",
        "rotate_hue", "complement",
        "saturate", "desaturate", "brighten", "dim",
    })

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def v(self) -> float:
        return self._value[2]

    s = saturation

    # ``value`` is the raw channel tuple on every model, so the V channel
    # is exposed as ``v`` and ``brightness``.
    brightness = v

    def with_saturation(self, value: float) -> Self:
        return self._replace(1, value)

    def with_value(self, value: float) -> Self:
        return self._replace(2, value)

    def saturate(self, amount: float) -> Self:
        s = self.saturation
        return self._replace(1, s + s * clamp01(amount))

    def desaturate(self, amount: float) -> Self:
        s = self.saturation
        return self._replace(1, s - s * clamp01(amount))

    def brighten(self, amount: float) -> Self:
        """Increase value by ``amount`` of its current value (``amount`` in [0, 1])."""
        v = self.v
        return self._replace(2, v + v * clamp01(amount))

    def dim(self, amount: float) -> Self:
        """Decrease value by ``amount`` of its current value (``amount`` in [0, 1])."""
        v = self.v
        return self._replace(2, v - v * clamp01(amount))


HSV = Hsv
