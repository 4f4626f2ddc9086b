from __future__ import annotations
import math
from abc import ABC
from numbers import Real
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterator, Tuple, Self

from boundednumbers.functions import clamp, cyclic_wrap_float

from ..conversions import convert
from ..errors import InvalidChannelValue
from ..types.color_types import ColorSpace, HueDirection, ScalarVector, HUE_360, HUE_SPACES
from ..utils import get_dimension, lerp, cerp, hue_lerp, hue_delta, round_half_up

if TYPE_CHECKING:
    from .color import Color


def wrap_hue(h: float) -> float:
    """Wrap a hue into [0, 360)."""
    h = cyclic_wrap_float(h, 0.0, HUE_360)
    # tiny negative inputs wrap to exactly 360.0 in floating point
    return 0.0 if h >= HUE_360 else h


class ColorBase:
    __slots__ = ('_value', '_is_frozen')

    num_channels: ClassVar[int]
    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[Tuple[str, ...]]
    _type:      ClassVar[type]
    maxima:     ClassVar[Tuple[float, ...]]
    null_value: ClassVar[ScalarVector]
    hue_index:  ClassVar[int | None] = None
    # Model-native methods the Color facade may dispatch to.
    operations: ClassVar[frozenset[str]] = frozenset()
    # def color_convert(self, to_space: ColorSpace | str) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace | str], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *value: Any) -> None:
        """
        Build a color from channels, a channel tuple, or another color.

        Out-of-range channels are clamped to ``maxima`` and hue channels wrap
        into [0, 360). Anything that is not a finite real number raises
        :class:`InvalidChannelValue`.
        """
        if len(value) == 1:
            value = value[0]

        # ---- Handle Color facade input ----
        from .color import Color  # local import to avoid cycles
        if isinstance(value, Color):
            value = value.rgb

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = convert(value.value, value.mode, self.mode)

        if get_dimension(value) != self.num_channels or isinstance(value, (str, bytes)):
            raise InvalidChannelValue(
                self.__class__.__name__, None, value, f"expects {self.num_channels} channels {self.channels}"
            )

        self._value = tuple(
            self._coerce_channel(i, v) for i, v in enumerate(value)
        )

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _coerce_channel(cls, index: int, v: Any) -> int | float:
        if isinstance(v, bool) or not isinstance(v, Real) or not math.isfinite(v):
            raise InvalidChannelValue(cls.__name__, cls.channels[index], v)
        if index == cls.hue_index:
            return wrap_hue(float(v))
        clamped = clamp(float(v), 0.0, float(cls.maxima[index]))
        if cls._type is int:
            return round_half_up(clamped)
        return clamped

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    def components(self) -> ScalarVector:
        """Raw channels, in model-native units."""
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def __iter__(self) -> Iterator[int | float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    # ------------------ DERIVED VALUES ------------------
    def _replace(self, index: int, v: int | float) -> Self:
        values = list(self._value)
        values[index] = v
        return self.__class__(tuple(values))

    def to_color(self) -> Color:
        """Wrap this value in the :class:`Color` facade."""
        from .color import Color
        return Color(self)

    @classmethod
    def _coerce(cls, color: Any) -> Self:
        return color if isinstance(color, cls) else cls(color)

    @classmethod
    def lerp(cls, start: Any, end: Any, amount: float) -> Self:
        """Linear interpolation between two colors in this model (``amount`` in [0, 1])."""
        s, e = cls._coerce(start), cls._coerce(end)
        return cls(tuple(
            hue_lerp(a, b, amount) if i == cls.hue_index else lerp(a, b, amount)
            for i, (a, b) in enumerate(zip(s.value, e.value))
        ))

    @classmethod
    def cubic(cls, start: Any, end: Any, start_slope: float, end_slope: float, amount: float) -> Self:
        """Cubic Hermite interpolation with the same slopes on every channel."""
        s, e = cls._coerce(start), cls._coerce(end)
        values = []
        for i, (a, b) in enumerate(zip(s.value, e.value)):
            if i == cls.hue_index:
                values.append(a + cerp(0.0, hue_delta(a, b), start_slope, end_slope, amount))
            else:
                values.append(cerp(a, b, start_slope, end_slope, amount))
        return cls(tuple(values))

    @classmethod
    def distance(cls, start: Any, end: Any) -> float:
        """Euclidean distance over native channels."""
        s, e = cls._coerce(start), cls._coerce(end)
        return math.sqrt(sum((a - b) ** 2 for a, b in zip(s.value, e.value)))


class WithHue(ABC):
    """
    Mixin for a ColorBase subclass whose first channel is a hue in degrees.

    Supplies hue accessors and rotation, and replaces the Euclidean distance
    with one over the model's cylinder.
    """

    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    value: ScalarVector
    hue_index: ClassVar[int | None] = 0
    _replace: Callable[..., Any]
    _coerce: Callable[..., Any]

    @property
    def hue(self) -> float:
        return self.value[0]

    @property
    def h(self) -> float:
        return self.value[0]

    def with_hue(self, hue: float) -> Self:
        """Return a copy with the hue replaced (wrapped into [0, 360))."""
        return self._replace(0, hue)

    def rotate_hue(self, degrees: float) -> Self:
        """Return a copy with the hue rotated by ``degrees``."""
        return self._replace(0, self.value[0] + degrees)

    def complement(self) -> Self:
        """Return the color on the opposite side of the hue circle."""
        return self.rotate_hue(HUE_360 / 2)

    @classmethod
    def hue_lerp(cls, start: Any, end: Any, amount: float, direction: HueDirection = "shortest") -> Self:
        """Linear interpolation with an explicit hue travel direction."""
        s, e = cls._coerce(start), cls._coerce(end)
        h = hue_lerp(s.value[0], e.value[0], amount, direction)
        return cls((h, lerp(s.value[1], e.value[1], amount), lerp(s.value[2], e.value[2], amount)))  # type: ignore

    @classmethod
    def distance(cls, start: Any, end: Any) -> float:
        """
        Distance on the model's cylinder, normalised to [0, 1].

        Saturation is the radius and hue the angle of a point on the unit
        disc; the third channel (lightness or value) is the height. The
        largest separation is sqrt(5), between opposite fully saturated
        hues at heights 0 and 1, so the result is divided by sqrt(5). This
        is not the lightness-as-radius cone that some libraries use, and
        values differ from theirs.
        """
        s, e = cls._coerce(start), cls._coerce(end)
        (h0, s0, z0), (h1, s1, z1) = s.value, e.value
        x0, y0 = s0 * math.cos(math.radians(h0)), s0 * math.sin(math.radians(h0))
        x1, y1 = s1 * math.cos(math.radians(h1)), s1 * math.sin(math.radians(h1))
        return math.sqrt((x0 - x1) ** 2 + (y0 - y1) ** 2 + (z0 - z1) ** 2) / math.sqrt(5.0)


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {
        cls.mode: cls
        for cls in classes
    }
