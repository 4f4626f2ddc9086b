from __future__ import annotations
import logging
from functools import partial
from typing import Any, ClassVar, Tuple

from ..errors import UnsupportedOperation
from ..types.color_types import ColorSpace, HueDirection, as_space, is_hue_space
from .color_base import ColorBase
from .rgb import Rgb
from .hsl import Hsl
from .hsv import Hsv
from .cmyk import Cmyk
from .xyz import Xyz
from .registry import OPERATIONS, unified_space_to_class

logger = logging.getLogger(__name__)


class Color:
    """
    Space-agnostic color value.

    A ``Color`` stores one canonical :class:`Rgb` and converts on demand.
    Operations defined by any color model are reachable from the facade:
    the color is converted to the defining model, the operation is applied
    there, and model results are converted back into a new ``Color``.

    >>> Color(255, 0, 0).hsl
    Hsl(h=0.0, s=1.0, l=0.5)
    >>> Color(255, 0, 0).lighten(0.5).hex_code()
    '#ff8080'
    >>> Color(255, 0, 0).apply("saturate", 0.5, space="hsv").rgb
    Rgb(r=255, g=0, b=0)

    The last non-RGB representation computed is kept on the instance.
    Set ``Color.cache_conversions = False`` to turn that off.
    """
    __slots__ = ("_rgb", "_cached")

    cache_conversions: ClassVar[bool] = True

    def __init__(self, *value: Any) -> None:
        if not value:
            rgb = Rgb(Rgb.null_value)
        elif len(value) == 1 and isinstance(value[0], Color):
            rgb = value[0]._rgb
        elif len(value) == 1 and isinstance(value[0], Rgb):
            rgb = value[0]
        else:
            rgb = Rgb(*value)
        object.__setattr__(self, "_rgb", rgb)
        object.__setattr__(self, "_cached", None)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Build from a ``0xRRGGBB`` integer."""
        return cls(Rgb.from_hex(value))

    @classmethod
    def from_hex_code(cls, code: str) -> Color:
        """Build from ``#rrggbb`` or ``#rgb``."""
        return cls(Rgb.from_hex_code(code))

    # ------------------ REPRESENTATIONS ------------------
    def to(self, space: ColorSpace | str) -> ColorBase:
        """This color as an instance of the model for ``space``."""
        space = as_space(space)
        if space == ColorSpace.RGB:
            return self._rgb
        cached = self._cached
        if cached is not None and cached.mode == space:
            logger.debug("[Color] cache hit for %s", space.value)
            return cached
        result = self._rgb.convert(space)
        if self.cache_conversions:
            object.__setattr__(self, "_cached", result)
        return result

    @property
    def rgb(self) -> Rgb:
        return self._rgb

    @property
    def hsl(self) -> Hsl:
        return self.to(ColorSpace.HSL)  # type: ignore[return-value]

    @property
    def hsv(self) -> Hsv:
        return self.to(ColorSpace.HSV)  # type: ignore[return-value]

    @property
    def cmyk(self) -> Cmyk:
        return self.to(ColorSpace.CMYK)  # type: ignore[return-value]

    @property
    def xyz(self) -> Xyz:
        return self.to(ColorSpace.XYZ)  # type: ignore[return-value]

    # ------------------ DISPATCH ------------------
    @staticmethod
    def resolve_operation(operation: str, space: ColorSpace | str | None = None) -> ColorSpace:
        """
        Color space whose model defines ``operation``.

        An explicit ``space`` must define the operation. Otherwise the first
        defining space in RGB, HSL, HSV, CMYK, XYZ order is chosen.

        Raises:
            UnsupportedOperation: if no model (or not the given one) defines it.
        """
        spaces = OPERATIONS.get(operation)
        if spaces is None:
            raise UnsupportedOperation(f"Color has no operation {operation!r}")
        if space is None:
            return spaces[0]
        space = as_space(space)
        if space not in spaces:
            raise UnsupportedOperation(
                f"Operation {operation!r} is not defined for {space.value}; "
                f"available in {', '.join(s.value for s in spaces)}"
            )
        return space

    def apply(self, operation: str, *args: Any, space: ColorSpace | str | None = None, **kwargs: Any) -> Any:
        """
        Run a model operation on this color.

        Model results come back as a new :class:`Color`; any other result
        (channel tuples, hex integers, luminance) is returned unchanged.
        """
        target = self.resolve_operation(operation, space)
        logger.debug("[Color] %s dispatched to %s", operation, target.value)
        result = getattr(self.to(target), operation)(*args, **kwargs)
        if isinstance(result, ColorBase):
            return Color(result)
        return result

    def __getattr__(self, name: str) -> Any:
        # only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        if name in OPERATIONS:
            return partial(self.apply, name)
        raise UnsupportedOperation(f"{self.__class__.__name__} has no operation {name!r}")

    # ------------------ CHANNEL ACCESSORS ------------------
    @property
    def red(self) -> int:
        return self._rgb.r

    @property
    def green(self) -> int:
        return self._rgb.g

    @property
    def blue(self) -> int:
        return self._rgb.b

    @property
    def cyan(self) -> float:
        return self.cmyk.c

    @property
    def magenta(self) -> float:
        return self.cmyk.m

    @property
    def yellow(self) -> float:
        return self.cmyk.y

    @property
    def key(self) -> float:
        return self.cmyk.k

    @property
    def hue(self) -> float:
        return self.hsl.hue

    @property
    def hsl_saturation(self) -> float:
        return self.hsl.saturation

    @property
    def hsv_saturation(self) -> float:
        return self.hsv.saturation

    @property
    def lightness(self) -> float:
        return self.hsl.lightness

    @property
    def value(self) -> float:
        """HSV value channel."""
        return self.hsv.v

    # ------------------ CHANNEL SETTERS ------------------
    def with_red(self, value: float) -> Color:
        return Color(self._rgb.with_red(value))

    def with_green(self, value: float) -> Color:
        return Color(self._rgb.with_green(value))

    def with_blue(self, value: float) -> Color:
        return Color(self._rgb.with_blue(value))

    def with_cyan(self, value: float) -> Color:
        return self.apply("with_cyan", value)

    def with_magenta(self, value: float) -> Color:
        return self.apply("with_magenta", value)

    def with_yellow(self, value: float) -> Color:
        return self.apply("with_yellow", value)

    def with_key(self, value: float) -> Color:
        return self.apply("with_key", value)

    def with_hue(self, value: float) -> Color:
        return self.apply("with_hue", value, space=ColorSpace.HSL)

    def with_hsl_saturation(self, value: float) -> Color:
        return self.apply("with_saturation", value, space=ColorSpace.HSL)

    def with_hsv_saturation(self, value: float) -> Color:
        return self.apply("with_saturation", value, space=ColorSpace.HSV)

    def with_lightness(self, value: float) -> Color:
        return self.apply("with_lightness", value)

    def with_value(self, value: float) -> Color:
        return self.apply("with_value", value)

    # ------------------ ADJUSTMENTS ------------------
    def shift_hue(self, degrees: float) -> Color:
        return self.apply("rotate_hue", degrees, space=ColorSpace.HSL)

    def complement(self) -> Color:
        return self.apply("complement", space=ColorSpace.HSL)

    def hsl_saturate(self, amount: float) -> Color:
        return self.apply("saturate", amount, space=ColorSpace.HSL)

    def hsl_desaturate(self, amount: float) -> Color:
        return self.apply("desaturate", amount, space=ColorSpace.HSL)

    def hsv_saturate(self, amount: float) -> Color:
        return self.apply("saturate", amount, space=ColorSpace.HSV)

    def hsv_desaturate(self, amount: float) -> Color:
        return self.apply("desaturate", amount, space=ColorSpace.HSV)

    def lighten(self, amount: float) -> Color:
        return self.apply("lighten", amount)

    def darken(self, amount: float) -> Color:
        return self.apply("darken", amount)

    def brighten(self, amount: float) -> Color:
        return self.apply("brighten", amount)

    def dim(self, amount: float) -> Color:
        return self.apply("dim", amount)

    def invert(self) -> Color:
        return Color(self._rgb.invert())

    def grayscale(self) -> Color:
        return Color(self._rgb.grayscale())

    # ------------------ EXPORTS ------------------
    def rgb_octets(self) -> Tuple[int, int, int]:
        return self._rgb.octets()

    def rgb_ratios(self) -> Tuple[float, float, float]:
        return self._rgb.ratios()

    def rgb_hex(self) -> int:
        return self._rgb.hex()

    def hex_code(self, upper: bool = False) -> str:
        return self._rgb.hex_code(upper)

    def cmyk_percentages(self) -> Tuple[float, float, float, float]:
        return self.cmyk.percentages()

    def cmyk_ratios(self) -> Tuple[float, float, float, float]:
        return self.cmyk.ratios()

    def cmyk_octets(self) -> Tuple[int, int, int, int]:
        return self.cmyk.octets()

    def cmyk_hex(self) -> int:
        return self.cmyk.hex()

    def hsl_components(self) -> Tuple[float, float, float]:
        return self.hsl.components()  # type: ignore[return-value]

    def hsv_components(self) -> Tuple[float, float, float]:
        return self.hsv.components()  # type: ignore[return-value]

    def xyz_components(self) -> Tuple[float, float, float]:
        return self.xyz.components()  # type: ignore[return-value]

    # ------------------ INTERPOLATION ------------------
    @staticmethod
    def _as_model(color: Any, space: ColorSpace) -> ColorBase:
        # plain tuples are RGB octets, as in Color(...)
        if isinstance(color, ColorBase):
            return unified_space_to_class[space]._coerce(color)
        return Color(color).to(space)

    @staticmethod
    def lerp(
        start: Any,
        end: Any,
        amount: float,
        space: ColorSpace | str = ColorSpace.RGB,
        direction: HueDirection = "shortest",
    ) -> Color:
        """
        Interpolate between two colors in ``space``.

        ``start`` and ``end`` may be colors, color models or RGB channel
        tuples. ``direction`` picks the way round the hue circle for HSL and HSV.
        """
        space = as_space(space)
        cls = unified_space_to_class[space]
        s, e = Color._as_model(start, space), Color._as_model(end, space)
        if is_hue_space(space):
            return Color(cls.hue_lerp(s, e, amount, direction))  # type: ignore[attr-defined]
        return Color(cls.lerp(s, e, amount))

    @staticmethod
    def cubic(
        start: Any,
        end: Any,
        start_slope: float,
        end_slope: float,
        amount: float,
        space: ColorSpace | str = ColorSpace.RGB,
    ) -> Color:
        """Cubic Hermite interpolation in ``space``."""
        space = as_space(space)
        cls = unified_space_to_class[space]
        s, e = Color._as_model(start, space), Color._as_model(end, space)
        return Color(cls.cubic(s, e, start_slope, end_slope, amount))

    @staticmethod
    def distance(start: Any, end: Any, space: ColorSpace | str = ColorSpace.RGB) -> float:
        """
        Distance between two colors as measured by the model for ``space``.

        Plain tuples are read as RGB channels, as in ``Color(...)``.
        """
        space = as_space(space)
        cls = unified_space_to_class[space]
        return cls.distance(Color._as_model(start, space), Color._as_model(end, space))

    # ------------------ DUNDERS ------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Color):
            return self._rgb == other._rgb
        if isinstance(other, Rgb):
            return self._rgb == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._rgb)

    def __reduce__(self):
        return (Color, (self._rgb,))

    def __repr__(self) -> str:
        r, g, b = self._rgb.value
        return f"Color(r={r}, g={g}, b={b})"

    def __str__(self) -> str:
        return self.hex_code()

