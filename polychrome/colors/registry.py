from __future__ import annotations

from ..conversions import convert
from ..types.color_types import ColorSpace, SPACE_PRECEDENCE, as_space
from .color_base import ColorBase, build_registry
from .rgb import Rgb
from .hsl import Hsl
from .hsv import Hsv
from .cmyk import Cmyk
from .xyz import Xyz

unified_space_to_class: dict[ColorSpace, type[ColorBase]] = build_registry(Rgb, Hsl, Hsv, Cmyk, Xyz)


def color_convert(self: ColorBase, to_space: ColorSpace | str) -> ColorBase:
    """
    Convert this color to another color model.

    Args:
        to_space: Target color space (e.g. "rgb", "hsl", ColorSpace.CMYK)

    Returns:
        New instance of the target model; ``self`` when the space is unchanged.
    """
    to_space = as_space(to_space)
    if to_space == self.mode:
        return self
    cls = unified_space_to_class[to_space]
    return cls(convert(self.value, self.mode, to_space))


def build_operation_table() -> dict[str, tuple[ColorSpace, ...]]:
    """Map each model operation name to the spaces defining it, in dispatch order."""
    table: dict[str, list[ColorSpace]] = {}
    for space in SPACE_PRECEDENCE:
        for name in sorted(unified_space_to_class[space].operations):
            table.setdefault(name, []).append(space)
    return {name: tuple(spaces) for name, spaces in table.items()}


ColorBase.convert = color_convert  # type: ignore[assignment]

OPERATIONS: dict[str, tuple[ColorSpace, ...]] = build_operation_table()
