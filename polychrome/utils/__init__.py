from .dimension import get_dimension
from .num_utils import round_half_up
from .interpolate import lerp, cerp, hue_lerp, hue_delta

__all__ = [
    "get_dimension",
    "round_half_up",
    "lerp",
    "cerp",
    "hue_lerp",
    "hue_delta",
]
