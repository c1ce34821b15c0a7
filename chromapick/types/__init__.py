from .color_types import OKLCH, LCH, RGB, ColorSpace, HUE_SPACES, is_hue_space
from . import ranges

__all__ = [
    "OKLCH",
    "LCH",
    "RGB",
    "ColorSpace",
    "HUE_SPACES",
    "is_hue_space",
    "ranges",
]
