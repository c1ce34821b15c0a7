from __future__ import annotations
import logging
from typing import Optional

from .color_base import ColorBase, build_registry
from .oklch import ColorOKLCH
from .lch import ColorLCH
from .rgb import ColorRGB
from ..conversions import convert, rgb_to_hex_alpha
from ..types.color_types import ColorSpace
from ..types.ranges import ALPHA_MAX

logger = logging.getLogger(__name__)

unified_space_to_class: dict[str, type[ColorBase]] = build_registry(ColorOKLCH, ColorLCH, ColorRGB)


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_space_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: Optional[ColorSpace] = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Alpha survives OKLCH <-> LCH. Converting to RGB drops it, and a color
    built from RGB is fully opaque.

    Args:
        to_space: Target color space ("oklch", "lch" or "rgb"). Defaults to the current space.

    Returns:
        New ColorBase instance in the target space
    """
    to_space = (to_space or self.mode).lower()  # type: ignore
    cls = get_color_class(to_space)
    if to_space == self.mode:
        return self
    return cls(convert(self.value, self.mode, to_space))


def to_hex(self: ColorBase) -> str:
    """
    Hex form of this color: ``#rrggbb``, or ``#rrggbbaa`` when alpha is below 100.
    """
    alpha = getattr(self, "alpha", ALPHA_MAX)
    rgb = self.value if self.mode == "rgb" else convert(self.value, self.mode, "rgb")
    return rgb_to_hex_alpha(rgb, alpha)  # type: ignore[arg-type]


ColorBase.convert = color_convert
ColorBase.to_hex = to_hex


def color_from_hex(hex_str: str, color_space: ColorSpace = "oklch") -> Optional[ColorBase]:
    """
    Build a color from a hex string.

    The alpha byte of 8-digit input becomes the percent alpha of OKLCH/LCH
    results. Returns None when the hex is malformed.
    """
    cls = get_color_class(color_space)
    value = convert(hex_str, "hex", cls.mode)
    if value is None:
        return None
    return cls(value)


def retain_on_invalid(previous: ColorBase, hex_str: str) -> ColorBase:
    """
    Apply a hex edit to ``previous``, keeping ``previous`` when the hex is invalid.

    The result is expressed in the same color space as ``previous``.
    """
    updated = color_from_hex(hex_str, previous.mode)
    if updated is None:
        logger.debug("Invalid hex %r, keeping %r", hex_str, previous)
        return previous
    return updated
