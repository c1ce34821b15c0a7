"""
CSS text for picker values, as shown (and copied) by the converter panel.

>>> format_oklch(OKLCH(0.7, 0.15, 180))
'oklch(0.70 0.15 180)'
>>> format_lch(LCH(70, 56.25, 180, 50))
'lch(70 56 180 / 0.50)'
>>> css_color(RGB(255, 0, 0), 50)
'rgba(255, 0, 0, 0.5)'
"""
from __future__ import annotations

from .conversions import rgb_to_hex
from .types.color_types import LCH, OKLCH, RGB
from .types.ranges import ALPHA_MAX

# Alpha at or above this fraction renders as a plain opaque hex color.
OPAQUE_THRESHOLD = 0.99


def _alpha_suffix(alpha: float) -> str:
    if alpha >= ALPHA_MAX:
        return ""
    return f" / {alpha / ALPHA_MAX:.2f}"


def format_oklch(oklch: OKLCH) -> str:
    """``oklch(L C H)`` with two decimals for L and C, or ``oklch(L C H / A)`` when translucent."""
    return f"oklch({oklch.l:.2f} {oklch.c:.2f} {oklch.h:.0f}{_alpha_suffix(oklch.a)})"


def format_lch(lch: LCH) -> str:
    """``lch(L C H)`` with whole numbers, or ``lch(L C H / A)`` when translucent."""
    return f"lch({lch.l:.0f} {lch.c:.0f} {lch.h:.0f}{_alpha_suffix(lch.a)})"


def css_color(rgb: RGB, alpha: float = ALPHA_MAX) -> str:
    """
    Swatch color: ``#rrggbb`` when (nearly) opaque, ``rgba(r, g, b, a)`` otherwise.

    Args:
        rgb: Color to show
        alpha: Percent alpha
    """
    fraction = alpha / ALPHA_MAX
    if fraction >= OPAQUE_THRESHOLD:
        return rgb_to_hex(rgb)
    return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {fraction:g})"
