"""
RGB <-> HEX string codec.

Accepted input is ``#?[0-9a-fA-F]{3|6|8}``, case-insensitive. Output is always
``#`` followed by lowercase digits. Parsing never raises: malformed input
yields ``None`` and callers keep whatever state they had before.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from ..types.color_types import RGB
from ..types.ranges import ALPHA_MAX, RGB_MAX
from .numbers import round_half_up, to_channel

logger = logging.getLogger(__name__)

_HEX_DIGITS = {
    3: re.compile(r"[0-9a-fA-F]{3}"),
    6: re.compile(r"[0-9a-fA-F]{6}"),
    8: re.compile(r"[0-9a-fA-F]{8}"),
}


def _strip_hex(hex_str: object) -> Optional[str]:
    """Return the bare digits of a well-formed hex color, else None."""
    if not isinstance(hex_str, str):
        return None
    digits = hex_str[1:] if hex_str.startswith("#") else hex_str
    pattern = _HEX_DIGITS.get(len(digits))
    if pattern is None or pattern.fullmatch(digits) is None:
        return None
    return digits


def rgb_to_hex(rgb: RGB) -> str:
    """
    Format an RGB color as ``#rrggbb``.

    Each channel is rounded and clamped independently, so the result is
    always 7 characters. No alpha suffix is ever emitted here; see
    :func:`rgb_to_hex_alpha`.
    """
    return "#" + "".join(f"{to_channel(v):02x}" for v in rgb)


def hex_to_rgb(hex_str: str) -> Optional[RGB]:
    """
    Parse a 3, 6 or 8 digit hex color (``#`` optional).

    3-digit input duplicates each digit (``abc`` -> ``aabbcc``); the alpha
    byte of 8-digit input is discarded.

    Returns:
        RGB, or None for any other length or non-hex character.
    """
    digits = _strip_hex(hex_str)
    if digits is None:
        logger.debug("Rejected hex color %r", hex_str)
        return None

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    return RGB(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def alpha_to_hex_byte(alpha: float) -> str:
    """Two lowercase hex digits for a percent alpha: ``round(alpha / 100 * 255)``."""
    return f"{to_channel(alpha / ALPHA_MAX * RGB_MAX):02x}"


def rgb_to_hex_alpha(rgb: RGB, alpha: float = ALPHA_MAX) -> str:
    """
    Format an RGB color with a percent alpha.

    Fully opaque colors (alpha >= 100) give the plain 6-digit form, anything
    else gets the alpha byte appended as an 8-digit hex.
    """
    hex_str = rgb_to_hex(rgb)
    if alpha >= ALPHA_MAX:
        return hex_str
    return hex_str + alpha_to_hex_byte(alpha)


def hex_to_alpha(hex_str: str) -> Optional[float]:
    """
    Percent alpha carried by a hex color.

    8-digit input gives ``round(byte / 255 * 100)``; 3 and 6 digit input is
    fully opaque (100). Malformed input gives None.
    """
    digits = _strip_hex(hex_str)
    if digits is None:
        return None
    if len(digits) != 8:
        return ALPHA_MAX
    return float(round_half_up(int(digits[6:8], 16) / RGB_MAX * ALPHA_MAX))
