"""
Free-form color input: validation and normalisation.

Accepts the three notations the picker's input field understands and reduces
each to a normalised ``#rrggbb`` (or ``#rrggbbaa``) string:

- hex: ``#f80``, ``ff8800``, ``#FF880080``
- ``rgb(255, 136, 0)`` with integer channels in [0, 255]
- ``hsl(32, 100%, 50%)`` with integer hue in [0, 360] and percentages in [0, 100]

Like the hex codec, nothing here raises on bad input; it returns False or None.
"""
from __future__ import annotations

import re
from typing import Optional

from .conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hex
from .types.color_types import RGB

_RGB_PATTERN = re.compile(
    r"rgb\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*\)", re.IGNORECASE
)
_HSL_PATTERN = re.compile(
    r"hsl\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})%\s*,\s*([0-9]{1,3})%\s*\)", re.IGNORECASE
)


def is_valid_hex(hex_str: str) -> bool:
    return hex_to_rgb(hex_str) is not None


def normalize_hex(hex_str: str) -> Optional[str]:
    """
    Lowercase, ``#``-prefixed form of a valid hex color, with 3-digit input
    expanded to 6 digits. 8-digit input keeps its alpha byte.
    """
    if not is_valid_hex(hex_str):
        return None
    digits = hex_str[1:] if hex_str.startswith("#") else hex_str
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return "#" + digits.lower()


def _match_rgb(text: str) -> Optional[RGB]:
    match = _RGB_PATTERN.fullmatch(text)
    if match is None:
        return None
    r, g, b = (int(v) for v in match.groups())
    if not all(0 <= v <= 255 for v in (r, g, b)):
        return None
    return RGB(r, g, b)


def _match_hsl(text: str) -> Optional[RGB]:
    match = _HSL_PATTERN.fullmatch(text)
    if match is None:
        return None
    h, s, l = (int(v) for v in match.groups())
    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= l <= 100):
        return None
    return hsl_to_rgb(h, s / 100, l / 100)


def is_valid_rgb(text: str) -> bool:
    return _match_rgb(text) is not None


def is_valid_hsl(text: str) -> bool:
    return _match_hsl(text) is not None


def parse_color_input(text: str) -> Optional[str]:
    """
    Parse hex, ``rgb(...)`` or ``hsl(...)`` input into a normalised hex string.

    Surrounding whitespace is ignored. Returns None when the input matches
    none of the notations or a channel is out of range.
    """
    trimmed = text.strip()

    normalized = normalize_hex(trimmed)
    if normalized is not None:
        return normalized

    rgb = _match_rgb(trimmed)
    if rgb is None:
        rgb = _match_hsl(trimmed)
    if rgb is None:
        return None
    return rgb_to_hex(rgb)
