"""
Chromapick Color Classes
========================

Immutable color objects for the OKLCH, LCH and RGB spaces. They wrap the
value tuples from :mod:`chromapick.types` and carry alpha through conversions
and hex round-trips, which the bare conversion functions do not do.

Features
--------
- Immutable color instances (frozen after initialization)
- OKLCH / LCH keep out-of-range channels as given; RGB rounds and clamps
- Alpha channel support (percent) with the WithAlpha mixin
- Conversion between spaces with ``.convert()``
- Hex output with an alpha byte when the color is translucent

Usage
-----
>>> from chromapick.colors import ColorOKLCH, color_from_hex
>>>
>>> color = ColorOKLCH((0.5, 0.4, 0.0))
>>> color.to_hex()
'#ff0000'
>>> color.with_alpha(50).to_hex()
'#ff000080'
>>>
>>> lch = color.convert("lch")
>>> lch.mode
'lch'
>>>
>>> color_from_hex("#ff000080").alpha
50.0
"""

from .color_base import ColorBase, WithAlpha
from .oklch import ColorOKLCH
from .lch import ColorLCH
from .rgb import ColorRGB
from .color import (
    unified_space_to_class,
    get_color_class,
    color_convert,
    color_from_hex,
    retain_on_invalid,
)

__all__ = [
    "ColorBase",
    "WithAlpha",
    "ColorOKLCH",
    "ColorLCH",
    "ColorRGB",
    "unified_space_to_class",
    "get_color_class",
    "color_convert",
    "color_from_hex",
    "retain_on_invalid",
]
