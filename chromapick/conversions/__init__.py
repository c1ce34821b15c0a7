"""
Chromapick Color Space Conversions
==================================

This module provides the conversion math behind the picker: OKLCH, LCH, RGB and
HEX, with scalar functions for single colors and vectorized (numpy) versions for
batch work such as rendering a picker plane.

Features
--------
- Bidirectional conversions: OKLCH ↔ RGB ↔ LCH ↔ HEX
- Scalar functions taking and returning immutable value tuples
- Vectorized numpy functions over (..., 3) channel arrays
- HSL-approximation model: OKLCH chroma / 0.4 acts as HSL saturation
- Hex codec that never raises; malformed input yields None

Conversion Functions
-------------------

OKLCH ↔ RGB:
    oklch_to_rgb(oklch)
        HSL-style sector decomposition, gray shortcut below chroma 0.001
    rgb_to_oklch(rgb)
        Chroma capped at 0.4, alpha always 100
    np_oklch_to_rgb(l, c, h) / np_rgb_to_oklch(r, g, b)
        Vectorized versions

OKLCH ↔ LCH:
    oklch_to_lch(oklch) / lch_to_oklch(lch)
        Exact affine rescale (l × 100, c × 150 / 0.4)

LCH ↔ RGB:
    lch_to_rgb(lch) / rgb_to_lch(rgb)
        Always routed through OKLCH

RGB ↔ HEX:
    rgb_to_hex(rgb)
        "#rrggbb", lowercase, never an alpha suffix
    hex_to_rgb(hex)
        3, 6 or 8 digits, "#" optional, None when malformed
    rgb_to_hex_alpha(rgb, alpha) / hex_to_alpha(hex)
        8-digit hex alpha byte handling

High-Level API
-------------
    convert(color, from_space, to_space)
        Universal converter between "oklch", "lch", "rgb" and "hex"
    np_convert(color, from_space, to_space)
        Vectorized converter over "oklch", "lch" and "rgb"

Examples
--------
>>> from chromapick.conversions import oklch_to_rgb, rgb_to_hex
>>> from chromapick.types import OKLCH
>>>
>>> rgb = oklch_to_rgb(OKLCH(0.5, 0.4, 0))
>>> rgb_to_hex(rgb)
'#ff0000'
>>>
>>> # Vectorized conversion
>>> import numpy as np
>>> from chromapick.conversions import np_oklch_to_rgb
>>> np_oklch_to_rgb(np.array([0.5, 1.0]), 0.0, 0.0)
array([[128, 128, 128],
       [255, 255, 255]], dtype=uint8)
"""

# OKLCH ↔ RGB conversions
from .oklch import (
    oklch_to_rgb,
    rgb_to_oklch,
    np_oklch_to_rgb,
    np_rgb_to_oklch,
)

# OKLCH ↔ LCH and LCH ↔ RGB conversions
from .lch import (
    oklch_to_lch,
    lch_to_oklch,
    lch_to_rgb,
    rgb_to_lch,
    np_oklch_to_lch,
    np_lch_to_oklch,
    np_lch_to_rgb,
    np_rgb_to_lch,
)

# RGB ↔ HEX conversions
from .hex import (
    rgb_to_hex,
    hex_to_rgb,
    rgb_to_hex_alpha,
    hex_to_alpha,
    alpha_to_hex_byte,
)

# Plain HSL → RGB
from .hsl import hsl_to_rgb

# High-level API
from .wrapper import convert, np_convert, COLOR_SPACES

__all__ = [
    # OKLCH ↔ RGB
    'oklch_to_rgb',
    'rgb_to_oklch',
    'np_oklch_to_rgb',
    'np_rgb_to_oklch',

    # OKLCH ↔ LCH
    'oklch_to_lch',
    'lch_to_oklch',
    'np_oklch_to_lch',
    'np_lch_to_oklch',

    # LCH ↔ RGB
    'lch_to_rgb',
    'rgb_to_lch',
    'np_lch_to_rgb',
    'np_rgb_to_lch',

    # RGB ↔ HEX
    'rgb_to_hex',
    'hex_to_rgb',
    'rgb_to_hex_alpha',
    'hex_to_alpha',
    'alpha_to_hex_byte',

    # HSL
    'hsl_to_rgb',

    # High-level API
    'convert',
    'np_convert',
    'COLOR_SPACES',
]
