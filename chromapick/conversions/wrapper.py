from __future__ import annotations

import numpy as np
from typing import Callable, Dict, Optional, Tuple, cast

from ..types.color_types import LCH, OKLCH, RGB, ArraySpace, ColorSpace, ColorValue, element_to_array
from ..types.ranges import ALPHA_MAX
from .numbers import np_to_channel
from .hex import hex_to_alpha, hex_to_rgb, rgb_to_hex, rgb_to_hex_alpha
from .lch import (
    lch_to_oklch,
    lch_to_rgb,
    np_lch_to_oklch,
    np_lch_to_rgb,
    np_oklch_to_lch,
    np_rgb_to_lch,
    oklch_to_lch,
    rgb_to_lch,
)
from .oklch import np_oklch_to_rgb, np_rgb_to_oklch, oklch_to_rgb, rgb_to_oklch

COLOR_SPACES = ("oklch", "lch", "rgb", "hex")

CONVERT_SCALAR: Dict[Tuple[str, str], Callable] = {
    ("oklch", "rgb"): oklch_to_rgb,
    ("rgb", "oklch"): rgb_to_oklch,
    ("oklch", "lch"): oklch_to_lch,
    ("lch", "oklch"): lch_to_oklch,
    ("lch", "rgb"): lch_to_rgb,
    ("rgb", "lch"): rgb_to_lch,
}

CONVERT_NUMPY: Dict[Tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("oklch", "rgb"): np_oklch_to_rgb,
    ("rgb", "oklch"): np_rgb_to_oklch,
    ("oklch", "lch"): np_oklch_to_lch,
    ("lch", "oklch"): np_lch_to_oklch,
    ("lch", "rgb"): np_lch_to_rgb,
    ("rgb", "lch"): np_rgb_to_lch,
}

_VALUE_TYPES = {"oklch": OKLCH, "lch": LCH, "rgb": RGB}


def _check_space(space: str, allowed: Tuple[str, ...]) -> str:
    space = space.lower()
    if space not in allowed:
        raise ValueError(f"Unknown color space: {space!r} (expected one of {', '.join(allowed)})")
    return space


def convert(
    color: ColorValue,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Optional[ColorValue]:
    """
    Universal converter between ``oklch``, ``lch``, ``rgb`` and ``hex``.

    Hex goes through RGB. The alpha of 8-digit hex input is carried into
    OKLCH/LCH results, and OKLCH/LCH alpha below 100 is written as an alpha
    byte when converting to hex.

    Args:
        color: Value in ``from_space`` (OKLCH, LCH, RGB, a plain tuple, or a hex string)
        from_space: Source color space
        to_space: Target color space

    Returns:
        The converted value, or None when hex input fails to parse.

    Raises:
        ValueError: If either space is unknown.
    """
    fs = _check_space(from_space, COLOR_SPACES)
    ts = _check_space(to_space, COLOR_SPACES)

    if fs == ts:
        if fs == "hex" and hex_to_rgb(cast(str, color)) is None:
            return None
        return color  # No conversion needed

    alpha = ALPHA_MAX
    if fs == "hex":
        rgb = hex_to_rgb(cast(str, color))
        if rgb is None:
            return None
        alpha = cast(float, hex_to_alpha(cast(str, color)))
        if ts == "rgb":
            return rgb
        result = CONVERT_SCALAR[("rgb", ts)](rgb)
        return result._replace(a=alpha)

    value = _VALUE_TYPES[fs](*cast(Tuple[float, ...], color))
    if fs != "rgb":
        alpha = cast(OKLCH, value).a

    if ts == "hex":
        rgb = value if fs == "rgb" else CONVERT_SCALAR[(fs, "rgb")](value)
        if fs == "rgb":
            return rgb_to_hex(rgb)
        return rgb_to_hex_alpha(rgb, alpha)

    return CONVERT_SCALAR[(fs, ts)](value)


def np_convert(
    color: np.ndarray,
    from_space: ArraySpace,
    to_space: ArraySpace,
) -> np.ndarray:
    """
    Vectorized converter over arrays of shape (..., 3).

    Hue spaces carry (l, c, h) channels without alpha. RGB output is uint8,
    everything else float.

    Raises:
        ValueError: If a space is unknown or the last dimension is not 3.
    """
    fs = _check_space(from_space, COLOR_SPACES[:3])
    ts = _check_space(to_space, COLOR_SPACES[:3])

    color = element_to_array(color)
    if color.shape[-1:] != (3,):
        raise ValueError(f"{fs} expects last dimension to be 3, got shape {color.shape}")

    if fs == ts:
        return np_to_channel(color) if fs == "rgb" else color

    return CONVERT_NUMPY[(fs, ts)](color[..., 0], color[..., 1], color[..., 2])
