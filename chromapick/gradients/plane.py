"""
Lightness × chroma picker plane.

The 2D picker places chroma on the x axis (0 at the left edge, maximum at the
right) and lightness on the y axis (0 at the bottom, maximum at the top). Both
coordinates are unit floats.
"""
from __future__ import annotations
from typing import Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat

from ..conversions import np_lch_to_rgb, np_oklch_to_rgb
from ..types.color_types import LCH, OKLCH
from ..types.ranges import max_chroma, max_lightness

PlaneColor = Union[OKLCH, LCH]


def _maxima(is_lch: bool) -> Tuple[float, float]:
    space = "lch" if is_lch else "oklch"
    return max_lightness[space], max_chroma[space]


def plane_position(color: PlaneColor, is_lch: bool = False) -> Tuple[UnitFloat, UnitFloat]:
    """
    Picker coordinates of ``color``.

    Returns:
        (x, y): chroma and lightness as fractions of their maxima, clamped to [0, 1]
    """
    top_l, top_c = _maxima(is_lch)
    return UnitFloat(color.c / top_c), UnitFloat(color.l / top_l)


def from_plane_position(x: float, y: float, color: PlaneColor, is_lch: bool = False) -> PlaneColor:
    """
    Move ``color`` to picker coordinates (x, y), keeping its hue and alpha.

    Coordinates outside [0, 1] are clamped, as a drag past the plane edge
    pins the handle to the edge.
    """
    top_l, top_c = _maxima(is_lch)
    return color._replace(c=UnitFloat(x) * top_c, l=UnitFloat(y) * top_l)


def sample_plane(h: float, width: int, height: int, is_lch: bool = False) -> NDArray:
    """
    Render the picker plane for hue ``h`` as an RGB image.

    Args:
        h: Hue in degrees, shared by every pixel
        width: Number of chroma samples (columns), at least 2
        height: Number of lightness samples (rows), at least 2
        is_lch: Interpret the axes in LCH ranges instead of OKLCH

    Returns:
        uint8 array of shape (height, width, 3); row 0 is maximum lightness.
    """
    if width < 2 or height < 2:
        raise ValueError(f"Plane must be at least 2x2 samples, got {width}x{height}")

    top_l, top_c = _maxima(is_lch)
    chroma = np.linspace(0.0, top_c, width)[None, :]
    lightness = np.linspace(top_l, 0.0, height)[:, None]

    if is_lch:
        return np_lch_to_rgb(lightness, chroma, h)
    return np_oklch_to_rgb(lightness, chroma, h)
