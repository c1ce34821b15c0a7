"""
OKLCH <-> LCH rescaling and the LCH <-> RGB compositions.

LCH uses [0, 100] lightness and [0, 150] chroma where OKLCH uses [0, 1] and
[0, 0.4]. The rescale is pure arithmetic and round-trips exactly; LCH <-> RGB
always goes through OKLCH.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import LCH, OKLCH, RGB
from ..types.ranges import LCH_MAX_CHROMA, LIGHTNESS_SCALE, OKLCH_MAX_CHROMA
from .oklch import np_oklch_to_rgb, np_rgb_to_oklch, oklch_to_rgb, rgb_to_oklch


def oklch_to_lch(oklch: OKLCH) -> LCH:
    """Rescale OKLCH to LCH. Hue and alpha pass through unchanged."""
    return LCH(
        oklch.l * LIGHTNESS_SCALE,
        oklch.c * LCH_MAX_CHROMA / OKLCH_MAX_CHROMA,
        oklch.h,
        oklch.a,
    )


def lch_to_oklch(lch: LCH) -> OKLCH:
    """Rescale LCH to OKLCH. Hue and alpha pass through unchanged."""
    return OKLCH(
        lch.l / LIGHTNESS_SCALE,
        lch.c * OKLCH_MAX_CHROMA / LCH_MAX_CHROMA,
        lch.h,
        lch.a,
    )


def lch_to_rgb(lch: LCH) -> RGB:
    return oklch_to_rgb(lch_to_oklch(lch))


def rgb_to_lch(rgb: RGB) -> LCH:
    return oklch_to_lch(rgb_to_oklch(rgb))


def np_oklch_to_lch(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """Vectorized :func:`oklch_to_lch` over (l, c, h) channels, shape (..., 3)."""
    l, c, h = np.broadcast_arrays(
        np.asarray(l, dtype=float), np.asarray(c, dtype=float), np.asarray(h, dtype=float)
    )
    return np.stack([l * LIGHTNESS_SCALE, c * LCH_MAX_CHROMA / OKLCH_MAX_CHROMA, h], axis=-1)


def np_lch_to_oklch(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """Vectorized :func:`lch_to_oklch` over (l, c, h) channels, shape (..., 3)."""
    l, c, h = np.broadcast_arrays(
        np.asarray(l, dtype=float), np.asarray(c, dtype=float), np.asarray(h, dtype=float)
    )
    return np.stack([l / LIGHTNESS_SCALE, c * OKLCH_MAX_CHROMA / LCH_MAX_CHROMA, h], axis=-1)


def np_lch_to_rgb(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    oklch = np_lch_to_oklch(l, c, h)
    return np_oklch_to_rgb(oklch[..., 0], oklch[..., 1], oklch[..., 2])


def np_rgb_to_lch(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    oklch = np_rgb_to_oklch(r, g, b)
    return np_oklch_to_lch(oklch[..., 0], oklch[..., 1], oklch[..., 2])
