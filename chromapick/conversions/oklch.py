"""
OKLCH <-> RGB conversions.

OKLCH is treated here as an HSL analog rather than a true OKLab transform:
lightness maps directly, chroma / 0.4 stands in for HSL saturation and the
hue passes through. The two directions are therefore only approximate
inverses; ``rgb_to_oklch`` caps chroma at 0.4 while ``oklch_to_rgb`` divides
by it, so saturated colors do not round-trip exactly.
"""
import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import OKLCH, RGB
from ..types.ranges import ACHROMATIC_CHROMA, ALPHA_MAX, HUE_360, OKLCH_MAX_CHROMA, RGB_MAX
from .numbers import normalize_hue, np_to_channel, to_channel


## OKLCH to RGB conversions

def oklch_to_rgb(oklch: OKLCH) -> RGB:
    """
    Convert OKLCH to 8-bit RGB using HSL as the intermediate model.

    Any finite input is accepted; out-of-range values are only clamped when
    the RGB channels are produced.

    Args:
        oklch: Color with l in [0, 1], c in [0, 0.4], h in degrees

    Returns:
        RGB: channels rounded and clamped to [0, 255]
    """
    l, c, h = oklch.l, oklch.c, oklch.h

    if c < ACHROMATIC_CHROMA:
        gray = to_channel(l * RGB_MAX)
        return RGB(gray, gray, gray)

    saturation = c / OKLCH_MAX_CHROMA
    h_norm = normalize_hue(h) / 60

    chroma = (1 - abs(2 * l - 1)) * saturation
    x = chroma * (1 - abs((h_norm % 2) - 1))
    m = l - chroma / 2

    # Wrapping can land exactly on 360.0 for tiny negative hues.
    hue_section = int(math.floor(h_norm)) % 6

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return RGB(
        to_channel((r + m) * RGB_MAX),
        to_channel((g + m) * RGB_MAX),
        to_channel((b + m) * RGB_MAX),
    )


def np_oklch_to_rgb(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """
    Vectorized: Convert OKLCH to 8-bit RGB.

    Args:
        l: array-like or scalar, lightness in [0, 1]
        c: array-like or scalar, chroma in [0, 0.4]
        h: array-like or scalar, hue in degrees

    Returns:
        rgb: uint8 array of shape (..., 3)
    """
    l = np.asarray(l, dtype=float)
    c = np.asarray(c, dtype=float)
    h = np.asarray(h, dtype=float)
    h = np.where(np.isfinite(h), h, 0.0) % HUE_360

    out_shape = np.broadcast(l, c, h).shape
    l = np.broadcast_to(l, out_shape)
    c = np.broadcast_to(c, out_shape)
    h = np.broadcast_to(h, out_shape)

    saturation = c / OKLCH_MAX_CHROMA
    h_norm = h / 60

    chroma = (1 - np.abs(2 * l - 1)) * saturation
    x = chroma * (1 - np.abs((h_norm % 2) - 1))
    m = l - chroma / 2
    zero = np.zeros(out_shape)

    hue_section = np.floor(h_norm).astype(int) % 6
    masks = [hue_section == i for i in range(6)]

    r = np.select(masks, [chroma, x, zero, zero, x, chroma])
    g = np.select(masks, [x, chroma, chroma, x, zero, zero])
    b = np.select(masks, [zero, zero, x, chroma, chroma, x])

    rgb = np.stack([r + m, g + m, b + m], axis=-1)

    gray = c < ACHROMATIC_CHROMA
    rgb[gray] = l[gray][..., None]

    return np_to_channel(rgb * RGB_MAX)


## RGB to OKLCH conversions

def rgb_to_oklch(rgb: RGB) -> OKLCH:
    """
    Convert 8-bit RGB to OKLCH using HSL as the intermediate model.

    RGB carries no alpha, so the result is always fully opaque (a = 100).

    Args:
        rgb: Color with channels in [0, 255]

    Returns:
        OKLCH: (l [0,1], c [0,0.4], h [0,360), a = 100)
    """
    r = rgb.r / RGB_MAX
    g = rgb.g / RGB_MAX
    b = rgb.b / RGB_MAX

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    if delta == 0:
        return OKLCH(lightness, 0.0, 0.0, ALPHA_MAX)

    saturation = delta / (1 - abs(2 * lightness - 1))
    chroma = min(saturation * OKLCH_MAX_CHROMA, OKLCH_MAX_CHROMA)

    if max_c == r:
        hue = ((g - b) / delta) % 6
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    hue = normalize_hue(hue * 60)

    return OKLCH(lightness, chroma, hue, ALPHA_MAX)


def np_rgb_to_oklch(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to OKLCH.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        oklch: float array of shape (..., 3): (l [0,1], c [0,0.4], h [0,360))
    """
    r = np.asarray(r, dtype=float) / RGB_MAX
    g = np.asarray(g, dtype=float) / RGB_MAX
    b = np.asarray(b, dtype=float) / RGB_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    mask = delta > 0
    chroma = np.zeros(out_shape)
    chroma[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))
    chroma = np.minimum(chroma * OKLCH_MAX_CHROMA, OKLCH_MAX_CHROMA)

    hue = np.zeros(out_shape)
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = ((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue = (hue * 60) % HUE_360

    return np.stack([lightness, chroma, hue], axis=-1)
