"""
Slider background gradients.

Each generator sweeps one axis of an OKLCH (or LCH) color while the other two
stay fixed, converting every sample to hex. Lightness and chroma use 11
samples (10 equal steps), hue uses 13 (30° steps, 0° and 360° both included,
so the first and last stops share a color).
"""
from __future__ import annotations
from typing import Callable, List, Union

from ..conversions import lch_to_rgb, oklch_to_rgb, rgb_to_hex
from ..types.color_types import LCH, OKLCH, RGB
from ..types.ranges import (
    ALPHA_MAX,
    CHROMA_SAMPLES,
    HUE_360,
    HUE_SAMPLES,
    LIGHTNESS_SAMPLES,
    max_chroma,
    max_lightness,
)
from .stops import GradientStop


def _space(is_lch: bool) -> str:
    return "lch" if is_lch else "oklch"


def _to_rgb(l: float, c: float, h: float, is_lch: bool) -> RGB:
    if is_lch:
        return lch_to_rgb(LCH(l, c, h, ALPHA_MAX))
    return oklch_to_rgb(OKLCH(l, c, h, ALPHA_MAX))


def _sweep(
    samples: int,
    stop_value: float,
    make_rgb: Callable[[float], RGB],
) -> List[GradientStop]:
    u = [i / (samples - 1) for i in range(samples)]
    return [
        GradientStop(rgb_to_hex(make_rgb(t * stop_value)), t * 100.0)
        for t in u
    ]


def generate_lightness_gradient(c: float, h: float, is_lch: bool = False) -> List[GradientStop]:
    """Sweep lightness from 0 to its maximum at fixed chroma and hue (11 stops)."""
    top = max_lightness[_space(is_lch)]
    return _sweep(LIGHTNESS_SAMPLES, top, lambda l: _to_rgb(l, c, h, is_lch))


def generate_chroma_gradient(l: float, h: float, is_lch: bool = False) -> List[GradientStop]:
    """Sweep chroma from 0 to its maximum at fixed lightness and hue (11 stops)."""
    top = max_chroma[_space(is_lch)]
    return _sweep(CHROMA_SAMPLES, top, lambda c: _to_rgb(l, c, h, is_lch))


def generate_hue_gradient(l: float, c: float, is_lch: bool = False) -> List[GradientStop]:
    """Sweep hue over the full circle at fixed lightness and chroma (13 stops)."""
    return _sweep(HUE_SAMPLES, HUE_360, lambda h: _to_rgb(l, c, h, is_lch))


def generate_alpha_gradient(color: Union[OKLCH, LCH], is_lch: bool = False) -> List[GradientStop]:
    """Transparent to the opaque form of ``color``; alpha of ``color`` is ignored."""
    rgb = _to_rgb(color.l, color.c, color.h, is_lch)
    return [GradientStop("transparent", 0.0), GradientStop(rgb_to_hex(rgb), 100.0)]
