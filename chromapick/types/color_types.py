from __future__ import annotations
from typing import Literal, NamedTuple, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorSpace = Literal["oklch", "lch", "rgb", "hex"]
ArraySpace = Literal["oklch", "lch", "rgb"]
HUE_SPACES = {"oklch", "lch"}


class OKLCH(NamedTuple):
    """OKLCH color: l in [0, 1], c in [0, 0.4], h in degrees, a in percent."""
    l: float
    c: float
    h: float
    a: float = 100.0


class LCH(NamedTuple):
    """LCH color: l in [0, 100], c in [0, 150], h in degrees, a in percent."""
    l: float
    c: float
    h: float
    a: float = 100.0


class RGB(NamedTuple):
    """8-bit RGB color without alpha."""
    r: int
    g: int
    b: int


ColorValue = Union[OKLCH, LCH, RGB, str]


def element_to_array(element: Union[ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple of channels or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space is a hue-based space (OKLCH or LCH).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
