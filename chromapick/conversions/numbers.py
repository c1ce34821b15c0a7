import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float
from boundednumbers.np_functions import clamp as np_clamp

from ..types.ranges import HUE_360, RGB_MAX


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (127.5 -> 128)."""
    return int(math.floor(value + 0.5))


def np_round_half_up(value: NDArray) -> NDArray:
    """Vectorized :func:`round_half_up`."""
    return np.floor(np.asarray(value, dtype=float) + 0.5)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range. Non-finite hues fall back to 0."""
    if not math.isfinite(h):
        return 0.0
    return cyclic_wrap_float(h, 0.0, HUE_360)


def to_channel(value: float) -> int:
    """Clamp a [0, 255]-scaled float into an 8-bit channel and round it. NaN maps to 0."""
    if math.isnan(value):
        return 0
    return round_half_up(clamp(value, 0, RGB_MAX))


def np_to_channel(value: NDArray) -> NDArray:
    """Vectorized :func:`to_channel`, returns uint8."""
    value = np.nan_to_num(np.asarray(value, dtype=float), nan=0.0, posinf=RGB_MAX, neginf=0.0)
    return np_round_half_up(np_clamp(value, 0, RGB_MAX)).astype(np.uint8)
