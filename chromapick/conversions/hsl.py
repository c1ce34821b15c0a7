import math

from ..types.color_types import RGB
from ..types.ranges import RGB_MAX
from .numbers import normalize_hue, to_channel


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert standard HSL to 8-bit RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Unlike :func:`~chromapick.conversions.oklch.oklch_to_rgb` this is plain
    HSL with no chroma rescaling; it backs ``hsl(...)`` input parsing.

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        RGB: channels rounded and clamped to [0, 255]
    """
    h = normalize_hue(h)

    if s == 0:
        gray = to_channel(l * RGB_MAX)
        return RGB(gray, gray, gray)

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = int(math.floor(h / 60)) % 6

    if hue_section == 0:
        r, g, b = m1, m2, low
    elif hue_section == 1:
        r, g, b = m2, m1, low
    elif hue_section == 2:
        r, g, b = low, m1, m2
    elif hue_section == 3:
        r, g, b = low, m2, m1
    elif hue_section == 4:
        r, g, b = m2, low, m1
    else:
        r, g, b = m1, low, m2

    return RGB(to_channel(r * RGB_MAX), to_channel(g * RGB_MAX), to_channel(b * RGB_MAX))
