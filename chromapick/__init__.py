"""Chromapick: OKLCH / LCH color picker math with hex and RGB interchange."""

from .types.color_types import OKLCH, LCH, RGB
from .conversions import (
    oklch_to_rgb,
    rgb_to_oklch,
    oklch_to_lch,
    lch_to_oklch,
    lch_to_rgb,
    rgb_to_lch,
    rgb_to_hex,
    hex_to_rgb,
    rgb_to_hex_alpha,
    hex_to_alpha,
    np_oklch_to_rgb,
    np_rgb_to_oklch,
    np_lch_to_rgb,
    np_rgb_to_lch,
    convert,
    np_convert,
)
from .colors import (
    ColorBase,
    ColorOKLCH,
    ColorLCH,
    ColorRGB,
    color_from_hex,
    retain_on_invalid,
)
from .gradients import (
    GradientStop,
    generate_lightness_gradient,
    generate_chroma_gradient,
    generate_hue_gradient,
    generate_alpha_gradient,
    to_css_linear_gradient,
    plane_position,
    from_plane_position,
    sample_plane,
)
from .validation import is_valid_hex, normalize_hex, parse_color_input
from .formatting import format_oklch, format_lch, css_color

__version__ = "1.0.0"

__all__ = [
    # value types
    "OKLCH",
    "LCH",
    "RGB",
    # conversions
    "oklch_to_rgb",
    "rgb_to_oklch",
    "oklch_to_lch",
    "lch_to_oklch",
    "lch_to_rgb",
    "rgb_to_lch",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hex_alpha",
    "hex_to_alpha",
    "np_oklch_to_rgb",
    "np_rgb_to_oklch",
    "np_lch_to_rgb",
    "np_rgb_to_lch",
    "convert",
    "np_convert",
    # color objects
    "ColorBase",
    "ColorOKLCH",
    "ColorLCH",
    "ColorRGB",
    "color_from_hex",
    "retain_on_invalid",
    # gradients
    "GradientStop",
    "generate_lightness_gradient",
    "generate_chroma_gradient",
    "generate_hue_gradient",
    "generate_alpha_gradient",
    "to_css_linear_gradient",
    "plane_position",
    "from_plane_position",
    "sample_plane",
    # input and output text
    "is_valid_hex",
    "normalize_hex",
    "parse_color_input",
    "format_oklch",
    "format_lch",
    "css_color",
    "__version__",
]
