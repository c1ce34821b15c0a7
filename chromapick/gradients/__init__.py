"""
Gradient sampling for picker rendering.

Slider generators return ordered :class:`GradientStop` lists; turning them into
CSS is left to :func:`to_css_linear_gradient` at the UI boundary. The picker
plane is rendered straight to an RGB array.
"""
from .stops import GradientStop, to_css_linear_gradient, format_offset
from .sliders import (
    generate_lightness_gradient,
    generate_chroma_gradient,
    generate_hue_gradient,
    generate_alpha_gradient,
)
from .plane import plane_position, from_plane_position, sample_plane

__all__ = [
    "GradientStop",
    "to_css_linear_gradient",
    "format_offset",
    "generate_lightness_gradient",
    "generate_chroma_gradient",
    "generate_hue_gradient",
    "generate_alpha_gradient",
    "plane_position",
    "from_plane_position",
    "sample_plane",
]
