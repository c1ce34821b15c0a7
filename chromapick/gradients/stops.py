"""Gradient stop type and the CSS adapter used at the UI boundary."""
from __future__ import annotations
from typing import Iterable, NamedTuple

from ..utils import is_close_to_int


class GradientStop(NamedTuple):
    """One color stop: a CSS color string and its offset in percent."""
    color: str
    offset: float


def format_offset(offset: float) -> str:
    """Percent offset without a trailing ``.0``, at most 4 decimals."""
    if is_close_to_int(offset):
        return f"{round(offset)}%"
    return f"{offset:.4f}".rstrip("0").rstrip(".") + "%"


def to_css_linear_gradient(stops: Iterable[GradientStop], direction: str = "to right") -> str:
    """
    Render stops as a CSS ``linear-gradient(...)`` value.

    >>> to_css_linear_gradient([GradientStop("#000000", 0), GradientStop("#ffffff", 100)])
    'linear-gradient(to right, #000000 0%, #ffffff 100%)'
    """
    parts = [f"{stop.color} {format_offset(stop.offset)}" for stop in stops]
    if not parts:
        raise ValueError("A gradient needs at least one stop")
    return f"linear-gradient({direction}, {', '.join(parts)})"
