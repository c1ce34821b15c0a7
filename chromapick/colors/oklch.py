from typing import ClassVar, Type
from ..types.color_types import OKLCH, ColorSpace
from .color_base import ColorBase, WithAlpha


class ColorOKLCH(ColorBase, WithAlpha):
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace] = "oklch"
    value_type: ClassVar[Type[tuple]] = OKLCH

    @property
    def l(self) -> float:
        return self.value.l

    @property
    def c(self) -> float:
        return self.value.c

    @property
    def h(self) -> float:
        return self.value.h
