from typing import ClassVar, Type
from ..types.color_types import RGB, ColorSpace
from .color_base import ColorBase


class ColorRGB(ColorBase):
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "rgb"
    value_type: ClassVar[Type[tuple]] = RGB
    clamps:     ClassVar[bool] = True

    @property
    def r(self) -> int:
        return self.value.r

    @property
    def g(self) -> int:
        return self.value.g

    @property
    def b(self) -> int:
        return self.value.b
