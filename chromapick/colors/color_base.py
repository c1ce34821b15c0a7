from __future__ import annotations
from typing import Any, Callable, ClassVar, Optional, Type, cast
from abc import ABC
from boundednumbers import clamp

from ..types.color_types import ColorSpace, Scalar, ScalarVector, is_hue_space
from ..types.ranges import ALPHA_MAX
from ..conversions.numbers import to_channel


class ColorBase:
    # Subclasses and mixins declare empty __slots__, so instances have no __dict__.
    __slots__ = ('_value', '_is_frozen')

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    value_type: ClassVar[Type[tuple]]
    # RGB rounds and clamps to 8-bit channels; hue spaces keep out-of-range input as given.
    clamps:     ClassVar[bool] = False
    convert: Callable[..., ColorBase]
    to_hex: Callable[[ColorBase], str]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = value.value if value.mode == self.mode else value.convert(self.mode).value

        values = tuple(cast(ScalarVector, value))
        if len(values) == self.num_channels - 1 and self.has_alpha:
            values = values + (ALPHA_MAX,)
        if len(values) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(values)}")

        if self.clamps:
            values = tuple(to_channel(float(v)) for v in values)
        else:
            values = tuple(float(v) for v in values)

        # safe assignment; __setattr__ still allows it during init
        self._value = self.value_type(*values)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> tuple:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return 'a' in self.value_type._fields

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{tuple(self._value)!r}"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel, expressed in percent.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    value: tuple

    __slots__ = ()

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar] = ALPHA_MAX

    @property
    def alpha(self) -> float:
        return self.value[self.alpha_index]

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= self.alpha_max

    def with_alpha(self, alpha: Optional[Scalar] = None):
        """
        Return a new instance with a modified alpha channel.

        Args:
            alpha: New alpha in percent, clamped to [0, 100]. None means opaque.
        """
        a = self.alpha_max if alpha is None else clamp(alpha, 0, self.alpha_max)
        return self.__class__(self.value[:-1] + (a,))  # type: ignore


def build_registry(*classes: type[ColorBase]) -> dict[str, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
