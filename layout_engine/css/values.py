"""
CSS value model used by the layout engine.

Only what the block width/height equations need: keywords (``auto``, ``block``,
...) and lengths with a unit. Layout only ever consumes pixel lengths.
"""

from enum import Enum
from typing import Union


class Unit(Enum):
    """Length units understood by the declaration parser."""
    PX = 'px'
    EM = 'em'
    REM = 'rem'
    PERCENT = '%'


class Keyword:
    """An identifier value such as ``auto`` or ``block``."""

    __slots__ = ('name',)

    def __init__(self, name: str):
        self.name = name.lower()

    def to_px(self) -> float:
        return 0.0

    def __eq__(self, other) -> bool:
        return isinstance(other, Keyword) and other.name == self.name

    def __hash__(self) -> int:
        return hash(('keyword', self.name))

    def __repr__(self) -> str:
        return f"Keyword({self.name!r})"

    def __str__(self) -> str:
        return self.name


class Length:
    """A numeric length with a unit."""

    __slots__ = ('amount', 'unit')

    def __init__(self, amount: float, unit: Unit = Unit.PX):
        self.amount = float(amount)
        self.unit = unit

    def to_px(self) -> float:
        """
        Return the length in pixels.

        Units other than ``px`` need context (font size, containing block)
        that the layout equations do not have, so they count as zero.
        """
        if self.unit is Unit.PX:
            return self.amount
        return 0.0

    def __eq__(self, other) -> bool:
        return (isinstance(other, Length)
                and other.unit is self.unit
                and other.amount == self.amount)

    def __hash__(self) -> int:
        return hash(('length', self.amount, self.unit))

    def __repr__(self) -> str:
        return f"Length({self.amount!r}, {self.unit.name})"

    def __str__(self) -> str:
        return f"{self.amount:g}{self.unit.value}"


Value = Union[Keyword, Length]

AUTO = Keyword('auto')
ZERO = Length(0.0, Unit.PX)


def px(amount: float) -> Length:
    """Shorthand for a pixel length."""
    return Length(amount, Unit.PX)


def is_auto(value: Value) -> bool:
    return value == AUTO
