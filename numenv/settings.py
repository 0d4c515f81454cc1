"""
Evaluation-wide settings held by an environment: how many decimal places to
show, which unit angles are measured in, and how deep the evaluator may
recurse. Enforcing them is left to the evaluator and formatter.
"""

import math
from dataclasses import dataclass
from enum import Enum
from logging import debug
from typing import Protocol, Self

from numenv import errors


class Fallible(Protocol):
    """Anything with fallible division and multiplication, e.g. `Value`."""

    def div(self, other) -> Self:
        ...

    def mul(self, other) -> Self:
        ...


def _check_uint(setting: str, n, bound: int | None = None) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise errors.InvalidSetting(setting, n, "a non-negative integer")
    if bound is not None and n > bound:
        raise errors.InvalidSetting(setting, n, f"an integer between 0 and {bound}")


class Rounding:
    """
    The number of decimal places shown, e.g.

        Environment.new(Round(4), AngleUnit.default(), DepthLimit.default())
    """

    @staticmethod
    def default() -> "Rounding":
        return Round(8)


@dataclass(frozen=True)
class Round(Rounding):
    digits: int

    def __post_init__(self):
        _check_uint("rounding", self.digits, bound=255)

    def __str__(self):
        return f"round to {self.digits} digits"


@dataclass(frozen=True)
class NoRounding(Rounding):
    def __str__(self):
        return "no rounding"


class DepthLimit:
    """The recursion depth the evaluator allows before giving up."""

    @staticmethod
    def default() -> "DepthLimit":
        return Limit(49)


@dataclass(frozen=True)
class Limit(DepthLimit):
    depth: int

    def __post_init__(self):
        _check_uint("depth limit", self.depth)

    def __str__(self):
        return f"limit {self.depth}"


@dataclass(frozen=True)
class NoLimit(DepthLimit):
    """
    WARNING: without a limit recursion is unchecked, and a runaway definition
    will exhaust the interpreter's stack.
    """

    def __str__(self):
        return "no limit"


class AngleUnit(Enum):
    # A full turn is 2π.
    Radian = "radian"
    # A full turn is 360°.
    Degree = "degree"
    # A full turn is 1.
    Turn = "turn"

    @staticmethod
    def default() -> "AngleUnit":
        return AngleUnit.Radian

    def convert_value(self, to: "AngleUnit", value: Fallible) -> Fallible:
        return convert_value(self, to, value)

    def __str__(self):
        return self.value


def convert_value(from_: AngleUnit, to: AngleUnit, value: Fallible) -> Fallible:
    """
    Converts `value`, measured in `from_`, to the unit `to` by going through
    radians. Any `MathError` raised by an arithmetic step propagates as is and
    no further steps are taken. Radian to radian returns `value` itself.
    """
    match from_:
        case AngleUnit.Radian:
            as_radians = value
        case AngleUnit.Degree:
            as_radians = value.div(180).mul(math.pi)
        case AngleUnit.Turn:
            as_radians = value.div(0.5).mul(math.pi)
        case x:
            raise errors.InvalidSetting("angle unit", x, "an AngleUnit")

    match to:
        case AngleUnit.Radian:
            result = as_radians
        case AngleUnit.Degree:
            result = as_radians.div(math.pi).mul(180)
        case AngleUnit.Turn:
            result = as_radians.div(math.pi).mul(0.5)
        case x:
            raise errors.InvalidSetting("angle unit", x, "an AngleUnit")

    debug("convert %s %s -> %s %s", value, from_, result, to)
    return result
