"""
The numeric value the environment's angle conversion operates on. Every
arithmetic operation is fallible: it either returns a fresh `Value` or raises
a `MathError`.
"""

import math
from dataclasses import dataclass
from typing import Union

from numenv import errors

Number = Union[int, float]


@dataclass(frozen=True)
class Value:
    number: float

    def __post_init__(self):
        object.__setattr__(self, "number", float(self.number))

    @staticmethod
    def of(x: Union[Number, "Value"]) -> "Value":
        if isinstance(x, Value):
            return x
        return Value(x)

    def _checked(self, op: str, other: "Value", result: float) -> "Value":
        finite_inputs = math.isfinite(self.number) and math.isfinite(other.number)
        if finite_inputs and not math.isfinite(result):
            raise errors.Overflow(self, op, other)
        return Value(result)

    def add(self, other: Union[Number, "Value"]) -> "Value":
        other = Value.of(other)
        return self._checked("+", other, self.number + other.number)

    def sub(self, other: Union[Number, "Value"]) -> "Value":
        other = Value.of(other)
        return self._checked("-", other, self.number - other.number)

    def mul(self, other: Union[Number, "Value"]) -> "Value":
        other = Value.of(other)
        return self._checked("*", other, self.number * other.number)

    def div(self, other: Union[Number, "Value"]) -> "Value":
        other = Value.of(other)
        if other.number == 0:
            raise errors.DivisionByZero(self)
        return self._checked("/", other, self.number / other.number)

    # Operator overloading

    def __add__(self, other: Union[Number, "Value"]) -> "Value":
        return self.add(other)

    def __sub__(self, other: Union[Number, "Value"]) -> "Value":
        return self.sub(other)

    def __mul__(self, other: Union[Number, "Value"]) -> "Value":
        return self.mul(other)

    def __truediv__(self, other: Union[Number, "Value"]) -> "Value":
        return self.div(other)

    def __neg__(self) -> "Value":
        return Value(-self.number)

    def __float__(self) -> float:
        return self.number

    def __str__(self):
        if self.number.is_integer():
            return str(int(self.number))
        return repr(self.number)
