from numenv.env import Environment
from numenv.errors import DivisionByZero, MathError, Overflow
from numenv.settings import (
    AngleUnit,
    DepthLimit,
    Limit,
    NoLimit,
    NoRounding,
    Round,
    Rounding,
    convert_value,
)
from numenv.value import Value
