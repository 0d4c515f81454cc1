import math
from typing import List

from numenv import errors
from numenv.value import Value


def assert_close(actual: Value, expected: float, tol: float = 1e-9):
    assert math.isclose(actual.number, expected, rel_tol=tol, abs_tol=tol), (
        f"{actual} is not within {tol} of {expected}"
    )


class Recorder:
    """
    A value that logs every arithmetic step it performs into a shared list and
    raises `DivisionByZero` on the `fail_on`-th step (counting from 1).
    """

    def __init__(self, number: float, steps: List[str], fail_on: int | None = None):
        self.number = number
        self.steps = steps
        self.fail_on = fail_on

    def _step(self, op: str, other, result: float) -> "Recorder":
        self.steps.append(f"{op} {other}")
        if len(self.steps) == self.fail_on:
            raise errors.DivisionByZero(self.number)
        return Recorder(result, self.steps, self.fail_on)

    def div(self, other) -> "Recorder":
        return self._step("/", other, self.number / other)

    def mul(self, other) -> "Recorder":
        return self._step("*", other, self.number * other)
