from ansi.color import fg, fx


class MathError(ArithmeticError):
    """
    Raised by the value type when an arithmetic step cannot produce a result.
    Angle conversion lets these propagate untouched.
    """


class DivisionByZero(MathError):
    def __init__(self, dividend):
        self.dividend = dividend
        super().__init__(
            f"Cannot divide {fg.yellow}{dividend}{fx.reset} by {fg.boldred}0{fx.reset}."
        )


class Overflow(MathError):
    def __init__(self, lhs, op: str, rhs):
        self.lhs = lhs
        self.op = op
        self.rhs = rhs
        super().__init__(
            f"The result of {fg.yellow}{lhs} {op} {rhs}{fx.reset} is not representable."
        )


class InvalidSetting(ValueError):
    def __init__(self, setting: str, value, expected: str):
        self.setting = setting
        self.value = value
        super().__init__(
            f"Invalid {setting} {fg.boldred}{value!r}{fx.reset}: expected {expected}."
        )


class SessionFormatError(ValueError):
    def __init__(self, msg: str, at: str | None = None):
        self.at = at
        if at is not None:
            msg = f"{msg} (at {fg.magenta}{at}{fx.reset})"
        super().__init__(msg)
