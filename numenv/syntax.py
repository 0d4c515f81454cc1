"""
The expression trees bound in an environment. The parser builds them and the
evaluator walks them; the environment only stores and copies them.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class Expr:
    def __str__(self):
        match self:
            case Number(value=v):
                return f"{v}"
            case Identifier(name=n):
                return n
            case UnaryOp(op=op, operand=e):
                return f"{op}({e})"
            case BinaryOp(lhs=l, op=op, rhs=r):
                return f"({l} {op} {r})"
            case FunctionCall(name=n, args=args):
                return f"{n}({', '.join(str(a) for a in args)})"
            case _:
                return repr(self)


@dataclass
class Number(Expr):
    value: int | float


@dataclass
class Identifier(Expr):
    name: str


@dataclass
class UnaryOp(Expr):
    op: str
    operand: Expr


@dataclass
class BinaryOp(Expr):
    lhs: Expr
    op: str
    rhs: Expr


@dataclass
class FunctionCall(Expr):
    name: str
    args: List[Expr]
