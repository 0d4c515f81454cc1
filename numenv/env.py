from copy import deepcopy
from dataclasses import dataclass, field
from logging import debug
from typing import Dict, List, Tuple

from numenv import settings
from numenv.settings import AngleUnit, DepthLimit, Fallible, Rounding
from numenv.syntax import Expr
from numenv.utils import dict_fmt

Function = Tuple[List[str], Expr]


@dataclass
class Environment:
    """
    The user-defined functions and variables an evaluator resolves identifiers
    against, along with the settings it evaluates under. Redefining a name
    replaces the previous binding. Lookups hand out copies, so the caller is
    free to mutate what it gets back.
    """

    functions: Dict[str, Function] = field(default_factory=dict)
    variables: Dict[str, Expr] = field(default_factory=dict)

    rounding: Rounding = field(default_factory=Rounding.default)
    angle_unit: AngleUnit = field(default_factory=AngleUnit.default)
    depth_limit: DepthLimit = field(default_factory=DepthLimit.default)

    @staticmethod
    def new(
        rounding: Rounding, angle_unit: AngleUnit, depth_limit: DepthLimit
    ) -> "Environment":
        return Environment(
            rounding=rounding, angle_unit=angle_unit, depth_limit=depth_limit
        )

    @staticmethod
    def default() -> "Environment":
        return Environment()

    def join_with(self, other: "Environment"):
        """
        Binds every function and variable of `other` in this environment.
        On a name collision the binding from `other` wins.
        """
        for identifier, (params, body) in other.functions.items():
            self.add_function(identifier, params, body)
        for identifier, body in other.variables.items():
            self.add_variable(identifier, body)

    def add_function(self, identifier: str, params: List[str], body: Expr):
        debug("def %s(%s) = %s", identifier, ", ".join(map(str, params)), body)
        self.functions[identifier] = (list(params), deepcopy(body))

    def add_variable(self, identifier: str, body: Expr):
        debug("let %s = %s", identifier, body)
        self.variables[identifier] = deepcopy(body)

    def get_function(self, identifier: str) -> Function | None:
        if identifier not in self.functions:
            return None
        params, body = self.functions[identifier]
        return list(params), deepcopy(body)

    def get_var(self, identifier: str) -> Expr | None:
        if identifier not in self.variables:
            return None
        return deepcopy(self.variables[identifier])

    def is_function(self, identifier: str) -> bool:
        return self.get_function(identifier) is not None

    def is_var(self, identifier: str) -> bool:
        return self.get_var(identifier) is not None

    def convert_angle(self, value: Fallible, to: AngleUnit) -> Fallible:
        return settings.convert_value(self.angle_unit, to, value)

    def clone(self) -> "Environment":
        return deepcopy(self)

    def __str__(self):
        fns = {
            f"{name}({', '.join(map(str, params))})": body
            for name, (params, body) in self.functions.items()
        }
        return "\n".join(
            [
                f"rounding: {self.rounding}",
                f"angle unit: {self.angle_unit}",
                f"depth limit: {self.depth_limit}",
                f"functions: {dict_fmt(fns)}",
                f"variables: {dict_fmt(self.variables)}",
            ]
        )
