"""
Saving and restoring sessions as JSON. The top-level fields are `functions`,
`variables`, `rounding`, `angle_unit` and `depth_limit`; settings variants are
externally tagged, e.g. `{"Round": 8}` or `"NoRounding"`.
"""

import json
from logging import info
from pathlib import Path
from typing import Any, Dict

from numenv import errors
from numenv import syntax as syn
from numenv.env import Environment
from numenv.settings import (
    AngleUnit,
    DepthLimit,
    Limit,
    NoLimit,
    NoRounding,
    Round,
    Rounding,
)
from numenv.utils import default

FIELDS = ("functions", "variables", "rounding", "angle_unit", "depth_limit")


def expr_to_dict(expr: syn.Expr) -> Dict[str, Any]:
    match expr:
        case syn.Number(value=v):
            return {"kind": "number", "value": v}
        case syn.Identifier(name=n):
            return {"kind": "identifier", "name": n}
        case syn.UnaryOp(op=op, operand=e):
            return {"kind": "unary", "op": op, "operand": expr_to_dict(e)}
        case syn.BinaryOp(lhs=l, op=op, rhs=r):
            return {
                "kind": "binary",
                "lhs": expr_to_dict(l),
                "op": op,
                "rhs": expr_to_dict(r),
            }
        case syn.FunctionCall(name=n, args=args):
            return {"kind": "call", "name": n, "args": [expr_to_dict(a) for a in args]}
        case x:
            raise errors.SessionFormatError(f"Cannot serialize {x!r}")


def expr_from_dict(d: Any) -> syn.Expr:
    match d:
        case {"kind": "number", "value": int() | float() as v} if not isinstance(
            v, bool
        ):
            return syn.Number(v)
        case {"kind": "identifier", "name": str(n)}:
            return syn.Identifier(n)
        case {"kind": "unary", "op": str(op), "operand": e}:
            return syn.UnaryOp(op, expr_from_dict(e))
        case {"kind": "binary", "lhs": l, "op": str(op), "rhs": r}:
            return syn.BinaryOp(expr_from_dict(l), op, expr_from_dict(r))
        case {"kind": "call", "name": str(n), "args": [*args]}:
            return syn.FunctionCall(n, [expr_from_dict(a) for a in args])
        case {"kind": "number" | "identifier" | "unary" | "binary" | "call" as kind}:
            raise errors.SessionFormatError(f"Malformed expression {d!r}", at=kind)
        case {"kind": kind}:
            raise errors.SessionFormatError(f"Unknown expression kind {kind!r}")
        case _:
            raise errors.SessionFormatError(f"Expected an expression object, got {d!r}")


def rounding_to_json(r: Rounding) -> Any:
    match r:
        case Round(digits=n):
            return {"Round": n}
        case NoRounding():
            return "NoRounding"
        case x:
            raise errors.SessionFormatError(f"Cannot serialize rounding {x!r}")


def rounding_from_json(j: Any) -> Rounding:
    match j:
        case {"Round": n}:
            return Round(n)
        case "NoRounding":
            return NoRounding()
        case x:
            raise errors.SessionFormatError(f"Bad rounding {x!r}", at="rounding")


def depth_limit_to_json(d: DepthLimit) -> Any:
    match d:
        case Limit(depth=n):
            return {"Limit": n}
        case NoLimit():
            return "NoLimit"
        case x:
            raise errors.SessionFormatError(f"Cannot serialize depth limit {x!r}")


def depth_limit_from_json(j: Any) -> DepthLimit:
    match j:
        case {"Limit": n}:
            return Limit(n)
        case "NoLimit":
            return NoLimit()
        case x:
            raise errors.SessionFormatError(f"Bad depth limit {x!r}", at="depth_limit")


def angle_unit_from_json(j: Any) -> AngleUnit:
    if not isinstance(j, str) or j not in AngleUnit.__members__:
        raise errors.SessionFormatError(f"Bad angle unit {j!r}", at="angle_unit")
    return AngleUnit[j]


def _mapping(data: Dict[str, Any], field: str) -> Dict[str, Any]:
    m = default(data.get(field), fallback={})
    if not isinstance(m, dict):
        raise errors.SessionFormatError(f"Expected an object, got {m!r}", at=field)
    return m


def to_dict(env: Environment) -> Dict[str, Any]:
    return {
        "functions": {
            name: {"params": list(params), "body": expr_to_dict(body)}
            for name, (params, body) in env.functions.items()
        },
        "variables": {
            name: expr_to_dict(body) for name, body in env.variables.items()
        },
        "rounding": rounding_to_json(env.rounding),
        "angle_unit": env.angle_unit.name,
        "depth_limit": depth_limit_to_json(env.depth_limit),
    }


def from_dict(data: Any) -> Environment:
    """
    Rebuilds an environment from `to_dict` output. Settings that are absent
    take their defaults; anything malformed raises `SessionFormatError`.
    """
    if not isinstance(data, dict):
        raise errors.SessionFormatError("A session must be a JSON object")
    unknown = set(data) - set(FIELDS)
    if len(unknown) != 0:
        raise errors.SessionFormatError(f"Unknown fields {sorted(unknown)}")

    rounding = (
        rounding_from_json(data["rounding"])
        if "rounding" in data
        else Rounding.default()
    )
    angle_unit = (
        angle_unit_from_json(data["angle_unit"])
        if "angle_unit" in data
        else AngleUnit.default()
    )
    depth_limit = (
        depth_limit_from_json(data["depth_limit"])
        if "depth_limit" in data
        else DepthLimit.default()
    )
    env = Environment.new(rounding, angle_unit, depth_limit)

    for name, fn in _mapping(data, "functions").items():
        match fn:
            case {"params": [*params], "body": body} if all(
                isinstance(p, str) for p in params
            ):
                env.add_function(name, params, expr_from_dict(body))
            case x:
                raise errors.SessionFormatError(f"Bad function {x!r}", at=name)
    for name, body in _mapping(data, "variables").items():
        env.add_variable(name, expr_from_dict(body))

    return env


def dumps(env: Environment) -> str:
    return json.dumps(to_dict(env), indent=2)


def loads(s: str) -> Environment:
    try:
        data = json.loads(s)
    except json.JSONDecodeError as e:
        raise errors.SessionFormatError(f"Invalid JSON: {e}")
    return from_dict(data)


def save(env: Environment, path: str | Path):
    Path(path).write_text(dumps(env), encoding="utf-8")
    info(f"Saved session to {path}")


def load(path: str | Path) -> Environment:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise errors.SessionFormatError(f"Not UTF-8 text: {e}", at=str(path))
    env = loads(text)
    info(f"Loaded session from {path}")
    return env
