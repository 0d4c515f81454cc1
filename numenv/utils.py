from typing import Any, Dict, TypeVar

T = TypeVar("T")


def default(val: T | None, *, fallback: T) -> T:
    if val is None:
        return fallback
    else:
        return val


def dict_fmt(d: Dict[Any, Any]) -> str:
    if len(d) == 0:
        return "{}"

    ret = "{\n"
    for k, v in d.items():
        ret += f"  {k}: {v}\n"
    ret += "}"
    return ret
