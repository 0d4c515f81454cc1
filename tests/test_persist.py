import json

import pytest

from numenv import errors, persist
from numenv.env import Environment
from numenv.settings import AngleUnit, Limit, NoLimit, NoRounding, Round
from numenv.syntax import BinaryOp, FunctionCall, Identifier, Number, UnaryOp


@pytest.fixture
def session():
    env = Environment.new(Round(3), AngleUnit.Degree, NoLimit())
    env.add_function(
        "hyp",
        ["a", "b"],
        FunctionCall(
            "sqrt",
            [
                BinaryOp(
                    BinaryOp(Identifier("a"), "^", Number(2)),
                    "+",
                    BinaryOp(Identifier("b"), "^", Number(2)),
                )
            ],
        ),
    )
    env.add_variable("neg", UnaryOp("-", Number(1.5)))
    return env


def test_field_names(session):
    d = persist.to_dict(session)
    assert set(d) == {"functions", "variables", "rounding", "angle_unit", "depth_limit"}
    assert d["rounding"] == {"Round": 3}
    assert d["angle_unit"] == "Degree"
    assert d["depth_limit"] == "NoLimit"
    assert d["functions"]["hyp"]["params"] == ["a", "b"]
    assert d["variables"]["neg"] == {
        "kind": "unary",
        "op": "-",
        "operand": {"kind": "number", "value": 1.5},
    }


def test_default_settings_encoding():
    d = persist.to_dict(Environment.default())
    assert d["rounding"] == {"Round": 8}
    assert d["angle_unit"] == "Radian"
    assert d["depth_limit"] == {"Limit": 49}
    assert d["functions"] == {}
    assert d["variables"] == {}


def test_save_and_load(session, tmp_path):
    path = tmp_path / "session.json"
    persist.save(session, path)
    assert json.loads(path.read_text())["angle_unit"] == "Degree"
    assert persist.load(path) == session


def test_no_rounding_survives():
    env = Environment.new(NoRounding(), AngleUnit.Turn, Limit(7))
    assert persist.loads(persist.dumps(env)) == env


def test_missing_settings_take_defaults():
    env = persist.loads('{"variables": {"x": {"kind": "number", "value": 1}}}')
    assert env.rounding == Round(8)
    assert env.angle_unit == AngleUnit.Radian
    assert env.depth_limit == Limit(49)
    assert env.get_var("x") == Number(1)


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"extra": 1}',
        '{"rounding": "Round"}',
        '{"angle_unit": "Gradian"}',
        '{"depth_limit": {"Limt": 3}}',
        '{"functions": []}',
        '{"functions": {"f": {"params": "x", "body": {"kind": "number", "value": 1}}}}',
        '{"variables": {"x": {"kind": "matrix"}}}',
        '{"variables": {"x": {"kind": "identifier"}}}',
        '{"variables": {"x": 3}}',
        '{"variables": {"x": {"kind": "call", "name": "f", "args": 5}}}',
        '{"variables": {"x": {"kind": "call", "name": "f", "args": null}}}',
        '{"variables": {"x": {"kind": "call", "name": "f", "args": {}}}}',
        '{"variables": {"x": {"kind": "call", "name": 3, "args": []}}}',
        '{"variables": {"x": {"kind": "number", "value": "abc"}}}',
        '{"variables": {"x": {"kind": "number", "value": true}}}',
        '{"variables": {"x": {"kind": "identifier", "name": 3}}}',
        '{"variables": {"x": {"kind": "unary", "op": "-", "operand": 1}}}',
        '{"variables": {"x": {"op": "-"}}}',
    ],
)
def test_malformed_sessions(text):
    with pytest.raises(errors.SessionFormatError):
        persist.loads(text)


def test_out_of_range_setting():
    with pytest.raises(errors.InvalidSetting):
        persist.loads('{"rounding": {"Round": 300}}')


def test_load_rejects_non_utf8(tmp_path):
    path = tmp_path / "session.json"
    path.write_bytes(b'{"variables": {"\xff": {"kind": "number", "value": 1}}}')
    with pytest.raises(errors.SessionFormatError):
        persist.load(path)
