import json
from pathlib import Path

import pytest

from rinha.errors import RinhaSyntaxError
from rinha.reader.json_reader import load, loads, term_from_dict
from rinha.types import terms
from rinha.types.location import Location
from rinha.types.terms import BinaryOp

FIXTURES = Path(__file__).parent / "fixtures"


def node(kind, **fields):
    return {"kind": kind, **fields, "location": {"start": 1, "end": 2, "filename": "t.rinha"}}


def test_load_file_structure():
    program = load(FIXTURES / "fib.json")
    assert program.name == "fib.rinha"
    assert program.location == Location(0, 118, "fib.rinha")

    let = program.expression
    assert isinstance(let, terms.Let)
    assert let.name.text == "fib"
    assert isinstance(let.value, terms.Function)
    assert [p.text for p in let.value.parameters] == ["n"]
    assert isinstance(let.value.value, terms.If)
    assert let.value.value.condition.op is BinaryOp.Lt
    assert isinstance(let.next, terms.Print)


@pytest.mark.parametrize(
    "raw,expected_type",
    [
        (node("Bool", value=True), terms.Bool),
        (node("Int", value=3), terms.Int),
        (node("Str", value="s"), terms.Str),
        (node("Var", text="x"), terms.Var),
        (node("Print", value=node("Int", value=1)), terms.Print),
        (node("First", value=node("Var", text="p")), terms.First),
        (node("Second", value=node("Var", text="p")), terms.Second),
        (node("Tuple", first=node("Int", value=1), second=node("Int", value=2)), terms.Tuple),
        (node("Call", callee=node("Var", text="f"), arguments=[]), terms.Call),
        (node("If", condition=node("Bool", value=True), then=node("Int", value=1),
              otherwise=node("Int", value=2)), terms.If),
        (node("Binary", lhs=node("Int", value=1), op="Rem", rhs=node("Int", value=2)), terms.Binary),
    ],
)
def test_every_kind_is_recognised(raw, expected_type):
    term = term_from_dict(raw)
    assert type(term) is expected_type
    assert term.location == Location(1, 2, "t.rinha")


def test_terms_are_immutable():
    term = term_from_dict(node("Int", value=3))
    with pytest.raises(AttributeError):
        term.value = 4


@pytest.mark.parametrize(
    "raw,message",
    [
        (node("Loop"), "Unknown term kind 'Loop'"),
        (node("Int"), "Missing field 'value' in Int"),
        (node("Int", value=True), "Field 'value' of Int must be int"),
        (node("Binary", lhs=node("Int", value=1), op="Pow", rhs=node("Int", value=2)),
         "Unknown binary operator 'Pow'"),
        (node("Call", callee=node("Var", text="f"), arguments={}), "Field 'arguments' of Call must be a list"),
        ({"kind": "Int", "value": 1}, "Missing field 'location' in Int"),
        ({"kind": "Int", "value": 1, "location": {"start": 0}}, "Malformed location"),
        ([1, 2], "Expected a term object, got list"),
    ],
)
def test_malformed_nodes(raw, message):
    with pytest.raises(RinhaSyntaxError, match=message):
        term_from_dict(raw)


def test_malformed_node_error_is_located_when_possible():
    with pytest.raises(RinhaSyntaxError) as exc:
        term_from_dict(node("Mystery"))
    assert exc.value.location == Location(1, 2, "t.rinha")


def test_invalid_json():
    with pytest.raises(RinhaSyntaxError, match="Invalid JSON"):
        loads("{not json")


def test_loads_requires_file_wrapper():
    with pytest.raises(RinhaSyntaxError, match="Expected a file object"):
        loads(json.dumps([node("Int", value=1)]))


def test_load_rejects_non_utf8(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_bytes(b'{"name": "\xff"}')
    with pytest.raises(RinhaSyntaxError, match="not valid UTF-8"):
        load(bad)
