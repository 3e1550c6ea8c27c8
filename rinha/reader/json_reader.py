"""Loader for Rinha ASTs serialized as JSON.

The external parser emits one object per node, tagged by a `kind` field:

    {"kind": "Binary", "lhs": {...}, "op": "Add", "rhs": {...},
     "location": {"start": 0, "end": 5, "filename": "sum.rinha"}}

and wraps the program in a file object `{"name", "expression", "location"}`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from rinha.errors import RinhaSyntaxError
from rinha.types import terms
from rinha.types.location import Location
from rinha.types.terms import BinaryOp, File, Term


def _field(node: dict, name: str) -> Any:
    try:
        return node[name]
    except KeyError:
        raise RinhaSyntaxError(
            f"Missing field '{name}' in {node.get('kind', 'node')}", _location_or_none(node)
        ) from None


def _location_or_none(node: dict) -> Location | None:
    try:
        return location_from_dict(node["location"])
    except (KeyError, TypeError, RinhaSyntaxError):
        return None


def location_from_dict(obj: Any) -> Location:
    if not isinstance(obj, dict):
        raise RinhaSyntaxError(f"Malformed location: {obj!r}")
    try:
        return Location(int(obj["start"]), int(obj["end"]), str(obj["filename"]))
    except (KeyError, TypeError, ValueError):
        raise RinhaSyntaxError(f"Malformed location: {obj!r}") from None


def parameter_from_dict(obj: Any) -> terms.Parameter:
    if not isinstance(obj, dict):
        raise RinhaSyntaxError(f"Malformed parameter: {obj!r}")
    return terms.Parameter(str(_field(obj, "text")), location_from_dict(_field(obj, "location")))


def _typed(node: dict, name: str, kind: type) -> Any:
    value = _field(node, name)
    # bool is an int subclass; an Int literal must not accept true/false.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise RinhaSyntaxError(
            f"Field '{name}' of {node['kind']} must be {kind.__name__}", _location_or_none(node)
        )
    return value


def _binary_op(node: dict) -> BinaryOp:
    op = _field(node, "op")
    try:
        return BinaryOp(op)
    except ValueError:
        raise RinhaSyntaxError(f"Unknown binary operator {op!r}", _location_or_none(node)) from None


def _list(node: dict, name: str) -> list:
    value = _field(node, name)
    if not isinstance(value, list):
        raise RinhaSyntaxError(f"Field '{name}' of {node['kind']} must be a list", _location_or_none(node))
    return value


_BUILDERS: dict[str, Callable[[dict, Location], Term]] = {
    "Bool": lambda n, loc: terms.Bool(_typed(n, "value", bool), loc),
    "Int": lambda n, loc: terms.Int(_typed(n, "value", int), loc),
    "Str": lambda n, loc: terms.Str(_typed(n, "value", str), loc),
    "Var": lambda n, loc: terms.Var(_typed(n, "text", str), loc),
    "Function": lambda n, loc: terms.Function(
        tuple(parameter_from_dict(p) for p in _list(n, "parameters")),
        term_from_dict(_field(n, "value")),
        loc,
    ),
    "Call": lambda n, loc: terms.Call(
        term_from_dict(_field(n, "callee")),
        tuple(term_from_dict(a) for a in _list(n, "arguments")),
        loc,
    ),
    "Let": lambda n, loc: terms.Let(
        parameter_from_dict(_field(n, "name")),
        term_from_dict(_field(n, "value")),
        term_from_dict(_field(n, "next")),
        loc,
    ),
    "If": lambda n, loc: terms.If(
        term_from_dict(_field(n, "condition")),
        term_from_dict(_field(n, "then")),
        term_from_dict(_field(n, "otherwise")),
        loc,
    ),
    "Binary": lambda n, loc: terms.Binary(
        term_from_dict(_field(n, "lhs")),
        _binary_op(n),
        term_from_dict(_field(n, "rhs")),
        loc,
    ),
    "Print": lambda n, loc: terms.Print(term_from_dict(_field(n, "value")), loc),
    "First": lambda n, loc: terms.First(term_from_dict(_field(n, "value")), loc),
    "Second": lambda n, loc: terms.Second(term_from_dict(_field(n, "value")), loc),
    "Tuple": lambda n, loc: terms.Tuple(
        term_from_dict(_field(n, "first")),
        term_from_dict(_field(n, "second")),
        loc,
    ),
}


def term_from_dict(node: Any) -> Term:
    """Convert one decoded JSON node (and its children) into a Term."""
    if not isinstance(node, dict):
        raise RinhaSyntaxError(f"Expected a term object, got {type(node).__name__}")
    kind = node.get("kind")
    builder = _BUILDERS.get(kind)
    if builder is None:
        raise RinhaSyntaxError(f"Unknown term kind {kind!r}", _location_or_none(node))
    return builder(node, location_from_dict(_field(node, "location")))


def file_from_dict(obj: Any) -> File:
    if not isinstance(obj, dict):
        raise RinhaSyntaxError("Expected a file object at the top level")
    return File(
        str(_field(obj, "name")),
        term_from_dict(_field(obj, "expression")),
        location_from_dict(_field(obj, "location")),
    )


def loads(text: str) -> File:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise RinhaSyntaxError(f"Invalid JSON: {e}") from None
    return file_from_dict(obj)


def load(path: str | Path) -> File:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise RinhaSyntaxError(f"Program is not valid UTF-8: {e.reason} at byte {e.start}") from None
    return loads(text)
