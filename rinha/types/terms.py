"""AST node types for Rinha programs.

Terms are produced by an external parser (see rinha.reader.json_reader for
the JSON loader) and are never mutated during evaluation. Closures keep a
reference to their body term, so sharing subtrees is safe.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from rinha.types.location import Location


class BinaryOp(Enum):
    Add = "Add"
    Sub = "Sub"
    Mul = "Mul"
    Div = "Div"
    Rem = "Rem"
    Eq = "Eq"
    Neq = "Neq"
    Lt = "Lt"
    Gt = "Gt"
    Lte = "Lte"
    Gte = "Gte"
    And = "And"
    Or = "Or"


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool
    location: Location


@dataclass(frozen=True, slots=True)
class Int:
    value: int
    location: Location


@dataclass(frozen=True, slots=True)
class Str:
    value: str
    location: Location


@dataclass(frozen=True, slots=True)
class Var:
    text: str
    location: Location


@dataclass(frozen=True, slots=True)
class Parameter:
    text: str
    location: Location


@dataclass(frozen=True, slots=True)
class Function:
    parameters: tuple[Parameter, ...]
    value: Term
    location: Location


@dataclass(frozen=True, slots=True)
class Call:
    callee: Term
    arguments: tuple[Term, ...]
    location: Location


@dataclass(frozen=True, slots=True)
class Let:
    name: Parameter
    value: Term
    next: Term
    location: Location


@dataclass(frozen=True, slots=True)
class If:
    condition: Term
    then: Term
    otherwise: Term
    location: Location


@dataclass(frozen=True, slots=True)
class Binary:
    lhs: Term
    op: BinaryOp
    rhs: Term
    location: Location


@dataclass(frozen=True, slots=True)
class Print:
    value: Term
    location: Location


@dataclass(frozen=True, slots=True)
class First:
    value: Term
    location: Location


@dataclass(frozen=True, slots=True)
class Second:
    value: Term
    location: Location


@dataclass(frozen=True, slots=True)
class Tuple:
    first: Term
    second: Term
    location: Location


Term = Union[
    Bool, Int, Str, Var, Function, Call, Let, If, Binary, Print, First, Second, Tuple
]


@dataclass(frozen=True, slots=True)
class File:
    """Program root: the source name and its single top-level expression."""

    name: str
    expression: Term
    location: Location
