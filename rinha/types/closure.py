"""Closure representation and argument binding for Rinha."""

from __future__ import annotations

from io import StringIO

from rinha import RinhaValue
from rinha.errors import RinhaArityError
from rinha.types.environment import Environment
from rinha.types.location import Location
from rinha.types.terms import Parameter, Term


class Closure:
    """A first-class function: parameters, body and the frame it was created in."""

    __slots__ = ("parameters", "body", "env")

    def __init__(self, parameters: tuple[Parameter, ...], body: Term, env: Environment):
        self.parameters: tuple[Parameter, ...] = parameters
        self.body: Term = body
        # Held by reference, never copied.
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def extend_env(self, args: list[RinhaValue], location: Location | None = None) -> Environment:
        """
        Bind the given argument values to this closure's parameters and
        return a new Environment, child of the captured one, for the body.
        """
        if len(args) != len(self.parameters):
            raise RinhaArityError(
                "Arguments declaration differs parameters declaration", location
            )
        frame = self.env.child()
        for param, arg in zip(self.parameters, args):
            frame.define(param.text, arg)
        return frame

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Closure)
            and self.env is other.env
            and self.parameters == other.parameters
            and self.body == other.body
        )

    def __hash__(self) -> int:
        return hash((self.parameters, id(self.env)))

    def __str__(self) -> str:
        return "<#closure>"

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<#closure fn (")
            buffer.write(", ".join(p.text for p in self.parameters))
            buffer.write(")>")
            return buffer.getvalue()
