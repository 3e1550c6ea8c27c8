"""Runtime environment for Rinha.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Frames are shared by reference: a closure
holds the very frame it was created in, so bindings added to that frame
later (the closure's own `let` name included) are visible when it runs.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from rinha import RinhaValue
from rinha.errors import RinhaNameError
from rinha.types.location import Location


class Environment:
    """Hierarchical mapping from names to Rinha values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, RinhaValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: RinhaValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any earlier binding."""
        self.vars[name] = value

    def child(self) -> Environment:
        """Create an empty scope whose parent is this frame."""
        return Environment(outer=self)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str, location: Location | None = None) -> RinhaValue:
        """Look up the value bound to `name`, innermost scope first.

        Raises RinhaNameError, located at `location`, if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise RinhaNameError(f"Variable {name} is not declared", location)
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
