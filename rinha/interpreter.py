from __future__ import annotations

import logging
from pathlib import Path

from rinha import RinhaValue
from rinha.evaluation.evaluator import evaluate
from rinha.evaluation.runtime import Runtime
from rinha.reader.json_reader import load
from rinha.types.environment import Environment
from rinha.types.terms import File, Term


class Interpreter:
    """
    Runs Rinha programs given as ASTs.
    Every run starts from a fresh top-level Environment, so running the same
    tree twice yields the same value and the same printed lines.
    """

    def __init__(self, runtime: Runtime | None = None):
        self._logger = logging.getLogger("Interpreter")
        self.runtime: Runtime = runtime if runtime is not None else Runtime()

    def run(self, program: File | Term) -> RinhaValue:
        """Evaluate a whole file (or a bare term) and return its value."""
        if isinstance(program, File):
            self._logger.debug("running %s", program.name)
            term = program.expression
        else:
            term = program
        return evaluate(term, Environment(), self.runtime)

    def run_path(self, path: str | Path) -> RinhaValue:
        """Load a JSON AST from `path` and run it."""
        return self.run(load(path))


# Example usage:
if __name__ == "__main__":
    from rinha.reader.json_reader import loads

    program = loads("""
    {"name": "print.rinha",
     "expression": {"kind": "Print",
                    "value": {"kind": "Str", "value": "Hello world",
                              "location": {"start": 6, "end": 19, "filename": "print.rinha"}},
                    "location": {"start": 0, "end": 20, "filename": "print.rinha"}},
     "location": {"start": 0, "end": 20, "filename": "print.rinha"}}
    """)
    Interpreter().run(program)
