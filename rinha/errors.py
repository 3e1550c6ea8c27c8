from __future__ import annotations

from rinha.types.location import Location


class RinhaError(Exception):
    """Base class for all Rinha errors, located at the failing node"""

    def __init__(self, message: str, location: Location | None = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def diagnostic(self) -> str:
        """Render as `<filename>:<start>:<end>: <message>` for tooling."""
        if self.location is None:
            return self.message
        loc = self.location
        return f"{loc.filename}:{loc.start}:{loc.end}: {self.message}"


class RinhaNameError(RinhaError):
    """Raised when a variable is used but never declared"""


class RinhaTypeError(RinhaError):
    """Raised when an operand, condition or callee has the wrong kind of value"""


class RinhaArithmeticError(RinhaError):
    """Raised when dividing by a non-positive number"""


class RinhaArityError(RinhaError):
    """Raised when the number of arguments passed to a function is incorrect"""


class RinhaSyntaxError(RinhaError):
    """Raised when the AST handed to the interpreter is malformed"""
