from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from rinha import config


@dataclass
class Runtime:
    """Per-run settings and the sink for `print` side effects.

    `stdout=None` means "whatever sys.stdout is when print runs", which keeps
    pytest's capsys and CLI redirection working.
    """

    stdout: TextIO | None = None
    fib_fast_path: bool = field(default_factory=config.fib_fast_path_enabled)
    fib_matrix_threshold: int = field(default_factory=config.get_fib_matrix_threshold)

    def __post_init__(self) -> None:
        # Fibonacci results quickly exceed the default int -> str digit limit,
        # and both `print` and string concatenation render ints.
        if hasattr(sys, "set_int_max_str_digits"):
            sys.set_int_max_str_digits(0)

    def write_line(self, text: str) -> None:
        print(text, file=self.stdout if self.stdout is not None else sys.stdout)
