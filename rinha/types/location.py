from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Offsets into the source file, as produced by the parser."""

    start: int
    end: int
    filename: str

    def __str__(self) -> str:
        return f"{self.filename}:{self.start}:{self.end}"
