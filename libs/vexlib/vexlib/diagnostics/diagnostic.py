"""Diagnostic message representation for vex."""

from __future__ import annotations

from dataclasses import dataclass

from vexlib.diagnostics.location import SourceSpan


@dataclass(frozen=True)
class Diagnostic:
    """A single error message, optionally with the constructs expected at its location."""

    message: str
    location: SourceSpan | None = None
    expected: tuple[str, ...] = ()

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        return f"{loc}error: {self.message}"
