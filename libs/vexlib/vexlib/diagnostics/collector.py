"""Diagnostic collector for accumulating messages across parse calls."""

from __future__ import annotations

from vexlib.diagnostics.diagnostic import Diagnostic
from vexlib.diagnostics.location import SourceSpan


class DiagnosticCollector:
    """Accumulates diagnostics reported while parsing."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def error(
        self,
        message: str,
        location: SourceSpan | None = None,
        *,
        expected: tuple[str, ...] = (),
    ) -> None:
        """Record an error diagnostic."""
        self._diagnostics.append(Diagnostic(message, location, expected))

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been recorded."""
        return bool(self._diagnostics)

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)
