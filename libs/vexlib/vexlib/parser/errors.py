"""Parse error types for the vex parser."""

from __future__ import annotations

from vexlib.diagnostics.location import SourceSpan


class ParseError(Exception):
    """Raised when source text does not match the vex grammar.

    This is the only error the parser produces.  ``location`` points at the
    furthest offset any grammar rule reached before failing, and ``expected``
    lists what would have been accepted there.
    """

    def __init__(
        self,
        message: str,
        location: SourceSpan | None = None,
        expected: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.location = location
        self.expected = expected

    def __str__(self) -> str:
        message = super().__str__()
        if self.location is None:
            return message
        return f"{self.location}: {message}"
