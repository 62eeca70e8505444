"""Source position and span tracking for vex diagnostics and AST nodes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourcePosition:
    """A single point in vex source text."""

    offset: int  # 0-indexed
    line: int  # 1-indexed
    column: int  # 1-indexed

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceSpan:
    """The range of source text a node was built from.

    ``end`` is exclusive: it is the position just after the last character.
    """

    start: SourcePosition
    end: SourcePosition
    file: str = "<string>"

    @property
    def length(self) -> int:
        return self.end.offset - self.start.offset

    def __str__(self) -> str:
        return f"{self.file}:{self.start.line}:{self.start.column}"
