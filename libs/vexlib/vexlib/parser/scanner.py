"""Character-level scanner underlying the vex grammar.

The grammar is scannerless: rules match characters straight from the
source.  ``Scanner`` supplies the cursor, rollback, the whitespace and
linebreak recognizers, and furthest-failure bookkeeping used to build
error messages.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Callable, TypeVar

from vexlib.diagnostics.location import SourcePosition, SourceSpan
from vexlib.parser.tokens import BLANK, LABEL_LINEBREAK, LABEL_WHITESPACE, LINEBREAK, WHITESPACE

T = TypeVar("T")


class Scanner:
    """Cursor over vex source text with ordered-choice support.

    Matching methods either consume input and return what they matched, or
    consume nothing and return ``None``.  Every failed match is recorded so
    the parser can report the furthest point any rule reached.
    """

    def __init__(self, text: str, filename: str = "<string>") -> None:
        self._text = text
        self._filename = filename
        self._pos = 0
        self._line_starts = [0] + [i + 1 for i, ch in enumerate(text) if ch == "\n"]
        self._fail_pos = 0
        self._fail_expected: set[str] = set()
        self._silence = 0

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        """Return character at current position + offset, or '' at EOF."""
        idx = self._pos + offset
        if idx < len(self._text):
            return self._text[idx]
        return ""

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def mark(self) -> int:
        """Return the current offset, for a later ``reset``."""
        return self._pos

    def reset(self, pos: int) -> None:
        self._pos = pos

    def text(self, start: int, end: int) -> str:
        return self._text[start:end]

    def attempt(self, rule: Callable[[], T | None]) -> T | None:
        """Run *rule*, rewinding to the current offset if it fails."""
        start = self._pos
        result = rule()
        if result is None:
            self._pos = start
        return result

    # ------------------------------------------------------------------
    # Failure tracking
    # ------------------------------------------------------------------

    def expect(self, label: str) -> None:
        """Record that *label* would have been accepted at the current offset."""
        if self._silence:
            return
        if self._pos > self._fail_pos:
            self._fail_pos = self._pos
            self._fail_expected = {label}
        elif self._pos == self._fail_pos:
            self._fail_expected.add(label)

    def named(self, label: str, rule: Callable[[], T | None]) -> T | None:
        """Run *rule* as a single named construct.

        Failures inside *rule* are not recorded individually; a failure of
        the whole rule is reported as *label* at its starting offset.
        """
        self._silence += 1
        try:
            result = self.attempt(rule)
        finally:
            self._silence -= 1
        if result is None:
            self.expect(label)
        return result

    def furthest_failure(self) -> tuple[int, tuple[str, ...]]:
        """Return the furthest failed offset and the sorted labels expected there."""
        return self._fail_pos, tuple(sorted(self._fail_expected))

    # ------------------------------------------------------------------
    # Matching primitives
    # ------------------------------------------------------------------

    def match_literal(self, literal: str) -> str | None:
        """Consume *literal* exactly."""
        if self._text.startswith(literal, self._pos):
            self._pos += len(literal)
            return literal
        self.expect(f'"{literal}"')
        return None

    def match_char(self, chars: frozenset[str], label: str | None = None) -> str | None:
        """Consume one character from *chars*.

        Without a *label*, each acceptable character is reported on failure.
        """
        ch = self._peek()
        if ch and ch in chars:
            return self._advance()
        if label is not None:
            self.expect(label)
        else:
            for c in chars:
                self.expect(f'"{c}"')
        return None

    def match_run(self, chars: frozenset[str]) -> str:
        """Consume the longest (possibly empty) run of characters from *chars*."""
        begin = self._pos
        while not self.at_end() and self._peek() in chars:
            self._advance()
        return self._text[begin : self._pos]

    # ------------------------------------------------------------------
    # Whitespace and linebreaks
    # ------------------------------------------------------------------

    def skip_ws(self) -> str:
        """``ws*``: skip horizontal whitespace."""
        return self.match_run(WHITESPACE)

    def match_ws1(self) -> str | None:
        """``ws+``: at least one horizontal whitespace character."""
        ws = self.skip_ws()
        if not ws:
            self.expect(LABEL_WHITESPACE)
            return None
        return ws

    def skip_blank(self) -> str:
        """Skip horizontal whitespace and linebreaks."""
        return self.match_run(BLANK)

    def match_linebreak_chunk(self) -> bool:
        """``lbc``: optional horizontal whitespace, then one linebreak character."""
        start = self._pos
        self.skip_ws()
        if self.match_char(LINEBREAK, LABEL_LINEBREAK) is None:
            self._pos = start
            return False
        return True

    def skip_linebreak_chunks(self) -> int:
        """``lbc*``: consume linebreak chunks, returning how many were consumed."""
        count = 0
        while self.match_linebreak_chunk():
            count += 1
        return count

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------

    def position(self, offset: int) -> SourcePosition:
        """Convert an offset into a line/column position."""
        index = bisect_right(self._line_starts, offset) - 1
        return SourcePosition(
            offset=offset,
            line=index + 1,
            column=offset - self._line_starts[index] + 1,
        )

    def span(self, start: int, end: int, *, trim: bool = True) -> SourceSpan:
        """Build the span of ``text[start:end]``.

        With *trim*, horizontal whitespace at either end of the range is left
        out, so a node's span covers only its own text.
        """
        if trim:
            while start < end and self._text[start] in WHITESPACE:
                start += 1
            while end > start and self._text[end - 1] in WHITESPACE:
                end -= 1
        return SourceSpan(self.position(start), self.position(end), self._filename)
