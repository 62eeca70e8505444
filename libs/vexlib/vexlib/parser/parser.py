"""Recursive-descent parser for vex source code.

Handles:
- Number literals: ``1``, ``1.``, ``.5``, ``1.5``, ``-2.25``, ``+3``
- Vector literals: ``[expr, expr, ...]``
- Calls: ``name(expr, ...)``
- Arithmetic with ``+ -`` below ``* /`` and parenthesized sub-expressions
- Function declarations: ``vec3 name(vec2 a, float b) { lines }``
- One statement per line; blank lines anywhere

Each rule is an ordered choice: alternatives are tried in turn and a
failing alternative rewinds to where it began.  Rules return ``None`` on
failure; only the entry points raise ``ParseError``.
"""

from __future__ import annotations

import json
from dataclasses import replace
from enum import Enum
from typing import Callable, TypeVar

from vexlib.core.expressions import Add, Call, Expression, Mult, Num, Vec
from vexlib.core.types import TypeName
from vexlib.diagnostics.collector import DiagnosticCollector
from vexlib.parser.ast_nodes import FunctionDeclNode, LineNode, LineValue, ParamNode, ProgramNode
from vexlib.parser.errors import ParseError
from vexlib.parser.scanner import Scanner
from vexlib.parser.tokens import (
    ADD_OPS,
    DIGITS,
    IDENT_CHARS,
    LABEL_END,
    LABEL_IDENT,
    LABEL_NUMBER,
    LABEL_TYPE,
    MULT_OPS,
    SIGNS,
)

N = TypeVar("N")


class Associativity(Enum):
    """How chains like ``a - b - c`` nest.

    ``RIGHT`` gives ``a - (b - c)`` and is the default.
    ``LEFT`` gives the conventional ``(a - b) - c``.
    """

    RIGHT = "right"
    LEFT = "left"


class Parser(Scanner):
    """Recursive-descent parser for vex programs."""

    def __init__(
        self,
        source: str,
        filename: str = "<string>",
        diagnostics: DiagnosticCollector | None = None,
        associativity: Associativity = Associativity.RIGHT,
    ) -> None:
        # The caller's last line need not end with a newline.
        super().__init__(source + "\n", filename)
        self._source_length = len(source)
        self._diag = diagnostics if diagnostics is not None else DiagnosticCollector()
        self._associativity = associativity

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse_program(self) -> ProgramNode:
        """Parse a complete vex program."""
        try:
            return self._program()
        except RecursionError:
            raise self._nesting_error() from None

    def _program(self) -> ProgramNode:
        self.reset(0)
        self.skip_linebreak_chunks()

        lines: list[LineNode] = []
        while True:
            line = self._parse_line()
            if line is None:
                break
            lines.append(line)

        if not self.at_end():
            self.expect(LABEL_END)
            raise self._error()

        return ProgramNode(
            lines=tuple(lines),
            location=self.span(0, self._source_length, trim=False),
        )

    def parse_expression(self) -> Expression:
        """Parse source holding exactly one expression, surrounded by optional blank lines."""
        try:
            return self._expression()
        except RecursionError:
            raise self._nesting_error() from None

    def _expression(self) -> Expression:
        self.reset(0)
        self.skip_linebreak_chunks()
        self.skip_ws()
        expr = self._parse_additive()
        if expr is not None and self.skip_linebreak_chunks():
            if self.at_end():
                return expr
            self.expect(LABEL_END)
        raise self._error()

    def _error(self) -> ParseError:
        """Build (and record) the error for the furthest failure seen."""
        offset, expected = self.furthest_failure()
        if offset >= self._source_length:
            # The appended newline is not part of the caller's text.
            offset = self._source_length
            found = "end of input"
        else:
            found = json.dumps(self.text(offset, offset + 1), ensure_ascii=False)
        location = self.span(offset, offset, trim=False)
        message = f"Expected {_describe(expected)} but found {found}"
        self._diag.error(message, location, expected=expected)
        return ParseError(message, location, expected)

    def _nesting_error(self) -> ParseError:
        """Build (and record) the error for input nested past the interpreter's stack."""
        offset = min(self.mark(), self._source_length)
        location = self.span(offset, offset, trim=False)
        message = "Expression nesting too deep"
        self._diag.error(message, location)
        return ParseError(message, location)

    def _spanned(self, rule: Callable[[], N | None]) -> N | None:
        """Run a node-building *rule* and stamp the result with the text it consumed."""
        start = self.mark()
        node = self.attempt(rule)
        if node is None:
            return None
        return replace(node, location=self.span(start, self.mark()))

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def _parse_line(self, in_body: bool = False) -> LineNode | None:
        """``ws* value lbc+``.

        Inside a function body a line may instead end right before the
        closing brace.
        """
        start = self.mark()
        self.skip_ws()
        value_start = self.mark()
        value = self._parse_value()
        if value is None:
            self.reset(start)
            return None
        value_end = self.mark()

        if not self.skip_linebreak_chunks():
            if not (in_body and self._at_closing_brace()):
                self.reset(start)
                return None

        return LineNode(value=value, location=self.span(value_start, value_end))

    def _at_closing_brace(self) -> bool:
        """Lookahead for optional blanks then ``}``; consumes nothing."""
        start = self.mark()
        self.skip_blank()
        found = self.match_literal("}") is not None
        self.reset(start)
        return found

    def _parse_value(self) -> LineValue | None:
        """A line holds a function declaration or an expression."""
        decl = self._parse_function()
        if decl is not None:
            return decl
        return self._parse_additive()

    # ------------------------------------------------------------------
    # Function declarations
    # ------------------------------------------------------------------

    def _parse_function(self) -> FunctionDeclNode | None:
        return self._spanned(self._function)

    def _function(self) -> FunctionDeclNode | None:
        """``type ws+ name ( params ) { lines }``."""
        return_type = self._parse_type()
        if return_type is None or self.match_ws1() is None:
            return None
        name = self._parse_identifier()
        if name is None:
            return None

        self.skip_blank()
        if self.match_literal("(") is None:
            return None
        self.skip_blank()
        params = self._parse_list(self._parse_param, self.skip_blank)
        self.skip_blank()
        if self.match_literal(")") is None:
            return None

        self.skip_blank()
        body = self._parse_body()
        if body is None:
            return None

        return FunctionDeclNode(
            name=name,
            return_type=return_type,
            params=tuple(params),
            body=body,
        )

    def _parse_param(self) -> ParamNode | None:
        return self._spanned(self._param)

    def _param(self) -> ParamNode | None:
        """``type ws+ name``."""
        param_type = self._parse_type()
        if param_type is None or self.match_ws1() is None:
            return None
        name = self._parse_identifier()
        if name is None:
            return None
        return ParamNode(param_type=param_type, name=name)

    def _parse_body(self) -> tuple[LineNode, ...] | None:
        """``{ lbc* line* }``, using the same line rule as the top level."""
        start = self.mark()
        if self.match_literal("{") is None:
            return None
        self.skip_linebreak_chunks()

        lines: list[LineNode] = []
        while True:
            line = self._parse_line(in_body=True)
            if line is None:
                break
            lines.append(line)

        self.skip_blank()
        if self.match_literal("}") is None:
            self.reset(start)
            return None
        return tuple(lines)

    def _parse_type(self) -> TypeName | None:
        return self.named(LABEL_TYPE, self._type)

    def _type(self) -> TypeName | None:
        return TypeName.from_name(self.match_run(IDENT_CHARS))

    # ------------------------------------------------------------------
    # Expressions (precedence climbing)
    # ------------------------------------------------------------------

    def _parse_additive(self) -> Expression | None:
        """``multiplicative (ws* [+-] ws* multiplicative)*``."""
        return self._parse_chain(self._parse_multiplicative, ADD_OPS, Add)

    def _parse_multiplicative(self) -> Expression | None:
        """``primary (ws* [*/] ws* primary)*``."""
        return self._parse_chain(self._parse_primary, MULT_OPS, Mult)

    def _parse_chain(
        self,
        operand: Callable[[], Expression | None],
        ops: frozenset[str],
        node_type: type[Add] | type[Mult],
    ) -> Expression | None:
        """Parse a chain of operands joined by *ops* and fold it into nodes.

        Operands are tracked with the offsets they were read from so that
        a parenthesized operand contributes its parentheses to the span of
        the enclosing node.
        """
        start = self.mark()
        first = operand()
        if first is None:
            return None
        operands = [(first, start, self.mark())]
        operators: list[str] = []

        while True:
            before = self.mark()
            self.skip_ws()
            op = self.match_char(ops)
            if op is None:
                self.reset(before)
                break
            self.skip_ws()
            right_start = self.mark()
            right = operand()
            if right is None:
                # Dangling operator: leave it for the caller to reject.
                self.reset(before)
                break
            operands.append((right, right_start, self.mark()))
            operators.append(op)

        if self._associativity is Associativity.LEFT:
            node, first_start, _ = operands[0]
            for op, (right, _, right_end) in zip(operators, operands[1:]):
                node = node_type(node, right, op, location=self.span(first_start, right_end))
            return node

        node, _, last_end = operands[-1]
        for op, (left, left_start, _) in zip(reversed(operators), reversed(operands[:-1])):
            node = node_type(left, node, op, location=self.span(left_start, last_end))
        return node

    def _parse_primary(self) -> Expression | None:
        """Number, vector, call, or ``( additive )``."""
        for rule in (self._parse_number, self._parse_vec, self._parse_call):
            node = rule()
            if node is not None:
                return node
        return self._parenthesized()

    def _parenthesized(self) -> Expression | None:
        start = self.mark()
        if self.match_literal("(") is None:
            return None
        self.skip_ws()
        expr = self._parse_additive()
        self.skip_ws()
        if expr is None or self.match_literal(")") is None:
            self.reset(start)
            return None
        return expr

    # ------------------------------------------------------------------
    # Literals and calls
    # ------------------------------------------------------------------

    def _parse_number(self) -> Num | None:
        return self._spanned(self._number)

    def _number(self) -> Num | None:
        text = self.named(LABEL_NUMBER, self._number_text)
        if text is None:
            return None
        return Num(value=float(text))

    def _number_text(self) -> str | None:
        """``[+-]? ([0-9]* "." [0-9]+ / [0-9]+ "." / [0-9]+)``."""
        begin = self.mark()
        self.match_char(SIGNS)
        digits = self.match_run(DIGITS)
        if self.match_literal(".") is not None:
            digits += self.match_run(DIGITS)
        if not digits:
            return None
        return self.text(begin, self.mark())

    def _parse_vec(self) -> Vec | None:
        """``[ additive, ... ]``.

        Spanned inline rather than through ``_spanned`` to keep the stack
        shallow for deeply nested vectors.
        """
        start = self.mark()
        if self.match_literal("[") is None:
            return None
        self.skip_ws()
        elements = self._parse_list(self._parse_additive, self.skip_ws)
        self.skip_ws()
        if self.match_literal("]") is None:
            self.reset(start)
            return None
        return Vec(elements=tuple(elements), location=self.span(start, self.mark()))

    def _parse_call(self) -> Call | None:
        return self._spanned(self._call)

    def _call(self) -> Call | None:
        """``name ( additive, ... )``."""
        name = self._parse_identifier()
        if name is None:
            return None
        self.skip_ws()
        if self.match_literal("(") is None:
            return None
        self.skip_ws()
        args = self._parse_list(self._parse_additive, self.skip_ws)
        self.skip_ws()
        if self.match_literal(")") is None:
            return None
        return Call(name=name, args=tuple(args))

    def _parse_identifier(self) -> str | None:
        return self.named(LABEL_IDENT, self._identifier)

    def _identifier(self) -> str | None:
        return self.match_run(IDENT_CHARS) or None

    # ------------------------------------------------------------------
    # Comma-separated lists
    # ------------------------------------------------------------------

    def _parse_list(self, item: Callable[[], N | None], skip: Callable[[], str]) -> list[N]:
        """Zero or more *item*s separated by commas.

        *skip* consumes the whitespace allowed around each comma.  Leading
        and trailing commas are not part of the list.
        """
        items: list[N] = []
        first = item()
        if first is None:
            return items
        items.append(first)
        while True:
            before = self.mark()
            skip()
            if self.match_literal(",") is None:
                self.reset(before)
                break
            skip()
            nxt = item()
            if nxt is None:
                self.reset(before)
                break
            items.append(nxt)
        return items


def _describe(expected: tuple[str, ...]) -> str:
    """Join expectation labels: ``a``, ``a or b``, ``a, b or c``."""
    if not expected:
        return "valid input"
    if len(expected) == 1:
        return expected[0]
    return ", ".join(expected[:-1]) + " or " + expected[-1]


# ------------------------------------------------------------------
# Convenience functions
# ------------------------------------------------------------------


def parse(
    source: str,
    filename: str = "<string>",
    diagnostics: DiagnosticCollector | None = None,
    associativity: Associativity = Associativity.RIGHT,
) -> ProgramNode:
    """Parse vex source code.

    Raises:
        ParseError: If *source* does not match the grammar.  The error is
            also recorded in *diagnostics* when one is given.
    """
    return Parser(source, filename, diagnostics, associativity).parse_program()


def parse_expression(
    source: str,
    filename: str = "<string>",
    diagnostics: DiagnosticCollector | None = None,
    associativity: Associativity = Associativity.RIGHT,
) -> Expression:
    """Parse a single vex expression.

    Raises:
        ParseError: If *source* is not exactly one expression.
    """
    return Parser(source, filename, diagnostics, associativity).parse_expression()
