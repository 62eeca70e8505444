"""Expression AST nodes for vex.

All nodes are frozen dataclasses.  The ``location`` field is excluded from
equality, so two trees compare equal when they have the same shape and
values regardless of where in the source they came from.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from typing import Union

from vexlib.diagnostics.location import SourceSpan


class ExprNode(ABC):
    """Base type for expression nodes. All concrete subclasses are frozen dataclasses."""


@dataclass(frozen=True)
class Num(ExprNode):
    """Number literal: 1, -2.5, .3, 4."""

    value: float
    location: SourceSpan | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Vec(ExprNode):
    """Vector literal: ``[expr, expr, ...]``, possibly empty."""

    elements: tuple[Expression, ...] = ()
    location: SourceSpan | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Call(ExprNode):
    """Function call: ``name(expr, ...)``, possibly with no arguments."""

    name: str
    args: tuple[Expression, ...] = ()
    location: SourceSpan | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Add(ExprNode):
    """Additive operation: left op right. Op is ``+`` or ``-``."""

    left: Expression
    right: Expression
    op: str
    location: SourceSpan | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Mult(ExprNode):
    """Multiplicative operation: left op right. Op is ``*`` or ``/``."""

    left: Expression
    right: Expression
    op: str
    location: SourceSpan | None = field(default=None, compare=False)


Expression = Union[Add, Mult, Num, Vec, Call]
