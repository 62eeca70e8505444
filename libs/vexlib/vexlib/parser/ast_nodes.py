"""AST node types for the vex parser.

Expression nodes are defined in ``vexlib.core.expressions`` and re-exported
here for convenience.  This module adds declaration-, line- and program-level
nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from vexlib.core.expressions import Add, Call, Expression, ExprNode, Mult, Num, Vec
from vexlib.core.types import TypeName
from vexlib.diagnostics.location import SourceSpan

# Re-export expression nodes so consumers can import everything from
# ``vexlib.parser.ast_nodes``.
__all__ = [
    # Expression nodes (re-exported from core)
    "ExprNode",
    "Expression",
    "Add",
    "Mult",
    "Num",
    "Vec",
    "Call",
    "TypeName",
    # Declarations
    "ParamNode",
    "FunctionDeclNode",
    # Statements
    "LineValue",
    "LineNode",
    "ProgramNode",
]


# ---------------------------------------------------------------------------
# Function declarations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParamNode:
    """Typed parameter: ``vec2 name``."""

    param_type: TypeName
    name: str
    location: SourceSpan | None = field(default=None, compare=False)


@dataclass(frozen=True)
class FunctionDeclNode:
    """``type name(type param, ...) { lines }``.

    The body uses the same line rule as the top level, so declarations may
    nest.
    """

    name: str
    return_type: TypeName
    params: tuple[ParamNode, ...] = ()
    body: tuple[LineNode, ...] = ()
    location: SourceSpan | None = field(default=None, compare=False)


# ---------------------------------------------------------------------------
# Lines and program
# ---------------------------------------------------------------------------


LineValue = Union[Add, Mult, Num, Vec, Call, FunctionDeclNode]


@dataclass(frozen=True)
class LineNode:
    """One statement: a single expression or function declaration."""

    value: LineValue
    location: SourceSpan | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ProgramNode:
    """Top-level program: statements in source order."""

    lines: tuple[LineNode, ...] = ()
    location: SourceSpan | None = field(default=None, compare=False)
