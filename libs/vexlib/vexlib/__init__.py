"""vexlib: parser for the vex expression language.

Typical use::

    from vexlib import parse

    program = parse("vec3 f(vec2 a) { 1 + 2 }")
"""

from vexlib.core import Add, Call, Expression, ExprNode, Mult, Num, TypeName, Vec
from vexlib.diagnostics import Diagnostic, DiagnosticCollector, SourcePosition, SourceSpan
from vexlib.parser import (
    Associativity,
    FunctionDeclNode,
    LineNode,
    ParamNode,
    ParseError,
    Parser,
    ProgramNode,
    parse,
    parse_expression,
)

__version__ = "0.1.0"

__all__ = [
    "Add",
    "Call",
    "Expression",
    "ExprNode",
    "Mult",
    "Num",
    "TypeName",
    "Vec",
    "Diagnostic",
    "DiagnosticCollector",
    "SourcePosition",
    "SourceSpan",
    "Associativity",
    "FunctionDeclNode",
    "LineNode",
    "ParamNode",
    "ParseError",
    "Parser",
    "ProgramNode",
    "parse",
    "parse_expression",
]
