"""vex parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from vexlib.parser.ast_nodes import FunctionDeclNode, LineNode, LineValue, ParamNode, ProgramNode
from vexlib.parser.errors import ParseError
from vexlib.parser.parser import Associativity, Parser, parse, parse_expression
from vexlib.parser.scanner import Scanner

__all__ = [
    "Scanner",
    "ParamNode",
    "FunctionDeclNode",
    "LineValue",
    "LineNode",
    "ProgramNode",
    "Associativity",
    "Parser",
    "parse",
    "parse_expression",
    "ParseError",
]
