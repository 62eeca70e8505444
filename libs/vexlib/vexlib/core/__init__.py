"""vex core subpackage (Layer 1 -- depends only on diagnostics)."""

from vexlib.core.expressions import Add, Call, Expression, ExprNode, Mult, Num, Vec
from vexlib.core.types import TypeName

__all__ = [
    "TypeName",
    "ExprNode",
    "Expression",
    "Add",
    "Mult",
    "Num",
    "Vec",
    "Call",
]
