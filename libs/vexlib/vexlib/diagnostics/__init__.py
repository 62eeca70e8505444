"""Diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from vexlib.diagnostics.collector import DiagnosticCollector
from vexlib.diagnostics.diagnostic import Diagnostic
from vexlib.diagnostics.location import SourcePosition, SourceSpan

__all__ = ["SourcePosition", "SourceSpan", "Diagnostic", "DiagnosticCollector"]
