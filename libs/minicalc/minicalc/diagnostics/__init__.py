"""minicalc diagnostics subpackage (Layer 0, zero internal runtime dependencies)."""

from minicalc.diagnostics.diagnostic import Diagnostic, DiagnosticKind
from minicalc.diagnostics.location import SourceLocation
from minicalc.diagnostics.source import SourceText

__all__ = ["SourceLocation", "DiagnosticKind", "Diagnostic", "SourceText"]
