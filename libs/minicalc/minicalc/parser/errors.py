"""Parse error types for the minicalc parser."""

from __future__ import annotations

from minicalc.diagnostics.diagnostic import Diagnostic


class ParseError(Exception):
    """Raised by the lexer or parser on the first unrecoverable error."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic
        self.location = diagnostic.location
