"""In-memory source text with 1-based line access for diagnostic rendering."""

from __future__ import annotations

from minicalc.diagnostics.diagnostic import Diagnostic


class SourceText:
    """Source text held in memory, split on ``\\n`` like the lexer splits lines."""

    def __init__(self, text: str, name: str = "<string>") -> None:
        self.text = text
        self.name = name
        self._lines = text.split("\n")

    def __len__(self) -> int:
        return len(self._lines)

    def line(self, number: int) -> str:
        """Return the literal text of 1-based line *number* ('' when out of range)."""
        if number < 1 or number > len(self._lines):
            return ""
        return self._lines[number - 1].rstrip("\r")

    def render(self, diagnostic: Diagnostic) -> str:
        """Render *diagnostic* against the line it points at."""
        if diagnostic.location is None:
            return diagnostic.render("")
        return diagnostic.render(self.line(diagnostic.location.line))
