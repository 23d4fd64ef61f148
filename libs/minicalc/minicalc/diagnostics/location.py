"""Source location tracking for minicalc diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A location in minicalc source code.

    ``column`` follows the lexer's trailing-edge convention: for a token it is
    the 1-indexed column of the token's last character.
    """

    file: str
    line: int  # 1-indexed
    column: int  # 1-indexed

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
