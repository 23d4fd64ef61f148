"""Token definitions for the minicalc lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from minicalc.diagnostics.location import SourceLocation


class TokenKind(Enum):
    """All token types recognized by the minicalc lexer."""

    # === Keywords ===
    PRINT = auto()

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    SEMICOLON = auto()  # ;

    # Literals
    INT_LIT = auto()
    IDENT = auto()

    # Special
    EOF = auto()


# Keyword string -> TokenKind mapping.
# Identifiers are checked against this table during lexing.
KEYWORDS: dict[str, TokenKind] = {
    "print": TokenKind.PRINT,
}


@dataclass(frozen=True)
class Token:
    """A single token produced by the minicalc lexer.

    ``location.column`` is the column of the token's last character and
    ``length`` the number of source characters it spans.
    """

    kind: TokenKind
    lexeme: str
    location: SourceLocation
    length: int = 1

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def value(self) -> int | str | None:
        """Payload of a literal token: the integer value or the identifier text."""
        if self.kind == TokenKind.INT_LIT:
            return int(self.lexeme)
        if self.kind == TokenKind.IDENT:
            return self.lexeme
        return None

    def __str__(self) -> str:
        if self.kind == TokenKind.EOF:
            return "EOF"
        if self.kind == TokenKind.INT_LIT:
            return str(self.value)
        return self.lexeme
