"""Forward-only token cursor with one token of lookahead."""

from __future__ import annotations

from minicalc.diagnostics.location import SourceLocation
from minicalc.parser.lexer import LexResult
from minicalc.parser.tokens import Token, TokenKind


class TokenCursor:
    """A single-index reader over a finite token sequence.

    Once the sequence is exhausted, ``next()`` and ``peek()`` keep returning an
    EOF token stamped with the lexer's final position, so every "ran out of
    input" diagnostic points at the true end of the source.
    """

    def __init__(
        self,
        tokens: list[Token],
        eof_line: int = 1,
        eof_column: int = 1,
        filename: str = "<string>",
    ) -> None:
        self._tokens = tuple(tokens)
        self._index = 0
        self._eof = Token(
            TokenKind.EOF,
            "",
            SourceLocation(file=filename, line=eof_line, column=eof_column),
            1,
        )

    @classmethod
    def from_lex_result(cls, result: LexResult, filename: str = "<string>") -> TokenCursor:
        return cls(result.tokens, result.final_line, result.final_column, filename)

    def next(self) -> Token:
        """Return the current token and advance past it."""
        token = self.peek()
        self._index += 1
        return token

    def peek(self) -> Token:
        """Return the current token without consuming it."""
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return self._eof
