"""Lexer (tokenizer) for minicalc source code."""

from __future__ import annotations

import logging
from typing import NamedTuple

from minicalc.core.expressions import INT64_MAX
from minicalc.diagnostics.diagnostic import Diagnostic
from minicalc.diagnostics.location import SourceLocation
from minicalc.parser.errors import ParseError
from minicalc.parser.tokens import KEYWORDS, Token, TokenKind

logger = logging.getLogger(__name__)


class LexResult(NamedTuple):
    """Tokens plus the position a synthetic EOF token should carry."""

    tokens: list[Token]
    final_line: int
    final_column: int


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalpha())


def _is_ident_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


class Lexer:
    """Tokenize minicalc source into a flat token stream.

    Columns use a trailing-edge convention.  The column counter starts at 1
    on the first line and at 0 after every newline, and each consumed
    character advances it by one.  Literals and identifiers are emitted after
    their lexeme has been consumed, so they record the counter past the
    lexeme; punctuation is emitted before its character is counted.  Whitespace
    and unknown characters only advance the counter.  Recorded columns are
    never below 1.
    """

    # Single-character tokens that need no lookahead.
    _SINGLE_CHAR: dict[str, TokenKind] = {
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.STAR,
        "/": TokenKind.SLASH,
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        ";": TokenKind.SEMICOLON,
    }

    def __init__(self, source: str, filename: str = "<string>") -> None:
        self._source = source
        self._filename = filename
        self._pos = 0
        self._line = 1
        self._col = 1

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character, or '' at EOF."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume and return the current character, updating line/col."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 0
        else:
            self._col += 1
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    @property
    def _final_column(self) -> int:
        return max(self._col, 1)

    def _token(self, kind: TokenKind, lexeme: str, column: int | None = None) -> Token:
        if column is None:
            column = self._col
        location = SourceLocation(file=self._filename, line=self._line, column=max(column, 1))
        return Token(kind, lexeme, location, len(lexeme))

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _scan_number(self) -> Token:
        """Scan a maximal run of digits. First digit already consumed."""
        begin = self._pos - 1
        while not self._at_end() and _is_digit(self._peek()):
            self._advance()
        token = self._token(TokenKind.INT_LIT, self._source[begin : self._pos])
        if int(token.lexeme) > INT64_MAX:
            diagnostic = Diagnostic.literal_overflow(self._filename, token)
            logger.debug("Literal overflow: %s", diagnostic)
            raise ParseError(diagnostic)
        return token

    def _scan_identifier_or_keyword(self) -> Token:
        """Scan an identifier or keyword. First char already consumed."""
        begin = self._pos - 1
        while not self._at_end() and _is_ident_char(self._peek()):
            self._advance()
        lexeme = self._source[begin : self._pos]
        return self._token(KEYWORDS.get(lexeme, TokenKind.IDENT), lexeme)

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def tokenize(self) -> LexResult:
        """Tokenize the entire source.

        Returns:
            A ``LexResult`` whose token list has no EOF token; ``final_line``
            and ``final_column`` are the line and column counters where the
            scan stopped.

        Raises:
            ParseError: If an integer literal does not fit in 64 bits.
        """
        tokens: list[Token] = []

        while not self._at_end():
            ch = self._advance()

            if _is_digit(ch):
                tokens.append(self._scan_number())
            elif _is_ident_start(ch):
                tokens.append(self._scan_identifier_or_keyword())
            elif ch in self._SINGLE_CHAR:
                tokens.append(self._token(self._SINGLE_CHAR[ch], ch, self._col - 1))
            # Newlines, whitespace and anything else produce no token.

        logger.debug(
            "Tokenized %s: %d tokens, ending at %d:%d",
            self._filename,
            len(tokens),
            self._line,
            self._final_column,
        )
        return LexResult(tokens, self._line, self._final_column)


def tokenize(source: str, filename: str = "<string>") -> LexResult:
    """Tokenize *source*; see ``Lexer.tokenize``."""
    return Lexer(source, filename).tokenize()
