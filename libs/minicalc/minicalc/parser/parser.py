"""Precedence-climbing parser for minicalc source code.

Handles:
- ``print expr``   statements, optionally terminated by ``;``
- Expressions over integer literals and identifiers with ``+ - * /``,
  prefix ``-`` and parentheses, using (left, right) binding powers

Parsing stops at the first error: the parser raises ``ParseError`` carrying a
``Diagnostic`` for the offending token.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import NoReturn

from minicalc.core.expressions import (
    BinaryOp,
    ExprNode,
    Identifier,
    IntLiteral,
    Op,
    UnaryOp,
)
from minicalc.diagnostics.diagnostic import Diagnostic
from minicalc.parser.ast_nodes import PrintStmt, Program, StmtNode
from minicalc.parser.cursor import TokenCursor
from minicalc.parser.errors import ParseError
from minicalc.parser.lexer import Lexer
from minicalc.parser.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# Infix operator token kinds and the operator each one denotes.
_INFIX_OPS: dict[TokenKind, Op] = {
    TokenKind.PLUS: Op.ADD,
    TokenKind.MINUS: Op.SUBTRACT,
    TokenKind.STAR: Op.MULT,
    TokenKind.SLASH: Op.DIVIDE,
}

# Lookahead that ends the current expression.
_EXPR_TERMINATORS: set[TokenKind] = {
    TokenKind.SEMICOLON,
    TokenKind.RPAREN,
    TokenKind.EOF,
}


def infix_binding_power(op: Op) -> tuple[float, float]:
    """Return the ``(left, right)`` binding power pair of an infix operator.

    A right power just above the left power makes the operator
    left-associative.
    """
    if op in (Op.ADD, Op.SUBTRACT):
        return (1.0, 1.1)
    if op in (Op.MULT, Op.DIVIDE):
        return (2.0, 2.1)
    raise ValueError(f"Invalid infix operator: {op.name}")


class ParserState(Enum):
    """States of the statement loop."""

    AWAIT_STATEMENT = auto()
    DONE = auto()
    ERROR = auto()


class Parser:
    """Statement loop plus precedence-climbing expression parser."""

    def __init__(self, tokens: TokenCursor, filename: str = "<string>") -> None:
        self._tokens = tokens
        self._filename = filename
        self.state = ParserState.AWAIT_STATEMENT

    # ------------------------------------------------------------------
    # Error helpers
    # ------------------------------------------------------------------

    def _unexpected(self, tok: Token) -> NoReturn:
        """Fail the parse at *tok*."""
        self.state = ParserState.ERROR
        diagnostic = Diagnostic.unexpected_token(self._filename, tok)
        logger.debug("Parse failed: %s", diagnostic)
        raise ParseError(diagnostic)

    def _expect(self, kind: TokenKind) -> Token:
        """Consume a token of *kind* or fail at whatever was found."""
        tok = self._tokens.next()
        if tok.kind != kind:
            self._unexpected(tok)
        return tok

    # ------------------------------------------------------------------
    # Statement loop
    # ------------------------------------------------------------------

    def parse_program(self) -> Program:
        """Parse statements until EOF.

        Raises:
            ParseError: On the first token that cannot start a statement or
                continue an expression.
        """
        loc = self._tokens.peek().location
        stmts: list[StmtNode] = []

        while self.state == ParserState.AWAIT_STATEMENT:
            tok = self._tokens.next()
            if tok.kind == TokenKind.PRINT:
                expr = self.parse_expression(0.0)
                stmts.append(PrintStmt(expr=expr, location=tok.location))
            elif tok.kind == TokenKind.SEMICOLON:
                continue
            elif tok.kind == TokenKind.EOF:
                self.state = ParserState.DONE
            else:
                # A bare identifier lands here too: assignment is not parsed.
                self._unexpected(tok)

        logger.debug("Parsed %d statement(s) from %s", len(stmts), self._filename)
        return Program(statements=tuple(stmts), location=loc)

    # ------------------------------------------------------------------
    # Expression parsing (precedence climbing)
    # ------------------------------------------------------------------

    def parse_expression(self, min_bp: float = 0.0) -> ExprNode:
        """Parse an expression whose operators bind at least as tightly as *min_bp*."""
        left = self._parse_prefix(self._tokens.next())

        while True:
            tok = self._tokens.peek()
            if tok.kind in _EXPR_TERMINATORS:
                break
            op = _INFIX_OPS.get(tok.kind)
            if op is None:
                self._unexpected(tok)

            left_bp, right_bp = infix_binding_power(op)
            if left_bp < min_bp:
                # The operator belongs to an enclosing call.
                break

            self._tokens.next()
            right = self.parse_expression(right_bp)
            left = BinaryOp(op=op, left=left, right=right, location=tok.location)

        return left

    def _parse_prefix(self, tok: Token) -> ExprNode:
        """Null denotation: what *tok* means at the start of an expression."""
        # Prefix minus takes a single atom, not a full sub-expression.
        negations: list[Token] = []
        while tok.kind == TokenKind.MINUS:
            negations.append(tok)
            tok = self._tokens.next()

        expr = self._parse_atom(tok)
        for minus in reversed(negations):
            expr = UnaryOp(op=Op.NEGATE, operand=expr, location=minus.location)
        return expr

    def _parse_atom(self, tok: Token) -> ExprNode:
        if tok.kind == TokenKind.INT_LIT:
            return IntLiteral(value=tok.value, location=tok.location)

        if tok.kind == TokenKind.IDENT:
            return Identifier(name=tok.value, location=tok.location)

        if tok.kind == TokenKind.LPAREN:
            expr = self.parse_expression(0.0)
            self._expect(TokenKind.RPAREN)
            return expr

        self._unexpected(tok)


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse_source(source: str, filename: str = "<string>") -> Program:
    """Tokenize and parse *source*, raising ``ParseError`` on failure.

    Parentheses nested deeper than the interpreter stack allows fail at the
    token where parsing had to stop.
    """
    result = Lexer(source, filename).tokenize()
    cursor = TokenCursor.from_lex_result(result, filename)
    parser = Parser(cursor, filename)
    try:
        return parser.parse_program()
    except RecursionError:
        parser.state = ParserState.ERROR
        diagnostic = Diagnostic.unexpected_token(filename, cursor.peek())
        logger.debug("Nesting too deep: %s", diagnostic)
        raise ParseError(diagnostic) from None


def parse(source: str, filename: str = "<string>") -> tuple[Program | None, Diagnostic | None]:
    """Parse minicalc source code.

    Returns:
        A ``(program, diagnostic)`` tuple; exactly one of the two is ``None``.
    """
    try:
        return parse_source(source, filename), None
    except ParseError as exc:
        return None, exc.diagnostic
