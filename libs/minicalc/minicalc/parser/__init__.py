"""minicalc parser subpackage (Layer 2, depends on core and diagnostics)."""

from minicalc.parser.ast_nodes import AssignmentStmt, PrintStmt, Program, StmtNode
from minicalc.parser.cursor import TokenCursor
from minicalc.parser.errors import ParseError
from minicalc.parser.lexer import Lexer, LexResult, tokenize
from minicalc.parser.parser import Parser, ParserState, infix_binding_power, parse, parse_source
from minicalc.parser.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "KEYWORDS",
    "Lexer",
    "LexResult",
    "tokenize",
    "TokenCursor",
    "Program",
    "PrintStmt",
    "AssignmentStmt",
    "StmtNode",
    "Parser",
    "ParserState",
    "infix_binding_power",
    "parse",
    "parse_source",
    "ParseError",
]
