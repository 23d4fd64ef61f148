"""minicalc: tokenizer, Pratt parser and diagnostics for a tiny integer language."""

__version__ = "0.1.0"

from minicalc.core.expressions import EvalError, evaluate_expr
from minicalc.diagnostics import Diagnostic, DiagnosticKind, SourceLocation, SourceText
from minicalc.interpreter import Interpreter
from minicalc.parser import ParseError, Parser, Program, TokenCursor, parse, tokenize

__all__ = [
    "__version__",
    "Diagnostic",
    "DiagnosticKind",
    "SourceLocation",
    "SourceText",
    "EvalError",
    "evaluate_expr",
    "Interpreter",
    "ParseError",
    "Parser",
    "Program",
    "TokenCursor",
    "parse",
    "tokenize",
]
