"""AST node types for the minicalc parser.

Expression nodes are defined in ``minicalc.core.expressions`` and re-exported
here for convenience.  This module adds statement- and program-level nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from minicalc.core.expressions import (
    BinaryOp,
    ExprNode,
    Identifier,
    IntLiteral,
    Op,
    UnaryOp,
)
from minicalc.diagnostics.location import SourceLocation

# Re-export expression nodes so consumers can import everything from
# ``minicalc.parser.ast_nodes``.
__all__ = [
    # Expression nodes (re-exported from core)
    "Op",
    "ExprNode",
    "IntLiteral",
    "Identifier",
    "BinaryOp",
    "UnaryOp",
    # Statement nodes
    "PrintStmt",
    "AssignmentStmt",
    # Statement union
    "StmtNode",
    # Program node
    "Program",
]


# ---------------------------------------------------------------------------
# Statement nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PrintStmt:
    """``print expr``."""

    expr: ExprNode
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class AssignmentStmt:
    """``identifier = value``. Representable in the AST; not yet parsed."""

    identifier: str
    value: ExprNode
    location: SourceLocation | None = field(default=None, compare=False)


StmtNode = Union[PrintStmt, AssignmentStmt]


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Program:
    """A whole program: statements in source order."""

    statements: tuple[StmtNode, ...] = ()
    location: SourceLocation | None = field(default=None, compare=False)
