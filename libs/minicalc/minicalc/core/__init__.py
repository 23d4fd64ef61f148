"""minicalc core subpackage (Layer 1, depends only on diagnostics)."""

from minicalc.core.expressions import (
    BinaryOp,
    EvalError,
    ExprNode,
    Identifier,
    IntLiteral,
    Op,
    UnaryOp,
    evaluate_expr,
)

__all__ = [
    "Op",
    "ExprNode",
    "IntLiteral",
    "Identifier",
    "BinaryOp",
    "UnaryOp",
    "EvalError",
    "evaluate_expr",
]
