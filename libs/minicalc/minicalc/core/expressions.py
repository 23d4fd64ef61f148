"""Expression AST nodes and the integer expression evaluator for minicalc."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum

from minicalc.diagnostics.diagnostic import Diagnostic
from minicalc.diagnostics.location import SourceLocation

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Op(Enum):
    """Operators usable inside an expression."""

    ADD = "add"
    MULT = "mult"
    DIVIDE = "divide"
    SUBTRACT = "subtract"
    NEGATE = "negate"
    # Reserved: no parse rule produces these yet.
    LPAREN = "lparen"
    RPAREN = "rparen"
    EQUALS = "equals"

    @property
    def symbol(self) -> str:
        return _OP_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_OP_SYMBOLS: dict[Op, str] = {
    Op.ADD: "+",
    Op.MULT: "*",
    Op.DIVIDE: "/",
    Op.SUBTRACT: "-",
    Op.NEGATE: "-",
    Op.LPAREN: "(",
    Op.RPAREN: ")",
    Op.EQUALS: "=",
}


class ExprNode(ABC):
    """Base type for expression nodes. All concrete subclasses are frozen dataclasses.

    ``location`` is informational and excluded from equality, so two trees
    compare equal when their shape and values match.
    """


@dataclass(frozen=True)
class IntLiteral(ExprNode):
    """Integer literal: 42, 0, 1000000."""

    value: int
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Identifier(ExprNode):
    """Identifier reference."""

    name: str
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class BinaryOp(ExprNode):
    """Binary operation: left op right. Child order is source order."""

    op: Op
    left: ExprNode
    right: ExprNode
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class UnaryOp(ExprNode):
    """Unary operation: -operand."""

    op: Op
    operand: ExprNode
    location: SourceLocation | None = field(default=None, compare=False)


class EvalError(Exception):
    """Raised when expression evaluation fails."""

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
        diagnostic: Diagnostic | None = None,
    ) -> None:
        super().__init__(message)
        self.location = location
        self.diagnostic = diagnostic


def _checked(value: int, location: SourceLocation | None) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise EvalError(f"Integer overflow: {value} does not fit in 64 bits", location)
    return value


def _truncating_div(left: int, right: int) -> int:
    # Rounds toward zero, unlike Python's floor division.
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate_expr(expr: ExprNode, source_name: str = "<string>") -> int:
    """
    Evaluate an integer expression.

    Args:
        expr: The expression to evaluate.
        source_name: Name used in any diagnostic produced.

    Returns:
        The 64-bit integer result.

    Raises:
        EvalError: On division by zero, 64-bit overflow, or an identifier
            (there is no variable environment).
    """
    if isinstance(expr, IntLiteral):
        return expr.value
    elif isinstance(expr, UnaryOp):
        operand = evaluate_expr(expr.operand, source_name)
        if expr.op == Op.NEGATE:
            return _checked(-operand, expr.location)
        raise EvalError(f"Unknown unary operator: {expr.op.name}", expr.location)
    elif isinstance(expr, BinaryOp):
        left = evaluate_expr(expr.left, source_name)
        right = evaluate_expr(expr.right, source_name)
        if expr.op == Op.ADD:
            return _checked(left + right, expr.location)
        elif expr.op == Op.SUBTRACT:
            return _checked(left - right, expr.location)
        elif expr.op == Op.MULT:
            return _checked(left * right, expr.location)
        elif expr.op == Op.DIVIDE:
            if right == 0:
                raise EvalError(
                    "Division by zero",
                    expr.location,
                    Diagnostic.division_by_zero(source_name, expr.location),
                )
            return _checked(_truncating_div(left, right), expr.location)
        raise EvalError(f"Unknown binary operator: {expr.op.name}", expr.location)
    elif isinstance(expr, Identifier):
        raise EvalError(f"Cannot evaluate identifier {expr.name!r}: no variables", expr.location)
    raise EvalError(
        f"Cannot evaluate expression type: {type(expr).__name__}",
        getattr(expr, "location", None),
    )
