"""Run minicalc programs: source -> AST -> printed values."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from minicalc.core.expressions import EvalError, evaluate_expr
from minicalc.parser.ast_nodes import AssignmentStmt, PrintStmt, Program
from minicalc.parser.parser import parse_source

logger = logging.getLogger(__name__)


class Interpreter:
    """Owns one source text, its AST, and the evaluation of its statements."""

    def __init__(
        self,
        source: str,
        filename: str = "<string>",
        output: TextIO | None = None,
    ) -> None:
        self.source = source
        self.filename = filename
        self._output = output
        self._program: Program | None = None

    @property
    def program(self) -> Program:
        """The parsed program, built on first access."""
        if self._program is None:
            self.build_ast()
        assert self._program is not None
        return self._program

    def build_ast(self) -> Program:
        """Parse the source. Raises ``ParseError`` on malformed input."""
        self._program = parse_source(self.source, self.filename)
        return self._program

    def run(self) -> list[int]:
        """Evaluate every statement in order, printing each ``print`` result.

        Returns:
            The printed values, in order.

        Raises:
            ParseError: If the source has not been parsed yet and is malformed.
            EvalError: On division by zero, overflow, identifiers, assignment or
                runaway nesting.
        """
        out = self._output if self._output is not None else sys.stdout
        results: list[int] = []
        for stmt in self.program.statements:
            if isinstance(stmt, PrintStmt):
                try:
                    value = evaluate_expr(stmt.expr, self.filename)
                except RecursionError:
                    raise EvalError(
                        "Expression nested too deeply to evaluate", stmt.location
                    ) from None
                results.append(value)
                print(value, file=out)
            elif isinstance(stmt, AssignmentStmt):
                raise EvalError(
                    f"Assignment to {stmt.identifier!r} is not supported",
                    stmt.location,
                )
            else:
                raise EvalError(f"Unknown statement type: {type(stmt).__name__}")
        logger.debug("Ran %d statement(s) from %s", len(self.program.statements), self.filename)
        return results
