"""Diagnostic representation and caret-annotated rendering for minicalc."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from minicalc.diagnostics.location import SourceLocation

if TYPE_CHECKING:
    from minicalc.parser.tokens import Token

DIVISION_BY_ZERO_MESSAGE = "can't divide by zero"


class DiagnosticKind(Enum):
    """The kinds of failure a diagnostic can describe."""

    UNEXPECTED_TOKEN = "unexpected token"
    LITERAL_OVERFLOW = "literal overflow"
    DIVISION_BY_ZERO = "division by zero"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """A single fatal diagnostic, created at the point where processing failed.

    ``found`` and ``length`` describe the offending token for the token-based
    kinds; ``DIVISION_BY_ZERO`` has neither, and its ``location`` is optional.
    """

    source_name: str
    kind: DiagnosticKind
    location: SourceLocation | None
    found: Token | None = None
    length: int = 0

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def unexpected_token(cls, source_name: str, token: Token) -> Diagnostic:
        """Build an ``UNEXPECTED_TOKEN`` diagnostic pointing at *token*."""
        return cls(
            source_name=source_name,
            kind=DiagnosticKind.UNEXPECTED_TOKEN,
            location=token.location,
            found=token,
            length=token.length,
        )

    @classmethod
    def literal_overflow(cls, source_name: str, token: Token) -> Diagnostic:
        """Build a ``LITERAL_OVERFLOW`` diagnostic for an out-of-range literal."""
        return cls(
            source_name=source_name,
            kind=DiagnosticKind.LITERAL_OVERFLOW,
            location=token.location,
            found=token,
            length=token.length,
        )

    @classmethod
    def division_by_zero(
        cls, source_name: str, location: SourceLocation | None = None
    ) -> Diagnostic:
        """Build a ``DIVISION_BY_ZERO`` diagnostic (raised by the evaluator)."""
        return cls(
            source_name=source_name,
            kind=DiagnosticKind.DIVISION_BY_ZERO,
            location=location,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def line(self) -> int | None:
        return self.location.line if self.location is not None else None

    @property
    def column(self) -> int | None:
        return self.location.column if self.location is not None else None

    @property
    def message(self) -> str:
        """The one-line summary heading a rendered diagnostic."""
        if self.kind == DiagnosticKind.UNEXPECTED_TOKEN:
            return (
                f"unexpected token '{self.found}' in '{self.source_name}' "
                f"at line {self.line}, column {self.column}"
            )
        if self.kind == DiagnosticKind.LITERAL_OVERFLOW:
            return (
                f"integer literal '{self.found}' out of range in '{self.source_name}' "
                f"at line {self.line}, column {self.column}"
            )
        return DIVISION_BY_ZERO_MESSAGE

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, source_line: str) -> str:
        """Render the diagnostic against the literal text of its source line.

        The gutter is as wide as the line number, and the caret run ends at
        the recorded column::

            unexpected token '+' in 'demo.calc' at line 1, column 7
              |
            1 | print +;
              |       ^
        """
        if self.kind == DiagnosticKind.DIVISION_BY_ZERO:
            return DIVISION_BY_ZERO_MESSAGE

        gutter = " " * len(str(self.line))
        carets = "^" * self.length
        return "\n".join(
            [
                self.message,
                f"{gutter} |",
                f"{self.line} | {source_line}",
                f"{gutter} | {carets:>{self.column}}",
            ]
        )

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        if self.kind == DiagnosticKind.UNEXPECTED_TOKEN:
            detail = f"unexpected token '{self.found}' of length {self.length}"
        elif self.kind == DiagnosticKind.LITERAL_OVERFLOW:
            detail = f"integer literal '{self.found}' does not fit in 64 bits"
        else:
            detail = DIVISION_BY_ZERO_MESSAGE
        return f"{loc}error: {detail}"
