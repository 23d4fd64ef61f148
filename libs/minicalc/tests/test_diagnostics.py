from __future__ import annotations

import pytest

from minicalc.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    SourceLocation,
    SourceText,
)
from minicalc.parser.tokens import Token, TokenKind


def token(kind: TokenKind, lexeme: str, line: int, column: int) -> Token:
    return Token(kind, lexeme, SourceLocation("demo.calc", line, column), len(lexeme) or 1)


class TestSourceLocation:
    def test_creation(self):
        loc = SourceLocation("test.calc", 10, 5)
        assert loc.file == "test.calc"
        assert loc.line == 10
        assert loc.column == 5

    def test_str(self):
        assert str(SourceLocation("test.calc", 10, 5)) == "test.calc:10:5"


class TestDiagnosticKind:
    def test_str_representation(self):
        assert str(DiagnosticKind.UNEXPECTED_TOKEN) == "unexpected token"
        assert str(DiagnosticKind.LITERAL_OVERFLOW) == "literal overflow"
        assert str(DiagnosticKind.DIVISION_BY_ZERO) == "division by zero"


class TestDiagnostic:
    def test_unexpected_token_fields(self):
        tok = token(TokenKind.PLUS, "+", 1, 7)
        diag = Diagnostic.unexpected_token("demo.calc", tok)
        assert diag.kind == DiagnosticKind.UNEXPECTED_TOKEN
        assert diag.found == tok
        assert diag.length == 1
        assert (diag.line, diag.column) == (1, 7)
        assert diag.location == SourceLocation("demo.calc", 1, 7)

    def test_division_by_zero_without_location(self):
        diag = Diagnostic.division_by_zero("demo.calc")
        assert diag.location is None
        assert diag.found is None

    def test_division_by_zero_with_location(self):
        diag = Diagnostic.division_by_zero("demo.calc", SourceLocation("demo.calc", 2, 9))
        assert diag.location == SourceLocation("demo.calc", 2, 9)

    def test_location_is_stored_not_rebuilt(self):
        loc = SourceLocation("demo.calc", 2, 9)
        diag = Diagnostic.division_by_zero("demo.calc", loc)
        assert diag.location is loc
        assert (diag.line, diag.column) == (2, 9)
        bare = Diagnostic.division_by_zero("demo.calc")
        assert (bare.line, bare.column) == (None, None)

    def test_frozen(self):
        diag = Diagnostic.division_by_zero("demo.calc")
        with pytest.raises(Exception):  # FrozenInstanceError or AttributeError
            diag.line = 3

    def test_str_is_one_line(self):
        diag = Diagnostic.unexpected_token("demo.calc", token(TokenKind.PLUS, "+", 1, 7))
        s = str(diag)
        assert "\n" not in s
        assert s == "demo.calc:1:7: error: unexpected token '+' of length 1"

    def test_str_division_by_zero(self):
        assert str(Diagnostic.division_by_zero("demo.calc")) == "error: can't divide by zero"


class TestRender:
    def test_punctuation(self):
        diag = Diagnostic.unexpected_token("demo.calc", token(TokenKind.PLUS, "+", 1, 7))
        assert diag.render("print +;") == (
            "unexpected token '+' in 'demo.calc' at line 1, column 7\n"
            "  |\n"
            "1 | print +;\n"
            "  |       ^"
        )

    def test_caret_run_ends_at_recorded_column(self):
        diag = Diagnostic.unexpected_token("demo.calc", token(TokenKind.IDENT, "foo", 3, 3))
        assert diag.render("foo;").splitlines()[3] == "  | ^^^"

    def test_gutter_tracks_line_number_width(self):
        diag = Diagnostic.unexpected_token("demo.calc", token(TokenKind.INT_LIT, "12", 10, 11))
        assert diag.render("print 12 12").splitlines() == [
            "unexpected token '12' in 'demo.calc' at line 10, column 11",
            "   |",
            "10 | print 12 12",
            "   |          ^^",
        ]

    def test_eof_token(self):
        diag = Diagnostic.unexpected_token("demo.calc", token(TokenKind.EOF, "", 1, 10))
        lines = diag.render("print 1 +").splitlines()
        assert lines[0] == "unexpected token 'EOF' in 'demo.calc' at line 1, column 10"
        assert lines[3] == "  |          ^"

    def test_literal_overflow(self):
        tok = token(TokenKind.INT_LIT, "99999999999999999999", 1, 26)
        diag = Diagnostic.literal_overflow("demo.calc", tok)
        lines = diag.render("print 99999999999999999999;").splitlines()
        assert lines[0] == (
            "integer literal '99999999999999999999' out of range in 'demo.calc' "
            "at line 1, column 26"
        )
        assert lines[3] == "  |       " + "^" * 20

    def test_division_by_zero_has_no_source_context(self):
        diag = Diagnostic.division_by_zero("demo.calc", SourceLocation("demo.calc", 1, 9))
        assert diag.render("print 1 / 0;") == "can't divide by zero"


class TestSourceText:
    def test_line_is_one_based(self):
        src = SourceText("print 1;\nprint 2;\n", "demo.calc")
        assert src.line(1) == "print 1;"
        assert src.line(2) == "print 2;"
        assert src.line(3) == ""

    def test_out_of_range(self):
        src = SourceText("x")
        assert src.line(0) == ""
        assert src.line(5) == ""

    def test_strips_carriage_return(self):
        assert SourceText("a\r\nb").line(1) == "a"

    def test_len_counts_lines(self):
        assert len(SourceText("a\nb\nc")) == 3

    def test_render_uses_diagnostic_line(self):
        src = SourceText("print 1;\nprint +;", "demo.calc")
        diag = Diagnostic.unexpected_token("demo.calc", token(TokenKind.PLUS, "+", 2, 7))
        assert src.render(diag).splitlines()[2] == "2 | print +;"
