"""
Conformance: Errors - unexpected tokens
"""
import pytest


CASES = [
    ("operator_without_operand", "print +;", "error: unexpected token '+'"),
    ("trailing_operator", "print 1 +", "error: unexpected token 'EOF'"),
    ("empty_print", "print;", "error: unexpected token ';'"),
    ("unclosed_paren", "print (1;", "error: unexpected token ';'"),
    ("unclosed_paren_at_eof", "print (1 + 2", "error: unexpected token 'EOF'"),
    ("stray_close_paren", "print 1);", "error: unexpected token ')'"),
    ("empty_parens", "print ();", "error: unexpected token ')'"),
    ("adjacent_literals", "print 1 2;", "error: unexpected token '2'"),
    ("identifier_after_literal", "print 1 x;", "error: unexpected token 'x'"),
    ("open_paren_after_literal", "print 2 (3);", "error: unexpected token '('"),
    ("double_infix", "print 1 * * 2;", "error: unexpected token '*'"),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_unexpected_token(runner, description, source, expected):
    """Malformed statements and expressions fail on the first bad token."""
    result = runner.validate(source)
    assert not result.valid, f"Expected error but got valid"
    error_text = expected.removeprefix("error: ")
    assert any(error_text.lower() in d.lower() for d in result.diagnostics), \
        f"Expected '{error_text}' in diagnostics: {result.diagnostics}"


def test_single_caret_under_plus(runner):
    result = runner.validate("print +;")
    (rendered,) = result.diagnostics
    source_row, caret_row = rendered.splitlines()[2:]
    assert caret_row.count("^") == 1
    assert source_row[caret_row.index("^")] == "+"
