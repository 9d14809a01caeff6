"""Diagnostics tests: locations, report formatting, and the fatal ParseAbort."""

from __future__ import annotations

import pytest

from BuilderDSL.SyntacticAnalysis.Parser import parse_file
from BuilderDSL.Utils.ErrorFormatter import ErrorFormatter
from BuilderDSL.Utils.ErrorPrinter import ParseAbort


def test_missing_function_name() -> None:
    """The error span is the token found where the name should be."""
    with pytest.raises(ParseAbort) as error:
        parse_file("fun (x: Int) {}")
    assert error.value.text == "("
    assert (error.value.start, error.value.end) == (4, 5)
    assert (error.value.line, error.value.column) == (1, 5)
    assert not error.value.lexical
    assert error.value.message == "Expected token of type LxIdentifier, but found TkParenL"


def test_error_on_a_later_line() -> None:
    """A unary operator without an operand fails at the closing brace on the next line."""
    with pytest.raises(ParseAbort) as error:
        parse_file("fun a() {\n    +\n}")
    assert error.value.text == "}"
    assert (error.value.line, error.value.column) == (3, 1)
    assert error.value.message == "Expected value, found TkBraceR"


def test_unterminated_string_is_lexical() -> None:
    with pytest.raises(ParseAbort) as error:
        parse_file("fun a() { +\"oops }")
    assert error.value.lexical
    assert error.value.start == 11
    assert (error.value.line, error.value.column) == (1, 12)
    assert error.value.text == "\"oops }"


def test_unknown_character_is_lexical() -> None:
    with pytest.raises(ParseAbort) as error:
        parse_file("fun a() { # }")
    assert error.value.lexical
    assert error.value.text == "#"
    assert error.value.message == "Unknown character '#'"


def test_abort_is_a_system_exit_carrying_the_report() -> None:
    """The exit payload is the formatted report, naming the file and quoting the line."""
    with pytest.raises(SystemExit) as error:
        parse_file("fun a() {\n    +\n}", "page.dsl")
    report = error.value.code
    assert "Error in file 'page.dsl', on line 3, column 1:" in report
    assert "3 | }" in report
    assert "^" in report
    assert "Syntax error" in report
    assert "Expected value, found TkBraceR" in report


def test_lexical_report_tag() -> None:
    with pytest.raises(ParseAbort) as error:
        parse_file("a # b")
    assert "Lexical error" in error.value.code


def test_no_format_returns_message() -> None:
    assert ErrorFormatter("abc", "<input>").error(0, 1, message="bad", no_format=True) == "bad"


def test_location() -> None:
    """Lines and columns are 1-based."""
    formatter = ErrorFormatter("ab\ncd", "<input>")
    assert formatter.location(0) == (1, 1)
    assert formatter.location(4) == (2, 2)
    assert formatter.location(5) == (2, 3)


def test_carets_cover_the_span_on_its_line() -> None:
    """The underline is as long as the span, clamped to the end of the error's line."""
    formatter = ErrorFormatter("fun abc(\nx", "<input>")
    assert formatter.error(4, 7, message="m").count("^") == 3
    assert formatter.error(4, 10, message="m").count("^") == 4


def test_end_of_input_has_one_caret() -> None:
    formatter = ErrorFormatter("fun a()", "<input>")
    report = formatter.error(7, 7, message="Unexpected end of input")
    assert report.count("^") == 1
