"""Lexer tests: token kinds, spans, and fatal scanning errors."""

from __future__ import annotations

import json

import pytest

from BuilderDSL.LexicalAnalysis.Lexer import Lexer
from BuilderDSL.LexicalAnalysis.LexerError import LexerError
from BuilderDSL.LexicalAnalysis.Tokens import Token, TokenType


SAMPLE = """
external fun html(func: Unit.() -> Unit)
external fun Unit.a(link: String, func: Unit.() -> Unit): Unit

fun page() {
    html {
        a("https://example.com" 2 .5) {
            +"link"
        }
        target = ATarget.blank
        -.25
    }
}
"""


def test_punctuation_tokens() -> None:
    """Every punctuation mark maps to its own kind, with a one character span."""
    tokens = Lexer("(){},:+=;-.").lex()
    assert [token.token_type for token in tokens] == [
        TokenType.TkParenL, TokenType.TkParenR, TokenType.TkBraceL, TokenType.TkBraceR, TokenType.TkComma,
        TokenType.TkColon, TokenType.TkAdd, TokenType.TkAssign, TokenType.TkSemicolon, TokenType.TkSub,
        TokenType.TkDot]
    assert [(token.start, token.end) for token in tokens] == [(i, i + 1) for i in range(11)]


def test_arrow_is_checked_before_minus() -> None:
    """The arrow is a single token covering both characters, a lone "-" is a minus."""
    tokens = Lexer("->-").lex()
    assert tokens == [Token(TokenType.TkArrowR, 0, 2), Token(TokenType.TkSub, 2, 3)]


def test_whitespace_and_comments_are_skipped() -> None:
    """Spaces, newlines and line comments produce no tokens."""
    tokens = Lexer("a // comment ( ) \"\n  b\n").lex()
    assert tokens == [Token(TokenType.LxIdentifier, 0, 1, "a"), Token(TokenType.LxIdentifier, 21, 22, "b")]


def test_numbers() -> None:
    """Numbers are floats: digits, with one optional leading dot."""
    tokens = Lexer("42 .5").lex()
    assert tokens == [Token(TokenType.LxNumber, 0, 2, 42.0), Token(TokenType.LxNumber, 3, 5, 0.5)]


def test_fraction_after_digits_is_a_second_number() -> None:
    """A number never continues past a dot: "1.5" is "1" followed by ".5"."""
    assert Lexer("1.5").lex() == [Token(TokenType.LxNumber, 0, 1, 1.0), Token(TokenType.LxNumber, 1, 3, 0.5)]
    assert Lexer("1..5").lex() == [
        Token(TokenType.LxNumber, 0, 1, 1.0),
        Token(TokenType.TkDot, 1, 2),
        Token(TokenType.LxNumber, 2, 4, 0.5)]


def test_dot_without_digit_after_number() -> None:
    """A dot that isn't followed by a digit is a separate token."""
    assert Lexer("1.a").lex() == [
        Token(TokenType.LxNumber, 0, 1, 1.0),
        Token(TokenType.TkDot, 1, 2),
        Token(TokenType.LxIdentifier, 2, 3, "a")]


def test_string_content_excludes_quotes() -> None:
    """The string token carries the text between the quotes, and spans the quotes."""
    assert Lexer("\"hi there\"").lex() == [Token(TokenType.LxDoubleQuoteStr, 0, 10, "hi there")]


def test_identifiers() -> None:
    """Identifiers start with a letter or underscore, and may contain digits."""
    tokens = Lexer("fun _x1 héllo").lex()
    assert [token.token_metadata for token in tokens] == ["fun", "_x1", "héllo"]
    assert all(token.token_type == TokenType.LxIdentifier for token in tokens)


def test_dollar_in_identifiers() -> None:
    """A "$" may start or continue an identifier."""
    assert Lexer("$x a$1").lex() == [
        Token(TokenType.LxIdentifier, 0, 2, "$x"),
        Token(TokenType.LxIdentifier, 3, 6, "a$1")]


@pytest.mark.parametrize("char", ["\t", "\r"])
def test_only_spaces_and_newlines_are_whitespace(char: str) -> None:
    """Tabs and carriage returns are not skipped, they are unknown characters."""
    with pytest.raises(LexerError) as error:
        Lexer(f"a{char}b").lex()
    assert (error.value.start, error.value.end) == (1, 2)
    assert error.value.message == f"Unknown character '{char}'"


def test_unterminated_string_is_fatal() -> None:
    """A string without a closing quote spans from the quote to the end of input."""
    with pytest.raises(LexerError) as error:
        Lexer("+\"oops }").lex()
    assert (error.value.start, error.value.end) == (1, 8)
    assert "Unterminated string" in error.value.message


def test_unknown_character_is_fatal() -> None:
    """Characters outside the grammar stop lexing at that character."""
    with pytest.raises(LexerError) as error:
        Lexer("a # b").lex()
    assert (error.value.start, error.value.end) == (2, 3)
    assert error.value.message == "Unknown character '#'"


def test_spans_tile_the_input() -> None:
    """Spans are strictly increasing, never overlap, and cover every non-whitespace character."""
    tokens = Lexer(SAMPLE).lex()
    covered = set()
    previous_end = 0
    for token in tokens:
        assert previous_end <= token.start < token.end
        covered.update(range(token.start, token.end))
        previous_end = token.end
    uncovered = [SAMPLE[i] for i in range(len(SAMPLE)) if i not in covered]
    assert all(char.isspace() for char in uncovered)


def test_relexing_a_token_reproduces_it() -> None:
    """Lexing the exact text of a token gives back the same kind and content."""
    for token in Lexer(SAMPLE).lex():
        relexed = Lexer(SAMPLE[token.start:token.end]).lex()
        assert relexed == [Token(token.token_type, 0, token.end - token.start, token.token_metadata)]


def test_token_str_is_source_spelling() -> None:
    """Printing tokens gives text that lexes to the same tokens."""
    tokens = Lexer(SAMPLE).lex()
    printed = " ".join(str(token) for token in tokens)
    assert [(t.token_type, t.token_metadata) for t in Lexer(printed).lex()] == [
        (t.token_type, t.token_metadata) for t in tokens]


def test_tokens_serialise_to_json() -> None:
    """Tokens and their kinds are JSON serialisable."""
    assert json.loads(json.dumps(Lexer("a ->").lex())) == [
        {"type": "LxIdentifier", "start": 0, "end": 1, "metadata": "a"},
        {"type": "TkArrowR", "start": 2, "end": 4, "metadata": None}]
