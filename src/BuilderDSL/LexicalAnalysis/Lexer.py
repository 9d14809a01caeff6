import re
from typing import Dict, Final, List

from BuilderDSL.LexicalAnalysis.LexerError import LexerError
from BuilderDSL.LexicalAnalysis.Tokens import Token, TokenType


WHITESPACE: Final[str] = " \n"

# Single character tokens. "-" and "." are not here, because they depend on the next character.
SIMPLE_TOKENS: Final[Dict[str, TokenType]] = {
    token_type.value: token_type for token_type in [
        TokenType.TkParenL, TokenType.TkParenR, TokenType.TkBraceL, TokenType.TkBraceR, TokenType.TkComma,
        TokenType.TkColon, TokenType.TkAdd, TokenType.TkAssign, TokenType.TkSemicolon]}


class Lexer:
    _code: str

    _number: Final[re.Pattern] = re.compile(TokenType.LxNumber.value)
    _identifier: Final[re.Pattern] = re.compile(TokenType.LxIdentifier.value)
    _string: Final[re.Pattern] = re.compile(TokenType.LxDoubleQuoteStr.value)
    _comment: Final[re.Pattern] = re.compile(TokenType.LxSingleLineComment.value)

    def __init__(self, code: str) -> None:
        self._code = code

    def lex(self) -> List[Token]:
        current = 0
        output = []
        code = self._code

        while current < len(code):
            char = code[current]
            next_char = code[current + 1] if current + 1 < len(code) else ""

            # Whitespace and comments produce no tokens.
            if char in WHITESPACE:
                current += 1
                continue

            if char == "/" and next_char == "/":
                current = self._comment.match(code, current).end()
                continue

            # The arrow must be checked before the single "-".
            if char == "-" and next_char == ">":
                output.append(Token(TokenType.TkArrowR, current, current + 2))
                current += 2

            elif char in SIMPLE_TOKENS:
                output.append(Token(SIMPLE_TOKENS[char], current, current + 1))
                current += 1

            elif char == "-":
                output.append(Token(TokenType.TkSub, current, current + 1))
                current += 1

            elif is_digit(char) or (char == "." and is_digit(next_char)):
                matched = self._number.match(code, current)
                output.append(Token(TokenType.LxNumber, current, matched.end(), float(matched.group(0))))
                current = matched.end()

            elif char == ".":
                output.append(Token(TokenType.TkDot, current, current + 1))
                current += 1

            elif char == "\"":
                # No escape sequences: the string ends at the next quote, wherever it is.
                if not (matched := self._string.match(code, current)):
                    raise LexerError(f"Unterminated string starting at {current}", current, len(code))
                output.append(Token(TokenType.LxDoubleQuoteStr, current, matched.end(), matched.group(0)[1:-1]))
                current = matched.end()

            elif matched := self._identifier.match(code, current):
                output.append(Token(TokenType.LxIdentifier, current, matched.end(), matched.group(0)))
                current = matched.end()

            else:
                raise LexerError(f"Unknown character '{char}'", current, current + 1)

        return output


def is_digit(char: str) -> bool:
    # Only ASCII digits, str.isdigit() also accepts superscripts the number pattern can't match.
    return len(char) == 1 and "0" <= char <= "9"


__all__ = ["Lexer"]
