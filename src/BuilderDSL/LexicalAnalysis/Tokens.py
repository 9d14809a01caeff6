from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

import json_fix


class TokenType(Enum):
    # Brackets (PAREN, BRACE)
    TkParenL = "("
    TkParenR = ")"
    TkBraceL = "{"
    TkBraceR = "}"

    # Arithmetic operations (ADD, SUB)
    TkAdd = "+"
    TkSub = "-"

    # Other symbols
    TkDot = "."
    TkComma = ","
    TkColon = ":"
    TkAssign = "="
    TkSemicolon = ";"
    TkArrowR = "->"

    # Lexemes
    # Numbers take one optional leading dot, then digits: "1.5" is two numbers, "1" and ".5".
    LxIdentifier = r"(?:[^\W\d]|\$)[\w$]*"
    LxNumber = r"\.?[0-9]+"
    LxDoubleQuoteStr = r"\"[^\"]*\""
    LxSingleLineComment = r"//[^\n]*"

    def __json__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    """
    A Token is a single lexed unit of the source. The "token_metadata" depends on the token type: the text of an
    identifier, the content of a string without its quotes, or the float value of a number. Punctuation tokens carry
    no metadata. The span [start, end) is the range of source characters the token was scanned from.
    """

    token_type: TokenType
    start: int
    end: int
    token_metadata: Optional[str | float] = None

    def __str__(self):
        match self.token_type:
            case TokenType.LxIdentifier: return self.token_metadata
            case TokenType.LxDoubleQuoteStr: return f"\"{self.token_metadata}\""
            case TokenType.LxNumber: return format_number(self.token_metadata)
            case _: return self.token_type.value

    def __json__(self) -> dict:
        return {"type": self.token_type, "start": self.start, "end": self.end, "metadata": self.token_metadata}


def format_number(value: float) -> str:
    # Printed as the lexer reads numbers back: digits, or a leading dot for fractions below one.
    text = format(Decimal(repr(value)), "f")
    text = text[:-2] if text.endswith(".0") else text
    return text[1:] if text.startswith("0.") else text


__all__ = ["TokenType", "Token", "format_number"]
