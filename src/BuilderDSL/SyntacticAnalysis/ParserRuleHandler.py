from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Tuple

from BuilderDSL.LexicalAnalysis.Tokens import TokenType

if TYPE_CHECKING:
    from BuilderDSL.SyntacticAnalysis.Parser import Parser


class ParserRuleHandler[T]:
    """
    A ParserRuleHandler wraps a grammar rule without running it. The caller chooses how the rule is applied: once
    (failure propagates), optionally (failure backtracks), or repeatedly up to a closing token.
    """

    ParserRule = Callable[[], T]

    _rule: ParserRule
    _parser: Parser

    def __init__(self, parser: Parser, rule: ParserRule) -> None:
        self._parser = parser
        self._rule = rule

    def parse_once(self) -> T:
        return self._rule()

    def parse_optional(self) -> Optional[T]:
        return self._parser._cursor.try_rule(self._rule)

    def parse_until(self, terminator: TokenType) -> Tuple[T, ...]:
        # Repeat the rule until the terminator is the current token. The terminator itself isn't consumed.
        cursor = self._parser._cursor
        result = []
        while cursor.current_tok().token_type != terminator:
            result.append(self._rule())
        return tuple(result)

    def parse_delimited(self, sep: TokenType, terminator: TokenType) -> Tuple[T, ...]:
        # Separated items up to the terminator. A trailing separator is allowed, the terminator isn't consumed.
        cursor = self._parser._cursor
        result = []
        while cursor.current_tok().token_type != terminator:
            result.append(self._rule())
            if not cursor.current_is(sep):
                break
            cursor.parse_token(sep)
        return tuple(result)


__all__ = ["ParserRuleHandler"]
