from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from BuilderDSL.LexicalAnalysis.Tokens import Token, TokenType
from BuilderDSL.SyntacticAnalysis.ParserError import ParserError


class Cursor:
    """
    The Cursor is the only mutable state of a parse: an index into an immutable token sequence. It only moves forward,
    except when "try_rule" rolls it back after a failed attempt.

    Attributes:
        - tokens: The lexed tokens, never modified.
        - index: The position of the current token, 0 <= index <= len(tokens).
        - eof_pos: The source length, used as the span of errors found at the end of input.
    """

    _tokens: Tuple[Token, ...]
    _index: int
    _eof_pos: int

    def __init__(self, tokens: Sequence[Token], eof_pos: int) -> None:
        self._tokens = tuple(tokens)
        self._index = 0
        self._eof_pos = eof_pos

    @property
    def index(self) -> int:
        return self._index

    @property
    def current_pos(self) -> int:
        # Source offset of the current token, or the end of the source once all tokens are consumed.
        return self._tokens[self._index].start if not self.at_end() else self._eof_pos

    def at_end(self) -> bool:
        return self._index >= len(self._tokens)

    def current_tok(self) -> Token:
        if self.at_end():
            raise ParserError("Unexpected end of input", self._eof_pos, self._eof_pos)
        return self._tokens[self._index]

    def peek(self, offset: int = 1) -> Optional[Token]:
        index = self._index + offset
        return self._tokens[index] if index < len(self._tokens) else None

    def next_tok(self) -> Optional[Token]:
        return self.peek(1)

    def current_is(self, token_type: TokenType) -> bool:
        return not self.at_end() and self._tokens[self._index].token_type == token_type

    def next_is(self, token_type: TokenType, offset: int = 1) -> bool:
        token = self.peek(offset)
        return token is not None and token.token_type == token_type

    def advance(self) -> Token:
        token = self.current_tok()
        self._index += 1
        return token

    def parse_token(self, token_type: TokenType) -> Token:
        current = self.current_tok()
        if current.token_type != token_type:
            raise ParserError(
                f"Expected token of type {token_type.name}, but found {current.token_type.name}",
                current.start, current.end)
        return self.advance()

    def parse_identifier(self) -> str:
        return self.parse_token(TokenType.LxIdentifier).token_metadata

    def parse_keyword(self, keyword: str) -> str:
        current = self.current_tok()
        identifier = self.parse_identifier()
        if identifier != keyword:
            raise ParserError(f"Expected keyword {keyword}, but found '{identifier}'", current.start, current.end)
        return identifier

    def try_rule[T](self, rule: Callable[[], T]) -> Optional[T]:
        # Backtrack on failure: the position is restored and the error is swallowed. This is the only recovery.
        index = self._index
        try:
            return rule()
        except ParserError:
            self._index = index
            return None


__all__ = ["Cursor"]
