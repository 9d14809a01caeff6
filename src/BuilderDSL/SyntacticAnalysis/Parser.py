from __future__ import annotations

import functools
from typing import Callable, List, Tuple

from BuilderDSL.LexicalAnalysis.Lexer import Lexer
from BuilderDSL.LexicalAnalysis.LexerError import LexerError
from BuilderDSL.LexicalAnalysis.Tokens import Token, TokenType
from BuilderDSL.SyntacticAnalysis.Cursor import Cursor
from BuilderDSL.SyntacticAnalysis.ParserRuleHandler import ParserRuleHandler
from BuilderDSL.SyntacticAnalysis.ParserError import ParserError

from BuilderDSL.Utils.ErrorFormatter import ErrorFormatter
from BuilderDSL.Utils.ErrorPrinter import handle_error
from BuilderDSL.ASTs import *


# Decorator that wraps the function in a ParserRuleHandler
def parser_rule(func) -> Callable[..., ParserRuleHandler]:
    @functools.wraps(func)
    def wrapper(self, *args) -> ParserRuleHandler:
        return ParserRuleHandler(self, functools.partial(func, self, *args))
    return wrapper


class Parser:
    _code: str
    _cursor: Cursor
    _err_fmt: ErrorFormatter

    def __init__(self, tokens: List[Token], code: str, file_name: str = "<input>") -> None:
        self._code = code
        self._cursor = Cursor(tokens, len(code))
        self._err_fmt = ErrorFormatter(code, file_name)

    def current_pos(self) -> int:
        return self._cursor.current_pos

    def current_tok(self) -> Token:
        return self._cursor.current_tok()

    # ===== PARSING =====

    def parse(self) -> Tuple[FunctionAst, ...]:
        # Any error that escapes every backtracking attempt is fatal, and no partial tree is returned.
        try:
            return self.parse_file().parse_once()
        except ParserError as e:
            handle_error(self._err_fmt, self._code, e)

    # ===== FUNCTIONS =====

    @parser_rule
    def parse_file(self) -> Tuple[FunctionAst, ...]:
        functions = []
        while not self._cursor.at_end():
            functions.append(self.parse_function().parse_once())
        return tuple(functions)

    @parser_rule
    def parse_function(self) -> FunctionAst:
        """
        [Function] => [FunctionHeader] [InnerScope]?

        The body is only parsed for non-external functions. An external function is a declaration the evaluator has to
        supply, so whatever follows its header belongs to the next function.
        """

        c1 = self.current_pos()
        p1 = self.parse_function_header().parse_once()
        p2 = self.parse_inner_scope().parse_once() if not p1.external else ()
        return FunctionAst(c1, p1, p2)

    @parser_rule
    def parse_function_header(self) -> FunctionHeaderAst:
        """
        [FunctionHeader] => [Kw("external")]? [Kw("operator")]? [Kw("fun")] [Receiver]? [Identifier]
                            [Tok("(")] [FunctionArgument]* [Tok(")")] [ReturnType]?

        - [Kw("external")]    => Marks a declaration without a body.
        - [Kw("operator")]    => Accepted, and not distinguished from a normal function.
        - [Receiver]?         => The type the function is called on, ie "Unit." in "fun Unit.div(...)".
        - [FunctionArgument]* => Comma separated "name: Type" pairs.
        - [ReturnType]?       => ": Type".
        """

        c1 = self.current_pos()
        p1 = self.parse_keyword("external").parse_optional()
        self.parse_keyword("operator").parse_optional()
        self.parse_keyword("fun").parse_once()
        p2 = self.parse_receiver().parse_optional()
        p3 = self.parse_identifier().parse_once()
        self.parse_token(TokenType.TkParenL).parse_once()
        p4 = self.parse_function_argument().parse_delimited(TokenType.TkComma, TokenType.TkParenR)
        self.parse_token(TokenType.TkParenR).parse_once()
        p5 = self.parse_return_type().parse_optional()
        return FunctionHeaderAst(c1, p1 is not None, p2, p3, p4, p5)

    @parser_rule
    def parse_function_argument(self) -> FunctionArgumentAst:
        c1 = self.current_pos()
        p1 = self.parse_identifier().parse_once()
        self.parse_token(TokenType.TkColon).parse_once()
        p2 = self.parse_type().parse_once()
        return FunctionArgumentAst(c1, p1, p2)

    @parser_rule
    def parse_return_type(self) -> str:
        self.parse_token(TokenType.TkColon).parse_once()
        p1 = self.parse_type().parse_once()
        return p1

    @parser_rule
    def parse_receiver(self) -> str:
        # An identifier followed by a ".". Only ever used optionally, so a missing "." rolls the identifier back too.
        p1 = self.parse_identifier().parse_once()
        self.parse_token(TokenType.TkDot).parse_once()
        return p1

    # ===== STATEMENTS =====

    @parser_rule
    def parse_inner_scope(self) -> Tuple[StatementAst, ...]:
        self.parse_token(TokenType.TkBraceL).parse_once()
        p1 = self.parse_statement().parse_until(TokenType.TkBraceR)
        self.parse_token(TokenType.TkBraceR).parse_once()
        return p1

    @parser_rule
    def parse_statement(self) -> StatementAst:
        # One token of lookahead after an identifier separates "x = ..." from a call.
        match self.current_tok():
            case Token(token_type=TokenType.LxIdentifier) if self._cursor.next_is(TokenType.TkAssign):
                return self.parse_assignment_statement().parse_once()
            case Token(token_type=TokenType.LxIdentifier):
                return self.parse_function_call().parse_once()
            case Token(token_type=TokenType.TkAdd | TokenType.TkSub):
                return self.parse_unary_operator().parse_once()
            case token:
                raise ParserError(f"Expected unary operator, found {token.token_type.name}", token.start, token.end)

    @parser_rule
    def parse_assignment_statement(self) -> AssignmentStatementAst:
        c1 = self.current_pos()
        p1 = self.parse_identifier().parse_once()
        self.parse_token(TokenType.TkAssign).parse_once()
        p2 = self.parse_value().parse_once()
        return AssignmentStatementAst(c1, p1, p2)

    @parser_rule
    def parse_unary_operator(self) -> UnaryOperatorAst:
        c1 = self.current_pos()
        p1 = self._cursor.advance()
        p2 = self.parse_value().parse_once()
        return UnaryOperatorAst(c1, p1.token_type.value, p2)

    @parser_rule
    def parse_function_call(self) -> FunctionCallAst:
        """
        [FunctionCall] => [Receiver]? [Identifier] ([Tok("(")] [Value]* [Tok(")")])? [InnerScope]?

        Parameters are not separated by commas, and are always positional. The parameter list and the nested body are
        each only parsed when their opening token is the current token.
        """

        c1 = self.current_pos()
        p1 = self.parse_receiver().parse_optional()
        p2 = self.parse_identifier().parse_once()
        p3 = self.parse_parameters().parse_once() if self._cursor.current_is(TokenType.TkParenL) else ()
        p4 = self.parse_inner_scope().parse_once() if self._cursor.current_is(TokenType.TkBraceL) else ()
        return FunctionCallAst(c1, p1, p2, p3, p4)

    @parser_rule
    def parse_parameters(self) -> Tuple[ParameterAst, ...]:
        self.parse_token(TokenType.TkParenL).parse_once()
        p1 = self.parse_parameter().parse_until(TokenType.TkParenR)
        self.parse_token(TokenType.TkParenR).parse_once()
        return p1

    @parser_rule
    def parse_parameter(self) -> ParameterAst:
        c1 = self.current_pos()
        p1 = self.parse_value().parse_once()
        return ParameterSingleAst(c1, p1)

    # ===== VALUES =====

    @parser_rule
    def parse_value(self) -> ValueAst:
        c1 = self.current_pos()
        match self.current_tok():
            case Token(token_type=TokenType.LxDoubleQuoteStr) as token:
                self._cursor.advance()
                return StringValueAst(c1, token.token_metadata)
            case Token(token_type=TokenType.LxNumber) as token:
                self._cursor.advance()
                return NumberValueAst(c1, token.token_metadata)
            case Token(token_type=TokenType.LxIdentifier) if self._cursor.next_is(TokenType.TkDot):
                p1 = self.parse_enum_value().parse_optional()
                return p1 if p1 is not None else FunctionValueAst(c1, self.parse_function_call().parse_once())
            case Token(token_type=TokenType.LxIdentifier):
                return FunctionValueAst(c1, self.parse_function_call().parse_once())
            case token:
                raise ParserError(f"Expected value, found {token.token_type.name}", token.start, token.end)

    @parser_rule
    def parse_enum_value(self) -> EnumValueAst:
        # "Type.Member", unless the member opens a parameter list or body: then it's a call on a receiver.
        c1 = self.current_pos()
        p1 = self.parse_identifier().parse_once()
        self.parse_token(TokenType.TkDot).parse_once()
        p2 = self.parse_identifier().parse_once()
        if self._cursor.current_is(TokenType.TkParenL) or self._cursor.current_is(TokenType.TkBraceL):
            token = self.current_tok()
            raise ParserError(f"Expected enum member, found call to '{p1}.{p2}'", token.start, token.end)
        return EnumValueAst(c1, p1, p2)

    # ===== TYPES =====

    @parser_rule
    def parse_type(self) -> str:
        """
        [Type] => [FunctionType] | [Identifier] [Tok(".")] [FunctionType] | [Identifier]
        [FunctionType] => [Tok("(")] [Type]* [Tok(")")] [Tok("->")] [Type]

        Types are kept as formatted strings: "Int", "(Int, String) -> Unit", "Unit.() -> Unit".
        """

        match self.current_tok():
            case Token(token_type=TokenType.TkParenL):
                return self.parse_function_type().parse_once()
            case Token(token_type=TokenType.LxIdentifier) if self._cursor.next_is(TokenType.TkDot) and self._cursor.next_is(TokenType.TkParenL, 2):
                p1 = self.parse_receiver().parse_once()
                p2 = self.parse_function_type().parse_once()
                return f"{p1}.{p2}"
            case Token(token_type=TokenType.LxIdentifier):
                return self.parse_identifier().parse_once()
            case token:
                raise ParserError(f"Expected type, found {token.token_type.name}", token.start, token.end)

    @parser_rule
    def parse_function_type(self) -> str:
        self.parse_token(TokenType.TkParenL).parse_once()
        p1 = self.parse_type().parse_delimited(TokenType.TkComma, TokenType.TkParenR)
        self.parse_token(TokenType.TkParenR).parse_once()
        self.parse_token(TokenType.TkArrowR).parse_once()
        p2 = self.parse_type().parse_once()
        return f"({", ".join(p1)}) -> {p2}"

    # ===== TOKENS & KEYWORDS =====

    @parser_rule
    def parse_identifier(self) -> str:
        return self._cursor.parse_identifier()

    @parser_rule
    def parse_keyword(self, keyword: str) -> str:
        return self._cursor.parse_keyword(keyword)

    @parser_rule
    def parse_token(self, token_type: TokenType) -> Token:
        return self._cursor.parse_token(token_type)


def parse_file(code: str, file_name: str = "<input>") -> Tuple[FunctionAst, ...]:
    # Lex and parse in one call. Lexer errors are reported like syntax errors, and are never backtracked.
    try:
        tokens = Lexer(code).lex()
    except LexerError as e:
        handle_error(ErrorFormatter(code, file_name), code, e)
    return Parser(tokens, code, file_name).parse()


__all__ = ["Parser", "parse_file", "parser_rule"]
