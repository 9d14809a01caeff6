from typing import NoReturn

from BuilderDSL.LexicalAnalysis.LexerError import LexerError
from BuilderDSL.SyntacticAnalysis.ParserError import ParserError
from BuilderDSL.Utils.ErrorFormatter import ErrorFormatter


class ParseAbort(SystemExit):
    """
    Raised once, at the top level, when a lexer or parser error ends the parse. No tree is produced. The exit payload is
    the formatted report; the attributes hold the same information for callers that handle the abort themselves.
    """

    message: str
    line: int
    column: int
    text: str
    start: int
    end: int
    lexical: bool

    def __init__(self, report: str, message: str, line: int, column: int, text: str, start: int, end: int, lexical: bool) -> None:
        super().__init__(report)
        self.message = message
        self.line = line
        self.column = column
        self.text = text
        self.start = start
        self.end = end
        self.lexical = lexical


def format_error(err_fmt: ErrorFormatter, error: LexerError | ParserError) -> str:
    tag = "Lexical error" if isinstance(error, LexerError) else "Syntax error"
    return err_fmt.error(error.start, error.end, message=error.message, tag_message=tag)


def handle_error(err_fmt: ErrorFormatter, code: str, error: LexerError | ParserError) -> NoReturn:
    line, column = err_fmt.location(error.start)
    raise ParseAbort(
        report=format_error(err_fmt, error),
        message=error.message,
        line=line,
        column=column,
        text=code[error.start:error.end],
        start=error.start,
        end=error.end,
        lexical=isinstance(error, LexerError)) from None


__all__ = ["ParseAbort", "format_error", "handle_error"]
