from typing import Final, Iterable

from BuilderDSL.Utils.Sequence import Seq


class AstPrinter:
    _indent: int

    TAB_SIZE: Final[int] = 4

    def __init__(self):
        self._indent = 0

    def format_line(self, line: str) -> str:
        # Prefix a line with the current indentation.
        return " " * self._indent + line

    def increment_indent(self):
        # Increase the indent by the tab size.
        self._indent += AstPrinter.TAB_SIZE

    def decrement_indent(self):
        # Decrease the indent by the tab size.
        self._indent -= AstPrinter.TAB_SIZE

    def inner_scope(self, asts: Iterable["Ast"]) -> str:
        # Print a brace-delimited body: one statement per line, one level deeper than the line holding the "{".
        self.increment_indent()
        lines = Seq(asts).map(lambda ast: self.format_line(ast.print(self)))
        self.decrement_indent()
        return Seq(["{", *lines, self.format_line("}")]).join("\n")


__all__ = ["AstPrinter"]
