from dataclasses import dataclass
from typing import Tuple

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class FunctionAst(Ast):
    """
    The FunctionAst node is a top-level function: a header, and the statements of its body. External functions always
    have an empty body.

    Attributes:
        - header: The signature of the function.
        - body: The ordered statements of the function.
    """

    header: "FunctionHeaderAst"
    body: Tuple["StatementAst", ...]

    def print(self, printer: AstPrinter) -> str:
        # Print the FunctionAst. External functions have no body to print.
        s = ""
        s += self.header.print(printer)
        s += f" {printer.inner_scope(self.body)}" if not self.header.external else ""
        return s


__all__ = ["FunctionAst"]
