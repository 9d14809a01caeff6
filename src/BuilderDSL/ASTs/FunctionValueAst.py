from dataclasses import dataclass

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class FunctionValueAst(Ast):
    """
    The FunctionValueAst node wraps a call used in a value position, ie the "b()" in "a(b())".

    Attributes:
        - call: The nested call.
    """

    call: "FunctionCallAst"

    def print(self, printer: AstPrinter) -> str:
        return self.call.print(printer)


__all__ = ["FunctionValueAst"]
