from dataclasses import dataclass

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class ParameterSingleAst(Ast):
    """
    The ParameterSingleAst node is a positional parameter of a call. The parser produces only this kind of parameter.

    Attributes:
        - value: The value passed.
    """

    value: "ValueAst"

    def print(self, printer: AstPrinter) -> str:
        return self.value.print(printer)


__all__ = ["ParameterSingleAst"]
