from dataclasses import dataclass

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class ParameterNamedAst(Ast):
    """
    The ParameterNamedAst node is a "name = value" parameter. It is part of the tree model, but the grammar has no
    syntax that produces it yet: every parsed parameter is a ParameterSingleAst.

    Attributes:
        - name: The name of the parameter.
        - value: The value passed.
    """

    name: str
    value: "ValueAst"

    def print(self, printer: AstPrinter) -> str:
        return f"{self.name} = {self.value.print(printer)}"


__all__ = ["ParameterNamedAst"]
