from dataclasses import dataclass

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class FunctionArgumentAst(Ast):
    """
    The FunctionArgumentAst node represents a single "name: Type" entry in a function header's argument list.

    Attributes:
        - name: The name of the argument.
        - type: The formatted type expression, ie "Int" or "Unit.() -> Unit".
    """

    name: str
    type: str

    def print(self, printer: AstPrinter) -> str:
        # Print the FunctionArgumentAst.
        return f"{self.name}: {self.type}"


__all__ = ["FunctionArgumentAst"]
