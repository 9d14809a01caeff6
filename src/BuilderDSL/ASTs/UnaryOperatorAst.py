from dataclasses import dataclass

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class UnaryOperatorAst(Ast):
    """
    The UnaryOperatorAst node is a "+" or "-" statement applied to a value, ie +"text" emits a text node.

    Attributes:
        - operator: Either "+" or "-".
        - value: The operand.
    """

    operator: str
    value: "ValueAst"

    def print(self, printer: AstPrinter) -> str:
        return f"{self.operator}{self.value.print(printer)}"


__all__ = ["UnaryOperatorAst"]
