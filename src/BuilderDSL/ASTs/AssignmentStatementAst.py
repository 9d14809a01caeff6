from dataclasses import dataclass

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class AssignmentStatementAst(Ast):
    """
    The AssignmentStatementAst node is used to represent a variable being assigned a value, ie "target = ATarget.blank".

    Attributes:
        - name: The variable being assigned to.
        - value: The value assigned to the variable.
    """

    name: str
    value: "ValueAst"

    def print(self, printer: AstPrinter) -> str:
        # Print the AssignmentStatementAst.
        return f"{self.name} = {self.value.print(printer)}"


__all__ = ["AssignmentStatementAst"]
