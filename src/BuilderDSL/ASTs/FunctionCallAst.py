from dataclasses import dataclass
from typing import Optional, Tuple

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter
from BuilderDSL.Utils.Sequence import Seq


@dataclass(frozen=True)
class FunctionCallAst(Ast):
    """
    The FunctionCallAst node is a call, used both as a statement and, wrapped in a FunctionValueAst, as a value. A call
    can have a parameter list, a nested body, both, or neither: "div", "a(\"link\")", "div { ... }".

    Attributes:
        - receiver: The optional receiver the call is made on, ie "a" in "a.b()".
        - name: The name of the called function.
        - parameters: The ordered parameters of the call.
        - children: The statements of the nested body, run by the called function.
    """

    receiver: Optional[str]
    name: str
    parameters: Tuple["ParameterAst", ...]
    children: Tuple["StatementAst", ...]

    def print(self, printer: AstPrinter) -> str:
        # Print the FunctionCallAst. A receiver call always keeps its parentheses, otherwise "a.b" reads as an enum.
        s = ""
        s += f"{self.receiver}." if self.receiver is not None else ""
        s += self.name
        s += f"({Seq(self.parameters).print(printer, " ")})" if self.parameters or self.receiver is not None else ""
        s += f" {printer.inner_scope(self.children)}" if self.children else ""
        return s


__all__ = ["FunctionCallAst"]
