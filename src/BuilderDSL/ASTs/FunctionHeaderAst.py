from dataclasses import dataclass
from typing import Optional, Tuple

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter
from BuilderDSL.Utils.Sequence import Seq


@dataclass(frozen=True)
class FunctionHeaderAst(Ast):
    """
    The FunctionHeaderAst node is the signature of a function. An external header declares a function that the
    evaluator has to supply, so its function has no body.

    Attributes:
        - external: Whether the "external" modifier was present.
        - receiver: The type a call must be made on, ie "Unit" in "fun Unit.div(...)".
        - name: The name of the function.
        - arguments: The ordered arguments of the function.
        - return_type: The optional formatted return type.
    """

    external: bool
    receiver: Optional[str]
    name: str
    arguments: Tuple["FunctionArgumentAst", ...]
    return_type: Optional[str]

    def print(self, printer: AstPrinter) -> str:
        # Print the FunctionHeaderAst.
        s = ""
        s += "external " if self.external else ""
        s += "fun "
        s += f"{self.receiver}." if self.receiver is not None else ""
        s += f"{self.name}({Seq(self.arguments).print(printer, ", ")})"
        s += f": {self.return_type}" if self.return_type is not None else ""
        return s


__all__ = ["FunctionHeaderAst"]
