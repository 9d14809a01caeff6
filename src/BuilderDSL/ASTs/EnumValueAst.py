from dataclasses import dataclass

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class EnumValueAst(Ast):
    """
    The EnumValueAst node is a "Type.Member" reference. It is only produced when the member isn't followed by "(" or
    "{", which would make it a call on a receiver instead.

    Attributes:
        - type: The enum type name.
        - name: The member name.
    """

    type: str
    name: str

    def print(self, printer: AstPrinter) -> str:
        return f"{self.type}.{self.name}"


__all__ = ["EnumValueAst"]
