from dataclasses import dataclass

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class StringValueAst(Ast):
    content: str

    def print(self, printer: AstPrinter) -> str:
        return f"\"{self.content}\""


__all__ = ["StringValueAst"]
