from dataclasses import dataclass

from BuilderDSL.ASTs.Meta.Ast import Ast
from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter
from BuilderDSL.LexicalAnalysis.Tokens import format_number


@dataclass(frozen=True)
class NumberValueAst(Ast):
    number: float

    def print(self, printer: AstPrinter) -> str:
        return format_number(self.number)


__all__ = ["NumberValueAst"]
