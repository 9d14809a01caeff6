from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import json_fix

from BuilderDSL.ASTs.Meta.AstPrinter import AstPrinter


@dataclass(frozen=True)
class Ast:
    """
    Base of every syntax tree node. Nodes are frozen and built bottom-up by the parser. The "pos" attribute is the
    source offset of the node's first token; it is excluded from equality so that trees compare by shape and content.
    """

    pos: int = dataclasses.field(compare=False)

    def print(self, printer: AstPrinter) -> str:
        raise NotImplementedError

    def __json__(self) -> dict:
        # Nested nodes are serialised by the encoder in turn, through their own __json__.
        fields = {field.name: getattr(self, field.name) for field in dataclasses.fields(self) if field.name != "pos"}
        return {"kind": type(self).__name__, **fields}

    def __str__(self):
        printer = AstPrinter()
        return self.print(printer)


__all__ = ["Ast"]
