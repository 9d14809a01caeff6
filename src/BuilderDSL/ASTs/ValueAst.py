from BuilderDSL.ASTs import EnumValueAst, FunctionValueAst, NumberValueAst, StringValueAst

type ValueAst = StringValueAst | NumberValueAst | FunctionValueAst | EnumValueAst

__all__ = ["ValueAst"]
