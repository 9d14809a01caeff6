from BuilderDSL.ASTs import ParameterNamedAst, ParameterSingleAst

type ParameterAst = ParameterNamedAst | ParameterSingleAst

__all__ = ["ParameterAst"]
