from BuilderDSL.ASTs import AssignmentStatementAst, FunctionCallAst, UnaryOperatorAst

type StatementAst = FunctionCallAst | AssignmentStatementAst | UnaryOperatorAst

__all__ = ["StatementAst"]
