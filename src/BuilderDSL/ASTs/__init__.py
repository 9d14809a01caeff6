from BuilderDSL.ASTs.AssignmentStatementAst import *
from BuilderDSL.ASTs.EnumValueAst import *
from BuilderDSL.ASTs.FunctionArgumentAst import *
from BuilderDSL.ASTs.FunctionAst import *
from BuilderDSL.ASTs.FunctionCallAst import *
from BuilderDSL.ASTs.FunctionHeaderAst import *
from BuilderDSL.ASTs.FunctionValueAst import *
from BuilderDSL.ASTs.NumberValueAst import *
from BuilderDSL.ASTs.ParameterNamedAst import *
from BuilderDSL.ASTs.ParameterSingleAst import *
from BuilderDSL.ASTs.StringValueAst import *
from BuilderDSL.ASTs.UnaryOperatorAst import *

# Unions last, they import the node classes from this package.
from BuilderDSL.ASTs.ParameterAst import *
from BuilderDSL.ASTs.StatementAst import *
from BuilderDSL.ASTs.ValueAst import *
