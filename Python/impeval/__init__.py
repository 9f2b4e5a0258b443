from .syntax import (
    Arith, Num, Var, Add, Mul,
    Booln, BTrue, BFalse, LessThan, Not,
    Commd, Skip, Assign, Seq, If, While,
    assign, seq, show_arith, show_booln, show_commd,
)
from .runtime import (
    Env, EvalError, UnboundVariable, StepLimitExceeded,
    eval_arith, eval_booln, eval_commd, eval_program,
)
from .config import EvalConfig
from .constraints import unbound_reads

__all__ = [
    "Arith", "Num", "Var", "Add", "Mul",
    "Booln", "BTrue", "BFalse", "LessThan", "Not",
    "Commd", "Skip", "Assign", "Seq", "If", "While",
    "assign", "seq", "show_arith", "show_booln", "show_commd",
    "Env", "EvalError", "UnboundVariable", "StepLimitExceeded",
    "eval_arith", "eval_booln", "eval_commd", "eval_program",
    "EvalConfig", "unbound_reads",
]
