from .types import Env, EvalError, UnboundVariable, StepLimitExceeded
from .evaluator import Fuel, eval_arith, eval_booln, eval_commd, eval_program

__all__ = [
    "Env", "EvalError", "UnboundVariable", "StepLimitExceeded",
    "Fuel", "eval_arith", "eval_booln", "eval_commd", "eval_program",
]
