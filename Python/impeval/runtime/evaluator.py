from typing import Dict, Optional, Union
from ..syntax import ast
from ..syntax.ast import show_commd, show_booln
from ..z3_ops.bitvec import wrapping_add, wrapping_mul, less_than
from ..config import EvalConfig
from .types import Env, StepLimitExceeded

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

class Fuel:
    """Per-run step counter. A limit of None never runs out."""
    def __init__(self, limit: Optional[int] = None):
        self.limit = limit
        self.used = 0

    def tick(self):
        self.used += 1
        if self.limit is not None and self.used > self.limit:
            raise StepLimitExceeded(self.limit)

# ======================================
# Arithmetic
# ======================================

def eval_arith(expr: ast.Arith, env: Env) -> int:
    if isinstance(expr, ast.Num): return expr.value
    if isinstance(expr, ast.Var): return env.lookup(expr.name)
    if isinstance(expr, ast.Add):
        a = eval_arith(expr.left, env)
        return wrapping_add(a, eval_arith(expr.right, env))
    if isinstance(expr, ast.Mul):
        a = eval_arith(expr.left, env)
        return wrapping_mul(a, eval_arith(expr.right, env))
    raise TypeError(f"Not an arithmetic expression: {expr!r}")

# ======================================
# Boolean
# ======================================

def eval_booln(expr: ast.Booln, env: Env) -> bool:
    if isinstance(expr, ast.BTrue): return True
    if isinstance(expr, ast.BFalse): return False
    if isinstance(expr, ast.LessThan):
        a = eval_arith(expr.left, env)
        return less_than(a, eval_arith(expr.right, env))
    if isinstance(expr, ast.Not): return not eval_booln(expr.operand, env)
    raise TypeError(f"Not a boolean expression: {expr!r}")

# ======================================
# Commands
# ======================================

def eval_commd(cmd: ast.Commd, env: Env, fuel: Optional[Fuel] = None) -> Env:
    """
    Runs cmd against env and returns the successor environment.

    env is consumed: it is updated in place and returned, so the caller must
    use the result rather than its own reference.
    """
    if fuel is None: fuel = Fuel()
    fuel.tick()

    if isinstance(cmd, ast.Skip): return env

    if isinstance(cmd, ast.Assign):
        val = eval_arith(cmd.expr, env)
        if DEBUG_EVAL: log(f"{cmd.name} := {val}")
        return env.bind(cmd.name, val)

    if isinstance(cmd, ast.Seq):
        # Walk nested Seq nodes with an explicit stack so long programs
        # do not grow the Python stack.
        pending = [cmd.second, cmd.first]
        while pending:
            c = pending.pop()
            if isinstance(c, ast.Seq):
                fuel.tick()
                pending.append(c.second); pending.append(c.first)
            else:
                env = eval_commd(c, env, fuel)
        return env

    if isinstance(cmd, ast.If):
        taken = eval_booln(cmd.cond, env)
        if DEBUG_EVAL:
            log(f"if {show_booln(cmd.cond)}: {'then' if taken else 'else'}")
        return eval_commd(cmd.then_branch if taken else cmd.else_branch, env, fuel)

    if isinstance(cmd, ast.While):
        iterations = 0
        while True:
            fuel.tick()
            if not eval_booln(cmd.cond, env): break
            env = eval_commd(cmd.body, env, fuel)
            iterations += 1
        if DEBUG_EVAL:
            log(f"while {show_booln(cmd.cond)}: halted after {iterations} iterations")
        return env

    raise TypeError(f"Not a command: {cmd!r}")

def eval_program(cmd: ast.Commd, env: Union[Env, Dict[str, int], None] = None,
                 config: Optional[EvalConfig] = None) -> Env:
    global DEBUG_EVAL
    config = config or EvalConfig.default()

    if env is None: start = Env()
    elif isinstance(env, Env): start = env.copy()
    else: start = Env(env)

    saved_debug = DEBUG_EVAL
    DEBUG_EVAL = saved_debug or config.debug
    try:
        if DEBUG_EVAL:
            log(f"Evaluating: {show_commd(cmd)}")
            log(f"Initial: {start}")
        fuel = Fuel(config.max_steps)
        result = eval_commd(cmd, start, fuel)
        if DEBUG_EVAL:
            log(f"Final: {result} ({fuel.used} steps)")
        return result
    finally:
        DEBUG_EVAL = saved_debug
