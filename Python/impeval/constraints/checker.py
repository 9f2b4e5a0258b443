from typing import FrozenSet, Iterable, Set, Tuple
from ..syntax import ast

def unbound_reads(cmd: ast.Commd, bound: Iterable[str] = ()) -> Set[str]:
    """
    Names that some execution path of cmd may read before they are assigned,
    given the names already present in the initial environment.

    The analysis is conservative: both branches of an If are assumed
    reachable, and a While body may run zero times, so assignments inside it
    do not count after the loop.
    """
    unbound, _ = _check(cmd, frozenset(bound))
    return unbound

def arith_reads(expr: ast.Arith) -> Set[str]:
    if isinstance(expr, ast.Var): return {expr.name}
    if isinstance(expr, (ast.Add, ast.Mul)): return arith_reads(expr.left) | arith_reads(expr.right)
    return set()

def booln_reads(expr: ast.Booln) -> Set[str]:
    if isinstance(expr, ast.LessThan): return arith_reads(expr.left) | arith_reads(expr.right)
    if isinstance(expr, ast.Not): return booln_reads(expr.operand)
    return set()

def _check(cmd: ast.Commd, assigned: FrozenSet[str]) -> Tuple[Set[str], FrozenSet[str]]:
    if isinstance(cmd, ast.Skip):
        return set(), assigned
    if isinstance(cmd, ast.Assign):
        return arith_reads(cmd.expr) - assigned, assigned | {cmd.name}
    if isinstance(cmd, ast.Seq):
        unbound: Set[str] = set()
        pending = [cmd.second, cmd.first]
        while pending:
            c = pending.pop()
            if isinstance(c, ast.Seq):
                pending.append(c.second); pending.append(c.first)
            else:
                u, assigned = _check(c, assigned)
                unbound |= u
        return unbound, assigned
    if isinstance(cmd, ast.If):
        uc = booln_reads(cmd.cond) - assigned
        ut, at = _check(cmd.then_branch, assigned)
        ue, ae = _check(cmd.else_branch, assigned)
        return uc | ut | ue, at & ae
    if isinstance(cmd, ast.While):
        uc = booln_reads(cmd.cond) - assigned
        ub, _ = _check(cmd.body, assigned)
        return uc | ub, assigned
    raise TypeError(f"Not a command: {cmd!r}")
