from dataclasses import dataclass
from typing import List

from ..z3_ops.bitvec import check_word

# ======================================
# Arithmetic Expressions
# ======================================

class Arith: pass

@dataclass(frozen=True)
class Num(Arith):
    value: int
    def __post_init__(self): check_word(self.value)
    def __repr__(self): return f"Num({self.value})"

@dataclass(frozen=True)
class Var(Arith):
    name: str
    def __post_init__(self): check_name(self.name)
    def __repr__(self): return f"Var({self.name})"

@dataclass(frozen=True)
class Add(Arith):
    left: Arith
    right: Arith
    def __repr__(self): return f"Add({self.left}, {self.right})"

@dataclass(frozen=True)
class Mul(Arith):
    left: Arith
    right: Arith
    def __repr__(self): return f"Mul({self.left}, {self.right})"

# ======================================
# Boolean Expressions
# ======================================

class Booln: pass

@dataclass(frozen=True)
class BTrue(Booln):
    def __repr__(self): return "BTrue"

@dataclass(frozen=True)
class BFalse(Booln):
    def __repr__(self): return "BFalse"

@dataclass(frozen=True)
class LessThan(Booln):
    left: Arith
    right: Arith
    def __repr__(self): return f"LessThan({self.left}, {self.right})"

@dataclass(frozen=True)
class Not(Booln):
    operand: Booln
    def __repr__(self): return f"Not({self.operand})"

# ======================================
# Commands
# ======================================

class Commd: pass

@dataclass(frozen=True)
class Skip(Commd):
    def __repr__(self): return "Skip"

@dataclass(frozen=True)
class Assign(Commd):
    name: str
    expr: Arith
    def __post_init__(self): check_name(self.name)
    def __repr__(self): return f"Assign({self.name}, {self.expr})"

@dataclass(frozen=True)
class Seq(Commd):
    first: Commd
    second: Commd
    def __repr__(self): return f"Seq({self.first}, {self.second})"

@dataclass(frozen=True)
class If(Commd):
    cond: Booln
    then_branch: Commd
    else_branch: Commd
    def __repr__(self): return f"If({self.cond}, {self.then_branch}, {self.else_branch})"

@dataclass(frozen=True)
class While(Commd):
    cond: Booln
    body: Commd
    def __repr__(self): return f"While({self.cond}, {self.body})"

# ======================================
# Helpers
# ======================================

def check_name(name: str):
    if not isinstance(name, str):
        raise TypeError(f"Variable name must be a string, got {name!r}")
    if not name:
        raise ValueError("Variable name must not be empty")

def assign(name: str, expr: Arith) -> Assign:
    return Assign(name, expr)

def seq(*cmds: Commd) -> Commd:
    """Right-nests any number of commands into Seq nodes; no commands is Skip."""
    if not cmds: return Skip()
    res = cmds[-1]
    for c in reversed(cmds[:-1]):
        res = Seq(c, res)
    return res

def show_arith(expr: Arith) -> str:
    if isinstance(expr, Num): return str(expr.value)
    if isinstance(expr, Var): return expr.name
    if isinstance(expr, Add): return f"({show_arith(expr.left)} + {show_arith(expr.right)})"
    if isinstance(expr, Mul): return f"({show_arith(expr.left)} * {show_arith(expr.right)})"
    return str(expr)

def show_booln(expr: Booln) -> str:
    if isinstance(expr, BTrue): return "true"
    if isinstance(expr, BFalse): return "false"
    if isinstance(expr, LessThan): return f"({show_arith(expr.left)} < {show_arith(expr.right)})"
    if isinstance(expr, Not): return f"!{show_booln(expr.operand)}"
    return str(expr)

def show_commd(cmd: Commd) -> str:
    if isinstance(cmd, Skip): return "skip"
    if isinstance(cmd, Assign): return f"{cmd.name} := {show_arith(cmd.expr)}"
    if isinstance(cmd, Seq):
        stmts: List[str] = []
        while isinstance(cmd, Seq):
            stmts.append(show_commd(cmd.first))
            cmd = cmd.second
        stmts.append(show_commd(cmd))
        return "; ".join(stmts)
    if isinstance(cmd, If):
        return f"if {show_booln(cmd.cond)} then {{ {show_commd(cmd.then_branch)} }} else {{ {show_commd(cmd.else_branch)} }}"
    if isinstance(cmd, While):
        return f"while {show_booln(cmd.cond)} do {{ {show_commd(cmd.body)} }}"
    return str(cmd)
