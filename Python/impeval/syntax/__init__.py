from .ast import (
    Arith, Num, Var, Add, Mul,
    Booln, BTrue, BFalse, LessThan, Not,
    Commd, Skip, Assign, Seq, If, While,
    assign, seq, show_arith, show_booln, show_commd,
)

__all__ = [
    "Arith", "Num", "Var", "Add", "Mul",
    "Booln", "BTrue", "BFalse", "LessThan", "Not",
    "Commd", "Skip", "Assign", "Seq", "If", "While",
    "assign", "seq", "show_arith", "show_booln", "show_commd",
]
