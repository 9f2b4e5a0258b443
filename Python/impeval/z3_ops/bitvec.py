from functools import lru_cache

import z3

# Machine word width; every value in the interpreter is an unsigned word.
WIDTH = 64
WORD_MAX = (1 << WIDTH) - 1

def check_word(val: int):
    if isinstance(val, bool) or not isinstance(val, int):
        raise TypeError(f"Expected an unsigned {WIDTH}-bit integer, got {val!r}")
    if val < 0 or val > WORD_MAX:
        raise ValueError(f"Value out of range for u{WIDTH}: {val}")

@lru_cache(maxsize=4096)
def word(val: int) -> z3.BitVecNumRef:
    return z3.BitVecVal(val, WIDTH)

def from_z3(ref) -> int:
    simp = z3.simplify(ref)
    if isinstance(simp, z3.BitVecNumRef):
        return simp.as_long()
    raise RuntimeError(f"Z3 result not concrete: {simp}")

# Each operation below builds a Z3 term and simplifies it, which costs on the
# order of 100us per call. Hot loops pay that per arithmetic node evaluated.

def wrapping_add(a: int, b: int) -> int:
    return from_z3(word(a) + word(b))

def wrapping_mul(a: int, b: int) -> int:
    return from_z3(word(a) * word(b))

def less_than(a: int, b: int) -> bool:
    return z3.is_true(z3.simplify(z3.ULT(word(a), word(b))))
