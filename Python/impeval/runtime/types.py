from typing import Dict, Optional, Any, Iterable, Iterator, List, Tuple
from ..syntax.ast import check_name
from ..z3_ops.bitvec import check_word

# ======================================
# Errors
# ======================================

class EvalError(Exception): pass

class UnboundVariable(EvalError):
    def __init__(self, name: str):
        super().__init__(f"Unbound variable: {name}")
        self.name = name

class StepLimitExceeded(EvalError):
    def __init__(self, limit: int):
        super().__init__(f"Step limit exceeded: {limit}")
        self.limit = limit

# ======================================
# Environment
# ======================================

class Env:
    """
    Variable store: name -> unsigned 64-bit word.

    The command evaluator owns the Env it is given and updates it in place,
    handing the same object on to the next command. Callers that want to keep
    their copy should go through eval_program, which copies once at entry.
    """
    def __init__(self, values: Optional[Dict[str, int]] = None):
        self.values: Dict[str, int] = {}
        for name, val in (values or {}).items():
            self.bind(name, val)

    @staticmethod
    def from_pairs(pairs: Iterable[Tuple[str, int]]) -> 'Env':
        env = Env()
        for name, val in pairs: env.bind(name, val)
        return env

    def lookup(self, name: str) -> int:
        try: return self.values[name]
        except KeyError: raise UnboundVariable(name) from None

    def contains(self, name: str) -> bool: return name in self.values

    def bind(self, name: str, val: int) -> 'Env':
        check_name(name); check_word(val)
        self.values[name] = val
        return self

    def copy(self) -> 'Env':
        env = Env()
        env.values = self.values.copy()
        return env

    def snapshot(self) -> List[Tuple[str, int]]:
        return sorted(self.values.items())

    def as_dict(self) -> Dict[str, int]: return dict(self.values)

    def __contains__(self, name: Any) -> bool: return name in self.values
    def __len__(self) -> int: return len(self.values)
    def __iter__(self) -> Iterator[str]: return iter(self.values)

    def __eq__(self, other: Any):
        if isinstance(other, Env): return self.values == other.values
        if isinstance(other, dict): return self.values == other
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self):
        body = ", ".join(f"{k}: {v}" for k, v in self.snapshot())
        return f"Env({{{body}}})"
