from typing import Optional

class EvalConfig:
    def __init__(self, max_steps: Optional[int] = None, debug: bool = False):
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        self.max_steps = max_steps
        self.debug = debug

    def __repr__(self):
        return f"EvalConfig(max_steps={self.max_steps}, debug={self.debug})"

    @staticmethod
    def default() -> 'EvalConfig':
        return EvalConfig(max_steps=None, debug=False)
