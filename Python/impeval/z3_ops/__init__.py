from .bitvec import WIDTH, WORD_MAX, check_word, wrapping_add, wrapping_mul, less_than

__all__ = ["WIDTH", "WORD_MAX", "check_word", "wrapping_add", "wrapping_mul", "less_than"]
