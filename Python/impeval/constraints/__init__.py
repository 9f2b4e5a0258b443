from .checker import unbound_reads, arith_reads, booln_reads

__all__ = ["unbound_reads", "arith_reads", "booln_reads"]
