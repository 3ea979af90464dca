"""Three-address code, its printing and dead-code elimination, type tables and MIPS records."""

__version__ = "0.1.0"
__all__ = ["tac", "printer", "optimize", "typesys", "members", "mips"]