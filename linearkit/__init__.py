"""Array exercises, sorting and searching, a fixed stack, a linear queue and linked lists."""

__version__ = "0.1.0"

__all__ = ["arrays", "sorting", "searching", "stack", "queues", "singly", "doubly"]