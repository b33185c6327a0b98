"""Simulations of page replacement, CPU scheduling, shared memory with a pipe, and threads."""

__version__ = "0.1.0"
__all__ = ["paging", "scheduler", "shared_memory_pipe", "threads"]