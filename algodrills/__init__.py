"""Classic algorithm exercises on arrays, strings, graphs, hashing, greedy choices, recursion and backtracking."""

__version__ = "0.1.0"
__all__ = [
    "backtracking",
    "counting",
    "graph",
    "greedy",
    "hashing",
    "recursion",
    "reorder",
    "scan",
    "strings",
]