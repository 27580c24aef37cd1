"""Classic algorithms on arrays, strings, integers, linked lists and trees, plus small data structures."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "integers",
    "linked_list",
    "sliding_window",
    "structures",
    "text",
    "trees",
]