"""Classic data-structure and algorithm exercises: arrays, searching, sorting,
patterns, strings, counting, ladders, linked lists, graphs and binary trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "counting",
    "graph",
    "ladder",
    "linked_list",
    "patterns",
    "searching",
    "sorting",
    "strings",
    "tree",
]