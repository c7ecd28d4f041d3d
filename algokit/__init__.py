"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "bits",
    "dp",
    "graph",
    "grids",
    "linked_list",
    "strings",
    "structures",
    "tree",
]