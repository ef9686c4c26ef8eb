"""Classic algorithm and data-structure routines: searching, sliding windows, dynamic programming, contest problems, disjoint sets, graphs, shortest paths and binary trees."""

__version__ = "0.1.0"