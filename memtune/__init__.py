"""Model layer for a memory profiler front end: usage graphs, histograms, tables, environment editing and highlighting."""

__version__ = "0.1.0"

__all__ = [
    "bigtable",
    "curve",
    "environment",
    "formatting",
    "graph",
    "graphview",
    "heaps",
    "highlighter",
    "histogram",
    "markers",
]