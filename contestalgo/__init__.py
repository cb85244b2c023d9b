"""Graph traversals, multi-pattern string matching and range-query structures."""

__version__ = "0.1.0"