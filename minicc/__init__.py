"""Syntax tree, AST graph output and ARM32 assembly helpers for a small C subset."""

__version__ = "1.0.1"