"""Heuristic source code analysis, optimization and review."""

__version__ = "0.1.0"
