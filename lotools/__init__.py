"""Functional helpers for sequences, mappings, conditions, errors, concurrency and channels."""

__version__ = "0.1.0"

__all__ = ["channel", "concurrency", "condition", "errors", "find", "func", "intersect", "mapping"]