"""Evaluator helper modules for the Brace runtime."""

__all__ = [
    "bind",
    "blocks",
    "common",
    "output",
]
