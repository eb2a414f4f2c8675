"""Fifteen — the classic 4×4 sliding-tile puzzle."""

__version__ = "0.1.0"
