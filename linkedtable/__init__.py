"""Insertion-ordered hash map and set with efficient operations at both ends, plus ordered JSON helpers."""

__version__ = "0.1.2"

__all__ = ["__version__"]