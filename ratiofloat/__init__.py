"""Exact rational numbers with approximate roots and logarithms, and a stream reader."""

__version__ = "0.1.0"
__all__ = ["rational", "streams"]