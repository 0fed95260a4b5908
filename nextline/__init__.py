"""Buffered line reading from file descriptors and streams, with small string, memory and output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "search", "reader", "transform", "memory", "output"]