"""Lightweight CPU and memory usage monitor reading from /proc."""

__version__ = "0.1.0"
__all__ = ["cli", "cpu", "memory", "memory_info"]