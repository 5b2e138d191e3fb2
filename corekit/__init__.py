"""Cells, copy-on-write values, ordering helpers, pinning and pollable futures."""

__version__ = "0.1.0"
__all__ = ["borrow", "cell", "cmp", "future", "pin", "task"]