"""
Matrix operations.

Арифметические операции над Matrix.
"""

from .add import SupportsAdd, add

__all__ = [
    "SupportsAdd",
    "add",
]
