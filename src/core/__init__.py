"""
Core matrix model, staged builder, and error taxonomy.

Модуль не зависит от внешних систем: только in-memory данные,
синхронные операции.
"""

from src.core.errors import (
    DataMismatch,
    DimensionMismatch,
    InvalidMatrixSize,
    InvalidOperation,
    MatrixError,
    MatrixErrorKind,
)
from src.core.matrix import Matrix
from src.core.builder import BuilderState, MatrixBuilder

__all__ = [
    # Errors
    "MatrixError",
    "MatrixErrorKind",
    "InvalidMatrixSize",
    "DimensionMismatch",
    "InvalidOperation",
    "DataMismatch",
    # Model
    "Matrix",
    "MatrixBuilder",
    "BuilderState",
]
