"""
Add - поэлементное сложение матриц

Алгоритм:
1. verify(is_multiplication=False) → иначе DimensionMismatch
2. Результат: нулевая матрица той же формы через builder
3. result[i][j] = left[i][j] + right[i][j] в row-major порядке

Семантика float без особых случаев: NaN и Inf распространяются по IEEE 754.
Операнды не изменяются, результат всегда новая матрица.
"""

import logging
from typing import Any, Protocol, runtime_checkable

from src.core.errors import DimensionMismatch, InvalidOperation
from src.core.matrix import Matrix

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsAdd(Protocol):
    """Тип, поддерживающий сложение с другим значением того же типа."""

    def add(self, other: Any) -> Any:
        ...


def add(left: Matrix, right: Matrix) -> Matrix:
    """
    Сложение двух матриц.

    Args:
        left: Первая матрица
        right: Вторая матрица

    Returns:
        Новая матрица left + right

    Raises:
        TypeError: Если операнд не Matrix
        DimensionMismatch: Если rows/cols операндов не совпадают
        InvalidOperation: Если операнд - placeholder без данных (Matrix.new())

    Examples:
        >>> a = Matrix.builder().rows(2).cols(2).data([[1, 2], [3, 4]]).done()
        >>> b = Matrix.builder().rows(2).cols(2).data([[5, 6], [7, 8]]).done()
        >>> print(add(a, b))
        |6 8|
        |10 12|
    """
    if not isinstance(left, Matrix) or not isinstance(right, Matrix):
        raise TypeError(
            f"add expects two Matrix operands, got {type(left).__name__} "
            f"and {type(right).__name__}"
        )

    if not left.verify(False, right):
        logger.debug(
            "Add rejected: %dx%d + %dx%d", left.rows, left.cols, right.rows, right.cols
        )
        raise DimensionMismatch(
            f"{left.rows}x{left.cols} + {right.rows}x{right.cols}"
        )

    if not (left.is_materialized and right.is_materialized):
        raise InvalidOperation("placeholder matrix holds no data")

    result = Matrix.builder().rows(left.rows).cols(left.cols).done()

    for i in range(left.rows):
        for j in range(left.cols):
            result.data[i][j] = left.data[i][j] + right.data[i][j]

    return result
