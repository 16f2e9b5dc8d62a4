"""
MatrixBuilder - пошаговое построение Matrix с однократной валидацией

States:
- ACCUMULATING: rows(n), cols(n), data(d) в любом порядке и количестве,
  каждый вызов заменяет предыдущее значение поля, валидации нет
- CONSUMED: после done() (успех или ошибка), builder больше не используется

Правила done() (первое совпавшее правило побеждает):
1. rows == 0 или cols == 0 → InvalidMatrixSize
2. data пустая → матрица rows × cols, заполненная 0.0
3. len(data) != rows или длина любой строки != cols → DataMismatch
4. иначе → Matrix(rows, cols, data)
"""

import logging
import operator
from enum import Enum
from typing import Final, Iterable, List, Optional

from src.core.errors import DataMismatch, InvalidMatrixSize, InvalidOperation
from src.core.matrix import Matrix

logger = logging.getLogger(__name__)


DEFAULT_ROWS: Final[int] = 1
DEFAULT_COLS: Final[int] = 1


class BuilderState(str, Enum):
    """Состояние builder"""

    ACCUMULATING = "accumulating"
    CONSUMED = "consumed"


class MatrixBuilder:
    """
    Staged конструктор Matrix (method chaining).

    Examples:
        >>> matrix = (
        ...     MatrixBuilder()
        ...     .rows(2)
        ...     .cols(3)
        ...     .data([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        ...     .done()
        ... )
    """

    def __init__(self) -> None:
        self._rows: Optional[int] = None
        self._cols: Optional[int] = None
        self._data: Optional[List[List[float]]] = None
        self._state = BuilderState.ACCUMULATING

    @property
    def state(self) -> BuilderState:
        return self._state

    def rows(self, n: int) -> "MatrixBuilder":
        """
        Количество строк.

        Если data не задана, матрица заполняется нулями.
        """
        self._ensure_accumulating()
        self._rows = operator.index(n)
        return self

    def cols(self, n: int) -> "MatrixBuilder":
        """
        Количество столбцов.

        Если data не задана, матрица заполняется нулями.
        """
        self._ensure_accumulating()
        self._cols = operator.index(n)
        return self

    def data(self, data: Iterable[Iterable[float]]) -> "MatrixBuilder":
        """
        Значения ячеек, row-major.

        Для матрицы больше 1×1 нужно также задать rows и/или cols.
        """
        self._ensure_accumulating()
        self._data = [list(row) for row in data]
        return self

    def done(self) -> Matrix:
        """
        Финализация: валидация и создание Matrix.

        Должен вызываться в конце цепочки. Builder потребляется
        независимо от результата.

        Returns:
            Валидная Matrix

        Raises:
            InvalidMatrixSize: rows или cols равны нулю
            DataMismatch: форма data не совпадает с rows/cols
            InvalidOperation: builder уже потреблён
        """
        self._ensure_accumulating()
        self._state = BuilderState.CONSUMED

        rows = DEFAULT_ROWS if self._rows is None else self._rows
        cols = DEFAULT_COLS if self._cols is None else self._cols
        data = self._data if self._data is not None else []

        # Отрицательные размеры отклоняются так же, как нулевые
        if rows <= 0 or cols <= 0:
            logger.debug("Rejected matrix size %dx%d", rows, cols)
            raise InvalidMatrixSize(f"got {rows}x{cols}")

        if not data:
            return Matrix(rows=rows, cols=cols, data=[[0.0] * cols for _ in range(rows)])

        if len(data) != rows:
            logger.debug("Rejected data: %d rows for %dx%d matrix", len(data), rows, cols)
            raise DataMismatch(f"expected {rows} rows, got {len(data)}")

        for i, row in enumerate(data):
            if len(row) != cols:
                logger.debug("Rejected data: row %d has %d values, expected %d", i, len(row), cols)
                raise DataMismatch(f"row {i}: expected {cols} values, got {len(row)}")

        return Matrix(rows=rows, cols=cols, data=data)

    def _ensure_accumulating(self) -> None:
        if self._state is BuilderState.CONSUMED:
            raise InvalidOperation("builder already consumed by done()")
