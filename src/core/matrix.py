"""
Matrix - плотная прямоугольная матрица float64

Immutable (по форме) Pydantic модель с row-major хранением данных.

ИНВАРИАНТЫ:
1. rows > 0, cols > 0
2. len(data) == rows, каждая строка имеет длину cols
3. Форма не меняется после создания (frozen=True); операции могут
   перезаписывать значения ячеек результата на месте

Единственный общий путь создания - MatrixBuilder (Matrix.builder()).
Matrix.new() создаёт placeholder 1×1 без данных в обход валидации.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from src.core.contracts import validate_matrix_payload
from src.core.math.numerical_safeguards import (
    ToleranceConfig,
    format_float,
    is_close,
    is_valid_float,
)

if TYPE_CHECKING:
    from src.core.builder import MatrixBuilder

logger = logging.getLogger(__name__)


class Matrix(BaseModel):
    """
    Плотная матрица вещественных чисел.

    Immutable модель (frozen=True): rows/cols/data нельзя переприсвоить.
    """

    rows: int = Field(..., gt=0, description="Количество строк")
    cols: int = Field(..., gt=0, description="Количество столбцов")
    data: List[List[float]] = Field(..., description="Значения ячеек, row-major")

    # NaN/Inf в JSON пишутся как NaN/Infinity, а не null
    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    def __hash__(self) -> int:
        return hash((self.rows, self.cols, tuple(tuple(row) for row in self.data)))

    @model_validator(mode="after")
    def validate_shape(self) -> "Matrix":
        """Проверка соответствия data объявленным rows/cols."""
        if len(self.data) != self.rows:
            raise ValueError(f"data has {len(self.data)} rows, expected {self.rows}")
        for i, row in enumerate(self.data):
            if len(row) != self.cols:
                raise ValueError(f"data row {i} has {len(row)} values, expected {self.cols}")
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def new(cls) -> "Matrix":
        """
        Placeholder матрица: rows=1, cols=1, data=[].

        Не для общего использования: данные не материализованы,
        get() всегда возвращает None, add() отклоняет такой операнд.
        Для настоящей 1×1 матрицы используйте Matrix.builder().done().
        """
        return cls.model_construct(rows=1, cols=1, data=[])

    @staticmethod
    def builder() -> "MatrixBuilder":
        """
        Новый MatrixBuilder для пошагового построения матрицы.

        Examples:
            >>> Matrix.builder().rows(2).cols(3).data([[1, 2, 3], [4, 5, 6]]).done()
        """
        from src.core.builder import MatrixBuilder

        return MatrixBuilder()

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Matrix":
        """
        Десериализация из JSON-совместимого dict.

        Сначала проверяется JSON контракт (типы), затем форма - через builder,
        поэтому несоответствие формы даёт MatrixError, а не ValidationError.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует контракту
            InvalidMatrixSize, DataMismatch: Ошибки построения
        """
        validate_matrix_payload(payload)
        logger.debug("Building matrix from payload: %dx%d", payload["rows"], payload["cols"])
        return (
            cls.builder()
            .rows(int(payload["rows"]))
            .cols(int(payload["cols"]))
            .data(payload["data"])
            .done()
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON-совместимый dict (rows, cols, data)."""
        return self.model_dump()

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_materialized(self) -> bool:
        """False для placeholder матрицы из Matrix.new()."""
        return len(self.data) == self.rows and all(len(row) == self.cols for row in self.data)

    # =========================================================================
    # ДОСТУП К ДАННЫМ
    # =========================================================================

    def get(self, row: int, col: int) -> Optional[float]:
        """
        Значение ячейки (row, col).

        Отрицательные индексы не оборачиваются: вне диапазона → None.

        Examples:
            >>> m = Matrix.builder().rows(2).cols(2).data([[1, 2], [3, 4]]).done()
            >>> m.get(0, 1)
            2.0
            >>> m.get(2, 0) is None
            True
        """
        if 0 <= row < self.rows and 0 <= col < self.cols and row < len(self.data):
            return self.data[row][col]
        return None

    def find(self, value: float) -> Optional[Tuple[int, int]]:
        """
        Первая координата (row, col) в row-major порядке, где ячейка == value.

        Сравнение точное, без толерантности; NaN не находится никогда.
        """
        for i, row in enumerate(self.data):
            for j, v in enumerate(row):
                if v == value:
                    return (i, j)
        return None

    def verify(self, is_multiplication: bool, other: "Matrix") -> bool:
        """
        Проверка совместимости с другой матрицей.

        - Сложение: совпадают rows и cols
        - Умножение: self.rows == other.cols (условие для other × self)

        Args:
            is_multiplication: True для проверки умножения, False для сложения
            other: Вторая матрица

        Returns:
            True если операция допустима
        """
        if is_multiplication:
            return self.rows == other.cols
        return self.rows == other.rows and self.cols == other.cols

    def is_finite(self) -> bool:
        """True если ни одна ячейка не содержит NaN/Inf."""
        return all(is_valid_float(v) for row in self.data for v in row)

    def is_close(self, other: "Matrix", config: Optional[ToleranceConfig] = None) -> bool:
        """
        Приближённое поэлементное сравнение.

        Матрицы несовместимой формы никогда не близки.
        """
        config = config or ToleranceConfig()

        if not self.verify(False, other) or len(self.data) != len(other.data):
            return False

        return all(
            is_close(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)
            for row_a, row_b in zip(self.data, other.data)
            for a, b in zip(row_a, row_b)
        )

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Matrix") -> "Matrix":
        """
        Поэлементная сумма self + other (новая матрица).

        Raises:
            DimensionMismatch: Если формы не совпадают
        """
        from src.operations.add import add

        return add(self, other)

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    # =========================================================================
    # ОТОБРАЖЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        if self.rows == 0 or self.cols == 0 or not self.data:
            return "||"

        return "\n".join(
            "|" + " ".join(format_float(v) for v in row) + "|" for row in self.data
        )
