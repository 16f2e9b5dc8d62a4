"""
Matrix Errors - закрытая таксономия ошибок

Четыре вида ошибок, которые может вернуть библиотека:
- InvalidMatrixSize: rows или cols равны нулю при построении
- DimensionMismatch: размеры двух матриц несовместимы для операции
- InvalidOperation: операция недопустима в текущем контексте
- DataMismatch: форма data не совпадает с объявленными rows/cols

Вызывающий код должен ветвиться по kind (или по классу исключения),
а не по тексту сообщения.
"""

from enum import Enum
from typing import Dict, Optional, Type


class MatrixErrorKind(str, Enum):
    """Вид ошибки матрицы"""

    INVALID_MATRIX_SIZE = "InvalidMatrixSize"
    DIMENSION_MISMATCH = "DimensionMismatch"
    INVALID_OPERATION = "InvalidOperation"
    DATA_MISMATCH = "DataMismatch"


_DESCRIPTIONS: Dict[MatrixErrorKind, str] = {
    MatrixErrorKind.INVALID_MATRIX_SIZE: (
        "InvalidMatrixSize: Invalid matrix size, rows and columns must be greater than zero"
    ),
    MatrixErrorKind.DIMENSION_MISMATCH: "DimensionMismatch: Matrix dimensions do not match",
    MatrixErrorKind.INVALID_OPERATION: "InvalidOperation: Invalid operation on matrices",
    MatrixErrorKind.DATA_MISMATCH: (
        "DataMismatch: Data must have the same dimensions as the matrix"
    ),
}


class MatrixError(Exception):
    """
    Базовая ошибка матричных операций.

    Каждый подкласс фиксирует свой kind и неизменное описание.
    Опциональный detail дописывается в конец сообщения в скобках.
    """

    kind: MatrixErrorKind

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        message = self.description
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    @property
    def description(self) -> str:
        """Фиксированное человекочитаемое описание вида ошибки"""
        return _DESCRIPTIONS[self.kind]

    @staticmethod
    def from_kind(kind: MatrixErrorKind, detail: Optional[str] = None) -> "MatrixError":
        """
        Создание исключения нужного подкласса по kind.

        Args:
            kind: Вид ошибки
            detail: Опциональное уточнение

        Returns:
            Экземпляр соответствующего подкласса MatrixError
        """
        return _ERROR_CLASSES[MatrixErrorKind(kind)](detail)


class InvalidMatrixSize(MatrixError):
    """rows или cols запрошены равными нулю"""

    kind = MatrixErrorKind.INVALID_MATRIX_SIZE


class DimensionMismatch(MatrixError):
    """Формы двух матриц несовместимы для запрошенной операции"""

    kind = MatrixErrorKind.DIMENSION_MISMATCH


class InvalidOperation(MatrixError):
    """Операция недопустима в данном контексте"""

    kind = MatrixErrorKind.INVALID_OPERATION


class DataMismatch(MatrixError):
    """Форма переданных данных не совпадает с rows/cols"""

    kind = MatrixErrorKind.DATA_MISMATCH


_ERROR_CLASSES: Dict[MatrixErrorKind, Type[MatrixError]] = {
    MatrixErrorKind.INVALID_MATRIX_SIZE: InvalidMatrixSize,
    MatrixErrorKind.DIMENSION_MISMATCH: DimensionMismatch,
    MatrixErrorKind.INVALID_OPERATION: InvalidOperation,
    MatrixErrorKind.DATA_MISMATCH: DataMismatch,
}
