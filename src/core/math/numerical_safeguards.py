"""
Numerical Safeguards - Float Primitives для матриц

Модуль собирает float-примитивы, на которые опирается модель Matrix:
- Проверка NaN/Inf
- Epsilon-сравнения float с учётом машинной точности
- Конфигурация толерантностей для поэлементного сравнения матриц
- Текстовое представление значения ячейки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметика ячеек не санитизируется: NaN/Inf распространяются по IEEE 754
2. Точное сравнение (find, ==) никогда не использует толерантность
3. format_float никогда не использует экспоненциальную запись
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Толерантности для приближённого поэлементного сравнения матриц."""

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        validate_non_negative(self.rel_tol, "rel_tol")
        validate_non_negative(self.abs_tol, "abs_tol")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_float(value: float) -> str:
    """
    Текстовое представление значения ячейки.

    Кратчайшая запись, однозначно восстанавливающая float, без экспоненты.
    Целые значения выводятся без дробной части.

    Examples:
        >>> format_float(1.0)
        '1'
        >>> format_float(0.5)
        '0.5'
        >>> format_float(1e-7)
        '0.0000001'
        >>> format_float(float("nan"))
        'NaN'
    """
    value = float(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # -0.0 сохраняет знак
    if value == 0.0 and math.copysign(1.0, value) < 0:
        return "-0"

    # repr даёт кратчайшие цифры и для целых значений >= 2**53
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
