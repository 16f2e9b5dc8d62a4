"""
Тесты для операции сложения

Проверяет:
1. Поэлементную сумму
2. DimensionMismatch при несовпадении форм
3. Отсутствие мутации операндов
4. IEEE 754 семантику (NaN/Inf)
5. Placeholder операнды
"""

import math

import pytest

from src.core import DimensionMismatch, InvalidOperation, Matrix, MatrixError
from src.operations import SupportsAdd, add


def build(rows: int, cols: int, data) -> Matrix:
    return Matrix.builder().rows(rows).cols(cols).data(data).done()


class TestAdd:
    """Тесты add"""

    def test_add_2x2(self) -> None:
        a = build(2, 2, [[1.0, 2.0], [3.0, 4.0]])
        b = build(2, 2, [[5.0, 6.0], [7.0, 8.0]])
        result = add(a, b)
        assert result.data == [[6.0, 8.0], [10.0, 12.0]]
        assert result.shape == (2, 2)

    def test_method_and_operator(self) -> None:
        a = build(2, 2, [[1.0, 2.0], [3.0, 4.0]])
        b = build(2, 2, [[5.0, 6.0], [7.0, 8.0]])
        assert a.add(b) == add(a, b)
        assert a + b == add(a, b)

    def test_add_non_square(self) -> None:
        a = build(2, 3, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        b = build(2, 3, [[0.5, 0.5, 0.5], [-4.0, -5.0, -6.0]])
        assert add(a, b).data == [[1.5, 2.5, 3.5], [0.0, 0.0, 0.0]]

    def test_commutative(self) -> None:
        a = build(1, 3, [[0.1, 0.2, 0.3]])
        b = build(1, 3, [[1.0, 2.0, 3.0]])
        assert add(a, b) == add(b, a)

    def test_zero_is_identity(self) -> None:
        a = build(2, 2, [[1.0, 2.0], [3.0, 4.0]])
        zero = Matrix.builder().rows(2).cols(2).done()
        assert add(a, zero) == a

    def test_rendered_result(self) -> None:
        a = build(2, 2, [[1.0, 2.0], [3.0, 4.0]])
        b = build(2, 2, [[5.0, 6.0], [7.0, 8.0]])
        assert str(a + b) == "|6 8|\n|10 12|"


class TestAddDimensionMismatch:
    """Тесты DimensionMismatch"""

    def test_2x3_plus_3x2(self) -> None:
        a = build(2, 3, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        b = build(3, 2, [[7.0, 8.0], [9.0, 10.0], [11.0, 12.0]])
        with pytest.raises(DimensionMismatch, match="2x3 \\+ 3x2"):
            add(a, b)

    def test_same_rows_different_cols(self) -> None:
        a = Matrix.builder().rows(2).cols(2).done()
        b = Matrix.builder().rows(2).cols(3).done()
        with pytest.raises(DimensionMismatch):
            a + b

    def test_caught_as_matrix_error(self) -> None:
        a = Matrix.builder().rows(1).cols(2).done()
        b = Matrix.builder().rows(2).cols(1).done()
        with pytest.raises(MatrixError):
            a.add(b)


class TestAddOperands:
    """Тесты операндов и результата"""

    def test_operands_not_mutated(self) -> None:
        a = build(2, 2, [[1.0, 2.0], [3.0, 4.0]])
        b = build(2, 2, [[5.0, 6.0], [7.0, 8.0]])
        add(a, b)
        assert a.data == [[1.0, 2.0], [3.0, 4.0]]
        assert b.data == [[5.0, 6.0], [7.0, 8.0]]

    def test_result_is_fresh(self) -> None:
        a = build(1, 1, [[1.0]])
        zero = Matrix.builder().done()
        result = add(a, zero)
        assert result is not a
        assert result.data is not a.data
        result.data[0][0] = 42.0
        assert a.get(0, 0) == 1.0

    def test_add_to_self(self) -> None:
        a = build(1, 2, [[1.5, -2.0]])
        assert (a + a).data == [[3.0, -4.0]]

    def test_non_matrix_operand_rejected(self) -> None:
        a = build(1, 1, [[1.0]])
        with pytest.raises(TypeError):
            add(a, [[1.0]])  # type: ignore
        with pytest.raises(TypeError):
            a + 1  # type: ignore

    def test_placeholder_operand_rejected(self) -> None:
        one = Matrix.builder().done()
        with pytest.raises(InvalidOperation):
            add(Matrix.new(), one)
        with pytest.raises(InvalidOperation):
            add(one, Matrix.new())


class TestAddFloatSemantics:
    """Тесты IEEE 754 семантики"""

    def test_nan_propagates(self) -> None:
        a = build(1, 2, [[float("nan"), 1.0]])
        b = build(1, 2, [[1.0, 1.0]])
        result = add(a, b)
        assert math.isnan(result.get(0, 0))
        assert result.get(0, 1) == 2.0

    def test_infinity_propagates(self) -> None:
        a = build(1, 2, [[float("inf"), float("inf")]])
        b = build(1, 2, [[1.0, float("-inf")]])
        result = add(a, b)
        assert result.get(0, 0) == float("inf")
        assert math.isnan(result.get(0, 1))

    def test_overflow_to_infinity(self) -> None:
        a = build(1, 1, [[1.7e308]])
        assert add(a, a).get(0, 0) == float("inf")

    def test_no_rounding_applied(self) -> None:
        a = build(1, 1, [[0.1]])
        b = build(1, 1, [[0.2]])
        assert add(a, b).get(0, 0) == 0.1 + 0.2


class TestSupportsAdd:
    """Тесты протокола SupportsAdd"""

    def test_matrix_supports_add(self) -> None:
        assert isinstance(Matrix.builder().done(), SupportsAdd)

    def test_float_does_not(self) -> None:
        assert not isinstance(1.0, SupportsAdd)
