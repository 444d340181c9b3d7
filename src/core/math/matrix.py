"""
Matrix — плотная 2D матрица double в row-major порядке

Хранение: плоский список float длины row_count * column_count.
Представления rows / columns вычисляются из хранилища при каждом обращении
и никогда не кэшируются.

Операции:
- left + right, left - right  → поэлементно, размерности обязаны совпадать
- left * right               → матричное произведение через NumericTuple.dot
- scalar * right             → умножение на скаляр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. row_count * column_count == len(хранилища), размер неизменен после создания
2. Несовпадение размерностей → UnbalancedMatricesError
3. Индекс вне [0, row_count) × [0, column_count) → MatrixIndexError
4. Пустые или рваные (jagged) вложенные данные → from_rows возвращает None

ПРОИЗВЕДЕНИЕ:
    result[i][j] = NumericTuple(left.rows[i]) · NumericTuple(right.columns[j])
    i ∈ [0, left.row_count), j ∈ [0, right.column_count)
    Требование: left.column_count == right.row_count
"""

import logging
import numbers
from collections.abc import Sequence
from typing import Optional

from src.core.contracts.preconditions import (
    MatrixIndexError,
    UnbalancedMatricesError,
    require,
)
from src.core.math.numeric_tuple import NumericTuple
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    sequences_close,
)

logger = logging.getLogger(__name__)


class Matrix:
    """
    Плотная матрица вещественных чисел.

    Создание:
    - Matrix(rows, columns)       — нулевая матрица заданного размера
    - Matrix.from_rows(values)    — из вложенных строк (None при ошибке формы)

    Изменение возможно только через matrix[row, column] = value.

    Examples:
        >>> a = Matrix.from_rows([[1, 2], [3, 4]])
        >>> b = Matrix.from_rows([[5, 6], [7, 8]])
        >>> (a * b).rows
        [[19.0, 22.0], [43.0, 50.0]]
    """

    def __init__(self, rows: int, columns: int) -> None:
        """
        Args:
            rows: Количество строк (>= 0)
            columns: Количество столбцов (>= 0)

        Raises:
            ContractViolation: Если размерность отрицательна
        """
        require(rows >= 0 and columns >= 0, f"Negative matrix shape: {rows}x{columns}")

        self.row_count = rows
        self.column_count = columns
        self._grid: list[float] = [0.0] * (rows * columns)

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[float]]) -> Optional["Matrix"]:
        """
        Создание матрицы из вложенных строк.

        Args:
            values: Последовательность строк одинаковой длины

        Returns:
            Matrix с row_count = len(values), column_count = len(values[0]),
            либо None если values пуст или длины строк различаются
        """
        if len(values) == 0:
            logger.debug("Matrix.from_rows rejected: no rows")
            return None

        width = len(values[0])
        if any(len(row) != width for row in values):
            logger.debug(
                "Matrix.from_rows rejected: jagged rows %s",
                [len(row) for row in values],
            )
            return None

        matrix = cls(len(values), width)
        matrix._grid = [float(value) for row in values for value in row]
        return matrix

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return self.row_count, self.column_count

    def _index_is_valid(self, row: int, column: int) -> bool:
        return 0 <= column < self.column_count and 0 <= row < self.row_count

    def _flat_index(self, key: tuple[int, int]) -> int:
        row, column = key
        require(
            self._index_is_valid(row, column),
            f"Index out of range: ({row}, {column}) for {self.row_count}x{self.column_count} matrix",
            MatrixIndexError,
        )
        return self.column_count * row + column

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._grid[self._flat_index(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._grid[self._flat_index(key)] = float(value)

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> list[list[float]]:
        """Строки: row_count последовательных отрезков длины column_count."""
        width = self.column_count
        return [self._grid[i * width : (i + 1) * width] for i in range(self.row_count)]

    @property
    def columns(self) -> list[list[float]]:
        """Столбцы: для каждого индекса j — j-й элемент каждой строки по порядку."""
        rows = self.rows
        return [[row[j] for row in rows] for j in range(self.column_count)]

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _require_same_shape(self, other: "Matrix") -> None:
        require(
            self.shape == other.shape,
            f"Unbalanced matrices: {self.row_count}x{self.column_count} "
            f"vs {other.row_count}x{other.column_count}",
            UnbalancedMatricesError,
        )

    def add(self, other: "Matrix") -> "Matrix":
        """
        Поэлементная сумма.

        Raises:
            UnbalancedMatricesError: Если размерности различаются
        """
        self._require_same_shape(other)

        result = Matrix(other.row_count, other.column_count)
        for i in range(other.row_count):
            for j in range(other.column_count):
                result[i, j] = self[i, j] + other[i, j]
        return result

    def subtract(self, other: "Matrix") -> "Matrix":
        """
        Поэлементная разность self - other.

        Raises:
            UnbalancedMatricesError: Если размерности различаются
        """
        self._require_same_shape(other)

        result = Matrix(other.row_count, other.column_count)
        for i in range(other.row_count):
            for j in range(other.column_count):
                result[i, j] = self[i, j] - other[i, j]
        return result

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Матричное произведение self × other.

        Каждый элемент — скалярное произведение строки self и столбца other.

        Args:
            other: Матрица с row_count == self.column_count

        Returns:
            Матрица self.row_count × other.column_count

        Raises:
            UnbalancedMatricesError: Если self.column_count != other.row_count
        """
        require(
            self.column_count == other.row_count,
            f"Unbalanced matrices for product: {self.row_count}x{self.column_count} "
            f"* {other.row_count}x{other.column_count}",
            UnbalancedMatricesError,
        )

        left_rows = [NumericTuple(row) for row in self.rows]
        right_columns = [NumericTuple(column) for column in other.columns]

        result = Matrix(self.row_count, other.column_count)
        for i in range(self.row_count):
            for j in range(other.column_count):
                result[i, j] = left_rows[i] * right_columns[j]
        return result

    def scale(self, scalar: float) -> "Matrix":
        """Умножение каждого элемента на scalar; размерность сохраняется."""
        result = Matrix(self.row_count, self.column_count)
        for i in range(self.row_count):
            for j in range(self.column_count):
                result[i, j] = self[i, j] * scalar
        return result

    def __add__(self, other: object):
        if isinstance(other, Matrix):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Matrix):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: object):
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, numbers.Real):
            return self.scale(float(other))
        return NotImplemented

    # -------------------------------------------------------------------------
    # Comparison & rendering
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix):
            return self.shape == other.shape and self._grid == other._grid
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def is_close(
        self,
        other: "Matrix",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Поэлементное сравнение с толерантностью (False при разной размерности)."""
        return self.shape == other.shape and sequences_close(
            self._grid, other._grid, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def __str__(self) -> str:
        output = ""
        for row in self.rows:
            joined = " ".join(str(value) for value in row)
            output += f"[ {joined} ]\n"
        return output

    def __repr__(self) -> str:
        return f"Matrix({self.row_count}x{self.column_count}, rows={self.rows!r})"
