"""
NumericTuple — кортеж фиксированной длины с векторной арифметикой

Обобщённая последовательность числовых элементов (int, float, Decimal,
Fraction, complex — любой тип с +, -, * и нулём-литералом 0).

Операции:
- left * right        → скалярное произведение (dot product), тип элемента
- left + right        → поэлементная сумма, новый кортеж
- left - right        → поэлементная разность, новый кортеж
- scalar * right      → умножение на скаляр слева, новый кортеж

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dot/add/subtract требуют равной длины → UnbalancedTuplesError
2. Операторы никогда не изменяют операнды
3. Порядок элементов результата совпадает с порядком входа
"""

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any, Generic, Protocol, TypeVar, overload, runtime_checkable

from src.core.contracts.preconditions import require_same_length
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    sequences_close,
)


# =============================================================================
# NUMERIC CAPABILITY
# =============================================================================


@runtime_checkable
class SupportsArithmetic(Protocol):
    """Тип элемента: поддерживает +, -, * и складывается с нулём 0."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


T = TypeVar("T", bound=SupportsArithmetic)


# =============================================================================
# NUMERIC TUPLE
# =============================================================================


class NumericTuple(MutableSequence, Generic[T]):
    """
    Упорядоченная последовательность чисел с векторной арифметикой.

    Кортеж изменяем только через индексное присваивание, append и insert.
    Арифметические операторы возвращают новые экземпляры.

    Examples:
        >>> NumericTuple([1, 2, 3]) * NumericTuple([4, 5, 6])
        32
        >>> str(NumericTuple([1, 2]) + NumericTuple([3, 4]))
        '( 4, 6 )'
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self.values: list[T] = list(values)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "NumericTuple[T]": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return NumericTuple(self.values[index])
        return self.values[index]

    def __setitem__(self, index, value) -> None:
        self.values[index] = value

    def __delitem__(self, index) -> None:
        del self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def insert(self, index: int, value: T) -> None:
        self.values.insert(index, value)

    def append(self, value: T) -> None:
        self.values.append(value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def dot(self, other: "NumericTuple[T]") -> T:
        """
        Скалярное произведение: Σ self[i] * other[i].

        Args:
            other: Кортеж той же длины

        Returns:
            Сумма попарных произведений (0 для пустых кортежей)

        Raises:
            UnbalancedTuplesError: Если длины различаются
        """
        require_same_length(len(self), len(other))

        result = 0
        for i in range(len(other)):
            result += self[i] * other[i]
        return result

    def add(self, other: "NumericTuple[T]") -> "NumericTuple[T]":
        """
        Поэлементная сумма.

        Raises:
            UnbalancedTuplesError: Если длины различаются
        """
        require_same_length(len(self), len(other))

        result: NumericTuple[T] = NumericTuple()
        for i in range(len(other)):
            result.append(self[i] + other[i])
        return result

    def subtract(self, other: "NumericTuple[T]") -> "NumericTuple[T]":
        """
        Поэлементная разность self[i] - other[i].

        Raises:
            UnbalancedTuplesError: Если длины различаются
        """
        require_same_length(len(self), len(other))

        result: NumericTuple[T] = NumericTuple()
        for i in range(len(other)):
            result.append(self[i] - other[i])
        return result

    def scale(self, scalar: T) -> "NumericTuple[T]":
        """Умножение на скаляр слева: scalar * self[i]. Ограничений по длине нет."""
        return NumericTuple(scalar * value for value in self.values)

    def __mul__(self, other: object):
        if isinstance(other, NumericTuple):
            return self.dot(other)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, NumericTuple):
            return NotImplemented
        return self.scale(other)

    def __add__(self, other: object):
        if isinstance(other, NumericTuple):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, NumericTuple):
            return self.subtract(other)
        return NotImplemented

    def __iadd__(self, other: object):
        # += строит новый кортеж через __add__, а не extend из MutableSequence
        return NotImplemented

    # -------------------------------------------------------------------------
    # Comparison & rendering
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NumericTuple):
            return self.values == other.values
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def is_close(
        self,
        other: "NumericTuple[T]",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Поэлементное сравнение с толерантностью (False при разной длине)."""
        return sequences_close(self.values, other.values, rel_tol=rel_tol, abs_tol=abs_tol)

    def __str__(self) -> str:
        joined = ", ".join(str(value) for value in self.values)
        return f"( {joined} )"

    def __repr__(self) -> str:
        return f"NumericTuple({self.values!r})"
