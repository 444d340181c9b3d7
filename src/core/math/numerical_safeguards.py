"""
Numerical Safeguards — сравнение float с учётом машинной точности

Модуль собирает толерантности и помощники сравнения, которыми пользуются
Tuple, Matrix и геометрические value-объекты:
- Epsilon-константы для относительных и абсолютных сравнений
- Поэлементное сравнение последовательностей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точное равенство (==) остаётся точным; толерантность применяется только явно
2. Последовательности разной длины никогда не считаются близкими
"""

import math
from collections.abc import Iterable
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ ЗНАЧЕНИЙ
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

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.1 + 0.2, 0.3)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def sequences_close(
    left: Iterable[float],
    right: Iterable[float],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение двух последовательностей с толерантностью.

    Args:
        left: Первая последовательность
        right: Вторая последовательность
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если длины равны и все пары элементов близки

    Examples:
        >>> sequences_close([0.1 + 0.2, 1.0], [0.3, 1.0])
        True
        >>> sequences_close([1.0], [1.0, 2.0])
        False
    """
    left_values = list(left)
    right_values = list(right)

    if len(left_values) != len(right_values):
        return False

    return all(
        is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
        for a, b in zip(left_values, right_values)
    )
