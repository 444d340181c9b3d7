"""
Preconditions — контракты операций над числовыми значениями

Все нарушения контрактов — ошибки вызывающего кода (несогласованные размерности,
выход за границы), а не восстанавливаемые состояния. Проверки выполняются до
вычисления и немедленно прерывают операцию исключением.

ИНВАРИАНТЫ:
1. Проверки никогда не отключаются (не assert, работает и под -O)
2. Каждая проверка поднимает конкретный подкласс ContractViolation
3. Операнды не изменяются, если проверка не пройдена
"""

import logging
from typing import NoReturn

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(Exception):
    """
    Нарушение предусловия операции.

    Базовый класс для всех ошибок программиста, обнаруживаемых до вычисления.
    Перехватывать не предполагается: размерности должны проверяться вызывающим
    кодом до комбинирования значений.
    """

    pass


class UnbalancedTuplesError(ContractViolation):
    """Операция над кортежами разной длины (dot/add/subtract)."""

    pass


class UnbalancedMatricesError(ContractViolation):
    """Операция над матрицами несовместимых размерностей."""

    pass


class MatrixIndexError(ContractViolation, IndexError):
    """Обращение к элементу матрицы вне допустимого диапазона."""

    pass


# =============================================================================
# GUARDS
# =============================================================================


def violate(error: type[ContractViolation], message: str) -> NoReturn:
    """
    Поднять нарушение контракта с отладочной записью в лог.

    Args:
        error: Класс исключения (подкласс ContractViolation)
        message: Сообщение об ошибке

    Raises:
        error: Всегда
    """
    logger.debug("Contract violation (%s): %s", error.__name__, message)
    raise error(message)


def require(
    condition: bool,
    message: str,
    error: type[ContractViolation] = ContractViolation,
) -> None:
    """
    Проверка предусловия.

    Args:
        condition: Условие, которое обязано выполняться
        message: Сообщение при нарушении
        error: Класс исключения (default: ContractViolation)

    Raises:
        ContractViolation: Если condition ложно

    Examples:
        >>> require(2 == 2, "never raised")
        >>> require(1 == 2, "Unbalanced tuples", UnbalancedTuplesError)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        UnbalancedTuplesError: Unbalanced tuples
    """
    if not condition:
        violate(error, message)


def require_same_length(left_length: int, right_length: int) -> None:
    """
    Проверка сбалансированности кортежей.

    Args:
        left_length: Длина левого операнда
        right_length: Длина правого операнда

    Raises:
        UnbalancedTuplesError: Если длины различаются
    """
    require(
        left_length == right_length,
        f"Unbalanced tuples: {left_length} != {right_length}",
        UnbalancedTuplesError,
    )
