"""
Contract Enforcement Module

Предусловия операций над Tuple / Matrix и иерархия исключений нарушений.
"""

from .preconditions import (
    ContractViolation,
    MatrixIndexError,
    UnbalancedMatricesError,
    UnbalancedTuplesError,
    require,
    require_same_length,
    violate,
)

__all__ = [
    # Exceptions
    "ContractViolation",
    "UnbalancedTuplesError",
    "UnbalancedMatricesError",
    "MatrixIndexError",
    # Functions
    "require",
    "require_same_length",
    "violate",
]
