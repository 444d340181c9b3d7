"""
Core math modules для MathToolKit

Числовые кортежи, плотные матрицы и толерантные сравнения float.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    sequences_close,
)

# Tuple
from src.core.math.numeric_tuple import NumericTuple, SupportsArithmetic

# Matrix
from src.core.math.matrix import Matrix

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Comparisons
    "is_close",
    "sequences_close",
    # Tuple
    "NumericTuple",
    "SupportsArithmetic",
    # Matrix
    "Matrix",
]
