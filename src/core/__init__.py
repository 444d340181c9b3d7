"""
Core numeric value types and their contracts.

This module contains the building blocks of MathToolKit: numeric tuples,
dense matrices and plane-geometry value objects. Nothing here performs I/O
or holds process-wide state.
"""
