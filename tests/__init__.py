"""
Test suite for MathToolKit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
