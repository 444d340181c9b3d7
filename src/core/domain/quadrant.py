"""Quadrant — классификация точки плоскости

Порядок проверок (первое совпадение побеждает):
1. (0, 0)              → ORIGIN
2. x >= 1 и y >= 1     → FIRST
3. x <= 1 и y >= 1     → SECOND
4. x <= 1 и y <= 1     → THIRD
5. иначе               → FOURTH

Диапазоны пересекаются на x = 1 / y = 1; результат определяется порядком.
Поэтому (0.5, 0.5) классифицируется как THIRD, а (1.0, 1.0) как FIRST.
"""

from enum import Enum
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Порог классификации по обеим осям
QUADRANT_THRESHOLD: Final[float] = 1.0


# =============================================================================
# ENUMS
# =============================================================================


class Quadrant(str, Enum):
    """Квадрант точки (или начало координат)."""

    ORIGIN = "origin"
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"

    @classmethod
    def from_point(cls, x: float, y: float) -> "Quadrant":
        """Классификация (x, y); вычисляется заново при каждом вызове."""
        if x == 0.0 and y == 0.0:
            return cls.ORIGIN
        if x >= QUADRANT_THRESHOLD and y >= QUADRANT_THRESHOLD:
            return cls.FIRST
        if x <= QUADRANT_THRESHOLD and y >= QUADRANT_THRESHOLD:
            return cls.SECOND
        if x <= QUADRANT_THRESHOLD and y <= QUADRANT_THRESHOLD:
            return cls.THIRD
        return cls.FOURTH

    @property
    def description(self) -> str:
        location = self.value if self is Quadrant.ORIGIN else f"{self.value} quadrant"
        return f"The point is located at the {location}."

    def __str__(self) -> str:
        return self.description
