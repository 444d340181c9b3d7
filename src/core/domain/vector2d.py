"""Vector2D — вектор на плоскости с полярными производными атрибутами

Immutable Pydantic модель. Производные атрибуты пересчитываются при каждом
обращении и не хранятся:
- magnitude: евклидова норма √(x² + y²)
- quadrant: Quadrant.from_point(x, y)
- direction: угол в градусах с поправкой по квадранту, None при x == 0

DIRECTION:
    base = degrees(atan(y / x))
    FIRST           → base
    SECOND, THIRD   → base + 180
    FOURTH, ORIGIN  → base + 360  (ORIGIN недостижим: x != 0 уже проверен)

notation влияет только на текстовое представление, не на алгебру.
"""

import math
import numbers
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from src.core.domain.angle import Angle
from src.core.domain.quadrant import Quadrant


# =============================================================================
# ENUMS
# =============================================================================


class VectorNotation(str, Enum):
    """Форма текстового представления вектора."""

    COLUMN = "column"
    COMPONENT = "component"
    UNIT = "unit"


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_NOTATION = VectorNotation.COMPONENT


# =============================================================================
# MODELS
# =============================================================================


class Vector2D(BaseModel):
    """
    Вектор (x, y).

    Операторы возвращают новые векторы с нотацией по умолчанию;
    нотация операндов не переносится.
    """

    x: float = Field(0.0, description="Компонента x")
    y: float = Field(0.0, description="Компонента y")
    notation: VectorNotation = Field(DEFAULT_NOTATION, description="Форма вывода")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Derived attributes
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def quadrant(self) -> Quadrant:
        return Quadrant.from_point(self.x, self.y)

    @property
    def direction(self) -> Optional[float]:
        """Направление в градусах; None при x == 0 (наклон не определён)."""
        if self.x == 0:
            return None

        angle = Angle.from_radians(math.atan(self.y / self.x))
        quadrant = self.quadrant

        if quadrant is Quadrant.FIRST:
            return angle.degrees
        if quadrant in (Quadrant.SECOND, Quadrant.THIRD):
            return angle.degrees + 180.0
        return angle.degrees + 360.0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(x=self.x + other.x, y=self.y + other.y)

    def subtract(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(x=self.x - other.x, y=self.y - other.y)

    def scale(self, scalar: float) -> "Vector2D":
        return Vector2D(x=scalar * self.x, y=scalar * self.y)

    def __add__(self, other: object):
        if isinstance(other, Vector2D):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Vector2D):
            return self.subtract(other)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, numbers.Real):
            return self.scale(float(other))
        return NotImplemented

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        if self.notation is VectorNotation.COLUMN:
            output = f"[ {self.x} ]\n[ {self.y} ]\n"
        elif self.notation is VectorNotation.UNIT:
            output = f"{self.x}i + {self.y}j\n"
        else:
            output = f"(x: {self.x}, y: {self.y})\n"

        return output + f"magnitude: {self.magnitude}"
