"""
Domain value objects.

Plane geometry: Angle, Quadrant, Vector2D.
"""

from src.core.domain.angle import Angle
from src.core.domain.quadrant import QUADRANT_THRESHOLD, Quadrant
from src.core.domain.vector2d import DEFAULT_NOTATION, Vector2D, VectorNotation

__all__ = [
    # Angle
    "Angle",
    # Quadrant
    "QUADRANT_THRESHOLD",
    "Quadrant",
    # Vector2D
    "DEFAULT_NOTATION",
    "Vector2D",
    "VectorNotation",
]
