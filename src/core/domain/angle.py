"""Angle — угол в двойном представлении (градусы и радианы)

Immutable Pydantic модель. Оба поля всегда заполнены и согласованы:
    degrees = radians * 180 / π
    radians = degrees * π / 180

Создание:
- Angle(degrees=90.0)  → radians выводится
- Angle(radians=π)     → degrees выводится
- Angle(degrees=..., radians=...) → допускается только при согласованных значениях
"""

import math
from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.core.math.numerical_safeguards import is_close


# =============================================================================
# MODELS
# =============================================================================


class Angle(BaseModel):
    """
    Угол, заданный в градусах или радианах.

    Вторая форма выводится из переданной при создании; после создания
    модель неизменяема, поэтому представления не могут разойтись.
    """

    degrees: float = Field(..., description="Угол в градусах")
    radians: float = Field(..., description="Угол в радианах")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def derive_missing_unit(cls, data: Any) -> Any:
        """Выводит недостающее представление из переданного."""
        if not isinstance(data, dict):
            return data

        has_degrees = data.get("degrees") is not None
        has_radians = data.get("radians") is not None

        if not has_degrees and not has_radians:
            raise ValueError("Angle requires degrees or radians")

        if has_degrees and has_radians:
            expected = float(data["radians"]) * 180.0 / math.pi
            if not is_close(float(data["degrees"]), expected):
                raise ValueError(
                    f"Inconsistent angle: {data['degrees']} degrees != {data['radians']} radians"
                )
            return data

        if has_radians:
            return {**data, "degrees": (float(data["radians"]) * 180.0) / math.pi}
        return {**data, "radians": (float(data["degrees"]) * math.pi) / 180.0}

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(radians=radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(degrees=degrees)

    def __str__(self) -> str:
        return f"{self.degrees} degrees, {self.radians} radians."
