"""
Тесты для доменных value-объектов плоскости: Quadrant, Angle, Vector2D

Проверяет:
1. Классификацию квадранта с перекрытием границ (порядок проверок)
2. Двойное представление угла и его согласованность
3. magnitude / quadrant / direction вектора
4. Арифметику векторов и нотацию результата
5. Immutability (frozen=True) и текстовые представления
"""

import math
from fractions import Fraction

import pytest
from pydantic import ValidationError

from src.core.domain import Angle, Quadrant, Vector2D, VectorNotation


# =============================================================================
# QUADRANT TESTS
# =============================================================================


class TestQuadrant:
    """Тесты для Quadrant.from_point"""

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (0.0, 0.0, Quadrant.ORIGIN),
            (-0.0, 0.0, Quadrant.ORIGIN),
            (1.0, 1.0, Quadrant.FIRST),
            (5.0, 2.0, Quadrant.FIRST),
            (-3.0, 4.0, Quadrant.SECOND),
            (1.0, 7.0, Quadrant.FIRST),
            (0.5, 1.0, Quadrant.SECOND),
            (-2.0, -2.0, Quadrant.THIRD),
            (0.5, 0.5, Quadrant.THIRD),
            (1.0, 0.0, Quadrant.THIRD),
            (3.0, -1.0, Quadrant.FOURTH),
            (1.5, 0.5, Quadrant.FOURTH),
        ],
    )
    def test_classification_order(self, x: float, y: float, expected: Quadrant) -> None:
        """Первое совпадение по порядку проверок побеждает"""
        assert Quadrant.from_point(x, y) is expected

    def test_description_origin(self) -> None:
        assert Quadrant.ORIGIN.description == "The point is located at the origin."

    def test_description_quadrant(self) -> None:
        assert str(Quadrant.SECOND) == "The point is located at the second quadrant."

    def test_value_is_string(self) -> None:
        """Enum сериализуется строкой"""
        assert Quadrant.FOURTH.value == "fourth"
        assert Quadrant("first") is Quadrant.FIRST


# =============================================================================
# ANGLE TESTS
# =============================================================================


class TestAngle:
    """Тесты для модели Angle"""

    def test_from_degrees(self) -> None:
        angle = Angle(degrees=180.0)
        assert angle.radians == pytest.approx(math.pi)

    def test_from_radians(self) -> None:
        angle = Angle.from_radians(math.pi / 2)
        assert angle.degrees == pytest.approx(90.0)

    @pytest.mark.parametrize("degrees", [0.0, 1.0, 45.0, -30.0, 359.9, 720.0])
    def test_roundtrip(self, degrees: float) -> None:
        """Инвариант: degrees → radians → degrees ≈ исходное"""
        radians = Angle.from_degrees(degrees).radians
        assert Angle.from_radians(radians).degrees == pytest.approx(degrees)

    def test_consistent_pair_accepted(self) -> None:
        angle = Angle(degrees=90.0, radians=math.pi / 2)
        assert angle.degrees == 90.0

    def test_inconsistent_pair_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Inconsistent angle"):
            Angle(degrees=90.0, radians=1.0)

    def test_missing_values_rejected(self) -> None:
        with pytest.raises(ValidationError, match="degrees or radians"):
            Angle()

    def test_frozen(self) -> None:
        """Изменение полей запрещено"""
        angle = Angle(degrees=10.0)
        with pytest.raises(ValidationError):
            angle.degrees = 20.0  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Angle(degrees=0.0)) == "0.0 degrees, 0.0 radians."


# =============================================================================
# VECTOR2D TESTS
# =============================================================================


class TestVector2DDerived:
    """Тесты производных атрибутов"""

    def test_magnitude(self) -> None:
        assert Vector2D(x=3, y=4).magnitude == 5.0

    def test_magnitude_zero(self) -> None:
        assert Vector2D(x=0, y=0).magnitude == 0.0

    def test_magnitude_large_components_no_overflow(self) -> None:
        """Большие компоненты не переполняют промежуточный квадрат"""
        assert Vector2D(x=1e200, y=0.0).magnitude == 1e200
        assert Vector2D(x=3e160, y=4e160).magnitude == pytest.approx(5e160)

    def test_magnitude_tiny_components_no_underflow(self) -> None:
        """Малые ненулевые компоненты дают ненулевую норму"""
        magnitude = Vector2D(x=3e-200, y=4e-200).magnitude
        assert magnitude > 0.0
        assert magnitude == pytest.approx(5e-200, rel=1e-12, abs=0.0)

    def test_render_large_vector(self) -> None:
        """Представление большого вектора не падает"""
        rendered = str(Vector2D(x=3e160, y=4e160))
        assert rendered.startswith("(x: 3e+160, y: 4e+160)\nmagnitude: ")

    def test_quadrant(self) -> None:
        assert Vector2D(x=-2, y=3).quadrant is Quadrant.SECOND

    @pytest.mark.parametrize("y", [0.0, 1.0, -5.0])
    def test_direction_undefined_on_vertical(self, y: float) -> None:
        """x == 0 → direction отсутствует"""
        assert Vector2D(x=0.0, y=y).direction is None

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (1.0, 1.0, 45.0),  # FIRST: без поправки
            (2.0, 2.0 * math.sqrt(3.0), 60.0),  # FIRST
            (-1.0, 1.0, 135.0),  # SECOND: +180
            (-1.0, -1.0, 225.0),  # THIRD: +180
            (0.5, 0.5, 225.0),  # THIRD по правилу порога: +180
            (2.0, -2.0, 315.0),  # FOURTH: +360
        ],
    )
    def test_direction_quadrant_adjusted(self, x: float, y: float, expected: float) -> None:
        assert Vector2D(x=x, y=y).direction == pytest.approx(expected)

    def test_derived_values_follow_components(self) -> None:
        """Производные атрибуты не хранятся — вычисляются из x, y"""
        v = Vector2D(x=3.0, y=4.0)
        w = v.model_copy(update={"x": -3.0})
        assert w.magnitude == 5.0
        assert w.quadrant is Quadrant.SECOND


class TestVector2DArithmetic:
    """Тесты операций над векторами"""

    def test_add(self) -> None:
        assert Vector2D(x=1, y=2) + Vector2D(x=3, y=-4) == Vector2D(x=4, y=-2)

    def test_subtract(self) -> None:
        assert Vector2D(x=1, y=2) - Vector2D(x=3, y=-4) == Vector2D(x=-2, y=6)

    def test_scalar_left_multiply(self) -> None:
        assert 2 * Vector2D(x=1.5, y=-2) == Vector2D(x=3, y=-4)
        assert Vector2D(x=1, y=1).scale(0.5) == Vector2D(x=0.5, y=0.5)

    def test_fraction_scalar_left_multiply(self) -> None:
        """Любой вещественный скаляр (numbers.Real) допускается слева"""
        assert Fraction(1, 2) * Vector2D(x=2, y=-4) == Vector2D(x=1, y=-2)

    def test_vector_times_scalar_not_supported(self) -> None:
        with pytest.raises(TypeError):
            Vector2D(x=1, y=1) * 2

    def test_notation_not_propagated(self) -> None:
        """Результат получает нотацию по умолчанию"""
        a = Vector2D(x=1, y=2, notation=VectorNotation.COLUMN)
        b = Vector2D(x=1, y=2, notation=VectorNotation.UNIT)
        assert (a + b).notation is VectorNotation.COMPONENT
        assert (a - b).notation is VectorNotation.COMPONENT
        assert (3 * a).notation is VectorNotation.COMPONENT

    def test_frozen(self) -> None:
        v = Vector2D(x=1, y=1)
        with pytest.raises(ValidationError):
            v.x = 2.0  # type: ignore[misc]

    def test_invalid_component_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Vector2D(x="north", y=1)


class TestVector2DRendering:
    """Тесты текстового представления по нотации"""

    def test_component_default(self) -> None:
        assert str(Vector2D(x=3, y=4)) == "(x: 3.0, y: 4.0)\nmagnitude: 5.0"

    def test_column(self) -> None:
        v = Vector2D(x=3, y=4, notation=VectorNotation.COLUMN)
        assert str(v) == "[ 3.0 ]\n[ 4.0 ]\nmagnitude: 5.0"

    def test_unit(self) -> None:
        v = Vector2D(x=3, y=4, notation="unit")
        assert str(v) == "3.0i + 4.0j\nmagnitude: 5.0"
