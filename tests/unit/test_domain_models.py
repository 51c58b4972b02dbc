"""
Тесты для доменных моделей

Покрытие:
- Equation: строгие целые, immutable, вырожденность, вычисление
- Solution: сумма, immutable
- ReducedStep: приведение по gcd с сохранением знаков
- Interval: порядок границ, длина, пересечение
"""

import pytest
from pydantic import ValidationError

from src.core.domain import Equation, Interval, ReducedStep, Solution


# =============================================================================
# EQUATION
# =============================================================================


class TestEquation:
    """Тесты для Equation"""

    def test_create_equation(self) -> None:
        eq = Equation(a=2, b=3, c=7)
        assert (eq.a, eq.b, eq.c) == (2, 3, 7)

    def test_equation_is_immutable(self) -> None:
        """Модель frozen: изменение поля запрещено"""
        eq = Equation(a=2, b=3, c=7)
        with pytest.raises(ValidationError):
            eq.a = 5  # type: ignore[misc]

    def test_float_coefficient_rejected(self) -> None:
        """Только строгие целые"""
        with pytest.raises(ValidationError):
            Equation(a=2.0, b=3, c=7)  # type: ignore[arg-type]

    def test_string_coefficient_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Equation(a="2", b=3, c=7)  # type: ignore[arg-type]

    def test_bool_coefficient_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Equation(a=True, b=3, c=7)  # type: ignore[arg-type]

    def test_degenerate(self) -> None:
        """a == b == 0 → is_degenerate"""
        assert Equation(a=0, b=0, c=0).is_degenerate
        assert Equation(a=0, b=0, c=5).is_degenerate
        assert not Equation(a=0, b=1, c=5).is_degenerate
        assert not Equation(a=1, b=0, c=5).is_degenerate

    def test_evaluate_and_satisfied(self) -> None:
        eq = Equation(a=2, b=3, c=7)
        assert eq.evaluate(2, 1) == 7
        assert eq.is_satisfied_by(Solution(x=2, y=1))
        assert not eq.is_satisfied_by(Solution(x=1, y=1))

    def test_str(self) -> None:
        assert str(Equation(a=2, b=-3, c=7)) == "2*x + -3*y = 7"

    def test_equality_by_value(self) -> None:
        assert Equation(a=1, b=2, c=3) == Equation(a=1, b=2, c=3)
        assert hash(Equation(a=1, b=2, c=3)) == hash(Equation(a=1, b=2, c=3))


# =============================================================================
# SOLUTION
# =============================================================================


class TestSolution:
    """Тесты для Solution"""

    def test_total(self) -> None:
        assert Solution(x=-4, y=10).total == 6

    def test_as_tuple(self) -> None:
        assert Solution(x=1, y=-2).as_tuple() == (1, -2)

    def test_solution_is_immutable(self) -> None:
        sol = Solution(x=1, y=2)
        with pytest.raises(ValidationError):
            sol.x = 3  # type: ignore[misc]

    def test_huge_values_allowed(self) -> None:
        """Целые Python без ограничения разрядности"""
        sol = Solution(x=10**30, y=-(10**30))
        assert sol.total == 0


# =============================================================================
# REDUCED STEP
# =============================================================================


class TestReducedStep:
    """Тесты для ReducedStep"""

    def test_from_equation(self) -> None:
        """(step_x, step_y) == (b/g, a/g)"""
        step = ReducedStep.from_equation(Equation(a=4, b=6, c=10), 2)
        assert step.step_x == 3
        assert step.step_y == 2
        assert step.b_reduced == 3
        assert step.a_reduced == 2

    def test_signs_preserved(self) -> None:
        step = ReducedStep.from_equation(Equation(a=-4, b=6, c=10), 2)
        assert step.a_reduced == -2
        assert step.b_reduced == 3

        step = ReducedStep.from_equation(Equation(a=9, b=-6, c=3), 3)
        assert step.a_reduced == 3
        assert step.b_reduced == -2

    def test_zero_coefficient(self) -> None:
        step = ReducedStep.from_equation(Equation(a=0, b=-5, c=10), 5)
        assert step.a_reduced == 0
        assert step.b_reduced == -1

    def test_non_positive_gcd_rejected(self) -> None:
        with pytest.raises(ValueError, match="gcd must be positive"):
            ReducedStep.from_equation(Equation(a=0, b=0, c=0), 0)

    def test_non_dividing_gcd_rejected(self) -> None:
        with pytest.raises(ValueError, match="does not divide"):
            ReducedStep.from_equation(Equation(a=4, b=6, c=10), 4)


# =============================================================================
# INTERVAL
# =============================================================================


class TestInterval:
    """Тесты для Interval"""

    def test_create(self) -> None:
        interval = Interval.of(-5, 5)
        assert interval.lo == -5
        assert interval.hi == 5
        assert interval.length == 11

    def test_single_point(self) -> None:
        interval = Interval(lo=3, hi=3)
        assert interval.length == 1
        assert interval.contains(3)
        assert not interval.contains(4)

    def test_reversed_bounds_rejected(self) -> None:
        """lo > hi → ValidationError"""
        with pytest.raises(ValidationError, match="exceeds upper bound"):
            Interval(lo=5, hi=4)

    def test_contains_is_inclusive(self) -> None:
        interval = Interval.of(0, 10)
        assert interval.contains(0)
        assert interval.contains(10)
        assert not interval.contains(-1)
        assert not interval.contains(11)

    def test_intersect_overlapping(self) -> None:
        assert Interval.of(0, 10).intersect(Interval.of(5, 20)) == Interval.of(5, 10)

    def test_intersect_touching(self) -> None:
        assert Interval.of(0, 5).intersect(Interval.of(5, 9)) == Interval.of(5, 5)

    def test_intersect_disjoint_is_none(self) -> None:
        assert Interval.of(0, 4).intersect(Interval.of(5, 9)) is None

    def test_str(self) -> None:
        assert str(Interval.of(-1, 2)) == "[-1, 2]"

    def test_interval_is_immutable(self) -> None:
        interval = Interval.of(0, 1)
        with pytest.raises(ValidationError):
            interval.lo = -1  # type: ignore[misc]
