"""
Тесты для SolutionShifter и SolutionLattice

Покрытие:
- Сдвиг на k шагов (известные значения)
- Замкнутость решётки: любой сдвиг остаётся решением
- Переполнение при заданной границе
- Общее решение: at(k), parameter_of, describe
"""

import pytest

from src.core.domain import Equation, ReducedStep, Solution
from src.core.math import LatticeOverflowError
from src.solver import (
    INT64_CONFIG,
    SolutionLattice,
    find_any_solution,
    shift_by_step,
    shift_solution,
)


class TestShiftSolution:
    """Тесты для shift_solution"""

    def test_shift_by_one(self) -> None:
        """(-1, 1) для 2x + 3y = 1, k = 1 → (2, -1)"""
        shifted = shift_solution(Solution(x=-1, y=1), 2, 3, 1)
        assert shifted == Solution(x=2, y=-1)
        assert 2 * 2 + 3 * (-1) == 1

    def test_shift_by_zero_is_identity(self) -> None:
        sol = Solution(x=7, y=-4)
        assert shift_solution(sol, 5, 9, 0) == sol

    def test_negative_k(self) -> None:
        assert shift_solution(Solution(x=0, y=0), 2, 3, -2) == Solution(x=-6, y=4)

    def test_shift_by_step(self) -> None:
        step = ReducedStep(step_x=3, step_y=2)
        assert shift_by_step(Solution(x=-1, y=1), step, 1) == Solution(x=2, y=-1)

    def test_lattice_closure(self) -> None:
        """Любой сдвиг решения с приведёнными коэффициентами остаётся решением"""
        for a, b, c in [(2, 3, 1), (4, -6, 10), (-9, -12, 3), (0, 7, 14), (5, 0, -15), (1, 1, 10)]:
            eq = Equation(a=a, b=b, c=c)
            result = find_any_solution(eq)
            for k in range(-25, 26):
                shifted = shift_solution(
                    result.solution, result.step.a_reduced, result.step.b_reduced, k
                )
                assert eq.is_satisfied_by(shifted), (eq, k)

    def test_overflow_with_bound(self) -> None:
        with pytest.raises(LatticeOverflowError):
            shift_solution(Solution(x=0, y=0), 1, 2**40, 2**40, INT64_CONFIG)

    def test_no_overflow_without_bound(self) -> None:
        shifted = shift_solution(Solution(x=0, y=0), 1, 2**40, 2**40)
        assert shifted == Solution(x=2**80, y=-(2**40))


class TestSolutionLattice:
    """Тесты для SolutionLattice"""

    @pytest.fixture
    def lattice(self) -> SolutionLattice:
        return SolutionLattice.from_result(find_any_solution(Equation(a=2, b=3, c=1)))

    def test_at_zero_is_base(self, lattice) -> None:
        assert lattice.at(0) == lattice.base == Solution(x=-1, y=1)

    def test_at_k(self, lattice) -> None:
        assert lattice.at(1) == Solution(x=2, y=-1)
        assert lattice.at(-1) == Solution(x=-4, y=3)

    def test_every_point_is_solution(self, lattice) -> None:
        for k in range(-10, 11):
            assert lattice.contains(lattice.at(k))

    def test_parameter_of_x(self, lattice) -> None:
        for k in range(-10, 11):
            assert lattice.parameter_of(x=lattice.at(k).x) == k

    def test_parameter_of_y(self, lattice) -> None:
        for k in range(-10, 11):
            assert lattice.parameter_of(y=lattice.at(k).y) == k

    def test_parameter_of_off_lattice(self, lattice) -> None:
        """x == 0 не лежит на решётке x = -1 + 3k"""
        assert lattice.parameter_of(x=0) is None

    def test_parameter_of_requires_exactly_one(self, lattice) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            lattice.parameter_of()
        with pytest.raises(ValueError, match="exactly one"):
            lattice.parameter_of(x=1, y=1)

    def test_parameter_of_constant_axis(self) -> None:
        """0·x + 5y = 10: y постоянен"""
        lattice = SolutionLattice.from_result(find_any_solution(Equation(a=0, b=5, c=10)))
        with pytest.raises(ValueError, match="y is constant"):
            lattice.parameter_of(y=2)
        assert lattice.parameter_of(x=lattice.base.x + 4) == 4

    def test_negative_step(self) -> None:
        lattice = SolutionLattice.from_result(find_any_solution(Equation(a=3, b=-4, c=5)))
        for k in (-3, 0, 2):
            point = lattice.at(k)
            assert lattice.parameter_of(x=point.x) == k
            assert lattice.parameter_of(y=point.y) == k

    def test_describe(self, lattice) -> None:
        assert lattice.describe() == "x = -1 + 3k, y = 1 - 2k"

    def test_describe_negative_steps(self) -> None:
        """Отрицательный шаг выводится через минус, а не '+ -4k'"""
        lattice = SolutionLattice.from_result(find_any_solution(Equation(a=3, b=-4, c=5)))
        assert lattice.describe() == "x = -5 - 4k, y = -5 - 3k"

    def test_describe_negative_a(self) -> None:
        """-2x + 3y = 1: шаг по y положительный"""
        lattice = SolutionLattice.from_result(find_any_solution(Equation(a=-2, b=3, c=1)))
        assert lattice.describe() == "x = 1 + 3k, y = 1 + 2k"

    def test_describe_constant_axis(self) -> None:
        """0·x + 5y = 10: y постоянен, слагаемое с k опускается"""
        lattice = SolutionLattice.from_result(find_any_solution(Equation(a=0, b=5, c=10)))
        assert lattice.describe() == "x = 0 + 1k, y = 2"

    def test_from_infeasible_raises(self) -> None:
        with pytest.raises(ValueError, match="infeasible"):
            SolutionLattice.from_result(find_any_solution(Equation(a=4, b=6, c=5)))

    def test_from_degenerate_raises(self) -> None:
        with pytest.raises(ValueError, match="degenerate"):
            SolutionLattice.from_result(find_any_solution(Equation(a=0, b=0, c=0)))
