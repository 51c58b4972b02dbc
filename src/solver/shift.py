"""SolutionShifter — сдвиг решения вдоль решётки.

Для приведённых коэффициентов a' = a/g, b' = b/g:
    shift((x, y), k) = (x + k·b', y - k·a')

Сдвиг сохраняет a·x + b·y = c только если a', b' приведены тем же g,
из которого получено (x, y). Границы не проверяются; переполнение
контролируется через SolverConfig.max_magnitude.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from src.core.domain.equation import Equation, ReducedStep, Solution
from src.core.math.integer_safeguards import checked_add, checked_mul, checked_sub
from src.solver.config import SolverConfig

if TYPE_CHECKING:
    from src.solver.results import AnySolutionResult


def shift_solution(
    solution: Solution,
    a_reduced: int,
    b_reduced: int,
    k: int,
    config: Optional[SolverConfig] = None,
) -> Solution:
    """Новое решение через k шагов решётки: (x + k·b', y - k·a').

    Args:
        solution: исходное решение
        a_reduced: a / g (знак сохраняется)
        b_reduced: b / g (знак сохраняется)
        k: число шагов (любого знака)
        config: конфигурация (граница переполнения)

    Returns:
        Новое решение

    Raises:
        LatticeOverflowError: если промежуточное значение превышает max_magnitude
    """
    bound = config.max_magnitude if config is not None else None
    x = checked_add(solution.x, checked_mul(k, b_reduced, bound), bound)
    y = checked_sub(solution.y, checked_mul(k, a_reduced, bound), bound)
    return Solution(x=x, y=y)


def shift_by_step(
    solution: Solution,
    step: ReducedStep,
    k: int,
    config: Optional[SolverConfig] = None,
) -> Solution:
    """shift_solution с шагом в виде ReducedStep."""
    return shift_solution(solution, step.a_reduced, step.b_reduced, k, config)


@dataclass(frozen=True)
class SolutionLattice:
    """Общее решение уравнения: x = x0 + k·b', y = y0 - k·a', k ∈ Z."""

    equation: Equation
    base: Solution
    step: ReducedStep

    @classmethod
    def from_result(cls, result: "AnySolutionResult") -> "SolutionLattice":
        """
        Решётка из результата AnySolutionFinder.

        Raises:
            ValueError: если результат не FEASIBLE
        """
        if not result.is_feasible or result.solution is None or result.step is None:
            raise ValueError(
                f"Cannot build lattice from {result.status.value} result: {result.details}"
            )
        return cls(equation=result.equation, base=result.solution, step=result.step)

    def at(self, k: int, config: Optional[SolverConfig] = None) -> Solution:
        """k-я точка решётки (k = 0 даёт base)."""
        return shift_by_step(self.base, self.step, k, config)

    def parameter_of(self, x: Optional[int] = None, y: Optional[int] = None) -> Optional[int]:
        """Параметр k точки решётки с заданной координатой.

        Ровно одна из координат должна быть задана.

        Returns:
            k или None, если значение не лежит на решётке

        Raises:
            ValueError: если задано не ровно одно значение или координата
                постоянна на решётке (шаг по ней нулевой)
        """
        if (x is None) == (y is None):
            raise ValueError("exactly one of x or y must be given")

        if x is not None:
            delta, step, axis = x - self.base.x, self.step.step_x, "x"
        else:
            delta, step, axis = self.base.y - y, self.step.step_y, "y"

        if step == 0:
            raise ValueError(f"{axis} is constant on this lattice")
        if delta % step != 0:
            return None
        return delta // step

    def contains(self, solution: Solution) -> bool:
        return self.equation.is_satisfied_by(solution)

    def describe(self) -> str:
        """Текстовая параметризация, например 'x = -1 + 3k, y = 1 - 2k'.

        Нулевой шаг опускается: для 0·x + 5y = 10 получится 'x = 0 + 1k, y = 2'.
        """
        return (
            f"x = {self.base.x}{_format_term(self.step.step_x)}, "
            f"y = {self.base.y}{_format_term(-self.step.step_y)}"
        )


def _format_term(coefficient: int) -> str:
    """Слагаемое ' + 3k' / ' - 3k' (пустое для нулевого коэффициента)."""
    if coefficient == 0:
        return ""
    operator = "-" if coefficient < 0 else "+"
    return f" {operator} {abs(coefficient)}k"
