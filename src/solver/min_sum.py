"""MinSumSolutionFinder — решение в боксе с минимальной суммой x + y.

Вдоль решётки сумма меняется линейно по параметру k:
    (x + k·b') + (y - k·a') = (x + y) + k·(b' - a')

- a' < b': сумма растёт с k → минимум при наименьшем допустимом k
- a' > b': сумма убывает с k → минимум при наибольшем допустимом k
- a' == b': все допустимые решения имеют одну и ту же сумму

Допустимый диапазон k берётся из IntervalSolutionCounter: крайние решения
first/last бокса, перечисление от first к last идёт шагами k_step.
"""

import logging
from typing import Optional

from src.core.domain.equation import Equation, Solution
from src.core.domain.interval import Interval
from src.solver.config import SolverConfig
from src.solver.interval_counter import IntervalSolutionCounter
from src.solver.results import IntervalCountResult, SolveStatus, SumObjective, SumOptimumResult

logger = logging.getLogger(__name__)


class MinSumSolutionFinder:
    """Выбор решения с экстремальной суммой x + y внутри бокса."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self._counter = IntervalSolutionCounter(self.config)

    def evaluate(
        self,
        equation: Equation,
        x_range: Interval,
        y_range: Interval,
        objective: SumObjective = SumObjective.MIN,
    ) -> SumOptimumResult:
        """Решение с минимальной (или максимальной) суммой x + y.

        Args:
            equation: уравнение a·x + b·y = c
            x_range: допустимый интервал x
            y_range: допустимый интервал y
            objective: MIN (по умолчанию) или MAX

        Returns:
            SumOptimumResult; solution == None, если в боксе нет решений
        """
        box = self._counter.evaluate(equation, x_range, y_range)
        if not box.has_solutions:
            return SumOptimumResult(
                status=box.status,
                objective=objective,
                equation=equation,
                solution=None,
                candidates_count=0,
                reason=box.reason,
                details=box.details,
            )

        solution = self._select(box, objective)
        logger.debug(
            "%s sum of %s in %s x %s: (%d, %d), total=%d",
            objective.value, equation, x_range, y_range, solution.x, solution.y, solution.total,
        )
        return SumOptimumResult(
            status=SolveStatus.FEASIBLE,
            objective=objective,
            equation=equation,
            solution=solution,
            candidates_count=box.count,
            reason="",
            details=f"x={solution.x}, y={solution.y}, x+y={solution.total} among {box.count} solution(s)",
        )

    @staticmethod
    def _select(box: IntervalCountResult, objective: SumObjective) -> Solution:
        a_r, b_r = box.step.a_reduced, box.step.b_reduced

        # Изменение суммы за один шаг перечисления first → last
        slope = (b_r - a_r) * box.k_step
        if objective == SumObjective.MAX:
            slope = -slope

        # slope > 0: сумма растёт от first к last → оптимум в first
        # slope == 0: сумма постоянна, подходит любое решение
        if slope < 0:
            return box.last
        return box.first


def find_min_sum_solution(
    equation: Equation,
    x_range: Interval,
    y_range: Interval,
    config: Optional[SolverConfig] = None,
) -> SumOptimumResult:
    """Решение в боксе с минимальной суммой x + y."""
    return MinSumSolutionFinder(config).evaluate(equation, x_range, y_range, SumObjective.MIN)


def find_max_sum_solution(
    equation: Equation,
    x_range: Interval,
    y_range: Interval,
    config: Optional[SolverConfig] = None,
) -> SumOptimumResult:
    """Решение в боксе с максимальной суммой x + y."""
    return MinSumSolutionFinder(config).evaluate(equation, x_range, y_range, SumObjective.MAX)
