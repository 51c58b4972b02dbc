"""AnySolutionFinder — частное решение a·x + b·y = c.

Единственный шлюз совместности для всех операций решётки:
1. a == b == 0 → DEGENERATE (направление решётки не определено)
2. g = gcd(|a|, |b|); c mod g != 0 → INFEASIBLE
3. x0 = xg·(c/g), y0 = yg·(c/g), затем коррекция знаков
4. Переполнение границы конфигурации → OVERFLOW

Все последующие компоненты сначала вызывают этот модуль и пропагируют
несовместность как "0 решений".
"""

import logging
from typing import Optional

from src.core.domain.equation import Equation, ReducedStep, Solution
from src.core.math.extended_gcd import extended_gcd
from src.core.math.integer_safeguards import (
    LatticeOverflowError,
    check_magnitude,
    checked_mul,
    floor_mod,
)
from src.solver.config import SolverConfig
from src.solver.results import AnySolutionResult, SolveStatus

logger = logging.getLogger(__name__)


def correct_signs(solution: Solution, a: int, b: int) -> Solution:
    """Коррекция знаков решения, полученного для (|a|, |b|).

    extended_gcd работает с модулями коэффициентов, поэтому x меняет знак
    при a < 0, а y при b < 0.
    """
    x = -solution.x if a < 0 else solution.x
    y = -solution.y if b < 0 else solution.y
    return Solution(x=x, y=y)


class AnySolutionFinder:
    """Поиск одного частного решения через расширенный алгоритм Евклида."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    def evaluate(self, equation: Equation) -> AnySolutionResult:
        """Частное решение уравнения или статус несовместности.

        Args:
            equation: уравнение a·x + b·y = c

        Returns:
            AnySolutionResult (FEASIBLE / INFEASIBLE / DEGENERATE / OVERFLOW)
        """
        a, b, c = equation.a, equation.b, equation.c

        if equation.is_degenerate:
            return self._reject(
                equation,
                SolveStatus.DEGENERATE,
                "degenerate_equation",
                f"{equation}: a = b = 0, lattice direction undefined",
            )

        bound = self.config.max_magnitude
        try:
            for name, value in (("a", a), ("b", b), ("c", c)):
                check_magnitude(value, bound, f"input {name}")

            bezout = extended_gcd(abs(a), abs(b))
            g = bezout.g

            # floor_mod корректен для отрицательного c
            if floor_mod(c, g) != 0:
                logger.debug("infeasible: %s, gcd=%d does not divide c", equation, g)
                return self._reject(
                    equation,
                    SolveStatus.INFEASIBLE,
                    "gcd_does_not_divide_c",
                    f"{equation}: gcd(|a|, |b|) = {g} does not divide {c}",
                )

            # g | c: деление точное, // не искажает знак
            scale = c // g
            raw = Solution(
                x=checked_mul(bezout.x, scale, bound),
                y=checked_mul(bezout.y, scale, bound),
            )
        except LatticeOverflowError as exc:
            logger.debug("overflow while solving %s: %s", equation, exc)
            return self._reject(equation, SolveStatus.OVERFLOW, "integer_overflow", str(exc))

        solution = correct_signs(raw, a, b)
        step = ReducedStep.from_equation(equation, g)
        logger.debug("particular solution of %s: (%d, %d), g=%d", equation, solution.x, solution.y, g)

        return AnySolutionResult(
            status=SolveStatus.FEASIBLE,
            equation=equation,
            solution=solution,
            g=g,
            step=step,
            reason="",
            details=f"x0={solution.x}, y0={solution.y}, g={g}",
        )

    @staticmethod
    def _reject(
        equation: Equation, status: SolveStatus, reason: str, details: str
    ) -> AnySolutionResult:
        return AnySolutionResult(
            status=status,
            equation=equation,
            solution=None,
            g=None,
            step=None,
            reason=reason,
            details=details,
        )


def find_any_solution(
    equation: Equation, config: Optional[SolverConfig] = None
) -> AnySolutionResult:
    """Частное решение a·x + b·y = c (см. AnySolutionFinder)."""
    return AnySolutionFinder(config).evaluate(equation)
