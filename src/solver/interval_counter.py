"""IntervalSolutionCounter — решения a·x + b·y = c внутри бокса.

Ищутся решения с x ∈ [minX, maxX] и y ∈ [minY, maxY]:
1. Частное решение (AnySolutionFinder); несовместность → 0
2. a' = a/g, b' = b/g (знаки сохраняются)
3. lx1/rx1: крайние x решётки внутри [minX, maxX]
4. lx2/rx2: x, соответствующие крайним y внутри [minY, maxY]
   (сдвиг по y двигает x в противоположную сторону, поэтому возможен swap)
5. lx = max(lx1, lx2), rx = min(rx1, rx2); count = (rx - lx)/|b'| + 1

Деление при подгонке к границе усекает к нулю (trunc_div): сдвиг никогда
не перескакивает границу, а недолёт исправляется одним шагом решётки.

Если один из приведённых коэффициентов равен нулю, решётка параллельна оси:
одна координата фиксирована, другая пробегает весь свой интервал.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.domain.equation import Equation, ReducedStep, Solution
from src.core.domain.interval import Interval
from src.core.math.integer_safeguards import (
    LatticeOverflowError,
    check_magnitude,
    checked_sub,
    direction,
    trunc_div,
)
from src.solver.any_solution import AnySolutionFinder
from src.solver.config import SolverConfig
from src.solver.results import IntervalCountResult, SolveStatus
from src.solver.shift import shift_solution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _LatticeBox:
    """Найденная часть решётки внутри бокса."""
    lx: int
    rx: int
    first: Solution
    last: Solution
    k_step: int
    count: int


@dataclass(frozen=True)
class _EmptyBox:
    """Бокс не содержит точек решётки."""
    reason: str
    details: str


class IntervalSolutionCounter:
    """Подсчёт и перечисление решений внутри бокса [minX, maxX] × [minY, maxY]."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self._finder = AnySolutionFinder(self.config)

    def evaluate(
        self, equation: Equation, x_range: Interval, y_range: Interval
    ) -> IntervalCountResult:
        """Количество решений в боксе и данные для их перечисления.

        Args:
            equation: уравнение a·x + b·y = c
            x_range: допустимый интервал x (включительно)
            y_range: допустимый интервал y (включительно)

        Returns:
            IntervalCountResult; count == 0 при любом не-FEASIBLE статусе
        """
        particular = self._finder.evaluate(equation)
        if not particular.is_feasible:
            return self._empty(
                equation, x_range, y_range, particular.status, particular.reason, particular.details
            )

        step = particular.step

        try:
            bound = self.config.max_magnitude
            for name, interval in (("x_range", x_range), ("y_range", y_range)):
                check_magnitude(interval.lo, bound, f"{name}.lo")
                check_magnitude(interval.hi, bound, f"{name}.hi")

            if step.b_reduced == 0:
                scan = self._scan_fixed_x(particular.solution, step, x_range, y_range)
            elif step.a_reduced == 0:
                scan = self._scan_fixed_y(particular.solution, step, x_range, y_range)
            else:
                scan = self._scan(particular.solution, step, x_range, y_range)

            if isinstance(scan, _LatticeBox):
                check_magnitude(scan.count, bound, "count")
        except LatticeOverflowError as exc:
            logger.debug("overflow while counting %s: %s", equation, exc)
            return self._empty(
                equation, x_range, y_range, SolveStatus.OVERFLOW, "integer_overflow", str(exc)
            )

        if isinstance(scan, _EmptyBox):
            logger.debug("no solutions of %s in %s x %s: %s", equation, x_range, y_range, scan.reason)
            return self._empty(
                equation, x_range, y_range, SolveStatus.EMPTY_BOX, scan.reason, scan.details
            )

        logger.debug(
            "%s: %d solution(s) in %s x %s, x in [%d, %d]",
            equation, scan.count, x_range, y_range, scan.lx, scan.rx,
        )
        return IntervalCountResult(
            status=SolveStatus.FEASIBLE,
            equation=equation,
            x_range=x_range,
            y_range=y_range,
            count=scan.count,
            lx=scan.lx,
            rx=scan.rx,
            first=scan.first,
            last=scan.last,
            step=step,
            k_step=scan.k_step,
            reason="",
            details=f"{scan.count} solution(s), x in [{scan.lx}, {scan.rx}]",
        )

    # -------------------------------------------------------------------------
    # Общий случай: a' != 0, b' != 0
    # -------------------------------------------------------------------------

    def _scan(
        self, base: Solution, step: ReducedStep, x_range: Interval, y_range: Interval
    ) -> "_LatticeBox | _EmptyBox":
        a_r, b_r = step.a_reduced, step.b_reduced
        sign_a = direction(a_r)
        sign_b = direction(b_r)
        bound = self.config.max_magnitude

        def shift(solution: Solution, k: int) -> Solution:
            return shift_solution(solution, a_r, b_r, k, self.config)

        # lx1: минимальный x решётки >= minX
        sol = shift(base, trunc_div(checked_sub(x_range.lo, base.x, bound), b_r))
        if sol.x < x_range.lo:
            sol = shift(sol, sign_b)
        if sol.x > x_range.hi:
            return _EmptyBox(
                "x_range_misses_lattice",
                f"no lattice x in {x_range}: nearest is {sol.x}",
            )
        lx1 = sol.x

        # rx1: максимальный x решётки <= maxX
        sol = shift(sol, trunc_div(checked_sub(x_range.hi, sol.x, bound), b_r))
        if sol.x > x_range.hi:
            sol = shift(sol, -sign_b)
        rx1 = sol.x

        # lx2: x для минимального y решётки >= minY
        sol = shift(sol, -trunc_div(checked_sub(y_range.lo, sol.y, bound), a_r))
        if sol.y < y_range.lo:
            sol = shift(sol, -sign_a)
        if sol.y > y_range.hi:
            return _EmptyBox(
                "y_range_misses_lattice",
                f"no lattice y in {y_range}: nearest is {sol.y}",
            )
        lx2 = sol.x

        # rx2: x для максимального y решётки <= maxY
        sol = shift(sol, -trunc_div(checked_sub(y_range.hi, sol.y, bound), a_r))
        if sol.y > y_range.hi:
            sol = shift(sol, sign_a)
        rx2 = sol.x

        # y убывает по x при a'·b' > 0
        if lx2 > rx2:
            lx2, rx2 = rx2, lx2

        lx = max(lx1, lx2)
        rx = min(rx1, rx2)
        logger.debug("x bounds: x-range [%d, %d], y-range [%d, %d]", lx1, rx1, lx2, rx2)

        if lx > rx:
            return _EmptyBox(
                "ranges_disjoint",
                f"x from {x_range} is [{lx1}, {rx1}], x from {y_range} is [{lx2}, {rx2}]",
            )

        stride = abs(b_r)
        count = (rx - lx) // stride + 1
        first = shift(base, trunc_div(lx - base.x, b_r))
        last = shift(base, trunc_div(rx - base.x, b_r))
        return _LatticeBox(lx=lx, rx=rx, first=first, last=last, k_step=sign_b, count=count)

    # -------------------------------------------------------------------------
    # Решётки, параллельные оси
    # -------------------------------------------------------------------------

    def _scan_fixed_x(
        self, base: Solution, step: ReducedStep, x_range: Interval, y_range: Interval
    ) -> "_LatticeBox | _EmptyBox":
        # b' == 0 → a' == ±1: x = x0, y свободен
        if not x_range.contains(base.x):
            return _EmptyBox("fixed_x_outside_range", f"x is fixed at {base.x}, outside {x_range}")

        a_r = step.a_reduced
        first = shift_solution(base, a_r, 0, trunc_div(base.y - y_range.lo, a_r), self.config)
        last = shift_solution(base, a_r, 0, trunc_div(base.y - y_range.hi, a_r), self.config)
        return _LatticeBox(
            lx=base.x, rx=base.x, first=first, last=last, k_step=-direction(a_r), count=y_range.length
        )

    def _scan_fixed_y(
        self, base: Solution, step: ReducedStep, x_range: Interval, y_range: Interval
    ) -> "_LatticeBox | _EmptyBox":
        # a' == 0 → b' == ±1: y = y0, x свободен
        if not y_range.contains(base.y):
            return _EmptyBox("fixed_y_outside_range", f"y is fixed at {base.y}, outside {y_range}")

        b_r = step.b_reduced
        first = shift_solution(base, 0, b_r, trunc_div(x_range.lo - base.x, b_r), self.config)
        last = shift_solution(base, 0, b_r, trunc_div(x_range.hi - base.x, b_r), self.config)
        return _LatticeBox(
            lx=x_range.lo, rx=x_range.hi, first=first, last=last, k_step=direction(b_r), count=x_range.length
        )

    @staticmethod
    def _empty(
        equation: Equation,
        x_range: Interval,
        y_range: Interval,
        status: SolveStatus,
        reason: str,
        details: str,
    ) -> IntervalCountResult:
        return IntervalCountResult(
            status=status,
            equation=equation,
            x_range=x_range,
            y_range=y_range,
            count=0,
            lx=None,
            rx=None,
            first=None,
            last=None,
            step=None,
            k_step=0,
            reason=reason,
            details=details,
        )


def count_solutions(
    equation: Equation,
    x_range: Interval,
    y_range: Interval,
    config: Optional[SolverConfig] = None,
) -> IntervalCountResult:
    """Количество и перечисление решений в боксе (см. IntervalSolutionCounter)."""
    return IntervalSolutionCounter(config).evaluate(equation, x_range, y_range)
