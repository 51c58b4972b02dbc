"""Результаты операций решателя.

Все ошибки предметной области (несовместность, вырожденность, переполнение,
пустой бокс) возвращаются как значения со статусом, а не как исключения,
чтобы операции можно было компоновать ("посчитать, затем перечислить").
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional

from src.core.domain.equation import Equation, ReducedStep, Solution
from src.core.domain.interval import Interval
from src.solver.shift import shift_solution


class SolveStatus(str, Enum):
    """Статус операции решателя."""
    FEASIBLE = "feasible"
    INFEASIBLE = "infeasible"
    DEGENERATE = "degenerate"
    OVERFLOW = "overflow"
    EMPTY_BOX = "empty_box"


class SumObjective(str, Enum):
    """Направление оптимизации x + y."""
    MIN = "min"
    MAX = "max"


def _equation_contract(equation: Equation) -> Dict[str, int]:
    return {"a": equation.a, "b": equation.b, "c": equation.c}


def _solution_contract(solution: Optional[Solution]) -> Optional[Dict[str, int]]:
    if solution is None:
        return None
    return {"x": solution.x, "y": solution.y}


def _interval_contract(interval: Interval) -> Dict[str, int]:
    return {"lo": interval.lo, "hi": interval.hi}


@dataclass(frozen=True)
class AnySolutionResult:
    """Результат AnySolutionFinder."""

    status: SolveStatus
    equation: Equation

    # Заполнены только при FEASIBLE
    solution: Optional[Solution]
    g: Optional[int]
    step: Optional[ReducedStep]

    # Диагностика
    reason: str
    details: str

    @property
    def is_feasible(self) -> bool:
        return self.status == SolveStatus.FEASIBLE

    def to_contract(self) -> Dict[str, Any]:
        return {
            "kind": "any_solution",
            "status": self.status.value,
            "equation": _equation_contract(self.equation),
            "solution": _solution_contract(self.solution),
            "g": self.g,
            "reason": self.reason,
            "details": self.details,
        }


@dataclass(frozen=True)
class IntervalCountResult:
    """Результат IntervalSolutionCounter.

    Решения внутри бокса: first, затем сдвиги на k_step, ..., всего count штук
    (last == сдвиг first на (count - 1)·k_step).
    """

    status: SolveStatus
    equation: Equation
    x_range: Interval
    y_range: Interval

    count: int

    # Границы по x пересечения (lx <= rx), None если решений нет
    lx: Optional[int]
    rx: Optional[int]

    # Крайние решения и направление перечисления
    first: Optional[Solution]
    last: Optional[Solution]
    step: Optional[ReducedStep]
    k_step: int

    # Диагностика
    reason: str
    details: str

    @property
    def has_solutions(self) -> bool:
        return self.count > 0

    def solutions(self) -> Iterator[Solution]:
        """Генератор всех решений в боксе (по возрастанию свободной координаты)."""
        if self.count == 0 or self.first is None or self.step is None:
            return
        current = self.first
        for _ in range(self.count):
            yield current
            current = shift_solution(
                current, self.step.a_reduced, self.step.b_reduced, self.k_step
            )

    def to_contract(self) -> Dict[str, Any]:
        return {
            "kind": "interval_count",
            "status": self.status.value,
            "equation": _equation_contract(self.equation),
            "x_range": _interval_contract(self.x_range),
            "y_range": _interval_contract(self.y_range),
            "count": self.count,
            "lx": self.lx,
            "rx": self.rx,
            "solution": _solution_contract(self.first),
            "reason": self.reason,
            "details": self.details,
        }


@dataclass(frozen=True)
class SumOptimumResult:
    """Результат MinSumSolutionFinder (или поиска максимума суммы)."""

    status: SolveStatus
    objective: SumObjective
    equation: Equation

    solution: Optional[Solution]
    candidates_count: int

    # Диагностика
    reason: str
    details: str

    @property
    def is_feasible(self) -> bool:
        return self.status == SolveStatus.FEASIBLE

    @property
    def total(self) -> Optional[int]:
        if self.solution is None:
            return None
        return self.solution.total

    def to_contract(self) -> Dict[str, Any]:
        return {
            "kind": "sum_optimum",
            "status": self.status.value,
            "objective": self.objective.value,
            "equation": _equation_contract(self.equation),
            "solution": _solution_contract(self.solution),
            "count": self.candidates_count,
            "reason": self.reason,
            "details": self.details,
        }
