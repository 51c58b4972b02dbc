"""Solver — решение линейных диофантовых уравнений a·x + b·y = c.

Компоненты (от листьев):
- AnySolutionFinder: частное решение или несовместность
- SolutionShifter: сдвиг вдоль решётки, общее решение
- IntervalSolutionCounter: подсчёт и перечисление решений в боксе
- MinSumSolutionFinder: решение в боксе с минимальной суммой x + y
"""

from .any_solution import AnySolutionFinder, correct_signs, find_any_solution
from .config import DEFAULT_CONFIG, INT32_CONFIG, INT64_CONFIG, SolverConfig
from .interval_counter import IntervalSolutionCounter, count_solutions
from .min_sum import MinSumSolutionFinder, find_max_sum_solution, find_min_sum_solution
from .results import (
    AnySolutionResult,
    IntervalCountResult,
    SolveStatus,
    SumObjective,
    SumOptimumResult,
)
from .shift import SolutionLattice, shift_by_step, shift_solution

__all__ = [
    # Config
    "SolverConfig",
    "DEFAULT_CONFIG",
    "INT32_CONFIG",
    "INT64_CONFIG",
    # Results
    "SolveStatus",
    "SumObjective",
    "AnySolutionResult",
    "IntervalCountResult",
    "SumOptimumResult",
    # AnySolutionFinder
    "AnySolutionFinder",
    "correct_signs",
    "find_any_solution",
    # SolutionShifter
    "SolutionLattice",
    "shift_solution",
    "shift_by_step",
    # IntervalSolutionCounter
    "IntervalSolutionCounter",
    "count_solutions",
    # MinSumSolutionFinder
    "MinSumSolutionFinder",
    "find_min_sum_solution",
    "find_max_sum_solution",
]
