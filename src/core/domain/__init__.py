"""
Domain models and value objects.

Contains the immutable value types of the lattice solver:
Equation, Solution, ReducedStep, Interval.
"""

from src.core.domain.equation import Equation, ReducedStep, Solution
from src.core.domain.interval import Interval

__all__ = [
    # Equation module
    "Equation",
    "Solution",
    "ReducedStep",
    # Interval module
    "Interval",
]
