"""
Contract Validation Module

Модуль для валидации JSON контрактов решателя (запросы и результаты).
"""

from .validators import (
    ContractValidator,
    LatticeQuery,
    LatticeQueryValidator,
    LatticeResultValidator,
    SchemaLoader,
    parse_lattice_query,
    validate_lattice_query,
    validate_lattice_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LatticeQueryValidator",
    "LatticeResultValidator",
    "LatticeQuery",
    # Functions
    "validate_lattice_query",
    "validate_lattice_result",
    "parse_lattice_query",
]
