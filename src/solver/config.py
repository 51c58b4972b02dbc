"""Конфигурация решателя линейных диофантовых уравнений."""

from dataclasses import dataclass
from typing import Optional

from src.core.math.integer_safeguards import INT32_MAX, INT64_MAX, validate_bound


@dataclass(frozen=True)
class SolverConfig:
    """Конфигурация решателя.

    max_magnitude:
    - None: целые Python без ограничений (переполнение невозможно)
    - N: любой промежуточный результат с |v| > N даёт статус OVERFLOW
      (для передачи результатов потребителям с фиксированной шириной)
    """
    max_magnitude: Optional[int] = None

    def __post_init__(self):
        validate_bound(self.max_magnitude)


DEFAULT_CONFIG = SolverConfig()
INT32_CONFIG = SolverConfig(max_magnitude=INT32_MAX)
INT64_CONFIG = SolverConfig(max_magnitude=INT64_MAX)
