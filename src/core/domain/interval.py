"""
Interval — Замкнутый целочисленный интервал [lo, hi]

Immutable Pydantic модель. Пустой интервал моделью не представляется:
пересечение без общих точек возвращает None.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt, model_validator


class Interval(BaseModel):
    """Замкнутый интервал целых [lo, hi], lo <= hi."""

    lo: StrictInt = Field(..., description="Нижняя граница (включительно)")
    hi: StrictInt = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_order(self) -> "Interval":
        if self.lo > self.hi:
            raise ValueError(f"interval lower bound {self.lo} exceeds upper bound {self.hi}")
        return self

    @classmethod
    def of(cls, lo: int, hi: int) -> "Interval":
        """Короткий конструктор: Interval.of(0, 10)."""
        return cls(lo=lo, hi=hi)

    @property
    def length(self) -> int:
        """Количество целых точек в интервале."""
        return self.hi - self.lo + 1

    def contains(self, value: int) -> bool:
        return self.lo <= value <= self.hi

    def intersect(self, other: "Interval") -> Optional["Interval"]:
        """Пересечение интервалов или None, если оно пусто."""
        lo = max(self.lo, other.lo)
        hi = min(self.hi, other.hi)
        if lo > hi:
            return None
        return Interval(lo=lo, hi=hi)

    def __str__(self) -> str:
        return f"[{self.lo}, {self.hi}]"
