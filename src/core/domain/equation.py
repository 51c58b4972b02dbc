"""
Equation — Модель линейного диофантова уравнения a·x + b·y = c

Immutable Pydantic модели значений: уравнение, решение и приведённый шаг
решётки. Ни одна сущность не живёт дольше одного вызова решателя.
"""

from pydantic import BaseModel, Field, StrictInt


# =============================================================================
# SOLUTION MODEL
# =============================================================================


class Solution(BaseModel):
    """Пара целых (x, y), удовлетворяющая конкретному уравнению."""

    x: StrictInt = Field(..., description="Значение x")
    y: StrictInt = Field(..., description="Значение y")

    model_config = {"frozen": True}  # Immutable

    @property
    def total(self) -> int:
        """Сумма x + y (целевая функция MinSumSolutionFinder)."""
        return self.x + self.y

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


# =============================================================================
# EQUATION MODEL
# =============================================================================


class Equation(BaseModel):
    """
    Линейное диофантово уравнение a·x + b·y = c.

    Вырожденный случай a == b == 0 допускается моделью (is_degenerate),
    но отклоняется всеми операциями решётки со статусом DEGENERATE.
    """

    a: StrictInt = Field(..., description="Коэффициент при x")
    b: StrictInt = Field(..., description="Коэффициент при y")
    c: StrictInt = Field(..., description="Правая часть")

    model_config = {"frozen": True}  # Immutable

    @property
    def is_degenerate(self) -> bool:
        """a == 0 и b == 0: направление решётки не определено."""
        return self.a == 0 and self.b == 0

    def evaluate(self, x: int, y: int) -> int:
        """Левая часть a·x + b·y."""
        return self.a * x + self.b * y

    def is_satisfied_by(self, solution: Solution) -> bool:
        """Проверка a·x + b·y == c для решения."""
        return self.evaluate(solution.x, solution.y) == self.c

    def __str__(self) -> str:
        return f"{self.a}*x + {self.b}*y = {self.c}"


# =============================================================================
# REDUCED STEP MODEL
# =============================================================================


class ReducedStep(BaseModel):
    """
    Приведённый шаг решётки (step_x, step_y) = (b/g, a/g).

    Соседние решения отличаются на (+step_x, -step_y).
    """

    step_x: StrictInt = Field(..., description="b / g (знак сохраняется)")
    step_y: StrictInt = Field(..., description="a / g (знак сохраняется)")

    model_config = {"frozen": True}  # Immutable

    @property
    def a_reduced(self) -> int:
        return self.step_y

    @property
    def b_reduced(self) -> int:
        return self.step_x

    @classmethod
    def from_equation(cls, equation: Equation, g: int) -> "ReducedStep":
        """
        Приведённый шаг для уравнения и его gcd.

        Raises:
            ValueError: Если g не положителен или не делит a и b
        """
        if g <= 0:
            raise ValueError(f"gcd must be positive, got {g}")
        if equation.a % g != 0 or equation.b % g != 0:
            raise ValueError(f"{g} does not divide both coefficients of {equation}")
        # Точное деление: g | a и g | b, поэтому // не теряет знак
        return cls(step_x=equation.b // g, step_y=equation.a // g)
