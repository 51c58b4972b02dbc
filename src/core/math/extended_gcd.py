"""
Extended GCD — Bézout Coefficients

Расширенный алгоритм Евклида для неотрицательных целых:
    a·x + b·y = g,  g = gcd(a, b)

Реализация итеративная (без ограничения глубины рекурсии), но возвращает
ровно те же коэффициенты, что и классическая рекурсия по (b mod a, a):
    egcd(0, b) = (b, 0, 1)
    egcd(a, b) = (g, y1 - (b // a)·x1, x1),  где (g, x1, y1) = egcd(b mod a, a)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a·x + b·y == g для любых a, b ≥ 0
2. g == gcd(a, b) ≥ 0; g == 0 только при a == b == 0
3. Отрицательные входы отклоняются (вызывающий берёт abs и исправляет знак)
"""

from typing import NamedTuple

from src.core.math.integer_safeguards import validate_int, validate_non_negative_int


class BezoutResult(NamedTuple):
    """Результат расширенного алгоритма Евклида: a·x + b·y = g."""

    g: int
    x: int
    y: int


def extended_gcd(a: int, b: int) -> BezoutResult:
    """
    Расширенный алгоритм Евклида.

    Args:
        a: Неотрицательное целое
        b: Неотрицательное целое

    Returns:
        BezoutResult(g, x, y) с a·x + b·y == g

    Raises:
        TypeError: Если a или b не int
        ValueError: Если a или b отрицательны

    Examples:
        >>> extended_gcd(2, 3)
        BezoutResult(g=1, x=-1, y=1)
        >>> extended_gcd(0, 5)
        BezoutResult(g=5, x=0, y=1)
        >>> extended_gcd(4, 6)
        BezoutResult(g=2, x=-1, y=1)
    """
    validate_non_negative_int(a, "a")
    validate_non_negative_int(b, "b")

    # Прямой проход: частные для каждого шага (b mod a, a)
    quotients: list[int] = []
    while a != 0:
        quotients.append(b // a)
        a, b = b % a, a

    # Базовый случай a == 0 → (b, 0, 1), затем обратная подстановка
    x, y = 0, 1
    for q in reversed(quotients):
        x, y = y - q * x, x

    return BezoutResult(g=b, x=x, y=y)


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель для целых любого знака.

    Examples:
        >>> gcd(-4, 6)
        2
        >>> gcd(0, 0)
        0
    """
    validate_int(a, "a")
    validate_int(b, "b")
    return extended_gcd(abs(a), abs(b)).g
