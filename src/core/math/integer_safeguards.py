"""
Integer Safeguards — Exact Integer Primitives

Модуль обеспечивает точную целочисленную арифметику для решётки решений:
- Знак числа и деление с усечением к нулю (trunc_div)
- Математически корректный остаток (floor modulus) для отрицательных c
- Арифметика с контролем переполнения относительно заданной границы
- Валидация целочисленных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление всегда усекает к нулю (не floor), независимо от знаков операндов
2. Переполнение никогда не "заворачивается" молча (LatticeOverflowError)
3. bool не принимается как целое число
4. Все операции детерминированы и воспроизводимы
"""

from typing import Final, Optional

# =============================================================================
# ГРАНИЦЫ ЦЕЛЫХ ЧИСЕЛ
# =============================================================================

# Максимум знакового 32-битного целого
INT32_MAX: Final[int] = 2**31 - 1

# Максимум знакового 64-битного целого
# Используется для выдачи результатов потребителям с фиксированной шириной
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LatticeOverflowError(ArithmeticError):
    """
    Промежуточный результат вышел за допустимую границу модуля.

    Поднимается только слоем checked-арифметики. Публичные операции
    решателя перехватывают его и возвращают результат со статусом OVERFLOW.
    """

    def __init__(self, operation: str, value: int, bound: int):
        self.operation = operation
        self.value = value
        self.bound = bound
        super().__init__(
            f"Integer overflow in {operation}: |{value}| exceeds bound {bound}"
        )


# =============================================================================
# ЗНАК И ДЕЛЕНИЕ
# =============================================================================


def sign(value: int) -> int:
    """
    Знак целого числа: -1, 0 или +1.

    Examples:
        >>> sign(-7)
        -1
        >>> sign(0)
        0
        >>> sign(3)
        1
    """
    return (value > 0) - (value < 0)


def direction(value: int) -> int:
    """
    Направление шага решётки: +1 для положительных, -1 иначе.

    В отличие от sign(), ноль даёт -1 (направление никогда не нулевое).
    """
    return 1 if value > 0 else -1


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python-оператор // округляет к минус бесконечности, поэтому для
    операндов разных знаков результат отличается на единицу. Граничные
    сдвиги решётки рассчитаны именно на усечение к нулю.

    Args:
        numerator: Делимое
        denominator: Делитель (ненулевой)

    Returns:
        Частное, усечённое к нулю

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, -2)
        -3
        >>> trunc_div(-7, -2)
        3
    """
    if denominator == 0:
        raise ZeroDivisionError("trunc_div denominator is zero")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def floor_mod(value: int, modulus: int) -> int:
    """
    Математический остаток: результат всегда в [0, |modulus|).

    Корректен для отрицательного value (в отличие от усекающего остатка).

    Examples:
        >>> floor_mod(-5, 2)
        1
        >>> floor_mod(5, -3)
        2
    """
    if modulus == 0:
        raise ZeroDivisionError("floor_mod modulus is zero")
    return value % abs(modulus)


# =============================================================================
# CHECKED-АРИФМЕТИКА
# =============================================================================


def check_magnitude(value: int, bound: Optional[int], operation: str = "value") -> int:
    """
    Проверка, что |value| не превышает bound.

    Args:
        value: Проверяемое значение
        bound: Граница модуля (None = без ограничений)
        operation: Имя операции для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        LatticeOverflowError: Если |value| > bound
    """
    if bound is not None and abs(value) > bound:
        raise LatticeOverflowError(operation, value, bound)
    return value


def checked_add(a: int, b: int, bound: Optional[int] = None) -> int:
    """Сложение с контролем переполнения."""
    return check_magnitude(a + b, bound, "add")


def checked_sub(a: int, b: int, bound: Optional[int] = None) -> int:
    """Вычитание с контролем переполнения."""
    return check_magnitude(a - b, bound, "sub")


def checked_mul(a: int, b: int, bound: Optional[int] = None) -> int:
    """
    Умножение с контролем переполнения.

    Examples:
        >>> checked_mul(3, 4, bound=100)
        12
        >>> checked_mul(2**40, 2**40, bound=INT64_MAX)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        LatticeOverflowError: ...
    """
    return check_magnitude(a * b, bound, "mul")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_strict_int(value: object) -> bool:
    """True если value является int (bool исключается)."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_int(value: object, name: str) -> None:
    """
    Валидация, что значение является целым числом.

    Raises:
        TypeError: Если value не int (или bool)
    """
    if not is_strict_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_non_negative_int(value: object, name: str) -> None:
    """
    Валидация, что значение неотрицательное целое.

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 0
    """
    validate_int(value, name)
    if value < 0:  # type: ignore[operator]
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_bound(bound: Optional[int]) -> None:
    """
    Валидация границы модуля для checked-арифметики.

    Raises:
        ValueError: Если bound задан и не положителен
    """
    if bound is None:
        return
    validate_int(bound, "max_magnitude")
    if bound <= 0:
        raise ValueError(f"max_magnitude must be positive, got {bound}")
