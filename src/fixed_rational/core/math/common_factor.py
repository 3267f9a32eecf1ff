"""
Common Factor — Целочисленные примитивы

Модуль содержит базовые функции для работы с делителями целых чисел:
- int_abs: модуль знакового целого
- gcd / lcm: наибольший общий делитель и наименьшее общее кратное
- trunc_div / trunc_mod: деление и остаток с усечением к нулю

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(a, b) >= 0 для любых знаковых входов
2. gcd(a, 0) == abs(a), gcd(0, 0) == 0
3. lcm(a, 0) == 0 (деление на ноль никогда не происходит)
4. trunc_div / trunc_mod округляют к нулю (остаток имеет знак делимого)
"""

import numbers
from functools import reduce
from typing import Iterable


def _require_integral(value, name: str) -> int:
    # bool is an Integral too; it is accepted like the int it is
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def int_abs(value: int) -> int:
    """
    Модуль знакового целого.

    Examples:
        >>> int_abs(2)
        2
        >>> int_abs(-2)
        2
    """
    value = _require_integral(value, "value")
    return value if value >= 0 else -value


def trunc_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Оператор // в Python округляет к минус бесконечности; здесь частное
    всегда усекается к нулю.

    Raises:
        ZeroDivisionError: если b == 0

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
    """
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = int_abs(a) // int_abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def trunc_mod(a: int, b: int) -> int:
    """
    Остаток от деления с усечением к нулю (знак остатка совпадает со знаком a).

    Examples:
        >>> trunc_mod(116, 50)
        16
        >>> trunc_mod(-7, 2)
        -1
    """
    return a - b * trunc_div(a, b)


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Результат всегда неотрицательный, в том числе для пар отрицательных
    чисел. gcd(a, 0) == abs(a), поэтому gcd(0, 0) == 0.

    Args:
        a: Первое знаковое целое
        b: Второе знаковое целое

    Returns:
        Неотрицательный НОД

    Examples:
        >>> gcd(12 * 9 * 125, 3 * 25 * 7 * 11)
        75
        >>> gcd(-12, 8)
        4
        >>> gcd(7, 0)
        7
    """
    a = _require_integral(a, "a")
    b = _require_integral(b, "b")

    while b != 0:
        a, b = b, trunc_mod(a, b)

    return int_abs(a)


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное: abs(a * b) / gcd(a, b).

    Если один из аргументов равен 0, возвращается 0.

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(-4, 6)
        12
        >>> lcm(5, 0)
        0
    """
    a = _require_integral(a, "a")
    b = _require_integral(b, "b")

    if a == 0 or b == 0:
        return 0

    # Делим до умножения, чтобы не раздувать промежуточное значение
    return int_abs(a // gcd(a, b) * b)


def gcd_many(values: Iterable[int]) -> int:
    """НОД последовательности целых (0 для пустой последовательности)."""
    return reduce(gcd, values, 0)
