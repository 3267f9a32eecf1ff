"""
Partial Division — Деление с предварительным сокращением

Модуль обеспечивает деление целых без переполнения промежуточных значений:
- partial_division: сокращение пары числитель/делитель на их НОД
- partial_division (последовательность): свёртка нескольких числителей
  против одного делителя с попарным сокращением ДО умножения
- naive_partial_division: путь без защиты от переполнения (сначала полное
  произведение, потом одно сокращение)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. partial_result / remaining_divisor == исходная дробь (математически)
2. remaining_divisor > 0 (знак переносится в partial_result)
3. full_division() точное ⇔ remaining_divisor == 1
4. Порядок свёртки влияет на величину промежуточных значений, но не на результат

ФОРМУЛЫ:
    g = gcd(numerator, divisor)
    partial_division(n, d) = {n / g, d / g}

    fold([n_1, ..., n_k], d):
        state_0 = {1, d}
        state_i = {p_{i-1} * (n_i / g_i), r_{i-1} / g_i},  g_i = gcd(n_i, r_{i-1})
"""

import numbers
from typing import NamedTuple, Sequence

from fixed_rational.core.math.common_factor import gcd, trunc_div
from fixed_rational.core.math.integer_types import IntegerType

# =============================================================================
# RESULT TYPE
# =============================================================================


class PartialDivisionResult(NamedTuple):
    """
    Дробь partial_result / remaining_divisor после сокращения на НОД.

    Attributes:
        partial_result: Сокращённый числитель (несёт знак дроби)
        remaining_divisor: Оставшийся делитель (всегда > 0)
    """

    partial_result: int
    remaining_divisor: int

    @property
    def is_exact(self) -> bool:
        """True если деление завершается без усечения."""
        return self.remaining_divisor == 1

    def full_division(self) -> int:
        """Завершение деления (усечение к нулю)."""
        return trunc_div(self.partial_result, self.remaining_divisor)

    def __str__(self) -> str:
        return f"{self.partial_result}/{self.remaining_divisor}"


# =============================================================================
# PARTIAL DIVISION
# =============================================================================


def _reduce_pair(numerator: int, divisor: int) -> PartialDivisionResult:
    if divisor == 0:
        raise ZeroDivisionError(f"partial division of {numerator} by zero")

    common_factor = gcd(numerator, divisor)
    partial_result = numerator // common_factor
    remaining_divisor = divisor // common_factor

    if remaining_divisor < 0:
        return PartialDivisionResult(-partial_result, -remaining_divisor)
    return PartialDivisionResult(partial_result, remaining_divisor)


def _check(int_type: IntegerType | None, value: int, context: str) -> int:
    if int_type is not None:
        int_type.check(value, context)
    return value


def partial_division(
    numerators: int | Sequence[int],
    divisor: int,
    int_type: IntegerType | None = None,
) -> PartialDivisionResult:
    """
    Частичное деление одного числителя или произведения числителей.

    Для одного числителя: сокращение пары на НОД.

    Для последовательности: свёртка, начиная с {1, divisor}. Каждый следующий
    числитель сокращается против ТЕКУЩЕГО оставшегося делителя, затем
    умножается на накопленный частичный результат. Так общий множитель
    сокращается до того, как будет сформировано полное произведение.

    Args:
        numerators: Числитель или последовательность числителей
        divisor: Делитель (не ноль)
        int_type: Если задан, каждое промежуточное произведение проверяется
            на попадание в диапазон этого типа

    Returns:
        PartialDivisionResult

    Raises:
        ZeroDivisionError: если divisor == 0
        IntegerOverflowError: если промежуточное произведение вне int_type

    Examples:
        >>> partial_division(18, 27)
        PartialDivisionResult(partial_result=2, remaining_divisor=3)
        >>> partial_division([4, 8], 12)
        PartialDivisionResult(partial_result=8, remaining_divisor=3)
        >>> partial_division([1, 18, 18], 5)
        PartialDivisionResult(partial_result=324, remaining_divisor=5)
    """
    if isinstance(numerators, numbers.Integral):
        return _reduce_pair(int(numerators), divisor)

    so_far = _reduce_pair(1, divisor)
    for numerator in numerators:
        current = _reduce_pair(int(numerator), so_far.remaining_divisor)
        product = _check(
            int_type,
            current.partial_result * so_far.partial_result,
            "partial division product",
        )
        so_far = PartialDivisionResult(product, current.remaining_divisor)

    return so_far


def naive_partial_division(
    numerators: int | Sequence[int],
    divisor: int,
    int_type: IntegerType | None = None,
) -> PartialDivisionResult:
    """
    Частичное деление БЕЗ защиты от переполнения.

    Сначала формируется полное произведение числителей, затем выполняется
    одно сокращение на НОД. Математически результат совпадает с
    partial_division, но промежуточное произведение может быть значительно
    больше.

    ВНИМАНИЕ: При заданном int_type выход произведения за диапазон приводит
    к IntegerOverflowError (а не к wraparound).

    Examples:
        >>> naive_partial_division([4, 8], 12)
        PartialDivisionResult(partial_result=8, remaining_divisor=3)
    """
    if isinstance(numerators, numbers.Integral):
        return _reduce_pair(int(numerators), divisor)

    product = 1
    for numerator in numerators:
        product = _check(int_type, product * int(numerator), "naive division product")

    return _reduce_pair(product, divisor)
