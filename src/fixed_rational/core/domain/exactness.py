"""
Exactness Violation — Ошибка неточного результата

Ошибка возникает, когда результат конструктора или операции FixedRational
не представим точно при выбранном знаменателе D.

Ошибка несёт minimum_fix_factor — минимальный множитель к D, при котором
ТА ЖЕ операция стала бы точной. Накопление fix factor по многим ошибкам
(через lcm) даёт единый множитель для всей рабочей нагрузки.

ФОРМУЛЫ:
    minimum_fix_factor = remaining_divisor / gcd(operation_numerator, remaining_divisor)
    running = lcm(running, minimum_fix_factor)     (running <= 0 → 1)
    suggested_denominator = D * running
"""

from fixed_rational.core.exceptions import FixedRationalError
from fixed_rational.core.math.common_factor import gcd, int_abs, lcm

# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExactnessViolation(FixedRationalError, ArithmeticError):
    """
    Результат не представим точно при выбранном знаменателе.

    Attributes:
        operation_numerator: Несокращённый числитель операции
        remaining_divisor: Оставшийся делитель операции
        minimum_fix_factor: Минимальный множитель к D для точности операции
    """

    def __init__(self, message: str, operation_numerator: int, remaining_divisor: int):
        super().__init__(message)
        self.operation_numerator = operation_numerator
        self.remaining_divisor = remaining_divisor
        self._minimum_fix_factor = int_abs(
            remaining_divisor // gcd(operation_numerator, remaining_divisor)
        )

    def __reduce__(self):
        # args хранит только сообщение, поэтому числа передаются явно
        return (type(self), (str(self), self.operation_numerator, self.remaining_divisor))

    @property
    def minimum_fix_factor(self) -> int:
        return self._minimum_fix_factor

    def accumulate_fix_factor(self, running_accumulation: int) -> int:
        """
        Свернуть fix factor этой ошибки в накопленное значение.

        Args:
            running_accumulation: Текущее накопленное значение (<= 0 трактуется как 1)

        Returns:
            lcm(running_accumulation, minimum_fix_factor)

        Examples:
            >>> ExactnessViolation("test", 12, 8).accumulate_fix_factor(1)
            2
            >>> ExactnessViolation("test", 12, 9).accumulate_fix_factor(2)
            6
        """
        if running_accumulation <= 0:
            running_accumulation = 1
        return lcm(running_accumulation, self.minimum_fix_factor)


class ConstructionInexact(ExactnessViolation):
    """Дробь из конструктора не представима при знаменателе D."""

    pass


class OperationInexact(ExactnessViolation):
    """Результат умножения/деления не представим при знаменателе D."""

    pass


# =============================================================================
# FIX FACTOR ACCUMULATOR
# =============================================================================


class FixFactorAccumulator:
    """
    Накопитель fix factor по рабочей нагрузке.

    Используется при прогоне репрезентативных вычислений с включённым
    throw_on_inexact: каждая ExactnessViolation регистрируется, а итоговое
    значение показывает, во сколько раз нужно увеличить D, чтобы ВСЕ
    наблюдённые операции стали точными.

    Как context manager регистрирует и подавляет ExactnessViolation,
    возникшую внутри блока (остальные исключения пропагируют):

        accumulator = FixFactorAccumulator()
        for a, b in workload:
            with accumulator:
                a * b
        assert accumulator.is_sufficient, accumulator.suggested_denominator(12)
    """

    def __init__(self) -> None:
        self._value = 1
        self._violations: list[ExactnessViolation] = []

    @property
    def value(self) -> int:
        """Накопленный множитель (1 если нарушений не было)."""
        return self._value

    @property
    def violations(self) -> tuple[ExactnessViolation, ...]:
        return tuple(self._violations)

    @property
    def is_sufficient(self) -> bool:
        """True если текущий знаменатель достаточен для всех операций."""
        return self._value == 1

    def record(self, error: ExactnessViolation) -> int:
        """Зарегистрировать ошибку; возвращает новое накопленное значение."""
        # Без кадров стека
        error.__traceback__ = None
        self._violations.append(error)
        self._value = error.accumulate_fix_factor(self._value)
        return self._value

    def suggested_denominator(self, denominator: int) -> int:
        """Знаменатель, при котором все зарегистрированные операции точны."""
        return denominator * self._value

    def __enter__(self) -> "FixFactorAccumulator":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is not None and isinstance(exc, ExactnessViolation):
            self.record(exc)
            return True
        return False
