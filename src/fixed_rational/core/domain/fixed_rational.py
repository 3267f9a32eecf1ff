"""
FixedRational — Рациональное число с фиксированным знаменателем

Значение хранит ОДИН целый числитель; знаменатель D задаётся профилем
типа (RationalProfile) и общий для всех значений этого типа. Поэтому
сложение и вычитание значений одного типа не требуют приведения к общему
знаменателю, а умножение и деление используют частичное деление
(сокращение на НОД до умножения), чтобы не переполнять underlying-целое.

Тип конкретного профиля создаётся фабрикой:

    Rat12 = fixed_rational_type(denominator=12, int_type=IntegerType.INT32)
    Rat12(2, 3).numerator        # 8
    Rat12(1, 3) * Rat12(2, 3)    # OperationInexact, minimum_fix_factor == 3

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Представляемое значение == numerator / D, дробь НИКОГДА не сокращается
2. Числитель всегда помещается в int_type профиля (иначе IntegerOverflowError)
3. Неточный результат → ExactnessViolation (throw_on_inexact=True)
   или молчаливое усечение к нулю (throw_on_inexact=False)
4. Сложение, вычитание, умножение на целое и % никогда не бывают неточными
5. Смешивание с float только явно: from_float() / float()
"""

import logging
import math
import numbers
from fractions import Fraction
from functools import lru_cache
from typing import ClassVar, Sequence

from fixed_rational.core.domain.exactness import ConstructionInexact, OperationInexact
from fixed_rational.core.domain.profile import RationalProfile
from fixed_rational.core.math.common_factor import trunc_div, trunc_mod
from fixed_rational.core.math.integer_types import IntegerType
from fixed_rational.core.math.partial_division import (
    PartialDivisionResult,
    naive_partial_division,
    partial_division,
)

logger = logging.getLogger(__name__)


def _as_integer(value) -> int | None:
    """int(value) для целых операндов, иначе None."""
    if isinstance(value, numbers.Integral):
        return int(value)
    return None


def _round_half_away_from_zero(value: float) -> int:
    # round() в Python использует banker's rounding
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


# =============================================================================
# FIXED RATIONAL
# =============================================================================


class FixedRational:
    """
    Быстрый рациональный тип с фиксированным знаменателем.

    По сути fixed-point дробь с произвольным знаменателем и опциональной
    детекцией округления. Базовый класс абстрактный: конкретные типы
    строятся через fixed_rational_type(), один класс на профиль.

    Рекомендуемое использование: выбрать составной D, достаточный для всех
    значений проекта, прогнать репрезентативные вычисления с
    throw_on_inexact=True и накопить fix factor (FixFactorAccumulator).
    Если накопленный множитель != 1, увеличить D во столько раз.
    """

    __slots__ = ("_numerator",)

    profile: ClassVar[RationalProfile | None] = None
    DENOMINATOR: ClassVar[int | None] = None

    def __init__(self, *args) -> None:
        cls = self._require_profile()

        if not args:
            numerator = 0
        elif len(args) == 1:
            numerator = cls._numerator_from_value(args[0])
        elif len(args) == 2:
            numerator = cls._numerator_from_fraction(*args)
        else:
            raise TypeError(
                f"{cls.__name__} takes at most 2 arguments ({len(args)} given)"
            )

        self._numerator = cls.profile.int_type.check(numerator, f"{cls.__name__} numerator")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_integer(cls, value: int) -> "FixedRational":
        """Значение value: numerator = value * D."""
        cls._require_profile()
        integer = _as_integer(value)
        if integer is None:
            raise TypeError(f"from_integer expects an integer, got {type(value).__name__}")
        return cls._from_numerator(cls._numerator_from_integer(integer))

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int) -> "FixedRational":
        """
        Значение numerator / denominator.

        Raises:
            ConstructionInexact: если дробь не представима при D (throw_on_inexact)
            ZeroDivisionError: если denominator == 0
            IntegerOverflowError: если числитель не помещается в int_type
        """
        cls._require_profile()
        return cls._from_numerator(cls._numerator_from_fraction(numerator, denominator))

    @classmethod
    def from_float(cls, value: float) -> "FixedRational":
        """
        Ближайшее представимое значение: numerator = round(value * D).

        Конструктор lossy по контракту и никогда не бросает ExactnessViolation.
        Для float большой величины точности float может не хватить.

        Raises:
            ValueError: если value NaN/Inf
        """
        cls._require_profile()
        return cls._from_numerator(cls._numerator_from_float(value))

    @classmethod
    def copy_convert(cls, other: "FixedRational") -> "FixedRational":
        """
        Конверсия значения другого типа FixedRational (другие D / int_type / флаги).

        Выполняется через from_fraction(other.numerator, other.denominator),
        поэтому сужение может бросить ConstructionInexact или IntegerOverflowError.
        """
        cls._require_profile()
        if not isinstance(other, FixedRational):
            raise TypeError(f"copy_convert expects a FixedRational, got {type(other).__name__}")
        return cls.from_fraction(other.numerator, other.denominator)

    @classmethod
    def _from_numerator(cls, numerator: int) -> "FixedRational":
        """Конструктор без проверки точности (только проверка диапазона)."""
        instance = object.__new__(cls)
        instance._numerator = cls.profile.int_type.check(numerator, f"{cls.__name__} numerator")
        return instance

    @classmethod
    def _require_profile(cls) -> type:
        if cls.profile is None:
            raise TypeError(
                "FixedRational has no profile; build a concrete type with fixed_rational_type()"
            )
        return cls

    @classmethod
    def _numerator_from_value(cls, value) -> int:
        if isinstance(value, FixedRational):
            return cls._numerator_from_fraction(value.numerator, value.denominator)
        if isinstance(value, numbers.Integral):
            return cls._numerator_from_integer(int(value))
        if isinstance(value, numbers.Rational):
            return cls._numerator_from_fraction(value.numerator, value.denominator)
        if isinstance(value, numbers.Real):
            return cls._numerator_from_float(value)
        raise TypeError(f"cannot build {cls.__name__} from {type(value).__name__}")

    @classmethod
    def _numerator_from_integer(cls, value: int) -> int:
        return value * cls.profile.denominator

    @classmethod
    def _numerator_from_fraction(cls, numerator, denominator) -> int:
        top = _as_integer(numerator)
        bottom = _as_integer(denominator)
        if top is None or bottom is None:
            raise TypeError(
                f"fraction parts must be integers, got "
                f"{type(numerator).__name__}/{type(denominator).__name__}"
            )

        profile = cls.profile
        if bottom == profile.denominator:
            return top

        result = cls._divide([top, profile.denominator], bottom, int_type=None)

        if profile.throw_on_inexact and not result.is_exact:
            message = f"Inexact construction of a {profile.type_name}"
            logger.debug(f"{message}: {top}/{bottom} -> {result}")
            raise ConstructionInexact(message, result.partial_result, result.remaining_divisor)

        return result.full_division()

    @classmethod
    def _numerator_from_float(cls, value) -> int:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"cannot build {cls.__name__} from {value}")
        return _round_half_away_from_zero(value * cls.profile.denominator)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        """Знаменатель D профиля (никогда не сокращённый)."""
        return self.profile.denominator

    def as_long_double(self) -> float:
        """
        Приближённое значение numerator / D.

        Не round-trip-safe: при большом D float не хватает разрядности,
        поэтому это явный метод, а не неявная конверсия.
        """
        return self._numerator / self.profile.denominator

    def as_simplified(self) -> tuple[int, int]:
        """Пара (numerator, denominator), сокращённая на НОД. Значение не меняется."""
        result = partial_division(self._numerator, self.profile.denominator)
        return (result.partial_result, result.remaining_divisor)

    # -------------------------------------------------------------------------
    # In-place increment / decrement
    # -------------------------------------------------------------------------

    def increment(self) -> "FixedRational":
        """Прибавить 1 на месте (numerator += D)."""
        self._numerator = self.profile.int_type.check(
            self._numerator + self.profile.denominator, "increment"
        )
        return self

    def decrement(self) -> "FixedRational":
        """Вычесть 1 на месте (numerator -= D)."""
        self._numerator = self.profile.int_type.check(
            self._numerator - self.profile.denominator, "decrement"
        )
        return self

    # -------------------------------------------------------------------------
    # Internal arithmetic helpers
    # -------------------------------------------------------------------------

    @classmethod
    def _divide(
        cls,
        numerators: int | Sequence[int],
        divisor: int,
        int_type: IntegerType | None,
    ) -> PartialDivisionResult:
        if cls.profile.overflow_protection:
            return partial_division(numerators, divisor, int_type)
        return naive_partial_division(numerators, divisor, int_type)

    @classmethod
    def _finish(cls, result: PartialDivisionResult, left, operator: str, right) -> "FixedRational":
        if cls.profile.throw_on_inexact and not result.is_exact:
            message = (
                f"Inexact operation in ({left} {operator} {right}): "
                f"{result} -> {cls.profile.type_name}"
            )
            logger.debug(message)
            raise OperationInexact(message, result.partial_result, result.remaining_divisor)
        return cls._from_numerator(result.full_division())

    def _same_type(self, other) -> bool:
        return type(other) is type(self)

    def _compare_to_integer(self, value: int) -> int:
        """
        Знак (self - value) без формирования value * D там, где возможно переполнение.

        Сначала сравнивается усечённое частное numerator / D; при равенстве
        частных ничья разрешается частичным делением value * D / numerator.
        """
        profile = self.profile
        numerator = self._numerator

        if not profile.overflow_protection:
            scaled = profile.int_type.check(value * profile.denominator, "comparison")
            return (numerator > scaled) - (numerator < scaled)

        quotient = trunc_div(numerator, profile.denominator)
        if quotient < value:
            return -1
        if quotient > value:
            return 1
        if numerator == 0:
            return 0

        # value * D / numerator, remaining_divisor > 0
        ratio = partial_division([value, profile.denominator], numerator, profile.int_type)
        if ratio.partial_result == ratio.remaining_divisor:
            return 0
        scaled_is_larger = ratio.partial_result > ratio.remaining_divisor
        if numerator < 0:
            scaled_is_larger = not scaled_is_larger
        return -1 if scaled_is_larger else 1

    def _compare(self, other) -> int | None:
        if self._same_type(other):
            return (self._numerator > other._numerator) - (self._numerator < other._numerator)
        integer = _as_integer(other)
        if integer is not None:
            return self._compare_to_integer(integer)
        return None

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if self._same_type(other):
            return self._numerator == other._numerator
        integer = _as_integer(other)
        if integer is not None:
            return self._numerator == integer * self.profile.denominator
        if isinstance(other, numbers.Rational):
            # Дробь Python сравнивается по значению, без приведения к D
            return (
                self._numerator * other.denominator
                == other.numerator * self.profile.denominator
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Fraction(self._numerator, self.profile.denominator))

    def __lt__(self, other) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __neg__(self) -> "FixedRational":
        return self._from_numerator(-self._numerator)

    def __pos__(self) -> "FixedRational":
        return self._from_numerator(self._numerator)

    def __abs__(self) -> "FixedRational":
        return self._from_numerator(abs(self._numerator))

    def __add__(self, other) -> "FixedRational":
        if self._same_type(other):
            return self._from_numerator(self._numerator + other._numerator)
        integer = _as_integer(other)
        if integer is not None:
            return self._from_numerator(self._numerator + integer * self.profile.denominator)
        return NotImplemented

    def __radd__(self, other) -> "FixedRational":
        integer = _as_integer(other)
        if integer is not None:
            return self._from_numerator(integer * self.profile.denominator + self._numerator)
        return NotImplemented

    def __sub__(self, other) -> "FixedRational":
        if self._same_type(other):
            return self._from_numerator(self._numerator - other._numerator)
        integer = _as_integer(other)
        if integer is not None:
            return self._from_numerator(self._numerator - integer * self.profile.denominator)
        return NotImplemented

    def __rsub__(self, other) -> "FixedRational":
        integer = _as_integer(other)
        if integer is not None:
            return self._from_numerator(integer * self.profile.denominator - self._numerator)
        return NotImplemented

    def __mul__(self, other) -> "FixedRational":
        if self._same_type(other):
            result = self._divide(
                [self._numerator, other._numerator],
                self.profile.denominator,
                self.profile.int_type,
            )
            return self._finish(result, self, "*", other)
        integer = _as_integer(other)
        if integer is not None:
            return self._from_numerator(self._numerator * integer)
        return NotImplemented

    def __rmul__(self, other) -> "FixedRational":
        integer = _as_integer(other)
        if integer is not None:
            return self._from_numerator(integer * self._numerator)
        return NotImplemented

    def __truediv__(self, other) -> "FixedRational":
        if self._same_type(other):
            result = self._divide(
                [self._numerator, self.profile.denominator],
                other._numerator,
                self.profile.int_type,
            )
            return self._finish(result, self, "/", other)
        integer = _as_integer(other)
        if integer is not None:
            result = self._divide(self._numerator, integer, self.profile.int_type)
            return self._finish(result, self, "/", integer)
        return NotImplemented

    def __rtruediv__(self, other) -> "FixedRational":
        integer = _as_integer(other)
        if integer is not None:
            denominator = self.profile.denominator
            result = self._divide(
                [integer, denominator, denominator],
                self._numerator,
                self.profile.int_type,
            )
            return self._finish(result, integer, "/", self)
        return NotImplemented

    def __mod__(self, other) -> "FixedRational":
        # Оба числителя уже масштабированы на D, поэтому остаток точен
        if self._same_type(other):
            return self._from_numerator(trunc_mod(self._numerator, other._numerator))
        return NotImplemented

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return self.as_long_double()

    def __int__(self) -> int:
        return trunc_div(self._numerator, self.profile.denominator)

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __str__(self) -> str:
        return f"{self._numerator}/{self.profile.denominator}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._numerator}/{self.profile.denominator})"

    def __reduce__(self):
        return (_restore, (self.profile, self._numerator))


# =============================================================================
# TYPE FACTORY
# =============================================================================


@lru_cache(maxsize=None)
def _build_type(profile: RationalProfile) -> type:
    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "profile": profile,
        "DENOMINATOR": profile.denominator,
    }
    rational_type = type(profile.type_name, (FixedRational,), namespace)
    logger.debug(
        f"Created {profile.type_name}: throw_on_inexact={profile.throw_on_inexact}, "
        f"overflow_protection={profile.overflow_protection}"
    )
    return rational_type


def fixed_rational_type(profile: RationalProfile | None = None, /, **fields) -> type:
    """
    Тип FixedRational для профиля.

    Равные профили дают ОДИН И ТОТ ЖЕ класс, поэтому значения, построенные
    в разных местах программы, совместимы в арифметике.

    Args:
        profile: Готовый RationalProfile
        **fields: Поля RationalProfile (если profile не передан)

    Returns:
        Подкласс FixedRational, привязанный к профилю

    Raises:
        pydantic.ValidationError: при невалидных полях профиля
        TypeError: если переданы и profile, и поля

    Examples:
        >>> Rat12 = fixed_rational_type(denominator=12)
        >>> str(Rat12(2, 3))
        '8/12'
    """
    if profile is None:
        profile = RationalProfile(**fields)
    elif fields:
        raise TypeError("pass either a RationalProfile or profile fields, not both")
    return _build_type(profile)


def _restore(profile: RationalProfile, numerator: int) -> FixedRational:
    return fixed_rational_type(profile)._from_numerator(numerator)
