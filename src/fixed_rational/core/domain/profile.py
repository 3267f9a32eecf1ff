"""
RationalProfile — Конфигурация типа FixedRational

Immutable Pydantic модель, описывающая ОДНУ инстанциацию FixedRational:
- denominator: фиксированный знаменатель D (общий для всех значений типа)
- int_type: ширина underlying-целого (int8 ... int64 или unbounded)
- throw_on_inexact: бросать ExactnessViolation или молча усекать
- overflow_protection: сокращать на НОД до умножения или нет

Профиль задаётся один раз (аналог параметров шаблона) и никогда не
хранится в отдельных значениях.
"""

from typing import Final

from pydantic import BaseModel, Field, model_validator

from fixed_rational.core.math.integer_types import IntegerType

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_INT_TYPE: Final[IntegerType] = IntegerType.INT64

DEFAULT_THROW_ON_INEXACT: Final[bool] = True

DEFAULT_OVERFLOW_PROTECTION: Final[bool] = True


# =============================================================================
# PROFILE MODEL
# =============================================================================


class RationalProfile(BaseModel):
    """
    Профиль числового типа FixedRational.

    Immutable модель (frozen=True) и hashable: равные профили дают один и
    тот же класс из fixed_rational_type().
    """

    denominator: int = Field(..., gt=0, description="Фиксированный знаменатель D")
    int_type: IntegerType = Field(
        DEFAULT_INT_TYPE, description="Знаковый целый тип числителя"
    )
    throw_on_inexact: bool = Field(
        DEFAULT_THROW_ON_INEXACT,
        description="Бросать ExactnessViolation вместо молчаливого усечения",
    )
    overflow_protection: bool = Field(
        DEFAULT_OVERFLOW_PROTECTION,
        description="Сокращать на НОД до умножения (False: наивное умножение)",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_denominator_fits_int_type(self) -> "RationalProfile":
        """Проверка, что D помещается в int_type"""
        if not self.int_type.contains(self.denominator):
            raise ValueError(
                f"denominator {self.denominator} does not fit {self.int_type.value} "
                f"(max {self.int_type.max_value})"
            )
        return self

    @property
    def type_name(self) -> str:
        """Имя типа для сообщений: FixedRational[int32, 12]"""
        return f"FixedRational[{self.int_type.value}, {self.denominator}]"
