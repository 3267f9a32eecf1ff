"""
Integer Types — Модель знакового целого фиксированной ширины

Целые Python не переполняются, поэтому ширина underlying-типа (int8 ... int64)
моделируется явно: каждое сохраняемое значение и каждый промежуточный
результат движка частичного деления проверяется на попадание в диапазон.

ПОЛИТИКА ПЕРЕПОЛНЕНИЯ (checked, fail fast):
- Выход за диапазон → IntegerOverflowError (никакого wraparound)
- UNBOUNDED отключает проверки (аналог BigInt)
"""

from enum import Enum
from typing import Final

from fixed_rational.core.exceptions import FixedRationalError

# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOverflowError(FixedRationalError, OverflowError):
    """Значение не помещается в диапазон выбранного целого типа."""

    pass


# =============================================================================
# INTEGER TYPES
# =============================================================================

_UNBOUNDED_NAME: Final[str] = "unbounded"


class IntegerType(str, Enum):
    """Знаковый целый тип, на котором построен FixedRational."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UNBOUNDED = _UNBOUNDED_NAME

    @property
    def bits(self) -> int | None:
        """Ширина в битах (None для UNBOUNDED)."""
        if self is IntegerType.UNBOUNDED:
            return None
        return int(self.value[3:])

    @property
    def min_value(self) -> int | None:
        bits = self.bits
        return None if bits is None else -(1 << (bits - 1))

    @property
    def max_value(self) -> int | None:
        bits = self.bits
        return None if bits is None else (1 << (bits - 1)) - 1

    def contains(self, value: int) -> bool:
        """True если value помещается в диапазон типа."""
        if self is IntegerType.UNBOUNDED:
            return True
        return self.min_value <= value <= self.max_value

    def check(self, value: int, context: str = "value") -> int:
        """
        Проверка диапазона.

        Args:
            value: Проверяемое целое
            context: Описание операции (для сообщения об ошибке)

        Returns:
            value без изменений

        Raises:
            IntegerOverflowError: если value вне [min_value, max_value]
        """
        if not self.contains(value):
            raise IntegerOverflowError(
                f"{context}: {value} does not fit {self.value} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value
