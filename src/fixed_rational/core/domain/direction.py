"""
Direction — Направление с рациональными координатами

Направление хранится как кортеж целых пропорций, сокращённых на их общий
НОД. Внутреннее представление всегда каноническое, поэтому равенство
направлений — это равенство кортежей. Никаких гарантий о "длине"
направления нет: единичные векторы в рациональной геометрии — исключение.
"""

import numbers
from functools import reduce
from typing import Iterable, Sequence

from fixed_rational.core.math.common_factor import gcd_many, lcm, trunc_div


class Direction:
    """
    Направление в пространстве размерности len(components).

    Нормализация:
    - все компоненты делятся на НОД всех компонент
    - нулевое направление (0, ..., 0) остаётся без изменений
    - в одномерном случае остаётся только знак (-1, 0 или 1)
    """

    __slots__ = ("_components",)

    def __init__(self, components: Iterable[int] = ()) -> None:
        values = []
        for component in components:
            if not isinstance(component, numbers.Integral):
                raise TypeError(
                    f"Direction components must be integers, got {type(component).__name__}"
                )
            values.append(int(component))
        self._components = self._normalize(tuple(values))

    @classmethod
    def from_rationals(cls, values: Sequence) -> "Direction":
        """
        Направление, пропорциональное набору рациональных чисел.

        Каждое значение — FixedRational, fractions.Fraction или пара
        (numerator, denominator). Координаты приводятся к общему знаменателю
        (lcm всех знаменателей) и затем нормализуются.
        """
        pairs = []
        for value in values:
            if isinstance(value, tuple):
                numerator, denominator = value
            else:
                numerator, denominator = value.numerator, value.denominator
            if denominator == 0:
                raise ZeroDivisionError(f"zero denominator in {value!r}")
            pairs.append((int(numerator), int(denominator)))

        common = reduce(lcm, (denominator for _, denominator in pairs), 1)
        return cls(
            numerator * trunc_div(common, denominator) for numerator, denominator in pairs
        )

    @staticmethod
    def _normalize(values: tuple[int, ...]) -> tuple[int, ...]:
        if len(values) == 1:
            (value,) = values
            return ((value > 0) - (value < 0),)

        common = gcd_many(values)
        if common == 0:
            return values
        return tuple(trunc_div(value, common) for value in values)

    @property
    def components(self) -> tuple[int, ...]:
        return self._components

    @property
    def dimensionality(self) -> int:
        return len(self._components)

    def get(self, index: int) -> int:
        return self._components[index]

    def first_present_dimension(self) -> int:
        """Индекс первой ненулевой компоненты (dimensionality для нулевого направления)."""
        for index, component in enumerate(self._components):
            if component != 0:
                return index
        return len(self._components)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self._components == other._components

    def __lt__(self, other) -> bool:
        # Только для упорядочивания в контейнерах, геометрического смысла нет
        if not isinstance(other, Direction):
            return NotImplemented
        return self._components < other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __repr__(self) -> str:
        return f"Direction{self._components}"
