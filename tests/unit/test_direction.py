"""
Тесты для Direction

Проверяет нормализацию направлений на НОД компонент.
"""

from fractions import Fraction

import pytest

from fixed_rational.core.domain.direction import Direction
from fixed_rational.core.domain.fixed_rational import fixed_rational_type


class TestNormalization:
    """Тесты канонической формы"""

    def test_divides_by_common_factor(self) -> None:
        assert Direction([2, 4, 6]).components == (1, 2, 3)

    def test_keeps_signs(self) -> None:
        assert Direction([-2, 4, 6]).components == (-1, 2, 3)
        assert Direction([-2, -4, -6]).components == (-1, -2, -3)

    def test_zero_direction_unchanged(self) -> None:
        assert Direction([0, 0, 0]).components == (0, 0, 0)

    def test_zero_components_ignored_by_gcd(self) -> None:
        assert Direction([0, 9, 6]).components == (0, 3, 2)

    def test_one_dimensional_keeps_sign_only(self) -> None:
        assert Direction([7]).components == (1,)
        assert Direction([-3]).components == (-1,)
        assert Direction([0]).components == (0,)

    def test_equal_after_normalization(self) -> None:
        assert Direction([2, 4, 6]) == Direction([1, 2, 3])
        assert hash(Direction([2, 4, 6])) == hash(Direction([1, 2, 3]))
        assert Direction([2, 4, 6]) != Direction([-1, 2, 3])

    def test_rejects_non_integers(self) -> None:
        with pytest.raises(TypeError):
            Direction([1.5, 2])


class TestAccessors:
    """Тесты accessors"""

    def test_dimensionality(self) -> None:
        assert Direction([1, 2, 3]).dimensionality == 3
        assert Direction().dimensionality == 0

    def test_get(self) -> None:
        direction = Direction([-2, 4, 6])
        assert direction.get(0) == -1
        assert direction.get(2) == 3

    def test_first_present_dimension(self) -> None:
        assert Direction([0, 0, 5]).first_present_dimension() == 2
        assert Direction([3, 0]).first_present_dimension() == 0
        assert Direction([0, 0]).first_present_dimension() == 2

    def test_repr(self) -> None:
        assert repr(Direction([2, 4])) == "Direction(1, 2)"

    def test_ordering_is_total(self) -> None:
        directions = sorted([Direction([1, 2]), Direction([-1, 0]), Direction([0, 1])])
        assert directions == [Direction([-1, 0]), Direction([0, 1]), Direction([1, 2])]


class TestFromRationals:
    """Тесты построения из рациональных координат"""

    def test_from_pairs(self) -> None:
        assert Direction.from_rationals([(1, 2), (1, 3)]) == Direction([3, 2])

    def test_from_fractions(self) -> None:
        assert Direction.from_rationals([Fraction(-1, 4), Fraction(1, 2)]) == Direction([-1, 2])

    def test_from_fixed_rationals(self) -> None:
        rat = fixed_rational_type(denominator=12)
        assert Direction.from_rationals([rat(1, 3), rat(2, 3), rat(1)]) == Direction([1, 2, 3])

    def test_zero_denominator(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Direction.from_rationals([(1, 0), (1, 2)])
