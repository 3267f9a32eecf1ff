"""
Тесты для модуля Common Factor

Проверяет:
1. int_abs
2. gcd (включая отрицательные входы и ноль)
3. lcm и связь gcd * lcm == abs(a * b)
4. Деление и остаток с усечением к нулю
"""

import pytest

from fixed_rational.core.math.common_factor import (
    gcd,
    gcd_many,
    int_abs,
    lcm,
    trunc_div,
    trunc_mod,
)

# 2^2 * 3^2 * 5^3 и 3 * 5^2 * 7 * 11
A = 2 * 2 * 3 * 3 * 5 * 5 * 5
B = 3 * 5 * 5 * 7 * 11


class TestIntAbs:
    """Тесты для int_abs"""

    def test_positive_unchanged(self) -> None:
        assert int_abs(2) == 2

    def test_negative_negated(self) -> None:
        assert int_abs(-2) == 2

    def test_zero(self) -> None:
        assert int_abs(0) == 0

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(TypeError, match="must be an integer"):
            int_abs(2.5)


class TestGcd:
    """Тесты для gcd"""

    def test_normal_case(self) -> None:
        assert gcd(A, B) == 3 * 5 * 5
        assert gcd(12 * 9 * 125, 3 * 25 * 7 * 11) == 75

    def test_negative_numbers_always_positive(self) -> None:
        """Результат всегда положительный"""
        assert gcd(-A, B) == 75
        assert gcd(A, -B) == 75
        assert gcd(-A, -B) == 75

    def test_zero_argument(self) -> None:
        assert gcd(7, 0) == 7
        assert gcd(-7, 0) == 7
        assert gcd(0, 7) == 7

    def test_zero_zero(self) -> None:
        assert gcd(0, 0) == 0

    def test_symmetric(self) -> None:
        for a, b in [(12, 18), (-12, 18), (35, -14), (1, 97), (0, -5)]:
            assert gcd(a, b) == gcd(b, a)
            assert gcd(a, b) >= 0

    def test_coprime(self) -> None:
        assert gcd(17, 12) == 1

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(TypeError):
            gcd(1.5, 3)


class TestLcm:
    """Тесты для lcm"""

    def test_normal_case(self) -> None:
        assert lcm(A, B) == 2 * 2 * 3 * 3 * 5 * 5 * 5 * 7 * 11

    def test_negative_numbers(self) -> None:
        assert lcm(-4, 6) == 12
        assert lcm(4, -6) == 12
        assert lcm(-4, -6) == 12

    def test_zero_gives_zero(self) -> None:
        """Деление на ноль не происходит"""
        assert lcm(5, 0) == 0
        assert lcm(0, 5) == 0
        assert lcm(0, 0) == 0

    def test_gcd_times_lcm(self) -> None:
        """gcd(a, b) * lcm(a, b) == abs(a * b) для ненулевых пар"""
        for a, b in [(A, B), (-A, B), (12, 18), (7, 13), (-9, -6)]:
            assert gcd(a, b) * lcm(a, b) == abs(a * b)


class TestGcdMany:
    """Тесты для gcd_many"""

    def test_sequence(self) -> None:
        assert gcd_many([2, 4, 6]) == 2
        assert gcd_many([-2, 4, 6]) == 2

    def test_empty_and_zeros(self) -> None:
        assert gcd_many([]) == 0
        assert gcd_many([0, 0, 0]) == 0


class TestTruncatingDivision:
    """Тесты для trunc_div / trunc_mod"""

    def test_trunc_div_rounds_toward_zero(self) -> None:
        assert trunc_div(7, 2) == 3
        assert trunc_div(-7, 2) == -3
        assert trunc_div(7, -2) == -3
        assert trunc_div(-7, -2) == 3

    def test_trunc_mod_sign_follows_dividend(self) -> None:
        assert trunc_mod(116, 50) == 16
        assert trunc_mod(-7, 2) == -1
        assert trunc_mod(7, -2) == 1

    def test_div_mod_identity(self) -> None:
        for a in (-13, -1, 0, 5, 29):
            for b in (-4, -1, 3, 7):
                assert trunc_div(a, b) * b + trunc_mod(a, b) == a

    def test_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            trunc_div(1, 0)
        with pytest.raises(ZeroDivisionError):
            trunc_mod(1, 0)
