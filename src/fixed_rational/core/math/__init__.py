"""
Core math modules для fixed_rational

Целочисленные примитивы и частичное деление с защитой от переполнения.
"""

# Common Factor
from fixed_rational.core.math.common_factor import (
    gcd,
    gcd_many,
    int_abs,
    lcm,
    trunc_div,
    trunc_mod,
)

# Integer Types
from fixed_rational.core.math.integer_types import (
    IntegerOverflowError,
    IntegerType,
)

# Partial Division
from fixed_rational.core.math.partial_division import (
    PartialDivisionResult,
    naive_partial_division,
    partial_division,
)

__all__ = [
    # Common Factor
    "gcd",
    "gcd_many",
    "int_abs",
    "lcm",
    "trunc_div",
    "trunc_mod",
    # Integer Types
    "IntegerOverflowError",
    "IntegerType",
    # Partial Division
    "PartialDivisionResult",
    "naive_partial_division",
    "partial_division",
]
