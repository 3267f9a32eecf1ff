"""
fixed_rational — рациональные числа с фиксированным знаменателем.

    from fixed_rational import IntegerType, fixed_rational_type

    Rat = fixed_rational_type(denominator=720720, int_type=IntegerType.INT64)
"""

__version__ = "0.1.0"

from fixed_rational.core.contracts import load_profile, validate_rational_profile
from fixed_rational.core.domain import (
    ConstructionInexact,
    Direction,
    ExactnessViolation,
    FixFactorAccumulator,
    FixedRational,
    OperationInexact,
    RationalProfile,
    fixed_rational_type,
)
from fixed_rational.core.exceptions import FixedRationalError
from fixed_rational.core.math import (
    IntegerOverflowError,
    IntegerType,
    PartialDivisionResult,
    gcd,
    int_abs,
    lcm,
    naive_partial_division,
    partial_division,
)

__all__ = [
    # Types
    "Direction",
    "FixedRational",
    "IntegerType",
    "PartialDivisionResult",
    "RationalProfile",
    "fixed_rational_type",
    # Exceptions
    "ConstructionInexact",
    "ExactnessViolation",
    "FixedRationalError",
    "IntegerOverflowError",
    "OperationInexact",
    # Fix factors
    "FixFactorAccumulator",
    # Integer utilities
    "gcd",
    "int_abs",
    "lcm",
    "naive_partial_division",
    "partial_division",
    # Configuration
    "load_profile",
    "validate_rational_profile",
]
