"""
Domain models and value objects.

Contains the fixed-denominator rational type, its profile, exactness errors
and the Direction proportion type.
"""

from fixed_rational.core.domain.direction import Direction
from fixed_rational.core.domain.exactness import (
    ConstructionInexact,
    ExactnessViolation,
    FixFactorAccumulator,
    OperationInexact,
)
from fixed_rational.core.domain.fixed_rational import FixedRational, fixed_rational_type
from fixed_rational.core.domain.profile import (
    DEFAULT_INT_TYPE,
    DEFAULT_OVERFLOW_PROTECTION,
    DEFAULT_THROW_ON_INEXACT,
    RationalProfile,
)

__all__ = [
    "ConstructionInexact",
    "DEFAULT_INT_TYPE",
    "DEFAULT_OVERFLOW_PROTECTION",
    "DEFAULT_THROW_ON_INEXACT",
    "Direction",
    "ExactnessViolation",
    "FixFactorAccumulator",
    "FixedRational",
    "OperationInexact",
    "RationalProfile",
    "fixed_rational_type",
]
