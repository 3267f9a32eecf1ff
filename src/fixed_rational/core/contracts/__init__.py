"""
Contract Validation Module

Валидация внешних конфигураций профилей по JSON Schema.
"""

from .validators import (
    ContractValidator,
    RationalProfileValidator,
    SchemaLoader,
    load_profile,
    validate_rational_profile,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RationalProfileValidator",
    # Functions
    "validate_rational_profile",
    "load_profile",
]
