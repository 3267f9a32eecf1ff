"""
Core math primitives, domain types, and configuration contracts.

This module contains the foundational building blocks of fixed_rational and
has no dependencies on the outer application.
"""
