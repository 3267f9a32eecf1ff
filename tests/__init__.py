"""
Test suite for fixed_rational

Contains:
- tests/unit/          : Unit tests for individual modules
"""
