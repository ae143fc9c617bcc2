"""
Test suite for exactint

Contains:
- tests/unit/        : Unit tests for individual modules
- tests/properties/  : Property-based tests (hypothesis, Python int as oracle)
"""
