"""
exactint — точные целые произвольной точности

Неизменяемый тип BigInt: конструирование из int и десятичного текста,
каноническая печать, сложение/вычитание/умножение, усечённое деление
с остатком, полный порядок.

    >>> from exactint import BigInt
    >>> str(BigInt.from_string("999999") + 1)
    '1000000'
"""

from exactint.config import DEFAULT_CONFIG, ArithmeticConfig, ZeroDivisorPolicy
from exactint.core.domain.bigint import (
    MINUS_ONE,
    ONE,
    ZERO,
    BigInt,
    DivModResult,
    max_value,
    min_value,
)
from exactint.core.domain.sign import Ordering, Sign
from exactint.errors import ExactIntError, NonCanonicalValueError, ZeroDivisorError

__version__ = "0.1.0"

__all__ = [
    # Value type
    "BigInt",
    "DivModResult",
    "Sign",
    "Ordering",
    # Constants
    "ZERO",
    "ONE",
    "MINUS_ONE",
    # Ordering helpers
    "max_value",
    "min_value",
    # Configuration
    "ArithmeticConfig",
    "ZeroDivisorPolicy",
    "DEFAULT_CONFIG",
    # Errors
    "ExactIntError",
    "ZeroDivisorError",
    "NonCanonicalValueError",
]
