"""
Functional API — операции над BigInt в виде свободных функций

Тонкие обёртки над методами BigInt для кода, который предпочитает
функциональный стиль:

    >>> from exactint import api
    >>> api.to_string(api.add(api.from_string("999999"), api.from_int(1)))
    '1000000'
"""

from typing import Optional

from exactint.config import DEFAULT_CONFIG, ArithmeticConfig
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

zero = ZERO
one = ONE
minus_one = MINUS_ONE


def from_int(value: int) -> BigInt:
    return BigInt.from_int(value)


def from_string(text: str) -> Optional[BigInt]:
    return BigInt.from_string(text)


def to_string(value: BigInt) -> str:
    return value.to_string()


def sign(value: BigInt) -> Sign:
    return value.sign


def add(a: BigInt, b: BigInt) -> BigInt:
    return a.add(b)


def sub(a: BigInt, b: BigInt) -> BigInt:
    return a.sub(b)


def mul(a: BigInt, b: BigInt) -> BigInt:
    return a.mul(b)


def negate(a: BigInt) -> BigInt:
    return a.negate()


def abs_value(a: BigInt) -> BigInt:
    return a.abs()


def div(a: BigInt, b: BigInt, config: ArithmeticConfig = DEFAULT_CONFIG) -> BigInt:
    """Частное; ZERO при нулевом делителе (LEGACY) или ZeroDivisorError (STRICT)."""
    return a.div(b, config)


def mod(a: BigInt, b: BigInt, config: ArithmeticConfig = DEFAULT_CONFIG) -> BigInt:
    """Остаток; ZeroDivisorError при нулевом делителе."""
    return a.mod(b, config)


def divmod_values(a: BigInt, b: BigInt) -> Optional[DivModResult]:
    """(quotient, remainder) или None при нулевом делителе."""
    return a.divmod(b)


def compare(a: BigInt, b: BigInt) -> Ordering:
    return a.compare(b)


def eq(a: BigInt, b: BigInt) -> bool:
    return a.eq(b)


def neq(a: BigInt, b: BigInt) -> bool:
    return a.neq(b)


def lt(a: BigInt, b: BigInt) -> bool:
    return a.lt(b)


def lte(a: BigInt, b: BigInt) -> bool:
    return a.lte(b)


def gt(a: BigInt, b: BigInt) -> bool:
    return a.gt(b)


def gte(a: BigInt, b: BigInt) -> bool:
    return a.gte(b)


__all__ = [
    # Constants
    "zero",
    "one",
    "minus_one",
    # Construction / rendering
    "from_int",
    "from_string",
    "to_string",
    "sign",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "negate",
    "abs_value",
    "div",
    "mod",
    "divmod_values",
    # Ordering
    "compare",
    "eq",
    "neq",
    "lt",
    "lte",
    "gt",
    "gte",
    "max_value",
    "min_value",
]
