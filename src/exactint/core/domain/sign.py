"""
Sign / Ordering — знак значения и результат трёхстороннего сравнения
"""

from enum import Enum


class Sign(str, Enum):
    """Знак BigInt. ZERO — единственное представление нуля."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"

    def flipped(self) -> "Sign":
        """POSITIVE ⇄ NEGATIVE, ZERO без изменений."""
        if self == Sign.POSITIVE:
            return Sign.NEGATIVE
        if self == Sign.NEGATIVE:
            return Sign.POSITIVE
        return Sign.ZERO

    def times(self, other: "Sign") -> "Sign":
        """
        Правило знака произведения.

        Любой ZERO → ZERO; одинаковые ненулевые → POSITIVE; разные → NEGATIVE.
        """
        if self == Sign.ZERO or other == Sign.ZERO:
            return Sign.ZERO
        if self == other:
            return Sign.POSITIVE
        return Sign.NEGATIVE


class Ordering(int, Enum):
    """
    Результат compare(a, b).

    Значения совпадают с соглашением -1 / 0 / +1, поэтому Ordering можно
    сравнивать с int напрямую.
    """

    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1

    def inverted(self) -> "Ordering":
        return Ordering(-self.value)
