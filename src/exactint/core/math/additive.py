"""
Additive — сложение, вычитание, отрицание, модуль

Сложение и вычитание реализуются одним механизмом:
1. Каждый операнд приводится к знаковым цифрам с внешним знаком POSITIVE:
   limbs отрицательного операнда умножаются на -1
2. Последовательности дополняются нулями до равной длины
3. Суммы по разрядам (могут быть < 0 или >= BASE) передаются в normalize,
   который определяет знак и magnitude результата

sub(a, b) = add(a, negate(b)).
"""

from typing import Sequence

from exactint.core.domain.sign import Sign
from exactint.core.math.limbs import (
    Magnitude,
    SignedMagnitude,
    SignedValue,
    negate_limbs,
    normalize,
    normalize_magnitude,
    pad_limbs,
)


def signed_digits(value: SignedValue) -> list[int]:
    """
    Знаковые цифры значения с внешним знаком POSITIVE.

    Examples:
        >>> signed_digits(SignedMagnitude(Sign.NEGATIVE, (5, 1)))
        [-5, -1]
    """
    if value.sign == Sign.NEGATIVE:
        return negate_limbs(value.limbs)
    return list(value.limbs)


def _sum_digits(left: Sequence[int], right: Sequence[int]) -> list[int]:
    length = max(len(left), len(right))
    a = pad_limbs(left, length)
    b = pad_limbs(right, length)
    return [x + y for x, y in zip(a, b)]


def add(a: SignedValue, b: SignedValue) -> SignedMagnitude:
    """
    Сумма a + b.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Каноническая SignedMagnitude суммы
    """
    return normalize(_sum_digits(signed_digits(a), signed_digits(b)))


def negate(a: SignedValue) -> SignedMagnitude:
    """Смена знака без обхода limbs (ZERO без изменений)."""
    return SignedMagnitude(a.sign.flipped(), a.limbs)


def abs_value(a: SignedValue) -> SignedMagnitude:
    """NEGATIVE → POSITIVE с той же magnitude; остальные без изменений."""
    if a.sign == Sign.NEGATIVE:
        return SignedMagnitude(Sign.POSITIVE, a.limbs)
    return SignedMagnitude(a.sign, a.limbs)


def sub(a: SignedValue, b: SignedValue) -> SignedMagnitude:
    """Разность a - b = add(a, negate(b))."""
    return add(a, negate(b))


# =============================================================================
# ОПЕРАЦИИ НАД MAGNITUDE (для multiplication и division)
# =============================================================================


def add_magnitudes(left: Sequence[int], right: Sequence[int]) -> Magnitude:
    """Сумма двух неотрицательных magnitude."""
    return normalize_magnitude(_sum_digits(left, right))


def sub_magnitudes(left: Sequence[int], right: Sequence[int]) -> Magnitude:
    """
    Разность left - right для left >= right.

    Raises:
        ValueError: Если right > left
    """
    return normalize_magnitude(_sum_digits(left, negate_limbs(right)))
