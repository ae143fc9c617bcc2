"""
Comparison — полный порядок на BigInt

Быстрый путь по знаку:
    NEGATIVE < ZERO < POSITIVE

При равных знаках: обе magnitude дополняются нулями до равной длины и
сравниваются limb за limb от старшего к младшему. Для отрицательных
результат инвертируется (большая magnitude ⇒ меньшее значение).
"""

from typing import Final, Sequence, TypeVar

from exactint.core.domain.sign import Ordering, Sign
from exactint.core.math.limbs import SignedValue, pad_limbs

V = TypeVar("V", bound=SignedValue)

# Ранг знака для быстрого пути
_SIGN_RANK: Final[dict[Sign, int]] = {
    Sign.NEGATIVE: -1,
    Sign.ZERO: 0,
    Sign.POSITIVE: 1,
}


def compare_magnitudes(left: Sequence[int], right: Sequence[int]) -> Ordering:
    """
    Сравнение двух magnitude (без учёта знака).

    Examples:
        >>> compare_magnitudes((0, 1), (999999,))
        <Ordering.GREATER_THAN: 1>
    """
    length = max(len(left), len(right))
    a = pad_limbs(left, length)
    b = pad_limbs(right, length)

    for i in range(length - 1, -1, -1):
        if a[i] < b[i]:
            return Ordering.LESS_THAN
        if a[i] > b[i]:
            return Ordering.GREATER_THAN

    return Ordering.EQUAL


def compare(a: SignedValue, b: SignedValue) -> Ordering:
    """
    Трёхстороннее сравнение.

    Args:
        a: Левый операнд
        b: Правый операнд

    Returns:
        Ordering.LESS_THAN / EQUAL / GREATER_THAN
    """
    rank_a = _SIGN_RANK[a.sign]
    rank_b = _SIGN_RANK[b.sign]

    if rank_a != rank_b:
        return Ordering.LESS_THAN if rank_a < rank_b else Ordering.GREATER_THAN

    if a.sign == Sign.ZERO:
        return Ordering.EQUAL

    result = compare_magnitudes(a.limbs, b.limbs)
    if a.sign == Sign.NEGATIVE:
        return result.inverted()
    return result


# =============================================================================
# ПРОИЗВОДНЫЕ ПРЕДИКАТЫ
# =============================================================================


def eq(a: SignedValue, b: SignedValue) -> bool:
    return compare(a, b) == Ordering.EQUAL


def neq(a: SignedValue, b: SignedValue) -> bool:
    return compare(a, b) != Ordering.EQUAL


def lt(a: SignedValue, b: SignedValue) -> bool:
    return compare(a, b) == Ordering.LESS_THAN


def lte(a: SignedValue, b: SignedValue) -> bool:
    return compare(a, b) != Ordering.GREATER_THAN


def gt(a: SignedValue, b: SignedValue) -> bool:
    return compare(a, b) == Ordering.GREATER_THAN


def gte(a: SignedValue, b: SignedValue) -> bool:
    return compare(a, b) != Ordering.LESS_THAN


def max_value(a: V, b: V) -> V:
    """Больший из двух; при равенстве — a."""
    return b if lt(a, b) else a


def min_value(a: V, b: V) -> V:
    """Меньший из двух; при равенстве — a."""
    return b if gt(a, b) else a
