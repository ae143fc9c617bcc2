"""
Multiplication — школьное умножение по limbs

Знак: правило знака произведения (Sign.times).
Magnitude: для каждого limb одного операнда вся magnitude другого
умножается на этот limb (scale_magnitude), сдвигается на позицию limb
и накапливается через add_magnitudes.

Стоимость O(n·m) умножений limb×limb. Каждое произведение < BASE²,
поэтому одного прохода normalize после масштабирования достаточно.
"""

from typing import Sequence

from exactint.core.domain.sign import Sign
from exactint.core.math.additive import add_magnitudes
from exactint.core.math.limbs import (
    EMPTY_MAGNITUDE,
    ZERO_PARTS,
    Magnitude,
    SignedMagnitude,
    SignedValue,
    normalize_magnitude,
    shift_limbs,
)


def scale_magnitude(limbs: Sequence[int], scalar: int) -> Magnitude:
    """
    Умножение magnitude на неотрицательный скаляр.

    Для scalar < BASE каждое промежуточное произведение < BASE².
    Больший скаляр допустим (Python int), но в умножении не используется.

    Args:
        limbs: Каноническая magnitude
        scalar: Неотрицательный множитель

    Returns:
        Каноническая magnitude произведения

    Raises:
        ValueError: Если scalar < 0

    Examples:
        >>> scale_magnitude((999999,), 2)
        (999998, 1)
    """
    if scalar < 0:
        raise ValueError(f"scalar must be non-negative, got {scalar}")
    if scalar == 0 or not limbs:
        return EMPTY_MAGNITUDE
    return normalize_magnitude([limb * scalar for limb in limbs])


def mul_magnitudes(left: Sequence[int], right: Sequence[int]) -> Magnitude:
    """
    Произведение двух magnitude.

    result = Σ scale_magnitude(left, right[i]) · BASE^i

    Итеративно по позициям limbs правого операнда.
    """
    if not left or not right:
        return EMPTY_MAGNITUDE

    # Внешний цикл по более короткому операнду: меньше проходов normalize
    if len(right) > len(left):
        left, right = right, left

    result: Magnitude = EMPTY_MAGNITUDE
    for position, limb in enumerate(right):
        if limb == 0:
            continue
        partial = shift_limbs(scale_magnitude(left, limb), position)
        result = add_magnitudes(result, partial)

    return result


def mul(a: SignedValue, b: SignedValue) -> SignedMagnitude:
    """
    Произведение a · b.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        Каноническая SignedMagnitude произведения
    """
    sign = a.sign.times(b.sign)
    if sign == Sign.ZERO:
        return ZERO_PARTS
    return SignedMagnitude(sign, mul_magnitudes(a.limbs, b.limbs))

