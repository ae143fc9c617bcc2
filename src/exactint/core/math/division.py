"""
Division — усечённое деление с остатком

Соглашение (truncation toward zero):
    a = q·b + r,  0 <= |r| < |b|
    sign(q) = sign(a) · sign(b)
    sign(r) = sign(a) (или ZERO)

Алгоритм (без повторного вычитания, линейного по величине частного):
1. Степени двойки от 2^(bit_length(BASE-1)-1) до 2^0 вычисляются один раз
   при импорте (POWERS_OF_TWO)
2. Для делителя один раз строятся произведения candidate·|b|
3. Для каждой позиции limb частного от старшей к младшей
   (всего max(len(a) - len(b) + 1, 0) позиций) и каждого candidate:
   если candidate·|b|·BASE^pos <= остаток, candidate добавляется к limb
   частного, произведение вычитается из остатка
4. Остаток переносится между позициями

Перед позицией pos остаток < |b|·BASE^(pos+1), поэтому сумма выбранных
candidate для позиции < BASE.

Нулевой делитель:
- divmod_values → None
- div → ZERO (ZeroDivisorPolicy.LEGACY) или ZeroDivisorError (STRICT)
- mod → ZeroDivisorError всегда
"""

import logging
from typing import Final, Optional, Sequence

from exactint.config import DEFAULT_CONFIG, ArithmeticConfig
from exactint.core.domain.sign import Ordering, Sign
from exactint.core.math.additive import sub_magnitudes
from exactint.core.math.comparison import compare_magnitudes
from exactint.core.math.limbs import (
    MAX_LIMB,
    ZERO_PARTS,
    Magnitude,
    SignedMagnitude,
    SignedValue,
    normalize_magnitude,
    shift_limbs,
)
from exactint.core.math.multiplication import scale_magnitude
from exactint.errors import ZeroDivisorError

logger = logging.getLogger(__name__)

# Кандидаты для одного limb частного: 2^19, 2^18, ..., 2^0
POWERS_OF_TWO: Final[tuple[int, ...]] = tuple(
    1 << k for k in range(MAX_LIMB.bit_length() - 1, -1, -1)
)


def quotient_span(dividend: Sequence[int], divisor: Sequence[int]) -> int:
    """Количество позиций limbs частного: max(len(a) - len(b) + 1, 0)."""
    return max(len(dividend) - len(divisor) + 1, 0)


def divmod_magnitudes(
    dividend: Sequence[int], divisor: Sequence[int]
) -> tuple[Magnitude, Magnitude]:
    """
    Деление magnitude с остатком.

    Args:
        dividend: Каноническая magnitude делимого
        divisor: Каноническая непустая magnitude делителя

    Returns:
        (частное, остаток) — канонические magnitude

    Raises:
        ZeroDivisorError: Если divisor пуст

    Examples:
        >>> divmod_magnitudes((17,), (5,))
        ((3,), (2,))
    """
    if not divisor:
        raise ZeroDivisorError("magnitude division by zero")

    span = quotient_span(dividend, divisor)
    remainder: Magnitude = tuple(dividend)
    quotient_limbs = [0] * span

    scaled_divisors = [
        (candidate, scale_magnitude(divisor, candidate)) for candidate in POWERS_OF_TWO
    ]

    for position in range(span - 1, -1, -1):
        for candidate, scaled in scaled_divisors:
            trial = shift_limbs(scaled, position)
            if compare_magnitudes(trial, remainder) != Ordering.GREATER_THAN:
                quotient_limbs[position] += candidate
                remainder = sub_magnitudes(remainder, trial)

    return normalize_magnitude(quotient_limbs), remainder


def divmod_values(
    a: SignedValue, b: SignedValue
) -> Optional[tuple[SignedMagnitude, SignedMagnitude]]:
    """
    Частное и остаток с усечением к нулю.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        (quotient, remainder) или None, если b равен нулю
    """
    if b.sign == Sign.ZERO:
        logger.debug("divmod by zero divisor: no result")
        return None

    if a.sign == Sign.ZERO:
        return ZERO_PARTS, ZERO_PARTS

    quotient_mag, remainder_mag = divmod_magnitudes(a.limbs, b.limbs)

    quotient = (
        SignedMagnitude(a.sign.times(b.sign), quotient_mag) if quotient_mag else ZERO_PARTS
    )
    remainder = SignedMagnitude(a.sign, remainder_mag) if remainder_mag else ZERO_PARTS

    return quotient, remainder


def div(
    a: SignedValue, b: SignedValue, config: ArithmeticConfig = DEFAULT_CONFIG
) -> SignedMagnitude:
    """
    Частное с усечением к нулю.

    При нулевом делителе:
    - ZeroDivisorPolicy.LEGACY → ZERO (как усечённое деление на ноль,
      возвращающее ноль)
    - ZeroDivisorPolicy.STRICT → ZeroDivisorError

    Raises:
        ZeroDivisorError: Только при STRICT и b == 0
    """
    result = divmod_values(a, b)
    if result is None:
        if config.div_raises_on_zero:
            raise ZeroDivisorError("division by zero")
        logger.debug("div by zero divisor: returning zero (legacy policy)")
        return ZERO_PARTS
    return result[0]


def mod(
    a: SignedValue, b: SignedValue, config: ArithmeticConfig = DEFAULT_CONFIG
) -> SignedMagnitude:
    """
    Остаток с усечением к нулю (знак следует за делимым).

    Нулевой делитель — фатальная ошибка при любой политике; config
    принимается для симметрии с div.

    Raises:
        ZeroDivisorError: Если b == 0
    """
    result = divmod_values(a, b)
    if result is None:
        raise ZeroDivisorError(
            f"modulo by zero (policy={config.zero_divisor_policy.value})"
        )
    return result[1]
