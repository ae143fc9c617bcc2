"""
Limbs — лимбовая модель и нормализатор

Модуль задаёт внутреннее представление модуля числа (magnitude) и
единственную процедуру, в которой выполняется перенос/заём между разрядами:
- Limb: целое в диапазоне [0, BASE), BASE = 10^6
- Magnitude: кортеж limbs, младший разряд первым, без старших нулевых limbs
- normalize: приведение произвольной знаковой последовательности цифр
  (отрицательных после вычитания, переполненных после умножения)
  к каноническому виду с определением знака

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническая magnitude не содержит старшего нулевого limb
2. Пустая magnitude ⇔ значение 0 ⇔ Sign.ZERO
3. Перенос вычисляется floor-делением: остаток всегда в [0, BASE),
   перенос может быть отрицательным
4. Все проходы итеративные (глубина стека не зависит от длины числа)

ШИРИНА ПРОМЕЖУТОЧНЫХ ЗНАЧЕНИЙ:
    limb × limb < BASE² = 10^12
    Python int не переполняется, но граница BASE² сохранена как
    MAX_LIMB_PRODUCT: при переносе на тип фиксированной ширины её нужно
    перепроверить.
"""

from typing import Final, Iterable, NamedTuple, Protocol, Sequence

from exactint.core.domain.sign import Sign

# =============================================================================
# КОНСТАНТЫ ЛИМБОВОЙ МОДЕЛИ
# =============================================================================

# Количество десятичных цифр в одном limb
LIMB_DIGITS: Final[int] = 6

# Основание системы счисления limbs
BASE: Final[int] = 10**LIMB_DIGITS

# Максимальное значение одного limb
MAX_LIMB: Final[int] = BASE - 1

# Верхняя граница произведения двух limbs (исключительно)
MAX_LIMB_PRODUCT: Final[int] = BASE * BASE

# Каноническая magnitude (младший limb первым)
Magnitude = tuple[int, ...]

EMPTY_MAGNITUDE: Final[Magnitude] = ()


class SignedValue(Protocol):
    """Любое значение со знаком и канонической magnitude (BigInt, SignedMagnitude)."""

    @property
    def sign(self) -> Sign: ...

    @property
    def limbs(self) -> Magnitude: ...


class SignedMagnitude(NamedTuple):
    """Каноническая пара (знак, magnitude) — результат операций math-слоя."""

    sign: Sign
    limbs: Magnitude


ZERO_PARTS: Final[SignedMagnitude] = SignedMagnitude(Sign.ZERO, EMPTY_MAGNITUDE)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ОПЕРАЦИИ НАД ПОСЛЕДОВАТЕЛЬНОСТЯМИ LIMBS
# =============================================================================


def strip_high_zeros(limbs: Sequence[int]) -> Magnitude:
    """
    Удаление старших нулевых limbs.

    Args:
        limbs: Последовательность limbs (младший первым)

    Returns:
        Кортеж без старших нулей; для нулевого значения — пустой кортеж

    Examples:
        >>> strip_high_zeros([5, 0, 0])
        (5,)
        >>> strip_high_zeros([0, 0])
        ()
    """
    end = len(limbs)
    while end > 0 and limbs[end - 1] == 0:
        end -= 1
    return tuple(limbs[:end])


def pad_limbs(limbs: Sequence[int], length: int) -> list[int]:
    """Дополнение нулевыми старшими limbs до длины length."""
    padded = list(limbs)
    if len(padded) < length:
        padded.extend([0] * (length - len(padded)))
    return padded


def shift_limbs(limbs: Sequence[int], positions: int) -> list[int]:
    """
    Сдвиг на positions limbs вверх (умножение на BASE^positions).

    Реализуется добавлением нулевых младших limbs.
    """
    if positions < 0:
        raise ValueError(f"positions must be non-negative, got {positions}")
    if not limbs:
        return []
    return [0] * positions + list(limbs)


def negate_limbs(limbs: Iterable[int]) -> list[int]:
    """Поразрядное отрицание (умножение каждого limb на -1)."""
    return [-digit for digit in limbs]


def is_canonical_magnitude(limbs: Sequence[int]) -> bool:
    """
    Проверка канонического вида magnitude.

    Returns:
        True если все limbs в [0, BASE) и старший limb ненулевой
        (или последовательность пуста)
    """
    if any(not 0 <= digit < BASE for digit in limbs):
        return False
    return not limbs or limbs[-1] != 0


# =============================================================================
# НОРМАЛИЗАТОР
# =============================================================================


def _propagate_carries(digits: Sequence[int]) -> tuple[list[int], int]:
    """
    Один проход переноса от младшего разряда к старшему.

    Returns:
        (limbs в [0, BASE), итоговый перенос)

        Положительный перенос уже разложен в дополнительные старшие limbs,
        поэтому возвращаемый перенос либо 0, либо отрицательный.
    """
    out: list[int] = []
    carry = 0

    for digit in digits:
        # floor-деление: остаток в [0, BASE) даже для отрицательных digit
        carry, limb = divmod(digit + carry, BASE)
        out.append(limb)

    while carry > 0:
        carry, limb = divmod(carry, BASE)
        out.append(limb)

    return out, carry


def normalize(digits: Sequence[int], sign: Sign = Sign.POSITIVE) -> SignedMagnitude:
    """
    Приведение знаковой последовательности цифр к каноническому виду.

    Входные цифры могут быть отрицательными (после вычитания) или
    превышать BASE (после умножения). Значение последовательности:
        sum(digits[i] * BASE^i), со знаком sign.

    Алгоритм:
    1. Проход переноса от младшего к старшему (floor div/mod)
    2. Если итоговый перенос отрицателен, значение отрицательно:
       все limbs (включая перенос как старший limb) умножаются на -1,
       знак инвертируется, проход повторяется
    3. Удаляются старшие нулевые limbs
    4. Нулевой результат → Sign.ZERO независимо от входного знака

    Шаг 2 выполняется не более одного раза: после отрицания значение
    положительно, и повторный проход даёт неотрицательный перенос.

    Args:
        digits: Произвольные целые (младший разряд первым)
        sign: Знак, приписываемый последовательности (default: POSITIVE)

    Returns:
        SignedMagnitude(sign, limbs) в каноническом виде

    Examples:
        >>> normalize([1_000_000]).limbs
        (0, 1)
        >>> normalize([-1, 0, 1]).limbs
        (999999, 999999)
        >>> normalize([5, -1])
        SignedMagnitude(sign=<Sign.NEGATIVE: 'negative'>, limbs=(999995,))
        >>> normalize([0, 0], Sign.NEGATIVE).sign
        <Sign.ZERO: 'zero'>
    """
    work: Sequence[int] = digits

    while True:
        limbs, carry = _propagate_carries(work)
        if carry >= 0:
            break
        work = negate_limbs(limbs) + [-carry]
        sign = sign.flipped()

    magnitude = strip_high_zeros(limbs)

    if not magnitude or sign == Sign.ZERO:
        return ZERO_PARTS

    return SignedMagnitude(sign, magnitude)


def normalize_magnitude(digits: Sequence[int]) -> Magnitude:
    """
    Нормализация последовательности, значение которой заведомо >= 0.

    Raises:
        ValueError: Если значение последовательности отрицательно
    """
    sign, magnitude = normalize(digits)
    if sign == Sign.NEGATIVE:
        raise ValueError("digit sequence has a negative value")
    return magnitude


# =============================================================================
# КОНВЕРСИЯ HOST INT ⇄ LIMBS
# =============================================================================


def limbs_from_int(value: int) -> SignedMagnitude:
    """
    Разложение Python int на знак и каноническую magnitude.

    Examples:
        >>> limbs_from_int(-1_000_001).limbs
        (1, 1)
    """
    if value == 0:
        return ZERO_PARTS

    sign = Sign.POSITIVE if value > 0 else Sign.NEGATIVE
    remaining = -value if value < 0 else value

    limbs: list[int] = []
    while remaining:
        remaining, limb = divmod(remaining, BASE)
        limbs.append(limb)

    return SignedMagnitude(sign, tuple(limbs))


def limbs_to_int(limbs: Sequence[int]) -> int:
    """Значение magnitude как неотрицательный Python int (схема Горнера)."""
    total = 0
    for limb in reversed(limbs):
        total = total * BASE + limb
    return total
