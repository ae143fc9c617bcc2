"""
Decimal Text — разбор и печать десятичного текста

Грамматика разбора:
    text   := ""                      (пустая строка → 0)
            | [sign] digit+
    sign   := "+" | "-"
    digit  := "0" ... "9"             (только ASCII)

Отклоняется (возвращается None):
- знак без цифр ("+", "-")
- любой не-цифровой символ среди цифр ("12a", "1.5", "--3")
- пробелы и разделители разрядов (" 1", "1_000", "1,000")

Печать:
- ноль → "0"
- "-" для отрицательных, без префикса для положительных
- старший limb без дополнения, остальные — ровно LIMB_DIGITS цифр с нулями
"""

import logging
from typing import Final, Optional

from exactint.core.domain.sign import Sign
from exactint.core.math.limbs import (
    LIMB_DIGITS,
    ZERO_PARTS,
    Magnitude,
    SignedMagnitude,
    strip_high_zeros,
)

logger = logging.getLogger(__name__)

ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# Длина фрагмента входного текста в DEBUG-логе
LOG_PREVIEW_CHARS: Final[int] = 32


def _preview(text: str) -> str:
    if len(text) <= LOG_PREVIEW_CHARS:
        return repr(text)
    return f"{text[:LOG_PREVIEW_CHARS]!r}... ({len(text)} chars)"


# =============================================================================
# РАЗБОР
# =============================================================================


def split_digit_groups(digits: str) -> list[str]:
    """
    Разбиение строки цифр на группы по LIMB_DIGITS с младшего конца.

    Только старшая группа может быть короче LIMB_DIGITS.
    Результат упорядочен младшей группой первой.

    Examples:
        >>> split_digit_groups("1234567")
        ['234567', '1']
    """
    groups: list[str] = []
    end = len(digits)
    while end > 0:
        start = max(end - LIMB_DIGITS, 0)
        groups.append(digits[start:end])
        end = start
    return groups


def parse_decimal(text: str) -> Optional[SignedMagnitude]:
    """
    Разбор десятичного текста в знак и каноническую magnitude.

    Args:
        text: Десятичная строка

    Returns:
        SignedMagnitude или None, если текст не соответствует грамматике

    Examples:
        >>> parse_decimal("-1000000")
        SignedMagnitude(sign=<Sign.NEGATIVE: 'negative'>, limbs=(0, 1))
        >>> parse_decimal("") == ZERO_PARTS
        True
        >>> parse_decimal("+") is None
        True
    """
    if text == "":
        return ZERO_PARTS

    sign = Sign.POSITIVE
    digits = text
    if text[0] in "+-":
        if text[0] == "-":
            sign = Sign.NEGATIVE
        digits = text[1:]

    if not digits:
        logger.debug("Rejected decimal text %s: sign without digits", _preview(text))
        return None

    for ch in digits:
        if ch not in ASCII_DIGITS:
            logger.debug(
                "Rejected decimal text %s: unexpected character %r",
                _preview(text),
                ch,
            )
            return None

    magnitude = strip_high_zeros([int(group) for group in split_digit_groups(digits)])

    if not magnitude:
        return ZERO_PARTS

    return SignedMagnitude(sign, magnitude)


# =============================================================================
# ПЕЧАТЬ
# =============================================================================


def format_decimal(sign: Sign, magnitude: Magnitude) -> str:
    """
    Каноническое десятичное представление.

    Args:
        sign: Знак значения
        magnitude: Каноническая magnitude (младший limb первым)

    Returns:
        Десятичная строка без ведущих нулей

    Examples:
        >>> format_decimal(Sign.NEGATIVE, (5, 1))
        '-1000005'
        >>> format_decimal(Sign.ZERO, ())
        '0'
    """
    if sign == Sign.ZERO or not magnitude:
        return "0"

    prefix = "-" if sign == Sign.NEGATIVE else ""
    head = str(magnitude[-1])
    tail = "".join(str(limb).zfill(LIMB_DIGITS) for limb in reversed(magnitude[:-1]))
    return prefix + head + tail
