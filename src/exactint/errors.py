"""
Errors — иерархия исключений exactint

Единственное восстанавливаемое условие во всей библиотеке — деление на ноль.
Некорректный десятичный текст НЕ является исключением: from_string
возвращает None.
"""


class ExactIntError(Exception):
    """Базовое исключение exactint."""

    pass


class ZeroDivisorError(ExactIntError, ZeroDivisionError):
    """
    Делитель равен нулю.

    Фатальная ошибка для mod (всегда) и для div при ZeroDivisorPolicy.STRICT.
    Наследуется от ZeroDivisionError, поэтому стандартный
    `except ZeroDivisionError` её перехватывает.
    """

    pass


class NonCanonicalValueError(ExactIntError, ValueError):
    """
    Пара (sign, limbs) нарушает канонический инвариант.

    Примеры нарушений:
    - ZERO с непустыми limbs
    - POSITIVE/NEGATIVE с пустыми limbs
    - старший limb равен нулю
    - limb вне диапазона [0, BASE)
    """

    pass
