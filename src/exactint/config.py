"""
ArithmeticConfig — конфигурация арифметики exactint

Сейчас настраивается только поведение при нулевом делителе:

- LEGACY (по умолчанию): div(a, 0) → ZERO, mod(a, 0) → ZeroDivisorError.
  Асимметрия историческая и сохранена намеренно.
- STRICT: div и mod оба поднимают ZeroDivisorError.

divmod при нулевом делителе всегда возвращает None, независимо от политики.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final


class ZeroDivisorPolicy(str, Enum):
    """Поведение div/mod при нулевом делителе."""

    LEGACY = "LEGACY"
    STRICT = "STRICT"


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация операций деления.

    Attributes:
        zero_divisor_policy: LEGACY (div → ZERO) или STRICT (div → raise)
    """

    zero_divisor_policy: ZeroDivisorPolicy = ZeroDivisorPolicy.LEGACY

    @property
    def div_raises_on_zero(self) -> bool:
        return self.zero_divisor_policy == ZeroDivisorPolicy.STRICT


DEFAULT_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()
