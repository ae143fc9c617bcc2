"""
BigInt — неизменяемое целое произвольной точности

Immutable Pydantic модель: знак + каноническая magnitude (limbs по
основанию 10^6, младший первым). Вся арифметика делегируется в
exactint.core.math, модель отвечает за:
- проверку канонического инварианта при конструировании
- конструкторы from_int / from_string
- операторы Python и приведение int-операндов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Sign.ZERO ⇔ limbs == ()
2. POSITIVE/NEGATIVE всегда с непустой канонической magnitude
3. Каждая операция возвращает новый объект, входы не изменяются

Операторы // и % НЕ перегружены: в Python они используют floor-семантику,
а BigInt.div / BigInt.mod — усечение к нулю.
"""

from typing import Any, Final, NamedTuple, Optional, Union

from pydantic import BaseModel, Field, model_validator

from exactint.config import DEFAULT_CONFIG, ArithmeticConfig
from exactint.core.domain.sign import Ordering, Sign
from exactint.core.math import additive, comparison, division, multiplication
from exactint.core.math.decimal_text import format_decimal, parse_decimal
from exactint.core.math.limbs import (
    Magnitude,
    SignedValue,
    is_canonical_magnitude,
    limbs_from_int,
    limbs_to_int,
)
from exactint.errors import NonCanonicalValueError

IntLike = Union["BigInt", int]


class DivModResult(NamedTuple):
    """Частное и остаток усечённого деления."""

    quotient: "BigInt"
    remainder: "BigInt"


class BigInt(BaseModel):
    """
    Целое число произвольной точности.

    Immutable модель (frozen=True). Конструируется через from_int,
    from_string или как результат операции.

    Examples:
        >>> BigInt.from_int(10**6) * BigInt.from_int(10**6)
        BigInt('1000000000000')
        >>> BigInt.from_int(-17).divmod(BigInt.from_int(5))
        DivModResult(quotient=BigInt('-3'), remainder=BigInt('-2'))
    """

    sign: Sign = Field(..., description="Знак значения")
    limbs: Magnitude = Field(
        ..., description="Каноническая magnitude, limbs по основанию 10^6, младший первым"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_canonical(self) -> "BigInt":
        """Проверка канонического инварианта (sign, limbs)."""
        if not is_canonical_magnitude(self.limbs):
            raise NonCanonicalValueError(
                f"limbs must be in [0, 10^6) without a high zero limb, got {self.limbs!r}"
            )
        if (self.sign == Sign.ZERO) != (not self.limbs):
            raise NonCanonicalValueError(
                f"sign {self.sign.value} does not match magnitude {self.limbs!r}"
            )
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_parts(cls, parts: SignedValue) -> "BigInt":
        """Обёртка канонической пары (sign, limbs) из math-слоя."""
        if isinstance(parts, BigInt):
            return parts
        return cls(sign=parts.sign, limbs=parts.limbs)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Конструирование из Python int.

        Raises:
            TypeError: Если value не int (bool отклоняется)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return cls.from_parts(limbs_from_int(value))

    @classmethod
    def from_string(cls, text: str) -> Optional["BigInt"]:
        """
        Разбор десятичного текста.

        Returns:
            BigInt или None, если текст некорректен

        Raises:
            TypeError: Если text не str

        Examples:
            >>> BigInt.from_string("-007")
            BigInt('-7')
            >>> BigInt.from_string("1.5") is None
            True
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        parts = parse_decimal(text)
        if parts is None:
            return None
        return cls.from_parts(parts)

    # =========================================================================
    # КОНВЕРСИЯ
    # =========================================================================

    def to_string(self) -> str:
        """Каноническое десятичное представление."""
        return format_decimal(self.sign, self.limbs)

    def to_int(self) -> int:
        """Значение как Python int."""
        magnitude = limbs_to_int(self.limbs)
        return -magnitude if self.sign == Sign.NEGATIVE else magnitude

    def is_zero(self) -> bool:
        return self.sign == Sign.ZERO

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "BigInt") -> "BigInt":
        return BigInt.from_parts(additive.add(self, other))

    def sub(self, other: "BigInt") -> "BigInt":
        return BigInt.from_parts(additive.sub(self, other))

    def mul(self, other: "BigInt") -> "BigInt":
        return BigInt.from_parts(multiplication.mul(self, other))

    def negate(self) -> "BigInt":
        return BigInt.from_parts(additive.negate(self))

    def abs(self) -> "BigInt":
        return BigInt.from_parts(additive.abs_value(self))

    def div(self, other: "BigInt", config: ArithmeticConfig = DEFAULT_CONFIG) -> "BigInt":
        """
        Частное с усечением к нулю.

        При нулевом делителе возвращает ZERO (ZeroDivisorPolicy.LEGACY)
        или поднимает ZeroDivisorError (ZeroDivisorPolicy.STRICT).
        """
        return BigInt.from_parts(division.div(self, other, config))

    def mod(self, other: "BigInt", config: ArithmeticConfig = DEFAULT_CONFIG) -> "BigInt":
        """
        Остаток с усечением к нулю (знак следует за делимым).

        Raises:
            ZeroDivisorError: Если other равен нулю
        """
        return BigInt.from_parts(division.mod(self, other, config))

    def divmod(self, other: "BigInt") -> Optional[DivModResult]:
        """
        Частное и остаток.

        Returns:
            DivModResult(quotient, remainder) или None при нулевом делителе
        """
        result = division.divmod_values(self, other)
        if result is None:
            return None
        quotient, remainder = result
        return DivModResult(BigInt.from_parts(quotient), BigInt.from_parts(remainder))

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: "BigInt") -> Ordering:
        return comparison.compare(self, other)

    def eq(self, other: "BigInt") -> bool:
        return comparison.eq(self, other)

    def neq(self, other: "BigInt") -> bool:
        return comparison.neq(self, other)

    def lt(self, other: "BigInt") -> bool:
        return comparison.lt(self, other)

    def lte(self, other: "BigInt") -> bool:
        return comparison.lte(self, other)

    def gt(self, other: "BigInt") -> bool:
        return comparison.gt(self, other)

    def gte(self, other: "BigInt") -> bool:
        return comparison.gte(self, other)

    # =========================================================================
    # ПРОТОКОЛ PYTHON
    # =========================================================================

    def __add__(self, other: IntLike) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    def __radd__(self, other: IntLike) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.add(self)

    def __sub__(self, other: IntLike) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.sub(rhs)

    def __rsub__(self, other: IntLike) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.sub(self)

    def __mul__(self, other: IntLike) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.mul(rhs)

    def __rmul__(self, other: IntLike) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.mul(self)

    def __neg__(self) -> "BigInt":
        return self.negate()

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        return self.abs()

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.eq(rhs)

    def __ne__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.neq(rhs)

    def __lt__(self, other: IntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.lt(rhs)

    def __le__(self, other: IntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.lte(rhs)

    def __gt__(self, other: IntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.gt(rhs)

    def __ge__(self, other: IntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.gte(rhs)

    def __hash__(self) -> int:
        # Совпадает с hash(int) для равных значений
        return hash(self.to_int())

    def __bool__(self) -> bool:
        return self.sign != Sign.ZERO

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt({self.to_string()!r})"


def _coerce(value: Any) -> Optional[BigInt]:
    """BigInt как есть, int (не bool) через from_int, иначе None."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt.from_int(value)
    return None


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[BigInt] = BigInt.from_int(0)
ONE: Final[BigInt] = BigInt.from_int(1)
MINUS_ONE: Final[BigInt] = BigInt.from_int(-1)


def max_value(a: BigInt, b: BigInt) -> BigInt:
    """Больший из двух; при равенстве — a."""
    return comparison.max_value(a, b)


def min_value(a: BigInt, b: BigInt) -> BigInt:
    """Меньший из двух; при равенстве — a."""
    return comparison.min_value(a, b)
