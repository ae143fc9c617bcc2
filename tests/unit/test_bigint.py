"""
Тесты для BigInt (Immutable Pydantic модель)

Проверяет:
1. Канонический инвариант при конструировании
2. from_int / from_string / to_string
3. Методы арифметики и сравнения
4. Протокол Python: операторы, hash, bool, int, repr
5. Сценарии из документации
"""

import pytest
from pydantic import ValidationError

from exactint import (
    MINUS_ONE,
    ONE,
    ZERO,
    ArithmeticConfig,
    BigInt,
    DivModResult,
    Ordering,
    Sign,
    ZeroDivisorError,
    ZeroDivisorPolicy,
    max_value,
    min_value,
)


def b(n: int) -> BigInt:
    return BigInt.from_int(n)


# =============================================================================
# ИНВАРИАНТ
# =============================================================================


class TestCanonicalInvariant:
    """Валидация (sign, limbs)"""

    def test_valid_construction(self) -> None:
        value = BigInt(sign=Sign.POSITIVE, limbs=(5, 1))
        assert value == b(1_000_005)

    def test_positive_with_empty_limbs_rejected(self) -> None:
        with pytest.raises(ValidationError, match="does not match magnitude"):
            BigInt(sign=Sign.POSITIVE, limbs=())

    def test_zero_with_limbs_rejected(self) -> None:
        with pytest.raises(ValidationError, match="does not match magnitude"):
            BigInt(sign=Sign.ZERO, limbs=(1,))

    def test_high_zero_limb_rejected(self) -> None:
        with pytest.raises(ValidationError, match="without a high zero limb"):
            BigInt(sign=Sign.NEGATIVE, limbs=(1, 0))

    def test_limb_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BigInt(sign=Sign.POSITIVE, limbs=(1_000_000,))

    def test_frozen(self) -> None:
        value = b(5)
        with pytest.raises(ValidationError):
            value.sign = Sign.NEGATIVE  # type: ignore[misc]


# =============================================================================
# КОНСТРУКТОРЫ И ПЕЧАТЬ
# =============================================================================


class TestFromInt:
    def test_values(self) -> None:
        assert b(0) is not None and b(0).sign == Sign.ZERO
        assert b(-1).limbs == (1,)
        assert b(10**6).limbs == (0, 1)

    def test_constants(self) -> None:
        assert ZERO.to_string() == "0"
        assert ONE.to_string() == "1"
        assert MINUS_ONE.to_string() == "-1"

    @pytest.mark.parametrize("bad", [1.5, "5", None, True])
    def test_non_int_rejected(self, bad: object) -> None:
        with pytest.raises(TypeError, match="expected int"):
            BigInt.from_int(bad)  # type: ignore[arg-type]


class TestFromString:
    @pytest.mark.parametrize(
        "text,canonical",
        [("+5", "5"), ("-0", "0"), ("007", "7"), ("", "0"), ("-000123", "-123")],
    )
    def test_canonical_round_trip(self, text: str, canonical: str) -> None:
        value = BigInt.from_string(text)
        assert value is not None
        assert value.to_string() == canonical

    def test_long_round_trip(self) -> None:
        text = "123456789012345678901234567890"
        value = BigInt.from_string(text)
        assert value is not None
        assert value.to_string() == text
        assert str(-value) == "-" + text

    @pytest.mark.parametrize("text", ["12a", "1.5", "--3", "+"])
    def test_rejected(self, text: str) -> None:
        assert BigInt.from_string(text) is None

    def test_non_str_rejected(self) -> None:
        with pytest.raises(TypeError, match="expected str"):
            BigInt.from_string(b"12")  # type: ignore[arg-type]


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmeticMethods:
    def test_carry_scenario(self) -> None:
        """999999 + 1 → 1000000"""
        value = BigInt.from_string("999999")
        assert value is not None
        assert value.add(b(1)).to_string() == "1000000"

    def test_mul_scenario(self) -> None:
        assert b(1_000_000).mul(b(1_000_000)).to_string() == "1000000000000"

    def test_sub_negate_abs(self) -> None:
        assert b(3).sub(b(10)) == b(-7)
        assert b(-7).negate() == b(7)
        assert b(-7).abs() == b(7)
        assert ZERO.negate() is not None and ZERO.negate().sign == Sign.ZERO

    def test_identities(self) -> None:
        a = b(-(10**25) + 17)
        assert a.add(ZERO) == a
        assert a.add(a.negate()) == ZERO
        assert a.mul(ONE) == a
        assert a.mul(ZERO) == ZERO

    def test_divmod_scenarios(self) -> None:
        assert b(17).divmod(b(5)) == (b(3), b(2))
        assert b(-17).divmod(b(5)) == (b(-3), b(-2))

    def test_divmod_named_fields(self) -> None:
        result = b(-17).divmod(b(5))
        assert isinstance(result, DivModResult)
        assert result.quotient == b(-3)
        assert result.remainder == b(-2)

    def test_divmod_zero_divisor(self) -> None:
        assert b(17).divmod(ZERO) is None

    def test_div_zero_divisor_returns_zero(self) -> None:
        assert b(17).div(ZERO) == ZERO

    def test_div_zero_divisor_strict(self) -> None:
        strict = ArithmeticConfig(zero_divisor_policy=ZeroDivisorPolicy.STRICT)
        with pytest.raises(ZeroDivisorError):
            b(17).div(ZERO, strict)

    def test_mod_zero_divisor_fatal(self) -> None:
        with pytest.raises(ZeroDivisorError):
            b(17).mod(ZERO)

    def test_operations_do_not_mutate(self) -> None:
        a, c = b(999_999), b(1)
        a.add(c)
        a.mul(c)
        a.divmod(c)
        assert a == b(999_999)
        assert c == ONE


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestComparisonMethods:
    def test_compare(self) -> None:
        assert b(-5).compare(b(5)) == Ordering.LESS_THAN
        assert b(5).compare(b(-5)) == Ordering.GREATER_THAN
        assert b(5).compare(b(5)) == Ordering.EQUAL

    def test_predicates(self) -> None:
        assert b(1).lt(b(2)) and b(2).gt(b(1))
        assert b(2).lte(b(2)) and b(2).gte(b(2))
        assert b(2).eq(b(2)) and b(2).neq(b(3))

    def test_max_min(self) -> None:
        assert max_value(b(-5), b(5)) == b(5)
        assert min_value(b(-5), b(5)) == b(-5)


# =============================================================================
# ПРОТОКОЛ PYTHON
# =============================================================================


class TestPythonProtocol:
    def test_operators(self) -> None:
        assert b(2) + b(3) == b(5)
        assert b(2) - b(3) == b(-1)
        assert b(2) * b(-3) == b(-6)
        assert -b(2) == b(-2)
        assert +b(2) == b(2)
        assert abs(b(-2)) == b(2)

    def test_int_operands(self) -> None:
        assert b(2) + 3 == 5
        assert 3 + b(2) == 5
        assert 10 - b(3) == 7
        assert 4 * b(-3) == -12
        assert b(5) > 4
        assert 4 < b(5)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            b(2) + 1.5  # type: ignore[operator]
        assert (b(2) == "2") is False

    def test_floor_operators_not_overloaded(self) -> None:
        """// и % не перегружены (усечение ≠ floor)"""
        with pytest.raises(TypeError):
            b(-17) // b(5)  # type: ignore[operator]
        with pytest.raises(TypeError):
            b(-17) % b(5)  # type: ignore[operator]

    def test_sorting(self) -> None:
        values = [b(3), b(-10**20), ZERO, b(10**20), MINUS_ONE]
        assert [int(x) for x in sorted(values)] == [-(10**20), -1, 0, 3, 10**20]

    def test_hash_consistent_with_int(self) -> None:
        assert hash(b(10**30)) == hash(10**30)
        assert {b(5), b(5), 5} == {5}

    def test_bool(self) -> None:
        assert not ZERO
        assert MINUS_ONE

    def test_int_and_str(self) -> None:
        assert int(b(-(10**30))) == -(10**30)
        assert str(b(-42)) == "-42"
        assert repr(b(-42)) == "BigInt('-42')"
