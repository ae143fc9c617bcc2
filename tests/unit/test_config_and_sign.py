"""
Тесты для ArithmeticConfig и перечислений Sign / Ordering
"""

import dataclasses

import pytest

from exactint.config import DEFAULT_CONFIG, ArithmeticConfig, ZeroDivisorPolicy
from exactint.core.domain.sign import Ordering, Sign


class TestArithmeticConfig:
    def test_default_is_legacy(self) -> None:
        assert DEFAULT_CONFIG.zero_divisor_policy == ZeroDivisorPolicy.LEGACY
        assert not DEFAULT_CONFIG.div_raises_on_zero

    def test_strict(self) -> None:
        config = ArithmeticConfig(zero_divisor_policy=ZeroDivisorPolicy.STRICT)
        assert config.div_raises_on_zero

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.zero_divisor_policy = ZeroDivisorPolicy.STRICT  # type: ignore[misc]

    def test_policy_from_string(self) -> None:
        assert ZeroDivisorPolicy("STRICT") == ZeroDivisorPolicy.STRICT


class TestSign:
    def test_flipped(self) -> None:
        assert Sign.POSITIVE.flipped() == Sign.NEGATIVE
        assert Sign.NEGATIVE.flipped() == Sign.POSITIVE
        assert Sign.ZERO.flipped() == Sign.ZERO

    def test_times_zero(self) -> None:
        assert Sign.ZERO.times(Sign.NEGATIVE) == Sign.ZERO
        assert Sign.POSITIVE.times(Sign.ZERO) == Sign.ZERO


class TestOrdering:
    def test_int_values(self) -> None:
        assert Ordering.LESS_THAN == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER_THAN == 1

    def test_inverted(self) -> None:
        assert Ordering.LESS_THAN.inverted() == Ordering.GREATER_THAN
        assert Ordering.EQUAL.inverted() == Ordering.EQUAL
