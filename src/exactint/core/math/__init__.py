"""
Core math modules для exactint

Лимбовая арифметика над каноническими парами (sign, limbs).
"""

# Limb model & normalizer
from exactint.core.math.limbs import (
    BASE,
    EMPTY_MAGNITUDE,
    LIMB_DIGITS,
    MAX_LIMB,
    MAX_LIMB_PRODUCT,
    ZERO_PARTS,
    Magnitude,
    SignedMagnitude,
    SignedValue,
    normalize,
)

# Parser / printer
from exactint.core.math.decimal_text import format_decimal, parse_decimal

# Comparator
from exactint.core.math.comparison import compare, compare_magnitudes

# Additive layer
from exactint.core.math.additive import abs_value, add, negate, sub

# Multiplier
from exactint.core.math.multiplication import mul, scale_magnitude

# Divider
from exactint.core.math.division import (
    POWERS_OF_TWO,
    div,
    divmod_magnitudes,
    divmod_values,
    mod,
)

__all__ = [
    # Limbs — Constants
    "BASE",
    "EMPTY_MAGNITUDE",
    "LIMB_DIGITS",
    "MAX_LIMB",
    "MAX_LIMB_PRODUCT",
    "ZERO_PARTS",
    # Limbs — Types
    "Magnitude",
    "SignedMagnitude",
    "SignedValue",
    # Limbs — Functions
    "normalize",
    # Decimal text
    "format_decimal",
    "parse_decimal",
    # Comparison
    "compare",
    "compare_magnitudes",
    # Additive
    "abs_value",
    "add",
    "negate",
    "sub",
    # Multiplication
    "mul",
    "scale_magnitude",
    # Division
    "POWERS_OF_TWO",
    "div",
    "divmod_magnitudes",
    "divmod_values",
    "mod",
]
