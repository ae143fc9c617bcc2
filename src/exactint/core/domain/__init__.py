"""
Domain models and value objects.

bigint — BigInt value type (imported from exactint or
exactint.core.domain.bigint; not re-exported here because the math layer
depends on the enums below).
"""

from exactint.core.domain.sign import Ordering, Sign

__all__ = [
    "Sign",
    "Ordering",
]
