"""Fixed-point reciprocals of 64-bit divisors.

The reciprocal of ``divisor`` is ``2**x // divisor`` for the highest integer
``x`` for which the result still fits in 64 bits.
"""

from __future__ import annotations

import operator

__all__ = ["reciprocal", "reciprocal_fast"]

_UINT64_LIMIT = 1 << 64
_UINT64_MASK = _UINT64_LIMIT - 1


def _check_divisor(divisor: int) -> int:
    value = operator.index(divisor)
    if value == 0:
        raise ZeroDivisionError("divisor must not be 0")
    if not 0 < value < _UINT64_LIMIT:
        raise ValueError(f"divisor out of the unsigned 64-bit range: {value}")
    return value


def reciprocal(divisor: int) -> int:
    """Return ``2**x // divisor`` for the highest ``x`` keeping it below ``2**64``.

    The divisor must be a non-zero unsigned 64-bit integer. It is meant not to
    be a power of two; for powers of two the result wraps to 64 bits.
    """
    value = _check_divisor(divisor)
    # The shift equals 63 plus the number of significant bits in the divisor.
    exponent = 63 + value.bit_length()
    return ((1 << exponent) // value) & _UINT64_MASK


def reciprocal_fast(divisor: int) -> int:
    """Return the same value as :func:`reciprocal`."""
    return reciprocal(divisor)