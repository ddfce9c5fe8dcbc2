"""Bit-level helpers for 32-bit floats and unsigned integer division."""

import math
import struct

_CANONICAL_NAN_BITS = 0x7FC0_0000


def to_canon_bits(value: float) -> int:
    """Return the IEEE-754 single-precision bits of ``value``.

    Every NaN maps to the same canonical NaN pattern and both zeros map
    to the bits of positive zero, so equal values give equal bits.
    """
    if math.isnan(value):
        return _CANONICAL_NAN_BITS
    if value == 0.0:
        return 0
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    return bits


def div_ceil(a: int, b: int) -> int:
    """Divide two non-negative integers, rounding the quotient up."""
    if a < 0 or b < 0:
        raise ValueError("div_ceil takes non-negative operands")
    return (a + b - 1) // b