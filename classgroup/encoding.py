"""Two's-complement byte encoding of integers and small arithmetic helpers.

These are the low-level routines the class-group code uses to marshal form
coefficients and to take small remainders.
"""

from __future__ import annotations

from .bignum import bit_length, div_ceil, mod_floor
from .numtheory import gcd

__all__ = [
    "BufferTooSmallError",
    "import_obj",
    "export_obj",
    "size_in_bits",
    "three_gcd",
    "crem_u16",
    "frem_u32",
]

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFF_FFFF


class BufferTooSmallError(ValueError):
    """Raised when an integer does not fit the requested number of bytes.

    ``needed`` holds the number of bytes that would be required.
    """

    def __init__(self, needed: int) -> None:
        super().__init__(f"buffer too small: {needed} bytes needed")
        self.needed = needed


def import_obj(data: bytes) -> int:
    """Decode ``data`` as a two's-complement big-endian integer; empty gives 0."""
    return int.from_bytes(bytes(data), "big", signed=True)


def size_in_bits(value: int) -> int:
    """Size of ``abs(value)`` in bits; zero counts as one bit."""
    return bit_length(value)


def export_obj(value: int, length: int) -> bytes:
    """Encode ``value`` as ``length`` bytes of two's-complement big-endian data.

    One bit beyond the magnitude is always reserved for the sign, so the
    required length is ``(size_in_bits(value) + 8) // 8``. Zero may also be
    encoded into an empty buffer. Raises :class:`BufferTooSmallError` when
    ``length`` is too small.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    needed = (size_in_bits(value) + 8) >> 3
    if length < needed:
        if length == 0 and value == 0:
            return b""
        raise BufferTooSmallError(needed)
    return value.to_bytes(length, "big", signed=True)


def three_gcd(a: int, b: int, c: int) -> int:
    """Greatest common divisor of three integers."""
    return gcd(gcd(a, b), c)


def _check_unsigned_divisor(d: int, limit: int) -> None:
    if d == 0:
        raise ZeroDivisionError("divide by zero")
    if not 0 < d <= limit:
        raise ValueError(f"divisor must be in 1..{limit}")


def crem_u16(n: int, d: int) -> int:
    """Absolute remainder of ``n`` divided by ``d`` rounding the quotient up."""
    _check_unsigned_divisor(d, _U16_MAX)
    return abs(n - div_ceil(n, d) * d)


def frem_u32(n: int, d: int) -> int:
    """Remainder of ``n`` divided by ``d`` rounding the quotient down."""
    _check_unsigned_divisor(d, _U32_MAX)
    return mod_floor(n, d)