"""Arbitrary-precision integer helpers with multiple-precision library semantics.

Python's ``int`` already provides arbitrary precision; this module supplies
the parsing, formatting, rounding and bit-level operations whose exact
behaviour the rest of the package relies on.
"""

from __future__ import annotations

import enum
from typing import Optional

__all__ = [
    "Sign",
    "ParseIntegerError",
    "from_str_radix",
    "to_str_radix",
    "size_in_base",
    "bit_length",
    "sign",
    "compl",
    "div_floor",
    "mod_floor",
    "div_trunc",
    "rem_trunc",
    "modulus",
    "div_ceil",
    "tstbit",
    "setbit",
    "clrbit",
    "combit",
    "popcount",
    "hamdist",
    "to_unsigned_bytes",
    "from_unsigned_bytes",
    "to_u64",
    "to_i64",
]

_LOWER_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_U64_MAX = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


class Sign(enum.IntEnum):
    """Sign of an integer, ordered negative < zero < positive."""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


class ParseIntegerError(ValueError):
    """Raised when a string is not a valid integer in the requested base."""

    def __init__(self, message: str = "invalid integer") -> None:
        super().__init__(message)


def _digit_value(char: str, base: int) -> int:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if base <= 36:
        if "a" <= char <= "z":
            return ord(char) - ord("a") + 10
        if "A" <= char <= "Z":
            return ord(char) - ord("A") + 10
    else:
        if "A" <= char <= "Z":
            return ord(char) - ord("A") + 10
        if "a" <= char <= "z":
            return ord(char) - ord("a") + 36
    return 99


def from_str_radix(text: str, base: int) -> int:
    """Parse ``text`` in ``base`` (0 for prefix detection, or 2..62).

    Whitespace anywhere in the string is ignored and a leading ``-`` is
    accepted. Raises :class:`ValueError` for an unsupported base and
    :class:`ParseIntegerError` for malformed input.
    """
    if not (base == 0 or 2 <= base <= 62):
        raise ValueError(f"unsupported base {base}")
    if "\0" in text:
        raise ParseIntegerError()
    body = "".join(text.split())
    negative = body.startswith("-")
    if negative:
        body = body[1:]

    if base == 0:
        if body[:2] in ("0x", "0X"):
            base, body = 16, body[2:]
        elif body[:2] in ("0b", "0B"):
            base, body = 2, body[2:]
        elif body.startswith("0"):
            base = 8
        else:
            base = 10

    if not body:
        raise ParseIntegerError()
    if any(_digit_value(ch, base) >= base for ch in body):
        raise ParseIntegerError()

    if base <= 36:
        value = int(body, base)
    else:
        value = 0
        for ch in body:
            value = value * base + _digit_value(ch, base)
    return -value if negative else value


def to_str_radix(value: int, base: int) -> str:
    """Format ``value`` in ``base`` (2..36) with lower-case digits."""
    if not 2 <= base <= 36:
        raise ValueError("invalid base")
    magnitude = abs(value)
    prefix = "-" if value < 0 else ""
    if base == 10:
        return prefix + str(magnitude)
    if base == 16:
        return prefix + format(magnitude, "x")
    if base == 8:
        return prefix + format(magnitude, "o")
    if base == 2:
        return prefix + format(magnitude, "b")
    if magnitude == 0:
        return "0"
    digits = []
    while magnitude:
        magnitude, rem = divmod(magnitude, base)
        digits.append(_LOWER_DIGITS[rem])
    return prefix + "".join(reversed(digits))


def size_in_base(value: int, base: int) -> int:
    """Number of digits of ``abs(value)`` in ``base`` (2..62); zero has one digit."""
    if not 2 <= base <= 62:
        raise ValueError(f"unsupported base {base}")
    magnitude = abs(value)
    if magnitude == 0:
        return 1
    if base & (base - 1) == 0:
        bits_per_digit = base.bit_length() - 1
        return -(-magnitude.bit_length() // bits_per_digit)
    count = 0
    while magnitude:
        magnitude //= base
        count += 1
    return count


def bit_length(value: int) -> int:
    """Size of ``abs(value)`` in bits; zero counts as one bit."""
    return max(abs(value).bit_length(), 1)


def sign(value: int) -> Sign:
    """Return the :class:`Sign` of ``value``."""
    if value == 0:
        return Sign.ZERO
    return Sign.POSITIVE if value > 0 else Sign.NEGATIVE


def compl(value: int) -> int:
    """One's complement of ``value``."""
    return ~value


def _check_divisor(d: int) -> None:
    if d == 0:
        raise ZeroDivisionError("divide by zero")


def div_floor(n: int, d: int) -> int:
    """Quotient rounded towards negative infinity."""
    _check_divisor(d)
    return n // d


def mod_floor(n: int, d: int) -> int:
    """Remainder matching :func:`div_floor`; takes the sign of ``d``."""
    _check_divisor(d)
    return n % d


def div_trunc(n: int, d: int) -> int:
    """Quotient rounded towards zero."""
    _check_divisor(d)
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def rem_trunc(n: int, d: int) -> int:
    """Remainder matching :func:`div_trunc`; takes the sign of ``n``."""
    _check_divisor(d)
    r = abs(n) % abs(d)
    return -r if n < 0 else r


def modulus(n: int, m: int) -> int:
    """Non-negative remainder of ``n`` modulo ``|m|``."""
    _check_divisor(m)
    return n % abs(m)


def div_ceil(n: int, d: int) -> int:
    """Quotient rounded towards positive infinity."""
    _check_divisor(d)
    return -((-n) // d)


def _check_index(index: int) -> None:
    if index < 0:
        raise ValueError("bit index must be non-negative")


def tstbit(value: int, index: int) -> bool:
    """Test bit ``index`` of ``value`` in two's complement."""
    _check_index(index)
    return bool((value >> index) & 1)


def setbit(value: int, index: int) -> int:
    """Return ``value`` with bit ``index`` set."""
    _check_index(index)
    return value | (1 << index)


def clrbit(value: int, index: int) -> int:
    """Return ``value`` with bit ``index`` cleared."""
    _check_index(index)
    return value & ~(1 << index)


def combit(value: int, index: int) -> int:
    """Return ``value`` with bit ``index`` flipped."""
    _check_index(index)
    return value ^ (1 << index)


def popcount(value: int) -> int:
    """Number of one bits; a negative value has infinitely many and is rejected."""
    if value < 0:
        raise ValueError("population count of a negative number is infinite")
    return bin(value).count("1")


def hamdist(a: int, b: int) -> int:
    """Hamming distance between ``a`` and ``b`` in two's complement."""
    if (a < 0) != (b < 0):
        raise ValueError("Hamming distance between numbers of different sign is infinite")
    return bin(a ^ b).count("1")


def to_unsigned_bytes(value: int) -> bytes:
    """Big-endian bytes of ``abs(value)``; the sign is dropped and zero gives one byte."""
    magnitude = abs(value)
    return magnitude.to_bytes((bit_length(magnitude) + 7) // 8, "big")


def from_unsigned_bytes(data: bytes) -> int:
    """Interpret ``data`` as a big-endian unsigned integer."""
    return int.from_bytes(bytes(data), "big")


def to_u64(value: int) -> Optional[int]:
    """``value`` if it fits an unsigned 64-bit integer, else ``None``."""
    return value if 0 <= value <= _U64_MAX else None


def to_i64(value: int) -> Optional[int]:
    """``value`` if it fits a signed 64-bit integer, else ``None``."""
    return value if _I64_MIN <= value <= _I64_MAX else None