"""Number-theoretic functions on Python integers.

Primality testing, greatest common divisors, modular inverses and powers,
and integer roots, with the argument conventions and result ranges of a
multiple-precision arithmetic library.
"""

from __future__ import annotations

import enum
import math
import random
from typing import Optional, Tuple

__all__ = [
    "ProbabPrimeResult",
    "probab_prime",
    "millerrabin",
    "nextprime",
    "gcd",
    "gcdext",
    "lcm",
    "is_multiple_of",
    "invert",
    "powm",
    "ui_pow_ui",
    "root",
    "sqrt",
]

# Below this bound trial division decides primality with certainty.
_DEFINITE_LIMIT = 1_000_000
# The first thirteen primes as Miller-Rabin bases decide every n below this.
_DETERMINISTIC_LIMIT = 3_317_044_064_679_887_385_961_981
_DETERMINISTIC_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def _sieve(limit: int) -> tuple[int, ...]:
    flags = bytearray([1]) * (limit + 1)
    flags[0:2] = b"\x00\x00"
    for p in range(2, math.isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return tuple(i for i, flag in enumerate(flags) if flag)


_SMALL_PRIMES = _sieve(1000)


class ProbabPrimeResult(enum.IntEnum):
    """Outcome of a probabilistic primality test."""

    NOT_PRIME = 0
    PROBABLY_PRIME = 1
    PRIME = 2


def _is_strong_probable_prime(n: int, d: int, s: int, base: int) -> bool:
    x = pow(base, d, n)
    if x in (1, n - 1):
        return True
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def _miller_rabin(n: int, reps: int) -> bool:
    """Miller-Rabin on odd ``n`` > 3: deterministic bases plus ``reps`` random ones."""
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    bases = [b for b in _DETERMINISTIC_BASES if b < n - 1]
    if n >= _DETERMINISTIC_LIMIT:
        rng = random.Random(n)
        bases.extend(rng.randrange(2, n - 1) for _ in range(max(reps, 0)))
    return all(_is_strong_probable_prime(n, d, s, b) for b in bases)


def probab_prime(n: int, reps: int) -> ProbabPrimeResult:
    """Test ``|n|`` for primality.

    Small numbers are decided with certainty (``PRIME`` or ``NOT_PRIME``);
    larger ones that pass trial division and Miller-Rabin rounds are reported
    as ``PROBABLY_PRIME``.
    """
    n = abs(n)
    if n < 2:
        return ProbabPrimeResult.NOT_PRIME
    if n < _DEFINITE_LIMIT:
        limit = math.isqrt(n)
        for p in _SMALL_PRIMES:
            if p > limit:
                break
            if n % p == 0:
                return ProbabPrimeResult.NOT_PRIME
        return ProbabPrimeResult.PRIME
    if any(n % p == 0 for p in _SMALL_PRIMES):
        return ProbabPrimeResult.NOT_PRIME
    if _miller_rabin(n, reps):
        return ProbabPrimeResult.PROBABLY_PRIME
    return ProbabPrimeResult.NOT_PRIME


def millerrabin(n: int, reps: int) -> int:
    """Run Miller-Rabin on ``|n|``: 1 if probably prime, 0 if composite."""
    n = abs(n)
    if n < 2:
        return 0
    if n in (2, 3):
        return 1
    if n % 2 == 0:
        return 0
    return 1 if _miller_rabin(n, reps) else 0


def nextprime(n: int) -> int:
    """Smallest prime strictly greater than ``n`` (2 for any ``n`` below 2)."""
    if n < 2:
        return 2
    candidate = n + 1
    if candidate == 2:
        return 2
    if candidate % 2 == 0:
        candidate += 1
    while probab_prime(candidate, 25) is ProbabPrimeResult.NOT_PRIME:
        candidate += 2
    return candidate


def gcd(a: int, b: int) -> int:
    """Non-negative greatest common divisor; ``gcd(0, 0)`` is 0."""
    return math.gcd(a, b)


def _signum(x: int) -> int:
    return (x > 0) - (x < 0)


def gcdext(a: int, b: int) -> Tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``g = gcd(a, b) = s*a + t*b`` and ``g >= 0``."""
    if a == 0 and b == 0:
        return 0, 0, 0
    if b == 0:
        return abs(a), _signum(a), 0
    if a == 0:
        return abs(b), 0, _signum(b)
    old_r, r = abs(a), abs(b)
    old_s, s = 1, 0
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
    g = old_r
    s_coef = old_s if a > 0 else -old_s
    t_coef = (g - s_coef * a) // b
    return g, s_coef, t_coef


def lcm(a: int, b: int) -> int:
    """Non-negative least common multiple; zero if either argument is zero."""
    if a == 0 or b == 0:
        return 0
    return abs(a // math.gcd(a, b) * b)


def is_multiple_of(n: int, d: int) -> bool:
    """Whether ``n`` is divisible by ``d``; only zero is a multiple of zero."""
    if d == 0:
        return n == 0
    return n % d == 0


def invert(n: int, m: int) -> Optional[int]:
    """Inverse of ``n`` modulo ``|m|`` in ``[0, |m|)``, or ``None`` if none exists."""
    if m == 0:
        raise ZeroDivisionError("divide by zero")
    modulus = abs(m)
    if modulus == 1:
        return 0
    try:
        return pow(n, -1, modulus)
    except ValueError:
        return None


def powm(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent`` modulo ``|modulus|``, in ``[0, |modulus|)``.

    A negative exponent uses the modular inverse of ``base``; if that does
    not exist, :class:`ZeroDivisionError` is raised.
    """
    if modulus == 0:
        raise ZeroDivisionError("divide by zero")
    try:
        return pow(base, exponent, abs(modulus))
    except ValueError as exc:
        raise ZeroDivisionError("base is not invertible for the modulus") from exc


def ui_pow_ui(base: int, exponent: int) -> int:
    """``base ** exponent`` for non-negative integers."""
    if base < 0 or exponent < 0:
        raise ValueError("arguments must be non-negative")
    return base**exponent


def root(n: int, k: int) -> int:
    """Truncated integer ``k``-th root of a non-negative ``n``."""
    if n < 0:
        raise ValueError("root of a negative number")
    if k <= 0:
        raise ValueError("root degree must be positive")
    if n < 2 or k == 1:
        return n
    x = 1 << -(-n.bit_length() // k)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def sqrt(n: int) -> int:
    """Truncated integer square root of a non-negative ``n``."""
    if n < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(n)