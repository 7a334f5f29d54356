"""Solving linear congruences ``a*x = b (mod m)``."""

from __future__ import annotations

from typing import Tuple

from .bignum import div_floor, mod_floor, rem_trunc
from .numtheory import gcdext

__all__ = ["CongruenceError", "solve_linear_congruence"]


class CongruenceError(ArithmeticError):
    """Raised when a linear congruence has no solution."""


def solve_linear_congruence(a: int, b: int, m: int) -> Tuple[int, int]:
    """Solve ``a*x = b (mod m)``.

    Returns ``(mu, v)`` where ``mu`` is a solution with ``|mu| < |m|`` (its
    sign follows the intermediate product, as with truncating division) and
    ``v = m / gcd(a, m)`` is the period of the solutions.

    Raises :class:`CongruenceError` if ``gcd(a, m)`` does not divide ``b``
    and :class:`ZeroDivisionError` if ``m`` is zero.
    """
    if m == 0:
        raise ZeroDivisionError("divide by zero")
    g, d, _ = gcdext(a, m)
    if mod_floor(b, g) != 0:
        raise CongruenceError(
            f"no solution: gcd({a}, {m}) = {g} does not divide {b}"
        )
    q = div_floor(b, g)
    mu = rem_trunc(q * d, m)
    v = div_floor(m, g)
    return mu, v