"""Integer helpers used by the arithmetic combinators."""

from __future__ import annotations

import math


def gcd(m: int, n: int) -> int:
    """Greatest common divisor of `m` and `n`.

    The result is never negative and signs of the inputs are ignored:
    gcd(0, 0) == 0, gcd(m, 0) == abs(m), gcd(-4, 6) == 2.
    """
    return math.gcd(m, n)


def lcm(m: int, n: int) -> int:
    """Least common multiple carrying the sign of ``m * n``.

    Both arguments must be non-zero. Keeping the sign means ``lcm(m, n) // m``
    and ``lcm(m, n) // n`` are exact for negative denominators too.
    """
    return m * n // gcd(m, n)
