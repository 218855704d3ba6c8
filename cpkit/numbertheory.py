"""Modular arithmetic and small combinatorial helpers."""

from __future__ import annotations

import math

DEFAULT_MOD = 10**17


def factorial(n: int, mod: int = DEFAULT_MOD) -> int:
    """Return ``n!`` reduced modulo ``mod``.

    Values of ``n`` below 2 give ``1 % mod``.
    """
    result = 1
    for i in range(2, n + 1):
        result = result * i % mod
    return result % mod


def binpow(a: int, b: int, m: int) -> int:
    """Return ``a ** b`` modulo ``m`` by repeated squaring.

    A non-positive exponent yields 1, which is not reduced by ``m``.
    """
    a %= m
    result = 1
    while b > 0:
        if b & 1:
            result = result * a % m
        a = a * a % m
        b >>= 1
    return result


def lcm(a: int, b: int) -> int:
    """Return the least common multiple as ``a * b // gcd(a, b)``.

    Raises ZeroDivisionError when both arguments are zero.
    """
    return (a * b) // math.gcd(a, b)


def binomial(n: int, k: int) -> int:
    """Return C(n, k) computed in floating point in O(k) steps.

    The running product is rounded by adding a small epsilon before
    truncation, so results are exact only while they fit a double.
    """
    result = 1.0
    for i in range(1, k + 1):
        result = result * (n - k + i) / i
    return int(result + 0.01)