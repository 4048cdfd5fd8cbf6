"""Number theory: gcd, modular arithmetic, primality and factorisation."""

from __future__ import annotations

import math

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``a*s + b*t == g``, the gcd of ``a`` and ``b``."""
    r, rr = b, a
    s, ss = 0, 1
    t, tt = 1, 0
    while rr != 0:
        q = _tdiv(r, rr)
        r, rr = rr, r - q * rr
        s, ss = ss, s - q * ss
        t, tt = tt, t - q * tt
    return r, s, t


def crt(a: int, b: int, n: int, m: int) -> int:
    """Return ``x`` in ``[0, n*m)`` with ``x = a (mod n)`` and ``x = b (mod m)``.

    ``n`` and ``m`` must be coprime.
    """
    _, s, t = extended_gcd(n, m)
    return (a * m * t + b * n * s) % (n * m)


def mod_eq(a: int, b: int, n: int) -> bool:
    """Return whether ``a`` and ``b`` are congruent modulo ``n``."""
    return a % n == b % n


def mod_mul(x: int, y: int, n: int) -> int:
    """``x * y mod n`` by repeated doubling."""
    result = 0
    while y > 0:
        if y % 2 == 1:
            result = (result + x) % n
        x = (x * 2) % n
        y //= 2
    return result


def mod_pow(x: int, p: int, n: int) -> int:
    """``x ** p mod n`` by repeated squaring."""
    result = 1
    x %= n
    while p > 0:
        if p % 2 == 1:
            result = result * x % n
        x = x * x % n
        p //= 2
    return result


def mod_solve(a: int, b: int, n: int) -> int:
    """Find ``x`` with ``a * x = b (mod n)``.

    Raises ValueError when ``gcd(a, n)`` does not divide ``b``.
    """
    g, s, _ = extended_gcd(a, n)
    if b % g != 0:
        raise ValueError(f"{a} * x = {b} (mod {n}) has no solution")
    result = s * (b // g)
    return result + n if result < 0 else result


def mod_inverse(a: int, n: int) -> int:
    """Multiplicative inverse of ``a`` modulo ``n``."""
    return mod_solve(a, 1, n)


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for ``n < 2**64``."""
    if n < 2 or n % 2 == 0:
        return n == 2
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    bound = 2 * math.log(n) ** 2
    for a in _WITNESSES:
        if a >= n - 1 or a > bound:
            return True
        x = mod_pow(a, d, n)
        for _ in range(s):
            y = x * x % n
            if y == 1 and x != 1 and x != n - 1:
                return False
            x = y
        if x != 1:
            return False
    return True


def phi(n: int) -> int:
    """Euler's totient function."""
    result = n
    p = 2
    while p * p <= n:
        if n % p == 0:
            while n % p == 0:
                n //= p
            result -= result // p
        p += 1
    if n > 1:
        result -= result // n
    return result


def factorize(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order, with multiplicity."""
    factors = []
    k = 2
    while n > 1 and k * k <= n:
        while n % k == 0:
            n //= k
            factors.append(k)
        k += 1
    if n > 1:
        factors.append(n)
    return factors


def prime_sieve(n: int) -> list[int]:
    """All primes ``<= n`` by the sieve of Eratosthenes."""
    if n < 2:
        return []
    is_candidate = [True] * (n + 1)
    p = 2
    while p * p <= n:
        if is_candidate[p]:
            is_candidate[p * p :: p] = [False] * len(range(p * p, n + 1, p))
        p += 1
    return [i for i in range(2, n + 1) if is_candidate[i]]