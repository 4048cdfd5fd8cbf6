"""Combinations as bitmasks, binomial coefficients and Gray codes."""

from __future__ import annotations


def all_combinations(n: int, m: int) -> list[int]:
    """All ``n``-bit masks with ``m`` bits set; masks without the top bit first."""
    if m >= n:
        return [(1 << n) - 1]
    if m <= 0:
        return [0]
    top = 1 << (n - 1)
    return all_combinations(n - 1, m) + [c | top for c in all_combinations(n - 1, m - 1)]


def binom(n: int, k: int) -> int:
    """Exact ``n`` choose ``k``; 0 when ``k > n``."""
    if k > n:
        return 0
    result = 1
    for i in range(n - k):
        result *= i + k + 1
    for i in range(n - k):
        result //= i + 1
    return result


def binom_float(n: int, k: int) -> float:
    """``n`` choose ``k`` as a float, for values too large to matter exactly."""
    if k > n:
        return 0.0
    result = 1.0
    for i in range(n - k):
        result *= (n - i) / (n - k - i)
    return result


def kth_combination(n: int, m: int, k: int) -> int:
    """The ``k``-th mask of ``all_combinations(n, m)``, computed directly."""
    if m >= n:
        return (1 << n) - 1
    if m <= 0:
        return 0
    without_top = binom(n - 1, m)
    if k < without_top:
        return kth_combination(n - 1, m, k)
    return kth_combination(n - 1, m - 1, k - without_top) | (1 << (n - 1))


def gray(n: int) -> int:
    """Reflected binary Gray code of ``n``."""
    return n ^ (n >> 1)


def gray_inverse(g: int) -> int:
    """Number whose Gray code is ``g``."""
    n = 0
    while g != 0:
        n ^= g
        g >>= 1
    return n