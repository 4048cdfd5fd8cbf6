"""Numerical routines: fast Fourier transform, polynomial products and Newton's method."""

from __future__ import annotations

import cmath
import math
from collections.abc import Callable, Sequence

EPS = 1e-12


def fft(values: Sequence[complex], invert: bool = False) -> list[complex]:
    """Discrete Fourier transform (or its inverse) of a power-of-two length sequence."""
    n = len(values)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a positive power of two")
    if n == 1:
        return [complex(values[0])]
    even = fft(values[0::2], invert)
    odd = fft(values[1::2], invert)
    angle = 2.0 * math.pi / n * (-1.0 if invert else 1.0)
    step = cmath.exp(1j * angle)
    half = n // 2
    result = [0j] * n
    w = 1 + 0j
    for i, (e, o) in enumerate(zip(even, odd)):
        result[i] = e + w * o
        result[i + half] = e - w * o
        if invert:
            result[i] /= 2.0
            result[i + half] /= 2.0
        w *= step
    return result


def _round_half_away(x: float) -> int:
    return int(math.floor(x + 0.5)) if x >= 0 else -int(math.floor(-x + 0.5))


def multiply_polynomials(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficients of the product of two integer polynomials.

    The result is padded with zeros to the smallest power of two that is at
    least ``len(a) + len(b)``.
    """
    n = 1
    while n < len(a) + len(b):
        n <<= 1
    fa = fft([complex(x) for x in a] + [0j] * (n - len(a)))
    fb = fft([complex(x) for x in b] + [0j] * (n - len(b)))
    product = fft([x * y for x, y in zip(fa, fb)], invert=True)
    return [_round_half_away(c.real) for c in product]


def newton(
    f: Callable[[float], float], fprime: Callable[[float], float], x: float = 0.0
) -> float:
    """Find a root of ``f`` from the guess ``x`` using its derivative ``fprime``.

    Runs until ``|f(x)| <= EPS``; a vanishing derivative nudges ``x`` by ``EPS``.
    """
    while abs(f(x)) > EPS:
        slope = fprime(x)
        if abs(slope) < EPS:
            x -= EPS
        else:
            x -= f(x) / slope
    return x