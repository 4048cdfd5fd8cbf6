import math
import random
from functools import reduce
from operator import mul

import pytest

from algobook.numbertheory import (
    crt,
    extended_gcd,
    factorize,
    gcd,
    is_prime,
    mod_eq,
    mod_inverse,
    mod_mul,
    mod_pow,
    mod_solve,
    phi,
    prime_sieve,
)


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (0, 9), (9, 0), (100, 75), (1, 1)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (35, 64), (1, 1), (99, 78), (-30, 12)])
def test_extended_gcd_identity(a, b):
    g, s, t = extended_gcd(a, b)
    assert a * s + b * t == g
    assert abs(g) == math.gcd(a, b)


@pytest.mark.parametrize("a,b,n,m", [(2, 3, 5, 7), (0, 0, 4, 9), (10, 1, 11, 13), (3, 5, 8, 9)])
def test_crt(a, b, n, m):
    x = crt(a, b, n, m)
    assert 0 <= x < n * m
    assert x % n == a % n
    assert x % m == b % m


def test_mod_eq():
    assert mod_eq(-3, 4, 7)
    assert mod_eq(10, 3, 7)
    assert not mod_eq(-3, 3, 7)


def test_mod_mul_and_pow_against_builtins():
    rng = random.Random(11)
    for _ in range(200):
        x, y, n = rng.randint(0, 10**12), rng.randint(0, 10**12), rng.randint(2, 10**9)
        assert mod_mul(x, y, n) == x * y % n
        assert mod_pow(x, y, n) == pow(x, y, n)


def test_mod_pow_zero_exponent():
    assert mod_pow(5, 0, 13) == 1


def test_mod_solve_and_inverse():
    rng = random.Random(12)
    for _ in range(200):
        n = rng.randint(2, 1000)
        a = rng.randint(1, 1000)
        b = math.gcd(a, n) * rng.randint(0, 50)
        x = mod_solve(a, b, n)
        assert (a * x - b) % n == 0
        if math.gcd(a, n) == 1:
            assert a * mod_inverse(a, n) % n == 1


def test_mod_solve_without_solution():
    with pytest.raises(ValueError):
        mod_solve(4, 3, 8)


def test_is_prime_matches_sieve():
    primes = set(prime_sieve(3000))
    for n in range(-3, 3001):
        assert is_prime(n) == (n in primes)


def test_is_prime_large():
    assert is_prime(2**61 - 1)
    assert not is_prime((2**31 - 1) * (2**19 - 1))
    assert not is_prime(561)


def test_phi_counts_coprimes():
    for n in range(1, 300):
        assert phi(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_factorize_invariants():
    for n in range(2, 2000):
        factors = factorize(n)
        assert reduce(mul, factors, 1) == n
        assert factors == sorted(factors)
        assert all(is_prime(f) for f in factors)


def test_factorize_one():
    assert factorize(1) == []


def test_prime_sieve_small():
    assert prime_sieve(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert prime_sieve(1) == []