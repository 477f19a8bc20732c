#!/usr/bin/env python3

# Copyright (C) 2024 The fp2ec developers
#
# This file is part of fp2ec. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fp2ec including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions for the base prime field.

Implementations originally from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
with the following modifications:

* type annotated python3
* brute-force inverse search for tiny moduli
* Euler criterion used as irreducibility test for x^2 + c
"""

from typing import Tuple

from fp2ec.exceptions import FP2ECValueError


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(x, y).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Based on Extended Euclidean Algorithm, see:
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise FP2ECValueError(f"No inverse for {a} mod {m}")


def mod_inv_brute(a: int, m: int) -> int:
    """Return the inverse of a (mod m) searching all residues 1..m-1.

    Linear in m: only suitable for the tiny moduli of didactical fields,
    use mod_inv otherwise.
    """

    a %= m
    for i in range(1, m):
        if a * i % m == 1:
            return i
    raise FP2ECValueError(f"No inverse for {a} mod {m}")


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is an odd prime.
    It returns 1 if a has a square root modulo p, -1 if it has not,
    0 if p divides a.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def is_probable_prime(p: int) -> bool:
    "Return True if p is an odd number passing the Fermat test in base 2."

    # Fermat test will do as _probabilistic_ primality test...
    return p > 2 and p % 2 == 1 and pow(2, p - 1, p) == 1
