#!/usr/bin/env python3

# Copyright (C) 2024 The fp2ec developers
#
# This file is part of fp2ec. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fp2ec including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Quadratic extension field GF(p^2) and its elements.

The field is GF(p)[t]/(t^2 + c), with t^2 + c irreducible over GF(p).
An element a + b*t is the FieldElement (a, b);
all the arithmetic lives in QuadraticField, much like point arithmetic
lives in CurveGroup while points are plain values.
"""

from dataclasses import dataclass
from typing import List

from dataclasses_json import DataClassJsonMixin

from fp2ec.exceptions import FP2ECValueError
from fp2ec.number_theory import (
    is_probable_prime,
    legendre_symbol,
    mod_inv,
    mod_inv_brute,
)

# above this prime the brute-force base field inverse is too slow
BRUTE_FORCE_MAX_P = 256


@dataclass(frozen=True)
class FieldElement(DataClassJsonMixin):
    """Element a + b*t of GF(p^2).

    Components are expected in [0, p):
    use QuadraticField.element (or call the field) to build reduced elements.
    """

    a: int = 0
    b: int = 0

    def __str__(self) -> str:
        if self.b == 0:
            return f"{self.a}"
        if self.a == 0:
            return f"{self.b}t"
        return f"{self.a} + {self.b}t"


class QuadraticField:
    """The field GF(p)[t]/(t^2 + c).

    Multiplication reduces t^2 to k = -c (mod p);
    the Frobenius automorphism x -> x^p maps a + b*t to a + m*b*t,
    with m = k^((p-1)/2) (mod p), because t^p = t * (t^2)^((p-1)/2).
    """

    def __init__(self, p: int, c: int) -> None:

        if not is_probable_prime(p):
            raise FP2ECValueError(f"p is not prime: {p}")
        self.p = p

        self.c = c % p
        self.k = -c % p
        # t^2 + c is irreducible iff -c is a quadratic non-residue
        if legendre_symbol(self.k, p) != -1:
            raise FP2ECValueError(f"reducible polynomial: x^2 + {self.c} mod {p}")

        self.m = pow(self.k, (p - 1) // 2, p)
        self.order = p * p
        self._mod_inv = mod_inv_brute if p < BRUTE_FORCE_MAX_P else mod_inv

    def __str__(self) -> str:
        return f"GF({self.p}^2)"

    def __repr__(self) -> str:
        return f"QuadraticField({self.p}, {self.c})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadraticField):
            return NotImplemented
        return (self.p, self.c) == (other.p, other.c)

    def __hash__(self) -> int:
        return hash((self.p, self.c))

    def __call__(self, a: int = 0, b: int = 0) -> FieldElement:
        return self.element(a, b)

    def element(self, a: int = 0, b: int = 0) -> FieldElement:
        "Return the reduced element a + b*t."
        return FieldElement(a % self.p, b % self.p)

    @property
    def zero(self) -> FieldElement:
        return FieldElement(0, 0)

    @property
    def one(self) -> FieldElement:
        return FieldElement(1, 0)

    def elements(self) -> List[FieldElement]:
        "Return all the p^2 elements, a-major and b-minor."
        return [FieldElement(a, b) for a in range(self.p) for b in range(self.p)]

    def is_element(self, x: FieldElement) -> bool:
        return 0 <= x.a < self.p and 0 <= x.b < self.p

    def is_zero(self, x: FieldElement) -> bool:
        return x.a % self.p == 0 and x.b % self.p == 0

    def add(self, x: FieldElement, y: FieldElement) -> FieldElement:
        return FieldElement((x.a + y.a) % self.p, (x.b + y.b) % self.p)

    def sub(self, x: FieldElement, y: FieldElement) -> FieldElement:
        return FieldElement((x.a - y.a) % self.p, (x.b - y.b) % self.p)

    def neg(self, x: FieldElement) -> FieldElement:
        return FieldElement(-x.a % self.p, -x.b % self.p)

    def mul(self, x: FieldElement, y: FieldElement) -> FieldElement:
        # (a + b*t) * (c + d*t) = a*c + k*b*d + (a*d + b*c)*t
        a = x.a * y.a + self.k * x.b * y.b
        b = x.a * y.b + x.b * y.a
        return FieldElement(a % self.p, b % self.p)

    def square(self, x: FieldElement) -> FieldElement:
        return self.mul(x, x)

    def conjugate(self, x: FieldElement) -> FieldElement:
        "Return a - b*t, the image of a + b*t under the Frobenius map."
        return FieldElement(x.a % self.p, -x.b % self.p)

    def norm(self, x: FieldElement) -> int:
        "Return (a + b*t)(a - b*t) = a^2 - k*b^2, an element of GF(p)."
        return (x.a * x.a - self.k * x.b * x.b) % self.p

    def inverse(self, x: FieldElement) -> FieldElement:
        """Return the multiplicative inverse, i.e. conjugate / norm.

        The zero element has no inverse: FP2ECValueError is raised.
        """

        if self.is_zero(x):
            raise FP2ECValueError(f"No inverse for 0 in {self}")
        n_inv = self._mod_inv(self.norm(x), self.p)
        return FieldElement(x.a * n_inv % self.p, -x.b * n_inv % self.p)

    def div(self, x: FieldElement, y: FieldElement) -> FieldElement:
        return self.mul(x, self.inverse(y))

    def pow(self, x: FieldElement, e: int) -> FieldElement:
        "Return x^e by square-and-multiply; negative e inverts x first."

        if e < 0:
            x, e = self.inverse(x), -e
        result = self.one
        while e > 0:
            if e & 1:
                result = self.mul(result, x)
            x = self.mul(x, x)
            e >>= 1
        return result

    def frobenius(self, x: FieldElement) -> FieldElement:
        "Return x^p, computed in closed form as a + m*b*t."
        return FieldElement(x.a % self.p, self.m * x.b % self.p)
