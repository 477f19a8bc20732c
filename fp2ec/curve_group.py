#!/usr/bin/env python3

# Copyright (C) 2024 The fp2ec developers
#
# This file is part of fp2ec. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fp2ec including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions over GF(p^2).

The group is not required to be cyclic:
points are explored by brute force in the fp2ec.explorer module.
"""

from fp2ec.exceptions import FP2ECTypeError, FP2ECValueError
from fp2ec.field import FieldElement, QuadraticField
from fp2ec.point import INF, AffinePoint, Infinity, Point


class CurveGroup:
    """Finite group of the points of an elliptic curve over GF(p^2).

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in GF(p^2),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, field: QuadraticField, a: FieldElement, b: FieldElement) -> None:

        if not isinstance(a, FieldElement):
            raise FP2ECTypeError(f"a is not a field element: {a!r}")
        if not isinstance(b, FieldElement):
            raise FP2ECTypeError(f"b is not a field element: {b!r}")
        if not field.is_element(a):
            raise FP2ECValueError(f"a not reduced in {field}: {a!r}")
        if not field.is_element(b):
            raise FP2ECValueError(f"b not reduced in {field}: {b!r}")

        self.field = field
        F = field

        # Check that 4*a^3 + 27*b^2 ≠ 0
        d = F.add(
            F.mul(F(4), F.mul(a, F.square(a))),
            F.mul(F(27), F.square(b)),
        )
        if F.is_zero(d):
            raise FP2ECValueError("zero discriminant")
        self._a = a
        self._b = b

    @property
    def a(self) -> FieldElement:
        return self._a

    @property
    def b(self) -> FieldElement:
        return self._b

    def __str__(self) -> str:
        result = f"Curve over {self.field}"
        result += f"\n a   = {self._a}"
        result += f"\n b   = {self._b}"
        return result

    def __repr__(self) -> str:
        return f"CurveGroup({self.field!r}, {self._a!r}, {self._b!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveGroup):
            return NotImplemented
        return (self.field, self._a, self._b) == (other.field, other._a, other._b)

    def __hash__(self) -> int:
        return hash((self.field, self._a, self._b))

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Infinity):
            return INF
        if isinstance(Q, AffinePoint):
            return AffinePoint(Q.x, self.field.neg(Q.y))
        raise FP2ECTypeError("not a point")

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if isinstance(Q, Infinity):
            return R
        if isinstance(R, Infinity):
            return Q

        F = self.field
        # opposite points must be caught before any slope is computed
        if Q.x == R.x and Q.y != R.y:
            return INF
        if Q == R:
            return self.double_aff(Q)

        lam = F.div(F.sub(R.y, Q.y), F.sub(R.x, Q.x))
        x = F.sub(F.sub(F.square(lam), Q.x), R.x)
        y = F.sub(F.mul(lam, F.sub(Q.x, x)), Q.y)
        return AffinePoint(x, y)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if isinstance(Q, Infinity):
            return INF

        F = self.field
        if F.is_zero(Q.y):  # vertical tangent
            return INF

        num = F.add(F.mul(F(3), F.square(Q.x)), self._a)
        lam = F.div(num, F.mul(F(2), Q.y))
        x = F.sub(F.square(lam), F.add(Q.x, Q.x))
        y = F.sub(F.mul(lam, F.sub(Q.x, x)), Q.y)
        return AffinePoint(x, y)

    def y2(self, x: FieldElement) -> FieldElement:
        "Return x^3 + a*x + b."
        F = self.field
        return F.add(F.mul(F.add(F.square(x), self._a), x), self._b)

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise FP2ECValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if isinstance(Q, Infinity):
            return True
        if not isinstance(Q, AffinePoint):
            raise FP2ECTypeError("not a point")
        if not (self.field.is_element(Q.x) and self.field.is_element(Q.y)):
            raise FP2ECValueError(f"coordinates not reduced in {self.field}")
        return self.y2(Q.x) == self.field.square(Q.y)

    def frobenius(self, Q: Point) -> Point:
        "Return the Frobenius endomorphism image (x^p, y^p)."
        if isinstance(Q, Infinity):
            return INF
        return AffinePoint(self.field.frobenius(Q.x), self.field.frobenius(Q.y))


def mult_recursive_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    a recursive version of 'double & add',
    affine coordinates.

    The input point is assumed to be on curve.
    """

    if m < 0:
        raise FP2ECValueError(f"negative m: {hex(m)}")

    if m == 0:
        return INF

    if m % 2 == 1:
        return ec.add_aff(Q, mult_recursive_aff((m - 1), Q, ec))

    return mult_recursive_aff((m // 2), ec.double_aff(Q), ec)


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.

    It is not constant-time: the 'add' is performed
    only for the bits of m that are set.

    The input point is assumed to be on curve.
    """

    if m < 0:
        raise FP2ECValueError(f"negative m: {hex(m)}")

    R: Point = INF
    while m > 0:
        # if least significant bit of m is 1, then add Q to R
        if m & 1:
            R = ec.add_aff(R, Q)
        # the doubling part of 'double & add'
        Q = ec.double_aff(Q)
        # remove the bit just accounted for
        m >>= 1
    return R
