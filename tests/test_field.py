#!/usr/bin/env python3

# Copyright (C) 2024 The fp2ec developers
#
# This file is part of fp2ec. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fp2ec including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `fp2ec.field` module."

import pytest

from fp2ec.curves import GF25
from fp2ec.exceptions import FP2ECValueError
from fp2ec.field import BRUTE_FORCE_MAX_P, FieldElement, QuadraticField

elements = GF25.elements()
non_zero = elements[1:]


def test_exceptions() -> None:

    # good field
    QuadraticField(5, 2)

    with pytest.raises(FP2ECValueError, match="p is not prime: "):
        QuadraticField(9, 2)

    with pytest.raises(FP2ECValueError, match="p is not prime: "):
        QuadraticField(2, 1)

    # x^2 + 1 = (x - 2)(x + 2) mod 5
    with pytest.raises(FP2ECValueError, match="reducible polynomial: "):
        QuadraticField(5, 1)

    with pytest.raises(FP2ECValueError, match="reducible polynomial: "):
        QuadraticField(5, 0)

    err_msg = "No inverse for 0 in GF\\(5\\^2\\)"
    with pytest.raises(FP2ECValueError, match=err_msg):
        GF25.inverse(GF25.zero)
    with pytest.raises(FP2ECValueError, match=err_msg):
        GF25.div(GF25.one, GF25.zero)
    with pytest.raises(FP2ECValueError, match=err_msg):
        GF25.pow(GF25.zero, -1)


def test_constants() -> None:
    assert GF25.p == 5
    assert GF25.c == 2
    assert GF25.k == 3
    assert GF25.m == 4
    assert GF25.order == 25
    assert str(GF25) == "GF(5^2)"
    assert repr(GF25) == "QuadraticField(5, 2)"
    assert GF25 == QuadraticField(5, 7)
    assert GF25 != QuadraticField(7, 1)
    assert hash(GF25) == hash(QuadraticField(5, 2))


def test_elements() -> None:
    assert len(elements) == 25
    assert len(set(elements)) == 25
    assert elements[0] == GF25.zero
    assert elements[1] == FieldElement(0, 1)
    assert elements[5] == FieldElement(1, 0)
    assert elements[-1] == FieldElement(4, 4)
    assert all(GF25.is_element(x) for x in elements)

    assert GF25(7, -1) == FieldElement(2, 4)
    assert GF25.element(5, 10) == GF25.zero
    assert not GF25.is_element(FieldElement(5, 0))


def test_str() -> None:
    assert str(GF25(0, 0)) == "0"
    assert str(GF25(3, 0)) == "3"
    assert str(GF25(0, 2)) == "2t"
    assert str(GF25(1, 4)) == "1 + 4t"


def test_json() -> None:
    x = GF25(1, 4)
    assert x.to_dict() == {"a": 1, "b": 4}
    assert FieldElement.from_dict(x.to_dict()) == x
    assert FieldElement.from_json(x.to_json()) == x


def test_identities() -> None:
    for x in elements:
        assert GF25.add(x, GF25.zero) == x
        assert GF25.mul(x, GF25.one) == x
        assert GF25.mul(x, GF25.zero) == GF25.zero
        assert GF25.sub(x, x) == GF25.zero
        assert GF25.add(x, GF25.neg(x)) == GF25.zero


def test_t_squared() -> None:
    t = GF25(0, 1)
    assert GF25.mul(t, t) == GF25(3)
    assert GF25.square(GF25(1, 1)) == GF25(4, 2)
    assert GF25.inverse(t) == GF25(0, 2)
    assert GF25.norm(t) == 2
    assert GF25.conjugate(GF25(1, 1)) == GF25(1, 4)


def test_inverse() -> None:
    for x in non_zero:
        assert GF25.norm(x) != 0
        assert GF25.mul(x, GF25.inverse(x)) == GF25.one
        assert GF25.div(x, x) == GF25.one
        assert GF25.inverse(GF25.inverse(x)) == x
        assert GF25.pow(x, -1) == GF25.inverse(x)
        # multiplicative group of order 24
        assert GF25.pow(x, 24) == GF25.one


def test_commutativity_associativity() -> None:
    for x in elements:
        for y in elements:
            assert GF25.add(x, y) == GF25.add(y, x)
            assert GF25.mul(x, y) == GF25.mul(y, x)
            for z in elements:
                assert GF25.add(GF25.add(x, y), z) == GF25.add(x, GF25.add(y, z))
                assert GF25.mul(GF25.mul(x, y), z) == GF25.mul(x, GF25.mul(y, z))
                lhs = GF25.mul(x, GF25.add(y, z))
                rhs = GF25.add(GF25.mul(x, y), GF25.mul(x, z))
                assert lhs == rhs


def test_pow() -> None:
    x = GF25(2, 3)
    assert GF25.pow(x, 0) == GF25.one
    assert GF25.pow(x, 1) == x
    assert GF25.pow(x, 3) == GF25.mul(x, GF25.mul(x, x))
    assert GF25.pow(x, 25) == x


def test_frobenius() -> None:
    for x in elements:
        fx = GF25.frobenius(x)
        assert GF25.frobenius(fx) == x
        assert fx == GF25.pow(x, GF25.p)
        assert fx == GF25.conjugate(x)
    # the base field is fixed
    for a in range(5):
        assert GF25.frobenius(GF25(a)) == GF25(a)
    assert GF25.frobenius(GF25(2, 1)) == GF25(2, 4)


def test_other_fields() -> None:
    # x^2 + 1 is irreducible mod 7
    F49 = QuadraticField(7, 1)
    assert F49.k == 6
    assert F49.m == 6
    for x in F49.elements():
        assert F49.frobenius(x) == F49.pow(x, 7)
        if not F49.is_zero(x):
            assert F49.mul(x, F49.inverse(x)) == F49.one

    # the extended Euclidean algorithm is used above the threshold
    p = 263
    assert p >= BRUTE_FORCE_MAX_P
    F = QuadraticField(p, 1)
    for a, b in [(1, 0), (0, 1), (17, 250), (262, 262)]:
        x = F(a, b)
        assert F.mul(x, F.inverse(x)) == F.one
        assert F.frobenius(x) == F.pow(x, p)
