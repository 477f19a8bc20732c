#!/usr/bin/env python3

# Copyright (C) 2024 The fp2ec developers
#
# This file is part of fp2ec. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fp2ec including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurveGroup explorer functions.

These functions are meant to explore low-cardinality CurveGroup
over GF(p^2), for didactical (and fun) reason only.

The set of candidate coordinates (the field universe) is injected,
so the very same walk-through works for any small field;
by default it is the whole field of the curve.
"""

import logging
from typing import List, Optional, Sequence

from fp2ec.curve_group import CurveGroup, mult_aff
from fp2ec.exceptions import FP2ECRuntimeError, FP2ECValueError
from fp2ec.field import FieldElement, QuadraticField
from fp2ec.point import INF, AffinePoint, Point

logger = logging.getLogger(__name__)

MAX_UNIVERSE_SIZE = 10000


def field_universe(field: QuadraticField) -> List[FieldElement]:
    "Return all the field elements, a-major and b-minor."
    return field.elements()


def _universe(
    ec: CurveGroup, universe: Optional[Sequence[FieldElement]]
) -> Sequence[FieldElement]:
    if universe is None:
        universe = field_universe(ec.field)
    if len(universe) > MAX_UNIVERSE_SIZE:
        err_msg = f"universe is too big to find all curve points: {len(universe)}"
        raise FP2ECValueError(err_msg)
    return universe


def find_curve_points(
    ec: CurveGroup, universe: Optional[Sequence[FieldElement]] = None
) -> List[AffinePoint]:
    """Return all the affine points with coordinates in the universe.

    Very unsofisticated walk-through approach (quadratic in the
    universe size), for didactical sake only.
    Points are x-major and y-minor, in universe order;
    INF is not included.
    """
    universe = _universe(ec, universe)
    F = ec.field

    points: List[AffinePoint] = []
    for x in universe:
        y2 = ec.y2(x)
        points.extend(AffinePoint(x, y) for y in universe if F.square(y) == y2)

    logger.debug(
        "%d curve points over a %d elements universe", len(points), len(universe)
    )
    return points


def find_all_points(
    ec: CurveGroup, universe: Optional[Sequence[FieldElement]] = None
) -> List[Point]:
    "Return all group points: INF followed by the affine ones."
    points: List[Point] = [INF]
    points.extend(find_curve_points(ec, universe))
    return points


def find_torsion_points(
    r: int, ec: CurveGroup, universe: Optional[Sequence[FieldElement]] = None
) -> List[Point]:
    """Return the full r-torsion: all points P such that r*P = INF.

    Affine points come first, in find_curve_points order,
    INF (which trivially qualifies) is appended last.
    """
    if r < 1:
        raise FP2ECValueError(f"invalid torsion order: {r}")

    points: List[Point] = [
        P for P in find_curve_points(ec, universe) if mult_aff(r, P, ec) == INF
    ]
    points.append(INF)

    logger.debug("%d points in the %d-torsion", len(points), r)
    return points


def find_frobenius_eigenspace_points(
    ec: CurveGroup, universe: Optional[Sequence[FieldElement]] = None
) -> List[Point]:
    """Return all points P such that (x^p, y^p) = p*P.

    Affine points come first, in find_curve_points order,
    INF (which trivially qualifies) is appended last.
    """
    p = ec.field.p
    points: List[Point] = [
        P
        for P in find_curve_points(ec, universe)
        if ec.frobenius(P) == mult_aff(p, P, ec)
    ]
    points.append(INF)

    logger.debug("%d points in the Frobenius %d-eigenspace", len(points), p)
    return points


def find_subgroup_points(ec: CurveGroup, G: Point) -> List[Point]:
    """Return the G-generated subgroup points: G, 2G, ..., INF.

    Very unsofisticated walk-through approach,
    for didactical sake only.
    """
    ec.require_on_curve(G)

    # Hasse bound on the group order
    max_order = ec.field.order + 1 + 2 * ec.field.p
    points: List[Point] = [G]
    while points[-1] != INF:
        if len(points) > max_order:
            err_msg = f"subgroup order exceeds Hasse bound: {max_order}"
            raise FP2ECRuntimeError(err_msg)
        points.append(ec.add_aff(points[-1], G))

    return points


def point_order(ec: CurveGroup, P: Point) -> int:
    "Return the smallest n >= 1 such that n*P = INF."
    return len(find_subgroup_points(ec, P))
