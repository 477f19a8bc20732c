#!/usr/bin/env python3

# Copyright (C) 2024 The fp2ec developers
#
# This file is part of fp2ec. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fp2ec including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Fixed field and curve instances.

GF(5^2) built on the irreducible x^2 + 2 (i.e. t^2 = 3)
and the curve y^2 = x^3 + x + 1 over it.
"""

from fp2ec.curve_group import CurveGroup
from fp2ec.field import QuadraticField

GF25 = QuadraticField(5, 2)

EC25 = CurveGroup(GF25, GF25(1), GF25(1))

# order of the full torsion subgroup to be explored on EC25
TORSION_ORDER = 3
