#!/usr/bin/env python3

# Copyright (C) 2024 The fp2ec developers
#
# This file is part of fp2ec. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fp2ec including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points over GF(p^2).

A Point is either an AffinePoint or INF, the point at infinity.
INF has no coordinates: it is the only instance of Infinity.
"""

from dataclasses import dataclass
from typing import Optional, Union

from dataclasses_json import DataClassJsonMixin

from fp2ec.field import FieldElement


@dataclass(frozen=True)
class AffinePoint(DataClassJsonMixin):
    x: FieldElement
    y: FieldElement

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Infinity:
    "The point at infinity, neutral element of the curve group."

    _instance: Optional["Infinity"] = None

    def __new__(cls) -> "Infinity":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __str__(self) -> str:
        return "Point at infinity"

    def __repr__(self) -> str:
        return "INF"


INF = Infinity()

Point = Union[AffinePoint, Infinity]
