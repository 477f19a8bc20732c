#!/usr/bin/env python3

# Copyright (C) 2024 The fp2ec developers
#
# This file is part of fp2ec. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fp2ec including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by fp2ec from those raised by other codebase.

Inverting the zero field element, or asking the base field for an
inverse that does not exist, is a broken caller contract:
it is reported with FP2ECValueError and never recovered from internally.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the fp2ec versions are derived.
"""


class FP2ECValueError(ValueError):
    pass


class FP2ECTypeError(TypeError):
    pass


class FP2ECRuntimeError(RuntimeError):
    pass
