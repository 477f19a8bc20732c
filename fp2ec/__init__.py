#!/usr/bin/env python3

# Copyright (C) 2024 The fp2ec developers
#
# This file is part of fp2ec. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fp2ec including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the fp2ec package."

name = "fp2ec"
__version__ = "2024.10.1"
__author__ = "The fp2ec developers"
__author_email__ = "devs@fp2ec.org"
__copyright__ = "Copyright (C) 2024 The fp2ec developers"
__license__ = "MIT License"
