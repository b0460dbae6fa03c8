#!/usr/bin/env python3

# Copyright (C) 2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Sequence, Union

# hex-string or bytes representation of an int
#
# e.g. curve parameters can be provided as
# 7
# "0x07"
# "07"
# b"\x07"
#
# use ecfp.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Affine coordinates as a pair of plain ints, e.g. (2, 3) or [2, 3],
# the literal form accepted wherever a CurvePoint is expected
# (see EllipticCurve.as_point)
Coordinates = Sequence[int]
