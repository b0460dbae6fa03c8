#!/usr/bin/env python3

# Copyright (C) 2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular integer arithmetic.

Normalization of integers into [0, p-1] and modular inversion,
the latter based on the iterative Extended Euclidean Algorithm, see
https://en.wikipedia.org/wiki/Extended_Euclidean_algorithm
"""

from typing import Tuple

from ecfp.exceptions import NoInverseError
from ecfp.utils import num_string


def modulus(i: int, p: int) -> int:
    """Return the representative of i (mod p) in [0, p-1].

    p must be positive (not checked).
    Python's % takes the sign of the divisor,
    so no adjustment is needed for a negative i.
    """

    return i % p


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (r, s, t) such that a*s + b*t = r = gcd(a, b).

    a and b must be non-negative.
    Each step keeps the (remainder, s, t) triple of the last two steps
    and computes the next one as old - quotient * new.
    """

    old_r, old_s, old_t = a, 1, 0
    r, s, t = b, 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    return old_r, old_s, old_t


def mod_inv(x: int, p: int) -> int:
    """Return y in [0, p-1] such that x*y = 1 (mod p).

    p does not have to be a prime:
    NoInverseError is raised if gcd(x, p) != 1, e.g. for x = 0 (mod p).
    """

    a = modulus(x, p)
    g, s, _ = xgcd(a, p)
    if g != 1:
        raise NoInverseError(f"No inverse for {num_string(a)} mod {num_string(p)}")
    return modulus(s, p)
