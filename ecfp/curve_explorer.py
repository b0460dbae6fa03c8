#!/usr/bin/env python3

# Copyright (C) 2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""EllipticCurve explorer functions.

These functions are meant to explore low-cardinality curves,
for didactical (and fun) reason only.
"""

from typing import List, Optional, Union

from ecfp.alias import Coordinates
from ecfp.curve import CurvePoint, EllipticCurve
from ecfp.exceptions import ECFpValueError

MAX_P = 10000


def _require_low_p(ec: EllipticCurve, what: str) -> None:
    if ec.p > MAX_P:
        raise ECFpValueError(f"p is too big to {what}: {ec.p}")


def find_all_points(ec: EllipticCurve) -> List[CurvePoint]:
    """Attempt to find all group points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    _require_low_p(ec, "count all group points")

    points: List[CurvePoint] = [ec.identity]
    for x in range(ec.p):
        try:
            y = ec.y(x)
        except ECFpValueError:
            continue

        points.append(ec.point(x, y))
        if y != 0:
            points.append(ec.point(x, ec.p - y))

    return points


def find_subgroup_points(
    ec: EllipticCurve, G: Union[CurvePoint, Coordinates]
) -> List[CurvePoint]:
    """Attempt to find all G-generated subgroup points, if p is low.

    The list starts from G and ends with the point at infinity.
    """
    _require_low_p(ec, "count all subgroup points")

    G = ec.as_point(G)
    if not ec.contains(G):
        raise ECFpValueError(f"point not on curve: {G}")

    points: List[CurvePoint] = [G]
    while not points[-1].is_identity:
        points.append(points[-1] + G)

    return points


def point_order_table(ec: EllipticCurve) -> List[List[Optional[int]]]:
    """Return the order of each (x, y) pair, None if not on the curve.

    Rows go from y = p-1 down to y = 0, columns from x = 0 to x = p-1,
    i.e. the usual Cartesian plot orientation.
    """
    _require_low_p(ec, "tabulate all point orders")

    table: List[List[Optional[int]]] = []
    for y in reversed(range(ec.p)):
        row: List[Optional[int]] = []
        for x in range(ec.p):
            Q = ec.point(x, y)
            row.append(ec.order(Q) if ec.contains(Q) else None)
        table.append(row)
    return table
