#!/usr/bin/env python3

# Copyright (C) 2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve over Fp and its points.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity.
The constants a, b should satisfy the relationship
4 a^3 + 27 b^2 ≠ 0 (mod p): this is not checked,
as neither is the primality of p.

The point at infinity is the tagged CurvePoint with no coordinates,
so that it can never be confused with an affine point, e.g. (0, 0).
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from dataclasses_json import DataClassJsonMixin

from ecfp.alias import Coordinates
from ecfp.exceptions import ECFpRuntimeError, ECFpValueError
from ecfp.field import FieldElement
from ecfp.number_theory import modulus
from ecfp.utils import HEX_THRESHOLD, hex_string, int_from_integer, num_string


@dataclass(frozen=True)
class EllipticCurve(DataClassJsonMixin):
    """Finite group of the points of an elliptic curve over Fp.

    The group is defined by the point addition group law
    implemented by CurvePoint.
    """

    p: int
    a: int
    b: int

    def __post_init__(self) -> None:
        p = int_from_integer(self.p)
        object.__setattr__(self, "p", p)
        object.__setattr__(self, "a", modulus(int_from_integer(self.a), p))
        object.__setattr__(self, "b", modulus(int_from_integer(self.b), p))

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self.a)}"
            result += f"\n b   = {hex_string(self.b)}"
        else:
            result += f"\n a   = {self.a}"
            result += f"\n b   = {self.b}"

        return result

    def __repr__(self) -> str:
        result = "EllipticCurve("
        result += num_string(self.p)
        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f", '{hex_string(self.a)}', '{hex_string(self.b)}'"
        else:
            result += f", {self.a}, {self.b}"

        result += ")"
        return result

    @property
    def identity(self) -> "CurvePoint":
        "Return the point at infinity."
        return CurvePoint(self)

    def point(
        self, x: Union[FieldElement, int], y: Union[FieldElement, int]
    ) -> "CurvePoint":
        """Return the affine point (x, y).

        Coordinates can be ints or FieldElements over p.
        The point is not checked to be on the curve.
        """
        return CurvePoint(self, FieldElement(x, self.p), FieldElement(y, self.p))

    def as_point(self, Q: Union["CurvePoint", Coordinates]) -> "CurvePoint":
        "Return Q as CurvePoint, converting a pair of coordinates."
        if isinstance(Q, CurvePoint):
            return Q
        if len(Q) != 2:
            raise ECFpValueError(f"not a point: {Q!r}")
        return self.point(Q[0], Q[1])

    def y2(self, x: int) -> int:
        "Return the right-hand side x^3 + a*x + b of the curve equation."
        return modulus((x * x + self.a) * x + self.b, self.p)

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y).

        The other root, if any, is p - y.
        """
        if not 0 <= x < self.p:
            raise ECFpValueError(f"x-coordinate not in 0..p-1: {num_string(x)}")
        try:
            return FieldElement(self.y2(x), self.p).sqrt().value
        except ECFpValueError as e:
            raise ECFpValueError(f"invalid x-coordinate: {num_string(x)}") from e

    def contains(self, Q: Union["CurvePoint", Coordinates]) -> bool:
        "Return True if the point is on the curve."
        Q = self.as_point(Q)
        if Q.ec != self:
            return False
        if Q.is_identity:
            return True
        x, y = Q.xy
        return y * y == x * x * x + self.a * x + self.b

    def order(self, Q: Union["CurvePoint", Coordinates, None] = None) -> int:
        """Return the order of the point Q or, if Q is None, of the group.

        The order of Q is zero if Q is not on the curve.

        Both are brute force computations, suitable only for low p:
        the group order walks through all the p^2 (x, y) pairs
        (consider Schoof's algorithm for anything else).
        """
        if Q is None:
            return self._group_order()

        Q = self.as_point(Q)
        if not self.contains(Q):
            return 0

        # no group has more elements than the p^2 pairs plus infinity
        max_n = self.p * self.p + 1
        n, nQ = 1, Q
        while not nQ.is_identity:
            if n >= max_n:
                raise ECFpRuntimeError(f"no finite order found for {Q}")
            n += 1
            nQ = nQ + Q
        return n

    def _group_order(self) -> int:
        n = 1  # the point at infinity
        for x in range(self.p):
            for y in range(self.p):
                if self.contains(self.point(x, y)):
                    n += 1
        return n


@dataclass(frozen=True)
class CurvePoint(DataClassJsonMixin):
    """Point of an elliptic curve over Fp, or the point at infinity.

    Any coordinates are accepted: use EllipticCurve.contains
    to check that the point is actually on the curve.
    """

    ec: EllipticCurve
    x: Optional[FieldElement] = field(default=None)
    y: Optional[FieldElement] = field(default=None)

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise ECFpValueError("point with a single coordinate")
        for name in ("x", "y"):
            c = getattr(self, name)
            if isinstance(c, int):
                object.__setattr__(self, name, FieldElement(c, self.ec.p))
            elif c is not None and c.p != self.ec.p:
                err_msg = f"{name}-coordinate not in the curve field: "
                err_msg += f"p={num_string(c.p)} vs p={num_string(self.ec.p)}"
                raise ECFpValueError(err_msg)

    @property
    def is_identity(self) -> bool:
        return self.x is None

    @property
    def xy(self) -> Tuple[FieldElement, FieldElement]:
        "Return the affine coordinates."
        if self.x is None or self.y is None:
            raise ECFpValueError("INF has no coordinates")
        return self.x, self.y

    def __str__(self) -> str:
        if self.x is None or self.y is None:
            return "INF"
        return f"({self.x.value}, {self.y.value})"

    def __neg__(self) -> "CurvePoint":
        if self.x is None or self.y is None:
            return self
        return CurvePoint(self.ec, self.x, -self.y)

    def __add__(self, other: "CurvePoint") -> "CurvePoint":
        if not isinstance(other, CurvePoint):
            return NotImplemented
        if other.ec != self.ec:
            err_msg = f"points of different curves: {self.ec!r}, {other.ec!r}"
            raise ECFpValueError(err_msg)

        if self.is_identity:
            return other
        if other.is_identity:
            return self

        x_P, y_P = self.xy
        x_Q, y_Q = other.xy
        # opposite points, including the doubling of a point with y = 0
        if x_P == x_Q and y_P == -y_Q:
            return self.ec.identity

        if self == other:  # point doubling
            m = (3 * x_P * x_P + self.ec.a) / (2 * y_P)
        else:
            m = (y_P - y_Q) / (x_P - x_Q)
        x = m * m - x_P - x_Q
        y = y_P + m * (x - x_P)
        return CurvePoint(self.ec, x, -y)

    def __sub__(self, other: "CurvePoint") -> "CurvePoint":
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self + (-other)

    def __mul__(self, k: int) -> "CurvePoint":
        """Return the k-multiple of the point.

        Repeated addition, i.e. O(k) point additions:
        this is meant for low-cardinality curves only,
        double-and-add would be O(log k).
        """
        if not isinstance(k, int):
            return NotImplemented
        if k < 0:
            return (-self) * -k
        if k == 0:
            return self.ec.identity
        Q = self
        for _ in range(k - 1):
            Q = Q + self
        return Q

    __rmul__ = __mul__
