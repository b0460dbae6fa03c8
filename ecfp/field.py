#!/usr/bin/env python3

# Copyright (C) 2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field Fp element.

FieldElement values are always normalized in [0, p-1]:
all the operators below take reduced operands and return
reduced results, avoiding a full modulus reduction where
a single conditional adjustment is enough.

The modulus p is assumed to be a prime (not checked):
for a composite p the division is defined only
for elements coprime with p.
"""

from dataclasses import dataclass
from typing import Optional, Union

from dataclasses_json import DataClassJsonMixin

from ecfp.exceptions import ECFpValueError
from ecfp.number_theory import mod_inv, modulus
from ecfp.utils import num_string


@dataclass(frozen=True)
class FieldElement(DataClassJsonMixin):
    value: int
    p: int

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, FieldElement):
            if value.p != self.p:
                err_msg = "elements of different fields: "
                err_msg += f"p={num_string(value.p)} vs p={num_string(self.p)}"
                raise ECFpValueError(err_msg)
            value = value.value
        object.__setattr__(self, "value", modulus(value, self.p))

    def _coerce(self, other: object) -> Optional["FieldElement"]:
        if isinstance(other, FieldElement):
            if other.p != self.p:
                err_msg = "elements of different fields: "
                err_msg += f"p={num_string(self.p)} vs p={num_string(other.p)}"
                raise ECFpValueError(err_msg)
            return other
        if isinstance(other, int):
            return FieldElement(other, self.p)
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.value == other.value and self.p == other.p
        # only the reduced representative, consistently with __hash__
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def is_zero(self) -> bool:
        return self.value == 0

    def __neg__(self) -> "FieldElement":
        # (-value) % p, without returning p for zero
        return FieldElement(0 if self.value == 0 else self.p - self.value, self.p)

    def __add__(self, other: Union["FieldElement", int]) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        s = self.value + o.value
        return FieldElement(s - self.p if s >= self.p else s, self.p)

    __radd__ = __add__

    def __sub__(self, other: Union["FieldElement", int]) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if self.value >= o.value:
            return FieldElement(self.value - o.value, self.p)
        return FieldElement(self.p - (o.value - self.value), self.p)

    def __rsub__(self, other: int) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: Union["FieldElement", int]) -> "FieldElement":
        if isinstance(other, int):
            # scalar multiplication
            return FieldElement(modulus(other * self.value, self.p), self.p)
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return FieldElement(modulus(self.value * o.value, self.p), self.p)

    __rmul__ = __mul__

    def inverse(self) -> "FieldElement":
        """Return the multiplicative inverse.

        NoInverseError is raised for the zero element.
        """
        return FieldElement(mod_inv(self.value, self.p), self.p)

    def __truediv__(self, other: Union["FieldElement", int]) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __rtruediv__(self, other: int) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o * self.inverse()

    def __pow__(self, k: int) -> "FieldElement":
        if not isinstance(k, int):
            return NotImplemented
        if k < 0:
            return self.inverse() ** -k
        return FieldElement(pow(self.value, k, self.p), self.p)

    def is_square(self) -> bool:
        "Return True if the element is a square in Fp (Euler's criterion)."
        if self.value == 0 or self.p == 2:
            return True
        return self ** ((self.p - 1) // 2) == 1

    def sqrt(self) -> "FieldElement":
        """Return a square root r of the element; -r is the other one.

        ECFpValueError is raised if the element is not a square.
        The Tonelli-Shanks algorithm is used, unless p = 3 (mod 4).
        """
        if not self.is_square():
            err_msg = f"no root for {num_string(self.value)} mod {num_string(self.p)}"
            raise ECFpValueError(err_msg)
        if self.value == 0 or self.p == 2:
            return self
        if self.p % 4 == 3:
            return self ** ((self.p + 1) // 4)

        # p - 1 = q * 2^s, with q odd
        q, s = self.p - 1, 0
        while q % 2 == 0:
            q //= 2
            s += 1
        z = FieldElement(2, self.p)
        while z.is_square():
            z += 1

        m, c, t, r = s, z**q, self**q, self ** ((q + 1) // 2)
        while t != 1:
            # lowest i such that t^(2^i) = 1
            i, t2i = 0, t
            while t2i != 1:
                t2i = t2i * t2i
                i += 1
            b = c ** (1 << (m - i - 1))
            m, c = i, b * b
            t, r = t * c, r * b
        return r

    def __str__(self) -> str:
        return f"{self.value} (mod {num_string(self.p)})"
