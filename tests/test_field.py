#!/usr/bin/env python3

# Copyright (C) 2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecfp.field` module."

import json

import pytest

from ecfp.exceptions import ECFpValueError, NoInverseError
from ecfp.field import FieldElement

small_primes = [3, 5, 7, 11, 13, 17, 19, 23, 29, 31]


def test_normalization() -> None:
    assert FieldElement(10, 7).value == 3
    assert FieldElement(-1, 7).value == 6
    assert FieldElement(-7, 7).value == 0
    assert FieldElement(3, 7) == FieldElement(10, 7)
    assert FieldElement(3, 7) != FieldElement(3, 11)
    assert FieldElement(3, 7) == 3
    assert FieldElement(3, 7) != 4
    assert FieldElement(FieldElement(10, 7), 7) == 3
    assert int(FieldElement(3, 7)) == 3
    assert not FieldElement(0, 7)
    assert FieldElement(0, 7).is_zero()
    assert FieldElement(1, 7)
    assert len({FieldElement(3, 7), FieldElement(10, 7)}) == 1

    with pytest.raises(ECFpValueError, match="elements of different fields: "):
        FieldElement(FieldElement(3, 11), 7)


def test_int_equality_matches_hash() -> None:
    # an int is equal only to its reduced representative
    X = FieldElement(3, 7)
    assert X == 3
    assert X != 10
    assert X != -4
    assert hash(X) == hash(3)
    assert FieldElement(-1, 7) == 6
    assert FieldElement(-1, 7) != -1
    assert {X, 3} == {3}
    assert {3: "three"}[X] == "three"


def test_operators() -> None:
    p = 7
    X, Y = FieldElement(5, p), FieldElement(4, p)
    assert -X == 2
    assert -FieldElement(0, p) == 0
    assert (-FieldElement(0, p)).value == 0
    assert X + Y == 2
    assert X - Y == 1
    assert Y - X == 6
    assert X * Y == 6
    assert X / Y == 3  # 4 * 3 = 12 = 5 (mod 7)
    assert 3 * X == 1
    assert X * 3 == 1
    assert -3 * X == 6
    assert X + 3 == 1
    assert 3 + X == 1
    assert 3 - X == 5
    assert 1 / Y == 2
    assert X**2 == 4
    assert X**0 == 1
    assert X**-1 == 3
    assert X**-1 * X == 1


def test_operators_on_reduced_values() -> None:
    for p in small_primes:
        for x in range(p):
            X = FieldElement(x, p)
            for y in range(p):
                Y = FieldElement(y, p)
                assert (X + Y).value == (x + y) % p
                assert (X - Y).value == (x - y) % p
                assert (X * Y).value == (x * y) % p
                assert 0 <= (X + Y).value < p
                assert 0 <= (X - Y).value < p


def test_additive_identity() -> None:
    for p in small_primes:
        for x in range(p):
            X = FieldElement(x, p)
            assert X + (-X) == 0
            assert X - X == 0


def test_mult_div_consistency() -> None:
    for p in small_primes:
        for x in range(1, p):
            X = FieldElement(x, p)
            for y in range(1, p):
                Y = FieldElement(y, p)
                assert (X * Y) / Y == X
                assert (X / Y) * Y == X
            assert X / X == 1


def test_division_by_zero() -> None:
    X = FieldElement(3, 7)
    with pytest.raises(NoInverseError, match="No inverse for 0 mod 7"):
        X / FieldElement(0, 7)
    with pytest.raises(NoInverseError, match="No inverse for 0 mod 7"):
        X / 7
    with pytest.raises(NoInverseError):
        FieldElement(0, 7).inverse()
    # no inverse (mod a composite)
    with pytest.raises(NoInverseError, match="No inverse for 3 mod 9"):
        FieldElement(1, 9) / FieldElement(3, 9)


def test_different_fields() -> None:
    err_msg = "elements of different fields: "
    with pytest.raises(ECFpValueError, match=err_msg):
        FieldElement(1, 7) + FieldElement(1, 11)
    with pytest.raises(ECFpValueError, match=err_msg):
        FieldElement(1, 7) * FieldElement(1, 11)
    with pytest.raises(ECFpValueError, match=err_msg):
        FieldElement(1, 7) / FieldElement(1, 11)
    with pytest.raises(TypeError):
        FieldElement(1, 7) + 1.0  # type: ignore


def test_str() -> None:
    assert str(FieldElement(10, 7)) == "3 (mod 7)"
    assert repr(FieldElement(10, 7)) == "FieldElement(value=3, p=7)"


def test_dataclasses_json_dict() -> None:
    X = FieldElement(5, 7)
    X_dict = X.to_dict()
    assert X_dict == {"value": 5, "p": 7}
    assert X == FieldElement.from_dict(X_dict)
    assert X == FieldElement.from_json(json.dumps(X_dict))
    assert X == FieldElement.from_json(X.to_json())


def test_sqrt() -> None:
    for p in (2, 3, 5, 7, 11, 13, 17, 29, 37, 41, 97, 113, 257, 65537):
        squares = {i * i % p for i in range(p)}
        for i in range(min(p, 300)):
            X = FieldElement(i, p)
            assert X.is_square() == (i in squares)
            if i in squares:
                r = X.sqrt()
                assert r * r == X
                assert (-r) * (-r) == X
            else:
                with pytest.raises(ECFpValueError, match="no root for "):
                    X.sqrt()


def test_tonelli_shanks() -> None:
    # https://rosettacode.org/wiki/Tonelli-Shanks_algorithm#Python
    ttest = [
        (10, 13),
        (56, 101),
        (1030, 10009),
        (44402, 100049),
        (665820697, 1000000009),
        (881398088036, 1000000000039),
    ]
    for i, p in ttest:
        X = FieldElement(i, p)
        r = X.sqrt()
        assert r * r == X
