#!/usr/bin/env python3

# Copyright (C) 2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Low-cardinality elliptic curves, for didactical purposes.

The curve parameters are loaded from the ec_demo.json data file,
name: {"p": p, "a": a, "b": b}.
Integer parameters can also be given as hex-strings.
"""

import json
from os import path
from typing import Dict

from ecfp.curve import EllipticCurve

datadir = path.join(path.dirname(__file__), "data")

filename = path.join(datadir, "ec_demo.json")
with open(filename, "r", encoding="ascii") as file_:
    demo_params = json.load(file_)

CURVES: Dict[str, EllipticCurve] = {}
for ec_name, ec_params in demo_params.items():
    CURVES[ec_name] = EllipticCurve.from_dict(ec_params)

ec7_6_3 = CURVES["ec7_6_3"]
