#!/usr/bin/env python3

# Copyright (C) 2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecfp from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecfp versions are derived.
"""


class ECFpValueError(ValueError):
    pass


class NoInverseError(ECFpValueError):
    "The modular inverse does not exist, e.g. division by zero in Fp."


class ECFpTypeError(TypeError):
    pass


class ECFpRuntimeError(RuntimeError):
    pass
