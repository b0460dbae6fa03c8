#!/usr/bin/env python3

# Copyright (C) 2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecfp package."

name = "ecfp"
__version__ = "2022.10.1"
__author__ = "The ecfp developers"
__author_email__ = "devs@ecfp.org"
__copyright__ = "Copyright (C) 2022 The ecfp developers"
__license__ = "MIT License"
