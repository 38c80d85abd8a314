#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the chamhash package."

name = "chamhash"
__version__ = "2022.6.1"
__author__ = "The chamhash developers"
__author_email__ = "devs@chamhash.org"
__copyright__ = "Copyright (C) 2021-2022 The chamhash developers"
__license__ = "MIT License"
