#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by chamhash from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the chamhash versions are derived.
"""


class ChamHashValueError(ValueError):
    pass


class ChamHashTypeError(TypeError):
    pass


class ChamHashRuntimeError(RuntimeError):
    pass


class InvalidPointError(ChamHashValueError):
    "A supplied point is not on the curve."


class HashMismatchError(ChamHashValueError):
    "A chameleon hash tag does not match its (message, R, s, key) input."


class EntropyUnavailableError(ChamHashRuntimeError):
    "The random source could not provide the requested bytes."
