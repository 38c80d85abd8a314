#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Elliptic curve layer: curves, scalar multiplication, sampling, encoding."

from chamhash.ecc.curve import CURVES, Curve, mult, secp256r1
from chamhash.ecc.sampling import random_point, random_scalar
from chamhash.ecc.sec_point import bytes_from_point, point_from_octets

__all__ = [
    "CURVES",
    "Curve",
    "mult",
    "secp256r1",
    "random_point",
    "random_scalar",
    "bytes_from_point",
    "point_from_octets",
]
