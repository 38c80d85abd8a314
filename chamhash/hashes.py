#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

The commitment digest binds a message to the commitment point R:

    hf(msg || x_R || y_R)

where x_R and y_R are the shortest big-endian representations
of the affine coordinates (no leading zero bytes).
There are no separators and no length prefixes:
the exact byte concatenation must be reproduced by any
interoperable implementation.
"""

import hashlib

from chamhash.alias import HashF, Point, String
from chamhash.exceptions import ChamHashValueError
from chamhash.utils import bytes_from_string, minimal_bytes_from_int


def commitment_digest(msg: String, R: Point, hf: HashF = hashlib.sha256) -> bytes:
    "Return hf(msg || x_R || y_R) as raw digest bytes."

    if R[1] == 0:  # infinity point in affine coordinates
        raise ChamHashValueError("INF cannot be a commitment point")

    h = hf()
    h.update(bytes_from_string(msg))
    h.update(minimal_bytes_from_int(R[0]))
    h.update(minimal_bytes_from_int(R[1]))
    return bytes(h.digest())


def int_from_digest(digest: bytes) -> int:
    """Return the digest as big-endian unsigned integer.

    No reduction is performed here:
    it is up to the consumer to reduce it mod n.
    """
    return int.from_bytes(digest, byteorder="big", signed=False)
