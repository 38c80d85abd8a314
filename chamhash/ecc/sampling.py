#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Random scalars and random curve points.

The random source is injected as a callable returning the requested
number of bytes (secrets.token_bytes by default).
If the source fails, an EntropyUnavailableError is raised:
there is no fallback to a weaker generator and no retry.

To avoid a noticeable modulo bias, a random scalar is obtained
from 8 bytes more than the field size,
reduced mod (n-1) and then incremented by one:
the result is in [1, n-1].
"""

import secrets
from typing import Tuple

from chamhash.alias import Point, RandBytes
from chamhash.ecc.curve import Curve, mult, secp256r1
from chamhash.exceptions import EntropyUnavailableError

# bytes drawn on top of the field size
SECURITY_MARGIN = 8


def _random_bytes(size: int, rand_bytes: RandBytes) -> bytes:
    try:
        buf = rand_bytes(size)
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailableError(f"random source failure: {e}") from e

    if not isinstance(buf, bytes) or len(buf) != size:
        got = len(buf) if isinstance(buf, bytes) else type(buf).__name__
        raise EntropyUnavailableError(
            f"random source exhausted: {got} instead of {size} bytes"
        )
    return buf


def random_scalar(
    ec: Curve = secp256r1, rand_bytes: RandBytes = secrets.token_bytes
) -> int:
    "Return a random scalar in [1, n-1]."

    buf = _random_bytes(ec.p_size + SECURITY_MARGIN, rand_bytes)
    k = int.from_bytes(buf, byteorder="big", signed=False)
    return k % (ec.n - 1) + 1


def random_point(
    ec: Curve = secp256r1, rand_bytes: RandBytes = secrets.token_bytes
) -> Tuple[Point, int]:
    "Return a random point K = k*G together with its discrete logarithm k."

    k = random_scalar(ec, rand_bytes)
    return mult(k, ec.G, ec), k
