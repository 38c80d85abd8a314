#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field helpers.

mod_inv serves the affine formulas and the Jacobian-to-affine
conversion; mod_sqrt recovers y from x, e.g. to validate the h value
of a tag or to decompress a public key.
"""

from chamhash.exceptions import ChamHashValueError
from chamhash.utils import int_repr


def mod_inv(a: int, m: int) -> int:
    "Return the inverse of a (mod m); m does not have to be a prime."

    try:
        return pow(a, -1, m)
    except ValueError as e:
        err_msg = f"no inverse for {int_repr(a % m)} mod {int_repr(m)}"
        raise ChamHashValueError(err_msg) from e


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root of a (mod p), p being an odd prime (or 2).

    The other root is p minus the returned one.
    For p = 3 (mod 4), as for the secp curves, the root is a single
    exponentiation; otherwise Tonelli-Shanks is used.
    """

    a %= p
    if a == 0 or p == 2:
        return a
    # Euler's criterion
    if pow(a, (p - 1) // 2, p) != 1:
        raise ChamHashValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")

    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)

    # p - 1 = q * 2^s, q odd
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    # any quadratic non-residue
    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1

    c, t, r = pow(z, q, p), pow(a, q, p), pow(a, (q + 1) // 2, p)
    while t != 1:
        # least i such that t^(2^i) = 1
        i, t2i = 0, t
        while t2i != 1:
            t2i = t2i * t2i % p
            i += 1
        b = pow(c, 1 << (s - i - 1), p)
        s, c = i, b * b % p
        t, r = t * c % p, r * b % p
    return r
