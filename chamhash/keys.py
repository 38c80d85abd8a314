#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Functions for conversions of private and public key inputs.

Key generation and storage are not provided:
keys are produced and kept elsewhere, then passed here in any of
the supported formats.
"""

from typing import Union

from chamhash.alias import Point
from chamhash.ecc.curve import Curve, mult, secp256r1
from chamhash.ecc.sec_point import point_from_octets
from chamhash.exceptions import ChamHashValueError, InvalidPointError
from chamhash.utils import bytes_from_octets, int_repr

# private key inputs:
# integer as Union[int, Octets]
PrvKey = Union[int, bytes, str]

# public key inputs:
# elliptic curve point as Union[Octets, Point]
PubKey = Union[bytes, str, Point]


def int_from_prv_key(prv_key: PrvKey, ec: Curve = secp256r1) -> int:
    """Return a verified-as-valid private key integer.

    It supports:

    - integer (native int)
    - big-endian octets (bytes or hex-string) of ec.n_size bytes
    """

    if isinstance(prv_key, int):
        q = prv_key
    else:
        try:
            prv_key = bytes_from_octets(prv_key, ec.n_size)
        except (TypeError, ValueError) as e:
            raise ChamHashValueError(f"not a private key: {prv_key!r}") from e
        q = int.from_bytes(prv_key, "big")

    if not 0 < q < ec.n:
        raise ChamHashValueError(f"private key not in 1..n-1: {int_repr(q)}")

    return q


def point_from_pub_key(pub_key: PubKey, ec: Curve = secp256r1) -> Point:
    """Return an elliptic curve point tuple from a public key.

    It supports:

    - native tuple (x_Q, y_Q)
    - SEC Octets (bytes or hex-string, with 02, 03, or 04 prefix)

    The point is checked to be on the curve
    and not to be the infinity point.
    """

    if isinstance(pub_key, tuple):
        if ec.is_on_curve(pub_key) and pub_key[1] != 0:
            return pub_key
        raise InvalidPointError(f"not a valid public key: {pub_key}")

    try:
        return point_from_octets(pub_key, ec)
    except InvalidPointError:
        raise
    except (TypeError, ValueError) as e:
        raise ChamHashValueError(f"not a public key: {pub_key!r}") from e


def pub_key_from_prv_key(prv_key: PrvKey, ec: Curve = secp256r1) -> Point:
    "Return the public key point Q = q*G."

    q = int_from_prv_key(prv_key, ec)
    return mult(q, ec.G, ec)
