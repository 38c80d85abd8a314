#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC 1 v.2 (section 2.3.3 and 2.3.4) public key point encoding.

* compressed: 0x02 or 0x03 (the parity of y), then x
* uncompressed: 0x04, then x and y

Coordinates are ec.p_size bytes, big-endian.
INF has no encoding.
"""

from chamhash.alias import Octets, Point
from chamhash.ecc.curve import Curve, secp256r1
from chamhash.exceptions import ChamHashValueError, InvalidPointError
from chamhash.utils import bytes_from_octets


def bytes_from_point(Q: Point, ec: Curve = secp256r1, compressed: bool = True) -> bytes:
    "Return the SEC encoding of a point."

    ec.require_on_curve(Q)
    if Q[1] == 0:
        raise ChamHashValueError("no bytes representation for infinity point")

    x_Q = Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)
    if compressed:
        return bytes([2 + (Q[1] & 1)]) + x_Q
    return b"\x04" + x_Q + Q[1].to_bytes(ec.p_size, byteorder="big", signed=False)


def point_from_octets(pub_key: Octets, ec: Curve = secp256r1) -> Point:
    "Return the curve point of a SEC encoding."

    compressed_size = 1 + ec.p_size
    uncompressed_size = 1 + 2 * ec.p_size
    data = bytes_from_octets(pub_key, (compressed_size, uncompressed_size))
    prefix, body = data[0], data[1:]

    if prefix in (2, 3):
        if len(data) != compressed_size:
            err_msg = f"invalid size for compressed point: {len(data)} bytes"
            raise ChamHashValueError(err_msg)
        x_Q = int.from_bytes(body, byteorder="big", signed=False)
        try:
            y_Q = ec.y(x_Q)
        except ChamHashValueError as e:
            raise InvalidPointError(f"invalid x-coordinate: {x_Q:#x}") from e
        # pick the root with the encoded parity
        if y_Q & 1 != prefix & 1:
            y_Q = ec.p - y_Q
        return x_Q, y_Q

    if prefix == 4:
        if len(data) != uncompressed_size:
            err_msg = f"invalid size for uncompressed point: {len(data)} bytes"
            raise ChamHashValueError(err_msg)
        Q = (
            int.from_bytes(body[: ec.p_size], byteorder="big", signed=False),
            int.from_bytes(body[ec.p_size :], byteorder="big", signed=False),
        )
        if Q[1] == 0:
            raise ChamHashValueError("no bytes representation for infinity point")
        if not ec.is_on_curve(Q):
            raise InvalidPointError(f"point not on curve: ({Q[0]:#x}, {Q[1]:#x})")
        return Q

    raise ChamHashValueError(f"not a point: {data.hex()}")
