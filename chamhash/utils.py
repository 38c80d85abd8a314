#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Byte and integer conversions used by tags, keys, and digests."

from typing import Collection, Optional, Union

from chamhash.alias import Octets, String
from chamhash.exceptions import ChamHashTypeError, ChamHashValueError

# integers above this are shown in hex in error messages
_HEX_THRESHOLD = 0xFFFFFFFF


def bytes_from_octets(
    octets: Octets, size: Optional[Union[int, Collection[int]]] = None
) -> bytes:
    """Return bytes, decoding a hex-string if needed.

    Whitespace in hex-strings is ignored.
    If size is given (a length or a collection of allowed lengths),
    the result must match it.
    """

    if isinstance(octets, str):
        data = bytes.fromhex(octets)
    elif isinstance(octets, (bytes, bytearray)):
        data = bytes(octets)
    else:
        raise ChamHashTypeError(f"not octets: {type(octets).__name__}")
    if size is None:
        return data
    allowed = (size,) if isinstance(size, int) else tuple(size)
    if len(data) not in allowed:
        expected = size if isinstance(size, int) else " or ".join(map(str, allowed))
        raise ChamHashValueError(f"invalid size: {len(data)} bytes instead of {expected}")
    return data


def bytes_from_string(msg: String) -> bytes:
    "Return the message bytes: text is UTF-8 encoded, never hex-decoded."

    if isinstance(msg, str):
        return msg.encode("utf-8")
    if isinstance(msg, (bytes, bytearray)):
        return bytes(msg)
    raise ChamHashTypeError(f"not a message: {type(msg).__name__}")


def minimal_bytes_from_int(i: int) -> bytes:
    """Return the shortest big-endian representation of a non-negative int.

    No leading zero bytes: zero is the empty byte string.
    """

    if i < 0:
        raise ChamHashValueError(f"negative integer: {i}")
    return i.to_bytes((i.bit_length() + 7) // 8, byteorder="big", signed=False)


def int_repr(i: int) -> str:
    "Return a compact rendering of an integer for error messages."

    return hex(i) if abs(i) > _HEX_THRESHOLD else str(i)
