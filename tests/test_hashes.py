#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `chamhash.hashes` module."

import hashlib

import pytest

from chamhash.alias import INF
from chamhash.ecc.curve import mult, secp256r1
from chamhash.exceptions import ChamHashValueError
from chamhash.hashes import commitment_digest, int_from_digest
from tests.ecc.test_curve import low_card_curves


def test_commitment_digest() -> None:
    ec = secp256r1
    msg = "hello world!"
    x_G = ec.G[0].to_bytes(32, "big")
    y_G = ec.G[1].to_bytes(32, "big")

    expected = hashlib.sha256(msg.encode() + x_G + y_G).digest()
    assert commitment_digest(msg, ec.G) == expected
    assert commitment_digest(msg.encode(), ec.G) == expected
    assert len(expected) == 32

    # no separators: the message/coordinate boundary is not encoded
    assert commitment_digest(msg, ec.G) == hashlib.sha256(
        b"hello world" + b"!" + x_G + y_G
    ).digest()

    # other hash functions
    expected = hashlib.sha512(msg.encode() + x_G + y_G).digest()
    assert commitment_digest(msg, ec.G, hashlib.sha512) == expected

    # the digest depends on both coordinates
    minus_G = ec.negate(ec.G)
    assert commitment_digest(msg, minus_G) != commitment_digest(msg, ec.G)

    # empty message
    assert commitment_digest("", ec.G) == hashlib.sha256(x_G + y_G).digest()


def test_minimal_coordinate_encoding() -> None:
    ec = low_card_curves["ec23_31"]
    # G = (0, 1): the zero x-coordinate is the empty byte string
    assert ec.G == (0, 1)
    expected = hashlib.sha256(b"msg" + b"" + b"\x01").digest()
    assert commitment_digest("msg", ec.G) == expected

    # coordinates with leading zero bytes are shortened
    ec = secp256r1
    R = ec.G
    for _ in range(5000):
        R = ec.add(R, ec.G)
        if R[0] < 2 ** 248:
            break
    else:  # pragma: no cover
        pytest.skip("no short x-coordinate found")
    assert R == mult(ec.n - 1, ec.negate(R), ec)
    x_R = R[0].to_bytes((R[0].bit_length() + 7) // 8, "big")
    y_R = R[1].to_bytes((R[1].bit_length() + 7) // 8, "big")
    assert len(x_R) < 32
    expected = hashlib.sha256(b"msg" + x_R + y_R).digest()
    assert commitment_digest("msg", R) == expected


def test_infinity_commitment() -> None:
    with pytest.raises(ChamHashValueError, match="INF cannot be a commitment point"):
        commitment_digest("msg", INF)


def test_int_from_digest() -> None:
    assert int_from_digest(b"") == 0
    assert int_from_digest(b"\x00\x01") == 1
    assert int_from_digest(b"\x01\x00") == 256

    digest = b"\xff" * 32
    # no reduction mod n
    assert int_from_digest(digest) == 2 ** 256 - 1
    assert int_from_digest(digest) > secp256r1.n
