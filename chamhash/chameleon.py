#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Chameleon hash functions.

A chameleon hash is a randomized hash function keyed by a public key Q:
anyone can hash a message, but only the owner of the private key q
(Q = qG) can later find a different (message, randomness) pair
hashing to the same value.

The hasher:

* picks a random commitment point R and a random blinding scalar s
* computes e = hf(msg || x_R || y_R) and the hash point

      H = R - eQ - sG

* publishes the tag (R, s, h), h being the x-coordinate of H

Verification recomputes H from (msg, R, s, Q) and compares h.

The private key owner, given a tag for msg, can rebind it to new_msg:

* picks a random k and sets R' = H + kG
* computes e' = hf(new_msg || x_R' || y_R')
* sets s' = k - e'q (mod n)

so that R' - e'Q - s'G = H + kG - e'qG - (k - e'q)G = H.

Without q, producing such (R', s') for a chosen new_msg requires
solving the discrete logarithm problem of Q.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import InitVar, dataclass
from hashlib import sha256

from chamhash.alias import HashF, Octets, Point, RandBytes, String
from chamhash.ecc.curve import Curve, mult, secp256r1
from chamhash.ecc.sampling import random_point, random_scalar
from chamhash.exceptions import (
    ChamHashRuntimeError,
    ChamHashValueError,
    HashMismatchError,
)
from chamhash.hashes import commitment_digest, int_from_digest
from chamhash.keys import PrvKey, PubKey, int_from_prv_key, point_from_pub_key
from chamhash.utils import bytes_from_octets, int_repr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tag:
    """Chameleon hash tag (R, s, h).

    Fixed-width serialization:

    [x_R][y_R][s][h]

    * x_R, y_R: affine coordinates of the commitment point R,
      ec.p_size bytes each
    * s: blinding scalar, ec.n_size bytes
    * h: the hash value, i.e. the x-coordinate of the hash point,
      ec.p_size bytes

    128 bytes for secp256r1.
    """

    # commitment point, on curve and not INF
    R: Point
    # blinding scalar, 0 <= s < ec.n
    s: int
    # x-coordinate of the hash point, 0 <= h < ec.p
    h: int
    ec: Curve = secp256r1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        self.ec.require_on_curve(self.R)
        if self.R[1] == 0:
            raise ChamHashValueError("INF cannot be a commitment point")

        if not 0 <= self.s < self.ec.n:
            err_msg = "scalar s not in 0..n-1: "
            err_msg += int_repr(self.s)
            raise ChamHashValueError(err_msg)

        try:
            self.ec.y(self.h)
        except ChamHashValueError as e:
            err_msg = "h is not a valid x-coordinate: "
            err_msg += int_repr(self.h)
            raise ChamHashValueError(err_msg) from e

    def serialize(self, check_validity: bool = True) -> bytes:
        "Return the fixed-width [x_R][y_R][s][h] serialization."
        if check_validity:
            self.assert_valid()

        ec = self.ec
        out = self.R[0].to_bytes(ec.p_size, byteorder="big", signed=False)
        out += self.R[1].to_bytes(ec.p_size, byteorder="big", signed=False)
        out += self.s.to_bytes(ec.n_size, byteorder="big", signed=False)
        out += self.h.to_bytes(ec.p_size, byteorder="big", signed=False)
        return out

    @classmethod
    def parse(
        cls: type[Tag],
        data: Octets,
        ec: Curve = secp256r1,
        check_validity: bool = True,
    ) -> Tag:
        "Return a Tag by parsing its fixed-width serialization."

        data = bytes_from_octets(data, 3 * ec.p_size + ec.n_size)

        x_R = int.from_bytes(data[: ec.p_size], byteorder="big", signed=False)
        data = data[ec.p_size :]
        y_R = int.from_bytes(data[: ec.p_size], byteorder="big", signed=False)
        data = data[ec.p_size :]
        s = int.from_bytes(data[: ec.n_size], byteorder="big", signed=False)
        h = int.from_bytes(data[ec.n_size :], byteorder="big", signed=False)

        return cls((x_R, y_R), s, h, ec, check_validity)


def hash_point_(
    msg: String, R: Point, s: int, Q: Point, ec: Curve = secp256r1, hf: HashF = sha256
) -> Point:
    """Return the hash point H = R - eQ - sG.

    e is the integer value of hf(msg || x_R || y_R).
    """

    e = int_from_digest(commitment_digest(msg, R, hf))
    T1 = mult(e, Q, ec)
    T2 = mult(s, ec.G, ec)
    H = ec.add(R, ec.negate(T1))
    H = ec.add(H, ec.negate(T2))
    # edge case that cannot be reproduced in the test suite
    if H[1] == 0:
        err_msg = "invalid (INF) hash point"  # pragma: no cover
        raise ChamHashRuntimeError(err_msg)  # pragma: no cover
    return H


def chameleon_hash(
    msg: String,
    pub_key: PubKey,
    ec: Curve = secp256r1,
    hf: HashF = sha256,
    rand_bytes: RandBytes = secrets.token_bytes,
) -> Tag:
    "Return the chameleon hash tag (R, s, h) of msg."

    Q = point_from_pub_key(pub_key, ec)
    # the discrete logarithm of R is not needed
    R, _ = random_point(ec, rand_bytes)
    s = random_scalar(ec, rand_bytes)
    H = hash_point_(msg, R, s, Q, ec, hf)
    return Tag(R, s, H[0], ec)


def assert_as_valid(
    msg: String, tag: Tag | Octets, pub_key: PubKey, hf: HashF = sha256
) -> None:
    # It raises Errors, while verify should always return True or False
    if isinstance(tag, Tag):
        tag.assert_valid()
    else:
        tag = Tag.parse(tag)

    Q = point_from_pub_key(pub_key, tag.ec)
    H = hash_point_(msg, tag.R, tag.s, Q, tag.ec, hf)
    if H[0] != tag.h:
        raise HashMismatchError("chameleon hash verification failed")


def verify(msg: String, tag: Tag | Octets, pub_key: PubKey, hf: HashF = sha256) -> bool:
    "Return True if tag is a valid chameleon hash of msg for pub_key."

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, tag, pub_key, hf)
    except Exception:  # pylint: disable=broad-except
        return False

    return True


def find_collision(
    msg: String,
    tag: Tag | Octets,
    new_msg: String,
    prv_key: PrvKey,
    hf: HashF = sha256,
    rand_bytes: RandBytes = secrets.token_bytes,
    strict: bool = True,
) -> Tag:
    """Return a tag (R', s', h) for new_msg with the same hash value h.

    The private key is the trapdoor: the input tag is first
    checked against (msg, prv_key*G). If it does not match,
    a HashMismatchError is raised; with strict=False a warning is
    logged instead and the collision is computed for the hash
    value actually obtained from (msg, R, s).
    """

    if isinstance(tag, Tag):
        tag.assert_valid()
    else:
        tag = Tag.parse(tag)
    ec = tag.ec

    q = int_from_prv_key(prv_key, ec)
    Q = mult(q, ec.G, ec)
    H = hash_point_(msg, tag.R, tag.s, Q, ec, hf)
    if H[0] != tag.h:
        err_msg = "tag does not match message and key: "
        err_msg += f"{int_repr(tag.h)} instead of {int_repr(H[0])}"
        if strict:
            raise HashMismatchError(err_msg)
        logger.warning("%s, rebinding the recomputed hash", err_msg)

    k = random_scalar(ec, rand_bytes)
    K = mult(k, ec.G, ec)
    # the new commitment is bound to the hash point itself
    new_R = ec.add(H, K)
    # edge case that cannot be reproduced in the test suite
    if new_R[1] == 0:
        err_msg = "invalid (INF) commitment point"  # pragma: no cover
        raise ChamHashRuntimeError(err_msg)  # pragma: no cover

    e = int_from_digest(commitment_digest(new_msg, new_R, hf))
    new_s = (k - e * q % ec.n) % ec.n
    return Tag(new_R, new_s, H[0], ec)
