#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `chamhash.ecc.sampling` module."

import pytest

from chamhash.ecc import mult, random_point, random_scalar, secp256r1
from chamhash.ecc.sampling import SECURITY_MARGIN
from chamhash.exceptions import ChamHashRuntimeError, EntropyUnavailableError
from tests.ecc.test_curve import all_curves, low_card_curves


def test_deterministic_source() -> None:
    for ec in all_curves.values():
        size = ec.p_size + SECURITY_MARGIN

        assert random_scalar(ec, lambda n: b"\x00" * n) == 1

        k = random_scalar(ec, lambda n: b"\xff" * n)
        assert k == (256**size - 1) % (ec.n - 1) + 1

        requested = []

        def source(n: int) -> bytes:
            requested.append(n)
            return b"\x01" * n

        random_scalar(ec, source)
        assert requested == [size]


def test_range() -> None:
    for ec in all_curves.values():
        for _ in range(10):
            assert 0 < random_scalar(ec) < ec.n

    # small curves: all values in 1..n-1 are eventually hit
    ec = low_card_curves["ec13_11"]
    seen = {random_scalar(ec) for _ in range(500)}
    assert seen == set(range(1, ec.n))


def test_random_point() -> None:
    for ec in all_curves.values():
        K, k = random_point(ec)
        assert 0 < k < ec.n
        assert K == mult(k, ec.G, ec)
        assert K[1] != 0

    K, k = random_point(rand_bytes=lambda n: b"\x00" * n)
    assert k == 1
    assert K == secp256r1.G


def test_source_failure() -> None:
    def failing_source(n: int) -> bytes:
        raise OSError("no entropy")

    err_msg = "random source failure: no entropy"
    with pytest.raises(EntropyUnavailableError, match=err_msg):
        random_scalar(secp256r1, failing_source)
    with pytest.raises(EntropyUnavailableError, match=err_msg):
        random_point(secp256r1, failing_source)

    def not_implemented(n: int) -> bytes:
        raise NotImplementedError("urandom")

    with pytest.raises(EntropyUnavailableError, match="random source failure"):
        random_scalar(secp256r1, not_implemented)

    # also a RuntimeError
    with pytest.raises(ChamHashRuntimeError):
        random_scalar(secp256r1, failing_source)


def test_short_source() -> None:
    err_msg = "random source exhausted: 3 instead of 40 bytes"
    with pytest.raises(EntropyUnavailableError, match=err_msg):
        random_scalar(secp256r1, lambda n: b"\x01\x02\x03")

    err_msg = "random source exhausted: str instead of 40 bytes"
    with pytest.raises(EntropyUnavailableError, match=err_msg):
        random_scalar(secp256r1, lambda n: "00" * n)  # type: ignore
