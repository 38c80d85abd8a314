#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `chamhash.ecc.number_theory` module."

import pytest

from chamhash.ecc.curve import CURVES
from chamhash.ecc.number_theory import mod_inv, mod_sqrt
from chamhash.exceptions import ChamHashValueError

small_primes = [p for p in range(2, 114) if all(p % d for d in range(2, p))]

# field primes and group orders of the named curves
curve_primes = sorted(
    {ec.p for ec in CURVES.values()} | {ec.n for ec in CURVES.values()}
)

primes = small_primes + curve_primes


def test_mod_inv_prime() -> None:
    for p in primes:
        with pytest.raises(ChamHashValueError, match="no inverse for 0 mod"):
            mod_inv(0, p)
        for a in range(1, min(p, 300)):  # exhausted only for small p
            assert a * mod_inv(a, p) % p == 1
            assert a * mod_inv(a + p, p) % p == 1


def test_mod_inv() -> None:
    for m in range(2, 60):
        for a in range(m):
            if any(a * i % m == 1 for i in range(m)):
                assert a * mod_inv(a, m) % m == 1
            else:
                with pytest.raises(ChamHashValueError, match="no inverse for "):
                    mod_inv(a, m)


def test_mod_sqrt() -> None:
    for p in small_primes:  # exhaustable only for small p
        has_root = {i * i % p for i in range(p)}
        for i in range(p):
            if i in has_root:
                root = mod_sqrt(i, p)
                assert i == root * root % p
                assert i == (p - root) * (p - root) % p
                root = mod_sqrt(i + p, p)
                assert i == root * root % p
            else:
                with pytest.raises(ChamHashValueError, match="no root for "):
                    mod_sqrt(i, p)


def test_mod_sqrt_large_primes() -> None:
    "Both p = 1 (mod 4), by Tonelli-Shanks, and p = 3 (mod 4)."
    # https://rosettacode.org/wiki/Tonelli-Shanks_algorithm#Python
    for i, p in [
        (10, 13),
        (56, 101),
        (1030, 10009),
        (44402, 100049),
        (665820697, 1000000009),
        (881398088036, 1000000000039),
    ]:
        root = mod_sqrt(i, p)
        assert i == root * root % p


def test_minus_one_quadr_res() -> None:
    "If p = 3 (mod 4) then p - 1 is not a quadratic residue."
    for p in primes:
        if p % 4 == 3:
            with pytest.raises(ChamHashValueError, match="no root for "):
                mod_sqrt(p - 1, p)
        else:
            root = mod_sqrt(p - 1, p)
            assert p - 1 == root * root % p
