#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime order elliptic curve groups and scalar multiplication.

Only what chameleon hashing needs is provided:
point validation, addition, negation, recovery of y from x,
and scalar multiplication by the Montgomery ladder.

Named curves (SEC 2 v.2, http://www.secg.org/sec2-v2.pdf):

* secp256r1, a.k.a. NIST P-256: the default
* secp256k1
* secp384r1, a.k.a. NIST P-384
"""

from typing import Dict, Optional

from chamhash.alias import INF, INFJ, JacPoint, Point
from chamhash.ecc.number_theory import mod_inv, mod_sqrt
from chamhash.exceptions import ChamHashTypeError, ChamHashValueError, InvalidPointError
from chamhash.utils import int_repr


class Curve:
    """Cyclic subgroup of prime order n of y^2 = x^3 + a*x + b over F_p.

    G generates the subgroup; cofactor*n is the number of curve points.
    Parameters are validated at construction.
    """

    def __init__(
        self, p: int, a: int, b: int, G: Point, n: int, cofactor: int = 1
    ) -> None:

        # Fermat test: parameters are public, a probable prime will do
        if p < 5 or pow(2, p - 1, p) != 1:
            raise ChamHashValueError(f"p is not prime: {int_repr(p)}")
        for name, coeff in (("a", a), ("b", b)):
            if not 0 <= coeff < p:
                raise ChamHashValueError(f"{name} not in 0..p-1: {int_repr(coeff)}")
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise ChamHashValueError("zero discriminant")
        self.p = p
        self.a = a
        self.b = b
        self.p_size = (p.bit_length() + 7) // 8

        if len(G) != 2:
            raise ChamHashValueError("generator must be a pair of coordinates")
        if G[1] == 0:
            raise ChamHashValueError("INF cannot be a generator")
        if not self.is_on_curve(G):
            raise ChamHashValueError("generator is not on the curve")
        self.G: Point = G[0], G[1]
        self.GJ: JacPoint = G[0], G[1], 1

        if n < 3 or pow(2, n - 1, n) != 1:
            raise ChamHashValueError(f"n is not prime: {int_repr(n)}")
        # Hasse theorem: |#E - (p + 1)| <= 2 sqrt(p)
        if (cofactor * n - p - 1) ** 2 > 4 * p:
            err_msg = f"invalid cofactor: {cofactor} for n = {int_repr(n)}"
            raise ChamHashValueError(err_msg)
        if _ladder(n, self.GJ, self)[2] != 0:
            raise ChamHashValueError(f"n is not the order of G: {int_repr(n)}")
        self.n = n
        self.n_size = (n.bit_length() + 7) // 8
        self.cofactor = cofactor

    def __repr__(self) -> str:
        params = (self.p, self.a, self.b, self.G, self.n, self.cofactor)
        return "Curve(" + ", ".join(_repr(i) for i in params) + ")"

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if Q is on the curve; INF is on the curve.

        Coordinates outside the field range raise InvalidPointError:
        they are not a different encoding of a valid point.
        """

        if len(Q) != 2:
            raise InvalidPointError("point must be a pair of coordinates")
        x, y = Q
        if y == 0:
            return True
        if not 0 <= x < self.p:
            raise InvalidPointError(f"x-coordinate not in 0..p-1: {int_repr(x)}")
        if not 0 < y < self.p:
            raise InvalidPointError(f"y-coordinate not in 1..p-1: {int_repr(y)}")
        return (y * y - self._y2(x)) % self.p == 0

    def require_on_curve(self, Q: Point) -> None:
        if not self.is_on_curve(Q):
            raise InvalidPointError("point not on curve")

    def _y2(self, x: int) -> int:
        return ((x * x + self.a) * x + self.b) % self.p

    def y(self, x: int) -> int:
        "Return one of the two y-coordinates of the curve points with abscissa x."

        if not 0 <= x < self.p:
            raise ChamHashValueError(f"x-coordinate not in 0..p-1: {int_repr(x)}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except ChamHashValueError as e:
            raise ChamHashValueError(f"invalid x-coordinate: {int_repr(x)}") from e

    def negate(self, Q: Point) -> Point:
        "Return -Q; the input point is not checked to be on the curve."

        if len(Q) != 2:
            raise ChamHashTypeError("not a point")
        # % p maps INF to itself
        return Q[0], (self.p - Q[1]) % self.p

    def add(self, Q: Point, R: Point) -> Point:
        "Return Q + R; both points must be on the curve."

        self.require_on_curve(Q)
        self.require_on_curve(R)
        return self._add_aff(Q, R)

    def _add_aff(self, Q: Point, R: Point) -> Point:
        if Q[1] == 0:
            return R
        if R[1] == 0:
            return Q
        p = self.p
        if Q[0] == R[0]:
            if Q[1] != R[1]:  # R = -Q
                return INF
            lam = (3 * Q[0] * Q[0] + self.a) * mod_inv(2 * Q[1], p)
        else:
            lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], p)
        x = (lam * lam - Q[0] - R[0]) % p
        return x, (lam * (Q[0] - x) - Q[1]) % p

    # Jacobian coordinates: (X, Y, Z) is the affine point (X/Z^2, Y/Z^3);
    # Z == 0 is INF. Points are assumed to be on the curve.

    def aff_from_jac(self, Q: JacPoint) -> Point:
        if Q[2] == 0:
            return INF
        z_inv = mod_inv(Q[2], self.p)
        z_inv2 = z_inv * z_inv
        return Q[0] * z_inv2 % self.p, Q[1] * z_inv2 * z_inv % self.p

    def double_jac(self, Q: JacPoint) -> JacPoint:
        p = self.p
        X, Y, Z = Q
        YY = Y * Y
        ZZ = Z * Z
        S = 4 * X * YY
        M = 3 * X * X + self.a * ZZ * ZZ
        X2 = (M * M - 2 * S) % p
        return X2, (M * (S - X2) - 8 * YY * YY) % p, 2 * Y * Z % p

    def add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        """Return Q + R.

        The general sum and the doubling of Q are both computed for any
        input; the result is then selected by index, with no branch on
        the point values.
        """

        p = self.p
        QZ2 = Q[2] * Q[2]
        RZ2 = R[2] * R[2]
        # Q and R brought to the same Z: (M, T) and (N, U)
        M = Q[0] * RZ2 % p
        N = R[0] * QZ2 % p
        T = Q[1] * RZ2 * R[2] % p
        U = R[1] * QZ2 * Q[2] % p
        V = N - M
        W = U - T
        V2 = V * V
        V3 = V2 * V
        MV2 = M * V2
        X = (W * W - V3 - 2 * MV2) % p
        Y = (W * (MV2 - X) - T * V3) % p
        # Z is zero for R = -Q
        Z = V * Q[2] * R[2] % p
        D = self.double_jac(Q)

        # 0: general sum, 1: Q is INF, 2: R is INF, 3: both INF, 4: Q == R
        i = (Q[2] == 0) + 2 * (R[2] == 0)
        i += 4 * (i == 0) * (V == 0) * (W == 0)
        return ((X, Y, Z), R, Q, INFJ, D)[i]


def _repr(i: object) -> str:
    if isinstance(i, tuple):
        return "(" + ", ".join(_repr(j) for j in i) + ")"
    return int_repr(i)  # type: ignore


def _ladder(m: int, QJ: JacPoint, ec: Curve) -> JacPoint:
    """Return m*Q by the Montgomery ladder, in Jacobian coordinates.

    At least as many bits as the field size are processed,
    each one with an addition and a doubling whatever its value,
    so that the sequence of group operations does not depend on m.
    Python big integer arithmetic is not constant-time, though.
    """

    if m < 0:
        raise ChamHashValueError(f"negative scalar: {int_repr(m)}")

    # invariant: R[1] - R[0] = Q
    R = [INFJ, QJ]
    for i in reversed(range(max(m.bit_length(), 8 * ec.p_size))):
        bit = (m >> i) & 1
        R[1 - bit] = ec.add_jac(R[0], R[1])
        R[bit] = ec.double_jac(R[bit])
    return R[0]


CURVES: Dict[str, Curve] = {
    "secp256r1": Curve(
        0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
        0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC,
        0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
        (
            0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
            0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
        ),
        0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    ),
    "secp256k1": Curve(
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
        0,
        7,
        (
            0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
            0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
        ),
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    ),
    "secp384r1": Curve(
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFE
        * 2**128
        + 0xFFFFFFFF0000000000000000FFFFFFFF,
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFE
        * 2**128
        + 0xFFFFFFFF0000000000000000FFFFFFFC,
        0xB3312FA7E23EE7E4988E056BE3F82D19181D9C6EFE8141120314088F5013875A
        * 2**128
        + 0xC656398D8A2ED19D2A85C8EDD3EC2AEF,
        (
            0xAA87CA22BE8B05378EB1C71EF320AD746E1D3B628BA79B9859F741E082542A38
            * 2**128
            + 0x5502F25DBF55296C3A545E3872760AB7,
            0x3617DE4A96262C6F5D9E98BF9292DC29F8F41DBD289A147CE9DA3113B5F0B8C0
            * 2**128
            + 0x0A60B1CE1D7E819D7A431D7C90EA0E5F,
        ),
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFC7634D81F4372DDF
        * 2**128
        + 0x581A0DB248B0A77AECEC196ACCC52973,
    ),
}
CURVES["P-256"] = CURVES["secp256r1"]
CURVES["P-384"] = CURVES["secp384r1"]

secp256r1 = CURVES["secp256r1"]


def mult(m: int, Q: Optional[Point] = None, ec: Curve = secp256r1) -> Point:
    """Return m*Q, or m*G if Q is not given.

    m is reduced mod n; Q is checked to be on the curve.
    """

    if Q is None:
        QJ = ec.GJ
    else:
        ec.require_on_curve(Q)
        QJ = (Q[0], Q[1], 1) if Q[1] else INFJ
    return ec.aff_from_jac(_ladder(m % ec.n, QJ, ec))
