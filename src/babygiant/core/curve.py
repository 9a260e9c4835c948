"""Twisted Edwards curve arithmetic: a*x^2 + y^2 = 1 + d*x^2*y^2 over F_p.

Points are plain tuples. Affine points ``(x, y)`` are the canonical form
used for equality and hashing; extended points ``(X, Y, Z, T)`` with
x = X/Z, y = Y/Z, T = X*Y/Z avoid a field inversion per addition
(Hisil-Wong-Carter-Dawson, "add-2008-hwcd").

When a is a square and d is not, the addition law is complete: the
neutral element (0, 1) is an ordinary affine point and no input needs
special-casing.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from babygiant.utils.constants import (
    BABYJUBJUB_A,
    BABYJUBJUB_D,
    FIELD_MODULUS,
    SUBGROUP_ORDER,
)
from babygiant.utils.math_helpers import mod_inv
from babygiant.utils.types import AffinePoint

ExtendedPoint = tuple[int, int, int, int]


@dataclass(frozen=True)
class TwistedEdwardsCurve:
    """Twisted Edwards curve with coefficients a, d over F_p."""

    p: int
    a: int
    d: int
    order: int | None = None  # order of the subgroup of interest, if known

    @property
    def identity(self) -> AffinePoint:
        return (0, 1)

    @property
    def identity_extended(self) -> ExtendedPoint:
        return (0, 1, 1, 0)

    def is_on_curve(self, point: AffinePoint) -> bool:
        x, y = point
        p = self.p
        if not (0 <= x < p and 0 <= y < p):
            return False
        x2 = x * x % p
        y2 = y * y % p
        return (self.a * x2 + y2) % p == (1 + self.d * x2 * y2) % p

    # -- affine --

    def add(self, p1: AffinePoint, p2: AffinePoint) -> AffinePoint:
        x1, y1 = p1
        x2, y2 = p2
        p = self.p
        t = self.d * x1 * x2 * y1 * y2 % p
        # One inversion for both denominators
        inv = mod_inv((1 + t) * (1 - t), p)
        x3 = (x1 * y2 + y1 * x2) * (1 - t) * inv % p
        y3 = (y1 * y2 - self.a * x1 * x2) * (1 + t) * inv % p
        return (x3, y3)

    def neg(self, point: AffinePoint) -> AffinePoint:
        x, y = point
        return ((-x) % self.p, y)

    def sub(self, p1: AffinePoint, p2: AffinePoint) -> AffinePoint:
        return self.add(p1, self.neg(p2))

    def multiply(self, point: AffinePoint, k: int) -> AffinePoint:
        """Compute k*point. Negative k multiplies the negated point."""
        return self.to_affine(self.multiply_extended(self.to_extended(point), k))

    # -- extended --

    def to_extended(self, point: AffinePoint) -> ExtendedPoint:
        x, y = point
        return (x, y, 1, x * y % self.p)

    def to_affine(self, point: ExtendedPoint) -> AffinePoint:
        X, Y, Z, _ = point
        z_inv = mod_inv(Z, self.p)
        return (X * z_inv % self.p, Y * z_inv % self.p)

    def add_extended(self, p1: ExtendedPoint, p2: ExtendedPoint) -> ExtendedPoint:
        X1, Y1, Z1, T1 = p1
        X2, Y2, Z2, T2 = p2
        p = self.p
        A = X1 * X2 % p
        B = Y1 * Y2 % p
        C = self.d * T1 % p * T2 % p
        D = Z1 * Z2 % p
        E = ((X1 + Y1) * (X2 + Y2) - A - B) % p
        F = (D - C) % p
        G = (D + C) % p
        H = (B - self.a * A) % p
        return (E * F % p, G * H % p, F * G % p, E * H % p)

    def neg_extended(self, point: ExtendedPoint) -> ExtendedPoint:
        X, Y, Z, T = point
        return ((-X) % self.p, Y, Z, (-T) % self.p)

    def sub_extended(self, p1: ExtendedPoint, p2: ExtendedPoint) -> ExtendedPoint:
        return self.add_extended(p1, self.neg_extended(p2))

    def multiply_extended(self, point: ExtendedPoint, k: int) -> ExtendedPoint:
        if k < 0:
            point, k = self.neg_extended(point), -k
        result = self.identity_extended
        addend = point
        while k:
            if k & 1:
                result = self.add_extended(result, addend)
            addend = self.add_extended(addend, addend)
            k >>= 1
        return result


@lru_cache(maxsize=1)
def solver_curve() -> TwistedEdwardsCurve:
    """Baby Jubjub in its a = 1 form, the model the solver works in.

    The harness emits points on a*x^2 + y^2 = 1 + d*x^2*y^2 with
    a = 168700; scaling x by sqrt(a) maps them onto
    x^2 + y^2 = 1 + (d/a)*x^2*y^2.
    """
    p = FIELD_MODULUS
    return TwistedEdwardsCurve(
        p=p,
        a=1,
        d=BABYJUBJUB_D * mod_inv(BABYJUBJUB_A, p) % p,
        order=SUBGROUP_ORDER,
    )
