"""Assemble solver-model curve points from harness coordinates."""

from __future__ import annotations

from babygiant.core.curve import TwistedEdwardsCurve, solver_curve
from babygiant.core.errors import InvalidPointError
from babygiant.utils.constants import BABYJUBJUB_A, GENERATOR_X, GENERATOR_Y
from babygiant.utils.math_helpers import cached_sqrt_mod, mod_inv
from babygiant.utils.types import AffinePoint


def twist_coefficient(curve: TwistedEdwardsCurve | None = None) -> int:
    """sqrt(168700) mod p, the x-scaling between harness and solver models."""
    curve = curve or solver_curve()
    return cached_sqrt_mod(BABYJUBJUB_A, curve.p)


class PointBuilder:
    """Map (x, y) from the harness's Baby Jubjub model onto the solver curve.

    The harness uses a = 168700; the solver uses the isomorphic a = 1
    model, so x is multiplied by the twist coefficient. Points are
    checked against the curve equation unless ``validate`` is False.
    """

    def __init__(
        self,
        curve: TwistedEdwardsCurve | None = None,
        validate: bool = True,
    ) -> None:
        self.curve = curve or solver_curve()
        self.validate = validate
        self.twist = twist_coefficient(self.curve)

    def build(self, x: int, y: int) -> AffinePoint:
        p = self.curve.p
        point = (x * self.twist % p, y % p)
        if self.validate and not self.curve.is_on_curve(point):
            raise InvalidPointError(
                f"({x}, {y}) is not a point on Baby Jubjub"
            )
        return point

    def unbuild(self, point: AffinePoint) -> tuple[int, int]:
        """Inverse of build: map a solver-model point back to harness coordinates."""
        x, y = point
        p = self.curve.p
        return (x * mod_inv(self.twist, p) % p, y)

    def generator(self) -> AffinePoint:
        """The fixed reference generator (Baby Jubjub Base8)."""
        return self.build(GENERATOR_X, GENERATOR_Y)
