"""
Elliptic Curves
^^^^^^^^^^^^^^^

Short Weierstrass curves `y^2 = x^3 + a*x + b` whose coefficients are read
from the input. The same types serve the main curve (over a `PrimeField`)
and its quadratic or cubic twist (over an `Extension2` or `Extension3`).
"""

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from ethereum_types.frozen import slotted_freezable

from ..exceptions import InputError
from .extension_field import Extension2, Extension3, Fp2, Fp3
from .finite_field import Fp, PrimeField

logger = logging.getLogger(__name__)

CurveField = Union[PrimeField, Extension2, Extension3]
CurveElement = Union[Fp, Fp2, Fp3]


@slotted_freezable
@dataclass
class WeierstrassCurve:
    """
    The curve `y^2 = x^3 + a*x + b` over `field`.
    """

    field: CurveField
    a: CurveElement
    b: CurveElement

    def __post_init__(self) -> None:
        logger.debug("constructed curve over %s", type(self.field).__name__)


@slotted_freezable
@dataclass
class CurvePoint:
    """
    An affine point of a `WeierstrassCurve`. The pair `(0, 0)` stands for
    the point at infinity.

    Creating a point does not check that it lies on the curve; callers that
    need membership use `check_on_curve`.
    """

    curve: WeierstrassCurve
    x: CurveElement
    y: CurveElement

    @classmethod
    def point_from_xy(
        cls, curve: WeierstrassCurve, x: CurveElement, y: CurveElement
    ) -> "CurvePoint":
        """
        Wrap already decoded coordinates into a point of `curve`.
        """
        return cls(curve, x, y)

    def into_xy(self) -> Tuple[CurveElement, CurveElement]:
        """
        Affine coordinates of the point, `(0, 0)` for infinity.
        """
        return self.x, self.y

    def is_zero(self) -> bool:
        """
        Whether this is the point at infinity.
        """
        return self.x.is_zero() and self.y.is_zero()

    def is_on_curve(self) -> bool:
        """
        Whether the point satisfies the curve equation. The point at infinity
        is always on the curve.
        """
        if self.is_zero():
            return True
        lhs = self.y * self.y
        rhs = self.x * self.x * self.x + self.curve.a * self.x + self.curve.b
        return lhs == rhs

    def check_on_curve(self) -> None:
        """
        Raise if the point does not satisfy the curve equation.

        Raises
        ------
        InputError
            If the point is not on the curve.
        """
        if not self.is_on_curve():
            raise InputError("Point is not on curve")


G1Point = CurvePoint
TwistPoint = CurvePoint
