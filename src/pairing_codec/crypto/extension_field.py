"""
Extension Fields
^^^^^^^^^^^^^^^^

Quadratic and cubic extensions of a runtime `PrimeField`.

The extension of degree `d` is `F_p[u]/(u^d - non_residue)`. Elements are
represented by their coefficients `(c0, c1[, c2])` in ascending powers of
`u`. The Frobenius coefficients allow `x ** (p ** k)` to be evaluated with
one base field multiplication per coefficient.
"""

# flake8: noqa: D105

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple, Union

from ethereum_types.frozen import slotted_freezable
from ethereum_types.numeric import Uint

from ..constants import EXTENSION_DEGREE_2, EXTENSION_DEGREE_3
from .finite_field import Fp, PrimeField

logger = logging.getLogger(__name__)


def calculate_fp2_frobenius_coeffs(
    non_residue: Fp, modulus: Uint
) -> Tuple[Fp, Fp]:
    """
    Calculate `non_residue ** ((p ** k - 1) / 2)` for `k = 0, 1`.

    Raises
    ------
    ValueError
        If `p - 1` is not divisible by 2.
    """
    power, rem = divmod(int(modulus) - 1, 2)
    if rem != 0:
        raise ValueError("modulus - 1 is not divisible by 2")

    f_0 = non_residue.field.one()
    f_1 = non_residue**power

    return (f_0, f_1)


def calculate_fp3_frobenius_coeffs(
    non_residue: Fp, modulus: Uint
) -> Tuple[Tuple[Fp, Fp, Fp], Tuple[Fp, Fp, Fp]]:
    """
    Calculate `non_residue ** ((p ** k - 1) / 3)` for `k = 0, 1, 2` and
    their squares.

    Raises
    ------
    ValueError
        If `p - 1` or `p ** 2 - 1` is not divisible by 3.
    """
    p = int(modulus)
    f_0 = non_residue.field.one()

    q_power = p
    power, rem = divmod(q_power - 1, 3)
    if rem != 0:
        raise ValueError("modulus - 1 is not divisible by 3")
    f_1 = non_residue**power

    q_power *= p
    power, rem = divmod(q_power - 1, 3)
    if rem != 0:
        raise ValueError("modulus^2 - 1 is not divisible by 3")
    f_2 = non_residue**power

    coeffs_c1 = (f_0, f_1, f_2)
    coeffs_c2 = (f_0, f_1 * f_1, f_2 * f_2)

    return coeffs_c1, coeffs_c2


class ExtensionField(Protocol):
    """
    A type protocol for the extensions of a `PrimeField`.
    """

    base_field: PrimeField
    non_residue: Fp

    @property
    def degree(self) -> int:
        """Degree of the extension over `base_field`."""
        ...

    def frobenius_coefficient(self, index: int, power: int) -> Fp:
        """Multiplier of coefficient `index` under `frobenius_map(power)`."""
        ...

    def element(self, coeffs: Sequence[Fp]) -> "ExtensionElement":
        """Constructs an element from its coefficients, `c0` first."""
        ...


class _ExtensionMixin:
    """
    Behaviour shared by `Extension2` and `Extension3`.
    """

    __slots__ = ()

    def zero(self: ExtensionField) -> "ExtensionElement":
        """Returns the additive identity (0) of the extension."""
        return self.element([self.base_field.zero()] * self.degree)

    def one(self: ExtensionField) -> "ExtensionElement":
        """Returns the multiplicative identity (1) of the extension."""
        zero = self.base_field.zero()
        return self.element(
            [self.base_field.one()] + [zero] * (self.degree - 1)
        )

    def from_ints(
        self: ExtensionField, coeffs: Sequence[int]
    ) -> "ExtensionElement":
        """Constructs an element from integer coefficients, reducing them."""
        return self.element([self.base_field.from_int(c) for c in coeffs])


@slotted_freezable
@dataclass
class Extension2(_ExtensionMixin):
    """
    `base_field` extended with a square root of `non_residue`.
    """

    base_field: PrimeField
    non_residue: Fp
    frobenius_coeffs_c1: Tuple[Fp, Fp]

    @classmethod
    def new(cls, non_residue: Fp, modulus: Uint) -> "Extension2":
        """
        Build the extension and derive its Frobenius coefficients.

        Raises
        ------
        ValueError
            If the coefficients cannot be derived for `modulus`.
        """
        coeffs = calculate_fp2_frobenius_coeffs(non_residue, modulus)
        logger.debug("constructed quadratic extension")
        return cls(
            base_field=non_residue.field,
            non_residue=non_residue,
            frobenius_coeffs_c1=coeffs,
        )

    @property
    def degree(self) -> int:
        return EXTENSION_DEGREE_2

    def frobenius_coefficient(self, index: int, power: int) -> Fp:
        if index == 0:
            return self.base_field.one()
        return self.frobenius_coeffs_c1[power % EXTENSION_DEGREE_2]

    def element(self, coeffs: Sequence[Fp]) -> "Fp2":
        return Fp2(self, tuple(coeffs))


@slotted_freezable
@dataclass
class Extension3(_ExtensionMixin):
    """
    `base_field` extended with a cube root of `non_residue`.
    """

    base_field: PrimeField
    non_residue: Fp
    frobenius_coeffs_c1: Tuple[Fp, Fp, Fp]
    frobenius_coeffs_c2: Tuple[Fp, Fp, Fp]

    @classmethod
    def new(cls, non_residue: Fp, modulus: Uint) -> "Extension3":
        """
        Build the extension and derive its Frobenius coefficients.

        Raises
        ------
        ValueError
            If the coefficients cannot be derived for `modulus`.
        """
        coeffs_c1, coeffs_c2 = calculate_fp3_frobenius_coeffs(
            non_residue, modulus
        )
        logger.debug("constructed cubic extension")
        return cls(
            base_field=non_residue.field,
            non_residue=non_residue,
            frobenius_coeffs_c1=coeffs_c1,
            frobenius_coeffs_c2=coeffs_c2,
        )

    @property
    def degree(self) -> int:
        return EXTENSION_DEGREE_3

    def frobenius_coefficient(self, index: int, power: int) -> Fp:
        if index == 0:
            return self.base_field.one()
        if index == 1:
            return self.frobenius_coeffs_c1[power % EXTENSION_DEGREE_3]
        return self.frobenius_coeffs_c2[power % EXTENSION_DEGREE_3]

    def element(self, coeffs: Sequence[Fp]) -> "Fp3":
        return Fp3(self, tuple(coeffs))


class _ElementMixin:
    """
    Arithmetic shared by `Fp2` and `Fp3`.

    Multiplication reduces the product polynomial with
    `u ** degree = non_residue`.
    """

    __slots__ = ()

    extension: Union[Extension2, Extension3]
    coeffs: Tuple[Fp, ...]

    def _check(self) -> None:
        if len(self.coeffs) != self.extension.degree:
            raise ValueError(
                f"expected {self.extension.degree} coefficients, "
                f"got {len(self.coeffs)}"
            )
        for c in self.coeffs:
            if c.field != self.extension.base_field:
                raise ValueError("coefficient is not in the base field")

    def _same(self, right: "ExtensionElement") -> bool:
        if type(right) is not type(self):
            return False
        if right.extension is not self.extension:
            if right.extension != self.extension:
                raise ValueError("elements belong to different extensions")
        return True

    @property
    def c0(self) -> Fp:
        return self.coeffs[0]

    @property
    def c1(self) -> Fp:
        return self.coeffs[1]

    def __add__(self, right: "ExtensionElement") -> "ExtensionElement":
        """Field addition (self + right)."""
        if not self._same(right):
            return NotImplemented
        return self.extension.element(
            [x + y for (x, y) in zip(self.coeffs, right.coeffs)]
        )

    def __sub__(self, right: "ExtensionElement") -> "ExtensionElement":
        """Field subtraction (self - right)."""
        if not self._same(right):
            return NotImplemented
        return self.extension.element(
            [x - y for (x, y) in zip(self.coeffs, right.coeffs)]
        )

    def __neg__(self) -> "ExtensionElement":
        """Additive inverse (-self)."""
        return self.extension.element([-c for c in self.coeffs])

    def __mul__(self, right: "ExtensionElement") -> "ExtensionElement":
        """Field multiplication (self * right)."""
        if not self._same(right):
            return NotImplemented
        degree = self.extension.degree
        non_residue = self.extension.non_residue
        zero = self.extension.base_field.zero()
        mul = [zero] * (degree * 2 - 1)

        for i in range(degree):
            for j in range(degree):
                mul[i + j] = mul[i + j] + self.coeffs[i] * right.coeffs[j]

        for i in range(degree * 2 - 2, degree - 1, -1):
            mul[i - degree] = mul[i - degree] + mul[i] * non_residue

        return self.extension.element(mul[:degree])

    def __pow__(self, exponent: int) -> "ExtensionElement":
        """
        Field exponentiation (self ** exponent), for non-negative
        exponents.
        """
        if exponent < 0:
            raise ValueError("negative exponents are not supported")

        res = self.extension.one()
        s = self
        while exponent != 0:
            if exponent % 2 == 1:
                res = res * s
            s = s * s
            exponent //= 2
        return res

    def mul_by_fp(self, x: Fp) -> "ExtensionElement":
        """Multiply every coefficient by a base field element."""
        return self.extension.element([c * x for c in self.coeffs])

    def is_zero(self) -> bool:
        """Whether this is the additive identity."""
        return all(c.is_zero() for c in self.coeffs)

    def frobenius_map(self, power: int) -> "ExtensionElement":
        """
        Returns `self ** (p ** power)`.
        Extremely cheap to compute compared to other exponentiations.
        """
        return self.extension.element(
            [
                c * self.extension.frobenius_coefficient(i, power)
                for i, c in enumerate(self.coeffs)
            ]
        )


@slotted_freezable
@dataclass
class Fp2(_ElementMixin):
    """
    Element `c0 + c1 * u` of an `Extension2`.
    """

    extension: Extension2
    coeffs: Tuple[Fp, Fp]

    def __post_init__(self) -> None:
        self._check()


@slotted_freezable
@dataclass
class Fp3(_ElementMixin):
    """
    Element `c0 + c1 * u + c2 * u^2` of an `Extension3`.
    """

    extension: Extension3
    coeffs: Tuple[Fp, Fp, Fp]

    def __post_init__(self) -> None:
        self._check()

    @property
    def c2(self) -> Fp:
        return self.coeffs[2]


ExtensionElement = Union[Fp2, Fp3]
