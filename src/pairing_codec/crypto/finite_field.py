"""
Finite Fields
^^^^^^^^^^^^^

Prime fields whose modulus is only known at runtime, and their elements.

Unlike a field fixed at import time, a `PrimeField` here is a value built
from untrusted input. Every `Fp` keeps a reference to the field it belongs
to, so elements of different fields can never be mixed silently.
"""

# flake8: noqa: D105

import enum
import logging
from dataclasses import dataclass
from typing import List, Sequence, Union

from ethereum_types.bytes import Bytes
from ethereum_types.frozen import slotted_freezable
from ethereum_types.numeric import U64, Uint

from ..constants import LIMB_BITS, MAX_MODULUS_LIMBS

logger = logging.getLogger(__name__)

LIMB_MASK = (1 << LIMB_BITS) - 1


def calculate_num_limbs(value: Uint) -> int:
    """
    Number of 64-bit limbs needed to represent `value`. Zero needs none.
    """
    return (int(value.bit_length()) + LIMB_BITS - 1) // LIMB_BITS


def int_to_limbs(value: Union[int, Uint]) -> List[U64]:
    """
    Split a non-negative integer into 64-bit limbs, least significant first.
    """
    value = int(value)
    limbs = []
    while value:
        limbs.append(U64(value & LIMB_MASK))
        value >>= LIMB_BITS
    return limbs


def limbs_to_int(limbs: Sequence[U64]) -> Uint:
    """
    Inverse of `int_to_limbs`. Trailing zero limbs are allowed.
    """
    value = 0
    for limb in reversed(limbs):
        value = (value << LIMB_BITS) | int(limb)
    return Uint(value)


class LegendreSymbol(enum.Enum):
    """
    Quadratic character of a field element.
    """

    ZERO = 0
    QUADRATIC_RESIDUE = 1
    QUADRATIC_NON_RESIDUE = -1


@slotted_freezable
@dataclass
class PrimeField:
    """
    Integers modulo `modulus`.

    `num_limbs` is the width of the representation, chosen once from the
    bit length of the modulus.
    """

    modulus: Uint
    num_limbs: int

    def zero(self) -> "Fp":
        """Returns the additive identity (0) of the field."""
        return Fp(self, 0)

    def one(self) -> "Fp":
        """Returns the multiplicative identity (1) of the field."""
        return Fp(self, 1)

    def from_int(self, n: int) -> "Fp":
        """Constructs a field element from an integer, reducing it."""
        return Fp(self, n % int(self.modulus))

    def from_be_bytes(self, buffer: Bytes) -> "Fp":
        """
        Converts a big-endian byte sequence into an element of the field.

        Parameters
        ----------
        buffer :
            Bytes to decode. Leading zero bytes are permitted.

        Returns
        -------
        element : `Fp`
            The decoded field element.

        Raises
        ------
        ValueError
            If the encoded integer is not smaller than the modulus.
        """
        return Fp(self, int.from_bytes(buffer, "big"))


def field_from_modulus(
    modulus: Uint, max_limbs: int = MAX_MODULUS_LIMBS
) -> PrimeField:
    """
    Build the prime field for `modulus`.

    The representation is selected from the modulus bit length, out of the
    widths `1..max_limbs`.

    Raises
    ------
    ValueError
        If the modulus is even or smaller than 3, or is wider than
        `max_limbs` limbs.
    """
    if modulus < Uint(3) or int(modulus) % 2 == 0:
        raise ValueError("modulus must be an odd integer greater than 2")

    num_limbs = calculate_num_limbs(modulus)
    if num_limbs > max_limbs:
        raise ValueError(
            f"modulus needs {num_limbs} limbs, at most {max_limbs} supported"
        )

    logger.debug(
        "constructed prime field of %d bits (%d limbs)",
        int(modulus.bit_length()),
        num_limbs,
    )
    return PrimeField(modulus=modulus, num_limbs=num_limbs)


@slotted_freezable
@dataclass
class Fp:
    """
    Element of a `PrimeField`, always held in canonical form
    `0 <= value < modulus`.
    """

    field: PrimeField
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < int(self.field.modulus):
            raise ValueError("field element is not smaller than the modulus")

    def _coerce(self, right: "Fp") -> int:
        if right.field is not self.field and right.field != self.field:
            raise ValueError("field elements belong to different fields")
        return right.value

    def __add__(self, right: "Fp") -> "Fp":
        """Field addition (self + right)."""
        if not isinstance(right, Fp):
            return NotImplemented
        return self.field.from_int(self.value + self._coerce(right))

    def __sub__(self, right: "Fp") -> "Fp":
        """Field subtraction (self - right)."""
        if not isinstance(right, Fp):
            return NotImplemented
        return self.field.from_int(self.value - self._coerce(right))

    def __mul__(self, right: "Fp") -> "Fp":
        """Field multiplication (self * right)."""
        if not isinstance(right, Fp):
            return NotImplemented
        return self.field.from_int(self.value * self._coerce(right))

    def __neg__(self) -> "Fp":
        """Additive inverse (-self)."""
        return self.field.from_int(-self.value)

    def __pow__(self, exponent: Union[int, Uint]) -> "Fp":
        """Modular exponentiation (self ** exponent % modulus)."""
        return Fp(
            self.field,
            pow(self.value, int(exponent), int(self.field.modulus)),
        )

    def __truediv__(self, right: "Fp") -> "Fp":
        """Field division (self / right)."""
        if not isinstance(right, Fp):
            return NotImplemented
        return self * right.multiplicative_inverse()

    def __int__(self) -> int:
        return self.value

    def is_zero(self) -> bool:
        """Whether this is the additive identity."""
        return self.value == 0

    def multiplicative_inverse(self) -> "Fp":
        """Returns the multiplicative inverse (self ** -1)."""
        if self.is_zero():
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return self ** (-1)

    def to_be_bytes(self, length: int) -> Bytes:
        """
        Big-endian encoding with exactly `length` bytes.

        Raises
        ------
        OverflowError
            If the value does not fit in `length` bytes.
        """
        return self.value.to_bytes(length, "big")


def legendre_symbol(element: Fp, exponent: Uint) -> LegendreSymbol:
    """
    Evaluate Euler's criterion `element ** exponent`, where `exponent` is
    `(modulus - 1) / 2`.

    Any result other than zero or one is reported as a non-residue.
    """
    s = element**exponent
    if s.is_zero():
        return LegendreSymbol.ZERO
    if s == element.field.one():
        return LegendreSymbol.QUADRATIC_RESIDUE
    return LegendreSymbol.QUADRATIC_NON_RESIDUE
