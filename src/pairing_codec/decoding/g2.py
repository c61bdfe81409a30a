"""
G2 Decoding
^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Construction of the quadratic or cubic extension that carries the twist, and
decoding and encoding of twist points and coefficients.

The extension is described by a one byte degree tag followed by the
non-residue `u ** degree`. Using a quadratic residue for a quadratic
extension would yield a ring with zero divisors instead of a field, so that
case is rejected before any arithmetic takes place.
"""

import logging
from typing import Tuple

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import Uint

from ..constants import (
    EXTENSION_DEGREE_2,
    EXTENSION_DEGREE_3,
    EXTENSION_DEGREE_ENCODING_LENGTH,
)
from ..crypto.elliptic_curve import CurvePoint, TwistPoint, WeierstrassCurve
from ..crypto.extension_field import Extension2, Extension3, Fp2, Fp3
from ..crypto.finite_field import (
    Fp,
    LegendreSymbol,
    PrimeField,
    legendre_symbol,
)
from ..exceptions import (
    NonResidueError,
    UnexpectedZero,
    UnknownParameter,
)
from .fp import (
    decode_fp,
    decode_fp2,
    decode_fp3,
    serialize_fp2_fixed_len,
    serialize_fp3_fixed_len,
)
from .utils import split_at

logger = logging.getLogger(__name__)


def _decode_degree_and_non_residue(
    data: Bytes,
    expected_degree: int,
    field_byte_len: int,
    base_field: PrimeField,
) -> Tuple[Fp, Bytes]:
    degree_encoding, rest = split_at(
        data, EXTENSION_DEGREE_ENCODING_LENGTH, "extension degree"
    )
    if degree_encoding[0] != expected_degree:
        raise UnknownParameter(
            f"Extension degree expected to be {expected_degree}"
        )

    non_residue, rest = decode_fp(rest, field_byte_len, base_field)
    if non_residue.is_zero():
        raise UnexpectedZero(
            f"Fp{expected_degree} non-residue can not be zero"
        )

    return non_residue, rest


def create_fp2_extension(
    data: Bytes,
    modulus: Uint,
    field_byte_len: int,
    base_field: PrimeField,
) -> Tuple[Extension2, Bytes]:
    """
    Decode the degree tag and non-residue of a quadratic extension and build
    it.

    Parameters
    ----------
    data :
        The remaining input.
    modulus :
        The base field modulus, used to derive Frobenius coefficients.
    field_byte_len :
        Encoding length of a base field element.
    base_field :
        The field being extended.

    Returns
    -------
    extension : `Extension2`
        The extension, with its Frobenius coefficients.
    rest : `Bytes`
        The unconsumed input.

    Raises
    ------
    InputTooShort
        If the tag or the non-residue is truncated.
    UnknownParameter
        If the tag is not 2, or the Frobenius coefficients cannot be derived.
    UnexpectedZero
        If the non-residue is zero.
    NonResidueError
        If the non-residue is a quadratic residue.
    InputError
        If the non-residue is not smaller than the modulus.
    """
    non_residue, rest = _decode_degree_and_non_residue(
        data, EXTENSION_DEGREE_2, field_byte_len, base_field
    )

    exponent = (modulus - Uint(1)) // Uint(2)
    legendre = legendre_symbol(non_residue, exponent)
    if legendre in (LegendreSymbol.QUADRATIC_RESIDUE, LegendreSymbol.ZERO):
        logger.debug("rejected Fp2 non-residue: %s", legendre.name)
        raise NonResidueError("Non-residue for Fp2 is actually a residue")

    try:
        extension = Extension2.new(non_residue, modulus)
    except ValueError as e:
        raise UnknownParameter(
            "Failed to calculate Frobenius coeffs for Fp2"
        ) from e

    return extension, rest


def create_fp3_extension(
    data: Bytes,
    modulus: Uint,
    field_byte_len: int,
    base_field: PrimeField,
) -> Tuple[Extension3, Bytes]:
    """
    Decode the degree tag and non-residue of a cubic extension and build it.

    No cubic residuosity test is applied to the non-residue.

    Raises
    ------
    InputTooShort
        If the tag or the non-residue is truncated.
    UnknownParameter
        If the tag is not 3, or the Frobenius coefficients cannot be derived.
    UnexpectedZero
        If the non-residue is zero.
    InputError
        If the non-residue is not smaller than the modulus.
    """
    non_residue, rest = _decode_degree_and_non_residue(
        data, EXTENSION_DEGREE_3, field_byte_len, base_field
    )

    try:
        extension = Extension3.new(non_residue, modulus)
    except ValueError as e:
        raise UnknownParameter(
            "Failed to calculate Frobenius coeffs for Fp3"
        ) from e

    return extension, rest


def parse_ab_in_fp2_from_encoding(
    data: Bytes, modulus_len: int, extension: Extension2
) -> Tuple[Fp2, Fp2, Bytes]:
    """
    Decode the twist coefficients `a` and `b` in a quadratic extension.
    """
    a, rest = decode_fp2(data, modulus_len, extension)
    b, rest = decode_fp2(rest, modulus_len, extension)

    return a, b, rest


def parse_ab_in_fp3_from_encoding(
    data: Bytes, modulus_len: int, extension: Extension3
) -> Tuple[Fp3, Fp3, Bytes]:
    """
    Decode the twist coefficients `a` and `b` in a cubic extension.
    """
    a, rest = decode_fp3(data, modulus_len, extension)
    b, rest = decode_fp3(rest, modulus_len, extension)

    return a, b, rest


def decode_g2_point_from_xy_in_fp2(
    data: Bytes, field_byte_len: int, curve: WeierstrassCurve
) -> Tuple[TwistPoint, Bytes]:
    """
    Decode an affine point of a quadratic twist, encoded as `X || Y`.

    The point is not checked to be on the curve.

    Raises
    ------
    UnknownParameter
        If `curve` is not defined over a quadratic extension.
    InputTooShort
        If a coordinate is truncated.
    InputError
        If a coefficient is not smaller than the modulus.
    """
    if not isinstance(curve.field, Extension2):
        raise UnknownParameter("Expected a curve over Fp2")

    x, rest = decode_fp2(data, field_byte_len, curve.field)
    y, rest = decode_fp2(rest, field_byte_len, curve.field)

    return CurvePoint.point_from_xy(curve, x, y), rest


def decode_g2_point_from_xy_in_fp3(
    data: Bytes, field_byte_len: int, curve: WeierstrassCurve
) -> Tuple[TwistPoint, Bytes]:
    """
    Decode an affine point of a cubic twist, encoded as `X || Y`.

    The point is not checked to be on the curve.

    Raises
    ------
    UnknownParameter
        If `curve` is not defined over a cubic extension.
    InputTooShort
        If a coordinate is truncated.
    InputError
        If a coefficient is not smaller than the modulus.
    """
    if not isinstance(curve.field, Extension3):
        raise UnknownParameter("Expected a curve over Fp3")

    x, rest = decode_fp3(data, field_byte_len, curve.field)
    y, rest = decode_fp3(rest, field_byte_len, curve.field)

    return CurvePoint.point_from_xy(curve, x, y), rest


def serialize_g2_point_in_fp2(modulus_len: int, point: TwistPoint) -> Bytes:
    """
    Encode a quadratic twist point as `X || Y`.
    """
    x, y = point.into_xy()
    result = serialize_fp2_fixed_len(modulus_len, x)
    result += serialize_fp2_fixed_len(modulus_len, y)

    return result


def serialize_g2_point_in_fp3(modulus_len: int, point: TwistPoint) -> Bytes:
    """
    Encode a cubic twist point as `X || Y`.
    """
    x, y = point.into_xy()
    result = serialize_fp3_fixed_len(modulus_len, x)
    result += serialize_fp3_fixed_len(modulus_len, y)

    return result
