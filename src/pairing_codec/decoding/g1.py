"""
G1 Decoding
^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Decoding and encoding of the main curve, whose coordinates live in the base
field.
"""

import logging
from typing import Tuple

from ethereum_types.bytes import Bytes

from ..crypto.elliptic_curve import CurvePoint, G1Point, WeierstrassCurve
from ..crypto.finite_field import Fp, PrimeField
from ..exceptions import InputError, UnknownParameter
from .fp import decode_fp, serialize_fp_fixed_len
from .utils import split_at

logger = logging.getLogger(__name__)


def parse_ab_in_base_field_from_encoding(
    data: Bytes, modulus_len: int, base_field: PrimeField
) -> Tuple[Fp, Fp, Bytes]:
    """
    Decode the curve coefficients `a` and `b`, in that order.

    Raises
    ------
    InputTooShort
        If either coefficient is truncated.
    InputError
        If either coefficient is not smaller than the modulus.
    """
    a, rest = decode_fp(data, modulus_len, base_field)
    b, rest = decode_fp(rest, modulus_len, base_field)

    return a, b, rest


def _decode_coordinate(
    data: Bytes, field_byte_len: int, field: PrimeField, name: str
) -> Tuple[Fp, Bytes]:
    encoding, rest = split_at(data, field_byte_len, name)
    try:
        coordinate = field.from_be_bytes(encoding)
    except ValueError as e:
        logger.debug("rejected coordinate %s: %s", name, e)
        raise InputError(f"Failed to parse {name}") from e

    return coordinate, rest


def decode_g1_point_from_xy(
    data: Bytes, field_byte_len: int, curve: WeierstrassCurve
) -> Tuple[G1Point, Bytes]:
    """
    Decode an affine G1 point encoded as `X || Y`.

    The point is not checked to be on the curve.

    Parameters
    ----------
    data :
        The remaining input.
    field_byte_len :
        Encoding length of a base field element.
    curve :
        The curve the point belongs to.

    Returns
    -------
    point : `G1Point`
        The decoded point.
    rest : `Bytes`
        The unconsumed input.

    Raises
    ------
    UnknownParameter
        If `curve` is not defined over a prime field.
    InputTooShort
        If `X` or `Y` is truncated.
    InputError
        If `X` or `Y` is not smaller than the modulus.
    """
    if not isinstance(curve.field, PrimeField):
        raise UnknownParameter("Expected a curve over the base field")

    x, rest = _decode_coordinate(data, field_byte_len, curve.field, "X")
    y, rest = _decode_coordinate(rest, field_byte_len, curve.field, "Y")

    return CurvePoint.point_from_xy(curve, x, y), rest


def serialize_g1_point(modulus_len: int, point: G1Point) -> Bytes:
    """
    Encode a G1 point as `X || Y`, each `modulus_len` bytes.

    Raises
    ------
    OutputError
        If a coordinate does not fit in `modulus_len` bytes.
    """
    x, y = point.into_xy()
    result = serialize_fp_fixed_len(modulus_len, x)
    result += serialize_fp_fixed_len(modulus_len, y)

    return result
