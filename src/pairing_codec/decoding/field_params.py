"""
Field and Group Parameters
^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Decoding of the base field modulus, the main group order and scalars
reduced by that order. These are read once from the head of the input and
then shared by every following decoder.
"""

import logging
from typing import List, Tuple

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U64, Uint

from ..config import DEFAULT_LIMITS, DecoderLimits
from ..crypto.finite_field import PrimeField, field_from_modulus, int_to_limbs
from ..exceptions import (
    InputError,
    InputTooShort,
    ScalarOutOfRange,
    UnexpectedZero,
)
from .utils import read_length_prefixed, split_at

logger = logging.getLogger(__name__)


def get_base_field_params(data: Bytes) -> Tuple[Tuple[Uint, int], Bytes]:
    """
    Read the length-prefixed modulus.

    Returns
    -------
    modulus_and_length : `Tuple[Uint, int]`
        The modulus and the length of its encoding.
    rest : `Bytes`
        The unconsumed input.

    Raises
    ------
    InputTooShort
        If the length byte or the modulus is truncated.
    UnexpectedZero
        If the modulus is zero.
    """
    (modulus_encoding, modulus_len), rest = read_length_prefixed(
        data, "modulus"
    )
    modulus = Uint.from_be_bytes(modulus_encoding)
    if modulus == 0:
        raise UnexpectedZero("Modulus can not be zero")

    return (modulus, modulus_len), rest


def parse_base_field_from_encoding(
    data: Bytes, limits: DecoderLimits = DEFAULT_LIMITS
) -> Tuple[PrimeField, int, Uint, Bytes]:
    """
    Read the modulus and build its prime field.

    Parameters
    ----------
    data :
        The remaining input.
    limits :
        Sanity limits on the modulus size.

    Returns
    -------
    field : `PrimeField`
        The constructed field.
    modulus_len : `int`
        Encoding length of every element of the field.
    modulus : `Uint`
        The modulus.
    rest : `Bytes`
        The unconsumed input.

    Raises
    ------
    InputTooShort
        If the modulus is truncated or fewer than `modulus_len` bytes follow
        it.
    UnexpectedZero
        If the modulus is zero.
    InputError
        If the field cannot be constructed from the modulus.
    """
    (modulus, modulus_len), rest = get_base_field_params(data)
    if modulus_len > limits.max_modulus_byte_len:
        raise InputError("Encoded modulus length is too large")

    try:
        field = field_from_modulus(modulus, limits.max_modulus_limbs)
    except ValueError as e:
        logger.debug("rejected modulus: %s", e)
        raise InputError("Failed to create prime field from modulus") from e

    if len(rest) < modulus_len:
        raise InputTooShort("Input is not long enough")

    return field, modulus_len, modulus, rest


def get_g1_curve_params(data: Bytes) -> Tuple[Tuple[Bytes, int], Bytes]:
    """
    Read the length-prefixed encoding of the main group order.

    Raises
    ------
    InputTooShort
        If the length byte or the order is truncated.
    """
    return read_length_prefixed(data, "main group order")


def parse_group_order_from_encoding(
    data: Bytes, limits: DecoderLimits = DEFAULT_LIMITS
) -> Tuple[List[U64], int, Uint, Bytes]:
    """
    Read the main group order.

    Returns
    -------
    order_limbs : `List[U64]`
        The order as 64-bit limbs, least significant first.
    order_len : `int`
        Encoding length of every scalar.
    order : `Uint`
        The order.
    rest : `Bytes`
        The unconsumed input.

    Raises
    ------
    InputTooShort
        If the order is truncated.
    UnexpectedZero
        If the order is zero.
    InputError
        If the order encoding is longer than permitted.
    """
    (order_encoding, order_len), rest = get_g1_curve_params(data)
    if order_len > limits.max_group_order_byte_len:
        raise InputError("Encoded group order length is too large")

    order = Uint.from_be_bytes(order_encoding)
    if order == 0:
        logger.debug("rejected zero group order")
        raise UnexpectedZero("Group order is zero")

    return int_to_limbs(order), order_len, order, rest


def decode_scalar_representation(
    data: Bytes,
    order_byte_len: int,
    order: Uint,
    order_repr: List[U64],
) -> Tuple[List[U64], Bytes]:
    """
    Decode a scalar for multiplication in the main group.

    The scalar must be fully reduced: multiplication routines downstream
    assume `scalar < order`.

    Parameters
    ----------
    data :
        The remaining input.
    order_byte_len :
        Encoding length of the group order, and so of every scalar.
    order :
        The group order.
    order_repr :
        The group order as limbs.

    Returns
    -------
    scalar : `List[U64]`
        The scalar as limbs, least significant first, padded with zero limbs
        to at least `len(order_repr)`.
    rest : `Bytes`
        The unconsumed input.

    Raises
    ------
    InputTooShort
        If fewer than `order_byte_len` bytes remain.
    ScalarOutOfRange
        If the scalar is not smaller than the order.
    """
    encoding, rest = split_at(data, order_byte_len, "scalar")
    scalar = Uint.from_be_bytes(encoding)
    if scalar >= order:
        logger.debug("rejected scalar of %d bits", int(scalar.bit_length()))
        raise ScalarOutOfRange("Scalar is not smaller than the group order")

    scalar_repr = int_to_limbs(scalar)
    if len(scalar_repr) < len(order_repr):
        scalar_repr.extend([U64(0)] * (len(order_repr) - len(scalar_repr)))

    return scalar_repr, rest
