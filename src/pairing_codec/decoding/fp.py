"""
Field Element Codec
^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Fixed-length big-endian encoding of base field and extension field
elements. Every coefficient occupies exactly `modulus_len` bytes and must be
canonical, that is strictly smaller than the modulus.
"""

import logging
from typing import List, Tuple

from ethereum_types.bytes import Bytes

from ..crypto.extension_field import (
    Extension2,
    Extension3,
    ExtensionElement,
    Fp2,
    Fp3,
)
from ..crypto.finite_field import Fp, PrimeField
from ..exceptions import InputError, OutputError, UnknownParameter
from .utils import split_at

logger = logging.getLogger(__name__)


def decode_fp(
    data: Bytes, modulus_len: int, field: PrimeField
) -> Tuple[Fp, Bytes]:
    """
    Decode one base field element.

    Parameters
    ----------
    data :
        The remaining input.
    modulus_len :
        Encoding length of a field element.
    field :
        Field the element belongs to.

    Returns
    -------
    element : `Fp`
        The decoded element.
    rest : `Bytes`
        The unconsumed input.

    Raises
    ------
    UnknownParameter
        If `field` is not a prime field.
    InputTooShort
        If fewer than `modulus_len` bytes remain.
    InputError
        If the encoded value is not smaller than the modulus.
    """
    if not isinstance(field, PrimeField):
        raise UnknownParameter("Expected a prime field")

    encoding, rest = split_at(data, modulus_len, "Fp element")
    try:
        element = field.from_be_bytes(encoding)
    except ValueError as e:
        logger.debug("rejected Fp element: %s", e)
        raise InputError("Failed to decode Fp element") from e

    return element, rest


def _decode_coeffs(
    data: Bytes, modulus_len: int, field: PrimeField, count: int
) -> Tuple[List[Fp], Bytes]:
    coeffs = []
    rest = data
    for _ in range(count):
        c, rest = decode_fp(rest, modulus_len, field)
        coeffs.append(c)
    return coeffs, rest


def decode_fp2(
    data: Bytes, modulus_len: int, extension: Extension2
) -> Tuple[Fp2, Bytes]:
    """
    Decode an element `c0 + c1 * u` of a quadratic extension, `c0` first.

    Raises
    ------
    UnknownParameter
        If `extension` is not a quadratic extension.
    InputTooShort
        If a coefficient is truncated.
    InputError
        If a coefficient is not smaller than the modulus.
    """
    if not isinstance(extension, Extension2):
        logger.debug("rejected %s for Fp2", type(extension).__name__)
        raise UnknownParameter("Expected a quadratic extension")

    coeffs, rest = _decode_coeffs(
        data, modulus_len, extension.base_field, extension.degree
    )
    return extension.element(coeffs), rest


def decode_fp3(
    data: Bytes, modulus_len: int, extension: Extension3
) -> Tuple[Fp3, Bytes]:
    """
    Decode an element `c0 + c1 * u + c2 * u^2` of a cubic extension, `c0`
    first.

    Raises
    ------
    UnknownParameter
        If `extension` is not a cubic extension.
    InputTooShort
        If a coefficient is truncated.
    InputError
        If a coefficient is not smaller than the modulus.
    """
    if not isinstance(extension, Extension3):
        logger.debug("rejected %s for Fp3", type(extension).__name__)
        raise UnknownParameter("Expected a cubic extension")

    coeffs, rest = _decode_coeffs(
        data, modulus_len, extension.base_field, extension.degree
    )
    return extension.element(coeffs), rest


def serialize_fp_fixed_len(modulus_len: int, element: Fp) -> Bytes:
    """
    Encode a base field element with exactly `modulus_len` bytes.

    Raises
    ------
    OutputError
        If `element` is not a base field element, or does not fit in
        `modulus_len` bytes.
    """
    if not isinstance(element, Fp):
        raise OutputError("Expected a base field element")
    try:
        return element.to_be_bytes(modulus_len)
    except OverflowError as e:
        raise OutputError(
            "Element is too large for the encoding length"
        ) from e


def _serialize_coeffs(modulus_len: int, element: ExtensionElement) -> Bytes:
    return b"".join(
        serialize_fp_fixed_len(modulus_len, c) for c in element.coeffs
    )


def serialize_fp2_fixed_len(modulus_len: int, element: Fp2) -> Bytes:
    """
    Encode a quadratic extension element as `c0 || c1`.

    Raises
    ------
    OutputError
        If `element` is not in a quadratic extension, or a coefficient
        does not fit in `modulus_len` bytes.
    """
    if not isinstance(element, Fp2):
        raise OutputError("Expected an element of a quadratic extension")
    return _serialize_coeffs(modulus_len, element)


def serialize_fp3_fixed_len(modulus_len: int, element: Fp3) -> Bytes:
    """
    Encode a cubic extension element as `c0 || c1 || c2`.

    Raises
    ------
    OutputError
        If `element` is not in a cubic extension, or a coefficient does
        not fit in `modulus_len` bytes.
    """
    if not isinstance(element, Fp3):
        raise OutputError("Expected an element of a cubic extension")
    return _serialize_coeffs(modulus_len, element)
