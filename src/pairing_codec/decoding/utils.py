"""
Length-Prefixed Reader
^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Slicing helpers shared by every decoder. Each helper returns the consumed
part and the unconsumed remainder of the buffer.
"""

from typing import Tuple

from ethereum_types.bytes import Bytes

from ..constants import BYTES_FOR_LENGTH_ENCODING
from ..exceptions import InputTooShort, OutputError

MAX_LENGTH_PREFIXED_PAYLOAD = (1 << (8 * BYTES_FOR_LENGTH_ENCODING)) - 1


def split_at(data: Bytes, length: int, what: str) -> Tuple[Bytes, Bytes]:
    """
    Split exactly `length` bytes off the front of `data`.

    Parameters
    ----------
    data :
        The remaining input.
    length :
        Number of bytes to consume.
    what :
        Name of the value being read, used in the error message.

    Returns
    -------
    head : `Bytes`
        The first `length` bytes.
    rest : `Bytes`
        Everything after them.

    Raises
    ------
    InputTooShort
        If fewer than `length` bytes remain.
    """
    if len(data) < length:
        raise InputTooShort(f"Input is not long enough to get {what}")
    return data[:length], data[length:]


def read_length_prefixed(
    data: Bytes, what: str = "payload"
) -> Tuple[Tuple[Bytes, int], Bytes]:
    """
    Read a one byte length `L` followed by `L` bytes of payload.

    Parameters
    ----------
    data :
        The remaining input.
    what :
        Name of the value being read, used in error messages.

    Returns
    -------
    payload_and_length : `Tuple[Bytes, int]`
        The payload and its declared length.
    rest : `Bytes`
        Everything after the payload.

    Raises
    ------
    InputTooShort
        If the length byte is missing or the payload is truncated.
    """
    length_encoding, rest = split_at(
        data, BYTES_FOR_LENGTH_ENCODING, f"{what} length"
    )
    length = int.from_bytes(length_encoding, "big")
    payload, rest = split_at(rest, length, what)

    return (payload, length), rest


def encode_length_prefixed(payload: Bytes) -> Bytes:
    """
    Inverse of `read_length_prefixed`.

    Raises
    ------
    OutputError
        If the payload is too long for a one byte length.
    """
    if len(payload) > MAX_LENGTH_PREFIXED_PAYLOAD:
        raise OutputError("Payload is too long to be length prefixed")
    return len(payload).to_bytes(BYTES_FOR_LENGTH_ENCODING, "big") + bytes(
        payload
    )
