"""
Builders for the binary parameter encodings used throughout the tests.
"""
from typing import Optional, Sequence

from ethereum_types.bytes import Bytes

from pairing_codec.decoding import encode_length_prefixed


def encode_int(value: int, length: int) -> Bytes:
    return value.to_bytes(length, "big")


def encode_length_prefixed_int(
    value: int, length: Optional[int] = None
) -> Bytes:
    """
    Length-prefixed big-endian encoding of `value`, using the minimal
    length unless one is given.
    """
    if length is None:
        length = max(1, (value.bit_length() + 7) // 8)
    return encode_length_prefixed(encode_int(value, length))


def encode_elements(values: Sequence[int], length: int) -> Bytes:
    return b"".join(encode_int(v, length) for v in values)


def encode_extension(degree: int, non_residue: int, length: int) -> Bytes:
    return bytes([degree]) + encode_int(non_residue, length)
