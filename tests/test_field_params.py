import pytest
from ethereum_types.numeric import U64

from pairing_codec.config import DecoderLimits
from pairing_codec.decoding import (
    get_base_field_params,
    get_g1_curve_params,
    parse_ab_in_base_field_from_encoding,
    parse_base_field_from_encoding,
    parse_group_order_from_encoding,
)
from pairing_codec.exceptions import (
    InputError,
    InputTooShort,
    UnexpectedZero,
)

from .helpers import encode_length_prefixed_int


def test_base_field_and_coefficients() -> None:
    data = bytes([0x01, 0x17, 0x03, 0x05])

    field, modulus_len, modulus, rest = parse_base_field_from_encoding(data)
    assert modulus == 23
    assert modulus_len == 1
    assert field.modulus == 23

    a, b, rest = parse_ab_in_base_field_from_encoding(rest, modulus_len, field)
    assert int(a) == 3
    assert int(b) == 5
    assert rest == b""


def test_zero_modulus() -> None:
    with pytest.raises(UnexpectedZero):
        parse_base_field_from_encoding(bytes([0x01, 0x00]))


def test_modulus_with_leading_zero_byte() -> None:
    data = bytes([0x02, 0x00, 0x17, 0x00, 0x03])
    (modulus, modulus_len), rest = get_base_field_params(data)
    assert modulus == 23
    assert modulus_len == 2
    assert rest == b"\x00\x03"


@pytest.mark.parametrize(
    "data",
    [
        bytes([0x01, 0x10, 0x00]),
        bytes([0x01, 0x01, 0x00]),
        bytes([0x01, 0x02, 0x00]),
    ],
)
def test_modulus_without_field(data: bytes) -> None:
    with pytest.raises(InputError) as e:
        parse_base_field_from_encoding(data)
    assert str(e.value) == "Failed to create prime field from modulus"


@pytest.mark.parametrize(
    "data",
    [b"", bytes([0x02, 0x17]), bytes([0x01, 0x17])],
)
def test_truncated_base_field(data: bytes) -> None:
    with pytest.raises(InputTooShort):
        parse_base_field_from_encoding(data)


def test_modulus_length_limit() -> None:
    limits = DecoderLimits(max_modulus_byte_len=1)
    data = encode_length_prefixed_int(97, 2) + b"\x00\x00"

    with pytest.raises(InputError) as e:
        parse_base_field_from_encoding(data, limits)
    assert str(e.value) == "Encoded modulus length is too large"

    field, modulus_len, _, _ = parse_base_field_from_encoding(data)
    assert modulus_len == 2
    assert field.modulus == 97


def test_modulus_limb_limit() -> None:
    limits = DecoderLimits(max_modulus_limbs=1)
    data = encode_length_prefixed_int(2**64 + 13) + b"\x00" * 9

    with pytest.raises(InputError):
        parse_base_field_from_encoding(data, limits)

    field, _, _, _ = parse_base_field_from_encoding(data)
    assert field.num_limbs == 2


def test_coefficient_not_reduced() -> None:
    field, modulus_len, _, rest = parse_base_field_from_encoding(
        bytes([0x01, 0x17, 0x17, 0x05])
    )
    with pytest.raises(InputError) as e:
        parse_ab_in_base_field_from_encoding(rest, modulus_len, field)
    assert not isinstance(e.value, InputTooShort)


def test_missing_coefficient() -> None:
    field, modulus_len, _, rest = parse_base_field_from_encoding(
        bytes([0x01, 0x17, 0x03])
    )
    with pytest.raises(InputTooShort):
        parse_ab_in_base_field_from_encoding(rest, modulus_len, field)


def test_group_order() -> None:
    assert get_g1_curve_params(bytes([0x01, 0x0B])) == ((b"\x0b", 1), b"")

    limbs, order_len, order, rest = parse_group_order_from_encoding(
        bytes([0x01, 0x0B]) + b"rest"
    )
    assert limbs == [U64(11)]
    assert order_len == 1
    assert order == 11
    assert rest == b"rest"


def test_multi_limb_group_order() -> None:
    limbs, order_len, order, _ = parse_group_order_from_encoding(
        encode_length_prefixed_int(2**64 + 1)
    )
    assert limbs == [U64(1), U64(1)]
    assert order_len == 9
    assert order == 2**64 + 1


def test_zero_group_order() -> None:
    with pytest.raises(UnexpectedZero) as e:
        parse_group_order_from_encoding(bytes([0x02, 0x00, 0x00]))
    assert isinstance(e.value, InputError)


def test_group_order_length_limit() -> None:
    limits = DecoderLimits(max_group_order_byte_len=1)
    with pytest.raises(InputError):
        parse_group_order_from_encoding(bytes([0x02, 0x01, 0x01]), limits)


def test_truncated_group_order() -> None:
    with pytest.raises(InputTooShort):
        parse_group_order_from_encoding(bytes([0x02, 0x01]))
