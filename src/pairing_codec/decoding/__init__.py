"""
Parameter Decoders
^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Every decoder takes the remaining input and returns what it decoded
together with the unconsumed remainder. A typical request is decoded as::

    field, modulus_len, modulus, rest = parse_base_field_from_encoding(data)
    a, b, rest = parse_ab_in_base_field_from_encoding(rest, modulus_len, field)
    order_repr, order_len, order, rest = parse_group_order_from_encoding(rest)
    curve = WeierstrassCurve(field, a, b)
    point, rest = decode_g1_point_from_xy(rest, modulus_len, curve)
    scalar, rest = decode_scalar_representation(
        rest, order_len, order, order_repr
    )

Any exception aborts the whole request.
"""

from .field_params import (
    decode_scalar_representation,
    get_base_field_params,
    get_g1_curve_params,
    parse_base_field_from_encoding,
    parse_group_order_from_encoding,
)
from .fp import (
    decode_fp,
    decode_fp2,
    decode_fp3,
    serialize_fp2_fixed_len,
    serialize_fp3_fixed_len,
    serialize_fp_fixed_len,
)
from .g1 import (
    decode_g1_point_from_xy,
    parse_ab_in_base_field_from_encoding,
    serialize_g1_point,
)
from .g2 import (
    create_fp2_extension,
    create_fp3_extension,
    decode_g2_point_from_xy_in_fp2,
    decode_g2_point_from_xy_in_fp3,
    parse_ab_in_fp2_from_encoding,
    parse_ab_in_fp3_from_encoding,
    serialize_g2_point_in_fp2,
    serialize_g2_point_in_fp3,
)
from .utils import encode_length_prefixed, read_length_prefixed, split_at

__all__ = (
    "create_fp2_extension",
    "create_fp3_extension",
    "decode_fp",
    "decode_fp2",
    "decode_fp3",
    "decode_g1_point_from_xy",
    "decode_g2_point_from_xy_in_fp2",
    "decode_g2_point_from_xy_in_fp3",
    "decode_scalar_representation",
    "encode_length_prefixed",
    "get_base_field_params",
    "get_g1_curve_params",
    "parse_ab_in_base_field_from_encoding",
    "parse_ab_in_fp2_from_encoding",
    "parse_ab_in_fp3_from_encoding",
    "parse_base_field_from_encoding",
    "parse_group_order_from_encoding",
    "read_length_prefixed",
    "serialize_fp2_fixed_len",
    "serialize_fp3_fixed_len",
    "serialize_fp_fixed_len",
    "serialize_g1_point",
    "serialize_g2_point_in_fp2",
    "serialize_g2_point_in_fp3",
    "split_at",
)
