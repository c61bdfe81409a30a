from typing import Union

import pytest
from ethereum_types.numeric import Uint

from pairing_codec.crypto.extension_field import (
    Extension2,
    Extension3,
    Fp2,
    calculate_fp3_frobenius_coeffs,
)
from pairing_codec.crypto.finite_field import field_from_modulus

F7 = field_from_modulus(Uint(7))
F11 = field_from_modulus(Uint(11))
F23 = field_from_modulus(Uint(23))

# -1 is a quadratic non-residue for p = 3 mod 4.
FP2 = Extension2.new(F23.from_int(22), Uint(23))
# 2 is not a cube modulo 7.
FP3 = Extension3.new(F7.from_int(2), Uint(7))


def test_fp2_frobenius_coefficients() -> None:
    assert [int(c) for c in FP2.frobenius_coeffs_c1] == [1, 22]
    assert FP2.degree == 2


def test_fp3_frobenius_coefficients() -> None:
    assert [int(c) for c in FP3.frobenius_coeffs_c1] == [1, 4, 2]
    assert [int(c) for c in FP3.frobenius_coeffs_c2] == [1, 2, 4]
    assert FP3.degree == 3


def test_fp3_frobenius_coefficients_need_divisibility() -> None:
    with pytest.raises(ValueError):
        calculate_fp3_frobenius_coeffs(F11.from_int(2), Uint(11))
    with pytest.raises(ValueError):
        Extension3.new(F11.from_int(2), Uint(11))


def test_fp2_multiplication() -> None:
    x = FP2.from_ints([1, 2])
    y = FP2.from_ints([3, 4])
    assert x * y == FP2.from_ints([18, 10])

    u = FP2.from_ints([0, 1])
    assert u * u == FP2.from_ints([22, 0])


def test_fp3_multiplication() -> None:
    u = FP3.from_ints([0, 1, 0])
    assert u * u == FP3.from_ints([0, 0, 1])
    assert u * u * u == FP3.from_ints([2, 0, 0])


def test_identities() -> None:
    x = FP3.from_ints([3, 5, 6])
    assert x + FP3.zero() == x
    assert x * FP3.one() == x
    assert x - x == FP3.zero()
    assert x + (-x) == FP3.zero()
    assert x**0 == FP3.one()
    assert FP3.zero().is_zero()
    assert not FP3.one().is_zero()


def test_negative_exponent() -> None:
    with pytest.raises(ValueError):
        FP2.one() ** -1


def test_mul_by_fp() -> None:
    x = FP2.from_ints([3, 5])
    assert x.mul_by_fp(F23.from_int(2)) == FP2.from_ints([6, 10])


def test_coefficient_accessors() -> None:
    x = FP3.from_ints([3, 5, 6])
    assert (int(x.c0), int(x.c1), int(x.c2)) == (3, 5, 6)


@pytest.mark.parametrize("coeffs", [[5, 7], [0, 1], [22, 22]])
def test_fp2_frobenius_map(coeffs: list) -> None:
    x = FP2.from_ints(coeffs)
    assert x.frobenius_map(1) == x**23
    assert x.frobenius_map(2) == x


@pytest.mark.parametrize("coeffs", [[3, 5, 6], [0, 1, 0], [1, 1, 1]])
def test_fp3_frobenius_map(coeffs: list) -> None:
    x = FP3.from_ints(coeffs)
    assert x.frobenius_map(1) == x**7
    assert x.frobenius_map(2) == x**49
    assert x.frobenius_map(3) == x


def test_wrong_number_of_coefficients() -> None:
    with pytest.raises(ValueError):
        Fp2(FP2, (F23.one(),))
    with pytest.raises(ValueError):
        FP3.element([F7.one(), F7.one()])


def test_coefficients_from_another_field() -> None:
    with pytest.raises(ValueError):
        FP2.element([F7.one(), F7.one()])


def test_elements_of_different_extensions_do_not_mix() -> None:
    other = Extension2.new(F23.from_int(5), Uint(23))
    with pytest.raises(ValueError):
        FP2.one() + other.one()


@pytest.mark.parametrize("extension", [FP2, FP3])
def test_extension_constructors(
    extension: Union[Extension2, Extension3]
) -> None:
    zero = extension.element([extension.base_field.zero()] * extension.degree)
    assert extension.zero() == zero
    assert [int(c) for c in extension.one().coeffs] == [1] + [0] * (
        extension.degree - 1
    )
    minus_one = [-1] + [0] * (extension.degree - 1)
    assert extension.from_ints(minus_one) == -extension.one()
