import logging
from typing import Callable

import pytest
from ethereum_types.numeric import Uint

from pairing_codec.crypto.elliptic_curve import WeierstrassCurve
from pairing_codec.crypto.finite_field import field_from_modulus, int_to_limbs
from pairing_codec.decoding import (
    decode_fp,
    decode_g1_point_from_xy,
    decode_scalar_representation,
)
from pairing_codec.exceptions import InputError
from pairing_codec.logger import setup_logger

F97 = field_from_modulus(Uint(97))
CURVE_97 = WeierstrassCurve(F97, F97.zero(), F97.from_int(3))


def test_setup_logger() -> None:
    logger = setup_logger("pairing_codec")

    assert logger.name == "pairing_codec"
    assert logger.level == logging.INFO
    assert not logger.propagate
    assert logger.handlers


def test_module_loggers_are_children() -> None:
    setup_logger("pairing_codec")
    child = logging.getLogger("pairing_codec.decoding.g2")

    assert child.getEffectiveLevel() == logging.INFO
    assert not child.disabled


@pytest.mark.parametrize(
    "decode, message",
    [
        (
            lambda: decode_scalar_representation(
                b"\x0f", 1, Uint(11), int_to_limbs(Uint(11))
            ),
            "rejected scalar",
        ),
        (
            lambda: decode_fp(b"\x17", 1, field_from_modulus(Uint(23))),
            "rejected Fp element",
        ),
        (
            lambda: decode_g1_point_from_xy(b"\x01\x63", 1, CURVE_97),
            "rejected coordinate Y",
        ),
    ],
)
def test_rejections_are_logged(
    caplog: pytest.LogCaptureFixture,
    decode: Callable[[], object],
    message: str,
) -> None:
    package_logger = setup_logger("pairing_codec")
    package_logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.DEBUG, logger="pairing_codec"):
            with pytest.raises(InputError):
                decode()
    finally:
        package_logger.removeHandler(caplog.handler)

    assert any(message in r.getMessage() for r in caplog.records)
