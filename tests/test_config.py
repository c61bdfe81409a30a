from pathlib import Path

import pytest
from pydantic import ValidationError

from pairing_codec.config import DEFAULT_LIMITS, DecoderLimits, load_limits


def test_default_limits() -> None:
    assert DEFAULT_LIMITS.max_modulus_byte_len == 128
    assert DEFAULT_LIMITS.max_group_order_byte_len == 128
    assert DEFAULT_LIMITS.max_modulus_limbs == 16


def test_limits_are_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_LIMITS.max_modulus_limbs = 4  # type: ignore[misc]


def test_load_limits(tmp_path: Path) -> None:
    path = tmp_path / "limits.yaml"
    path.write_text("max_modulus_byte_len: 48\nmax_modulus_limbs: 6\n")

    limits = load_limits(path)
    assert limits == DecoderLimits(
        max_modulus_byte_len=48, max_modulus_limbs=6
    )
    assert limits.max_group_order_byte_len == 128


def test_load_empty_limits(tmp_path: Path) -> None:
    path = tmp_path / "limits.yaml"
    path.write_text("")
    assert load_limits(path) == DEFAULT_LIMITS


@pytest.mark.parametrize(
    "content",
    [
        "max_modulus_byte_len: 0\n",
        "max_modulus_byte_len: 256\n",
        "max_modulus_limbs: -1\n",
        "unknown_limit: 3\n",
        "- 1\n- 2\n",
    ],
)
def test_load_invalid_limits(tmp_path: Path, content: str) -> None:
    path = tmp_path / "limits.yaml"
    path.write_text(content)
    with pytest.raises(ValueError) as e:
        load_limits(path)
    assert str(e.value).startswith("Invalid configuration")


def test_load_missing_limits(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_limits(tmp_path / "missing.yaml")
