"""
A module for the sanity limits applied while decoding.

The limits bound the size of the moduli and group orders that callers are
allowed to describe, and therefore the cost of every later computation over
them. They can be loaded from a YAML file so that an embedding service can
tighten them without code changes.

Classes:
- DecoderLimits: Holds the limits and validates them.

Functions:
- load_limits: Reads and validates limits from a YAML file.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import (
    MAX_GROUP_BYTE_LEN,
    MAX_MODULUS_BYTE_LEN,
    MAX_MODULUS_LIMBS,
)


class DecoderLimits(BaseModel):
    """
    Upper bounds on the parameters accepted by the decoders.

    Attributes:
    - max_modulus_byte_len (int): Largest accepted modulus encoding length.
    - max_group_order_byte_len (int): Largest accepted group order encoding
      length.
    - max_modulus_limbs (int): Largest number of 64-bit limbs a modulus may
      occupy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_modulus_byte_len: int = Field(MAX_MODULUS_BYTE_LEN, gt=0, le=255)
    """Length byte values above this are rejected for the modulus."""

    max_group_order_byte_len: int = Field(MAX_GROUP_BYTE_LEN, gt=0, le=255)
    """Length byte values above this are rejected for the group order."""

    max_modulus_limbs: int = Field(MAX_MODULUS_LIMBS, gt=0)
    """Widest supported field representation, in limbs."""


DEFAULT_LIMITS = DecoderLimits()


def load_limits(path: Path) -> DecoderLimits:
    """
    Load and validate decoder limits from a YAML file.

    Parameters
    ----------
    path :
        Location of the YAML file. Keys missing from the file keep their
        default values.

    Returns
    -------
    limits : `DecoderLimits`
        The validated limits.

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    ValueError
        If the file content is not a mapping of valid limits.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"The configuration file '{path}' does not exist."
        )

    with path.open("r") as file:
        config_data = yaml.safe_load(file) or {}

    if not isinstance(config_data, dict):
        raise ValueError(
            f"Invalid configuration: expected a mapping in {path}"
        )

    try:
        return DecoderLimits(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
