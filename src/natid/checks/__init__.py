"""Checksum algorithms, checksum variants and birthdate decoding."""

from .algorithms import (
    iso7064_mod11_10,
    iso7064_mod97_10,
    luhn,
    luhn_number,
    mod97,
    verhoeff,
    weighted_mod,
    weighted_sum,
)
from .variants import (
    ChecksumAlgorithm,
    Custom,
    Iso7064,
    Luhn,
    Verhoeff,
    WeightedModN,
    checksum_from_spec,
)

__all__ = [
    "iso7064_mod11_10",
    "iso7064_mod97_10",
    "luhn",
    "luhn_number",
    "mod97",
    "verhoeff",
    "weighted_mod",
    "weighted_sum",
    "ChecksumAlgorithm",
    "Custom",
    "Iso7064",
    "Luhn",
    "Verhoeff",
    "WeightedModN",
    "checksum_from_spec",
]
