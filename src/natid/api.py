"""
Public entry points.

One ``Validator`` per kind of identifier, built on first use from the bundled
rule pack and shared by every caller in the process.
"""

from __future__ import annotations

import threading
from typing import Dict, List

from .engine import ANY, Validator, Verdict, load_ruleset
from .locales import CUSTOM_CHECKS

TAX_ID = "tax_id"
VAT = "vat"
IDENTITY_CARD = "identity_card"
KINDS = (TAX_ID, VAT, IDENTITY_CARD)

_ERROR_MESSAGES = {
    TAX_ID: "Invalid locale '{locale}'",
    VAT: "Invalid country code: '{locale}'",
    IDENTITY_CARD: "Invalid locale '{locale}'",
}

_lock = threading.Lock()
_validators: Dict[str, Validator] = {}


def get_validator(kind: str) -> Validator:
    """Return the shared validator for ``kind``, loading its rule pack once."""
    if kind not in KINDS:
        raise ValueError(f"unknown kind {kind!r}, expected one of {', '.join(KINDS)}")
    with _lock:
        validator = _validators.get(kind)
        if validator is None:
            validator = Validator(
                load_ruleset(kind, CUSTOM_CHECKS[kind]),
                allow_any=kind == IDENTITY_CARD,
                error_message=_ERROR_MESSAGES[kind],
            )
            _validators[kind] = validator
    return validator


def validate_tax_id(candidate: str, locale: str = "en-US") -> bool:
    """
    Check a tax identification number.

    >>> validate_tax_id("01-1234567")
    True
    >>> validate_tax_id("7501010011", "bg-BG")
    False
    """
    return get_validator(TAX_ID).validate(candidate, locale)


def validate_vat(candidate: str, country_code: str) -> bool:
    if not isinstance(country_code, str):
        raise TypeError(f"Expected a string but received a {type(country_code).__name__}")
    return get_validator(VAT).validate(candidate, country_code)


def validate_identity_card(candidate: str, locale: str = ANY) -> bool:
    """Check a national identity card number; ``"any"`` tries every locale."""
    return get_validator(IDENTITY_CARD).validate(candidate, locale)


def explain(kind: str, candidate: str, locale: str) -> Verdict:
    return get_validator(kind).explain(candidate, locale)


def supported_locales(kind: str) -> List[str]:
    """Locale keys (country codes for VAT) in registration order, aliases included."""
    return get_validator(kind).locales()
