"""natid: national tax ID, VAT and identity card number validation."""

from .api import (
    explain,
    supported_locales,
    validate_identity_card,
    validate_tax_id,
    validate_vat,
)
from .engine import Verdict
from .errors import NatidError, RulesetError, UnsupportedLocale

__version__ = "0.1.0"

__all__ = [
    "NatidError",
    "RulesetError",
    "UnsupportedLocale",
    "Verdict",
    "explain",
    "supported_locales",
    "validate_identity_card",
    "validate_tax_id",
    "validate_vat",
]
