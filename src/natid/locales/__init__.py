"""Per-locale custom checks, keyed by the ids the YAML rule packs use."""

from . import identity_card, tax_id, vat

CUSTOM_CHECKS = {
    "tax_id": tax_id.CHECKS,
    "vat": vat.CHECKS,
    "identity_card": identity_card.CHECKS,
}

__all__ = ["CUSTOM_CHECKS", "identity_card", "tax_id", "vat"]
