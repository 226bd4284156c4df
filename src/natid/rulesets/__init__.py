"""Bundled YAML rule packs (tax_id.yaml, vat.yaml, identity_card.yaml)."""
