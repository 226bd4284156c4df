"""Locale registry and validation dispatcher."""

from .dispatcher import ANY, Validator, Verdict
from .registry import LocaleRule, Registry, build_registry, load_ruleset

__all__ = [
    "ANY",
    "LocaleRule",
    "Registry",
    "Validator",
    "Verdict",
    "build_registry",
    "load_ruleset",
]
