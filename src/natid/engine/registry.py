"""
Locale registry built from YAML rule packs.

What this does
--------------
- Loads a rule pack (``tax_id.yaml``, ``vat.yaml``, ``identity_card.yaml``)
  bundled under ``natid/rulesets/``.
- Validates each entry with a pydantic model and compiles it into an
  immutable ``LocaleRule``: structural pattern, optional sanitizer, optional
  checksum variant.
- Resolves ``alias:`` entries to the *same* ``LocaleRule`` object as their
  target, so aliased locales can never drift apart.

Each entry in a pack can specify:
  - regex:     the structural pattern, matched against the whole candidate
  - flags:     optional list of flags ["I"]
  - sanitize:  name of a normalizer applied once, before matching
  - checksum:  a checksum variant (see ``natid.checks.variants``)
  - alias:     reuse another locale's rule instead of any of the above
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from importlib import resources
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ..checks.variants import CheckFn, ChecksumAlgorithm, checksum_from_spec
from ..errors import RulesetError

log = structlog.get_logger(__name__)

RULESETS_PACKAGE = "natid.rulesets"


# ---- Named sanitizers ---------------------------------------------------------------------

_ALL_SYMBOLS = re.compile(r"[-\\/!@#$%^&*()+=\[\]]+")
_SLASHES = re.compile(r"[/\\]+")


def strip_symbols(s: str) -> str:
    """Drop - \\ / ! @ # $ % ^ & * ( ) + = [ ] wherever they appear."""
    return _ALL_SYMBOLS.sub("", s)


def strip_slashes(s: str) -> str:
    return _SLASHES.sub("", s)


def trim_upper(s: str) -> str:
    return s.strip().upper()


# Map sanitizer names (as used in YAML) to callables.
SANITIZERS: Dict[str, Callable[[str], str]] = {
    "strip_symbols": strip_symbols,
    "strip_slashes": strip_slashes,
    "trim": str.strip,
    "trim_upper": trim_upper,
}


# ---- Rule records -------------------------------------------------------------------------


class RuleSpec(BaseModel):
    """One locale entry of a rule pack, as written in YAML."""

    model_config = ConfigDict(extra="forbid")

    regex: Optional[str] = None
    flags: List[str] = []
    sanitize: Optional[str] = None
    checksum: Any = None
    alias: Optional[str] = None
    name: Optional[str] = None

    @model_validator(mode="after")
    def _regex_or_alias(self) -> "RuleSpec":
        if (self.regex is None) == (self.alias is None):
            raise ValueError("exactly one of 'regex' or 'alias' is required")
        if self.alias is not None and (self.sanitize or self.checksum or self.flags):
            raise ValueError("an alias cannot carry its own regex, sanitize or checksum")
        return self


@dataclass(frozen=True)
class LocaleRule:
    """
    Compiled validation rule for one locale.

    Attributes:
        key:       Locale the rule was defined for (aliases share it).
        pattern:   Structural pattern; must match the whole sanitized candidate.
        sanitizer: Name of the sanitizer, or None.
        checksum:  Checksum variant, or None for structure-only locales.
        name:      Human-readable name of the identifier.
    """

    key: str
    pattern: re.Pattern
    sanitizer: Optional[str] = None
    checksum: Optional[ChecksumAlgorithm] = None
    name: Optional[str] = None

    def sanitize(self, candidate: str) -> str:
        if self.sanitizer is None:
            return candidate
        return SANITIZERS[self.sanitizer](candidate)

    def matches(self, candidate: str) -> bool:
        return self.pattern.fullmatch(candidate) is not None


# ---- Registry -----------------------------------------------------------------------------


class Registry:
    """
    Ordered, exact-match mapping of locale keys to ``LocaleRule`` objects.

    Iteration follows registration order (the order of the YAML pack). Once
    ``freeze()`` has been called, the registry refuses further registration.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._rules: Dict[str, LocaleRule] = {}
        self._frozen = False

    # -- Registration -----------------------------------------------------------------------

    def register(self, key: str, rule: LocaleRule) -> LocaleRule:
        self._check_writable(key)
        self._rules[key] = rule
        return rule

    def alias(self, key: str, target: str) -> LocaleRule:
        """Make ``key`` resolve to the very same rule object as ``target``."""
        if target not in self._rules:
            raise RulesetError(f"{self.kind}: alias {key!r} points at unknown locale {target!r}")
        return self.register(key, self._rules[target])

    def freeze(self) -> "Registry":
        self._frozen = True
        return self

    def _check_writable(self, key: str) -> None:
        if self._frozen:
            raise RulesetError(f"{self.kind}: registry is frozen, cannot add {key!r}")
        if key in self._rules:
            raise RulesetError(f"{self.kind}: duplicate locale {key!r}")

    # -- Lookup -----------------------------------------------------------------------------

    def lookup(self, key: str) -> Optional[LocaleRule]:
        return self._rules.get(key)

    def keys(self) -> List[str]:
        return list(self._rules)

    def items(self) -> Iterator[Tuple[str, LocaleRule]]:
        return iter(self._rules.items())

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


# ---- Compilation --------------------------------------------------------------------------


def _compile_flags(names: List[str]) -> int:
    # \d and \w must never accept non-ASCII digits.
    flags = re.ASCII
    for f in names:
        if f == "I":
            flags |= re.I
        else:
            raise RulesetError(f"unsupported regex flag {f!r}")
    return flags


def compile_rule(key: str, spec: RuleSpec, checks: Mapping[str, CheckFn]) -> LocaleRule:
    """Turn a validated ``RuleSpec`` into a ``LocaleRule``."""
    if spec.sanitize is not None and spec.sanitize not in SANITIZERS:
        raise RulesetError(f"{key}: unknown sanitizer {spec.sanitize!r}")
    try:
        pattern = re.compile(spec.regex or "", _compile_flags(spec.flags))
    except re.error as e:
        raise RulesetError(f"{key}: bad regex: {e}") from e
    try:
        checksum = checksum_from_spec(spec.checksum, checks)
    except RulesetError as e:
        raise RulesetError(f"{key}: {e}") from e
    return LocaleRule(
        key=key,
        pattern=pattern,
        sanitizer=spec.sanitize,
        checksum=checksum,
        name=spec.name,
    )


def build_registry(kind: str, data: Mapping[str, Any], checks: Mapping[str, CheckFn]) -> Registry:
    """
    Build a frozen registry from the parsed contents of a rule pack.

    ``data`` is the YAML document: ``{"locales": {key: entry, ...}}``.
    Aliases must come after the locale they point at.
    """
    locales = (data or {}).get("locales") or {}
    if not isinstance(locales, dict):
        raise RulesetError(f"{kind}: 'locales' must be a mapping")

    registry = Registry(kind)
    for key, entry in locales.items():
        if not isinstance(key, str):
            raise RulesetError(f"{kind}: locale keys must be strings, got {key!r}")
        if not isinstance(entry, dict):
            raise RulesetError(f"{kind}: {key}: entry must be a mapping")
        try:
            spec = RuleSpec(**entry)
        except ValidationError as e:
            raise RulesetError(f"{kind}: {key}: {e}") from e

        if spec.alias is not None:
            registry.alias(key, spec.alias)
        else:
            registry.register(key, compile_rule(key, spec, checks))

    log.debug("ruleset_loaded", kind=kind, locales=len(registry))
    return registry.freeze()


def load_ruleset(kind: str, checks: Mapping[str, CheckFn]) -> Registry:
    """Load ``natid/rulesets/<kind>.yaml`` and compile it."""
    text = resources.files(RULESETS_PACKAGE).joinpath(f"{kind}.yaml").read_text(encoding="utf-8")
    return build_registry(kind, yaml.safe_load(text), checks)
