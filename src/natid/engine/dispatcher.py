"""
Validation dispatcher: locale -> sanitize -> structure -> checksum -> verdict.

Order of operations per locale:
  1) resolve   -> unknown explicit locale raises ``UnsupportedLocale``
  2) sanitize  -> the locale's sanitizer, if any, applied once
  3) structure -> pattern must match the whole sanitized candidate
  4) checksum  -> if the locale has one, its result is the verdict;
                  otherwise the structural match is

In "any" mode every registered locale is tried in registration order and the
first passing one wins. Running out of locales is ``False``, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import structlog

from ..errors import UnsupportedLocale
from .registry import LocaleRule, Registry

log = structlog.get_logger(__name__)

ANY = "any"

# Verdict stages
STRUCTURE = "structure"            # failed the structural pattern
CHECKSUM = "checksum"              # matched, failed the checksum
STRUCTURE_ONLY = "structure_only"  # matched, locale has no checksum
PASSED = "passed"                  # matched and passed the checksum
EXHAUSTED = "exhausted"            # "any" mode, no locale accepted the candidate


@dataclass(frozen=True)
class Verdict:
    """Outcome of validating one candidate, with the stage that decided it."""

    kind: str
    locale: str
    candidate: str
    sanitized: str
    stage: str
    valid: bool
    name: Optional[str] = None


def _assert_string(candidate: object) -> None:
    if not isinstance(candidate, str):
        raise TypeError(f"Expected a string but received a {type(candidate).__name__}")


class Validator:
    """
    Validate candidates against one registry (tax IDs, VAT numbers or identity cards).

    Parameters
    ----------
    registry : Registry
        Frozen locale registry for this kind of identifier.
    allow_any : bool
        Accept the pseudo-locale ``"any"`` and search every locale.
    error_message : str
        Template for ``UnsupportedLocale``; ``{locale}`` is substituted.
    """

    def __init__(
        self,
        registry: Registry,
        allow_any: bool = False,
        error_message: str = "Invalid locale '{locale}'",
    ) -> None:
        self.registry = registry
        self.kind = registry.kind
        self.allow_any = allow_any
        self.error_message = error_message

    # ---------------- Public API ----------------

    def validate(self, candidate: str, locale: str) -> bool:
        """True if ``candidate`` is a valid identifier for ``locale``."""
        _assert_string(candidate)
        for _, rule in self._resolve(locale):
            if self._evaluate(rule, candidate)[1]:
                return True
        return False

    def explain(self, candidate: str, locale: str) -> Verdict:
        """
        Like ``validate`` but report which stage decided the outcome.

        In "any" mode the verdict names the first accepting locale, or has
        stage ``exhausted`` when none accepted the candidate.
        """
        _assert_string(candidate)
        for key, rule in self._resolve(locale):
            (sanitized, valid, stage) = self._evaluate(rule, candidate)
            if valid or locale != ANY:
                return Verdict(self.kind, key, candidate, sanitized, stage, valid, rule.name)
        return Verdict(self.kind, ANY, candidate, candidate, EXHAUSTED, False)

    def locales(self) -> list:
        return self.registry.keys()

    # ---------------- Internals ----------------

    def _resolve(self, locale: str) -> Iterable[Tuple[str, LocaleRule]]:
        rule: Optional[LocaleRule] = self.registry.lookup(locale)
        if rule is not None:
            return [(locale, rule)]
        if self.allow_any and locale == ANY:
            return self.registry.items()
        log.warning("unsupported_locale", kind=self.kind, locale=locale)
        raise UnsupportedLocale(self.kind, locale, self.error_message.format(locale=locale))

    @staticmethod
    def _evaluate(rule: LocaleRule, candidate: str) -> Tuple[str, bool, str]:
        sanitized = rule.sanitize(candidate)
        if not rule.matches(sanitized):
            return sanitized, False, STRUCTURE
        if rule.checksum is None:
            return sanitized, True, STRUCTURE_ONLY
        if rule.checksum.check(sanitized):
            return sanitized, True, PASSED
        return sanitized, False, CHECKSUM
