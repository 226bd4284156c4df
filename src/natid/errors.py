"""
Exception types raised by natid.

Only two things are ever raised to callers:

- ``UnsupportedLocale`` when an explicit locale key is not registered.
- ``RulesetError`` when a bundled YAML rule pack is malformed (load time only).

Structural and checksum mismatches are never exceptions; validators return
``False`` for them.
"""

from __future__ import annotations


class NatidError(Exception):
    """Base class for every error raised by natid."""


class UnsupportedLocale(NatidError):
    """The requested locale (or country code) has no registered rule set."""

    def __init__(self, kind: str, locale: str, message: str | None = None) -> None:
        self.kind = kind
        self.locale = locale
        super().__init__(message or f"Invalid locale '{locale}'")


class RulesetError(NatidError):
    """A rule pack entry could not be compiled into a locale rule."""
