"""
The closed set of checksum variants a locale rule can name.

Rule packs refer to checksums by name (``luhn``) or by a one-key mapping
(``{weighted: {...}}``, ``{custom: bg_bg}``). ``checksum_from_spec`` turns
that into one of the frozen dataclasses below, each with a ``check(candidate)``
method. Unknown names and unknown custom ids fail when the pack is loaded,
never at validation time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from ..errors import RulesetError
from ..primitives import DigitParseError
from .algorithms import (
    iso7064_mod11_10,
    iso7064_mod97_10,
    luhn,
    verhoeff,
    weighted_mod,
)

CheckFn = Callable[[str], bool]


@dataclass(frozen=True)
class Luhn:
    name = "luhn"

    def check(self, candidate: str) -> bool:
        return luhn(candidate)


@dataclass(frozen=True)
class Verhoeff:
    name = "verhoeff"

    def check(self, candidate: str) -> bool:
        return verhoeff(candidate)


@dataclass(frozen=True)
class Iso7064:
    """ISO 7064 in its MOD 11,10 (default) or MOD 97-10 system."""

    system: str = "mod11_10"
    rotate: int = 4
    residue: int = 1
    name = "iso7064"

    def __post_init__(self) -> None:
        if self.system not in ("mod11_10", "mod97_10"):
            raise RulesetError(f"unknown ISO 7064 system: {self.system!r}")

    def check(self, candidate: str) -> bool:
        if self.system == "mod97_10":
            return iso7064_mod97_10(candidate, self.rotate, self.residue)
        return iso7064_mod11_10(candidate)


@dataclass(frozen=True)
class WeightedModN:
    weights: Tuple[int, ...]
    modulus: int
    complement: bool = False
    exceptions: Tuple[Tuple[int, Optional[int]], ...] = ()
    name = "weighted"

    def check(self, candidate: str) -> bool:
        return weighted_mod(
            candidate,
            self.weights,
            self.modulus,
            complement=self.complement,
            exceptions=dict(self.exceptions),
        )


@dataclass(frozen=True)
class Custom:
    """A hand-written per-locale check, looked up by id in a checks table."""

    id: str
    fn: CheckFn = field(compare=False, repr=False)
    name = "custom"

    def check(self, candidate: str) -> bool:
        try:
            return bool(self.fn(candidate))
        except DigitParseError:
            return False


ChecksumAlgorithm = Union[Luhn, Verhoeff, Iso7064, WeightedModN, Custom]

_SIMPLE: Dict[str, ChecksumAlgorithm] = {
    "luhn": Luhn(),
    "verhoeff": Verhoeff(),
    "iso7064": Iso7064(),
}


def _weighted(options: Mapping[str, Any]) -> WeightedModN:
    try:
        weights = tuple(int(w) for w in options["weights"])
        modulus = int(options["modulus"])
    except (KeyError, TypeError, ValueError) as e:
        raise RulesetError(f"weighted checksum needs integer weights and modulus: {options!r}") from e
    exceptions = options.get("exceptions") or {}
    return WeightedModN(
        weights=weights,
        modulus=modulus,
        complement=bool(options.get("complement", False)),
        exceptions=tuple(
            (int(k), None if v is None else int(v)) for k, v in exceptions.items()
        ),
    )


def checksum_from_spec(spec: Any, checks: Mapping[str, CheckFn]) -> Optional[ChecksumAlgorithm]:
    """
    Build a checksum variant from its rule-pack form.

    Accepted shapes:
      - ``None``                         -> no checksum (structure only)
      - ``"luhn" | "verhoeff" | "iso7064"``
      - ``{"iso7064": {"system": "mod97_10", "rotate": 4, "residue": 1}}``
      - ``{"weighted": {"weights": [...], "modulus": 11, ...}}``
      - ``{"custom": "<id>"}``           -> looked up in ``checks``
    """
    if spec is None:
        return None
    if isinstance(spec, str):
        if spec not in _SIMPLE:
            raise RulesetError(f"unknown checksum: {spec!r}")
        return _SIMPLE[spec]
    if not isinstance(spec, dict) or len(spec) != 1:
        raise RulesetError(f"checksum must be a name or a one-key mapping: {spec!r}")

    (kind, options), = spec.items()
    if kind == "custom":
        if options not in checks:
            raise RulesetError(f"no custom check registered as {options!r}")
        return Custom(id=options, fn=checks[options])
    if kind == "weighted":
        return _weighted(options or {})
    if kind == "iso7064":
        try:
            return Iso7064(**(options or {}))
        except TypeError as e:
            raise RulesetError(f"bad iso7064 options: {options!r}") from e
    raise RulesetError(f"unknown checksum: {kind!r}")
