"""Fallback specifications — what to use when a variable is missing.

A fallback only ever papers over *absence*: a variable present in the
store (even as an empty string) is returned as-is and never reaches
this module.

Four variants form a recursive sum type, plus a fifth for mistakes:

- **LiteralFallback** — the same string for every missing key.
- **MappingFallback** — a per-key table; each entry is itself a
  fallback (usually a literal).
- **FunctionFallback** — a callable computing the value from the key.
- **ModeFallback** — one entry per ``Mode``; the current mode selects
  which nested fallback applies.  Entries may be absent.
- **UnusableFallback** — a value of any other shape.  It yields
  nothing, so only a lookup that reaches it fails.

"Absent" is spelled ``None`` throughout.

Callers rarely build these directly.  ``parse_fallback`` accepts the
loose shapes people naturally write in options::

    "localhost"                                   # literal
    {"DB_HOST": "localhost"}                      # per-key
    lambda key: f"{key}_default"                  # function
    {"env": {"development": "dev", "test": "t"}}  # mode-scoped

Design choices:
    - **Fail where walked** — a malformed entry only breaks the lookups
      that reach it; an entry for another mode, or an unknown mode
      name, simply never matches.
    - **Mode-scoped is all-or-nothing** — if the current mode has no
      usable entry the reduction yields nothing; it does not retry some
      outer default.
    - **No hidden state** — reduction is a pure function of the spec,
      the key and the mode, so repeated misses give identical answers
      (given a pure fallback function).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from typed_env.modes import Mode, mode_from_name

MODE_SCOPE_KEY = "env"
"""Key that marks a raw mapping as mode-scoped rather than per-key."""


@dataclass(frozen=True)
class LiteralFallback:
    """Return the same value for every missing key."""

    value: str


@dataclass(frozen=True)
class MappingFallback:
    """Look the missing key up in a per-key table."""

    entries: Mapping[str, Fallback | None]


@dataclass(frozen=True)
class FunctionFallback:
    """Compute the value by calling ``func(key)``."""

    func: Callable[[str], str]


@dataclass(frozen=True)
class ModeFallback:
    """Pick a nested fallback by the store's current mode."""

    entries: Mapping[Mode, Fallback | None]


@dataclass(frozen=True)
class UnusableFallback:
    """Hold a value that cannot act as a fallback.

    It reduces to nothing, so the lookup that reaches it fails with
    ``InvalidFallbackError``.  Branches that are never walked (say, the
    entry for a mode the process isn't in) never fail.
    """

    raw: object


Fallback = (
    LiteralFallback | MappingFallback | FunctionFallback | ModeFallback | UnusableFallback
)


def parse_fallback(raw: object) -> Fallback | None:
    """Turn a loosely-shaped option value into a ``Fallback``.

    Parsing never fails.  Anything that is not a string, mapping or
    callable becomes an ``UnusableFallback``, and the error surfaces at
    the lookup that actually walks into it.

    Args:
        raw: ``None``, a string, a callable, a mapping, or an existing
            ``Fallback`` variant.

    Returns:
        The parsed fallback, or None when no fallback is configured.
        An empty string counts as no fallback.

    """
    match raw:
        case None | "":
            return None
        case (
            LiteralFallback()
            | MappingFallback()
            | FunctionFallback()
            | ModeFallback()
            | UnusableFallback()
        ):
            return raw
        case str():
            return LiteralFallback(raw)
        case Mapping() if isinstance(scoped := raw.get(MODE_SCOPE_KEY), Mapping):
            return _parse_mode_scoped(raw, scoped)
        case Mapping():
            return _parse_per_key(raw)
        case _ if callable(raw):
            return FunctionFallback(raw)
        case _:
            return UnusableFallback(raw)


def _parse_mode_scoped(
    raw: Mapping[object, object],
    scoped: Mapping[object, object],
) -> ModeFallback | UnusableFallback:
    # Sibling keys next to "env" make the intent ambiguous.
    if len(raw) != 1:
        return UnusableFallback(raw)
    entries: dict[Mode, Fallback | None] = {}
    for name, value in scoped.items():
        mode = mode_from_name(name)
        if mode is not None:
            entries[mode] = parse_fallback(value)
    return ModeFallback(MappingProxyType(entries))


def _parse_per_key(raw: Mapping[object, object]) -> MappingFallback:
    # Non-string keys can never equal a variable name, so they are dropped.
    entries = {key: parse_fallback(value) for key, value in raw.items() if isinstance(key, str)}
    return MappingFallback(MappingProxyType(entries))


def reduce_fallback(spec: Fallback | None, key: str, mode: Mode | None) -> str | None:
    """Reduce *spec* to a value for *key* under *mode*.

    Args:
        spec: The fallback to reduce (None means absent).
        key: The missing variable name.
        mode: The current mode, read by the caller for this lookup.

    Returns:
        The substitute string, or None if the fallback has nothing to
        offer for this key and mode.  A function returning a non-string
        and an ``UnusableFallback`` also count as nothing.

    """
    match spec:
        case None | UnusableFallback():
            return None
        case LiteralFallback(value=value):
            return value
        case FunctionFallback(func=func):
            result = func(key)
            return result if isinstance(result, str) else None
        case ModeFallback(entries=entries):
            if mode is None:
                return None
            return reduce_fallback(entries.get(mode), key, mode)
        case MappingFallback(entries=entries):
            if key not in entries:
                return None
            return reduce_fallback(entries[key], key, mode)
