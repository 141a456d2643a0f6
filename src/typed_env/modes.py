"""Runtime modes — which deployment stage the process believes it is in.

The mode lives inside the environment store itself, under ``MODE`` by
default.  Mode-scoped fallbacks and log policies pick their entry by
looking it up.

The store may change at any moment, so the mode is never cached: each
lookup calls ``read_mode`` again.  A missing or unrecognised value is
simply "no mode": it matches no mode-scoped entry and is not an error.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

DEFAULT_MODE_KEY = "MODE"
"""Store field holding the current mode."""


class Mode(StrEnum):
    """Recognised mode names for mode-scoped configuration."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


def read_mode(store: Mapping[str, str], mode_key: str = DEFAULT_MODE_KEY) -> Mode | None:
    """Return the store's current mode, or None if unset or unrecognised."""
    return mode_from_name(store.get(mode_key))


def mode_from_name(name: object) -> Mode | None:
    """Return the ``Mode`` called *name*, or None if there is no such mode.

    Configuration keys go through here too, so an unknown mode name in a
    mode-scoped mapping is an entry that never matches, not an error.
    """
    if isinstance(name, Mode):
        return name
    if not isinstance(name, str):
        return None
    try:
        return Mode(name)
    except ValueError:
        return None
