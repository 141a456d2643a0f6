"""Diagnostics — warn about variables that had to be papered over.

Diagnostics watch the resolver from the side.  They are told about
three outcomes and decide, per the configured ``LogPolicy``, whether to
pass a formatted message on to the sink:

- **FALLBACK_USED** — the key was missing; a fallback value was used.
- **NOT_FOUND** — the key was missing and no fallback is configured.
- **INVALID_FALLBACK** — a fallback is configured but had nothing for
  this key under the current mode.

Store hits are never reported.  Observation never changes the outcome
of a lookup and never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from typed_env.errors import ConfigurationError
from typed_env.logging import Sink, console_sink
from typed_env.modes import DEFAULT_MODE_KEY, Mode, mode_from_name, read_mode

_log = logging.getLogger(__name__)


class ResolutionEvent(StrEnum):
    """Resolution outcomes worth reporting."""

    FALLBACK_USED = "fallback_used"
    NOT_FOUND = "not_found"
    INVALID_FALLBACK = "invalid_fallback"


@dataclass(frozen=True)
class LogPolicy:
    """Decide whether a resolution event should be logged.

    Attributes:
        always: Log regardless of mode.
        modes: When ``always`` is false, log only in these modes.

    """

    always: bool = False
    modes: frozenset[Mode] = frozenset()

    @classmethod
    def parse(cls, raw: object) -> LogPolicy:
        """Build a policy from an option value.

        Args:
            raw: ``None``/``False`` (never log), ``True`` (always log),
                a mapping of mode name to bool, or an existing policy.
                Unknown mode names in the mapping never match.

        Raises:
            ConfigurationError: If *raw* has any other shape.

        """
        match raw:
            case LogPolicy():
                return raw
            case None | False:
                return cls()
            case True:
                return cls(always=True)
            case Mapping():
                enabled: set[Mode] = set()
                for name, flag in raw.items():
                    if not isinstance(flag, bool):
                        msg = f"Log flag for mode {name!r} must be a bool, got {flag!r}"
                        raise ConfigurationError(msg)
                    mode = mode_from_name(name)
                    if flag and mode is not None:
                        enabled.add(mode)
                return cls(modes=frozenset(enabled))
            case _:
                msg = f"Invalid log option: {raw!r}"
                raise ConfigurationError(msg)

    def enabled(self, mode: Mode | None) -> bool:
        """Return True if events should be logged under *mode*."""
        if self.always:
            return True
        return mode is not None and mode in self.modes


def format_event(event: ResolutionEvent, key: str, detail: str | None = None) -> str:
    """Render the warning text for *event* on *key*."""
    match event:
        case ResolutionEvent.FALLBACK_USED:
            return f"Environment variable {key} not found, using fallback: {detail}"
        case ResolutionEvent.NOT_FOUND:
            return f"Environment variable {key} not found"
        case ResolutionEvent.INVALID_FALLBACK:
            return f"Invalid fallback value for environment variable {key}"


class Diagnostics:
    """Report resolution events to a sink according to a policy.

    The mode is read from the store at observation time, the same way
    the resolver reads it, so a mode change between lookups is honoured
    immediately.
    """

    def __init__(
        self,
        store: Mapping[str, str],
        policy: LogPolicy,
        sink: Sink = console_sink,
        *,
        mode_key: str = DEFAULT_MODE_KEY,
    ) -> None:
        """Create diagnostics over *store*.

        Args:
            store: The environment store (read only for the mode).
            policy: When to emit.
            sink: Where to emit.
            mode_key: Store field holding the current mode.

        """
        self._store = store
        self._policy = policy
        self._sink = sink
        self._mode_key = mode_key

    @property
    def policy(self) -> LogPolicy:
        """Return the active log policy."""
        return self._policy

    def observe(self, event: ResolutionEvent, key: str, detail: str | None = None) -> None:
        """Emit a warning for *event* if the policy allows it."""
        if not self._policy.enabled(read_mode(self._store, self._mode_key)):
            return
        message = format_event(event, key, detail)
        try:
            self._sink(message)
        except Exception:  # noqa: BLE001
            _log.debug("Log sink failed for %r", message, exc_info=True)
