"""Log sinks — where resolution warnings end up.

A sink is any ``Callable[[str], None]``.  Two are provided:

- **console_sink** — forwards to the standard ``logging`` module at
  WARNING level on the ``typed_env`` logger.  This is the default.
  The library never installs handlers; configuring output is left to
  the application.
- **Logger** — an append-only in-memory buffer, handy for tests and
  for applications that want to report missing variables at startup
  (the equivalent of reading back ``dmesg`` after boot).

Design choices:
    - **Entries are plain strings** — the sink contract is "accepts a
      string"; anything richer would leak diagnostics internals.
    - **Filter returns a list, not a generator** — the buffer is small
      and callers usually iterate more than once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

LOGGER_NAME = "typed_env"

Sink = Callable[[str], None]

_log = logging.getLogger(LOGGER_NAME)


def console_sink(message: str) -> None:
    """Emit *message* as a warning on the ``typed_env`` logger."""
    _log.warning(message)


class Logger:
    """Collect warnings in memory instead of printing them.

    Instances are callable, so one can be passed directly as the
    ``sink`` option of ``create_typed_env``.
    """

    def __init__(self) -> None:
        """Create an empty buffer."""
        self._entries: list[str] = []

    def __call__(self, message: str) -> None:
        """Append *message* to the buffer."""
        self._entries.append(message)

    @property
    def entries(self) -> list[str]:
        """Return all collected messages in the order they arrived."""
        return list(self._entries)

    def filter(self, substring: str) -> list[str]:
        """Return the messages containing *substring*."""
        return [entry for entry in self._entries if substring in entry]

    def clear(self) -> None:
        """Remove all collected messages."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of collected messages."""
        return len(self._entries)
