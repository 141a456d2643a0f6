"""Environment stores — where variables actually live.

Every process has an environment: a set of ``KEY=VALUE`` string pairs
such as ``PATH``, ``HOME`` or ``MODE``.  Typed access works over any
mutable string-to-string mapping; two are provided here:

- ``process_environ()`` — the real process environment (``os.environ``).
  This is the default and is only fetched at construction time, so
  everything below the construction boundary can be handed a different
  store in tests.
- ``Environment`` — an in-memory store for tests, sandboxes, or
  configuring a child process before launching it.

Key design properties:
    - **Strings only** — both keys and values must be strings.
    - **Copy-on-fork** — ``Environment.copy()`` returns an independent
      store; changes in the copy don't affect the original.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping, MutableMapping

from typed_env.errors import TypeCheckError


def process_environ() -> MutableMapping[str, str]:
    """Return the live process environment mapping."""
    return os.environ


class Environment(MutableMapping[str, str]):
    """An in-memory key-value store for environment variables.

    Each instance owns its own variables: the initial mapping is
    copied at construction, and ``copy()`` produces another independent
    store.  Once constructed, typed handles wrap the instance itself
    (never a copy), so writes through a handle are visible here.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        Raises:
            TypeCheckError: If any initial key or value is not a string.

        """
        self._vars: dict[str, str] = {}
        if initial:
            self.update(initial)

    def __getitem__(self, key: str) -> str:
        """Return the value for *key*, raising KeyError if unset."""
        return self._vars[key]

    def __setitem__(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        if not isinstance(key, str) or not isinstance(value, str):
            msg = f"Environment entries must be strings, got {key!r}={value!r}"
            raise TypeCheckError(msg)
        self._vars[key] = value

    def __delitem__(self, key: str) -> None:
        """Remove *key*, raising KeyError if it does not exist."""
        del self._vars[key]

    def __iter__(self) -> Iterator[str]:
        """Iterate over variable names in insertion order."""
        return iter(self._vars)

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(self._vars)

    def __repr__(self) -> str:
        """Show the variables like a dict."""
        return f"Environment({self._vars!r})"

    def copy(self) -> Environment:
        """Return an independent copy of this environment."""
        return Environment(initial=self._vars)
