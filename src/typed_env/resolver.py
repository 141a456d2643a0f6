"""Resolver — turn a key into a string or a clear failure.

Precedence, highest first:

1. **Store hit** — if the key exists in the store its value is returned
   untouched, even when it is an empty string.  Fallbacks and
   diagnostics are not consulted.
2. **Fallback** — on a miss, the configured fallback is reduced against
   the key and the current mode.
3. **Failure** — ``NotFoundError`` when no fallback is configured,
   ``InvalidFallbackError`` when the fallback had nothing to offer.

Each outcome other than a hit is reported to diagnostics before the
value is returned or the error raised.
"""

from __future__ import annotations

from collections.abc import MutableMapping

from typed_env.diagnostics import Diagnostics, ResolutionEvent
from typed_env.errors import InvalidFallbackError, NotFoundError, TypeCheckError
from typed_env.fallback import Fallback, reduce_fallback
from typed_env.modes import DEFAULT_MODE_KEY, read_mode


class Resolver:
    """Read and write variables in a store, applying fallbacks on misses.

    The resolver holds references only: the store is never copied, so
    outside mutations are visible on the next lookup and writes land in
    the caller's mapping.
    """

    def __init__(
        self,
        store: MutableMapping[str, str],
        fallback: Fallback | None,
        diagnostics: Diagnostics,
        *,
        mode_key: str = DEFAULT_MODE_KEY,
    ) -> None:
        """Create a resolver.

        Args:
            store: The environment store to read and write.
            fallback: Parsed fallback, or None for no fallback.
            diagnostics: Observer notified of misses.
            mode_key: Store field holding the current mode.

        """
        self._store = store
        self._fallback = fallback
        self._diagnostics = diagnostics
        self._mode_key = mode_key

    @property
    def store(self) -> MutableMapping[str, str]:
        """Return the underlying store (the same object, not a copy)."""
        return self._store

    def resolve(self, key: str) -> str:
        """Return the value for *key*.

        Args:
            key: The variable name.

        Returns:
            The stored value, or the fallback value on a miss.

        Raises:
            NotFoundError: If *key* is missing and no fallback is set.
            InvalidFallbackError: If the fallback yields nothing usable.

        """
        if key in self._store:
            return self._store[key]

        if self._fallback is None:
            self._diagnostics.observe(ResolutionEvent.NOT_FOUND, key)
            msg = f"Environment variable {key} not found"
            raise NotFoundError(msg)

        mode = read_mode(self._store, self._mode_key)
        value = reduce_fallback(self._fallback, key, mode)
        if value:
            self._diagnostics.observe(ResolutionEvent.FALLBACK_USED, key, value)
            return value

        self._diagnostics.observe(ResolutionEvent.INVALID_FALLBACK, key)
        msg = f"Invalid fallback value for environment variable {key}"
        raise InvalidFallbackError(msg)

    def assign(self, key: str, value: object) -> None:
        """Store *value* under *key*.

        Raises:
            TypeCheckError: If *value* is not a string.  The store is
                left unchanged.

        """
        if not isinstance(value, str):
            msg = (
                f"Environment variables must be strings. "
                f"Attempted to set {key} to {type(value).__name__}."
            )
            raise TypeCheckError(msg)
        self._store[key] = value
