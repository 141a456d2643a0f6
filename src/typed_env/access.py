"""Access handles — typed, attribute-style access to an environment store.

``create_typed_env`` returns one of two handles, chosen once at
construction and fixed for the handle's lifetime:

- **EagerEnv** — reading ``env.KEY`` resolves immediately and returns
  the string.  Assigning ``env.KEY = "v"`` writes to the store.
- **LazyEnv** — reading ``env.KEY`` returns a ``LazyAccessor``.
  Calling ``env.KEY()`` resolves; calling ``env.KEY("v")`` writes and
  then returns the freshly resolved value.  Assignment syntax is
  rejected so there is exactly one write path.

The key space is open: any string is a valid key.  Item syntax
(``env["KEY"]``) always works; attribute syntax is a convenience for
names that don't start with an underscore, since those belong to
Python's own protocols.

Example::

    env = create_typed_env(fallback={"env": {"development": "localhost"}})
    env.DB_HOST          # "localhost" when MODE=development and DB_HOST unset
    env.DB_HOST = "db"   # writes os.environ["DB_HOST"]

Handles hold nothing but their resolver, which in turn only references
the store, so a handle can be shared and reused freely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Literal, overload

from typed_env.diagnostics import Diagnostics
from typed_env.errors import InvalidAccessModeError
from typed_env.logging import Sink
from typed_env.modes import DEFAULT_MODE_KEY
from typed_env.options import EnvOptions
from typed_env.resolver import Resolver


class TypedEnv(ABC):
    """Common plumbing for eager and lazy handles.

    Attribute access and assignment are forwarded to ``__getitem__`` and
    ``__setitem__``, which each discipline must define.
    """

    __slots__ = ("_resolver",)

    _resolver: Resolver

    def __init__(self, resolver: Resolver) -> None:
        """Wrap *resolver*."""
        object.__setattr__(self, "_resolver", resolver)

    def __getattr__(self, name: str) -> Any:
        """Look up *name* as a variable."""
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __setattr__(self, name: str, value: object) -> None:
        """Write *name* as a variable."""
        if name.startswith("_"):
            msg = f"Cannot set {name} by attribute; use env[{name!r}] = ... instead."
            raise AttributeError(msg)
        self[name] = value

    @abstractmethod
    def __getitem__(self, key: str) -> Any:
        """Read *key* according to the handle's discipline."""

    @abstractmethod
    def __setitem__(self, key: str, value: object) -> None:
        """Write *key* according to the handle's discipline."""

    def __reduce__(self) -> tuple[type[TypedEnv], tuple[Resolver]]:
        """Rebuild through ``__init__`` so copy and pickle bypass ``__setattr__``."""
        return type(self), (self._resolver,)

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set in the store (fallbacks ignored)."""
        return key in self._resolver.store

    def __repr__(self) -> str:
        """Name the discipline without dumping the store's contents."""
        return f"<{type(self).__name__}>"


class EagerEnv(TypedEnv):
    """Handle whose reads return values directly."""

    __slots__ = ()

    def __getitem__(self, key: str) -> str:
        """Resolve *key* now.

        Raises:
            NotFoundError: If *key* is missing and no fallback applies.

        """
        return self._resolver.resolve(key)

    def __setitem__(self, key: str, value: object) -> None:
        """Store *value* under *key*.

        Raises:
            TypeCheckError: If *value* is not a string.

        """
        self._resolver.assign(key, value)


@dataclass(frozen=True)
class LazyAccessor:
    """Deferred read/write access to a single variable."""

    resolver: Resolver
    key: str

    def __call__(self, value: str | None = None) -> str:
        """Resolve the variable, first writing *value* if one is given.

        Raises:
            NotFoundError: If the variable is missing and no fallback
                applies.
            TypeCheckError: If *value* is given but is not a string.

        """
        if value is not None:
            self.resolver.assign(self.key, value)
        return self.resolver.resolve(self.key)


class LazyEnv(TypedEnv):
    """Handle whose reads return ``LazyAccessor`` functions."""

    __slots__ = ()

    def __getitem__(self, key: str) -> LazyAccessor:
        """Return a deferred accessor for *key*."""
        return LazyAccessor(self._resolver, key)

    def __setitem__(self, key: str, value: object) -> None:
        """Reject assignment; lazy handles are written by calling.

        Raises:
            InvalidAccessModeError: Always.

        """
        msg = (
            f"Attempted to set lazy environment variable {key} via assignment. "
            f"Use the function call env.{key}('value') instead."
        )
        raise InvalidAccessModeError(msg)


@overload
def create_typed_env(
    *,
    env: MutableMapping[str, str] | None = ...,
    lazy: Literal[False] = ...,
    fallback: object = ...,
    log: object = ...,
    sink: Sink | None = ...,
    mode_key: str = ...,
) -> EagerEnv: ...


@overload
def create_typed_env(
    *,
    env: MutableMapping[str, str] | None = ...,
    lazy: Literal[True],
    fallback: object = ...,
    log: object = ...,
    sink: Sink | None = ...,
    mode_key: str = ...,
) -> LazyEnv: ...


def create_typed_env(
    *,
    env: MutableMapping[str, str] | None = None,
    lazy: bool = False,
    fallback: object = None,
    log: object = None,
    sink: Sink | None = None,
    mode_key: str = DEFAULT_MODE_KEY,
) -> EagerEnv | LazyEnv:
    """Create a typed handle over an environment store.

    Args:
        env: Store to wrap (not copied).  Defaults to ``os.environ``.
        lazy: Return ``LazyEnv`` instead of ``EagerEnv``.
        fallback: Value source for missing keys: a string, a per-key
            mapping, a ``key -> str`` function, or
            ``{"env": {mode: fallback}}`` for mode-scoped fallbacks.
        log: ``True`` to warn on every miss, or ``{mode: bool}`` to warn
            only in some modes.
        sink: Receives warning strings; defaults to the ``typed_env``
            logger.
        mode_key: Store field holding the current mode.

    Returns:
        The handle.

    Raises:
        ConfigurationError: If any option has an unusable shape.

    """
    options = EnvOptions.build(
        env=env,
        lazy=lazy,
        fallback=fallback,
        log=log,
        sink=sink,
        mode_key=mode_key,
    )
    return from_options(options)


def from_options(options: EnvOptions) -> EagerEnv | LazyEnv:
    """Create a handle from already-validated options."""
    diagnostics = Diagnostics(options.env, options.log, options.sink, mode_key=options.mode_key)
    resolver = Resolver(options.env, options.fallback, diagnostics, mode_key=options.mode_key)
    return LazyEnv(resolver) if options.lazy else EagerEnv(resolver)
