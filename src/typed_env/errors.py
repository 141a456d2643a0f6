"""Exceptions raised by typed environment access.

Every failure is local and synchronous: the error is raised to whoever
performed the read or write and is never retried or swallowed.

Hierarchy:
    - **TypedEnvError** — common base, catch this to handle everything.
    - **NotFoundError** — the key is missing and nothing could stand in.
    - **InvalidFallbackError** — a fallback was configured but produced
      no value for this key and mode.  A subclass of ``NotFoundError``
      because, from the caller's side, the variable is still missing.
    - **TypeCheckError** — a write was given a non-string value.
    - **InvalidAccessModeError** — assignment syntax on a lazy handle.
    - **ConfigurationError** — malformed construction options.
"""


class TypedEnvError(Exception):
    """Base class for every typed environment error."""


class NotFoundError(TypedEnvError, LookupError):
    """Raise when a variable is absent and no fallback applies."""


class InvalidFallbackError(NotFoundError):
    """Raise when the configured fallback yields no usable value."""


class TypeCheckError(TypedEnvError, TypeError):
    """Raise when a non-string value is written to the store."""


class InvalidAccessModeError(TypedEnvError, AttributeError):
    """Raise when a lazy handle is written with assignment syntax."""


class ConfigurationError(TypedEnvError, ValueError):
    """Raise when construction options have an unusable shape."""
