"""Construction options for typed environment handles.

``EnvOptions`` is the validated form of the keyword arguments accepted
by ``create_typed_env``.  Raw option values are loose (a fallback can be
a string, a dict, a lambda...); ``EnvOptions.build`` parses them into
their typed forms once, so the resolver never has to second-guess its
configuration.

Recognised options:
    - **env** — the store to wrap; defaults to the process environment.
    - **lazy** — deferred accessor functions instead of direct values.
    - **fallback** — what to use for missing variables.
    - **log** — when to warn about missing variables.
    - **sink** — where warnings go; defaults to the ``typed_env`` logger.
    - **mode_key** — store field holding the current mode.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

from typed_env.diagnostics import LogPolicy
from typed_env.env import process_environ
from typed_env.errors import ConfigurationError
from typed_env.fallback import Fallback, parse_fallback
from typed_env.logging import Sink, console_sink
from typed_env.modes import DEFAULT_MODE_KEY


@dataclass(frozen=True)
class EnvOptions:
    """Validated configuration for one typed handle."""

    env: MutableMapping[str, str]
    lazy: bool = False
    fallback: Fallback | None = None
    log: LogPolicy = LogPolicy()
    sink: Sink = console_sink
    mode_key: str = DEFAULT_MODE_KEY

    @classmethod
    def build(
        cls,
        *,
        env: MutableMapping[str, str] | None = None,
        lazy: bool = False,
        fallback: object = None,
        log: object = None,
        sink: Sink | None = None,
        mode_key: str = DEFAULT_MODE_KEY,
    ) -> EnvOptions:
        """Validate raw option values.

        Args:
            env: Store to wrap (not copied).  None means ``os.environ``.
            lazy: Select the lazy access discipline.
            fallback: Raw fallback; see ``parse_fallback``.
            log: Raw log policy; see ``LogPolicy.parse``.
            sink: Warning sink.  None means the ``typed_env`` logger.
            mode_key: Store field holding the current mode.

        Returns:
            The normalised options.

        Raises:
            ConfigurationError: If any option has an unusable shape.

        """
        if not isinstance(lazy, bool):
            msg = f"lazy must be a bool, got {lazy!r}"
            raise ConfigurationError(msg)
        if not isinstance(mode_key, str) or not mode_key:
            msg = f"mode_key must be a non-empty string, got {mode_key!r}"
            raise ConfigurationError(msg)
        if sink is not None and not callable(sink):
            msg = f"sink must be callable, got {sink!r}"
            raise ConfigurationError(msg)
        return cls(
            env=process_environ() if env is None else env,
            lazy=lazy,
            fallback=parse_fallback(fallback),
            log=LogPolicy.parse(log),
            sink=console_sink if sink is None else sink,
            mode_key=mode_key,
        )
