"""Typed access to environment variables with fallbacks and lazy reads.

Re-exports public symbols so callers can write::

    from typed_env import create_typed_env, NotFoundError
"""

from typed_env.access import (
    EagerEnv,
    LazyAccessor,
    LazyEnv,
    TypedEnv,
    create_typed_env,
    from_options,
)
from typed_env.diagnostics import Diagnostics, LogPolicy, ResolutionEvent
from typed_env.env import Environment, process_environ
from typed_env.errors import (
    ConfigurationError,
    InvalidAccessModeError,
    InvalidFallbackError,
    NotFoundError,
    TypeCheckError,
    TypedEnvError,
)
from typed_env.fallback import (
    Fallback,
    FunctionFallback,
    LiteralFallback,
    MappingFallback,
    ModeFallback,
    UnusableFallback,
    parse_fallback,
    reduce_fallback,
)
from typed_env.logging import Logger, Sink, console_sink
from typed_env.modes import DEFAULT_MODE_KEY, Mode, mode_from_name, read_mode
from typed_env.options import EnvOptions
from typed_env.resolver import Resolver

__all__ = [
    "DEFAULT_MODE_KEY",
    "ConfigurationError",
    "Diagnostics",
    "EagerEnv",
    "EnvOptions",
    "Environment",
    "Fallback",
    "FunctionFallback",
    "InvalidAccessModeError",
    "InvalidFallbackError",
    "LazyAccessor",
    "LazyEnv",
    "LiteralFallback",
    "LogPolicy",
    "Logger",
    "MappingFallback",
    "Mode",
    "ModeFallback",
    "NotFoundError",
    "ResolutionEvent",
    "Resolver",
    "Sink",
    "TypeCheckError",
    "TypedEnv",
    "TypedEnvError",
    "UnusableFallback",
    "console_sink",
    "create_typed_env",
    "from_options",
    "parse_fallback",
    "process_environ",
    "mode_from_name",
    "read_mode",
    "reduce_fallback",
]
