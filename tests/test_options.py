"""Tests for construction options.

``EnvOptions.build`` validates raw keyword arguments and parses them
into the typed forms the resolver works with.
"""

import os

import pytest

from typed_env.access import EagerEnv, LazyEnv, from_options
from typed_env.diagnostics import LogPolicy
from typed_env.errors import ConfigurationError
from typed_env.fallback import LiteralFallback
from typed_env.logging import Logger, console_sink
from typed_env.modes import DEFAULT_MODE_KEY
from typed_env.options import EnvOptions


class TestBuild:
    """Verify option normalisation."""

    def test_defaults(self) -> None:
        """No arguments gives os.environ, eager, no fallback, no logging."""
        options = EnvOptions.build()
        assert options.env is os.environ
        assert options.lazy is False
        assert options.fallback is None
        assert options.log == LogPolicy()
        assert options.sink is console_sink
        assert options.mode_key == DEFAULT_MODE_KEY

    def test_store_is_not_copied(self) -> None:
        """The supplied store is kept by reference."""
        store: dict[str, str] = {}
        assert EnvOptions.build(env=store).env is store

    def test_parses_fallback_and_log(self) -> None:
        """Raw fallback and log values are parsed."""
        options = EnvOptions.build(fallback="x", log=True)
        assert options.fallback == LiteralFallback("x")
        assert options.log == LogPolicy(always=True)

    def test_keeps_custom_sink(self) -> None:
        """A supplied sink is used as-is."""
        sink = Logger()
        assert EnvOptions.build(sink=sink).sink is sink

    def test_rejects_non_bool_lazy(self) -> None:
        """lazy must be a real bool."""
        with pytest.raises(ConfigurationError, match="lazy"):
            EnvOptions.build(lazy="yes")  # type: ignore[arg-type]

    def test_rejects_empty_mode_key(self) -> None:
        """mode_key must name a variable."""
        with pytest.raises(ConfigurationError, match="mode_key"):
            EnvOptions.build(mode_key="")

    def test_rejects_uncallable_sink(self) -> None:
        """sink must be callable."""
        with pytest.raises(ConfigurationError, match="sink"):
            EnvOptions.build(sink="stderr")  # type: ignore[arg-type]

    def test_options_are_frozen(self) -> None:
        """Options cannot be changed after validation."""
        options = EnvOptions.build(env={})
        with pytest.raises(AttributeError):
            options.lazy = True  # type: ignore[misc]


class TestFromOptions:
    """Verify handle creation from validated options."""

    def test_eager(self) -> None:
        """lazy=False gives an eager handle."""
        assert isinstance(from_options(EnvOptions.build(env={})), EagerEnv)

    def test_lazy(self) -> None:
        """lazy=True gives a lazy handle."""
        assert isinstance(from_options(EnvOptions.build(env={}, lazy=True)), LazyEnv)

    def test_reusable(self) -> None:
        """One options object can back several handles over the same store."""
        store = {"A": "1"}
        options = EnvOptions.build(env=store)
        first = from_options(options)
        second = from_options(options)
        first.A = "2"
        assert second.A == "2"
