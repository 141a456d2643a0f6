"""Tests for the environment stores.

``Environment`` is an in-memory string-to-string store with copy-on-fork
semantics; ``process_environ`` hands back the real process environment.
"""

import os

import pytest

from typed_env.env import Environment, process_environ
from typed_env.errors import TypeCheckError


class TestEnvironment:
    """Verify the Environment key-value store."""

    def test_get_and_set(self) -> None:
        """Setting a variable should make it retrievable."""
        env = Environment()
        env["HOME"] = "/root"
        assert env["HOME"] == "/root"

    def test_get_missing_returns_none(self) -> None:
        """get() on a missing key should return None."""
        env = Environment()
        assert env.get("MISSING") is None

    def test_get_missing_with_default(self) -> None:
        """get() on a missing key with a default should return the default."""
        env = Environment()
        assert env.get("MISSING", "fallback") == "fallback"

    def test_set_overwrites(self) -> None:
        """Setting an existing key should overwrite the value."""
        env = Environment()
        env["X"] = "old"
        env["X"] = "new"
        assert env["X"] == "new"

    def test_delete(self) -> None:
        """Deleting a variable should remove it."""
        env = Environment({"X": "val"})
        del env["X"]
        assert "X" not in env

    def test_delete_missing_raises(self) -> None:
        """Deleting a non-existent key should raise KeyError."""
        env = Environment()
        with pytest.raises(KeyError):
            del env["NOPE"]

    def test_items(self) -> None:
        """Items should return all key-value pairs."""
        env = Environment({"A": "1", "B": "2"})
        assert dict(env.items()) == {"A": "1", "B": "2"}

    def test_initial_is_copied(self) -> None:
        """Mutating the initial dict afterwards should not leak in."""
        initial = {"A": "1"}
        env = Environment(initial)
        initial["A"] = "changed"
        assert env["A"] == "1"

    def test_rejects_non_string_value(self) -> None:
        """Non-string values should be refused."""
        env = Environment()
        with pytest.raises(TypeCheckError):
            env["PORT"] = 8080  # type: ignore[assignment]
        assert "PORT" not in env

    def test_rejects_non_string_initial(self) -> None:
        """Non-string initial values should be refused too."""
        with pytest.raises(TypeCheckError):
            Environment({"PORT": 8080})  # type: ignore[dict-item]

    def test_copy_is_independent(self) -> None:
        """A copied environment should be independent of the original."""
        env = Environment({"X": "original"})
        child = env.copy()
        child["X"] = "modified"
        assert env["X"] == "original"
        assert child["X"] == "modified"

    def test_copy_inherits_all_vars(self) -> None:
        """A copy should start with all parent variables."""
        env = Environment({"A": "1", "B": "2"})
        child = env.copy()
        assert dict(child) == {"A": "1", "B": "2"}

    def test_len(self) -> None:
        """len() should return the number of variables."""
        env = Environment()
        assert len(env) == 0
        env["X"] = "1"
        assert len(env) == 1

    def test_repr_shows_vars(self) -> None:
        """repr() should show the variables."""
        assert repr(Environment({"A": "1"})) == "Environment({'A': '1'})"


class TestProcessEnviron:
    """Verify the default store accessor."""

    def test_returns_os_environ(self) -> None:
        """The default store should be os.environ itself, not a copy."""
        assert process_environ() is os.environ

    def test_sees_live_changes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Changes to the process environment should be visible."""
        store = process_environ()
        monkeypatch.setenv("TYPED_ENV_LIVE", "yes")
        assert store["TYPED_ENV_LIVE"] == "yes"
