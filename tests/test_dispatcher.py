#!/usr/bin/env python3
"""
Tests for the Dispatcher facade.
"""

import pytest
from unittest.mock import MagicMock

from cline import (
    Dispatcher,
    DuplicateRegistrationError,
    InvalidRegistrationError,
    NoMatchError,
)
from cline.config import Config


@pytest.fixture
def calls():
    """Record of (command name, args) for every callback invocation."""
    return []


@pytest.fixture
def cli(calls):
    """Dispatcher with "foo", "foo bar", "foo baz" and "list files"."""
    d = Dispatcher()
    for path in (["foo"], ["foo", "bar"], ["foo", "baz"], ["list", "files"]):
        name = " ".join(path)
        d.register(path, lambda args, name=name: calls.append((name, args)))
    return d


# ============================================================================
# Execution Tests
# ============================================================================

class TestExec:
    """Tests for Dispatcher.exec."""

    def test_exec_registered_path(self, cli, calls):
        cli.exec("list files")
        assert calls == [("list files", [])]

    def test_exec_every_path_without_args(self, cli, calls):
        for entry in cli.commands():
            cli.exec(" ".join(entry.path))
        assert calls == [(e.name, []) for e in cli.commands()]

    def test_exec_passes_residual_args(self, cli, calls):
        cli.exec("foo bar baz 1")
        assert calls == [("foo bar", ["baz", "1"])]

    def test_exec_extra_whitespace(self, cli, calls):
        cli.exec("   list\t files   -a  ")
        assert calls == [("list files", ["-a"])]

    def test_longest_match(self, cli, calls):
        cli.exec("foo bar")
        cli.exec("foo")
        cli.exec("foo qux")
        assert calls == [("foo bar", []), ("foo", []), ("foo", ["qux"])]

    def test_exec_multiple_times(self, cli, calls):
        cli.exec("foo bar")
        cli.exec("foo bar")
        assert calls == [("foo bar", []), ("foo bar", [])]

    def test_execute_alias(self, cli, calls):
        cli.execute("foo 1")
        assert calls == [("foo", ["1"])]

    def test_exec_returns_none(self):
        d = Dispatcher()
        d.register(["answer"], lambda args: 42)
        assert d.exec("answer") is None

    @pytest.mark.parametrize("line", ["", "   ", "unknown", "list", "list dirs"])
    def test_no_match(self, cli, calls, line):
        with pytest.raises(NoMatchError):
            cli.exec(line)
        assert calls == []

    def test_callback_exception_propagates(self):
        d = Dispatcher()

        def boom(args):
            raise RuntimeError("boom")

        d.register(["boom"], boom)
        with pytest.raises(RuntimeError, match="boom"):
            d.exec("boom")

    def test_resolve_does_not_invoke(self, cli, calls):
        res = cli.resolve("foo bar x")
        assert res.name == "foo bar"
        assert res.args == ["x"]
        assert calls == []


# ============================================================================
# Completion Tests
# ============================================================================

class TestComplete:
    """Tests for Dispatcher.complete."""

    def test_empty_line_lists_top_level(self, cli):
        assert cli.complete("") == ["foo", "list"]

    def test_partial_first_token(self, cli):
        assert cli.complete("f") == ["foo"]
        assert cli.complete("  f") == ["foo"]

    def test_trailing_space_lists_children(self, cli):
        assert cli.complete("foo ") == ["bar", "baz"]

    def test_partial_child(self, cli):
        assert cli.complete("foo b") == ["bar", "baz"]
        assert cli.complete("foo ba") == ["bar", "baz"]
        assert cli.complete("foo bar") == ["bar"]

    def test_matching_subset(self):
        d = Dispatcher()
        d.register(["foo", "bar"], print)
        d.register(["foo", "qux"], print)
        assert d.complete("foo b") == ["bar"]

    def test_unknown_prefix(self, cli):
        assert cli.complete("nope ") == []
        assert cli.complete("foo nope ") == []

    def test_idempotent(self, cli):
        assert cli.complete("foo ") == cli.complete("foo ")

    def test_dynamic_completion(self):
        d = Dispatcher()
        d.register_dyn_complete(["foo"], lambda args: None, lambda args: ["bar", "baz"])
        assert d.complete("f") == ["foo"]
        assert d.complete("foo a b") == ["bar", "baz"]

    def test_dynamic_completer_sees_typed_args(self):
        completer = MagicMock(return_value=["one", "two"])
        d = Dispatcher()
        d.register(["pick"], lambda args: None, complete=completer)
        assert d.complete("pick t") == ["two"]
        completer.assert_called_once_with(["t"])


# ============================================================================
# Registration Tests
# ============================================================================

class TestRegister:
    """Tests for Dispatcher.register."""

    def test_register_as_decorator(self):
        d = Dispatcher()
        seen = []

        @d.register(["list", "files"], description="List files")
        def list_files(args):
            seen.append(args)

        assert callable(list_files)
        d.exec("list files -l")
        assert seen == [["-l"]]
        assert d.describe(["list", "files"]) == "List files"
        assert d.describe(["list"]) is None
        assert d.describe(["nope"]) is None

    def test_register_returns_callback(self):
        d = Dispatcher()
        fn = lambda args: None  # noqa: E731
        assert d.register(["x"], fn) is fn

    @pytest.mark.parametrize("path", [[], ["", ""], ["foo", ""]])
    def test_invalid_paths(self, cli, path):
        before = cli.complete("")
        with pytest.raises(InvalidRegistrationError):
            cli.register(path, print)
        assert cli.complete("") == before

    def test_overwrite_by_default(self, cli, calls):
        cli.register(["foo", "bar"], lambda args: calls.append(("new", args)))
        cli.exec("foo bar")
        assert calls == [("new", [])]

    def test_error_policy_from_config(self, calls):
        d = Dispatcher(Config(on_duplicate="error"))
        d.register(["foo"], lambda args: calls.append("first"))
        with pytest.raises(DuplicateRegistrationError):
            d.register(["foo"], lambda args: calls.append("second"))
        d.exec("foo")
        assert calls == ["first"]

    def test_commands_listing(self, cli):
        assert [e.name for e in cli.commands()] == ["foo", "foo bar", "foo baz", "list files"]
