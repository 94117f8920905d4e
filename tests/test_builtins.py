"""Tests for the bundled helpers."""

from leafpress.engines.builtins import (
    BUILTIN_HELPERS,
    helper_and,
    helper_contains,
    helper_default,
    helper_eq,
    helper_join,
    helper_json,
    helper_length,
    helper_or,
    helper_truncate,
)

OPTIONS = {"fn": lambda this: "yes", "inverse": lambda this: "no"}


def test_comparison_blocks():
    assert helper_eq(None, OPTIONS, 1, 1) == "yes"
    assert helper_eq(None, OPTIONS, 1, 2) == "no"
    assert helper_and(None, OPTIONS, True, 1, "x") == "yes"
    assert helper_and(None, OPTIONS, True, 0) == "no"
    assert helper_or(None, OPTIONS, 0, "", "x") == "yes"
    assert helper_or(None, OPTIONS, 0, None) == "no"


def test_contains():
    assert helper_contains(None, OPTIONS, ["a", "b"], "b") == "yes"
    assert helper_contains(None, OPTIONS, "leafpress", "press") == "yes"
    assert helper_contains(None, OPTIONS, None, "x") == "no"


def test_truncate():
    assert helper_truncate(None, "hello world", 5) == "hello"
    assert helper_truncate(None, "hello world", "5", "...") == "hello..."
    assert helper_truncate(None, "hi", 5, "...") == "hi"


def test_collections():
    assert helper_join(None, [1, 2, 3]) == "1, 2, 3"
    assert helper_join(None, ["a", "b"], "/") == "a/b"
    assert helper_join(None, None) == ""
    assert helper_length(None, [1, 2]) == 2
    assert helper_length(None, None) == 0


def test_default_and_json():
    assert helper_default(None, None, "fallback") == "fallback"
    assert helper_default(None, "", "fallback") == "fallback"
    assert helper_default(None, 0, "fallback") == 0
    assert helper_json(None, {"a": [1]}) == '{"a": [1]}'


def test_bundle_names():
    assert {"eq", "upper", "lower", "join", "json", "default"} <= set(BUILTIN_HELPERS)
    assert all(callable(helper) for helper in BUILTIN_HELPERS.values())
