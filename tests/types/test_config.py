"""Tests for MatcherSettings loading from the environment."""

import pytest

from graph_matcher.core.engine import the_same_as
from graph_matcher.types.config import MatcherSettings, get_matcher_settings
from helpers.trees import Tree


def test_defaults():
    settings = MatcherSettings()

    assert settings.log_level == "WARNING"
    assert settings.mismatch_separator == "\n"
    assert settings.value_repr_max_length == 80


def test_environment(monkeypatch):
    monkeypatch.setenv("GRAPH_MATCHER_LOG_LEVEL", "debug")
    monkeypatch.setenv("GRAPH_MATCHER_MISMATCH_SEPARATOR", " | ")
    monkeypatch.setenv("GRAPH_MATCHER_VALUE_REPR_MAX_LENGTH", "20")

    settings = get_matcher_settings()

    assert settings.log_level == "DEBUG"
    assert settings.mismatch_separator == " | "
    assert settings.value_repr_max_length == 20


def test_settings_are_cached():
    assert get_matcher_settings() is get_matcher_settings()


@pytest.mark.parametrize(
    "name, value",
    [
        ("GRAPH_MATCHER_LOG_LEVEL", "LOUD"),
        ("GRAPH_MATCHER_VALUE_REPR_MAX_LENGTH", "2"),
        ("GRAPH_MATCHER_VALUE_REPR_MAX_LENGTH", "many"),
    ],
    ids=["unknown-level", "too-short", "not-a-number"],
)
def test_invalid_environment(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError, match="Invalid graph matcher settings"):
        get_matcher_settings()


def test_engine_reads_environment(monkeypatch):
    monkeypatch.setenv("GRAPH_MATCHER_MISMATCH_SEPARATOR", " | ")
    sample = Tree("Elm")
    sample.age = 2

    description = the_same_as(Tree()).describe_mismatch(sample)

    assert description == 'Tree.name is "Elm" instead of "Oak" | Tree.age is 2 instead of 1'
