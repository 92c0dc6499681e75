"""Tests for the package logger setup."""

import logging

import pytest

from graph_matcher import setup_graph_matcher_logging, the_same_as


def test_setup_logging(package_logger, capsys):
    setup_graph_matcher_logging("debug")

    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1
    assert not package_logger.propagate

    the_same_as([1]).match([2])

    out = capsys.readouterr().out
    assert "[Graph Matcher] [DEBUG] Compare path [list] as collection" in out
    assert "[Graph Matcher] [DEBUG] Compared [list]: different (1 mismatches, 1 pairs visited)" in out


def test_setup_logging_is_idempotent(package_logger):
    setup_graph_matcher_logging(logging.INFO)
    setup_graph_matcher_logging(logging.INFO)

    assert len(package_logger.handlers) == 1


def test_setup_logging_level_from_environment(package_logger, monkeypatch):
    monkeypatch.setenv("GRAPH_MATCHER_LOG_LEVEL", "error")

    setup_graph_matcher_logging()

    assert package_logger.level == logging.ERROR


def test_setup_logging_unknown_level(package_logger):
    with pytest.raises(ValueError, match="Unknown logging level: LOUD"):
        setup_graph_matcher_logging("LOUD")
