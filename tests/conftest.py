"""Pytest configuration for all tests."""

import pytest

from graph_matcher.core.utils import logger
from graph_matcher.types.config import get_matcher_settings
from helpers.trees import Tree


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    get_matcher_settings.cache_clear()
    yield
    get_matcher_settings.cache_clear()


@pytest.fixture
def package_logger():
    """Package logger, restored to its initial state after the test."""
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def reference() -> Tree:
    return Tree()


@pytest.fixture
def sample() -> Tree:
    return Tree()
