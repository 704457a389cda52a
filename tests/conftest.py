"""Shared fixtures for resourcegen tests.

The sample schema in fixtures/sample-api.json covers every naming rule:
collections, {id} items, actions, tag fallback, auth paths, resources that
collide on their formatted name, and an unroutable path.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

FIXTURES = Path(__file__).parent / "fixtures"
SAMPLE_SCHEMA = FIXTURES / "sample-api.json"


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def sample_schema_path() -> Path:
    return SAMPLE_SCHEMA


@pytest.fixture
def sample_spec() -> dict[str, Any]:
    """A fresh copy of the sample schema for every test."""
    return json.loads(SAMPLE_SCHEMA.read_text(encoding="utf-8"))


@pytest.fixture
def make_spec() -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Build a minimal schema around a paths mapping.

    Usage::

        spec = make_spec({"/api/tasks": {"get": {}}})
    """
    def _make(paths: dict[str, Any]) -> dict[str, Any]:
        return {
            "openapi": "3.1.0",
            "info": {"title": "Test API", "version": "1.0.0"},
            "paths": paths,
        }
    return _make


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging().

    The CLI binds its handler to sys.stderr at configure time, and CliRunner
    swaps sys.stderr per invocation.
    """
    yield
    root_logger = logging.getLogger("resourcegen")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
