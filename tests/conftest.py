"""Shared fixtures for query DSL tests."""

from __future__ import annotations

import pytest

from elastic_query_dsl import DSLConfig


@pytest.fixture
def strict_config() -> DSLConfig:
    """Config that requires a field and only accepts term literals."""
    return DSLConfig(require_field=True, strict_values=True)
