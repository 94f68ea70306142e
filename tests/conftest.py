"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from shapecheck import Schema, array, literal, number, object_, string, union


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def point_schema() -> Schema:
    """Object schema with two numeric fields."""
    return object_({"x": number(), "y": number()})


@pytest.fixture
def nested_schema() -> Schema:
    """Object containing an array of objects."""
    return object_({"a": array(object_({"b": number()}))})


@pytest.fixture
def event_schema() -> Schema:
    """Union of two objects discriminated by their "kind" key."""
    return union(
        object_({"kind": literal("a"), "x": number()}),
        object_({"kind": literal("b"), "y": string()}),
    )
