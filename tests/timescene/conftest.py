"""Shared fixtures for timescene tests."""

from __future__ import annotations

import pytest

from timescene import DynamicObjectCollection, SceneDataSource


@pytest.fixture
def collection() -> DynamicObjectCollection:
    return DynamicObjectCollection()


@pytest.fixture
def data_source() -> SceneDataSource:
    return SceneDataSource()


@pytest.fixture
def satellite_doc() -> list[dict]:
    """Two entities available across one hour, no document clock."""
    return [
        {"id": "document", "version": "1.0"},
        {
            "id": "sat-1",
            "name": "Satellite 1",
            "availability": "2012-03-15T10:00:00Z/2012-03-15T10:30:00Z",
            "position": {"cartographicDegrees": [0, 0, 0]},
        },
        {
            "id": "sat-2",
            "availability": "2012-03-15T10:20:00Z/2012-03-15T11:00:00Z",
        },
    ]


@pytest.fixture
def clock_doc() -> list[dict]:
    """Document packet with an explicit clock block."""
    return [
        {
            "id": "document",
            "clock": {
                "interval": "2012-03-15T10:00:00Z/2012-03-16T10:00:00Z",
                "currentTime": "2012-03-15T12:00:00Z",
                "multiplier": 60.0,
                "range": "CLAMPED",
                "step": "SYSTEM_CLOCK",
            },
        },
        {
            "id": "sat-1",
            "availability": "2012-03-15T10:00:00Z/2012-03-15T10:30:00Z",
        },
    ]
