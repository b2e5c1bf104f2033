"""Pytest configuration and fixtures."""

import pytest


INTERVAL = "2012-01-01T00:00:00Z/2012-01-01T01:00:00Z"


@pytest.fixture
def interval():
    """An hour long ISO 8601 interval."""
    return INTERVAL


@pytest.fixture
def billboard_packet_json():
    """A packet with a billboard of two fields."""
    return {
        "id": "p1",
        "billboard": {
            "scale": 0.7,
            "image": "http://localhost/img.png",
        },
    }


@pytest.fixture
def sampled_position_json():
    """A position with one interval of two time tagged samples."""
    return {
        "interval": INTERVAL,
        "cartesian": [0, 0, 0, 0, 3600, 1, 1, 1],
    }


@pytest.fixture
def document_json():
    """A document packet followed by three packets."""
    return [
        {
            "id": "document",
            "name": "simple",
            "version": "1.0",
            "clock": {
                "interval": INTERVAL,
                "currentTime": "2012-01-01T00:00:00Z",
                "multiplier": 60,
                "range": "LOOP_STOP",
                "step": "SYSTEM_CLOCK_MULTIPLIER",
            },
        },
        {
            "id": "facility",
            "name": "Facility",
            "position": {"cartographicDegrees": [-75.6, 40.0, 0]},
            "label": {"text": "Facility", "horizontalOrigin": "LEFT"},
        },
        {
            "id": "satellite",
            "availability": INTERVAL,
            "position": {
                "interval": INTERVAL,
                "epoch": "2012-01-01T00:00:00Z",
                "interpolationAlgorithm": "LAGRANGE",
                "interpolationDegree": 5,
                "referenceFrame": "INERTIAL",
                "cartesian": [0, 7000000, 0, 0, 3600, 0, 7000000, 0],
            },
            "path": {
                "material": {"solidColor": {"color": {"rgba": [255, 255, 0, 255]}}},
                "width": 1,
                "leadTime": 600,
            },
        },
        {
            "id": "area",
            "polygon": {
                "positions": {"cartographicDegrees": [0, 0, 0, 1, 0, 0, 1, 1, 0]},
                "material": {"solidColor": {"color": {"rgbaf": [1.0, 0.0, 0.0, 0.5]}}},
                "outline": True,
            },
        },
    ]
