"""
Shared test configuration, fixtures, and markers for wmsc tests.
"""

import os
from pathlib import Path

import pytest

from wmsc.serializer import to_xml

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure test markers."""
    config.addinivalue_line("markers", "unit: marks unit tests (fast, pure logic)")
    config.addinivalue_line("markers", "property: marks property-based tests")
    config.addinivalue_line("markers", "snapshot: marks tests compared against tests/fixtures")


@pytest.fixture
def service_options():
    """Options for the reference capabilities document."""
    return {
        "title": "Tile Service",
        "spaces": 2,
        "abstract": "© OSM data",
        "minzoom": 10,
        "maxzoom": 18,
        "bbox": [-180, -85, 180, 85],
        "url": "http://localhost:80/WMTS",
        "keywords": ["world", "imagery", "wms-c"],
        "format": "jpg",
        "identifier": "osm",
    }


@pytest.fixture
def compare():
    """
    Compare XML text or an element tree against a fixture file.

    Set ``REGEN=1`` to rewrite the fixture from the current output.
    """

    def _compare(data, fixture: str) -> None:
        path = FIXTURES_DIR / fixture
        xml = data if isinstance(data, str) else to_xml(data, spaces=2)
        if os.environ.get("REGEN"):
            path.write_text(xml + "\n", encoding="utf-8")
        assert xml == path.read_text(encoding="utf-8").rstrip("\n"), fixture

    return _compare
