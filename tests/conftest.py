"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

import httpx
import pytest

# Ensure project root is on path when running pytest from repo root or tests/
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))


@pytest.fixture
def route_config_body():
    """routeConfig payload with one stop, one direction and no path."""
    return {
        "copyright": "All data copyright Toronto Transit Commission 2024.",
        "route": {
            "title": "510-Spadina",
            "tag": "510",
            "color": "ff0000",
            "oppositeColor": "ffffff",
            "latMin": "43.6367799",
            "latMax": "43.6677899",
            "lonMin": "-79.4065999",
            "lonMax": "-79.3924099",
            "stop": [
                {
                    "title": "Spadina Station",
                    "stopId": "14339",
                    "tag": "14339",
                    "lat": "43.6671999",
                    "lon": "-79.40367",
                }
            ],
            "direction": [
                {
                    "title": "South - 510 Spadina towards Union Station",
                    "tag": "510_0_510",
                    "name": "South",
                    "branch": "510",
                    "useForUI": "true",
                    "stop": [{"tag": "14339"}],
                }
            ],
        },
    }


@pytest.fixture
def make_response():
    """Build real httpx.Response objects bound to a request so raise_for_status works."""

    def _make(status_code: int = 200, json=None, content: bytes | None = None) -> httpx.Response:
        request = httpx.Request("GET", "http://example.test/feed")
        if json is not None:
            return httpx.Response(status_code, json=json, request=request)
        return httpx.Response(status_code, content=content or b"", request=request)

    return _make
