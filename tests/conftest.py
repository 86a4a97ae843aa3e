from __future__ import annotations

import json
from datetime import date
from typing import List, Optional

import pytest
import requests

from visitmap.models import Visit


def make_response(status: int = 200, body=None, raw: Optional[bytes] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = "https://geocode.test/json"
    response.encoding = "utf-8"
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    return response


class FakeSession:
    """Stands in for ``requests.Session``; replays canned responses or raises."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls: List[dict] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def geocode_body(*results) -> dict:
    return {
        "results": [
            {
                "formatted_address": address,
                "geometry": {"location": {"lat": lat, "lng": lng}},
            }
            for address, lat, lng in results
        ],
        "status": "OK",
    }


@pytest.fixture
def make_visit():
    def _make(
        address: str = "123 Main St",
        when: date = date(2020, 1, 1),
        purpose: str = "museum",
        lat: float = 40.0,
        lng: float = -75.0,
    ) -> Visit:
        return Visit(address=address, when=when, purpose=purpose, lat=lat, lng=lng)

    return _make
