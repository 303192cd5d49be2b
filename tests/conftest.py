from __future__ import annotations
import json
import pytest
import requests
from nfl_season.gameids import proper_jsonurl_formatting


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str | None = None):
        self.payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return json.loads(self.text)


def gamecenter_doc(game_id: str, home: str, away: str, home_score, away_score) -> dict:
    """Minimal game-center payload: object keyed by game ID plus a trailer field."""
    return {
        game_id: {
            "home": {"players": None, "abbr": home, "to": 0, "score": home_score},
            "away": {"players": None, "abbr": away, "to": 1, "score": away_score},
            "weather": None,
            "qtr": "Final",
        },
        "nextupdate": 123,
    }


class FakeWeb:
    """Routes requests.get calls to canned responses and records every URL."""

    def __init__(self):
        self.routes: dict[str, FakeResponse] = {}
        self.calls: list[str] = []

    def add_game(self, game_id, home="NE", away="PIT", home_score=None, away_score=None):
        home_score = [7, 14, 21, 28] if home_score is None else home_score
        away_score = [0, 7, 14, 21] if away_score is None else away_score
        self.routes[proper_jsonurl_formatting(game_id)] = FakeResponse(
            gamecenter_doc(game_id, home, away, home_score, away_score)
        )

    def add(self, url, response: FakeResponse):
        self.routes[url] = response

    def get(self, url, timeout=None, **kwargs):
        self.calls.append(url)
        if url not in self.routes:
            return FakeResponse(status_code=404, text="not found")
        resp = self.routes[url]
        if isinstance(resp, Exception):
            raise resp
        return resp


@pytest.fixture
def web(monkeypatch):
    fake = FakeWeb()
    monkeypatch.setattr(requests, "get", fake.get)
    return fake
