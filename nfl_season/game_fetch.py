from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Callable
from .gameids import game_date, http_get, proper_jsonurl_formatting
from .schema import SchemaError, parse_game_document


@dataclass(frozen=True)
class GameRecord:
    id: str
    date: date
    home_team: str
    away_team: str
    home_score: int
    away_score: int


def _get_json(url: str):
    resp = http_get(url)
    try:
        return resp.json()
    except ValueError as e:
        raise SchemaError(f"Response from {url} is not valid JSON") from e


def fetch_game(game_id: str,
               url_formatter: Callable[[str], str] = proper_jsonurl_formatting) -> GameRecord:
    """Fetch one game-center document and extract teams and final scores.

    Final scores are the maximum of each side's score series, which equals the
    last value of the running total and tolerates duplicated or unordered
    entries. Raises FetchError on transport failure and SchemaError when the
    document does not have the expected shape; no partial record is returned.
    """
    played = game_date(game_id)
    doc = parse_game_document(_get_json(url_formatter(game_id)))
    return GameRecord(
        id=game_id,
        date=played,
        home_team=doc.home.abbr,
        away_team=doc.away.abbr,
        home_score=doc.home.final_score,
        away_score=doc.away.final_score,
    )
