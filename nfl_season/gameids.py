from __future__ import annotations
import re
from datetime import date, datetime
from typing import Iterable
import requests
from .config import GAMECENTER_URL, SCHEDULE_URL, REQUEST_TIMEOUT, REGULAR_SEASON_WEEKS


GAMEID_PATTERN = re.compile(r'data-gameid="(\d{10})"')


class FetchError(RuntimeError):
    """Transport failure or non-2xx response from a remote resource."""


class DateParseError(ValueError):
    """A game ID does not start with a valid YYYYMMDD date."""


def proper_jsonurl_formatting(game_id: str) -> str:
    """Game-center JSON URL for a single game."""
    return GAMECENTER_URL.format(game_id=game_id)


def http_get(url: str) -> requests.Response:
    """Single blocking GET; transport errors and non-2xx statuses raise FetchError."""
    try:
        resp = requests.get(url, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}") from e
    return resp


def _get_text(url: str) -> str:
    print(f"Making request to {url}")
    return http_get(url).text


def extracting_gameids(season: int, weeks: int = REGULAR_SEASON_WEEKS) -> list[str]:
    """Enumerate regular-season game IDs from the weekly schedule pages.

    IDs keep the order they first appear in (week 1 first). A week page with no
    IDs contributes nothing; an empty overall result is left for the caller to
    reject.
    """
    game_ids: list[str] = []
    seen: set[str] = set()
    for week in range(1, weeks + 1):
        html = _get_text(SCHEDULE_URL.format(season=season, week=week))
        found = GAMEID_PATTERN.findall(html)
        if not found:
            print(f"WARNING: No game IDs found for {season} week {week}")
        for gid in found:
            if gid not in seen:
                seen.add(gid)
                game_ids.append(gid)
    print(f"Found {len(game_ids)} game IDs for {season}")
    return game_ids


def game_date(game_id: str) -> date:
    """Calendar date encoded in the first 8 characters of a game ID.

    Characters 1-4 are the year, 5-6 the month and 7-8 the day. Anything after
    position 8 is a per-date discriminator and is ignored.
    """
    gid = str(game_id)
    year, month, day = gid[0:4], gid[4:6], gid[6:8]
    if len(gid) < 8 or not (year + month + day).isdigit():
        raise DateParseError(f"Game ID {game_id!r} does not start with YYYYMMDD")
    try:
        return datetime.strptime(f"{month}/{day}/{year}", "%m/%d/%Y").date()
    except ValueError as e:
        raise DateParseError(f"Game ID {game_id!r} does not encode a valid date") from e


def game_dates(game_ids: Iterable[str]) -> list[date]:
    return [game_date(gid) for gid in game_ids]
