from __future__ import annotations
from typing import Callable, Sequence
import pandas as pd
from .config import REGULAR_SEASON_WEEKS
from .gameids import extracting_gameids, game_dates, proper_jsonurl_formatting
from .game_fetch import GameRecord, fetch_game
from .weeks import season_weeks


TABLE_COLUMNS = ["GameID", "date", "home", "away", "homescore", "awayscore"]


def _season_ids(season: int, id_source: Callable[[int], Sequence[str]]) -> list[str]:
    game_ids = list(id_source(season))
    if not game_ids:
        raise LookupError(f"No game IDs found for season {season}")
    return game_ids


def get_gameweeks(season: int,
                  id_source: Callable[[int], Sequence[str]] = extracting_gameids) -> list[int]:
    """Season week for every game ID of the season, in enumeration order."""
    game_ids = _season_ids(season, id_source)
    return season_weeks(game_dates(game_ids))


def _to_frame(records: list[GameRecord]) -> pd.DataFrame:
    rows = [
        {
            "GameID": r.id,
            "date": r.date,
            "home": r.home_team,
            "away": r.away_team,
            "homescore": r.home_score,
            "awayscore": r.away_score,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def build_season_table(season: int, max_week: int = REGULAR_SEASON_WEEKS, *,
                       id_source: Callable[[int], Sequence[str]] = extracting_gameids,
                       url_formatter: Callable[[str], str] = proper_jsonurl_formatting) -> pd.DataFrame:
    """Build the season game table for weeks 1..max_week.

    Output columns: GameID, date, home, away, homescore, awayscore. Rows follow
    the enumeration order of the IDs. Games are fetched one at a time and the
    first failure propagates, so a table is only returned when every game in
    range was fetched.
    """
    if max_week < 1:
        raise ValueError(f"max_week must be at least 1, got {max_week}")

    game_ids = _season_ids(season, id_source)
    weeks = season_weeks(game_dates(game_ids))
    selected = [gid for gid, wk in zip(game_ids, weeks) if wk <= max_week]
    print(f"Season {season}: {len(game_ids)} games, {len(selected)} in weeks 1-{max_week}")

    records = []
    for i, gid in enumerate(selected, start=1):
        print(f"Fetching game {gid} ({i}/{len(selected)})")
        records.append(fetch_game(gid, url_formatter=url_formatter))
    return _to_frame(records)


def season_games(season: int, weeks: int = REGULAR_SEASON_WEEKS, *,
                 id_source: Callable[[int], Sequence[str]] = extracting_gameids,
                 url_formatter: Callable[[str], str] = proper_jsonurl_formatting) -> pd.DataFrame:
    """All game matchups and final scores for the first `weeks` weeks of a season."""
    return build_season_table(season, weeks, id_source=id_source, url_formatter=url_formatter)
