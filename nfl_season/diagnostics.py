from __future__ import annotations
from typing import Sequence
import pandas as pd
from .gameids import game_dates


def week_summary(game_ids: Sequence[str], weeks: Sequence[int]) -> pd.DataFrame:
    """Per season week: game count, date span and the weekdays games fell on.

    Useful for eyeballing the week offset against a published schedule; a
    regular NFL week reads Thu..Mon.
    """
    if len(game_ids) != len(weeks):
        raise ValueError(f"{len(game_ids)} game IDs but {len(weeks)} week values")
    games = pd.DataFrame({
        "GameID": list(game_ids),
        "date": pd.to_datetime(pd.Series(game_dates(game_ids), dtype="object")),
        "week": list(weeks),
    })
    games["wday"] = games["date"].dt.day_name().str[:3]
    games = games.sort_values("date", kind="stable")

    return games.groupby("week", as_index=False).agg(
        games=("GameID", "count"),
        first_date=("date", "min"),
        last_date=("date", "max"),
        weekdays=("wday", lambda s: ",".join(dict.fromkeys(s))),
    )


def score_diagnostics(table: pd.DataFrame) -> dict:
    """Sanity checks on a season table's final scores.

    `scoreless_games` lists 0-0 results, which usually mean the feed was
    captured before kickoff rather than a real scoreless tie.
    """
    home = table["homescore"].astype(int)
    away = table["awayscore"].astype(int)
    margin = home - away
    decided = margin[margin != 0]

    largest = None
    if len(table):
        i = margin.abs().idxmax()
        largest = {"GameID": str(table.loc[i, "GameID"]), "margin": int(margin[i])}

    return {
        "games": int(len(table)),
        "ties": int((margin == 0).sum()),
        "home_win_rate": round(float((decided > 0).mean()), 3) if len(decided) else None,
        "avg_homescore": round(float(home.mean()), 2) if len(table) else None,
        "avg_awayscore": round(float(away.mean()), 2) if len(table) else None,
        "largest_margin": largest,
        "scoreless_games": [str(g) for g in table.loc[(home == 0) & (away == 0), "GameID"]],
    }
