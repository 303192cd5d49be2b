from __future__ import annotations
from datetime import date
from typing import Iterable
import pandas as pd
from .config import WEEK_OFFSET_DAYS


def season_weeks(game_dates: Iterable[date]) -> list[int]:
    """Map game dates to 1-based season weeks.

    Each date is shifted back WEEK_OFFSET_DAYS and assigned its ISO week; the
    earliest week in the batch becomes week 1. The whole season must be passed
    at once since the normalization depends on the batch minimum. Output is
    positional with the input.

    Batches spanning an ISO year boundary after the shift are not corrected.
    """
    values = list(game_dates)
    if not values:
        return []
    dates = pd.to_datetime(pd.Series(values, dtype="object"))
    if dates.isna().any():
        raise ValueError("season_weeks received missing dates")

    calweek = (dates - pd.Timedelta(days=WEEK_OFFSET_DAYS)).dt.isocalendar().week.astype(int)
    season_week = calweek - (calweek.min() - 1)
    return [int(w) for w in season_week]
