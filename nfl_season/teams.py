from __future__ import annotations
from pathlib import Path
import pandas as pd
from .config import TEAM_MAPPING_SHEET


EXPECTED_COLS = {
    "abbr": ["abbr", "abbreviation", "tm", "team"],
    "name": ["name", "team_name", "full_name", "club"],
}

# Game-center team codes, including relocated franchises seen in older seasons
NFL_TEAMS = {
    "ARI": "Arizona Cardinals",
    "ATL": "Atlanta Falcons",
    "BAL": "Baltimore Ravens",
    "BUF": "Buffalo Bills",
    "CAR": "Carolina Panthers",
    "CHI": "Chicago Bears",
    "CIN": "Cincinnati Bengals",
    "CLE": "Cleveland Browns",
    "DAL": "Dallas Cowboys",
    "DEN": "Denver Broncos",
    "DET": "Detroit Lions",
    "GB": "Green Bay Packers",
    "HOU": "Houston Texans",
    "IND": "Indianapolis Colts",
    "JAC": "Jacksonville Jaguars",
    "JAX": "Jacksonville Jaguars",
    "KC": "Kansas City Chiefs",
    "LA": "Los Angeles Rams",
    "LAC": "Los Angeles Chargers",
    "MIA": "Miami Dolphins",
    "MIN": "Minnesota Vikings",
    "NE": "New England Patriots",
    "NO": "New Orleans Saints",
    "NYG": "New York Giants",
    "NYJ": "New York Jets",
    "OAK": "Oakland Raiders",
    "PHI": "Philadelphia Eagles",
    "PIT": "Pittsburgh Steelers",
    "SD": "San Diego Chargers",
    "SEA": "Seattle Seahawks",
    "SF": "San Francisco 49ers",
    "STL": "St. Louis Rams",
    "TB": "Tampa Bay Buccaneers",
    "TEN": "Tennessee Titans",
    "WAS": "Washington Redskins",
}


def _find_col(df: pd.DataFrame, keys: list[str]) -> str | None:
    cols = {str(c).lower().strip(): c for c in df.columns}
    for k in keys:
        if k in cols:
            return cols[k]
    return None


def load_team_table(path: str | Path | None = None, sheet: str = TEAM_MAPPING_SHEET) -> pd.DataFrame:
    """Team reference table with columns abbr, name.

    Without a path the built-in game-center codes are returned. A path may point
    to an .xlsx/.xls workbook (read from `sheet`) or a CSV file.
    """
    if path is None:
        return pd.DataFrame(sorted(NFL_TEAMS.items()), columns=["abbr", "name"])

    path = Path(path)
    if path.suffix.lower() in (".xlsx", ".xls"):
        raw = pd.read_excel(path, sheet_name=sheet)
    else:
        raw = pd.read_csv(path)

    abbr_col = _find_col(raw, EXPECTED_COLS["abbr"])
    name_col = _find_col(raw, EXPECTED_COLS["name"])
    if abbr_col is None or name_col is None or abbr_col == name_col:
        raise ValueError(f"{path}: expected abbreviation and name columns, found {raw.columns.tolist()}")

    teams = raw[[abbr_col, name_col]].rename(columns={abbr_col: "abbr", name_col: "name"})
    teams = teams.dropna(subset=["abbr"])
    teams["abbr"] = teams["abbr"].astype(str).str.strip()
    return teams.drop_duplicates(subset="abbr").reset_index(drop=True)


def attach_team_names(table: pd.DataFrame, teams: pd.DataFrame) -> pd.DataFrame:
    """Copy of a season table with home_name and away_name columns added."""
    names = dict(zip(teams["abbr"], teams["name"]))
    used = set(table["home"]).union(table["away"])
    missing = sorted(str(t) for t in used - set(names))
    if missing:
        print(f"WARNING: {len(missing)} team codes not in the team table: {missing}")

    out = table.copy()
    out["home_name"] = out["home"].map(names)
    out["away_name"] = out["away"].map(names)
    return out
