
from __future__ import annotations
import argparse
from pathlib import Path
import json
from .config import OUTPUT_CSV, REGULAR_SEASON_WEEKS, TEAM_MAPPING_FILE, TEAM_MAPPING_SHEET
from .gameids import extracting_gameids, game_dates
from .weeks import season_weeks
from .season_table import build_season_table
from .teams import load_team_table, attach_team_names
from .export import write_outputs
from .diagnostics import week_summary, score_diagnostics


def build(season: int, weeks: int = REGULAR_SEASON_WEEKS,
          out_csv: str | None = None, out_xlsx: str | None = None,
          team_names: bool = False, teams_file: str | None = None,
          diagnostics: bool = False) -> str:
    out_csv = out_csv or str(OUTPUT_CSV)

    # 1) Enumerate the season once; both the week index and the table use it
    print(f"Enumerating {season} game IDs...")
    game_ids = extracting_gameids(season)

    # 2) Fetch games in range and build the table
    print(f"Building season table for weeks 1-{weeks}...")
    table = build_season_table(season, weeks, id_source=lambda _season: game_ids)
    print(f"Season table built: {len(table)} games")

    # 3) Optional team names from the reference table
    if team_names or teams_file:
        teams = load_team_table(teams_file or TEAM_MAPPING_FILE, sheet=TEAM_MAPPING_SHEET)
        print(f"Team table loaded: {len(teams)} teams")
        table = attach_team_names(table, teams)

    # 4) Write outputs
    print("Writing outputs...")
    write_outputs(table, csv_path=out_csv, xlsx_path=out_xlsx)

    # 5) Diagnostics: week layout and score distributions
    if diagnostics:
        print("Generating diagnostics...")
        summary = week_summary(game_ids, season_weeks(game_dates(game_ids)))
        print(summary.to_string(index=False))
        summary = summary[summary["week"] <= weeks]
        diag = {
            "weeks": json.loads(summary.to_json(orient="records", date_format="iso")),
            "scores": score_diagnostics(table),
        }
        diag_path = Path(out_csv).with_suffix(".diagnostics.json")
        diag_path.write_text(json.dumps(diag, indent=2))
        print(f"Diagnostics written to: {diag_path}")

    return out_csv


def main(argv: list[str] | None = None):
    p = argparse.ArgumentParser(description="Build an NFL season game table from game-center feeds")
    p.add_argument("season", type=int, help="4-digit season year, e.g. 2015")
    p.add_argument("--weeks", type=int, default=REGULAR_SEASON_WEEKS,
                   help=f"Include games in season weeks 1..N (default {REGULAR_SEASON_WEEKS})")
    p.add_argument("--out_csv", default=str(OUTPUT_CSV), help="Output CSV path")
    p.add_argument("--out_xlsx", default=None, help="Optional XLSX output path")
    p.add_argument("--team-names", action="store_true", help="Add home_name/away_name from the built-in team table")
    p.add_argument("--teams-file", default=None, help="XLSX or CSV team table to use for names")
    p.add_argument("--diagnostics", action="store_true", help="Write week layout and score diagnostics JSON")
    args = p.parse_args(argv)
    build(
        args.season,
        args.weeks,
        args.out_csv,
        args.out_xlsx,
        team_names=args.team_names,
        teams_file=args.teams_file,
        diagnostics=args.diagnostics,
    )


if __name__ == "__main__":
    main()
