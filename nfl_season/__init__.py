"""NFL season game table builder.

Modules:
- config: user-adjustable settings
- gameids: season game-ID enumeration, game-center URLs, ID date decomposition
- weeks: season-week index from game dates
- schema: typed game-center document
- game_fetch: fetch one game's teams and final scores
- season_table: assemble the season table (season_games, get_gameweeks)
- teams: team abbreviation reference table
- export: write CSV/XLSX outputs
- diagnostics: week layout and score distribution checks
- build_table: CLI entry point to run the full pipeline
"""

from .season_table import season_games, get_gameweeks

__all__ = [
    "config",
    "gameids",
    "weeks",
    "schema",
    "game_fetch",
    "season_table",
    "teams",
    "export",
    "diagnostics",
    "season_games",
    "get_gameweeks",
]
