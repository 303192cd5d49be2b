from __future__ import annotations
from pathlib import Path

# ---- User-configurable settings ----
# Remote sources. Game IDs are substituted into both game-center placeholders.
GAMECENTER_URL = "http://www.nfl.com/liveupdate/game-center/{game_id}/{game_id}_gtd.json"
SCHEDULE_URL = "http://www.nfl.com/schedules/{season}/REG{week}"
REQUEST_TIMEOUT = 30  # seconds per request

# Regular season length used for ID enumeration and the default week filter
REGULAR_SEASON_WEEKS = 17

# Week handling
# Game dates are shifted back this many days before taking the ISO week. Kickoff
# Thursday minus 87 days lands on a Monday, so each Thu-Wed NFL week maps onto a
# single ISO week. The minimum over the season then becomes week 1.
WEEK_OFFSET_DAYS = 87

# Optional team reference file (XLSX or CSV with abbreviation + name columns)
TEAM_MAPPING_FILE = None
TEAM_MAPPING_SHEET = "Teams"

# Output paths
OUTPUT_DIR = Path.cwd() / "output"
OUTPUT_CSV = OUTPUT_DIR / "season_games.csv"
OUTPUT_XLSX = OUTPUT_DIR / "season_games.xlsx"
