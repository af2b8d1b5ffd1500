"""Print a team's multi-year cap projection from a roster snapshot.

Usage:
    python -m src.cap_engine.run_projection roster_file [settings_file] [years]

Examples:
    python -m src.cap_engine.run_projection data/rosters/hbk.json
    python -m src.cap_engine.run_projection data/rosters/hbk.json data/league_settings.json 4
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from src.cap_engine.league_settings import LeagueSettings, load_league_settings
from src.cap_engine.projections import player_salary_table, team_cap_table
from src.cap_engine.roster_file import load_roster_snapshot
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_PROJECTION_YEARS = 3


def run_projection(
    roster_file: Path,
    settings_file: Optional[Path] = None,
    num_years: int = DEFAULT_PROJECTION_YEARS,
) -> Dict[str, pd.DataFrame]:
    """Build the cap and salary tables for a roster snapshot.

    Args:
        roster_file: Roster snapshot JSON.
        settings_file: League settings JSON. Built-in defaults when omitted.
        num_years: Number of seasons, starting at the current season.

    Returns:
        ``{"team_cap": ..., "salaries": ...}`` DataFrames.
    """
    if num_years < 1:
        raise ValueError(f"num_years must be at least 1, got {num_years}")

    settings = (
        load_league_settings(settings_file) if settings_file else LeagueSettings()
    )
    roster = load_roster_snapshot(roster_file)
    years = [settings.current_season + offset for offset in range(num_years)]

    logger.info(
        "Projecting %s (team %d) for %d-%d",
        roster.team_name,
        roster.team_id,
        years[0],
        years[-1],
    )

    return {
        "team_cap": team_cap_table(
            roster.contracts, roster.draft_picks, roster.team_id, years, settings
        ),
        "salaries": player_salary_table(roster.contracts, years, settings),
    }


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    roster_path = Path(sys.argv[1])
    settings_path = Path(sys.argv[2]) if len(sys.argv) > 2 else None
    years_arg = int(sys.argv[3]) if len(sys.argv) > 3 else DEFAULT_PROJECTION_YEARS

    try:
        tables = run_projection(roster_path, settings_path, years_arg)
        print(tables["team_cap"].to_string(index=False))
        print()
        print(tables["salaries"].to_string(index=False))
    except Exception:
        logger.exception("Projection failed")
        sys.exit(1)
