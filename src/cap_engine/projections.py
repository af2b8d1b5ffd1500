"""Multi-year salary and cap projections as DataFrames for reports and displays."""

import logging
from typing import Iterable, List

import pandas as pd

from src.cap_engine.draft_picks import draft_pick_cap_hits
from src.cap_engine.league_settings import LeagueSettings
from src.cap_engine.models import Contract, DraftPick
from src.cap_engine.team_cap import calculate_team_cap, contract_cap_hit, contract_salary

logger = logging.getLogger(__name__)

_PLAYER_COLUMNS = [
    "contract_id", "player_name", "position", "roster_status",
    "acquisition_type", "year_acquired",
]

_TEAM_COLUMNS = [
    "year", "salary_cap", "total_salary", "draft_pick_salary", "cap_space",
    "roster_count", "active_count", "practice_squad_count", "ir_count",
]


def player_salary_table(
    contracts: Iterable[Contract],
    years: List[int],
    settings: LeagueSettings,
    cap_hits: bool = False,
) -> pd.DataFrame:
    """One row per active contract, one integer column per season.

    Args:
        contracts: Contracts to project.
        years: Seasons to include, in column order.
        settings: League settings snapshot.
        cap_hits: Show the status-discounted cap hit instead of the salary.
    """
    rows = []
    for contract in contracts:
        if not contract.is_active:
            continue
        row = {
            "contract_id": contract.contract_id,
            "player_name": contract.player_name,
            "position": contract.position,
            "roster_status": contract.roster_status.value,
            "acquisition_type": contract.acquisition_type.value,
            "year_acquired": contract.year_acquired,
        }
        for year in years:
            if cap_hits:
                row[year] = contract_cap_hit(contract, year, settings)
            else:
                row[year] = contract_salary(contract, year, settings)
        rows.append(row)

    df = pd.DataFrame(rows, columns=_PLAYER_COLUMNS + list(years))
    if years and not df.empty:
        df = df.sort_values(years[0], ascending=False).reset_index(drop=True)
    return df


def team_cap_table(
    contracts: List[Contract],
    picks: List[DraftPick],
    team_id: int,
    years: List[int],
    settings: LeagueSettings,
) -> pd.DataFrame:
    """One row per season with the team's cap totals for that season."""
    team_contracts = [c for c in contracts if c.team_id == team_id]

    rows = []
    for year in years:
        summary = calculate_team_cap(
            team_contracts,
            draft_pick_cap_hits(picks, team_id, year),
            year,
            settings,
        )
        rows.append({column: getattr(summary, column) for column in _TEAM_COLUMNS})

    df = pd.DataFrame(rows, columns=_TEAM_COLUMNS)
    over = df[df["cap_space"] < 0]
    if not over.empty:
        logger.warning(
            "Team %d projected over the cap in %s",
            team_id,
            ", ".join(str(y) for y in over["year"]),
        )
    return df
