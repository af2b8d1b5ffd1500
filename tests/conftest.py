"""Shared fixtures for the cap engine test suite."""

import pytest

from src.cap_engine.league_settings import LeagueSettings
from src.cap_engine.models import (
    AcquisitionType,
    CapSummary,
    Contract,
    DraftPick,
    RosterStatus,
)


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def settings():
    """League defaults: 15% escalation, $5 bump in year 5, $5 minimum."""
    return LeagueSettings()


@pytest.fixture
def make_contract():
    def _make(contract_id=1, **overrides):
        defaults = {
            "contract_id": contract_id,
            "player_id": 100 + contract_id,
            "team_id": 1,
            "base_salary": 10,
            "salary_year": 2025,
            "year_acquired": 2025,
            "acquisition_type": AcquisitionType.AUCTION,
            "roster_status": RosterStatus.ACTIVE,
            "player_name": f"Player {contract_id}",
            "position": "WR",
        }
        defaults.update(overrides)
        return Contract(**defaults)

    return _make


@pytest.fixture
def make_cap_summary():
    def _make(**overrides):
        defaults = {
            "year": 2025,
            "salary_cap": 300,
            "total_salary": 200,
            "draft_pick_salary": 0,
            "cap_space": 100,
            "roster_count": 20,
            "active_count": 18,
            "practice_squad_count": 1,
            "ir_count": 1,
        }
        defaults.update(overrides)
        return CapSummary(**defaults)

    return _make


# ------------------------------------------------------------------
# A two-team league snapshot for transaction checks
# ------------------------------------------------------------------

@pytest.fixture
def league_contracts(make_contract):
    """Team 1 owes $160 in 2025 after discounts; team 2 owes $160."""
    return [
        make_contract(1, base_salary=100),
        make_contract(
            2,
            base_salary=40,
            year_acquired=2024,
            roster_status=RosterStatus.PRACTICE_SQUAD,
            practice_squad_years=1,
        ),
        make_contract(3, base_salary=20, acquisition_type=AcquisitionType.ROOKIE_DRAFT),
        make_contract(4, base_salary=60, roster_status=RosterStatus.INJURED_RESERVE),
        make_contract(5, player_id=201, team_id=2, base_salary=150),
        make_contract(6, player_id=202, team_id=2, base_salary=10),
    ]


@pytest.fixture
def league_picks():
    """Team 1 holds its 2025 1st and 2026 2nd; team 2 holds its 2025 2nd."""
    return [
        DraftPick(pick_id=1, year=2025, round=1, original_team_id=1, current_team_id=1),
        DraftPick(pick_id=2, year=2026, round=2, original_team_id=1, current_team_id=1),
        DraftPick(pick_id=3, year=2025, round=2, original_team_id=2, current_team_id=2),
    ]
