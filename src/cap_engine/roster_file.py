"""Roster snapshot files - load a team's contracts and picks from JSON."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from src.cap_engine.models import Contract, DraftPick

logger = logging.getLogger(__name__)


@dataclass
class RosterSnapshot:
    """A team's contracts and draft picks as read from one file."""

    team_id: int
    team_name: str
    contracts: List[Contract]
    draft_picks: List[DraftPick]


def load_roster_snapshot(path: Path) -> RosterSnapshot:
    """Load a roster snapshot JSON file.

    Expected shape::

        {"team_id": 1, "team_name": "HBK",
         "contracts": [{"contract_id": 1, "player_id": 7, "base_salary": 12, ...}],
         "draft_picks": [{"pick_id": 1, "year": 2026, "round": 1, ...}]}

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or a record is incomplete.
    """
    if not path.exists():
        raise FileNotFoundError(f"Roster file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed roster file {path}: {e}") from e

    try:
        team_id = data["team_id"]
        contracts = [
            _dict_to_contract(cd, team_id) for cd in data.get("contracts", [])
        ]
        draft_picks = [
            _dict_to_draft_pick(pick_data) for pick_data in data.get("draft_picks", [])
        ]
    except KeyError as e:
        raise ValueError(f"Malformed roster file {path}: missing key {e}") from e

    logger.info(
        "Loaded roster for team %s: %d contracts, %d draft picks",
        team_id,
        len(contracts),
        len(draft_picks),
    )
    return RosterSnapshot(
        team_id=team_id,
        team_name=data.get("team_name", f"Team {team_id}"),
        contracts=contracts,
        draft_picks=draft_picks,
    )


def _dict_to_contract(data: Dict, team_id: int) -> Contract:
    """Reconstruct a Contract from its JSON dict."""
    return Contract(
        contract_id=data["contract_id"],
        player_id=data["player_id"],
        team_id=data.get("team_id", team_id),
        base_salary=data["base_salary"],
        salary_year=data["salary_year"],
        year_acquired=data["year_acquired"],
        acquisition_type=data["acquisition_type"],
        roster_status=data.get("roster_status", "active"),
        player_name=data.get("player_name", ""),
        position=data.get("position"),
        practice_squad_years=data.get("practice_squad_years", 0),
        is_active=data.get("is_active", True),
        # JSON object keys are strings
        salary_overrides={
            int(year): salary
            for year, salary in data.get("salary_overrides", {}).items()
        },
    )


def _dict_to_draft_pick(data: Dict) -> DraftPick:
    """Reconstruct a DraftPick from its JSON dict."""
    return DraftPick(
        pick_id=data["pick_id"],
        year=data["year"],
        round=data["round"],
        original_team_id=data["original_team_id"],
        current_team_id=data["current_team_id"],
        pick_number=data.get("pick_number"),
        salary_override=data.get("salary_override"),
        is_used=data.get("is_used", False),
    )
