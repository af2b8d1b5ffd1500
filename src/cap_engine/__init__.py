from src.cap_engine.cap_hit import calculate_cap_hit
from src.cap_engine.escalation import (
    calculate_salary,
    get_salary_projections,
    is_loyalty_bump_year,
)
from src.cap_engine.league_settings import (
    LeagueSettings,
    LeagueSettingsError,
    load_league_settings,
)
from src.cap_engine.models import (
    AcquisitionType,
    CapSummary,
    Contract,
    DraftPick,
    DroppedPlayerRecord,
    RosterStatus,
    ValidationResult,
)
from src.cap_engine.rookie_scale import get_draft_pick_cap_value, get_rookie_salary
from src.cap_engine.roster_validator import RosterValidator
from src.cap_engine.team_cap import calculate_team_cap
from src.cap_engine.transaction_checker import TradeProposal, TransactionChecker

__all__ = [
    "AcquisitionType",
    "CapSummary",
    "Contract",
    "DraftPick",
    "DroppedPlayerRecord",
    "LeagueSettings",
    "LeagueSettingsError",
    "RosterStatus",
    "RosterValidator",
    "TradeProposal",
    "TransactionChecker",
    "ValidationResult",
    "calculate_cap_hit",
    "calculate_salary",
    "calculate_team_cap",
    "get_draft_pick_cap_value",
    "get_rookie_salary",
    "get_salary_projections",
    "is_loyalty_bump_year",
    "load_league_settings",
]
