"""Contract, draft pick and cap summary data models."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Union

from src.cap_engine.rookie_scale import get_draft_pick_cap_value

Number = Union[int, float, Decimal]


class RosterStatus(str, Enum):
    ACTIVE = "active"
    PRACTICE_SQUAD = "practice_squad"
    INJURED_RESERVE = "injured_reserve"


class AcquisitionType(str, Enum):
    AUCTION = "auction"
    ROOKIE_DRAFT = "rookie_draft"
    FREE_AGENT = "free_agent"
    FAAB = "faab"
    TRADE = "trade"
    WAIVER_WIRE = "waiver_wire"
    FREE_AGENT_AUCTION = "free_agent_auction"

    @property
    def is_waiver_type(self) -> bool:
        """Whether the minimum-salary floor applies to this acquisition path."""
        return self in WAIVER_WIRE_TYPES


WAIVER_WIRE_TYPES = frozenset({AcquisitionType.WAIVER_WIRE})


@dataclass
class Contract:
    """A player's financial and roster record on one team."""

    contract_id: int
    player_id: int
    team_id: int
    base_salary: Number
    salary_year: int
    year_acquired: int
    acquisition_type: AcquisitionType
    roster_status: RosterStatus = RosterStatus.ACTIVE
    player_name: str = ""
    position: Optional[str] = None
    practice_squad_years: int = 0
    is_active: bool = True
    salary_overrides: Dict[int, int] = field(default_factory=dict)

    def __post_init__(self):
        # Unknown strings raise ValueError here rather than later in a calculation
        self.acquisition_type = AcquisitionType(self.acquisition_type)
        self.roster_status = RosterStatus(self.roster_status)

    @property
    def is_rookie(self) -> bool:
        return self.acquisition_type == AcquisitionType.ROOKIE_DRAFT


@dataclass
class DraftPick:
    """A tradeable future draft asset."""

    pick_id: int
    year: int
    round: int
    original_team_id: int
    current_team_id: int
    pick_number: Optional[int] = None
    salary_override: Optional[int] = None
    is_used: bool = False

    @property
    def is_traded(self) -> bool:
        return self.original_team_id != self.current_team_id

    def cap_value(self) -> int:
        """Placeholder cap charge: manual override if set, else the round's value."""
        if self.salary_override is not None:
            return self.salary_override
        return get_draft_pick_cap_value(self.round)


@dataclass
class DroppedPlayerRecord:
    """Salary history kept when a team drops a player."""

    salary_at_drop: int
    can_reacquire_cheaper: bool
    player_id: Optional[int] = None
    dropped_by_team_id: Optional[int] = None
    year_dropped: Optional[int] = None
    year_acquired: Optional[int] = None
    acquisition_type: Optional[AcquisitionType] = None


@dataclass
class ContractCapHit:
    """One contract's salary and cap charge for a given year."""

    contract_id: int
    player_id: int
    player_name: str
    position: Optional[str]
    base_salary: Number
    current_salary: int
    cap_hit: int
    roster_status: RosterStatus
    year_acquired: int
    acquisition_type: AcquisitionType


@dataclass
class DraftPickCapHit:
    """One owned draft pick's cap charge for a given year."""

    pick_id: int
    year: int
    round: int
    original_team_id: int
    salary: int


@dataclass
class CapSummary:
    """Per-team, per-year cap totals. Derived on demand, never cached."""

    year: int
    salary_cap: int
    total_salary: int
    draft_pick_salary: int
    cap_space: int
    roster_count: int
    active_count: int
    practice_squad_count: int
    ir_count: int
    player_breakdown: List[ContractCapHit] = field(default_factory=list)
    draft_pick_breakdown: List[DraftPickCapHit] = field(default_factory=list)

    @property
    def is_over_cap(self) -> bool:
        return self.cap_space < 0


@dataclass
class ValidationResult:
    """Outcome of checking a proposed roster mutation."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def from_messages(
        cls, errors: List[str], warnings: List[str]
    ) -> "ValidationResult":
        return cls(valid=len(errors) == 0, errors=errors, warnings=warnings)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Combine two results; valid only if both are."""
        return ValidationResult.from_messages(
            self.errors + other.errors, self.warnings + other.warnings
        )
