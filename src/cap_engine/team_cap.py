"""Team cap aggregation - sums contract and draft pick charges for one season."""

import logging
from typing import Iterable, List, Optional

from src.cap_engine.cap_hit import calculate_cap_hit
from src.cap_engine.escalation import calculate_salary
from src.cap_engine.league_settings import LeagueSettings
from src.cap_engine.models import (
    CapSummary,
    Contract,
    ContractCapHit,
    DraftPickCapHit,
    RosterStatus,
)

logger = logging.getLogger(__name__)


def contract_salary(contract: Contract, year: int, settings: LeagueSettings) -> int:
    """Salary for ``year``: a commissioner override if one exists, else escalated."""
    override = contract.salary_overrides.get(year)
    if override is not None:
        return override
    return calculate_salary(
        contract.base_salary,
        contract.year_acquired,
        year,
        settings,
        contract.salary_year,
        acquisition_type=contract.acquisition_type,
    )


def contract_cap_hit(
    contract: Contract,
    year: int,
    settings: LeagueSettings,
    roster_status: Optional[RosterStatus] = None,
) -> int:
    """Cap hit for ``year`` at ``roster_status`` (defaults to the current status)."""
    status = contract.roster_status if roster_status is None else roster_status
    return calculate_cap_hit(contract_salary(contract, year, settings), status, settings)


def calculate_team_cap(
    contracts: Iterable[Contract],
    draft_pick_cap_hits: Iterable[DraftPickCapHit],
    year: int,
    settings: LeagueSettings,
    salary_cap: Optional[int] = None,
) -> CapSummary:
    """
    Calculate a team's cap situation for ``year``.

    Deactivated contracts are ignored. Cap space may be negative. Callers
    re-run this after every roster mutation instead of patching an old
    summary.

    Args:
        contracts: The team's contracts.
        draft_pick_cap_hits: Charges for the team's unused picks in ``year``.
        year: Season to summarize.
        settings: League settings snapshot.
        salary_cap: Explicit cap; defaults to ``settings.salary_cap_for(year)``.
    """
    cap = settings.salary_cap_for(year) if salary_cap is None else salary_cap

    player_breakdown: List[ContractCapHit] = []
    for contract in contracts:
        if not contract.is_active:
            continue
        current_salary = contract_salary(contract, year, settings)
        player_breakdown.append(
            ContractCapHit(
                contract_id=contract.contract_id,
                player_id=contract.player_id,
                player_name=contract.player_name,
                position=contract.position,
                base_salary=contract.base_salary,
                current_salary=current_salary,
                cap_hit=calculate_cap_hit(
                    current_salary, contract.roster_status, settings
                ),
                roster_status=contract.roster_status,
                year_acquired=contract.year_acquired,
                acquisition_type=contract.acquisition_type,
            )
        )

    pick_breakdown = list(draft_pick_cap_hits)
    player_salary = sum(p.cap_hit for p in player_breakdown)
    draft_pick_salary = sum(p.salary for p in pick_breakdown)
    total_salary = player_salary + draft_pick_salary

    def _count(status: RosterStatus) -> int:
        return sum(1 for p in player_breakdown if p.roster_status == status)

    summary = CapSummary(
        year=year,
        salary_cap=cap,
        total_salary=total_salary,
        draft_pick_salary=draft_pick_salary,
        cap_space=cap - total_salary,
        roster_count=len(player_breakdown),
        active_count=_count(RosterStatus.ACTIVE),
        practice_squad_count=_count(RosterStatus.PRACTICE_SQUAD),
        ir_count=_count(RosterStatus.INJURED_RESERVE),
        player_breakdown=player_breakdown,
        draft_pick_breakdown=pick_breakdown,
    )

    logger.debug(
        "Cap %d: total=%d (picks=%d) cap=%d space=%d roster=%d",
        year,
        total_salary,
        draft_pick_salary,
        cap,
        summary.cap_space,
        summary.roster_count,
    )
    return summary
