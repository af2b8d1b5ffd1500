"""Transaction checks - read a roster snapshot, compute caps, validate a move.

Each ``check_*`` method recomputes the affected team's cap summary from the
contracts and picks it is given; nothing is cached between calls. The
checker does not write anything. Callers must hold the team's snapshot
steady (lock or transaction) from the check until the write is committed.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Tuple

from src.cap_engine.cap_hit import calculate_cap_hit
from src.cap_engine.draft_picks import draft_pick_cap_hits
from src.cap_engine.league_settings import LeagueSettings
from src.cap_engine.models import (
    AcquisitionType,
    CapSummary,
    Contract,
    DraftPick,
    DroppedPlayerRecord,
    RosterStatus,
    ValidationResult,
)
from src.cap_engine.rookie_scale import get_rookie_salary
from src.cap_engine.roster_validator import RosterValidator
from src.cap_engine.team_cap import calculate_team_cap, contract_cap_hit, contract_salary

logger = logging.getLogger(__name__)


@dataclass
class TradeProposal:
    """Assets changing hands: contract or pick id -> receiving team id."""

    contract_moves: Dict[int, int] = field(default_factory=dict)
    pick_moves: Dict[int, int] = field(default_factory=dict)


def build_dropped_record(
    contract: Contract, year_dropped: int, settings: LeagueSettings
) -> DroppedPlayerRecord:
    """History row kept when ``contract`` is dropped, for the reacquisition rule."""
    salary_at_drop = contract_salary(contract, year_dropped, settings)
    return DroppedPlayerRecord(
        salary_at_drop=salary_at_drop,
        can_reacquire_cheaper=salary_at_drop <= settings.reacquisition_threshold,
        player_id=contract.player_id,
        dropped_by_team_id=contract.team_id,
        year_dropped=year_dropped,
        year_acquired=contract.year_acquired,
        acquisition_type=contract.acquisition_type,
    )


class TransactionChecker:
    """Validates each kind of roster transaction against current cap state.

    Coordinates the salary calculators (what a move costs), the team cap
    aggregator (what the team can afford) and RosterValidator (whether the
    move is legal).
    """

    def __init__(self, settings: LeagueSettings):
        self.settings = settings
        self.validator = RosterValidator(settings)

    def team_cap(
        self,
        contracts: Iterable[Contract],
        picks: Iterable[DraftPick],
        team_id: int,
        year: int,
    ) -> CapSummary:
        """Cap summary for ``team_id`` from a league or team snapshot."""
        team_contracts = [
            c for c in contracts if c.team_id == team_id and c.is_active
        ]
        return calculate_team_cap(
            team_contracts,
            draft_pick_cap_hits(picks, team_id, year),
            year,
            self.settings,
        )

    # ------------------------------------------------------------------
    # Free-agent signing
    # ------------------------------------------------------------------

    def check_add_player(
        self,
        contracts: List[Contract],
        picks: List[DraftPick],
        new_contract: Contract,
        year: int,
        player_history: Optional[DroppedPlayerRecord] = None,
    ) -> ValidationResult:
        """Validate signing ``new_contract`` onto its team for ``year``.

        Args:
            contracts: Current contracts (the team's, or the whole league's).
            picks: Current draft picks.
            new_contract: The proposed contract, not yet in ``contracts``.
            year: Season the cap is checked for.
            player_history: The team's drop record for this player, if any.
        """
        team_id = new_contract.team_id
        team_cap = self.team_cap(contracts, picks, team_id, year)
        salary = contract_salary(new_contract, year, self.settings)
        cap_hit = calculate_cap_hit(salary, new_contract.roster_status, self.settings)

        result = self.validator.validate_add_player(
            team_cap,
            cap_hit,
            new_contract.roster_status,
            salary,
            player_history,
            is_rookie_draft=new_contract.is_rookie,
        )
        result = result.merge(self._duplicate_contract_check(contracts, new_contract))

        self._log("Add player %s to team %d", result, new_contract.player_id, team_id)
        return result

    # ------------------------------------------------------------------
    # Status change
    # ------------------------------------------------------------------

    def check_status_change(
        self,
        contracts: List[Contract],
        picks: List[DraftPick],
        contract_id: int,
        new_status: RosterStatus,
        year: int,
    ) -> ValidationResult:
        """Validate moving a contract to ``new_status`` for ``year``."""
        contract = self._find_contract(contracts, contract_id)
        new_status = RosterStatus(new_status)
        team_cap = self.team_cap(contracts, picks, contract.team_id, year)

        result = self.validator.validate_status_change(
            team_cap,
            contract.roster_status,
            new_status,
            contract_cap_hit(contract, year, self.settings),
            contract_cap_hit(contract, year, self.settings, roster_status=new_status),
            contract.practice_squad_years,
        )

        self._log(
            "Status change %s -> %s for contract %d",
            result,
            contract.roster_status.value,
            new_status.value,
            contract_id,
        )
        return result

    # ------------------------------------------------------------------
    # Drop
    # ------------------------------------------------------------------

    def check_drop_player(
        self,
        contracts: List[Contract],
        picks: List[DraftPick],
        contract_id: int,
        year: int,
    ) -> Tuple[ValidationResult, DroppedPlayerRecord]:
        """Validate dropping a contract.

        Returns:
            (result, dropped_record) - the record the caller persists so a
            later re-signing can be checked against the reacquisition floor.
        """
        contract = self._find_contract(contracts, contract_id)
        team_cap = self.team_cap(contracts, picks, contract.team_id, year)

        veterans_after = sum(
            1
            for c in contracts
            if c.team_id == contract.team_id
            and c.is_active
            and not c.is_rookie
            and c.contract_id != contract_id
        )

        result = self.validator.validate_drop_player(team_cap, veterans_after)
        record = build_dropped_record(contract, year, self.settings)

        self._log(
            "Drop contract %d (salary at drop $%d)",
            result,
            contract_id,
            record.salary_at_drop,
        )
        return result, record

    # ------------------------------------------------------------------
    # Rookie draft
    # ------------------------------------------------------------------

    def check_rookie_draft_pick(
        self,
        contracts: List[Contract],
        picks: List[DraftPick],
        pick: DraftPick,
        pick_in_round: int,
        year: int,
    ) -> Tuple[ValidationResult, int]:
        """Validate spending ``pick`` on a rookie.

        The pick's placeholder charge is released before the rookie's scale
        salary is checked against the cap.

        Returns:
            (result, rookie_salary)
        """
        team_id = pick.current_team_id
        salary = get_rookie_salary(pick.round, pick_in_round)

        remaining_picks = [p for p in picks if p.pick_id != pick.pick_id]
        team_cap = self.team_cap(contracts, remaining_picks, team_id, year)

        result = self.validator.validate_add_player(
            team_cap,
            salary,
            RosterStatus.ACTIVE,
            salary,
            None,
            is_rookie_draft=True,
        )
        if pick.is_used:
            result = result.merge(
                ValidationResult.from_messages(
                    [f"Draft pick {pick.year} round {pick.round} has already been used"],
                    [],
                )
            )

        self._log(
            "Rookie draft pick %d.%02d by team %d ($%d)",
            result,
            pick.round,
            pick_in_round,
            team_id,
            salary,
        )
        return result, salary

    # ------------------------------------------------------------------
    # Trade
    # ------------------------------------------------------------------

    def check_trade(
        self,
        contracts: List[Contract],
        picks: List[DraftPick],
        proposal: TradeProposal,
        year: int,
    ) -> Dict[int, ValidationResult]:
        """Validate every participating team's roster as it would be after a trade.

        Args:
            contracts: League-wide active contracts.
            picks: League-wide draft picks.
            proposal: Assets moving and where they go.
            year: Season the cap is checked for.

        Returns:
            Dict mapping each participating team id to its ValidationResult.

        Raises:
            ValueError: If the proposal names a contract or pick that is not
                in the snapshot.
        """
        contracts_by_id = {c.contract_id: c for c in contracts}
        picks_by_id = {p.pick_id: p for p in picks}
        asset_errors: Dict[int, List[str]] = {}
        participants = set()

        for contract_id, to_team in proposal.contract_moves.items():
            contract = self._find_contract(contracts, contract_id)
            participants.update((contract.team_id, to_team))
            if not contract.is_active:
                asset_errors.setdefault(contract.team_id, []).append(
                    f"Contract {contract_id} is no longer active"
                )
            contracts_by_id[contract_id] = replace(
                contract, team_id=to_team, acquisition_type=AcquisitionType.TRADE
            )

        for pick_id, to_team in proposal.pick_moves.items():
            if pick_id not in picks_by_id:
                raise ValueError(f"Draft pick {pick_id} not found")
            pick = picks_by_id[pick_id]
            participants.update((pick.current_team_id, to_team))
            if pick.is_used:
                asset_errors.setdefault(pick.current_team_id, []).append(
                    f"Draft pick {pick.year} round {pick.round} has already been used"
                )
            picks_by_id[pick_id] = replace(pick, current_team_id=to_team)

        after_contracts = list(contracts_by_id.values())
        after_picks = list(picks_by_id.values())

        results = {}
        for team_id in sorted(participants):
            team_cap_after = self.team_cap(after_contracts, after_picks, team_id, year)
            result = self.validator.validate_trade(team_cap_after)
            if team_id in asset_errors:
                result = result.merge(
                    ValidationResult.from_messages(asset_errors[team_id], [])
                )
            results[team_id] = result
            self._log("Trade check for team %d", result, team_id)

        return results

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _find_contract(contracts: Iterable[Contract], contract_id: int) -> Contract:
        for contract in contracts:
            if contract.contract_id == contract_id:
                return contract
        raise ValueError(f"Contract {contract_id} not found")

    @staticmethod
    def _duplicate_contract_check(
        contracts: Iterable[Contract], new_contract: Contract
    ) -> ValidationResult:
        errors = []
        for contract in contracts:
            if contract.is_active and contract.player_id == new_contract.player_id:
                errors.append(
                    f"Player {new_contract.player_id} already has an active contract "
                    f"with team {contract.team_id}"
                )
                break
        return ValidationResult.from_messages(errors, [])

    @staticmethod
    def _log(message: str, result: ValidationResult, *args):
        outcome = "ok" if result.valid else "rejected"
        logger.info(
            message + ": %s (%d errors, %d warnings)",
            *args,
            outcome,
            len(result.errors),
            len(result.warnings),
        )
