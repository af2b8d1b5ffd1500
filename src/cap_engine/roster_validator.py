"""Roster mutation validation against cap, roster-size and eligibility limits."""

import logging
from typing import Optional

from src.cap_engine.league_settings import LeagueSettings
from src.cap_engine.models import (
    CapSummary,
    DroppedPlayerRecord,
    RosterStatus,
    ValidationResult,
)

logger = logging.getLogger(__name__)


class RosterValidator:
    """Checks proposed roster mutations against a team's cap summary.

    Validators never raise for a rule violation. Every violated rule is
    reported in ``errors`` so the caller can show them all at once;
    ``warnings`` are advisory and never make a result invalid.
    """

    def __init__(self, settings: LeagueSettings):
        self.settings = settings

    def validate_add_player(
        self,
        team_cap: CapSummary,
        proposed_cap_hit: int,
        proposed_status: RosterStatus,
        proposed_salary: int,
        player_history: Optional[DroppedPlayerRecord] = None,
        is_rookie_draft: bool = False,
    ) -> ValidationResult:
        """Validate adding a player to a roster.

        ``is_rookie_draft`` labels the move in the rejection log.
        """
        proposed_status = RosterStatus(proposed_status)
        errors = []
        warnings = []
        remaining = team_cap.cap_space - proposed_cap_hit

        if remaining < 0:
            errors.append(
                f"Insufficient cap space. Available: ${team_cap.cap_space}, "
                f"Required: ${proposed_cap_hit}"
            )

        if team_cap.roster_count >= self.settings.roster_size:
            errors.append(
                f"Roster is full ({self.settings.roster_size} players maximum)"
            )

        errors.extend(self._status_capacity_errors(team_cap, proposed_status))

        if (
            player_history is not None
            and not player_history.can_reacquire_cheaper
            and proposed_salary < player_history.salary_at_drop
        ):
            errors.append(
                f"Reacquisition rule: Player was previously at "
                f"${player_history.salary_at_drop}. "
                "Cannot reacquire for less than that amount."
            )

        if remaining < self.settings.low_cap_space_buffer:
            warnings.append(
                f"Low cap space warning: Only ${remaining} remaining after this move"
            )

        action = "rookie draft pick" if is_rookie_draft else "add player"
        return self._result(action, errors, warnings)

    def validate_status_change(
        self,
        team_cap: CapSummary,
        current_status: RosterStatus,
        new_status: RosterStatus,
        current_cap_hit: int,
        new_cap_hit: int,
        practice_squad_years: int,
    ) -> ValidationResult:
        """Validate moving a player between active, practice squad and IR."""
        current_status = RosterStatus(current_status)
        new_status = RosterStatus(new_status)

        if current_status == new_status:
            return self._result(
                "status change", ["Player is already in this status"], []
            )

        errors = self._status_capacity_errors(team_cap, new_status)

        if (
            new_status == RosterStatus.PRACTICE_SQUAD
            and practice_squad_years >= self.settings.practice_squad_max_years
        ):
            errors.append(
                "Player has used maximum practice squad eligibility "
                f"({self.settings.practice_squad_max_years} years)"
            )

        cap_difference = new_cap_hit - current_cap_hit
        if cap_difference > 0 and team_cap.cap_space < cap_difference:
            errors.append(
                f"Insufficient cap space for status change. Need ${cap_difference} more."
            )

        return self._result("status change", errors, [])

    def validate_drop_player(
        self, team_cap: CapSummary, veteran_count_after_drop: int
    ) -> ValidationResult:
        """Dropping is always allowed; warn when veterans fall below the floor."""
        warnings = []

        if veteran_count_after_drop < self.settings.minimum_veterans:
            warnings.append(
                f"Warning: Dropping this player leaves you with "
                f"{veteran_count_after_drop} veterans (minimum "
                f"{self.settings.minimum_veterans} required by "
                f"{self.settings.veteran_deadline})"
            )

        return self._result("drop player", [], warnings)

    def validate_trade(self, team_cap_after: CapSummary) -> ValidationResult:
        """Validate a team's cap summary as it would stand after a trade."""
        errors = []
        warnings = []

        if team_cap_after.cap_space < 0:
            errors.append(
                f"Trade puts team over the cap by ${-team_cap_after.cap_space}"
            )

        if team_cap_after.roster_count > self.settings.roster_size:
            errors.append(
                f"Trade leaves {team_cap_after.roster_count} players on the roster "
                f"({self.settings.roster_size} players maximum)"
            )

        if team_cap_after.practice_squad_count > self.settings.practice_squad_max:
            errors.append(
                f"Practice squad is full ({self.settings.practice_squad_max} "
                "players maximum)"
            )

        if team_cap_after.ir_count > self.settings.ir_max:
            errors.append(f"IR is full ({self.settings.ir_max} players maximum)")

        if 0 <= team_cap_after.cap_space < self.settings.low_cap_space_buffer:
            warnings.append(
                f"Low cap space warning: Only ${team_cap_after.cap_space} "
                "remaining after this trade"
            )

        return self._result("trade", errors, warnings)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _status_capacity_errors(self, team_cap: CapSummary, status: RosterStatus):
        errors = []
        if (
            status == RosterStatus.PRACTICE_SQUAD
            and team_cap.practice_squad_count >= self.settings.practice_squad_max
        ):
            errors.append(
                f"Practice squad is full ({self.settings.practice_squad_max} "
                "players maximum)"
            )
        if (
            status == RosterStatus.INJURED_RESERVE
            and team_cap.ir_count >= self.settings.ir_max
        ):
            errors.append(f"IR is full ({self.settings.ir_max} players maximum)")
        return errors

    @staticmethod
    def _result(action: str, errors, warnings) -> ValidationResult:
        if errors:
            logger.info("Rejected %s: %s", action, "; ".join(errors))
        return ValidationResult.from_messages(errors, warnings)
