"""Cap-hit discounts by roster status."""

import math
from decimal import Decimal

from src.cap_engine.league_settings import LeagueSettings
from src.cap_engine.models import RosterStatus


def calculate_cap_hit(
    salary: int, roster_status: RosterStatus, settings: LeagueSettings
) -> int:
    """Amount charged against the cap for ``salary`` at ``roster_status``.

    Discounted statuses always round up.

    Raises:
        ValueError: If ``roster_status`` is not a known status.
    """
    status = RosterStatus(roster_status)

    if status == RosterStatus.ACTIVE:
        return salary
    if status == RosterStatus.PRACTICE_SQUAD:
        pct = settings.practice_squad_cap_pct
    elif status == RosterStatus.INJURED_RESERVE:
        pct = settings.ir_cap_pct
    else:
        raise ValueError(f"Unhandled roster status: {status!r}")

    return math.ceil(Decimal(salary) * Decimal(str(pct)))
