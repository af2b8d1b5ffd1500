"""Draft pick cap charges and season-rollover pick creation."""

import logging
from typing import Iterable, List, Optional

from src.cap_engine import config
from src.cap_engine.models import DraftPick, DraftPickCapHit

logger = logging.getLogger(__name__)


def draft_pick_cap_hits(
    picks: Iterable[DraftPick], team_id: int, year: int
) -> List[DraftPickCapHit]:
    """Cap charges for the unused ``year`` picks that ``team_id`` currently owns."""
    return [
        DraftPickCapHit(
            pick_id=pick.pick_id,
            year=pick.year,
            round=pick.round,
            original_team_id=pick.original_team_id,
            salary=pick.cap_value(),
        )
        for pick in picks
        if pick.current_team_id == team_id
        and pick.year == year
        and not pick.is_used
    ]


def create_rollover_picks(
    team_ids: Iterable[int],
    current_season: int,
    existing: Optional[Iterable[DraftPick]] = None,
    rounds: int = config.DRAFT_ROUNDS,
    years_ahead: int = config.DRAFT_PICK_YEARS_AHEAD,
    first_pick_id: int = 1,
) -> List[DraftPick]:
    """
    Create the picks for the season ``years_ahead`` out from ``current_season``.

    Every team gets one pick per round, owned by itself. Slots already
    present in ``existing`` (same year, round and original team) are skipped
    so the rollover can be re-run safely.

    Returns:
        Newly created picks, with ids assigned from ``first_pick_id``.
    """
    if rounds < 1:
        raise ValueError(f"rounds must be a positive integer, got {rounds}")

    year = current_season + years_ahead
    taken = {
        (pick.year, pick.round, pick.original_team_id) for pick in existing or []
    }

    created = []
    skipped = 0
    next_id = first_pick_id
    for team_id in team_ids:
        for round_number in range(1, rounds + 1):
            if (year, round_number, team_id) in taken:
                skipped += 1
                continue
            created.append(
                DraftPick(
                    pick_id=next_id,
                    year=year,
                    round=round_number,
                    original_team_id=team_id,
                    current_team_id=team_id,
                )
            )
            next_id += 1

    logger.info(
        "Season rollover %d: created %d picks for %d (%d already existed)",
        current_season,
        len(created),
        year,
        skipped,
    )
    return created
