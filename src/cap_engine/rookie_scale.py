"""Rookie draft salary scale and placeholder cap values for future picks."""

# Round 1 signing salary by pick within the round
ROUND_1_SCALE = {
    1: 14,
    2: 12,
    3: 12,
    4: 10,
    5: 10,
    6: 10,
    7: 8,
    8: 8,
    9: 8,
    10: 6,
    11: 6,
    12: 6,
}
ROUND_1_FALLBACK = 6

# Flat signing salary for later rounds; round 4+ shares the lowest tier
LATER_ROUND_SCALE = {
    2: 4,
    3: 2,
}
LOWEST_TIER_SALARY = 1

# Expected-value charge for an unused pick, by round
DRAFT_PICK_CAP_VALUES = {
    1: 10,
    2: 4,
    3: 2,
    4: 1,
}
LOWEST_TIER_CAP_VALUE = 1


def _check_positive(name: str, value: int):
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value}")


def get_rookie_salary(round: int, pick_in_round: int) -> int:
    """Signing salary for a rookie drafted at ``round``.``pick_in_round``."""
    _check_positive("round", round)

    if round == 1:
        _check_positive("pick_in_round", pick_in_round)
        return ROUND_1_SCALE.get(pick_in_round, ROUND_1_FALLBACK)
    return LATER_ROUND_SCALE.get(round, LOWEST_TIER_SALARY)


def get_draft_pick_cap_value(round: int) -> int:
    """Placeholder cap charge for a future, not-yet-used pick in ``round``."""
    _check_positive("round", round)
    return DRAFT_PICK_CAP_VALUES.get(round, LOWEST_TIER_CAP_VALUE)
