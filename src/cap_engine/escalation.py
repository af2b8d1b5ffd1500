"""Salary escalation - projects a recorded salary into other seasons.

A contract's salary is entered for one season (its *salary year*). Every
later season is derived from it by walking forward one year at a time:

1. Waiver-wire contracts below the free-agent minimum are raised to the
   minimum before that year's escalation.
2. The running salary is escalated by the league rate and rounded up.
3. In the contract's loyalty-bump season (the Nth season with the team,
   counting the acquisition season as season 1) a fixed amount is added
   after escalation.

The entered salary is taken to already include anything due in the
salary year itself, so no bump is ever applied *at* the salary year.
"""

import logging
import math
from decimal import Decimal
from typing import Dict, Iterable, Optional

from src.cap_engine.league_settings import LeagueSettings
from src.cap_engine.models import AcquisitionType, Number

logger = logging.getLogger(__name__)


def _to_decimal(value: Number) -> Decimal:
    # str() keeps float inputs like 0.15 exact instead of their binary expansion
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def is_loyalty_bump_year(
    year_acquired: int, target_year: int, settings: LeagueSettings
) -> bool:
    """Whether ``target_year`` is the contract's loyalty-bump season."""
    return year_acquired + settings.loyalty_bump_year - 1 == target_year


def calculate_salary(
    base_salary: Number,
    year_acquired: int,
    target_year: int,
    settings: LeagueSettings,
    salary_year: int,
    acquisition_type: Optional[AcquisitionType] = None,
    rate: Optional[Number] = None,
) -> int:
    """Salary owed in ``target_year`` for a salary recorded in ``salary_year``.

    Args:
        base_salary: Salary as entered for ``salary_year``.
        year_acquired: First season with the current team.
        target_year: Season to compute.
        settings: League settings snapshot.
        salary_year: Season ``base_salary`` applies to.
        acquisition_type: How the player was acquired; only waiver-type
            acquisitions get the minimum-salary floor.
        rate: Escalation rate. Defaults to ``settings.escalation_rate``.

    Returns:
        Whole-unit salary. ``0`` for seasons before ``salary_year``.
    """
    if target_year == salary_year:
        return math.ceil(_to_decimal(base_salary))

    if target_year < salary_year:
        return 0

    growth = 1 + _to_decimal(settings.escalation_rate if rate is None else rate)
    floor = _to_decimal(settings.free_agent_minimum)
    bump = settings.loyalty_bump_amount
    apply_floor = (
        acquisition_type is not None
        and AcquisitionType(acquisition_type).is_waiver_type
    )

    salary = _to_decimal(base_salary)
    for current_year in range(salary_year + 1, target_year + 1):
        if apply_floor and salary < floor:
            salary = floor

        salary = Decimal(math.ceil(salary * growth))

        if is_loyalty_bump_year(year_acquired, current_year, settings):
            salary += bump

    logger.debug(
        "Salary %s (%d) -> %s (%d), acquired %d via %s",
        base_salary,
        salary_year,
        salary,
        target_year,
        year_acquired,
        acquisition_type,
    )
    return int(salary)


def get_salary_projections(
    base_salary: Number,
    year_acquired: int,
    years: Iterable[int],
    settings: LeagueSettings,
    salary_year: int,
    acquisition_type: Optional[AcquisitionType] = None,
    rate: Optional[Number] = None,
) -> Dict[int, int]:
    """Salary for each season in ``years``, keyed by season."""
    return {
        year: calculate_salary(
            base_salary,
            year_acquired,
            year,
            settings,
            salary_year,
            acquisition_type=acquisition_type,
            rate=rate,
        )
        for year in years
    }
