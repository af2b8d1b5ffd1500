"""Tests for salary escalation across seasons."""

import math
from decimal import Decimal

import pytest

from src.cap_engine.escalation import (
    calculate_salary,
    get_salary_projections,
    is_loyalty_bump_year,
)
from src.cap_engine.models import AcquisitionType


def _escalate_once(salary):
    return math.ceil(Decimal(salary) * Decimal("1.15"))


# ── Salary year and earlier ──────────────────────────────────────────

class TestSalaryYear:
    def test_returns_base_salary_at_salary_year(self, settings):
        assert calculate_salary(99, 2022, 2025, settings, 2025) == 99

    def test_rounds_fractional_base_up(self, settings):
        assert calculate_salary(12.3, 2020, 2025, settings, 2025) == 13
        assert calculate_salary(Decimal("12.01"), 2020, 2025, settings, 2025) == 13

    def test_bump_not_applied_again_at_salary_year(self, settings):
        """Entered salary already includes the bump due in its own season."""
        # Acquired 2021 -> 5th season is 2025, the salary year itself
        assert is_loyalty_bump_year(2021, 2025, settings)
        assert calculate_salary(20, 2021, 2025, settings, 2025) == 20

    def test_bump_in_salary_year_not_carried_into_next_year(self, settings):
        # 20 * 1.15 = 23 with no bump added for 2025 or 2026
        assert calculate_salary(20, 2021, 2026, settings, 2025) == 23

    @pytest.mark.parametrize("target_year", [2020, 2023, 2024])
    def test_years_before_salary_year_are_zero(self, settings, target_year):
        assert calculate_salary(50, 2020, target_year, settings, 2025) == 0


# ── Escalation ───────────────────────────────────────────────────────

class TestEscalation:
    def test_concrete_loyalty_scenario(self, settings):
        """99 in 2025, acquired 2022: 2026 is season 5 -> 114 + 5."""
        assert calculate_salary(99, 2022, 2025, settings, 2025) == 99
        assert calculate_salary(99, 2022, 2026, settings, 2025) == 119
        assert calculate_salary(99, 2022, 2027, settings, 2025) == 137

    def test_rounds_up_every_year(self, settings):
        # 10 -> 11.5 -> 12 -> 13.8 -> 14
        assert calculate_salary(10, 2025, 2026, settings, 2025) == 12
        assert calculate_salary(10, 2025, 2027, settings, 2025) == 14

    def test_exact_products_are_not_bumped_up(self, settings):
        assert calculate_salary(20, 2025, 2026, settings, 2025) == 23
        assert calculate_salary(100, 2025, 2026, settings, 2025) == 115

    def test_decimal_and_string_like_salaries(self, settings):
        # 12.5 * 1.15 = 14.375
        assert calculate_salary(Decimal("12.50"), 2025, 2026, settings, 2025) == 15
        assert calculate_salary(12.5, 2025, 2026, settings, 2025) == 15

    def test_explicit_rate_overrides_settings(self, settings):
        assert calculate_salary(10, 2025, 2026, settings, 2025, rate=0) == 10
        # 2029 is the 5th season: bump still applies with no escalation
        assert calculate_salary(10, 2025, 2029, settings, 2025, rate=0) == 15

    def test_uses_settings_rate(self, settings):
        slow = settings.with_overrides(escalation_rate=0.10)
        assert calculate_salary(100, 2025, 2026, slow, 2025) == 110

    def test_monotonic_in_target_year(self, settings):
        values = [
            calculate_salary(
                3, 2023, year, settings, 2025,
                acquisition_type=AcquisitionType.WAIVER_WIRE,
            )
            for year in range(2023, 2036)
        ]
        assert values == sorted(values)

    def test_each_call_restarts_from_salary_year(self, settings):
        years = list(range(2025, 2032))
        projections = get_salary_projections(
            33, 2024, years, settings, 2025, acquisition_type=AcquisitionType.FAAB
        )
        for year in years:
            assert projections[year] == calculate_salary(
                33, 2024, year, settings, 2025, acquisition_type=AcquisitionType.FAAB
            )
        # Repeat calls give identical results
        assert projections == get_salary_projections(
            33, 2024, years, settings, 2025, acquisition_type=AcquisitionType.FAAB
        )


# ── Loyalty bump ─────────────────────────────────────────────────────

class TestLoyaltyBump:
    def test_bump_year_counts_acquisition_as_year_one(self, settings):
        assert is_loyalty_bump_year(2022, 2026, settings)
        assert not is_loyalty_bump_year(2022, 2025, settings)
        assert not is_loyalty_bump_year(2022, 2027, settings)

    def test_bump_year_follows_settings(self, settings):
        custom = settings.with_overrides(loyalty_bump_year=3)
        assert is_loyalty_bump_year(2022, 2024, custom)

    def test_bump_fires_exactly_once_over_ten_years(self, settings):
        salary_year = 2025
        year_acquired = 2024
        bump_year = year_acquired + settings.loyalty_bump_year - 1

        previous = calculate_salary(10, year_acquired, salary_year, settings, salary_year)
        bumped_years = []
        for year in range(salary_year + 1, salary_year + 11):
            current = calculate_salary(10, year_acquired, year, settings, salary_year)
            extra = current - _escalate_once(previous)
            if extra:
                assert extra == settings.loyalty_bump_amount
                bumped_years.append(year)
            previous = current

        assert bumped_years == [bump_year]

    def test_bump_amount_follows_settings(self, settings):
        generous = settings.with_overrides(loyalty_bump_amount=12)
        assert calculate_salary(99, 2022, 2026, generous, 2025) == 126


# ── Waiver-wire minimum ──────────────────────────────────────────────

class TestWaiverFloor:
    def test_waiver_salary_raised_to_minimum_before_escalation(self, settings):
        # 2 -> 5 -> 5.75 -> 6
        assert calculate_salary(
            2, 2025, 2026, settings, 2025, acquisition_type=AcquisitionType.WAIVER_WIRE
        ) == 6

    def test_waiver_floor_only_when_below_minimum(self, settings):
        # 6 is above the minimum: 6.9 -> 7
        assert calculate_salary(
            2, 2025, 2027, settings, 2025, acquisition_type="waiver_wire"
        ) == 7

    @pytest.mark.parametrize(
        "acquisition_type",
        [
            AcquisitionType.ROOKIE_DRAFT,
            AcquisitionType.AUCTION,
            AcquisitionType.FREE_AGENT_AUCTION,
            AcquisitionType.TRADE,
            None,
        ],
    )
    def test_non_waiver_salaries_not_floored(self, settings, acquisition_type):
        # 2 * 1.15 = 2.3 -> 3
        assert calculate_salary(
            2, 2025, 2026, settings, 2025, acquisition_type=acquisition_type
        ) == 3

    def test_floor_follows_settings(self, settings):
        custom = settings.with_overrides(free_agent_minimum=10)
        assert calculate_salary(
            2, 2025, 2026, custom, 2025, acquisition_type=AcquisitionType.WAIVER_WIRE
        ) == 12

    def test_unknown_acquisition_type_is_fatal(self, settings):
        with pytest.raises(ValueError):
            calculate_salary(2, 2025, 2026, settings, 2025, acquisition_type="keeper")
