"""Tests for the multi-year projection tables."""

import pytest

from src.cap_engine.projections import player_salary_table, team_cap_table


# ── Player salaries ──────────────────────────────────────────────────

class TestPlayerSalaryTable:
    def test_salaries_escalate_across_columns(self, settings, league_contracts):
        team_one = [c for c in league_contracts if c.team_id == 1]
        df = player_salary_table(team_one, [2025, 2026, 2027], settings)
        row = df[df["contract_id"] == 1].iloc[0]
        assert [row[2025], row[2026], row[2027]] == [100, 115, 133]

    def test_sorted_by_first_season_descending(self, settings, league_contracts):
        team_one = [c for c in league_contracts if c.team_id == 1]
        df = player_salary_table(team_one, [2025, 2026], settings)
        assert list(df["contract_id"]) == [1, 4, 2, 3]

    def test_cap_hit_mode_discounts_status(self, settings, league_contracts):
        df = player_salary_table(league_contracts, [2025, 2026], settings, cap_hits=True)
        row = df[df["contract_id"] == 2].iloc[0]
        assert row[2025] == 10
        assert row[2026] == 12
        assert row["roster_status"] == "practice_squad"

    def test_inactive_contracts_excluded(self, settings, make_contract):
        contracts = [make_contract(1), make_contract(2, is_active=False)]
        df = player_salary_table(contracts, [2025], settings)
        assert list(df["contract_id"]) == [1]

    def test_empty_input_keeps_columns(self, settings):
        df = player_salary_table([], [2025, 2026], settings)
        assert df.empty
        assert 2026 in df.columns
        assert "player_name" in df.columns


# ── Team totals ──────────────────────────────────────────────────────

class TestTeamCapTable:
    def test_one_row_per_season(self, settings, league_contracts, league_picks):
        df = team_cap_table(league_contracts, league_picks, 1, [2025, 2026], settings)
        assert list(df["year"]) == [2025, 2026]
        assert list(df["salary_cap"]) == [300, 275]

    def test_totals_include_that_seasons_picks(
        self, settings, league_contracts, league_picks
    ):
        df = team_cap_table(league_contracts, league_picks, 1, [2025, 2026], settings)
        first, second = df.iloc[0], df.iloc[1]
        assert (first["total_salary"], first["cap_space"]) == (170, 130)
        assert first["draft_pick_salary"] == 10
        # 115 + 12 (PS) + 23 + 35 (IR) + 4 (2nd round pick)
        assert (second["total_salary"], second["cap_space"]) == (189, 86)
        assert second["draft_pick_salary"] == 4

    def test_over_cap_season_logged(self, settings, make_contract, caplog):
        contracts = [make_contract(1, base_salary=260)]
        with caplog.at_level("WARNING"):
            df = team_cap_table(contracts, [], 1, [2025, 2026], settings)
        # 260 fits under 300; 299 does not fit under 275
        assert list(df["cap_space"]) == [40, -24]
        assert "over the cap in 2026" in caplog.text

    @pytest.mark.parametrize("team_id", [1, 2])
    def test_other_teams_ignored(self, settings, league_contracts, team_id):
        df = team_cap_table(league_contracts, [], team_id, [2025], settings)
        expected = {1: 160, 2: 160}[team_id]
        assert df.iloc[0]["total_salary"] == expected
