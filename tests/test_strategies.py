"""Tests for growth strategy classes."""

import dataclasses

import pytest
from reverse_mortgage_sim import AnnualIncrease, BlockPeriod, GrowthState


def _amounts(strategy, base: float, years: int) -> list[float]:
    """Monthly amount in force for years 1..years."""
    state = strategy.initial_state(base)
    amounts = [state.monthly_amount]
    for year in range(2, years + 1):
        state = strategy.advance(state, year)
        amounts.append(state.monthly_amount)
    return amounts


class TestInitialState:
    def test_base_amount_in_year_one(self):
        state = AnnualIncrease(0.05).initial_state(45000)
        assert state == GrowthState(monthly_amount=45000, block_start_year=1)

    def test_block_starts_at_year_one(self):
        state = BlockPeriod(5, 0.1).initial_state(30000)
        assert state.block_start_year == 1
        assert state.monthly_amount == 30000


class TestAnnualIncrease:
    def test_zero_rate_is_constant(self):
        assert _amounts(AnnualIncrease(0.0), 45000, 20) == [45000] * 20

    def test_compounds_every_year(self):
        amounts = _amounts(AnnualIncrease(0.05), 10000, 4)
        assert amounts == pytest.approx([10000, 10500, 11025, 11576.25])

    def test_advance_does_not_mutate_state(self):
        strategy = AnnualIncrease(0.05)
        state = strategy.initial_state(10000)
        strategy.advance(state, 2)
        assert state.monthly_amount == 10000


class TestBlockPeriod:
    def test_three_year_blocks(self):
        amounts = _amounts(BlockPeriod(3, 0.05), 100, 7)
        assert amounts == pytest.approx([100, 100, 100, 105, 105, 105, 110.25])

    def test_block_start_resets_at_boundary(self):
        strategy = BlockPeriod(5, 0.1)
        state = strategy.initial_state(100)
        for year in range(2, 7):
            state = strategy.advance(state, year)
        assert state.block_start_year == 6
        assert state.monthly_amount == pytest.approx(110)

    @pytest.mark.parametrize("period", [3, 5, 7, 10])
    def test_changes_once_per_block(self, period):
        amounts = _amounts(BlockPeriod(period, 0.2), 1000, 20)
        change_years = [i + 1 for i in range(1, 20) if amounts[i] != amounts[i - 1]]
        assert change_years == list(range(period + 1, 21, period))


class TestStrategyValues:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            AnnualIncrease(0.05).rate = 0.1

    def test_adjustment_types(self):
        assert AnnualIncrease(0.0).adjustment_type == "annual_increase"
        assert BlockPeriod(5, 0.05).adjustment_type == "block_period"

    def test_describe(self):
        assert AnnualIncrease(0.03).describe() == "Annual increase of 3%"
        assert BlockPeriod(5, 0.1).describe() == "10% increase every 5 years"
