"""Payout growth strategy classes."""

from dataclasses import dataclass, replace
from typing import ClassVar


@dataclass(frozen=True)
class GrowthState:
    """Per-run bookkeeping of a growth strategy (amount in force this year)."""

    monthly_amount: float
    block_start_year: int = 1


@dataclass(frozen=True)
class GrowthStrategy:
    """Base class for monthly payout growth policies.

    Strategies are immutable; all per-run state travels in ``GrowthState`` so
    one strategy instance can drive any number of simulations.
    """

    ADJUSTMENT_TYPE: ClassVar[str] = ""

    @property
    def adjustment_type(self) -> str:
        return self.ADJUSTMENT_TYPE

    def initial_state(self, base_amount: float) -> GrowthState:
        """State for year 1: the base amount, first block starting at year 1."""
        return GrowthState(monthly_amount=base_amount, block_start_year=1)

    def advance(self, state: GrowthState, next_year: int) -> GrowthState:
        raise NotImplementedError

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class AnnualIncrease(GrowthStrategy):
    """Monthly payout grows by ``rate`` every year."""

    rate: float = 0.0

    ADJUSTMENT_TYPE: ClassVar[str] = "annual_increase"

    def advance(self, state: GrowthState, next_year: int) -> GrowthState:
        return replace(state, monthly_amount=state.monthly_amount * (1 + self.rate))

    def describe(self) -> str:
        return f"Annual increase of {self.rate * 100:g}%"


@dataclass(frozen=True)
class BlockPeriod(GrowthStrategy):
    """Monthly payout held flat for ``period_years``, then stepped up once.

    A new block starts when ``(year - block_start_year) % period_years == 0``
    for any year after the first.
    """

    period_years: int = 5
    increase_rate: float = 0.05

    ADJUSTMENT_TYPE: ClassVar[str] = "block_period"

    def advance(self, state: GrowthState, next_year: int) -> GrowthState:
        if next_year > 1 and (next_year - state.block_start_year) % self.period_years == 0:
            return GrowthState(
                monthly_amount=state.monthly_amount * (1 + self.increase_rate),
                block_start_year=next_year,
            )
        return state

    def describe(self) -> str:
        return f"{self.increase_rate * 100:g}% increase every {self.period_years} years"
