"""Loan parameters and tenure policies."""

from dataclasses import dataclass, field

from reverse_mortgage_sim.strategies import GrowthStrategy

# Tenure bounds (months)
MAX_TENURE_MONTHS = 240       # 20 years; ceiling for maxLTV tenure
MIN_FIXED_TENURE_MONTHS = 12

# Interest rate bounds (annual, percent)
MIN_INTEREST_RATE_PCT = 8.0
MAX_INTEREST_RATE_PCT = 15.0

MAX_ANNUAL_INCREASE_RATE_PCT = 5.0

ALLOWED_APPRECIATION_RATES_PCT: tuple[int, ...] = (1, 2, 3, 4, 5)
ALLOWED_LTV_RATIOS_PCT: tuple[int, ...] = (50, 60, 70, 75, 80, 85)
ALLOWED_BLOCK_PERIODS: tuple[int, ...] = (3, 5, 7, 10)
ALLOWED_BLOCK_INCREASE_RATES_PCT: tuple[int, ...] = (5, 10, 15, 20)

# Stop once the year-end LTV lands within this many percentage points of target
LTV_STOP_TOLERANCE = 1.5


@dataclass(frozen=True)
class MaxLTVTenure:
    """Pay out until the LTV ceiling is reached (bounded by 240 months)."""

    @property
    def ceiling_months(self) -> int:
        return MAX_TENURE_MONTHS

    def describe(self) -> str:
        return f"Maximum tenure based on LTV (up to {MAX_TENURE_MONTHS} months)"


@dataclass(frozen=True)
class FixedTenure:
    """Pay out for a fixed number of months (unless the LTV cap hits first)."""

    months: int

    @property
    def ceiling_months(self) -> int:
        return self.months

    def describe(self) -> str:
        return f"Fixed tenure of {self.months} months"


TenurePolicy = MaxLTVTenure | FixedTenure


@dataclass(frozen=True)
class LoanParameters:
    """Validated inputs for one payout simulation.

    Rates are annual fractions (0.095 = 9.5%). Build via
    ``normalize_request`` when starting from raw form/CLI values.
    """

    property_value: float
    appreciation_rate: float
    monthly_payout_base: float
    interest_rate: float
    ltv_ratio: float
    growth: GrowthStrategy
    tenure: TenurePolicy = field(default_factory=MaxLTVTenure)
    ltv_stop_tolerance: float = LTV_STOP_TOLERANCE

    @property
    def target_ltv_pct(self) -> float:
        return self.ltv_ratio * 100

    def max_loan_amount(self, property_value: float) -> float:
        """LTV cap for a given property value."""
        return property_value * self.ltv_ratio
