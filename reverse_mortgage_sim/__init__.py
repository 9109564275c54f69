"""Reverse Mortgage Payout Simulation Package."""

from reverse_mortgage_sim.params import (
    LoanParameters,
    MaxLTVTenure,
    FixedTenure,
    MAX_TENURE_MONTHS,
    MIN_FIXED_TENURE_MONTHS,
    MIN_INTEREST_RATE_PCT,
    MAX_INTEREST_RATE_PCT,
    ALLOWED_APPRECIATION_RATES_PCT,
    ALLOWED_LTV_RATIOS_PCT,
    ALLOWED_BLOCK_PERIODS,
    ALLOWED_BLOCK_INCREASE_RATES_PCT,
    LTV_STOP_TOLERANCE,
)
from reverse_mortgage_sim.strategies import (
    GrowthStrategy,
    GrowthState,
    AnnualIncrease,
    BlockPeriod,
)
from reverse_mortgage_sim.normalize import (
    ValidationError,
    normalize_request,
    parse_amount,
    parse_percent,
)
from reverse_mortgage_sim.result import YearRecord, ScheduleResult, aggregate
from reverse_mortgage_sim.simulation import simulate_schedule
from reverse_mortgage_sim.history import (
    UsageRecord,
    UsageStore,
    InMemoryUsageStore,
    build_usage_record,
    calculation_payload,
)

__all__ = [
    "LoanParameters",
    "MaxLTVTenure",
    "FixedTenure",
    "MAX_TENURE_MONTHS",
    "MIN_FIXED_TENURE_MONTHS",
    "MIN_INTEREST_RATE_PCT",
    "MAX_INTEREST_RATE_PCT",
    "ALLOWED_APPRECIATION_RATES_PCT",
    "ALLOWED_LTV_RATIOS_PCT",
    "ALLOWED_BLOCK_PERIODS",
    "ALLOWED_BLOCK_INCREASE_RATES_PCT",
    "LTV_STOP_TOLERANCE",
    "GrowthStrategy",
    "GrowthState",
    "AnnualIncrease",
    "BlockPeriod",
    "ValidationError",
    "normalize_request",
    "parse_amount",
    "parse_percent",
    "YearRecord",
    "ScheduleResult",
    "aggregate",
    "simulate_schedule",
    "UsageRecord",
    "UsageStore",
    "InMemoryUsageStore",
    "build_usage_record",
    "calculation_payload",
]
