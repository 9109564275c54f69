"""Sample calculations and multi-sample execution."""

from reverse_mortgage_sim.normalize import normalize_request
from reverse_mortgage_sim.result import ScheduleResult
from reverse_mortgage_sim.simulation import simulate_schedule

_COMMON = {
    "payoutAdjustmentType": "annual",
    "annualIncreaseRate": 0,
    "interestRate": 9.5,
    "tenureType": "maxLTV",
}

SAMPLE_CALCULATIONS = {
    "Palm Grove Apartments, Malad West, Mumbai": {
        **_COMMON,
        "propertyValue": 15000000,   # 1.5 Crore
        "requiredMonthlyAmount": 45000,
        "ltvRatio": 60,
        "appreciationRate": 3,
    },
    "Green Valley Colony, Banjara Hills, Hyderabad": {
        **_COMMON,
        "propertyValue": 8000000,    # 80 Lakhs
        "requiredMonthlyAmount": 28000,
        "ltvRatio": 70,
        "appreciationRate": 4,
    },
    "Silver Oaks Estate, Whitefield, Bangalore": {
        **_COMMON,
        "propertyValue": 12000000,   # 1.2 Crore
        "requiredMonthlyAmount": 38000,
        "ltvRatio": 70,
        "appreciationRate": 5,
        "payoutAdjustmentType": "block",
        "blockPeriod": 5,
        "blockIncreaseRate": 10,
    },
    "Riverside Gardens, Salt Lake City, Kolkata": {
        **_COMMON,
        "propertyValue": 6500000,    # 65 Lakhs
        "requiredMonthlyAmount": 22000,
        "ltvRatio": 60,
        "appreciationRate": 3,
        "tenureType": "fixed",
        "fixedTenureMonths": 120,
    },
}


def run_samples(overrides: dict | None = None) -> dict[str, ScheduleResult]:
    """Simulate every sample calculation.

    overrides: request fields applied on top of each sample (e.g. {"interestRate": 12}).
    """
    results = {}
    for name, request in SAMPLE_CALCULATIONS.items():
        params = normalize_request({**request, **(overrides or {})})
        results[name] = simulate_schedule(params)
    return results
