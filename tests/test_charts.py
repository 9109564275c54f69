"""Smoke tests for chart output."""

from reverse_mortgage_sim import (
    AnnualIncrease,
    FixedTenure,
    LoanParameters,
    simulate_schedule,
)
from reverse_mortgage_sim.charts import plot_schedule, plot_trajectory


def _result(monthly: float = 10000):
    return simulate_schedule(LoanParameters(
        property_value=1000000,
        appreciation_rate=0.01,
        monthly_payout_base=monthly,
        interest_rate=0.10,
        ltv_ratio=0.5,
        growth=AnnualIncrease(0.0),
        tenure=FixedTenure(24),
    ))


class TestCharts:
    def test_plot_schedule(self, tmp_path):
        path = plot_schedule(_result(), tmp_path / "charts", "case")
        assert path == tmp_path / "charts" / "schedule-case.png"
        assert path.stat().st_size > 0

    def test_plot_trajectory(self, tmp_path):
        path = plot_trajectory({"a": _result(), "b": _result(20000)}, tmp_path)
        assert path.name == "trajectory.png"
        assert path.exists()
