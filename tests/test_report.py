"""Tests for presentation helpers."""

import pytest
from reverse_mortgage_sim import (
    AnnualIncrease,
    FixedTenure,
    LoanParameters,
    simulate_schedule,
)
from reverse_mortgage_sim.report import (
    SCHEDULE_COLUMNS,
    fmt_inr,
    fmt_period,
    group_indian,
    render_markdown,
    schedule_rows,
    summary_items,
)


def _params(**overrides) -> LoanParameters:
    base = dict(
        property_value=1000000,
        appreciation_rate=0.01,
        monthly_payout_base=10000,
        interest_rate=0.10,
        ltv_ratio=0.5,
        growth=AnnualIncrease(0.0),
        tenure=FixedTenure(24),
    )
    base.update(overrides)
    return LoanParameters(**base)


class TestGroupIndian:
    @pytest.mark.parametrize(
        "n, expected",
        [
            (0, "0"),
            (999, "999"),
            (1000, "1,000"),
            (45000, "45,000"),
            (100000, "1,00,000"),
            (15000000, "1,50,00,000"),
            (1234567890, "1,23,45,67,890"),
            (-2500000, "-25,00,000"),
        ],
    )
    def test_grouping(self, n, expected):
        assert group_indian(n) == expected


class TestFormatters:
    def test_fmt_inr_rounds(self):
        assert fmt_inr(1234.6) == "₹1,235"
        assert fmt_inr(9000000.4) == "₹90,00,000"

    @pytest.mark.parametrize(
        "months, expected",
        [(0, "0 years 0 months"), (12, "1 years 0 months"), (150, "12 years 6 months")],
    )
    def test_fmt_period(self, months, expected):
        assert fmt_period(months) == expected


class TestScheduleRows:
    def test_first_row(self):
        rows = schedule_rows(simulate_schedule(_params()))
        assert len(rows) == 2
        assert rows[0] == [
            "1", "₹10,000", "12", "₹1,20,000", "₹6,000", "₹10,00,000", "₹10,000", "12.60%",
        ]
        assert len(rows[0]) == len(SCHEDULE_COLUMNS)

    def test_summary_items(self):
        params = _params()
        items = dict(summary_items(params, simulate_schedule(params)))
        assert items["Total Loan Amount"] == "₹2,64,600"
        assert items["Total Loan Period"] == "2 years 0 months"
        assert items["Final Property Value"] == "₹10,20,100"


class TestRenderMarkdown:
    def test_sections(self):
        params = _params()
        md = render_markdown(params, simulate_schedule(params), title="Test Report")
        assert md.startswith("# Test Report")
        assert "## Calculation Results" in md
        assert "## Year-wise Payout Schedule" in md
        assert "| 2 | ₹10,000 | 12 |" in md

    def test_empty_schedule(self):
        params = _params(monthly_payout_base=600000, tenure=FixedTenure(12))
        md = render_markdown(params, simulate_schedule(params))
        assert "No payout is possible" in md
