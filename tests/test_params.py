"""Tests for LoanParameters and tenure policies."""

import dataclasses

import pytest
from reverse_mortgage_sim import (
    AnnualIncrease,
    FixedTenure,
    LoanParameters,
    MaxLTVTenure,
    LTV_STOP_TOLERANCE,
    MAX_TENURE_MONTHS,
)


def _params(**overrides) -> LoanParameters:
    base = dict(
        property_value=15000000,
        appreciation_rate=0.03,
        monthly_payout_base=45000,
        interest_rate=0.095,
        ltv_ratio=0.6,
        growth=AnnualIncrease(0.0),
    )
    base.update(overrides)
    return LoanParameters(**base)


class TestTenure:
    def test_max_ltv_ceiling(self):
        assert MaxLTVTenure().ceiling_months == MAX_TENURE_MONTHS == 240

    def test_fixed_ceiling(self):
        assert FixedTenure(120).ceiling_months == 120

    def test_describe(self):
        assert "240 months" in MaxLTVTenure().describe()
        assert FixedTenure(36).describe() == "Fixed tenure of 36 months"


class TestLoanParameters:
    def test_defaults(self):
        p = _params()
        assert p.tenure == MaxLTVTenure()
        assert p.ltv_stop_tolerance == LTV_STOP_TOLERANCE == 1.5

    def test_target_ltv_pct(self):
        assert _params(ltv_ratio=0.75).target_ltv_pct == pytest.approx(75)

    def test_max_loan_amount(self):
        p = _params()
        assert p.max_loan_amount(15000000) == pytest.approx(9000000)
        assert p.max_loan_amount(15450000) == pytest.approx(9270000)

    def test_frozen(self):
        p = _params()
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.property_value = 1
