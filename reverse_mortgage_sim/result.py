"""Schedule records and the result aggregator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class YearRecord:
    """One simulated payout year.

    property_value is the value at the start of the year; ltv_percentage is
    closing_balance relative to that value.
    """

    year: int
    monthly_amount: float
    months_in_year: int
    disbursed: float
    interest_accrued: float
    property_value: float
    appreciation: float
    ltv_percentage: float
    closing_balance: float
    max_loan_amount: float


@dataclass(frozen=True)
class ScheduleResult:
    years: tuple[YearRecord, ...]
    total_loan_amount: float
    total_disbursed: float
    total_interest: float
    total_appreciation: float
    final_property_value: float
    total_months_possible: int
    interest_rate: float
    max_loan_amount: float

    @property
    def total_years(self) -> int:
        return len(self.years)

    @property
    def final_ltv_percentage(self) -> float:
        """LTV of the last recorded year (0 when nothing was disbursed)."""
        if not self.years:
            return 0.0
        return self.years[-1].ltv_percentage


@dataclass
class Ledger:
    """Running totals carried by the simulation loop."""

    balance: float = 0.0
    total_disbursed: float = 0.0
    total_interest: float = 0.0
    total_appreciation: float = 0.0
    property_value: float = 0.0
    max_loan_amount: float = 0.0


def aggregate(years: list[YearRecord], ledger: Ledger, interest_rate: float) -> ScheduleResult:
    """Freeze the emitted records and final totals into a ScheduleResult."""
    return ScheduleResult(
        years=tuple(years),
        total_loan_amount=ledger.balance,
        total_disbursed=ledger.total_disbursed,
        total_interest=ledger.total_interest,
        total_appreciation=ledger.total_appreciation,
        final_property_value=ledger.property_value,
        total_months_possible=sum(y.months_in_year for y in years),
        interest_rate=interest_rate,
        max_loan_amount=ledger.max_loan_amount,
    )
