"""Calculator usage history: record shape, payload builder and store contract.

The schedule itself is never persisted; callers store a ``UsageRecord``
describing who ran which inputs and what came out. Durable storage lives
outside this package; ``InMemoryUsageStore`` implements the same contract
for tests and single-process use.
"""

import dataclasses
import itertools
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol

from reverse_mortgage_sim.params import LoanParameters
from reverse_mortgage_sim.result import ScheduleResult
from reverse_mortgage_sim.strategies import AnnualIncrease, BlockPeriod


@dataclass(frozen=True)
class UsageRecord:
    user_id: int
    property_value: float
    appreciation_rate: float  # percent
    required_monthly_amount: float
    payout_adjustment_type: str  # "annual_increase" | "block_period"
    calculation_result: dict = field(default_factory=dict)
    annual_increase_rate: float | None = None  # percent
    block_period: int | None = None
    block_increase_rate: float | None = None  # percent
    created_at: datetime | None = None
    id: int | None = None


class UsageStore(Protocol):
    def store(self, record: UsageRecord) -> UsageRecord:
        """Persist a record; returns it with id and created_at assigned."""
        ...

    def list_for_user(self, user_id: int) -> list[UsageRecord]:
        """Records of one user, newest first."""
        ...


def calculation_payload(result: ScheduleResult) -> dict:
    """Serialize a schedule to the JSON shape kept in usage history."""
    return {
        "totalLoanAmount": result.total_loan_amount,
        "interestRate": result.interest_rate,
        "monthsPossible": result.total_months_possible,
        "maxLoanAmount": result.max_loan_amount,
        "totalDisbursed": result.total_disbursed,
        "totalInterest": result.total_interest,
        "totalAppreciation": result.total_appreciation,
        "finalPropertyValue": result.final_property_value,
        "yearlyPayouts": [
            {
                "year": y.year,
                "monthlyAmount": y.monthly_amount,
                "totalDisbursed": y.disbursed,
                "interestAccrued": y.interest_accrued,
                "propertyValue": y.property_value,
                "propertyAppreciation": y.appreciation,
                "ltvPercentage": y.ltv_percentage,
                "monthsInYear": y.months_in_year,
            }
            for y in result.years
        ],
    }


def build_usage_record(user_id: int, params: LoanParameters, result: ScheduleResult) -> UsageRecord:
    """Build the history entry for one calculation (id/created_at left to the store)."""
    growth = params.growth
    annual_rate = None
    block_period = None
    block_rate = None
    if isinstance(growth, AnnualIncrease):
        annual_rate = growth.rate * 100
    elif isinstance(growth, BlockPeriod):
        block_period = growth.period_years
        block_rate = growth.increase_rate * 100
    return UsageRecord(
        user_id=user_id,
        property_value=params.property_value,
        appreciation_rate=params.appreciation_rate * 100,
        required_monthly_amount=params.monthly_payout_base,
        payout_adjustment_type=growth.adjustment_type,
        calculation_result=calculation_payload(result),
        annual_increase_rate=annual_rate,
        block_period=block_period,
        block_increase_rate=block_rate,
    )


class InMemoryUsageStore:
    """Process-local UsageStore."""

    def __init__(self):
        self._records: list[UsageRecord] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def store(self, record: UsageRecord) -> UsageRecord:
        with self._lock:
            stored = dataclasses.replace(
                record,
                id=next(self._ids),
                created_at=record.created_at or datetime.now(timezone.utc),
            )
            self._records.append(stored)
        return stored

    def list_for_user(self, user_id: int) -> list[UsageRecord]:
        with self._lock:
            mine = [r for r in self._records if r.user_id == user_id]
        # Stable sort keeps later inserts first when timestamps tie
        return sorted(reversed(mine), key=lambda r: r.created_at, reverse=True)
