"""Core simulation engine."""

import logging
import math

from reverse_mortgage_sim.params import LoanParameters
from reverse_mortgage_sim.result import Ledger, ScheduleResult, YearRecord, aggregate

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def _year_record(
    year: int, monthly_amount: float, months: int, disbursed: float,
    interest: float, ledger: Ledger, appreciation: float,
) -> YearRecord:
    return YearRecord(
        year=year,
        monthly_amount=monthly_amount,
        months_in_year=months,
        disbursed=disbursed,
        interest_accrued=interest,
        property_value=ledger.property_value,
        appreciation=appreciation,
        ltv_percentage=ledger.balance / ledger.property_value * 100,
        closing_balance=ledger.balance,
        max_loan_amount=ledger.max_loan_amount,
    )


def simulate_schedule(params: LoanParameters) -> ScheduleResult:
    """Simulate year-by-year payouts until the LTV cap or the tenure runs out.

    Each year disburses up to 12 months of the growth strategy's monthly
    amount, accrues simple interest on the average balance, records the
    year, then appreciates the property and raises the cap for the next
    year. Termination is silent: the result simply has fewer years.

    Note: final_property_value includes the appreciation applied after the
    last full year unless the run ended by the LTV tolerance check or a cap
    hit inside a year.
    """
    ledger = Ledger(
        property_value=params.property_value,
        max_loan_amount=params.max_loan_amount(params.property_value),
    )
    growth_state = params.growth.initial_state(params.monthly_payout_base)
    remaining_months = params.tenure.ceiling_months
    year = 1
    years: list[YearRecord] = []

    while ledger.balance < ledger.max_loan_amount and remaining_months > 0:
        months = min(MONTHS_PER_YEAR, remaining_months)
        monthly_amount = growth_state.monthly_amount
        disbursement = monthly_amount * months

        # Shorten the year to the whole months that still fit under the cap
        if ledger.balance + disbursement > ledger.max_loan_amount:
            months = math.floor((ledger.max_loan_amount - ledger.balance) / monthly_amount)
            disbursement = monthly_amount * months
            if months <= 0:
                logger.debug("Year %s: no whole month fits under cap %s", year, ledger.max_loan_amount)
                break

        opening_balance = ledger.balance
        ledger.balance += disbursement
        average_balance = (opening_balance + ledger.balance) / 2
        interest = average_balance * params.interest_rate * (months / MONTHS_PER_YEAR)
        appreciation = ledger.property_value * params.appreciation_rate

        if ledger.balance + interest > ledger.max_loan_amount:
            headroom = ledger.max_loan_amount - ledger.balance
            ledger.balance += headroom
            ledger.total_disbursed += disbursement
            ledger.total_interest += headroom
            ledger.total_appreciation += appreciation
            years.append(_year_record(
                year, monthly_amount, months, disbursement, headroom, ledger, appreciation,
            ))
            logger.debug("Year %s: interest capped at headroom %s; LTV cap reached", year, headroom)
            break

        ledger.balance += interest
        ledger.total_disbursed += disbursement
        ledger.total_interest += interest
        ledger.total_appreciation += appreciation
        record = _year_record(
            year, monthly_amount, months, disbursement, interest, ledger, appreciation,
        )
        years.append(record)
        logger.debug(
            "Year %s: months=%s disbursed=%s interest=%s balance=%s ltv=%.2f%%",
            year, months, disbursement, interest, ledger.balance, record.ltv_percentage,
        )

        if abs(record.ltv_percentage - params.target_ltv_pct) <= params.ltv_stop_tolerance:
            logger.debug("Year %s: LTV within %s points of target", year, params.ltv_stop_tolerance)
            break

        ledger.property_value *= 1 + params.appreciation_rate
        ledger.max_loan_amount = params.max_loan_amount(ledger.property_value)
        if ledger.balance < ledger.max_loan_amount and remaining_months > 0:
            growth_state = params.growth.advance(growth_state, year + 1)
        remaining_months -= months
        year += 1

    return aggregate(years, ledger, params.interest_rate)
