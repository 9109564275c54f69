"""Presentation helpers: rounding, rupee formatting and Markdown rendering.

All rounding happens here; the simulation keeps full float precision.
"""

from __future__ import annotations

from reverse_mortgage_sim.params import LoanParameters
from reverse_mortgage_sim.result import ScheduleResult

# ---------------------------------------------------------------------------
# Format helpers
# ---------------------------------------------------------------------------

def group_indian(n: int) -> str:
    """Group digits the Indian way: 15000000 → "1,50,00,000"."""
    sign = "-" if n < 0 else ""
    digits = str(abs(n))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def fmt_inr(v: float) -> str:
    """Rupee amount rounded to the nearest rupee."""
    return f"₹{group_indian(round(v))}"


def fmt_pct(v: float, digits: int = 2) -> str:
    return f"{v:.{digits}f}%"


def fmt_period(months: int) -> str:
    """Total loan period as "N years M months"."""
    return f"{months // 12} years {months % 12} months"


# ---------------------------------------------------------------------------
# Table rows
# ---------------------------------------------------------------------------

SCHEDULE_COLUMNS = (
    "Year",
    "Monthly Payout",
    "Months",
    "Annual Disbursed",
    "Interest Accrued",
    "Property Value",
    "Appreciation",
    "LTV %",
)


def schedule_rows(result: ScheduleResult) -> list[list[str]]:
    """Year-wise payout table rows, rounded for display."""
    return [
        [
            str(y.year),
            fmt_inr(y.monthly_amount),
            str(y.months_in_year),
            fmt_inr(y.disbursed),
            fmt_inr(y.interest_accrued),
            fmt_inr(y.property_value),
            fmt_inr(y.appreciation),
            fmt_pct(y.ltv_percentage),
        ]
        for y in result.years
    ]


def summary_items(params: LoanParameters, result: ScheduleResult) -> list[tuple[str, str]]:
    return [
        ("Initial Property Value", fmt_inr(params.property_value)),
        ("Final Property Value", fmt_inr(result.final_property_value)),
        ("Total Property Appreciation", fmt_inr(result.total_appreciation)),
        ("Maximum Loan Amount", fmt_inr(result.max_loan_amount)),
        ("Total Amount Disbursed", fmt_inr(result.total_disbursed)),
        ("Total Interest Accrued", fmt_inr(result.total_interest)),
        ("Total Loan Period", fmt_period(result.total_months_possible)),
        ("Total Loan Amount", fmt_inr(result.total_loan_amount)),
    ]


def input_items(params: LoanParameters) -> list[tuple[str, str]]:
    return [
        ("Property Value", fmt_inr(params.property_value)),
        ("Appreciation Rate", fmt_pct(params.appreciation_rate * 100, 0) + " per year"),
        ("Required Monthly Amount", fmt_inr(params.monthly_payout_base)),
        ("Payout Adjustment", params.growth.describe()),
        ("Loan to Value Ratio", fmt_pct(params.ltv_ratio * 100, 0)),
        ("Interest Rate", fmt_pct(params.interest_rate * 100, 2) + " per year"),
        ("Tenure", params.tenure.describe()),
    ]


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

def _md_table(header: tuple[str, ...] | list[str], rows: list[list[str]]) -> str:
    lines = [
        "| " + " | ".join(header) + " |",
        "|" + "|".join(["---"] + ["---:"] * (len(header) - 1)) + "|",
    ]
    lines += ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join(lines)


def render_markdown(params: LoanParameters, result: ScheduleResult, title: str = "") -> str:
    """Render inputs, summary and the year-wise schedule as Markdown."""
    parts = [f"# {title or 'Reverse Mortgage Payout Schedule'}", ""]

    parts += ["## Inputs", ""]
    parts.append(_md_table(("Item", "Value"), [[k, v] for k, v in input_items(params)]))
    parts.append("")

    parts += ["## Calculation Results", ""]
    parts.append(_md_table(("Item", "Value"), [[k, v] for k, v in summary_items(params, result)]))
    parts.append("")

    parts += ["## Year-wise Payout Schedule", ""]
    if result.years:
        parts.append(_md_table(SCHEDULE_COLUMNS, schedule_rows(result)))
    else:
        parts.append(
            "No payout is possible: a single month's payout already exceeds the maximum loan amount."
        )
    parts.append("")
    return "\n".join(parts)
