"""Chart generation for payout schedules."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from reverse_mortgage_sim.report import group_indian
from reverse_mortgage_sim.result import ScheduleResult

COLOR_DISBURSED = "#1f77b4"   # blue
COLOR_INTEREST = "#ff7f0e"    # orange
COLOR_BALANCE = "#2ca02c"     # green
COLOR_CAP = "#d62728"         # red
COLOR_LTV = "#7f7f7f"


def _format_rupee_axis(ax: plt.Axes):
    """Rupee tick labels with Indian digit grouping."""
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"₹{group_indian(round(x))}")
    )


def _save(fig: plt.Figure, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_schedule(result: ScheduleResult, output_path: Path, name: str = "") -> Path:
    """Generate a year-wise chart of one payout schedule.

    Stacked bars show each year's disbursement and interest; lines show the
    closing loan balance against that year's LTV cap, with LTV % on the
    secondary axis.

    Returns:
        Path to the generated PNG file.
    """
    fig, ax = plt.subplots(figsize=(14, 8))

    years = [y.year for y in result.years]
    disbursed = [y.disbursed for y in result.years]
    interest = [y.interest_accrued for y in result.years]

    ax.bar(years, disbursed, label="Disbursed", color=COLOR_DISBURSED, alpha=0.7)
    ax.bar(years, interest, bottom=disbursed, label="Interest", color=COLOR_INTEREST, alpha=0.7)
    ax.plot(years, [y.closing_balance for y in result.years],
            label="Loan balance", color=COLOR_BALANCE, linewidth=2, marker="o")
    ax.plot(years, [y.max_loan_amount for y in result.years],
            label="LTV cap", color=COLOR_CAP, linewidth=1.5, linestyle="--")

    ax.set_xlabel("Year")
    ax.set_ylabel("Amount (₹)")
    ax.set_title(
        f"Payout schedule: {result.total_years} years, "
        f"total loan ₹{group_indian(round(result.total_loan_amount))}"
    )
    ax.grid(True, alpha=0.3)
    _format_rupee_axis(ax)

    ax_ltv = ax.twinx()
    ax_ltv.plot(years, [y.ltv_percentage for y in result.years],
                label="LTV %", color=COLOR_LTV, linewidth=1, linestyle=":")
    ax_ltv.set_ylabel("LTV (%)")
    ax_ltv.set_ylim(0, 100)

    handles, labels = ax.get_legend_handles_labels()
    h2, l2 = ax_ltv.get_legend_handles_labels()
    ax.legend(handles + h2, labels + l2, loc="upper left")

    return _save(fig, output_path, "schedule", name)


def plot_trajectory(results: dict[str, ScheduleResult], output_path: Path, name: str = "") -> Path:
    """Line chart comparing loan balance trajectories of several schedules."""
    fig, ax = plt.subplots(figsize=(14, 8))

    for label, result in results.items():
        ax.plot(
            [y.year for y in result.years],
            [y.closing_balance for y in result.years],
            label=label, linewidth=2,
        )

    ax.set_xlabel("Year")
    ax.set_ylabel("Loan balance (₹)")
    ax.set_title("Loan balance by year")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_rupee_axis(ax)

    return _save(fig, output_path, "trajectory", name)
