"""CLI entry point for a single payout simulation."""

import argparse
import json
import logging
import sys
from pathlib import Path

from reverse_mortgage_sim.config import parse_args
from reverse_mortgage_sim.history import calculation_payload
from reverse_mortgage_sim.normalize import ValidationError, normalize_request
from reverse_mortgage_sim.params import LoanParameters
from reverse_mortgage_sim.report import (
    SCHEDULE_COLUMNS,
    input_items,
    render_markdown,
    schedule_rows,
    summary_items,
)
from reverse_mortgage_sim.result import ScheduleResult
from reverse_mortgage_sim.simulation import simulate_schedule

_COL_WIDTHS = (5, 16, 7, 18, 18, 18, 16, 9)


def _add_output_args(parser: argparse.ArgumentParser):
    parser.add_argument("--json", action="store_true", help="print the calculation payload as JSON")
    parser.add_argument("--markdown", type=Path, default=None, help="also write a Markdown report to this path")


def _print_header(params: LoanParameters):
    print("=" * 80)
    print("Reverse Mortgage Payout Simulation")
    for label, value in input_items(params):
        print(f"  {label}: {value}")
    print("=" * 80)
    print()


def _print_summary(params: LoanParameters, result: ScheduleResult):
    print("[Calculation Results]")
    print("-" * 80)
    for label, value in summary_items(params, result):
        print(f"{label:<30} {value:>20}")
    print("-" * 80)


def _print_schedule(result: ScheduleResult):
    print("\n[Year-wise Payout Schedule]")
    if not result.years:
        print("  No payout possible: one month's payout exceeds the maximum loan amount.")
        return
    line_width = sum(_COL_WIDTHS) + len(_COL_WIDTHS) - 1
    print("-" * line_width)
    print(" ".join(f"{h:>{w}}" for h, w in zip(SCHEDULE_COLUMNS, _COL_WIDTHS)))
    print("-" * line_width)
    for row in schedule_rows(result):
        print(" ".join(f"{v:>{w}}" for v, w in zip(row, _COL_WIDTHS)))
    print("-" * line_width)


def main():
    """Execute one payout simulation and print the schedule"""
    raw, args = parse_args("Reverse mortgage payout simulation", _add_output_args)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        params = normalize_request(raw)
    except ValidationError as e:
        print("Invalid input:", file=sys.stderr)
        for msg in e.errors:
            print(f"  ✗ {msg}", file=sys.stderr)
        raise SystemExit(1)

    result = simulate_schedule(params)

    if args.json:
        print(json.dumps(calculation_payload(result), indent=2))
    else:
        _print_header(params)
        _print_summary(params, result)
        _print_schedule(result)

    if args.markdown:
        args.markdown.parent.mkdir(parents=True, exist_ok=True)
        args.markdown.write_text(render_markdown(params, result), encoding="utf-8")
        print(f"  → {args.markdown}", file=sys.stderr)


if __name__ == "__main__":
    main()
