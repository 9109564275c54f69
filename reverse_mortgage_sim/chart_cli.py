"""CLI entry point for chart generation."""

import argparse
import logging
import sys
from pathlib import Path

from reverse_mortgage_sim.charts import plot_schedule, plot_trajectory
from reverse_mortgage_sim.config import parse_args
from reverse_mortgage_sim.normalize import ValidationError, normalize_request
from reverse_mortgage_sim.scenarios import run_samples
from reverse_mortgage_sim.simulation import simulate_schedule


def _add_chart_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="output directory (default: reports/charts)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="output filename suffix (e.g. mumbai → schedule-mumbai.png)",
    )
    parser.add_argument(
        "--samples", action="store_true",
        help="chart the built-in sample calculations instead of the configured request",
    )


def main():
    raw, args = parse_args("Reverse mortgage payout chart generation", _add_chart_args)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.samples:
        print("Simulating sample calculations...", file=sys.stderr)
        path = plot_trajectory(run_samples(), args.output, args.name)
        print(f"  → {path}", file=sys.stderr)
        return

    try:
        params = normalize_request(raw)
    except ValidationError as e:
        print("Invalid input:", file=sys.stderr)
        for msg in e.errors:
            print(f"  ✗ {msg}", file=sys.stderr)
        raise SystemExit(1)

    print("Simulating payout schedule...", file=sys.stderr)
    path = plot_schedule(simulate_schedule(params), args.output, args.name)
    print(f"  → {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
