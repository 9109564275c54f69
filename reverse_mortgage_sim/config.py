"""TOML config loader with CLI > config > default resolution."""

import argparse
import sys
import tomllib
from collections.abc import Callable
from pathlib import Path

from reverse_mortgage_sim.params import LTV_STOP_TOLERANCE

DEFAULT_CONFIG_PATH = Path("config.toml")

# Mirrors the calculator form defaults; amounts have no default.
DEFAULTS = {
    "property_value": None,
    "appreciation_rate": 3.0,
    "required_monthly_amount": None,
    "payout_adjustment_type": "annual",
    "annual_increase_rate": 0.0,
    "block_period": 5,
    "block_increase_rate": 5.0,
    "ltv_ratio": 60.0,
    "interest_rate": 9.5,
    "tenure_type": "maxLTV",
    "fixed_tenure_months": None,
    "ltv_stop_tolerance": LTV_STOP_TOLERANCE,
}

# Config/CLI key → external request field consumed by normalize_request()
REQUEST_FIELDS = {
    "property_value": "propertyValue",
    "appreciation_rate": "appreciationRate",
    "required_monthly_amount": "requiredMonthlyAmount",
    "payout_adjustment_type": "payoutAdjustmentType",
    "annual_increase_rate": "annualIncreaseRate",
    "block_period": "blockPeriod",
    "block_increase_rate": "blockIncreaseRate",
    "ltv_ratio": "ltvRatio",
    "interest_rate": "interestRate",
    "tenure_type": "tenureType",
    "fixed_tenure_months": "fixedTenureMonths",
    "ltv_stop_tolerance": "ltvStopTolerance",
}


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Failed to read config file: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Accept the request's camelCase names as well as snake_case keys
    camel_to_snake = {v: k for k, v in REQUEST_FIELDS.items()}
    return {camel_to_snake.get(k, k): v for k, v in raw.items()}


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared simulation flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="config file path (default: config.toml)")
    parser.add_argument("--property-value", type=str, default=None, help="current market value of the property, e.g. 1,50,00,000")
    parser.add_argument("--appreciation-rate", type=str, default=None, help=f"expected appreciation, percent per year: 1, 2, 3, 4 or 5 (default: {d['appreciation_rate']:g})")
    parser.add_argument("--required-monthly-amount", type=str, default=None, help="desired monthly payout, e.g. 45,000")
    parser.add_argument("--payout-adjustment-type", choices=["annual", "block"], default=None, help=f"payout growth policy (default: {d['payout_adjustment_type']})")
    parser.add_argument("--annual-increase-rate", type=str, default=None, help=f"annual payout increase, percent 0-5 (default: {d['annual_increase_rate']:g})")
    parser.add_argument("--block-period", type=str, default=None, help=f"block length in years: 3, 5, 7 or 10 (default: {d['block_period']})")
    parser.add_argument("--block-increase-rate", type=str, default=None, help=f"step increase per block, percent: 5, 10, 15 or 20 (default: {d['block_increase_rate']:g})")
    parser.add_argument("--ltv-ratio", type=str, default=None, help=f"loan to value ratio, percent: 50, 60, 70, 75, 80 or 85 (default: {d['ltv_ratio']:g})")
    parser.add_argument("--interest-rate", type=str, default=None, help=f"annual interest rate, percent 8-15 (default: {d['interest_rate']:g})")
    parser.add_argument("--tenure-type", choices=["maxLTV", "fixed"], default=None, help=f"tenure policy (default: {d['tenure_type']})")
    parser.add_argument("--fixed-tenure-months", type=str, default=None, help="months of payout for fixed tenure (12-240)")
    parser.add_argument("--ltv-stop-tolerance", type=str, default=None, help=f"stop when LTV is within this many points of target (default: {d['ltv_stop_tolerance']})")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each simulated year to stderr")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def build_request(r: dict) -> dict:
    """Convert resolved config dict to raw request fields for normalize_request()."""
    return {REQUEST_FIELDS[key]: value for key, value in r.items() if value is not None}


def parse_args(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
) -> tuple[dict, argparse.Namespace]:
    """Parse CLI args, load config, resolve values.

    Returns (raw_request, namespace). raw_request still needs normalize_request().
    namespace: raw argparse.Namespace (for extra CLI args added via add_args_fn).
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args()
    config = load_config(args.config)
    r = resolve(args, config)
    return build_request(r), args
