"""Raw request normalization and validation."""

import logging
import math
from collections.abc import Mapping

from reverse_mortgage_sim.params import (
    ALLOWED_APPRECIATION_RATES_PCT,
    ALLOWED_BLOCK_INCREASE_RATES_PCT,
    ALLOWED_BLOCK_PERIODS,
    ALLOWED_LTV_RATIOS_PCT,
    MAX_ANNUAL_INCREASE_RATE_PCT,
    MAX_INTEREST_RATE_PCT,
    MAX_TENURE_MONTHS,
    MIN_FIXED_TENURE_MONTHS,
    MIN_INTEREST_RATE_PCT,
    LTV_STOP_TOLERANCE,
    FixedTenure,
    LoanParameters,
    MaxLTVTenure,
)
from reverse_mortgage_sim.strategies import AnnualIncrease, BlockPeriod

logger = logging.getLogger(__name__)

# Persisted usage rows use the long names; the form uses the short ones.
PAYOUT_TYPE_ALIASES = {
    "annual": "annual",
    "annual_increase": "annual",
    "block": "block",
    "block_period": "block",
}
TENURE_TYPES = ("maxLTV", "fixed")


class ValidationError(ValueError):
    """Malformed or out-of-range request fields. ``errors`` lists each one."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def parse_amount(value) -> float:
    """Parse a currency field, stripping thousands separators ("1,50,00,000")."""
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if value is None:
        raise ValueError("missing value")
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).replace(",", "").strip()
        if not text:
            raise ValueError("missing value")
        number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def _parse_pct_points(value) -> float:
    if isinstance(value, str):
        value = value.strip().rstrip("%")
    return parse_amount(value)


def parse_percent(value) -> float:
    """Parse a percentage field ("9.5" or "9.5%") into a fraction (0.095)."""
    return _parse_pct_points(value) / 100


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class _FieldReader:
    """Collects per-field errors so a request reports all problems at once."""

    def __init__(self, raw: Mapping):
        self.raw = raw
        self.errors: list[str] = []

    def amount(self, key: str, label: str) -> float | None:
        value = self.raw.get(key)
        if _is_missing(value):
            self.errors.append(f"{label} is required")
            return None
        try:
            amount = parse_amount(value)
        except ValueError:
            self.errors.append(f"{label} must be a number (got {value!r})")
            return None
        if amount <= 0:
            self.errors.append(f"{label} must be greater than 0")
            return None
        return amount

    def percent(self, key: str, label: str, allow_zero: bool = False) -> float | None:
        value = self.raw.get(key)
        if _is_missing(value):
            self.errors.append(f"{label} is required")
            return None
        try:
            pct = _parse_pct_points(value)
        except ValueError:
            self.errors.append(f"{label} must be a number (got {value!r})")
            return None
        if pct < 0 or (pct == 0 and not allow_zero):
            self.errors.append(f"{label} must be greater than 0")
            return None
        return pct

    def integer(self, key: str, label: str) -> int | None:
        value = self.raw.get(key)
        if _is_missing(value):
            self.errors.append(f"{label} is required")
            return None
        try:
            number = parse_amount(value)
        except ValueError:
            self.errors.append(f"{label} must be a whole number (got {value!r})")
            return None
        if number != int(number):
            self.errors.append(f"{label} must be a whole number (got {value!r})")
            return None
        return int(number)

    def choice(self, key: str, label: str, choices) -> str | None:
        value = self.raw.get(key)
        if _is_missing(value):
            self.errors.append(f"{label} is required")
            return None
        text = str(value).strip()
        if text not in choices:
            self.errors.append(f"{label} must be one of {', '.join(choices)} (got {text!r})")
            return None
        return text


def _fmt_choices(values) -> str:
    return ", ".join(str(v) for v in values)


def normalize_request(raw: Mapping) -> LoanParameters:
    """Build validated LoanParameters from raw request fields.

    ``raw`` uses the external field names (propertyValue, interestRate, ...)
    with percentages given in percent. Raises ValidationError listing every
    invalid field; nothing is simulated for an invalid request.
    """
    r = _FieldReader(raw)

    property_value = r.amount("propertyValue", "Property value")
    monthly_amount = r.amount("requiredMonthlyAmount", "Required monthly amount")

    appreciation_pct = r.percent("appreciationRate", "Appreciation rate")
    if appreciation_pct is not None and appreciation_pct not in ALLOWED_APPRECIATION_RATES_PCT:
        r.errors.append(f"Appreciation rate must be one of {_fmt_choices(ALLOWED_APPRECIATION_RATES_PCT)}%")

    interest_pct = r.percent("interestRate", "Interest rate")
    if interest_pct is not None and not (MIN_INTEREST_RATE_PCT <= interest_pct <= MAX_INTEREST_RATE_PCT):
        r.errors.append(
            f"Interest rate must be between {MIN_INTEREST_RATE_PCT:g}% and {MAX_INTEREST_RATE_PCT:g}%"
        )

    ltv_pct = r.percent("ltvRatio", "Loan to value ratio")
    if ltv_pct is not None and ltv_pct not in ALLOWED_LTV_RATIOS_PCT:
        r.errors.append(f"Loan to value ratio must be one of {_fmt_choices(ALLOWED_LTV_RATIOS_PCT)}%")

    growth = None
    payout_type = r.choice("payoutAdjustmentType", "Payout adjustment type", tuple(PAYOUT_TYPE_ALIASES))
    if payout_type is not None and PAYOUT_TYPE_ALIASES[payout_type] == "annual":
        increase_pct = r.percent("annualIncreaseRate", "Annual increase rate", allow_zero=True)
        if increase_pct is not None:
            if increase_pct > MAX_ANNUAL_INCREASE_RATE_PCT:
                r.errors.append(f"Annual increase rate must be at most {MAX_ANNUAL_INCREASE_RATE_PCT:g}%")
            else:
                growth = AnnualIncrease(rate=parse_percent(increase_pct))
    elif payout_type is not None:
        period = r.integer("blockPeriod", "Block period")
        if period is not None and period not in ALLOWED_BLOCK_PERIODS:
            r.errors.append(f"Block period must be one of {_fmt_choices(ALLOWED_BLOCK_PERIODS)} years")
            period = None
        block_pct = r.percent("blockIncreaseRate", "Block increase rate")
        if block_pct is not None and block_pct not in ALLOWED_BLOCK_INCREASE_RATES_PCT:
            r.errors.append(
                f"Block increase rate must be one of {_fmt_choices(ALLOWED_BLOCK_INCREASE_RATES_PCT)}%"
            )
            block_pct = None
        if period is not None and block_pct is not None:
            growth = BlockPeriod(period_years=period, increase_rate=parse_percent(block_pct))

    tenure = None
    tenure_type = r.choice("tenureType", "Tenure type", TENURE_TYPES)
    if tenure_type == "maxLTV":
        tenure = MaxLTVTenure()
    elif tenure_type == "fixed":
        months = r.integer("fixedTenureMonths", "Fixed tenure months")
        if months is not None:
            if MIN_FIXED_TENURE_MONTHS <= months <= MAX_TENURE_MONTHS:
                tenure = FixedTenure(months=months)
            else:
                r.errors.append(
                    f"Fixed tenure months must be between {MIN_FIXED_TENURE_MONTHS} and {MAX_TENURE_MONTHS}"
                )

    tolerance = LTV_STOP_TOLERANCE
    raw_tolerance = raw.get("ltvStopTolerance")
    if not _is_missing(raw_tolerance):
        try:
            tolerance = parse_amount(raw_tolerance)
        except ValueError:
            r.errors.append(f"LTV stop tolerance must be a number (got {raw_tolerance!r})")
        else:
            if tolerance < 0:
                r.errors.append("LTV stop tolerance must not be negative")

    if r.errors:
        logger.debug("Rejected request: %s", r.errors)
        raise ValidationError(r.errors)

    params = LoanParameters(
        property_value=property_value,
        appreciation_rate=parse_percent(appreciation_pct),
        monthly_payout_base=monthly_amount,
        interest_rate=parse_percent(interest_pct),
        ltv_ratio=parse_percent(ltv_pct),
        growth=growth,
        tenure=tenure,
        ltv_stop_tolerance=tolerance,
    )
    logger.debug("Normalized request: %s", params)
    return params
