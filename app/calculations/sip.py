"""
SIP (Systematic Investment Plan) Calculations

Future value of a fixed monthly contribution compounded monthly,
i.e. the future value of an ordinary annuity (Excel's FV() with type=0).
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real

from app.errors import InvalidInputKind, SipCalculationError, SipInputError

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
MONEY_PRECISION = 2


@dataclass(frozen=True)
class SipResult:
    """Outcome of a SIP calculation, monetary fields rounded to 2 decimals."""

    future_value: float
    total_invested: float
    wealth_gained: float


def _is_number(value) -> bool:
    """Check for a real number, excluding bool."""
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_inputs(
    monthly_investment: float, annual_return_pct: float, years: float
) -> None:
    """
    Check calculator inputs before computing.

    Raises:
        SipInputError: TypeError kind if any input is missing or not a
            number, RangeError kind if a number is outside its domain
    """
    values = (monthly_investment, annual_return_pct, years)
    if not all(_is_number(v) for v in values):
        raise SipInputError(InvalidInputKind.TypeError, "All values must be numbers")

    try:
        values = tuple(float(v) for v in values)
    except OverflowError:
        raise SipInputError(InvalidInputKind.RangeError, "All values must be finite")

    if not all(math.isfinite(v) for v in values):
        raise SipInputError(InvalidInputKind.RangeError, "All values must be finite")

    if monthly_investment <= 0:
        raise SipInputError(
            InvalidInputKind.RangeError, "Monthly investment must be positive."
        )
    if years <= 0:
        raise SipInputError(
            InvalidInputKind.RangeError, "Investment years must be positive."
        )
    if annual_return_pct < 0:
        raise SipInputError(
            InvalidInputKind.RangeError, "Annual return must be non-negative."
        )


def compute_future_value(
    monthly_investment: float, annual_return_pct: float, years: float
) -> float:
    """
    Calculate the future value of a monthly SIP.

    FV = P * ((1 + i)^n - 1) / i, where i = annual_return_pct / 100 / 12
    and n = years * 12. With a zero rate the contributions are summed.
    The growth term is evaluated as expm1(n * log1p(i)) so that small
    rates keep their precision instead of rounding 1 + i to 1.

    Args:
        monthly_investment: Amount contributed at the end of each month
        annual_return_pct: Annual return as a percentage (e.g., 12 for 12%)
        years: Investment horizon in years; fractional periods are allowed

    Returns:
        Unrounded future value

    Raises:
        SipCalculationError: If the result overflows or is not finite
    """
    try:
        monthly_investment = float(monthly_investment)
        monthly_rate = float(annual_return_pct) / 100 / MONTHS_PER_YEAR
        periods = float(years) * MONTHS_PER_YEAR

        if monthly_rate == 0:
            future_value = monthly_investment * periods
        else:
            growth = math.expm1(periods * math.log1p(monthly_rate))
            future_value = monthly_investment * growth / monthly_rate

        if not math.isfinite(future_value):
            raise SipCalculationError("Future value is too large to represent")
    except OverflowError as e:
        raise SipCalculationError(f"Future value is too large to represent: {e}")

    return future_value


def calculate_total_invested(monthly_investment: float, years: float) -> float:
    """Calculate the sum of all contributions over the horizon."""
    return monthly_investment * (years * MONTHS_PER_YEAR)


def summarize(
    monthly_investment: float, annual_return_pct: float, years: float
) -> SipResult:
    """
    Validate inputs and compute future value, total invested and gain.

    Every monetary field is rounded to 2 decimal places. The gain is taken
    from the rounded figures so the three always reconcile.

    Raises:
        SipInputError: If the inputs fail validation
        SipCalculationError: If the future value cannot be represented
    """
    validate_inputs(monthly_investment, annual_return_pct, years)

    future_value = round(
        compute_future_value(monthly_investment, annual_return_pct, years),
        MONEY_PRECISION,
    )
    total_invested = round(
        calculate_total_invested(monthly_investment, years), MONEY_PRECISION
    )
    wealth_gained = round(future_value - total_invested, MONEY_PRECISION)

    logger.debug(
        "SIP P=%s rate=%s%% years=%s -> fv=%s",
        monthly_investment,
        annual_return_pct,
        years,
        future_value,
    )

    return SipResult(
        future_value=future_value,
        total_invested=total_invested,
        wealth_gained=wealth_gained,
    )
