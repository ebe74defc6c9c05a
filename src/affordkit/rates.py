"""Fixed-payment annuity math for level-payment amortizing loans."""

from __future__ import annotations

MONTHS_PER_YEAR = 12


def periodic_payment(
    principal: float, periodic_rate: float, num_periods: float
) -> float:
    """
    Constant payment that fully amortizes a principal.

    Uses the annuity formula ``P * (r + r / ((1 + r)^n - 1))``. A zero
    rate makes the formula undefined, so it falls back to straight-line
    repayment ``P / n``. When ``(1 + r)^n`` overflows a float the payment
    is the interest-only limit ``P * r``.

    Args:
        principal: Amount borrowed.
        periodic_rate: Interest rate per period (e.g. APR / 12).
        num_periods: Total number of payment periods.

    Returns:
        Payment due each period.
    """
    if periodic_rate == 0:
        return principal / num_periods

    try:
        growth = (1 + periodic_rate) ** num_periods
    except OverflowError:
        return principal * periodic_rate
    return principal * (periodic_rate + periodic_rate / (growth - 1))


def monthly_payment(principal: float, annual_rate: float, term_years: float) -> float:
    """Monthly payment for a loan quoted with a nominal annual rate."""
    return periodic_payment(
        principal, annual_rate / MONTHS_PER_YEAR, term_years * MONTHS_PER_YEAR
    )
