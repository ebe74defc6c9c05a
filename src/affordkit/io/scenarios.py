"""DataFrame export for resolved scenarios and their payment summaries."""

from __future__ import annotations

from typing import Any

from ..amortization import monthly_summary
from ..scenario import Scenario
from ._backends import require_pandas, require_polars
from ._columns import (
    COL_ANNUAL_RATE,
    COL_BORROWED,
    COL_CLOSING_COSTS,
    COL_DOWNPAYMENT,
    COL_FUNDS,
    COL_INSURANCE,
    COL_INSURANCE_PAYMENT,
    COL_MORTGAGE_PAYMENT,
    COL_PRICE,
    COL_RENOVATIONS,
    COL_TAX_PAYMENT,
    COL_TAXES,
    COL_TERM_MONTHS,
    COL_TOTAL_PAYMENT,
)


def _scenario_to_row(scenario: Scenario) -> dict[str, Any]:
    """Flatten a Scenario and its monthly summary into one row."""
    summary = monthly_summary(scenario)
    return {
        COL_TERM_MONTHS: scenario.loan_term_months,
        COL_ANNUAL_RATE: scenario.annual_rate,
        COL_PRICE: scenario.purchase_price,
        COL_FUNDS: scenario.available_funds,
        COL_TAXES: scenario.annual_taxes,
        COL_INSURANCE: scenario.annual_insurance,
        COL_CLOSING_COSTS: scenario.closing_costs,
        COL_RENOVATIONS: scenario.renovation_costs,
        COL_DOWNPAYMENT: scenario.downpayment,
        COL_BORROWED: scenario.principal,
        COL_MORTGAGE_PAYMENT: summary.mortgage_payment,
        COL_TAX_PAYMENT: summary.tax_payment,
        COL_INSURANCE_PAYMENT: summary.insurance_payment,
        COL_TOTAL_PAYMENT: summary.total,
    }


def scenarios_to_pandas(scenarios: list[Scenario]) -> Any:
    """Export scenarios to a pandas DataFrame, one row per scenario.

    Args:
        scenarios: Resolved scenarios, typically from ScenarioResolver.

    Returns:
        pandas.DataFrame with scenario inputs and monthly payment columns.

    Raises:
        ImportError: If pandas is not installed.
    """
    pd = require_pandas()
    return pd.DataFrame([_scenario_to_row(s) for s in scenarios])


def scenarios_to_polars(scenarios: list[Scenario]) -> Any:
    """Export scenarios to a polars DataFrame, one row per scenario.

    Raises:
        ImportError: If polars is not installed.
    """
    pl = require_polars()
    return pl.DataFrame([_scenario_to_row(s) for s in scenarios])
