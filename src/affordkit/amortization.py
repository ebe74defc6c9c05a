"""Monthly payment summaries and amortization schedules for scenarios."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .rates import MONTHS_PER_YEAR, monthly_payment, periodic_payment
from .scenario import AmortizationRow, Scenario


@dataclass(frozen=True)
class PaymentSummary:
    """Monthly cost of carrying a scenario."""

    mortgage_payment: float
    """Principal and interest."""

    tax_payment: float
    """Property taxes spread over twelve months."""

    insurance_payment: float
    """Insurance spread over twelve months."""

    @property
    def total(self) -> float:
        return self.mortgage_payment + self.tax_payment + self.insurance_payment


def monthly_summary(scenario: Scenario) -> PaymentSummary:
    """
    Break down the monthly payment for a scenario.

    Args:
        scenario: Resolved scenario.

    Returns:
        PaymentSummary with mortgage, tax and insurance components.
    """
    return PaymentSummary(
        mortgage_payment=monthly_payment(
            scenario.principal, scenario.annual_rate, scenario.term_years
        ),
        tax_payment=scenario.annual_taxes / MONTHS_PER_YEAR,
        insurance_payment=scenario.annual_insurance / MONTHS_PER_YEAR,
    )


class AmortizationSchedule:
    """
    Lazy month-by-month amortization of a scenario's loan.

    Rows are generated on each iteration, so the schedule can be walked
    any number of times and always yields the same sequence. Balances are
    carried in floating point without rounding; the final remaining
    principal is close to, but not necessarily exactly, zero.

    Example:
        >>> sched = schedule(scenario)  # a 30-year scenario
        >>> len(sched)
        360
    """

    def __init__(self, scenario: Scenario) -> None:
        self.scenario = scenario
        self.payment = periodic_payment(
            scenario.principal, scenario.monthly_rate, scenario.loan_term_months
        )

    def __iter__(self) -> Iterator[AmortizationRow]:
        rate = self.scenario.monthly_rate
        balance = float(self.scenario.principal)
        for period in range(self.scenario.loan_term_months):
            interest = rate * balance
            principal = self.payment - interest
            balance -= principal
            yield AmortizationRow(
                period_index=period,
                interest_portion=interest,
                principal_portion=principal,
                remaining_principal=balance,
            )

    def __len__(self) -> int:
        return self.scenario.loan_term_months

    def __repr__(self) -> str:
        return f"AmortizationSchedule({self.scenario}, payment={self.payment:.2f})"

    def total_interest(self) -> float:
        """Sum of interest paid over the life of the loan."""
        return sum(row.interest_portion for row in self)

    def total_principal(self) -> float:
        """Sum of principal repaid; approximately the amount borrowed."""
        return sum(row.principal_portion for row in self)

    def to_dataframe(self, backend: str = "pandas") -> Any:
        """
        Export the schedule to a DataFrame.

        Args:
            backend: "pandas" or "polars".

        Returns:
            DataFrame with one row per period.
        """
        from ._dataframe import _dicts_to_df
        from .io.schedules import _schedule_to_rows

        return _dicts_to_df(_schedule_to_rows(self), backend=backend)


def schedule(scenario: Scenario) -> AmortizationSchedule:
    """Build the amortization schedule for a scenario."""
    return AmortizationSchedule(scenario)
