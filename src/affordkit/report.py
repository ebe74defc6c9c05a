"""Plain-text rendering of scenarios, payment summaries and schedules."""

from __future__ import annotations

from collections.abc import Iterator

from .amortization import AmortizationSchedule, PaymentSummary, monthly_summary
from .scenario import Scenario

RULE = "------------"

_PARAMETER_LABELS = (
    ("purchase_price", "Purchase price"),
    ("available_funds", "Funds available"),
    ("annual_taxes", "Taxes per year"),
    ("annual_insurance", "Insurance per year"),
    ("closing_costs", "Closing costs"),
    ("renovation_costs", "Renovations"),
)


def _marker(scenario: Scenario, name: str) -> str:
    return " (default)" if name in scenario.defaulted else ""


def render_parameters(scenario: Scenario) -> list[str]:
    """List the resolved inputs, marking the ones that came from defaults."""
    lines = [
        f"  {'Loan term':<20} {scenario.term_years:g} years"
        f"{_marker(scenario, 'loan_term_months')}",
        f"  {'APR':<20} {scenario.annual_rate * 100:.3f}%"
        f"{_marker(scenario, 'annual_rate')}",
    ]
    for name, label in _PARAMETER_LABELS:
        lines.append(
            f"  {label:<20} {getattr(scenario, name)}{_marker(scenario, name)}"
        )
    return lines


def render_downpayment(scenario: Scenario) -> list[str]:
    """Show how a derived downpayment was computed, or the supplied value."""
    if not scenario.downpayment_derived:
        return [f"Downpayment: {scenario.downpayment}"]
    return [
        "Using all cash available for downpayment:",
        f"    {scenario.available_funds:8} (funds available)",
        f"  - {scenario.renovation_costs:8} (renovations)",
        f"  - {scenario.closing_costs:8} (closing costs)",
        RULE,
        f"  = {scenario.downpayment:8}",
    ]


def render_summary(summary: PaymentSummary) -> list[str]:
    return [
        "Monthly payment",
        f"  {summary.mortgage_payment:8.2f} (mortgage)",
        f"+ {summary.tax_payment:8.2f} (taxes)",
        f"+ {summary.insurance_payment:8.2f} (insurance)",
        RULE,
        f"= {summary.total:8.2f} (total)",
    ]


def render_scenario(scenario: Scenario, index: int = 1, count: int = 1) -> str:
    """
    Render one scenario as a human-readable block.

    Args:
        scenario: Resolved scenario.
        index: 1-based position of the scenario in its batch.
        count: Number of scenarios in the batch.

    Returns:
        Multi-line text block without a trailing newline.
    """
    lines = [f"Scenario {index} of {count}"]
    lines.extend(render_parameters(scenario))
    lines.extend(render_downpayment(scenario))
    lines.append(
        f"Borrowing {scenario.principal} at {scenario.annual_rate * 100:.3f}% "
        f"for {scenario.term_years:g} years"
    )
    lines.extend(render_summary(monthly_summary(scenario)))
    return "\n".join(lines)


def iter_schedule_lines(schedule: AmortizationSchedule) -> Iterator[str]:
    """Yield one formatted line per period: index, interest, principal, balance."""
    yield f"{'#':>3} {'interest':>8} {'principal':>9} {'balance':>8}"
    for row in schedule:
        yield (
            f"{row.period_index:>3} {row.interest_portion:8.2f} "
            f"{row.principal_portion:9.2f} {row.remaining_principal:8.2f}"
        )
