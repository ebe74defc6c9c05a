"""Tests for monthly summaries and amortization schedules."""

import pytest

from affordkit.amortization import (
    AmortizationSchedule,
    PaymentSummary,
    monthly_summary,
    schedule,
)
from affordkit.rates import monthly_payment
from affordkit.scenario import AmortizationRow, Scenario


@pytest.fixture
def scenario() -> Scenario:
    """$200,000 purchase, $50,000 down, 5% for 30 years."""
    return Scenario(
        loan_term_months=360,
        annual_rate=0.05,
        purchase_price=200_000,
        available_funds=50_000,
        annual_taxes=3_000,
        annual_insurance=600,
        closing_costs=0,
        renovation_costs=0,
        downpayment=50_000,
    )


@pytest.fixture
def zero_rate_scenario() -> Scenario:
    return Scenario(
        loan_term_months=120,
        annual_rate=0.0,
        purchase_price=120_000,
        available_funds=0,
        annual_taxes=0,
        annual_insurance=0,
        closing_costs=0,
        renovation_costs=0,
        downpayment=0,
    )


class TestMonthlySummary:
    """Test cases for monthly_summary."""

    def test_components(self, scenario: Scenario) -> None:
        summary = monthly_summary(scenario)
        assert isinstance(summary, PaymentSummary)
        assert summary.mortgage_payment == pytest.approx(805.23, abs=0.01)
        assert summary.tax_payment == pytest.approx(250.0)
        assert summary.insurance_payment == pytest.approx(50.0)

    def test_total_is_sum(self, scenario: Scenario) -> None:
        summary = monthly_summary(scenario)
        assert summary.total == pytest.approx(
            summary.mortgage_payment + summary.tax_payment + summary.insurance_payment
        )
        assert summary.total == pytest.approx(1105.23, abs=0.01)

    def test_uses_borrowed_amount(self, scenario: Scenario) -> None:
        """The mortgage payment is computed on price minus downpayment."""
        summary = monthly_summary(scenario)
        assert summary.mortgage_payment == monthly_payment(150_000, 0.05, 30)

    def test_zero_rate(self, zero_rate_scenario: Scenario) -> None:
        summary = monthly_summary(zero_rate_scenario)
        assert summary.mortgage_payment == pytest.approx(1000.0)
        assert summary.total == pytest.approx(1000.0)


class TestSchedule:
    """Test cases for the amortization schedule."""

    def test_length(self, scenario: Scenario) -> None:
        sched = schedule(scenario)
        assert isinstance(sched, AmortizationSchedule)
        assert len(sched) == 360
        assert len(list(sched)) == 360

    def test_rows(self, scenario: Scenario) -> None:
        rows = list(schedule(scenario))
        assert all(isinstance(row, AmortizationRow) for row in rows)
        assert [row.period_index for row in rows] == list(range(360))

    def test_first_row(self, scenario: Scenario) -> None:
        """First month: interest on the full balance, rest to principal."""
        first = next(iter(schedule(scenario)))
        assert first.period_index == 0
        assert first.interest_portion == pytest.approx(625.0)
        assert first.principal_portion == pytest.approx(180.23, abs=0.01)
        assert first.remaining_principal == pytest.approx(149_819.77, abs=0.01)

    def test_principal_sums_to_amount_borrowed(self, scenario: Scenario) -> None:
        sched = schedule(scenario)
        assert sched.total_principal() == pytest.approx(150_000, rel=1e-9)
        assert sum(row.principal_portion for row in sched) == pytest.approx(150_000)

    def test_balance_converges_to_zero(self, scenario: Scenario) -> None:
        last = list(schedule(scenario))[-1]
        assert abs(last.remaining_principal) < 150_000 * 1e-6

    def test_balance_non_increasing(self, scenario: Scenario) -> None:
        rows = list(schedule(scenario))
        for prev, curr in zip(rows, rows[1:]):
            assert curr.remaining_principal <= prev.remaining_principal

    def test_interest_declines_principal_grows(self, scenario: Scenario) -> None:
        rows = list(schedule(scenario))
        assert rows[-1].interest_portion < rows[0].interest_portion
        assert rows[-1].principal_portion > rows[0].principal_portion

    def test_constant_payment(self, scenario: Scenario) -> None:
        sched = schedule(scenario)
        for row in sched:
            assert row.payment == pytest.approx(sched.payment)

    def test_restartable(self, scenario: Scenario) -> None:
        """Iterating twice yields the same rows."""
        sched = schedule(scenario)
        assert list(sched) == list(sched)
        assert list(sched) == list(schedule(scenario))

    def test_total_interest(self, scenario: Scenario) -> None:
        sched = schedule(scenario)
        # 360 payments of ~805.23 minus the 150,000 borrowed
        assert sched.total_interest() == pytest.approx(
            360 * sched.payment - 150_000, rel=1e-9
        )

    def test_zero_rate(self, zero_rate_scenario: Scenario) -> None:
        rows = list(schedule(zero_rate_scenario))
        assert len(rows) == 120
        assert all(row.interest_portion == 0 for row in rows)
        assert all(row.principal_portion == pytest.approx(1000.0) for row in rows)
        assert rows[-1].remaining_principal == pytest.approx(0.0, abs=1e-6)
