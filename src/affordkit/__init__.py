"""
affordkit: mortgage affordability scenarios and amortization schedules.

Resolve raw inputs (price, funds, rate, terms, taxes, costs) into concrete
scenarios, then compute monthly payment breakdowns and month-by-month
amortization schedules for each.
"""

from .amortization import (
    AmortizationSchedule,
    PaymentSummary,
    monthly_summary,
    schedule,
)
from .config import ResolverDefaults, Settings
from .errors import (
    AffordabilityError,
    InvalidInputFormat,
    InvalidScenario,
    MissingRequiredInput,
)
from .rates import MONTHS_PER_YEAR, monthly_payment, periodic_payment
from .resolver import ScenarioResolver, resolve_scenarios
from .scenario import AmortizationRow, RawParameters, Scenario

__version__ = "0.1.0"

__all__ = [
    # Rates
    "MONTHS_PER_YEAR",
    "periodic_payment",
    "monthly_payment",
    # Scenarios
    "RawParameters",
    "Scenario",
    "AmortizationRow",
    # Resolution
    "ResolverDefaults",
    "Settings",
    "ScenarioResolver",
    "resolve_scenarios",
    # Amortization
    "PaymentSummary",
    "AmortizationSchedule",
    "monthly_summary",
    "schedule",
    # Errors
    "AffordabilityError",
    "MissingRequiredInput",
    "InvalidInputFormat",
    "InvalidScenario",
]
