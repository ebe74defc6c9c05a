"""Turn raw, possibly multi-valued user input into concrete scenarios."""

from __future__ import annotations

import logging
import re
from itertools import product
from typing import Any, Callable

from .config import ResolverDefaults
from .errors import InvalidInputFormat, InvalidScenario, MissingRequiredInput
from .rates import MONTHS_PER_YEAR
from .scenario import RawParameters, Scenario

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"\+?[0-9]+")
_DECIMAL_RE = re.compile(r"\+?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_int(field: str, raw: str, minimum: int = 0) -> int:
    """
    Parse a whole number with no fractional part or trailing text.

    Raises:
        InvalidInputFormat: If ``raw`` is not an integer >= ``minimum``.
    """
    expected = "a positive integer" if minimum > 0 else "a non-negative integer"
    if not _INT_RE.fullmatch(raw):
        raise InvalidInputFormat(field, raw, expected)
    value = int(raw)
    if value < minimum:
        raise InvalidInputFormat(field, raw, expected)
    return value


def parse_rate(field: str, raw: str) -> float:
    """
    Parse an annual rate written as a decimal fraction (0.045 for 4.5%).

    Raises:
        InvalidInputFormat: If ``raw`` is not a decimal in [0, 1).
    """
    expected = "a decimal fraction in [0, 1)"
    if not _DECIMAL_RE.fullmatch(raw):
        raise InvalidInputFormat(field, raw, expected)
    value = float(raw)
    if not 0 <= value < 1:
        raise InvalidInputFormat(field, raw, expected)
    return value


def _unique(values: list[Any]) -> list[Any]:
    seen: list[Any] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


class ScenarioResolver:
    """
    Resolve RawParameters into one or more Scenarios.

    Resolution applies, in order: required inputs (price, taxes, funds),
    the APR default, derived defaults (closing costs, insurance,
    renovations), the downpayment derivation, and finally expansion of
    every multi-valued input into the cross-product of scenarios. The
    first failure aborts resolution; no partial result is returned.

    Example:
        >>> resolver = ScenarioResolver()
        >>> raw = RawParameters.from_mapping(
        ...     {"years": ["15", "30"], "price": "300000",
        ...      "taxes": "4000", "funds": "80000"}
        ... )
        >>> [s.loan_term_months for s in resolver.resolve(raw)]
        [180, 360]
    """

    def __init__(self, defaults: ResolverDefaults | None = None) -> None:
        self.defaults = defaults if defaults is not None else ResolverDefaults()

    def resolve(self, raw: RawParameters) -> list[Scenario]:
        """
        Resolve raw input into scenarios, in axis declaration order.

        Raises:
            MissingRequiredInput: A mandatory input is absent.
            InvalidInputFormat: A value does not parse.
            InvalidScenario: A scenario violates a cross-field constraint.
        """
        choices = self._parse_choices(raw)
        names = RawParameters.field_names()

        scenarios = [
            self._build(dict(zip(names, combo)), years_defaulted=not raw.years)
            for combo in product(*(choices[name] for name in names))
        ]

        axes = [name for name in names if len(choices[name]) > 1]
        logger.debug(
            "Resolved %d scenario(s) across axes %s", len(scenarios), axes or "none"
        )
        return scenarios

    def _parse_choices(self, raw: RawParameters) -> dict[str, list[Any]]:
        """Parse every field into its list of candidate values."""
        d = self.defaults
        choices: dict[str, list[Any]] = {}

        choices["price"] = self._required(raw, "price", lambda v: parse_int("price", v, 1))
        choices["taxes"] = self._required(raw, "taxes", lambda v: parse_int("taxes", v))
        choices["funds"] = self._required(raw, "funds", lambda v: parse_int("funds", v))

        choices["apr"] = self._optional(raw, "apr", lambda v: parse_rate("apr", v))
        if choices["apr"] == [None]:
            logger.info("No APR specified, assuming %.3f%%", d.annual_rate * 100)

        choices["closing_costs"] = self._optional(
            raw, "closing_costs", lambda v: parse_int("closing_costs", v)
        )
        if choices["closing_costs"] == [None]:
            logger.info(
                "No closing costs specified, assuming %g%% of purchase price",
                d.closing_cost_rate * 100,
            )

        choices["insurance"] = self._optional(
            raw, "insurance", lambda v: parse_int("insurance", v)
        )
        if choices["insurance"] == [None]:
            logger.info(
                "No insurance specified, assuming %g%% of purchase price",
                d.insurance_rate * 100,
            )

        choices["renovations"] = self._optional(
            raw, "renovations", lambda v: parse_int("renovations", v)
        )
        if choices["renovations"] == [None]:
            logger.info("No renovation costs specified, assuming %d", d.renovation_costs)

        choices["downpayment"] = self._optional(
            raw, "downpayment", lambda v: parse_int("downpayment", v)
        )
        if choices["downpayment"] == [None]:
            logger.info("Using all cash available for downpayment")

        if raw.years:
            choices["years"] = _unique(
                [parse_int("years", v, 1) for v in raw.years]
            )
        elif d.loan_term_years is not None:
            logger.info("No loan term specified, assuming %d years", d.loan_term_years)
            choices["years"] = [d.loan_term_years]
        else:
            raise MissingRequiredInput("years")

        return choices

    @staticmethod
    def _required(
        raw: RawParameters, name: str, parse: Callable[[str], Any]
    ) -> list[Any]:
        values = raw.values_for(name)
        if not values:
            raise MissingRequiredInput(name)
        return _unique([parse(v) for v in values])

    @staticmethod
    def _optional(
        raw: RawParameters, name: str, parse: Callable[[str], Any]
    ) -> list[Any]:
        values = raw.values_for(name)
        if not values:
            return [None]
        return _unique([parse(v) for v in values])

    def _build(
        self, values: dict[str, Any], years_defaulted: bool = False
    ) -> Scenario:
        """Apply defaults and derivations to one combination of inputs."""
        d = self.defaults
        price: int = values["price"]
        defaulted: set[str] = set()

        annual_rate = values["apr"]
        if annual_rate is None:
            annual_rate = d.annual_rate
            defaulted.add("annual_rate")

        closing_costs = values["closing_costs"]
        if closing_costs is None:
            closing_costs = int(d.closing_cost_rate * price)
            defaulted.add("closing_costs")

        insurance = values["insurance"]
        if insurance is None:
            insurance = int(d.insurance_rate * price)
            defaulted.add("annual_insurance")

        renovations = values["renovations"]
        if renovations is None:
            renovations = d.renovation_costs
            defaulted.add("renovation_costs")

        downpayment = values["downpayment"]
        if downpayment is None:
            downpayment = values["funds"] - renovations - closing_costs
            defaulted.add("downpayment")
            if downpayment < 0:
                if not d.allow_negative_downpayment:
                    raise InvalidScenario(
                        "downpayment",
                        f"Derived downpayment is negative ({downpayment}): "
                        f"renovations and closing costs exceed funds of {values['funds']}",
                    )
                logger.warning(
                    "Derived downpayment is negative (%d); borrowing more than the price",
                    downpayment,
                )

        if d.check_downpayment_ceiling and downpayment > price:
            raise InvalidScenario(
                "downpayment",
                f"downpayment ({downpayment}) exceeds purchase price ({price})",
            )

        if years_defaulted:
            defaulted.add("loan_term_months")

        return Scenario(
            loan_term_months=values["years"] * MONTHS_PER_YEAR,
            annual_rate=annual_rate,
            purchase_price=price,
            available_funds=values["funds"],
            annual_taxes=values["taxes"],
            annual_insurance=insurance,
            closing_costs=closing_costs,
            renovation_costs=renovations,
            downpayment=downpayment,
            defaulted=frozenset(defaulted),
        )


def resolve_scenarios(
    raw: RawParameters, defaults: ResolverDefaults | None = None
) -> list[Scenario]:
    """Resolve ``raw`` with a fresh ScenarioResolver."""
    return ScenarioResolver(defaults).resolve(raw)
