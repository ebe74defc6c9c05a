"""Value objects describing affordability scenarios."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields

from .rates import MONTHS_PER_YEAR


@dataclass(frozen=True)
class RawParameters:
    """
    Unresolved user input, one tuple of raw strings per field.

    An empty tuple means the value was not supplied. A tuple with several
    entries marks the field as an axis: the resolver produces one scenario
    per value. Field order is the axis declaration order used when
    expanding scenarios.

    Example:
        >>> raw = RawParameters.from_mapping(
        ...     {"years": ["15", "30"], "price": "300000", "taxes": "4000", "funds": "80000"}
        ... )
        >>> raw.years
        ('15', '30')
    """

    years: tuple[str, ...] = ()
    price: tuple[str, ...] = ()
    apr: tuple[str, ...] = ()
    taxes: tuple[str, ...] = ()
    funds: tuple[str, ...] = ()
    closing_costs: tuple[str, ...] = ()
    insurance: tuple[str, ...] = ()
    downpayment: tuple[str, ...] = ()
    renovations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate that every field holds a tuple of strings."""
        for f in fields(self):
            values = getattr(self, f.name)
            if not isinstance(values, tuple):
                raise TypeError(f"{f.name} must be a tuple, got {type(values)}")
            for value in values:
                if not isinstance(value, str):
                    raise TypeError(
                        f"{f.name} values must be str, got {type(value)}"
                    )

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Input field names in declaration order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(
        cls, values: Mapping[str, str | Sequence[str] | None]
    ) -> RawParameters:
        """
        Build RawParameters from a loose mapping.

        Single strings become one-element tuples and ``None`` becomes an
        empty tuple.

        Raises:
            ValueError: If the mapping names an unknown field.
        """
        known = set(cls.field_names())
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown input fields: {sorted(unknown)}")

        kwargs: dict[str, tuple[str, ...]] = {}
        for name, value in values.items():
            if value is None:
                kwargs[name] = ()
            elif isinstance(value, str):
                kwargs[name] = (value,)
            else:
                kwargs[name] = tuple(value)
        return cls(**kwargs)

    def values_for(self, name: str) -> tuple[str, ...]:
        return getattr(self, name)  # type: ignore[no-any-return]


@dataclass(frozen=True)
class Scenario:
    """
    A fully resolved set of inputs for one affordability computation.

    Every field is concrete. ``defaulted`` records which fields were filled
    in by a default or a derivation rather than supplied by the user.

    Attributes:
        loan_term_months: Number of monthly payments.
        annual_rate: Nominal annual rate as a decimal (0.045 = 4.5%).
        purchase_price: Price of the property.
        available_funds: Cash available at purchase.
        annual_taxes: Property taxes per year.
        annual_insurance: Homeowner's insurance per year.
        closing_costs: One-time closing costs.
        renovation_costs: One-time renovation budget.
        downpayment: Cash put toward the price.
        defaulted: Names of fields that came from defaults.
    """

    loan_term_months: int
    annual_rate: float
    purchase_price: int
    available_funds: int
    annual_taxes: int
    annual_insurance: int
    closing_costs: int
    renovation_costs: int
    downpayment: int
    defaulted: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate scenario fields."""
        if self.loan_term_months <= 0:
            raise ValueError(
                f"loan_term_months must be positive, got {self.loan_term_months}"
            )
        if not 0 <= self.annual_rate < 1:
            raise ValueError(
                f"annual_rate must be in [0, 1), got {self.annual_rate}"
            )
        if self.purchase_price <= 0:
            raise ValueError(
                f"purchase_price must be positive, got {self.purchase_price}"
            )
        for name in (
            "available_funds",
            "annual_taxes",
            "annual_insurance",
            "closing_costs",
            "renovation_costs",
        ):
            if getattr(self, name) < 0:
                raise ValueError(
                    f"{name} must be non-negative, got {getattr(self, name)}"
                )
        if self.downpayment < 0 and "downpayment" not in self.defaulted:
            raise ValueError(
                f"downpayment must be non-negative, got {self.downpayment}"
            )

    @property
    def principal(self) -> int:
        """Amount borrowed."""
        return self.purchase_price - self.downpayment

    @property
    def term_years(self) -> float:
        return self.loan_term_months / MONTHS_PER_YEAR

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / MONTHS_PER_YEAR

    @property
    def downpayment_derived(self) -> bool:
        """Whether the downpayment was computed from funds minus costs."""
        return "downpayment" in self.defaulted

    def __str__(self) -> str:
        return (
            f"Scenario(price={self.purchase_price}, down={self.downpayment}, "
            f"rate={self.annual_rate:.3%}, term={self.loan_term_months}M)"
        )


@dataclass(frozen=True)
class AmortizationRow:
    """One period of an amortization schedule."""

    period_index: int
    interest_portion: float
    principal_portion: float
    remaining_principal: float

    @property
    def payment(self) -> float:
        """Total payment for the period (interest plus principal)."""
        return self.interest_portion + self.principal_portion
