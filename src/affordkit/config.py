"""Defaults applied while resolving scenarios."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ANNUAL_RATE = 0.045
DEFAULT_CLOSING_COST_RATE = 0.07
DEFAULT_INSURANCE_RATE = 0.003


@dataclass(frozen=True)
class ResolverDefaults:
    """
    Values the resolver falls back to when an input is absent.

    Attributes:
        annual_rate: APR used when none is supplied.
        closing_cost_rate: Closing costs as a fraction of the price.
        insurance_rate: Annual insurance as a fraction of the price.
        renovation_costs: Renovation budget used when none is supplied.
        loan_term_years: Term used when no years are supplied. ``None``
            makes the term mandatory.
        allow_negative_downpayment: Accept a derived downpayment below
            zero (costs exceed available funds).
        check_downpayment_ceiling: Reject scenarios whose downpayment
            exceeds the purchase price.
    """

    annual_rate: float = DEFAULT_ANNUAL_RATE
    closing_cost_rate: float = DEFAULT_CLOSING_COST_RATE
    insurance_rate: float = DEFAULT_INSURANCE_RATE
    renovation_costs: int = 0
    loan_term_years: int | None = None
    allow_negative_downpayment: bool = True
    check_downpayment_ceiling: bool = True

    def __post_init__(self) -> None:
        """Validate defaults."""
        if not 0 <= self.annual_rate < 1:
            raise ValueError(f"annual_rate must be in [0, 1), got {self.annual_rate}")
        if self.closing_cost_rate < 0:
            raise ValueError(
                f"closing_cost_rate must be non-negative, got {self.closing_cost_rate}"
            )
        if self.insurance_rate < 0:
            raise ValueError(
                f"insurance_rate must be non-negative, got {self.insurance_rate}"
            )
        if self.renovation_costs < 0:
            raise ValueError(
                f"renovation_costs must be non-negative, got {self.renovation_costs}"
            )
        if self.loan_term_years is not None and self.loan_term_years <= 0:
            raise ValueError(
                f"loan_term_years must be positive, got {self.loan_term_years}"
            )


class Settings(BaseSettings):
    """Resolver defaults overridable through ``AFFORDKIT_*`` variables."""

    ANNUAL_RATE: float = DEFAULT_ANNUAL_RATE
    CLOSING_COST_RATE: float = DEFAULT_CLOSING_COST_RATE
    INSURANCE_RATE: float = DEFAULT_INSURANCE_RATE
    RENOVATION_COSTS: int = 0
    LOAN_TERM_YEARS: int | None = None

    model_config = SettingsConfigDict(
        env_prefix="AFFORDKIT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    def to_defaults(self, **overrides: bool) -> ResolverDefaults:
        """Build ResolverDefaults, with extra keyword flags passed through."""
        return ResolverDefaults(
            annual_rate=self.ANNUAL_RATE,
            closing_cost_rate=self.CLOSING_COST_RATE,
            insurance_rate=self.INSURANCE_RATE,
            renovation_costs=self.RENOVATION_COSTS,
            loan_term_years=self.LOAN_TERM_YEARS,
            **overrides,
        )
