"""Tests for resolver defaults and environment settings."""

import pytest

from affordkit.config import (
    DEFAULT_ANNUAL_RATE,
    DEFAULT_CLOSING_COST_RATE,
    DEFAULT_INSURANCE_RATE,
    ResolverDefaults,
    Settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate Settings from the caller's environment and any .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "AFFORDKIT_ANNUAL_RATE",
        "AFFORDKIT_CLOSING_COST_RATE",
        "AFFORDKIT_INSURANCE_RATE",
        "AFFORDKIT_RENOVATION_COSTS",
        "AFFORDKIT_LOAN_TERM_YEARS",
    ):
        monkeypatch.delenv(name, raising=False)


class TestResolverDefaults:
    """Test cases for ResolverDefaults."""

    def test_constants(self):
        defaults = ResolverDefaults()
        assert defaults.annual_rate == DEFAULT_ANNUAL_RATE == 0.045
        assert defaults.closing_cost_rate == DEFAULT_CLOSING_COST_RATE == 0.07
        assert defaults.insurance_rate == DEFAULT_INSURANCE_RATE == 0.003
        assert defaults.renovation_costs == 0
        assert defaults.loan_term_years is None
        assert defaults.allow_negative_downpayment
        assert defaults.check_downpayment_ceiling

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            ({"annual_rate": 1.5}, "annual_rate"),
            ({"closing_cost_rate": -0.1}, "closing_cost_rate"),
            ({"insurance_rate": -0.1}, "insurance_rate"),
            ({"renovation_costs": -1}, "renovation_costs"),
            ({"loan_term_years": 0}, "loan_term_years"),
        ],
    )
    def test_validation(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            ResolverDefaults(**kwargs)


class TestSettings:
    """Test cases for environment-backed Settings."""

    def test_defaults_match_constants(self):
        assert Settings().to_defaults() == ResolverDefaults()

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("AFFORDKIT_INSURANCE_RATE", "0.005")
        monkeypatch.setenv("AFFORDKIT_LOAN_TERM_YEARS", "30")
        defaults = Settings().to_defaults()
        assert defaults.insurance_rate == 0.005
        assert defaults.loan_term_years == 30

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("AFFORDKIT_CLOSING_COST_RATE=0.03\n")
        assert Settings().to_defaults().closing_cost_rate == 0.03

    def test_flag_passthrough(self):
        defaults = Settings().to_defaults(allow_negative_downpayment=False)
        assert not defaults.allow_negative_downpayment
