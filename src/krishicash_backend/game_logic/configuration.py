"""Economic configuration objects for game runs."""

from __future__ import annotations

from functools import cache

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class EconomyDefaults(BaseSettings):
    """Load default economic parameters from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KRISHICASH_ECONOMY_",
        extra="ignore",
    )

    household_expense: int = Field(default=3000, ge=0)
    farming_expense: int = Field(default=2500, ge=0)
    education_expense: int = Field(default=1000, ge=0)
    starting_income: float = Field(default=12000, gt=0)
    starting_balance: float = 0
    starting_stability: int = Field(default=70, ge=0, le=100)
    insurance_premium: int = Field(default=500, ge=0)
    crop_loss_insured_cap: float = Field(default=500, ge=0)
    loan_base_interest_rate: float = Field(default=0.2, ge=0)
    loan_interest_step: float = Field(default=0.05, ge=0)
    emi_months: int = Field(default=6, ge=1)
    income_growth_min_months: int = Field(default=3, ge=1)
    income_growth_min_saved: float = Field(default=6000, ge=0)
    income_growth_bonus: float = Field(default=1500, ge=0)
    difficulty_step: float = Field(default=0.15, ge=0)
    reward_base_factor: float = Field(default=0.8, ge=0)
    reward_step_factor: float = Field(default=0.2, ge=0)
    goal_selection_enabled: bool = True
    insurance_persists: bool = True
    single_loan_only: bool = True
    max_years: int | None = Field(default=None, ge=1)
    rng_seed: int | None = None

    def to_config(self) -> EconomyConfiguration:
        """Convert defaults into an immutable configuration object."""
        return EconomyConfiguration.model_validate(self.model_dump())


class EconomyConfiguration(BaseModel):
    """Immutable representation of the economic parameters for a run."""

    model_config = ConfigDict(frozen=True)

    household_expense: int = Field(default=3000, ge=0)
    farming_expense: int = Field(default=2500, ge=0)
    education_expense: int = Field(default=1000, ge=0)
    starting_income: float = Field(default=12000, gt=0)
    starting_balance: float = 0
    starting_stability: int = Field(default=70, ge=0, le=100)
    insurance_premium: int = Field(default=500, ge=0)
    crop_loss_insured_cap: float = Field(default=500, ge=0)
    loan_base_interest_rate: float = Field(default=0.2, ge=0)
    loan_interest_step: float = Field(default=0.05, ge=0)
    emi_months: int = Field(default=6, ge=1)
    income_growth_min_months: int = Field(default=3, ge=1)
    income_growth_min_saved: float = Field(default=6000, ge=0)
    income_growth_bonus: float = Field(default=1500, ge=0)
    difficulty_step: float = Field(default=0.15, ge=0)
    reward_base_factor: float = Field(default=0.8, ge=0)
    reward_step_factor: float = Field(default=0.2, ge=0)
    goal_selection_enabled: bool = True
    insurance_persists: bool = True
    single_loan_only: bool = True
    max_years: int | None = Field(default=None, ge=1)
    rng_seed: int | None = None

    def for_run(self, overrides: RunOverrides | None = None) -> EconomyConfiguration:
        """Create a run-specific configuration by applying overrides if provided."""
        if overrides is None:
            return self
        return overrides.apply(self)


class RunOverrides(BaseModel):
    """Optional run-specific overrides for economic settings."""

    model_config = ConfigDict(frozen=True)

    starting_income: float | None = Field(default=None, gt=0)
    starting_balance: float | None = None
    goal_selection_enabled: bool | None = None
    insurance_persists: bool | None = None
    single_loan_only: bool | None = None
    max_years: int | None = Field(default=None, ge=1)
    rng_seed: int | None = None

    def apply(self, config: EconomyConfiguration) -> EconomyConfiguration:
        """Return a copy of *config* with every non-empty override applied."""
        updates = self.model_dump(exclude_none=True)
        if not updates:
            return config
        return EconomyConfiguration.model_validate(
            {**config.model_dump(), **updates}
        )


@cache
def get_default_economy_configuration() -> EconomyConfiguration:
    """Return the cached default economic configuration."""
    return EconomyDefaults().to_config()


def build_run_configuration(
    overrides: RunOverrides | None = None,
) -> EconomyConfiguration:
    """Construct a configuration for a run, applying optional overrides."""
    return get_default_economy_configuration().for_run(overrides)


__all__ = [
    "EconomyConfiguration",
    "EconomyDefaults",
    "RunOverrides",
    "build_run_configuration",
    "get_default_economy_configuration",
]
