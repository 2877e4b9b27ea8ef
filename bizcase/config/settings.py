"""
Settings Management with Pydantic

Provides type-safe configuration with environment variable support for:
- Simulation defaults (horizon, starting preset)
- Decision engine weights, priors and thresholds
- Application-level logging
"""

from typing import Dict
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SimulatorConfig(BaseSettings):
    """Simulation defaults."""
    model_config = SettingsConfigDict(
        env_prefix="SIMULATOR_",
        extra="ignore"
    )

    default_horizon_months: int = 12
    default_preset: str = "early_stage_plg"


class DecisionConfig(BaseSettings):
    """
    Decision engine scoring configuration.

    Score = economic * weight_economic + time * weight_time
            + ops * weight_ops + category prior * weight_scaling
    """
    model_config = SettingsConfigDict(
        env_prefix="DECISION_",
        extra="ignore"
    )

    weight_economic: float = 0.40
    weight_time: float = 0.25
    weight_ops: float = 0.20
    weight_scaling: float = 0.15

    # Internal efficiency levers compound more reliably at early stage
    category_priors: Dict[str, float] = Field(default_factory=lambda: {
        "product_ops": 1.0,
        "sales": 0.7,
        "unit_economics": 0.6,
        "marketing": 0.4
    })
    default_category_prior: float = 0.5

    # Marketing keeps the top spot only when product/ops is below this share of its score
    guardrail_ratio: float = 0.85

    high_confidence_gap: float = 0.15
    medium_confidence_gap: float = 0.05

    # Lower bound for the max of the contribution-delta series
    contribution_floor: float = 0.1

    max_secondary_levers: int = 3


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Application
    app_name: str = "SaaS Business Case Simulator"
    debug: bool = False
    log_level: str = "INFO"

    # Sub-configurations
    simulator: SimulatorConfig = Field(default_factory=SimulatorConfig)
    decision: DecisionConfig = Field(default_factory=DecisionConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(
            simulator=SimulatorConfig(),
            decision=DecisionConfig()
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
