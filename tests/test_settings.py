"""
Tests for config.settings.
"""

from bizcase.config.settings import DecisionConfig, Settings, SimulatorConfig, get_settings


class TestDecisionConfig:
    def test_defaults(self):
        cfg = DecisionConfig()
        assert (cfg.weight_economic, cfg.weight_time, cfg.weight_ops, cfg.weight_scaling) == (
            0.40, 0.25, 0.20, 0.15
        )
        assert cfg.category_priors == {
            "product_ops": 1.0,
            "sales": 0.7,
            "unit_economics": 0.6,
            "marketing": 0.4
        }
        assert cfg.guardrail_ratio == 0.85
        assert cfg.contribution_floor == 0.1
        assert cfg.max_secondary_levers == 3

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DECISION_GUARDRAIL_RATIO", "0.9")
        assert DecisionConfig().guardrail_ratio == 0.9


class TestSimulatorConfig:
    def test_defaults(self):
        cfg = SimulatorConfig()
        assert cfg.default_horizon_months == 12
        assert cfg.default_preset == "early_stage_plg"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SIMULATOR_DEFAULT_HORIZON_MONTHS", "24")
        assert SimulatorConfig().default_horizon_months == 24


class TestSettings:
    def test_from_env_builds_sub_configs(self):
        settings = Settings.from_env()
        assert isinstance(settings.decision, DecisionConfig)
        assert isinstance(settings.simulator, SimulatorConfig)

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
