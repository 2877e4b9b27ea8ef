"""
Configuration Management

Centralized configuration for:
- Simulation defaults
- Decision engine scoring
- Logging
"""

from .settings import (
    Settings,
    SimulatorConfig,
    DecisionConfig,
    get_settings
)

__all__ = [
    "Settings",
    "SimulatorConfig",
    "DecisionConfig",
    "get_settings"
]
