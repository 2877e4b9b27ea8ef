"""
Core domain types shared by the simulator and the decision engine.
"""

from .entities import (
    BusinessModel,
    AdjustmentKind,
    LeverCategory,
    BaselineInputs,
    InputField,
    RATE_FIELDS,
    UNBOUNDED_FIELDS,
    SELF_SERVE_CONVERSION_FIELDS,
    LeverChange,
    LeverDefinition,
    ScenarioDefinition,
    PresetOption
)
from .exceptions import InvalidHorizonError, UnknownPresetError

__all__ = [
    "BusinessModel",
    "AdjustmentKind",
    "LeverCategory",
    "BaselineInputs",
    "InputField",
    "RATE_FIELDS",
    "UNBOUNDED_FIELDS",
    "SELF_SERVE_CONVERSION_FIELDS",
    "LeverChange",
    "LeverDefinition",
    "ScenarioDefinition",
    "PresetOption",
    "InvalidHorizonError",
    "UnknownPresetError"
]
