"""
Static catalogs: the lever library, input presets and strategy scenarios.
"""

from .levers import LEVER_LIBRARY
from .presets import PRESETS, SCENARIO_PRESETS, get_preset, default_inputs

__all__ = [
    "LEVER_LIBRARY",
    "PRESETS",
    "SCENARIO_PRESETS",
    "get_preset",
    "default_inputs"
]
