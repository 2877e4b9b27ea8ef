"""
Business Case Simulation

- levers: apply ordered lever changes to a baseline
- simulator: deterministic monthly model for PLG and sales-led businesses
- scenarios / metrics: run strategy bundles and compare them to the baseline
"""

from .levers import apply_levers
from .simulator import (
    SimulationMonth,
    SimulationAggregates,
    SimulationResult,
    simulate_business_case,
    validate_horizon
)
from .metrics import (
    MetricComparison,
    ScenarioComparison,
    compare_aggregates,
    format_comparison_markdown
)
from .scenarios import run_scenario_comparison

__all__ = [
    "apply_levers",
    "SimulationMonth",
    "SimulationAggregates",
    "SimulationResult",
    "simulate_business_case",
    "validate_horizon",
    "MetricComparison",
    "ScenarioComparison",
    "compare_aggregates",
    "format_comparison_markdown",
    "run_scenario_comparison"
]
