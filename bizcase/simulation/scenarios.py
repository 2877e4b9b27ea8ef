"""
Scenario Comparison

Runs the baseline and a set of strategy bundles (e.g. marketing focus vs.
ops focus) over the same horizon so their trajectories can be compared.
"""

from typing import Iterable
import logging

from ..core.entities import BaselineInputs, BusinessModel, ScenarioDefinition
from .levers import apply_levers
from .metrics import ScenarioComparison
from .simulator import simulate_business_case, validate_horizon

logger = logging.getLogger("bizcase.simulation")


def run_scenario_comparison(
    baseline: BaselineInputs,
    model: BusinessModel,
    horizon_months: int,
    scenarios: Iterable[ScenarioDefinition]
) -> ScenarioComparison:
    """Simulate the baseline and each scenario's bundled changes."""
    validate_horizon(horizon_months)

    comparison = ScenarioComparison(
        baseline=simulate_business_case(baseline, model, horizon_months)
    )

    for scenario in scenarios:
        scenario_inputs = apply_levers(baseline, list(scenario.changes))
        comparison.scenarios[scenario.id] = simulate_business_case(
            scenario_inputs, model, horizon_months
        )
        comparison.scenario_names[scenario.id] = scenario.name
        logger.debug("Scenario %s simulated with %d changes", scenario.id, len(scenario.changes))

    return comparison
