"""
Scenario Metrics

Compares the aggregates of a scenario run against the baseline run:
- Ending MRR
- Total contribution
- Peak ops hours
- Breakeven month

and renders the comparison as a markdown table.
"""

from dataclasses import dataclass, field
from typing import Optional

from .simulator import SimulationResult


@dataclass(frozen=True)
class MetricComparison:
    """
    One metric, baseline versus scenario.

    Values are None where a breakeven month does not exist; the deltas are
    None whenever either side is.
    """
    metric_name: str
    baseline_value: Optional[float]
    scenario_value: Optional[float]
    delta_absolute: Optional[float]
    delta_percent: Optional[float]
    higher_is_better: bool = True

    @property
    def is_improvement(self) -> Optional[bool]:
        if self.delta_absolute is None:
            return None
        if self.higher_is_better:
            return self.delta_absolute > 0
        return self.delta_absolute < 0


@dataclass
class ScenarioComparison:
    """Baseline run plus one run per scenario, keyed by scenario id."""
    baseline: SimulationResult
    scenarios: dict = field(default_factory=dict)
    scenario_names: dict = field(default_factory=dict)

    def compare(self, scenario_id: str) -> list[MetricComparison]:
        return compare_aggregates(self.baseline, self.scenarios[scenario_id])


# (attribute, label, higher_is_better)
COMPARED_METRICS = [
    ("ending_mrr", "Ending MRR", True),
    ("total_contribution", "Total contribution", True),
    ("peak_ops_hours", "Peak ops hours", False),
    ("breakeven_month", "Breakeven month", False),
]


def _compare_values(
    name: str,
    baseline_value: Optional[float],
    scenario_value: Optional[float],
    higher_is_better: bool
) -> MetricComparison:
    if baseline_value is None or scenario_value is None:
        return MetricComparison(
            metric_name=name,
            baseline_value=baseline_value,
            scenario_value=scenario_value,
            delta_absolute=None,
            delta_percent=None,
            higher_is_better=higher_is_better
        )

    delta_absolute = scenario_value - baseline_value
    if baseline_value != 0:
        delta_percent = delta_absolute / abs(baseline_value) * 100
    else:
        delta_percent = 0.0

    return MetricComparison(
        metric_name=name,
        baseline_value=baseline_value,
        scenario_value=scenario_value,
        delta_absolute=delta_absolute,
        delta_percent=delta_percent,
        higher_is_better=higher_is_better
    )


def compare_aggregates(
    baseline: SimulationResult,
    scenario: SimulationResult
) -> list[MetricComparison]:
    """Compare every reported aggregate of two runs."""
    return [
        _compare_values(
            label,
            getattr(baseline.aggregates, attr),
            getattr(scenario.aggregates, attr),
            higher_is_better
        )
        for attr, label, higher_is_better in COMPARED_METRICS
    ]


def _format_value(value: Optional[float], name: str) -> str:
    if value is None:
        return "never"
    if name == "Breakeven month":
        return f"{value:.0f}"
    return f"{value:,.1f}"


def format_comparison_markdown(
    comparisons: list[MetricComparison],
    scenario_name: str = "Scenario"
) -> str:
    """Format a baseline/scenario comparison as markdown."""
    lines = [
        f"| Metric | Baseline | {scenario_name} | Δ (%) |",
        "|--------|----------|" + "-" * (len(scenario_name) + 2) + "|-------|"
    ]

    for c in comparisons:
        baseline_str = _format_value(c.baseline_value, c.metric_name)
        scenario_str = _format_value(c.scenario_value, c.metric_name)
        delta_str = "n/a" if c.delta_percent is None else f"{c.delta_percent:+.1f}%"
        lines.append(f"| {c.metric_name} | {baseline_str} | {scenario_str} | {delta_str} |")

    return "\n".join(lines)
