#!/usr/bin/env python3
"""
SaaS Business Case Simulator - Demo

Runs, for the configured preset and horizon:
1. Baseline simulation (month-by-month)
2. Scenario comparison (marketing focus vs. ops focus)
3. Decision engine recommendation

Defaults come from the environment (SIMULATOR_DEFAULT_PRESET,
SIMULATOR_DEFAULT_HORIZON_MONTHS, LOG_LEVEL).
"""

import logging

from bizcase.config import get_settings
from bizcase.data import SCENARIO_PRESETS, get_preset
from bizcase.decision import run_decision_engine
from bizcase.simulation import (
    simulate_business_case,
    run_scenario_comparison,
    format_comparison_markdown
)


def run_simulation_demo(preset, horizon):
    """Print the baseline time series."""
    print("=" * 60)
    print(f"BASELINE: {preset.label}")
    print("=" * 60)
    print()

    result = simulate_business_case(preset.baseline, preset.business_model, horizon)

    print(f"{'Month':<6} {'Customers':>10} {'MRR':>12} {'Contribution':>14} {'Cumulative':>14} {'Ops hrs':>9}")
    print("-" * 70)
    for m in result.months:
        print(
            f"{m.month:<6} {m.total_customers:>10.1f} {m.mrr:>12,.0f} "
            f"{m.contribution:>14,.0f} {m.cumulative_contribution:>14,.0f} {m.ops_hours_total:>9.1f}"
        )
    print()

    agg = result.aggregates
    breakeven = f"month {agg.breakeven_month}" if agg.breaks_even else f"not within {horizon} months"
    print(f"Ending MRR:          {agg.ending_mrr:,.0f}")
    print(f"Total contribution:  {agg.total_contribution:,.0f}")
    print(f"Peak ops hours:      {agg.peak_ops_hours:.1f}")
    if agg.peak_ops_fte is not None:
        print(f"Peak ops FTE:        {agg.peak_ops_fte:.2f}")
    print(f"Breakeven:           {breakeven}")
    print()

    return result


def run_scenario_demo(preset, horizon):
    """Compare the strategy bundles against the baseline."""
    print("=" * 60)
    print("SCENARIO COMPARISON")
    print("=" * 60)
    print()

    comparison = run_scenario_comparison(
        preset.baseline,
        preset.business_model,
        horizon,
        SCENARIO_PRESETS.values()
    )

    for scenario_id, name in comparison.scenario_names.items():
        print(format_comparison_markdown(comparison.compare(scenario_id), name))
        print()

    return comparison


def run_decision_demo(preset, horizon):
    """Print the recommended lever."""
    print("=" * 60)
    print("RECOMMENDATION")
    print("=" * 60)
    print()

    decision = run_decision_engine(preset.baseline, preset.business_model, horizon)

    if not decision.has_recommendation:
        print("No applicable lever for this business model.")
        print()
        return decision

    primary = decision.primary_lever
    impact = primary.impact
    print(f"Primary lever: {primary.definition.label} ({primary.category.value})")
    print(f"  Score:                 {primary.score:.3f}")
    print(f"  Confidence:            {decision.confidence.value}")
    print(f"  Contribution delta:    {impact.delta_contribution:+,.0f} over {horizon} months")
    print(f"  Breakeven delta:       {impact.delta_breakeven:+.0f} months")
    print(f"  Peak ops hours delta:  {impact.delta_ops_load:+.1f}")
    if decision.guardrail_applied:
        print("  (Promoted over a close marketing lever)")
    print()

    if decision.secondary_levers:
        print("Alternatives:")
        for lever in decision.secondary_levers:
            print(f"  {lever.rank}. {lever.definition.label} (score {lever.score:.3f})")
        print()

    return decision


def main():
    """Main entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    preset = get_preset(settings.simulator.default_preset)
    horizon = settings.simulator.default_horizon_months

    print()
    print("+" + "=" * 58 + "+")
    print(f"|{settings.app_name.upper():^58}|")
    print(f"|{f'{preset.business_model.value} model, {horizon}-month horizon':^58}|")
    print("+" + "=" * 58 + "+")
    print()

    run_simulation_demo(preset, horizon)
    run_scenario_demo(preset, horizon)
    run_decision_demo(preset, horizon)


if __name__ == "__main__":
    main()
