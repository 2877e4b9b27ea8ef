"""
Lever Recommendation

Runs the simulator once per candidate lever, scores the outcomes on
economics, time-to-breakeven and ops load, and recommends one lever.
"""

from .engine import (
    Confidence,
    LeverImpact,
    ScoredLever,
    SecondaryLever,
    DecisionResult,
    DecisionEngine,
    normalize,
    select_primary,
    classify_confidence,
    run_decision_engine
)

__all__ = [
    "Confidence",
    "LeverImpact",
    "ScoredLever",
    "SecondaryLever",
    "DecisionResult",
    "DecisionEngine",
    "normalize",
    "select_primary",
    "classify_confidence",
    "run_decision_engine"
]
