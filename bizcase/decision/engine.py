"""
Decision Engine

Recommends the single lever with the best multi-criteria payoff:

1. Simulate the unmodified baseline
2. For every lever applicable to the business model, apply its default step
   alone and simulate again
3. Measure three deltas against the baseline: total contribution,
   breakeven month and peak ops load
4. Min-max normalize each delta series across the candidates
5. Score = weighted economic, time and ops scores plus a category prior
6. Rank, apply the marketing guardrail, derive a confidence label

The lever catalog and the scoring configuration are injected, so tests can
substitute synthetic catalogs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional
import logging

from ..config.settings import DecisionConfig, get_settings
from ..core.entities import (
    BaselineInputs,
    BusinessModel,
    LeverCategory,
    LeverDefinition
)
from ..data.levers import LEVER_LIBRARY
from ..simulation.levers import apply_levers
from ..simulation.simulator import (
    SimulationResult,
    simulate_business_case,
    validate_horizon
)

logger = logging.getLogger("bizcase.decision")


class Confidence(str, Enum):
    """How clearly the top lever beats the runner-up."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class LeverImpact:
    """
    Raw deltas of a lever run versus the baseline run.

    delta_contribution: higher is better.
    delta_breakeven: months, negative is better (earlier breakeven).
    delta_ops_load: peak ops hours, negative is better.
    """
    delta_contribution: float
    delta_breakeven: float
    delta_ops_load: float


@dataclass(frozen=True)
class ScoredLever:
    """A candidate lever with its measured impact and weighted score."""
    definition: LeverDefinition
    impact: LeverImpact
    score: float = 0.0

    @property
    def category(self) -> LeverCategory:
        return self.definition.category


@dataclass(frozen=True)
class SecondaryLever:
    """A runner-up suggestion; rank 2 is the best alternative."""
    definition: LeverDefinition
    rank: int
    score: float = 0.0


@dataclass(frozen=True)
class DecisionResult:
    """
    Outcome of a decision engine run.

    primary_lever is None when no lever applies to the business model.
    guardrail_applied is True when a product/ops lever was promoted over
    a marketing lever that ranked first.
    """
    primary_lever: Optional[ScoredLever]
    secondary_levers: tuple = ()
    confidence: Confidence = Confidence.LOW
    guardrail_applied: bool = False

    @property
    def has_recommendation(self) -> bool:
        return self.primary_lever is not None


def normalize(value: float, low: float, high: float) -> float:
    """Min-max scale value into [0, 1]; a degenerate range maps to 0."""
    if high == low:
        return 0.0
    return (value - low) / (high - low)


def select_primary(
    ranked: list[ScoredLever],
    guardrail_ratio: float = 0.85
) -> tuple[Optional[ScoredLever], bool]:
    """
    Pick the primary lever from a descending ranking.

    A marketing winner yields to the best product/ops candidate whenever
    that candidate reaches guardrail_ratio of the winner's score.
    Returns the primary lever and whether the guardrail fired.
    """
    if not ranked:
        return None, False

    winner = ranked[0]
    if winner.category != LeverCategory.MARKETING:
        return winner, False

    best_ops = next(
        (s for s in ranked if s.category == LeverCategory.PRODUCT_OPS),
        None
    )
    if best_ops is not None and best_ops.score >= winner.score * guardrail_ratio:
        return best_ops, True
    return winner, False


def classify_confidence(
    ranked: list[ScoredLever],
    high_gap: float = 0.15,
    medium_gap: float = 0.05
) -> Confidence:
    """Confidence from the relative score gap between rank 1 and rank 2."""
    if len(ranked) < 2:
        return Confidence.LOW

    top, runner_up = ranked[0].score, ranked[1].score
    if top <= 0:
        return Confidence.LOW

    gap = (top - runner_up) / top
    if gap > high_gap:
        return Confidence.HIGH
    if gap > medium_gap:
        return Confidence.MEDIUM
    return Confidence.LOW


class DecisionEngine:
    """
    Ranks single-lever perturbations of a baseline.

    Each candidate run works on its own copy of the inputs, so runs are
    independent of each other.
    """

    def __init__(
        self,
        catalog: Iterable[LeverDefinition] = None,
        config: DecisionConfig = None
    ):
        self.catalog = tuple(LEVER_LIBRARY if catalog is None else catalog)
        self.config = config or get_settings().decision

    def candidates(self, model: BusinessModel) -> list[LeverDefinition]:
        """Levers from the catalog that apply to the business model."""
        model = BusinessModel(model)
        return [lever for lever in self.catalog if lever.applies_to(model)]

    def rank(
        self,
        baseline: BaselineInputs,
        model: BusinessModel,
        horizon_months: int
    ) -> list[ScoredLever]:
        """Score every applicable lever and sort by descending score."""
        validate_horizon(horizon_months)
        model = BusinessModel(model)

        reference = simulate_business_case(baseline, model, horizon_months)

        impacts = []
        for lever in self.candidates(model):
            lever_inputs = apply_levers(baseline, [lever.default_change()])
            run = simulate_business_case(lever_inputs, model, horizon_months)
            impact = self._measure_impact(reference, run, horizon_months)
            logger.debug("Lever %s: %s", lever.field.value, impact)
            impacts.append((lever, impact))

        scored = self._score(impacts)
        scored.sort(key=lambda s: s.score, reverse=True)
        return scored

    def run(
        self,
        baseline: BaselineInputs,
        model: BusinessModel,
        horizon_months: int
    ) -> DecisionResult:
        """Recommend a primary lever plus runner-up suggestions."""
        ranked = self.rank(baseline, model, horizon_months)
        if not ranked:
            logger.info("No applicable levers for %s", BusinessModel(model).value)
            return DecisionResult(primary_lever=None)

        primary, guardrail_applied = select_primary(ranked, self.config.guardrail_ratio)
        confidence = classify_confidence(
            ranked,
            self.config.high_confidence_gap,
            self.config.medium_confidence_gap
        )

        runners_up = [s for s in ranked if s is not primary]
        secondary = tuple(
            SecondaryLever(definition=s.definition, rank=idx + 2, score=s.score)
            for idx, s in enumerate(runners_up[:self.config.max_secondary_levers])
        )

        if guardrail_applied:
            logger.info(
                "Guardrail: %s promoted over marketing lever %s",
                primary.definition.label,
                ranked[0].definition.label
            )
        logger.info(
            "Recommended lever: %s (score %.3f, confidence %s)",
            primary.definition.label,
            primary.score,
            confidence.value
        )

        return DecisionResult(
            primary_lever=primary,
            secondary_levers=secondary,
            confidence=confidence,
            guardrail_applied=guardrail_applied
        )

    @staticmethod
    def _measure_impact(
        reference: SimulationResult,
        run: SimulationResult,
        horizon_months: int
    ) -> LeverImpact:
        # "Never breaks even" counts as one month past the horizon
        never = horizon_months + 1
        reference_be = reference.aggregates.breakeven_month or never
        run_be = run.aggregates.breakeven_month or never

        return LeverImpact(
            delta_contribution=(
                run.aggregates.total_contribution - reference.aggregates.total_contribution
            ),
            delta_breakeven=run_be - reference_be,
            delta_ops_load=run.aggregates.peak_ops_hours - reference.aggregates.peak_ops_hours
        )

    def _score(self, impacts: list[tuple[LeverDefinition, LeverImpact]]) -> list[ScoredLever]:
        if not impacts:
            return []

        cfg = self.config
        contributions = [i.delta_contribution for _, i in impacts]
        breakevens = [i.delta_breakeven for _, i in impacts]
        ops_loads = [i.delta_ops_load for _, i in impacts]

        max_contrib = max(max(contributions), cfg.contribution_floor)
        min_contrib = min(contributions)
        max_be, min_be = max(breakevens), min(breakevens)
        max_ops, min_ops = max(ops_loads), min(ops_loads)

        scored = []
        for lever, impact in impacts:
            econ_score = normalize(impact.delta_contribution, min_contrib, max_contrib)
            time_score = 1 - normalize(impact.delta_breakeven, min_be, max_be)
            ops_score = 1 - normalize(impact.delta_ops_load, min_ops, max_ops)
            scaling_score = cfg.category_priors.get(
                getattr(lever.category, "value", lever.category),
                cfg.default_category_prior
            )

            score = (
                econ_score * cfg.weight_economic
                + time_score * cfg.weight_time
                + ops_score * cfg.weight_ops
                + scaling_score * cfg.weight_scaling
            )
            scored.append(ScoredLever(definition=lever, impact=impact, score=score))

        return scored


def run_decision_engine(
    baseline: BaselineInputs,
    model: BusinessModel,
    horizon_months: int,
    catalog: Iterable[LeverDefinition] = None,
    config: DecisionConfig = None
) -> DecisionResult:
    """Convenience wrapper around DecisionEngine.run."""
    engine = DecisionEngine(catalog=catalog, config=config)
    return engine.run(baseline, model, horizon_months)
