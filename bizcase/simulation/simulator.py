"""
Business Case Simulator

A deterministic, month-by-month state machine for a subscription business.
The only state carried between months is the total customer count.

Each month:
1. Acquisition: sessions -> MQLs
2. Conversion: MQLs -> new customers (sales-led or PLG funnel)
3. Retention: prior customers churn, the rest are retained
4. Revenue: MRR on all customers plus expansion on the retained cohort
5. Costs: marketing (per-MQL or fixed), variable sales, ops hours
6. Contribution: gross profit minus all costs, accumulated over time
"""

from dataclasses import dataclass
from typing import Optional
import logging

from ..core.entities import BaselineInputs, BusinessModel
from ..core.exceptions import InvalidHorizonError

logger = logging.getLogger("bizcase.simulation")


@dataclass(frozen=True)
class SimulationMonth:
    """One simulated month. Money figures are per month."""
    month: int
    new_customers: float
    total_customers: float
    mrr: float
    gross_profit: float
    marketing_cost: float
    sales_cost: float
    ops_cost: float
    contribution: float
    cumulative_contribution: float
    ops_hours_total: float


@dataclass(frozen=True)
class SimulationAggregates:
    """
    Horizon-level figures.

    breakeven_month is None when cumulative contribution stays negative for
    the whole horizon. peak_ops_fte is None when the FTE basis is not positive.
    """
    ending_mrr: float
    total_contribution: float
    peak_ops_hours: float
    breakeven_month: Optional[int]
    peak_ops_fte: Optional[float] = None

    @property
    def breaks_even(self) -> bool:
        return self.breakeven_month is not None


@dataclass(frozen=True)
class SimulationResult:
    """Monthly time series plus aggregates for one simulation run."""
    months: tuple
    aggregates: SimulationAggregates
    model: BusinessModel
    horizon_months: int


def validate_horizon(horizon_months) -> int:
    """Reject anything that is not a whole number of months >= 1."""
    if isinstance(horizon_months, bool) or not isinstance(horizon_months, int):
        raise InvalidHorizonError(
            f"horizon_months must be an integer, got {horizon_months!r}"
        )
    if horizon_months < 1:
        raise InvalidHorizonError(
            f"horizon_months must be >= 1, got {horizon_months}"
        )
    return horizon_months


def simulate_business_case(
    inputs: BaselineInputs,
    model: BusinessModel,
    horizon_months: int
) -> SimulationResult:
    """Run the monthly model for months 1..horizon_months."""
    validate_horizon(horizon_months)
    model = BusinessModel(model)

    months = []
    current_customers = 0.0
    cumulative_contribution = 0.0

    for t in range(1, horizon_months + 1):
        # Acquisition
        mql = inputs.sessions_per_month * inputs.mql_rate

        # Conversion
        if model == BusinessModel.SALES_LED:
            sql = mql * inputs.mql_to_sql_rate
            new_customers = sql * inputs.sql_to_customer_rate
            sales_cost = sql * inputs.sales_cost_per_sql
        else:
            activated = mql * inputs.activation_rate
            new_customers = activated * inputs.trial_to_paid_rate
            sales_cost = 0.0

        # Retention
        churned_customers = current_customers * inputs.logo_churn_monthly
        retained_customers = current_customers - churned_customers
        total_customers = retained_customers + new_customers

        # Revenue; expansion only applies to the retained cohort
        mrr = total_customers * inputs.arpa_month
        mrr += retained_customers * inputs.arpa_month * inputs.expansion_rate_monthly

        gross_profit = mrr * inputs.gross_margin

        if inputs.use_cost_per_mql:
            marketing_cost = mql * inputs.cost_per_mql
        else:
            marketing_cost = inputs.marketing_spend_fixed

        onboarding_hours = new_customers * inputs.onboarding_hours_per_customer
        support_hours = total_customers * inputs.support_hours_per_customer_month
        ops_hours_total = onboarding_hours + support_hours
        ops_cost = ops_hours_total * inputs.ops_cost_per_hour

        contribution = gross_profit - marketing_cost - sales_cost - ops_cost
        cumulative_contribution += contribution

        months.append(SimulationMonth(
            month=t,
            new_customers=new_customers,
            total_customers=total_customers,
            mrr=mrr,
            gross_profit=gross_profit,
            marketing_cost=marketing_cost,
            sales_cost=sales_cost,
            ops_cost=ops_cost,
            contribution=contribution,
            cumulative_contribution=cumulative_contribution,
            ops_hours_total=ops_hours_total
        ))

        current_customers = total_customers

    aggregates = _aggregate(months, inputs)

    logger.debug(
        "Simulated %s over %d months: total contribution %.2f, breakeven %s",
        model.value,
        horizon_months,
        aggregates.total_contribution,
        aggregates.breakeven_month if aggregates.breaks_even else "never"
    )

    return SimulationResult(
        months=tuple(months),
        aggregates=aggregates,
        model=model,
        horizon_months=horizon_months
    )


def _aggregate(months: list[SimulationMonth], inputs: BaselineInputs) -> SimulationAggregates:
    """Derive horizon-level figures from the monthly series."""
    total_contribution = sum(m.contribution for m in months)
    peak_ops_hours = max(m.ops_hours_total for m in months)

    breakeven_month = next(
        (m.month for m in months if m.cumulative_contribution >= 0),
        None
    )

    peak_ops_fte = None
    if inputs.hours_per_fte_month > 0:
        peak_ops_fte = peak_ops_hours / inputs.hours_per_fte_month

    return SimulationAggregates(
        ending_mrr=months[-1].mrr,
        total_contribution=total_contribution,
        peak_ops_hours=peak_ops_hours,
        breakeven_month=breakeven_month,
        peak_ops_fte=peak_ops_fte
    )
