"""
Input Presets

Named early-stage baselines for each business model, and the two strategy
bundles (marketing focus, ops focus) compared against the baseline.
"""

from ..core.entities import (
    AdjustmentKind,
    BaselineInputs,
    BusinessModel,
    InputField,
    LeverChange,
    PresetOption,
    ScenarioDefinition
)
from ..core.exceptions import UnknownPresetError


PRESETS: tuple[PresetOption, ...] = (
    PresetOption(
        id="early_stage_plg",
        label="Early-stage PLG SaaS (DACH)",
        description="Typical self-serve SaaS focused on product and retention",
        business_model=BusinessModel.PLG,
        baseline=BaselineInputs(
            sessions_per_month=8000,
            mql_rate=0.03,
            cost_per_mql=22,
            marketing_spend_fixed=0,
            use_cost_per_mql=True,
            activation_rate=0.35,
            trial_to_paid_rate=0.12,
            # Sales-led funnel unused
            mql_to_sql_rate=0,
            sql_to_customer_rate=0,
            sales_cycle_days=0,
            sales_cost_per_sql=0,
            arpa_month=90,
            logo_churn_monthly=0.04,
            expansion_rate_monthly=0.005,
            gross_margin=0.82,
            onboarding_hours_per_customer=1.8,
            support_hours_per_customer_month=0.35,
            hours_per_fte_month=140,
            ops_cost_per_hour=38
        )
    ),
    PresetOption(
        id="early_stage_sales_led",
        label="Early-stage sales-led SaaS (DACH)",
        description="B2B SaaS with demo-driven sales and little automation",
        business_model=BusinessModel.SALES_LED,
        baseline=BaselineInputs(
            sessions_per_month=5000,
            mql_rate=0.02,
            cost_per_mql=45,
            marketing_spend_fixed=0,
            use_cost_per_mql=True,
            # PLG funnel unused
            activation_rate=0,
            trial_to_paid_rate=0,
            mql_to_sql_rate=0.28,
            sql_to_customer_rate=0.18,
            sales_cycle_days=45,
            sales_cost_per_sql=35,
            arpa_month=280,
            logo_churn_monthly=0.025,
            expansion_rate_monthly=0.01,
            gross_margin=0.78,
            onboarding_hours_per_customer=3.2,
            support_hours_per_customer_month=0.25,
            hours_per_fte_month=140,
            ops_cost_per_hour=42
        )
    ),
)


SCENARIO_PRESETS: dict[str, ScenarioDefinition] = {
    "marketing": ScenarioDefinition(
        id="marketing_focus",
        name="Marketing focus",
        changes=(
            LeverChange(InputField.SESSIONS_PER_MONTH, AdjustmentKind.MULTIPLIER, 1.10),
            LeverChange(InputField.MQL_RATE, AdjustmentKind.MULTIPLIER, 1.10),
            LeverChange(InputField.COST_PER_MQL, AdjustmentKind.MULTIPLIER, 0.90),
        )
    ),
    "ops": ScenarioDefinition(
        id="ops_focus",
        name="Operational focus",
        changes=(
            LeverChange(InputField.LOGO_CHURN_MONTHLY, AdjustmentKind.ADDITIVE, -0.005),
            LeverChange(InputField.ONBOARDING_HOURS_PER_CUSTOMER, AdjustmentKind.MULTIPLIER, 0.75),
            LeverChange(InputField.SUPPORT_HOURS_PER_CUSTOMER_MONTH, AdjustmentKind.MULTIPLIER, 0.85),
        )
    ),
}


def get_preset(preset_id: str) -> PresetOption:
    """Look up a preset by id."""
    for preset in PRESETS:
        if preset.id == preset_id:
            return preset
    raise UnknownPresetError(f"Unknown preset: {preset_id}")


def default_inputs(model: BusinessModel) -> BaselineInputs:
    """Baseline used when switching to a business model without picking a preset."""
    model = BusinessModel(model)
    preset_id = "early_stage_plg" if model == BusinessModel.PLG else "early_stage_sales_led"
    return get_preset(preset_id).baseline
