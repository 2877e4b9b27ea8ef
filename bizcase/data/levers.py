"""
Lever Library

Default catalog of single-field levers evaluated by the decision engine.
Step sizes are the perturbation each lever is tested with.
"""

from ..core.entities import (
    AdjustmentKind,
    InputField,
    LeverCategory,
    LeverDefinition
)


LEVER_LIBRARY: tuple[LeverDefinition, ...] = (
    # Marketing
    LeverDefinition(
        field=InputField.SESSIONS_PER_MONTH,
        label="Traffic increase (+15%)",
        category=LeverCategory.MARKETING,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=1.15
    ),
    LeverDefinition(
        field=InputField.MQL_RATE,
        label="MQL conversion rate (+10%)",
        category=LeverCategory.MARKETING,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=1.10
    ),
    LeverDefinition(
        field=InputField.COST_PER_MQL,
        label="Cost per lead reduction (-15%)",
        category=LeverCategory.MARKETING,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=0.85
    ),

    # Sales / funnel
    LeverDefinition(
        field=InputField.MQL_TO_SQL_RATE,
        label="Qualification rate (+10%)",
        category=LeverCategory.SALES,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=1.10,
        sales_led_only=True
    ),
    LeverDefinition(
        field=InputField.SQL_TO_CUSTOMER_RATE,
        label="Win rate (+10%)",
        category=LeverCategory.SALES,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=1.10,
        sales_led_only=True
    ),
    LeverDefinition(
        field=InputField.SALES_CYCLE_DAYS,
        label="Sales cycle reduction (-15%)",
        category=LeverCategory.SALES,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=0.85,
        sales_led_only=True
    ),

    # Product (PLG funnel)
    LeverDefinition(
        field=InputField.ACTIVATION_RATE,
        label="Product activation (+10%)",
        category=LeverCategory.PRODUCT_OPS,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=1.10
    ),
    LeverDefinition(
        field=InputField.TRIAL_TO_PAID_RATE,
        label="Trial-to-paid (+10%)",
        category=LeverCategory.PRODUCT_OPS,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=1.10
    ),

    # Unit economics / operations
    LeverDefinition(
        field=InputField.ARPA_MONTH,
        label="Pricing optimization (+10% ARPA)",
        category=LeverCategory.UNIT_ECONOMICS,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=1.10
    ),
    LeverDefinition(
        field=InputField.LOGO_CHURN_MONTHLY,
        label="Churn reduction (-1 pt)",
        category=LeverCategory.PRODUCT_OPS,
        default_kind=AdjustmentKind.ADDITIVE,
        default_magnitude=-0.01
    ),
    LeverDefinition(
        field=InputField.ONBOARDING_HOURS_PER_CUSTOMER,
        label="Onboarding automation (-30% hours)",
        category=LeverCategory.PRODUCT_OPS,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=0.70
    ),
    LeverDefinition(
        field=InputField.SUPPORT_HOURS_PER_CUSTOMER_MONTH,
        label="Support efficiency (-20% hours)",
        category=LeverCategory.PRODUCT_OPS,
        default_kind=AdjustmentKind.MULTIPLIER,
        default_magnitude=0.80
    ),
    LeverDefinition(
        field=InputField.EXPANSION_RATE_MONTHLY,
        label="Expansion revenue (+0.5 pt MoM)",
        category=LeverCategory.UNIT_ECONOMICS,
        default_kind=AdjustmentKind.ADDITIVE,
        default_magnitude=0.005
    ),
)
