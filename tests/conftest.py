"""Shared fixtures for the business case tests."""

import pytest

from bizcase.core.entities import BaselineInputs
from bizcase.data import get_preset


@pytest.fixture
def plg_inputs() -> BaselineInputs:
    return get_preset("early_stage_plg").baseline


@pytest.fixture
def sales_inputs() -> BaselineInputs:
    return get_preset("early_stage_sales_led").baseline


@pytest.fixture
def simple_inputs() -> BaselineInputs:
    """
    PLG inputs with exact binary arithmetic: 12.5 new customers per month,
    no churn, 1000 MRR per cohort, a fixed 1500 marketing budget and no ops
    cost. Cumulative contribution runs -500, 0, 1500, ...
    """
    return BaselineInputs(
        sessions_per_month=400,
        mql_rate=0.25,
        use_cost_per_mql=False,
        marketing_spend_fixed=1500,
        activation_rate=0.5,
        trial_to_paid_rate=0.25,
        arpa_month=80,
        gross_margin=1.0,
        logo_churn_monthly=0.0,
        expansion_rate_monthly=0.0,
        onboarding_hours_per_customer=2.0,
        support_hours_per_customer_month=0.5,
        ops_cost_per_hour=0.0,
        hours_per_fte_month=100
    )
