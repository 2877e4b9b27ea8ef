"""
Tests for simulation.simulator: the monthly business case model.
"""

import pytest

from bizcase.core.entities import BaselineInputs, BusinessModel
from bizcase.core.exceptions import InvalidHorizonError
from bizcase.simulation.simulator import simulate_business_case, validate_horizon


class TestPlgGoldenScenario:
    """Early-stage PLG preset over 12 months, first two months pinned."""

    @pytest.fixture
    def result(self, plg_inputs):
        return simulate_business_case(plg_inputs, BusinessModel.PLG, 12)

    def test_month_count_and_order(self, result):
        assert len(result.months) == 12
        assert [m.month for m in result.months] == list(range(1, 13))
        assert result.horizon_months == 12
        assert result.model == BusinessModel.PLG

    def test_month_one(self, result):
        m1 = result.months[0]
        # 240 MQL -> 84 activated -> 10.08 new customers
        assert m1.new_customers == pytest.approx(10.08)
        assert m1.total_customers == pytest.approx(10.08)
        assert m1.mrr == pytest.approx(907.2)
        assert m1.gross_profit == pytest.approx(743.904)
        assert m1.marketing_cost == pytest.approx(5280)
        assert m1.sales_cost == 0
        assert m1.ops_hours_total == pytest.approx(21.672)
        assert m1.ops_cost == pytest.approx(823.536)
        assert m1.contribution == pytest.approx(-5359.632)
        assert m1.cumulative_contribution == pytest.approx(-5359.632)

    def test_month_two(self, result):
        m2 = result.months[1]
        # 0.4032 churned, 9.6768 retained
        assert m2.new_customers == pytest.approx(10.08)
        assert m2.total_customers == pytest.approx(19.7568)
        assert m2.mrr == pytest.approx(1782.46656)
        assert m2.gross_profit == pytest.approx(1461.6225792)
        assert m2.ops_hours_total == pytest.approx(25.05888)
        assert m2.ops_cost == pytest.approx(952.23744)
        assert m2.contribution == pytest.approx(-4770.6148608)
        assert m2.cumulative_contribution == pytest.approx(-10130.2468608)

    def test_total_contribution_is_sum_of_months(self, result):
        total = sum(m.contribution for m in result.months)
        assert result.aggregates.total_contribution == pytest.approx(total)
        assert result.aggregates.total_contribution == pytest.approx(
            result.months[-1].cumulative_contribution
        )

    def test_ending_mrr_is_last_month(self, result):
        assert result.aggregates.ending_mrr == result.months[-1].mrr

    def test_peak_ops_hours(self, result):
        assert result.aggregates.peak_ops_hours == max(m.ops_hours_total for m in result.months)
        assert result.aggregates.peak_ops_fte == pytest.approx(
            result.aggregates.peak_ops_hours / 140
        )

    def test_breakeven_is_first_non_negative_month(self, result):
        agg = result.aggregates
        if agg.breaks_even:
            idx = agg.breakeven_month - 1
            assert result.months[idx].cumulative_contribution >= 0
            assert all(m.cumulative_contribution < 0 for m in result.months[:idx])
        else:
            assert all(m.cumulative_contribution < 0 for m in result.months)


class TestSalesLed:
    def test_sales_funnel_and_sales_cost(self, sales_inputs):
        result = simulate_business_case(sales_inputs, BusinessModel.SALES_LED, 6)
        m1 = result.months[0]
        # 100 MQL -> 28 SQL -> 5.04 customers
        assert m1.new_customers == pytest.approx(5.04)
        assert m1.sales_cost == pytest.approx(28 * 35)
        assert m1.marketing_cost == pytest.approx(100 * 45)

    def test_plg_fields_ignored(self, sales_inputs):
        changed = sales_inputs.model_copy(update={"activation_rate": 0.9, "trial_to_paid_rate": 0.9})
        a = simulate_business_case(sales_inputs, BusinessModel.SALES_LED, 6)
        b = simulate_business_case(changed, BusinessModel.SALES_LED, 6)
        assert a.months == b.months

    def test_model_given_as_string(self, sales_inputs):
        result = simulate_business_case(sales_inputs, "SALES_LED", 3)
        assert result.model == BusinessModel.SALES_LED


class TestBreakeven:
    def test_breakeven_on_exact_zero(self, simple_inputs):
        result = simulate_business_case(simple_inputs, BusinessModel.PLG, 3)
        cumulative = [m.cumulative_contribution for m in result.months]
        assert cumulative == [-500, 0, 1500]
        assert result.aggregates.breakeven_month == 2
        assert result.aggregates.breaks_even

    def test_never_breaks_even(self, simple_inputs):
        result = simulate_business_case(simple_inputs, BusinessModel.PLG, 1)
        assert result.aggregates.breakeven_month is None
        assert not result.aggregates.breaks_even

    def test_fixed_marketing_spend(self, simple_inputs):
        result = simulate_business_case(simple_inputs, BusinessModel.PLG, 2)
        assert all(m.marketing_cost == 1500 for m in result.months)


class TestRetentionAndExpansion:
    def test_expansion_only_on_retained_cohort(self):
        inputs = BaselineInputs(
            sessions_per_month=100,
            mql_rate=1.0,
            activation_rate=1.0,
            trial_to_paid_rate=0.1,
            arpa_month=100,
            gross_margin=1.0,
            logo_churn_monthly=0.5,
            expansion_rate_monthly=0.1
        )
        result = simulate_business_case(inputs, BusinessModel.PLG, 2)
        # month 1: no retained customers, no expansion
        assert result.months[0].mrr == pytest.approx(1000)
        # month 2: 5 retained + 10 new, expansion on the 5 retained only
        assert result.months[1].total_customers == pytest.approx(15)
        assert result.months[1].mrr == pytest.approx(1500 + 5 * 100 * 0.1)

    def test_ops_hours(self, simple_inputs):
        result = simulate_business_case(simple_inputs, BusinessModel.PLG, 2)
        # onboarding 12.5 * 2, support on all customers * 0.5
        assert result.months[0].ops_hours_total == pytest.approx(25 + 6.25)
        assert result.months[1].ops_hours_total == pytest.approx(25 + 12.5)
        assert result.aggregates.peak_ops_hours == pytest.approx(37.5)

    def test_no_fte_basis(self, simple_inputs):
        inputs = simple_inputs.model_copy(update={"hours_per_fte_month": 0})
        result = simulate_business_case(inputs, BusinessModel.PLG, 2)
        assert result.aggregates.peak_ops_fte is None


class TestHorizonValidation:
    @pytest.mark.parametrize("horizon", [0, -3, 1.5, "12", True, None])
    def test_invalid_horizon_rejected(self, plg_inputs, horizon):
        with pytest.raises(InvalidHorizonError):
            simulate_business_case(plg_inputs, BusinessModel.PLG, horizon)

    def test_invalid_horizon_is_value_error(self):
        with pytest.raises(ValueError, match=">= 1"):
            validate_horizon(0)

    def test_single_month(self, plg_inputs):
        result = simulate_business_case(plg_inputs, BusinessModel.PLG, 1)
        assert len(result.months) == 1

    def test_calls_are_independent(self, plg_inputs):
        a = simulate_business_case(plg_inputs, BusinessModel.PLG, 12)
        b = simulate_business_case(plg_inputs, BusinessModel.PLG, 12)
        assert a == b
