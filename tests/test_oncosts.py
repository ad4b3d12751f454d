"""Tests for on-cost derivation."""

import pytest

from charge_rate_engine.calculators.oncosts import LEAVE_LOADING_HOURS_CAP, calculate_on_costs
from charge_rate_engine.calculators.types import CostConfig


class TestOnCosts:
    """Test wage-derived and fixed on-costs."""

    def test_reference_scenario(self, cost_config):
        """$29.50/hr over 1976 hours."""
        costs = calculate_on_costs(29.50, 1976, cost_config)

        assert costs.superannuation == pytest.approx(6703.58)
        assert costs.workers_comp == pytest.approx(2739.724)
        assert costs.payroll_tax == pytest.approx(2827.162)
        assert costs.leave_loading == pytest.approx(784.70)
        assert costs.admin_cost == pytest.approx(9909.64)
        assert costs.study_cost == 850
        assert costs.ppe_cost == 300
        assert costs.total == pytest.approx(24114.806)

    def test_fixed_costs_pass_through(self):
        """Study and PPE costs do not scale with the wage."""
        cost = CostConfig(study_cost=1200, ppe_cost=0)

        low = calculate_on_costs(10, 1000, cost)
        high = calculate_on_costs(50, 2000, cost)

        assert low.study_cost == high.study_cost == 1200
        assert low.ppe_cost == high.ppe_cost == 0

    def test_zero_pay_rate_leaves_only_fixed_costs(self, cost_config):
        costs = calculate_on_costs(0, 1976, cost_config)
        assert costs.total == pytest.approx(850 + 300)

    def test_always_fully_populated(self, cost_config):
        costs = calculate_on_costs(25, 1976, cost_config)
        assert set(costs.as_dict()) == {
            "superannuation",
            "workers_comp",
            "payroll_tax",
            "leave_loading",
            "study_cost",
            "ppe_cost",
            "admin_cost",
        }


class TestLeaveLoadingCap:
    """Test the 152-hour leave loading cap."""

    def test_cap_constant(self):
        assert LEAVE_LOADING_HOURS_CAP == 152

    def test_below_cap_uses_total_hours(self, cost_config):
        costs = calculate_on_costs(30, 100, cost_config)
        assert costs.leave_loading == pytest.approx(30 * 100 * 0.175)

    def test_at_cap(self, cost_config):
        costs = calculate_on_costs(30, 152, cost_config)
        assert costs.leave_loading == pytest.approx(30 * 152 * 0.175)

    @pytest.mark.parametrize("total_hours", [153, 1976, 10_000])
    def test_above_cap_is_fixed(self, cost_config, total_hours):
        """Leave loading stops growing once total hours pass the cap."""
        costs = calculate_on_costs(30, total_hours, cost_config)
        assert costs.leave_loading == pytest.approx(30 * 152 * 0.175)
