"""Unit tests for the charge-rate composer."""

from dataclasses import replace

import pytest

from charge_rate_engine.calculators.engine import calculate_charge_rate, inputs_fingerprint
from charge_rate_engine.calculators.errors import (
    InvalidConfigurationError,
    NonPositiveBillableHoursError,
)
from charge_rate_engine.calculators.types import BillableOptions, CostConfig, WorkConfig

SCENARIO_PAY_RATE = 29.50


class TestReferenceScenario:
    """Default configuration at $29.50/hr."""

    def test_intermediate_values(self):
        result = calculate_charge_rate(SCENARIO_PAY_RATE)

        assert result.pay_rate == SCENARIO_PAY_RATE
        assert result.total_hours == pytest.approx(1976)
        assert result.billable_hours == pytest.approx(1444)
        assert result.base_wage == pytest.approx(58292)
        assert result.oncosts.superannuation == pytest.approx(6703.58)
        assert result.oncosts.leave_loading == pytest.approx(784.70)
        assert result.total_oncosts == pytest.approx(24114.806)
        assert result.total_cost == pytest.approx(82406.806)
        assert result.cost_per_hour == pytest.approx(57.0684, abs=1e-4)
        assert result.margin == 0.15
        assert result.charge_rate == pytest.approx(65.6287, abs=1e-4)

    def test_explicit_defaults_match_implicit(self, work_config, cost_config, billable_options):
        implicit = calculate_charge_rate(SCENARIO_PAY_RATE)
        explicit = calculate_charge_rate(
            SCENARIO_PAY_RATE, work_config, cost_config, billable_options
        )
        assert implicit == explicit


class TestInvariants:
    """Reconciliation properties of the result."""

    @pytest.mark.parametrize("pay_rate", [0, 18.25, 29.50, 45.10])
    def test_conservation(self, pay_rate):
        """Total cost is base wage plus every on-cost."""
        result = calculate_charge_rate(pay_rate)
        assert result.total_cost == pytest.approx(
            result.base_wage + sum(result.oncosts.as_dict().values())
        )

    @pytest.mark.parametrize("margin", [0, 0.15, 0.4, 1.5])
    def test_composition(self, margin):
        """Charge rate is cost per billable hour marked up by the margin."""
        result = calculate_charge_rate(SCENARIO_PAY_RATE, margin=margin)
        assert result.charge_rate == pytest.approx(
            result.total_cost / result.billable_hours * (1 + margin)
        )

    def test_margin_defaults_to_cost_config(self):
        cost = CostConfig(default_margin=0.25)
        result = calculate_charge_rate(SCENARIO_PAY_RATE, cost=cost)
        assert result.margin == 0.25

    def test_explicit_margin_overrides_default(self):
        cost = CostConfig(default_margin=0.25)
        result = calculate_charge_rate(SCENARIO_PAY_RATE, cost=cost, margin=0.1)
        assert result.margin == 0.1

    def test_monotonic_in_pay_rate(self):
        """Raising the pay rate raises the wage, wage-derived costs and the rate."""
        low = calculate_charge_rate(25.00)
        high = calculate_charge_rate(25.01)

        assert high.base_wage > low.base_wage
        assert high.oncosts.superannuation > low.oncosts.superannuation
        assert high.oncosts.workers_comp > low.oncosts.workers_comp
        assert high.oncosts.payroll_tax > low.oncosts.payroll_tax
        assert high.oncosts.leave_loading > low.oncosts.leave_loading
        assert high.oncosts.admin_cost > low.oncosts.admin_cost
        assert high.charge_rate > low.charge_rate

    @pytest.mark.parametrize(
        "flag",
        [
            "include_annual_leave",
            "include_public_holidays",
            "include_sick_leave",
            "include_training_time",
            "include_adverse_weather",
        ],
    )
    def test_including_a_category_lowers_the_rate(self, flag):
        """More billable hours spread the same cost thinner."""
        base = calculate_charge_rate(SCENARIO_PAY_RATE)
        flipped = calculate_charge_rate(
            SCENARIO_PAY_RATE, options=BillableOptions(**{flag: True})
        )

        assert flipped.total_cost == pytest.approx(base.total_cost)
        assert flipped.billable_hours > base.billable_hours
        assert flipped.cost_per_hour < base.cost_per_hour
        assert flipped.charge_rate < base.charge_rate

    def test_including_an_empty_category_changes_nothing(self):
        work = WorkConfig(sick_leave_days=0)
        base = calculate_charge_rate(SCENARIO_PAY_RATE, work=work)
        flipped = calculate_charge_rate(
            SCENARIO_PAY_RATE, work=work, options=BillableOptions(include_sick_leave=True)
        )
        assert flipped.billable_hours == base.billable_hours
        assert flipped.charge_rate == base.charge_rate

    def test_idempotent(self, work_config, cost_config, billable_options):
        """Identical inputs give bit-identical results."""
        first = calculate_charge_rate(29.5, work_config, cost_config, billable_options, 0.2)
        second = calculate_charge_rate(29.5, work_config, cost_config, billable_options, 0.2)

        assert first == second
        assert first.charge_rate.hex() == second.charge_rate.hex()

    def test_inputs_not_mutated(self, work_config, cost_config, billable_options):
        before = (replace(work_config), replace(cost_config), replace(billable_options))
        calculate_charge_rate(SCENARIO_PAY_RATE, work_config, cost_config, billable_options)
        assert (work_config, cost_config, billable_options) == before


class TestFailures:
    """Test the error surface."""

    def test_non_positive_billable_hours(self):
        with pytest.raises(NonPositiveBillableHoursError):
            calculate_charge_rate(SCENARIO_PAY_RATE, work=WorkConfig(weeks_per_year=12))

    def test_never_returns_infinite_rate(self):
        """Zero billable hours raises instead of dividing by zero."""
        with pytest.raises(NonPositiveBillableHoursError):
            calculate_charge_rate(SCENARIO_PAY_RATE, work=WorkConfig(weeks_per_year=14))

    def test_invalid_configuration_before_derivation(self):
        """Invalid input is reported even when billable hours would also fail."""
        work = WorkConfig(weeks_per_year=10, hours_per_day=-1)

        with pytest.raises(InvalidConfigurationError) as exc_info:
            calculate_charge_rate(SCENARIO_PAY_RATE, work=work)

        assert any("hours_per_day" in e for e in exc_info.value.errors)

    def test_negative_pay_rate(self):
        with pytest.raises(InvalidConfigurationError):
            calculate_charge_rate(-1)

    def test_negative_margin(self):
        with pytest.raises(InvalidConfigurationError):
            calculate_charge_rate(SCENARIO_PAY_RATE, margin=-0.1)

    def test_overflow_is_reported(self):
        with pytest.raises(OverflowError):
            calculate_charge_rate(1e308)


class TestInputsFingerprint:
    """Test deterministic input fingerprints."""

    def test_same_inputs_same_fingerprint(self, work_config, cost_config, billable_options):
        fp1 = inputs_fingerprint(29.5, work_config, cost_config, billable_options, 0.15)
        fp2 = inputs_fingerprint(29.5, WorkConfig(), CostConfig(), BillableOptions(), 0.15)
        assert fp1 == fp2
        assert len(fp1) == 32

    def test_int_and_float_inputs_match(self, work_config, cost_config, billable_options):
        fp1 = inputs_fingerprint(30, work_config, cost_config, billable_options, 0.15)
        fp2 = inputs_fingerprint(30.0, work_config, cost_config, billable_options, 0.15)
        assert fp1 == fp2

    def test_policy_changes_fingerprint(self, work_config, cost_config):
        fp1 = inputs_fingerprint(29.5, work_config, cost_config, BillableOptions(), 0.15)
        fp2 = inputs_fingerprint(
            29.5, work_config, cost_config, BillableOptions(include_sick_leave=True), 0.15
        )
        assert fp1 != fp2

