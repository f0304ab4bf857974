"""Unit tests for charging time and energy estimation."""

import pytest

from evjourney.domain.charging import (
    charging_cost,
    consumption_kwh_per_100km,
    energy_to_add_kwh,
    estimate_charging_time_minutes,
    full_range_km,
    remaining_range_km,
)


class TestChargingTime:
    def test_reference_case(self):
        # 45 kWh at 250 kW
        assert estimate_charging_time_minutes(75, 20, 80, 250) == pytest.approx(10.8)

    @pytest.mark.parametrize("capacity, power", [(75, 250), (40, 7.2), (0, 50)])
    def test_target_equal_to_initial_is_zero(self, capacity, power):
        assert estimate_charging_time_minutes(capacity, 50, 50, power) == 0

    def test_target_below_initial_is_zero(self):
        assert estimate_charging_time_minutes(75, 80, 20, 250) == 0

    def test_zero_power_is_zero(self):
        assert estimate_charging_time_minutes(75, 20, 80, 0) == 0

    def test_negative_power_is_zero(self):
        assert estimate_charging_time_minutes(75, 20, 80, -50) == 0

    def test_linear_in_soc_delta(self):
        half = estimate_charging_time_minutes(75, 20, 50, 150)
        full = estimate_charging_time_minutes(75, 20, 80, 150)
        assert full == pytest.approx(2 * half)

    def test_full_charge(self):
        # 100 kWh at 50 kW takes two hours
        assert estimate_charging_time_minutes(100, 0, 100, 50) == pytest.approx(120)


class TestEnergy:
    def test_energy_to_add(self):
        assert energy_to_add_kwh(75, 20, 80) == pytest.approx(45)

    def test_energy_never_negative(self):
        assert energy_to_add_kwh(75, 80, 20) == 0

    def test_remaining_range(self):
        assert remaining_range_km(75, 75, 150) == pytest.approx(375)

    def test_remaining_range_empty_battery(self):
        assert remaining_range_km(75, 0, 150) == 0

    def test_remaining_range_zero_efficiency(self):
        assert remaining_range_km(75, 50, 0) == 0

    def test_full_range(self):
        assert full_range_km(75, 150) == pytest.approx(500)

    def test_consumption_per_100km(self):
        assert consumption_kwh_per_100km(24.5, 145) == pytest.approx(16.896, abs=1e-3)

    def test_consumption_zero_distance(self):
        assert consumption_kwh_per_100km(10, 0) == 0


class TestChargingCost:
    def test_energy_times_price(self):
        assert charging_cost(45, 0.29) == pytest.approx(13.05)

    def test_session_fee_added(self):
        assert charging_cost(45, 0.29, session_fee=2.0) == pytest.approx(15.05)

    def test_no_energy_no_fee(self):
        assert charging_cost(0, 0.29, session_fee=2.0) == 0
