"""Tests for engine/calculator.py — end-to-end pricing."""

from __future__ import annotations

import pytest

from fare_simulator.config import SimulationParameters
from fare_simulator.engine.calculator import compute_price, fold_rules, round_half_up
from fare_simulator.engine.rules import night_fare, rush_hour


# ═══════════════════════════════════════════════════════════════════════════
# Reference scenarios
# ═══════════════════════════════════════════════════════════════════════════

class TestReferenceScenarios:
    """Hand-computed trips."""

    def test_calm_trip(self, calm_trip: SimulationParameters):
        result = compute_price(calm_trip)
        # 500 + 10 × 180
        assert result.total_price == 2300.00
        assert result.base_fare == 2300.00
        assert len(result.breakdown) == 2
        assert result.surge_multiplier == 1.0
        assert result.percentage_change == 0.0

    def test_calm_trip_lines(self, calm_trip: SimulationParameters):
        base, distance = compute_price(calm_trip).breakdown
        assert base.label == "Tarifa Base"
        assert base.value == 500
        assert base.impact == "medium"
        assert base.multiplier is None
        assert distance.label == "Distância (10 km)"
        assert distance.value == 1800
        assert distance.impact == "low"

    def test_rush_trip(self, rush_trip: SimulationParameters):
        result = compute_price(rush_trip)
        # 2300 × 0.35 = 805
        assert result.total_price == 3105.00
        assert result.base_fare == 2300.00
        assert len(result.breakdown) == 3
        rush = result.breakdown[2]
        assert rush.label == "Horário de Pico"
        assert rush.value == pytest.approx(805)
        assert rush.multiplier == 1.35
        assert result.percentage_change == 35.0

    def test_worst_case_trip_stepwise(self, worst_case_trip: SimulationParameters):
        result = compute_price(worst_case_trip)

        total = 1200.0
        total += total * 0.20                        # night
        total += total * 0.25                        # holiday
        total += total * ((1 + 100 / 100 * 0.4) - 1)  # rain, severity 100
        total += total * ((1 + 70 / 100 * 0.5) - 1)   # traffic, intensity 100
        total += total * 0.30                        # special event
        total += total * (2.0 - 1)                   # surge high

        assert result.total_price == pytest.approx(round(total, 2), abs=1e-9)
        assert result.total_price == pytest.approx(8845.2, abs=0.01)
        assert result.base_fare == 1200.0
        assert result.surge_multiplier == 2.0
        assert result.percentage_change == pytest.approx(637.1)

    def test_worst_case_labels_in_order(self, worst_case_trip: SimulationParameters):
        labels = [item.label for item in compute_price(worst_case_trip).breakdown]
        assert labels == [
            "Tarifa Base",
            "Distância (0 km)",
            "Tarifa Noturna",
            "Feriado",
            "Chuva (100% intensidade)",
            "Trânsito Intenso (100%)",
            "Evento Especial na Região",
            "Tarifa Dinâmica - Zona Alta",
        ]

    def test_order_matters(self, worst_case_trip: SimulationParameters):
        """Summing percentages on the base is not the same as compounding them."""
        additive = 1200 * (1 + 0.20 + 0.25 + 0.40 + 0.35 + 0.30 + 1.0)
        assert compute_price(worst_case_trip).total_price > additive


# ═══════════════════════════════════════════════════════════════════════════
# Invariants
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("vehicle", ["economy", "comfort", "premium", "xl"])
@pytest.mark.parametrize("zone", ["none", "low", "medium", "high"])
def test_total_never_below_base(worst_case_trip: SimulationParameters, vehicle: str, zone: str):
    params = worst_case_trip.model_copy(update={"vehicle_type": vehicle, "surge_zone": zone, "distance": 7.5})
    result = compute_price(params)
    assert result.total_price >= result.base_fare >= 0
    assert all(item.value >= 0 for item in result.breakdown)


def test_total_is_base_plus_surcharges(worst_case_trip: SimulationParameters):
    result = compute_price(worst_case_trip)
    surcharges = sum(item.value for item in result.breakdown[2:])
    assert result.total_price == pytest.approx(result.base_fare + surcharges, abs=0.01)


def test_idempotent(worst_case_trip: SimulationParameters):
    assert compute_price(worst_case_trip) == compute_price(worst_case_trip)


def test_breakdown_values_not_rounded():
    params = SimulationParameters(
        distance=3.37, vehicle_type="comfort", hour=12, is_rush_hour=True, is_holiday=False,
        has_rain=True, weather_severity=33, traffic_intensity=41, has_special_event=False,
        surge_zone="none",
    )
    result = compute_price(params)
    rush_value = result.breakdown[2].value
    assert rush_value == (800 + 3.37 * 250) * 0.35
    assert rush_value != round(rush_value, 2)


def test_breakdown_count_matches_active_conditions(calm_trip: SimulationParameters):
    updates = [
        {"is_rush_hour": True},
        {"hour": 3},
        {"is_holiday": True},
        {"has_rain": True, "weather_severity": 10},
        {"traffic_intensity": 50},
        {"has_special_event": True},
        {"surge_zone": "low"},
    ]
    applied: dict = {}
    for count, update in enumerate(updates, start=1):
        applied.update(update)
        params = calm_trip.model_copy(update=applied)
        assert len(compute_price(params).breakdown) == 2 + count


def test_rush_flag_independent_of_hour(calm_trip: SimulationParameters):
    """The flag decides; an off-peak hour does not cancel it."""
    params = calm_trip.model_copy(update={"is_rush_hour": True, "hour": 14})
    labels = [item.label for item in compute_price(params).breakdown]
    assert "Horário de Pico" in labels

    params = calm_trip.model_copy(update={"is_rush_hour": False, "hour": 8})
    labels = [item.label for item in compute_price(params).breakdown]
    assert "Horário de Pico" not in labels


# ═══════════════════════════════════════════════════════════════════════════
# Monotonicity
# ═══════════════════════════════════════════════════════════════════════════

def _prices(base: SimulationParameters, field: str, values: list[float]) -> list[float]:
    return [compute_price(base.model_copy(update={field: v})).total_price for v in values]


def test_price_increases_with_distance(calm_trip: SimulationParameters):
    prices = _prices(calm_trip, "distance", [0, 1, 5, 20, 50, 100])
    assert prices == sorted(prices)
    assert len(set(prices)) == len(prices)


def test_price_increases_with_weather_severity(calm_trip: SimulationParameters):
    raining = calm_trip.model_copy(update={"has_rain": True})
    prices = _prices(raining, "weather_severity", [0, 1, 25, 60, 61, 100])
    assert len(set(prices)) == len(prices)
    assert prices == sorted(prices)


def test_price_increases_with_traffic_above_threshold(calm_trip: SimulationParameters):
    prices = _prices(calm_trip, "traffic_intensity", [30, 31, 45, 70, 71, 100])
    assert len(set(prices)) == len(prices)
    assert prices == sorted(prices)


def test_traffic_below_threshold_is_flat(calm_trip: SimulationParameters):
    prices = _prices(calm_trip, "traffic_intensity", [0, 10, 29.9, 30])
    assert set(prices) == {2300.0}


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def test_fold_rules_custom_sequence(calm_trip: SimulationParameters):
    params = calm_trip.model_copy(update={"is_rush_hour": True, "hour": 1})
    total, items = fold_rules(100.0, params, (night_fare, rush_hour))
    assert [i.label for i in items] == ["Tarifa Noturna", "Horário de Pico"]
    assert total == pytest.approx(100 * 1.2 * 1.35)


def test_fold_rules_no_rules(calm_trip: SimulationParameters):
    assert fold_rules(42.0, calm_trip, ()) == (42.0, [])


@pytest.mark.parametrize(
    ("value", "digits", "expected"),
    [
        (2.345, 1, 2.3),
        (0.05, 1, 0.1),
        (12.5, 0, 13.0),
        (-0.25, 1, -0.2),
        (3105.0, 2, 3105.0),
    ],
)
def test_round_half_up(value: float, digits: int, expected: float):
    assert round_half_up(value, digits) == expected
