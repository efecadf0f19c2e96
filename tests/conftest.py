"""Shared test fixtures — reference trips used across the suite."""

from __future__ import annotations

import pytest

from fare_simulator.config import DEFAULT_PARAMETERS, SimulationParameters


@pytest.fixture
def calm_trip() -> SimulationParameters:
    """10 km economy at noon, no surcharge condition holds."""
    return SimulationParameters(
        distance=10,
        vehicle_type="economy",
        hour=12,
        is_rush_hour=False,
        is_holiday=False,
        has_rain=False,
        weather_severity=0,
        traffic_intensity=30,
        has_special_event=False,
        surge_zone="none",
    )


@pytest.fixture
def rush_trip(calm_trip: SimulationParameters) -> SimulationParameters:
    return calm_trip.model_copy(update={"is_rush_hour": True})


@pytest.fixture
def worst_case_trip() -> SimulationParameters:
    """Premium at 02:00 with every condition except rush hour active."""
    return SimulationParameters(
        distance=0,
        vehicle_type="premium",
        hour=2,
        is_rush_hour=False,
        is_holiday=True,
        has_rain=True,
        weather_severity=100,
        traffic_intensity=100,
        has_special_event=True,
        surge_zone="high",
    )


@pytest.fixture
def calm_trip_json() -> dict:
    """``calm_trip`` as a camelCase request body."""
    return DEFAULT_PARAMETERS.model_dump(by_alias=True)
