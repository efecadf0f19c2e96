"""Configuration models — inputs, tariff tables, presets and settings."""

from fare_simulator.config.parameters import DEFAULT_PARAMETERS, SimulationParameters
from fare_simulator.config.fares import SURGE_ZONES, VEHICLE_FARES, SurgeTier, VehicleFare
from fare_simulator.config.presets import (
    SCENARIO_PRESETS,
    PresetNotFoundError,
    PresetOverrides,
    ScenarioPreset,
    apply_preset,
    get_preset,
)
from fare_simulator.config.settings import Settings, get_settings

__all__ = [
    "SimulationParameters",
    "DEFAULT_PARAMETERS",
    "VehicleFare",
    "SurgeTier",
    "VEHICLE_FARES",
    "SURGE_ZONES",
    "PresetOverrides",
    "ScenarioPreset",
    "SCENARIO_PRESETS",
    "PresetNotFoundError",
    "get_preset",
    "apply_preset",
    "Settings",
    "get_settings",
]
