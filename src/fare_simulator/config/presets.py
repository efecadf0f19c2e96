"""Scenario presets — named partial overrides of the simulation parameters.

A preset only carries the fields it wants to change.  Applying it keeps
every other field of the current parameters as-is.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fare_simulator.config.parameters import SimulationParameters, SurgeZone, VehicleType


class PresetNotFoundError(KeyError):
    """Raised when a preset id is not in the catalogue."""


class PresetOverrides(BaseModel):
    """Partial ``SimulationParameters``: every field optional, same bounds."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, strict=True)

    distance: float | None = Field(default=None, ge=0, le=100)
    vehicle_type: VehicleType | None = None
    hour: int | None = Field(default=None, ge=0, le=23)
    is_rush_hour: bool | None = None
    is_holiday: bool | None = None
    has_rain: bool | None = None
    weather_severity: float | None = Field(default=None, ge=0, le=100)
    traffic_intensity: float | None = Field(default=None, ge=0, le=100)
    has_special_event: bool | None = None
    surge_zone: SurgeZone | None = None


class ScenarioPreset(BaseModel):
    """One named scenario the simulator offers as a shortcut."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    description: str
    icon: str
    params: PresetOverrides


_PRESET_LIST = [
    ScenarioPreset(
        id="morning-rush",
        name="Segunda de Manhã",
        description="Horário de pico matinal",
        icon="sunrise",
        params=PresetOverrides(
            hour=8,
            is_rush_hour=True,
            traffic_intensity=85,
            has_rain=False,
            weather_severity=0,
        ),
    ),
    ScenarioPreset(
        id="friday-night-rain",
        name="Sexta à Noite Chovendo",
        description="Fim de semana com chuva",
        icon="cloud-rain",
        params=PresetOverrides(
            hour=22,
            has_rain=True,
            weather_severity=70,
            traffic_intensity=60,
            has_special_event=True,
        ),
    ),
    ScenarioPreset(
        id="holiday-event",
        name="Feriado com Evento",
        description="Evento especial em feriado",
        icon="calendar",
        params=PresetOverrides(
            is_holiday=True,
            has_special_event=True,
            surge_zone="high",
            traffic_intensity=90,
        ),
    ),
    ScenarioPreset(
        id="quiet-afternoon",
        name="Tarde Tranquila",
        description="Horário calmo",
        icon="sun",
        params=PresetOverrides(
            hour=15,
            is_rush_hour=False,
            traffic_intensity=20,
            has_rain=False,
            weather_severity=0,
        ),
    ),
]

SCENARIO_PRESETS: Mapping[str, ScenarioPreset] = MappingProxyType({p.id: p for p in _PRESET_LIST})


def get_preset(preset_id: str) -> ScenarioPreset:
    """Look up a preset by id."""
    try:
        return SCENARIO_PRESETS[preset_id]
    except KeyError:
        raise PresetNotFoundError(preset_id) from None


def apply_preset(params: SimulationParameters, preset: ScenarioPreset) -> SimulationParameters:
    """Merge the preset's overrides onto ``params`` and re-validate."""
    merged = params.model_dump()
    merged.update(preset.params.model_dump(exclude_none=True))
    return SimulationParameters.model_validate(merged)
