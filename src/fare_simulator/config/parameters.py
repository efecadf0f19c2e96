"""Simulation parameters — the validated input to the fare calculator.

JSON clients send camelCase names (``vehicleType``, ``isRushHour`` ...);
Python code uses the snake_case attributes.  Both are accepted on input.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

VehicleType = Literal["economy", "comfort", "premium", "xl"]
SurgeZone = Literal["none", "low", "medium", "high"]


class SimulationParameters(BaseModel):
    """Trip and context for one price calculation.

    Range and enum checks happen here, before the engine ever sees the
    values.  The engine trusts an instance of this model completely.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, strict=True)

    # --- Trip ---
    distance: float = Field(ge=0, le=100, description="Trip distance (km)")
    vehicle_type: VehicleType = Field(description="Vehicle category: economy, comfort, premium or xl")

    # --- Time ---
    hour: int = Field(ge=0, le=23, description="Hour of day the trip starts (0-23)")
    is_rush_hour: bool = Field(
        description="Rush-hour flag. Authoritative on its own: it is never "
                    "derived from ``hour``.",
    )
    is_holiday: bool = Field(description="Trip happens on a public holiday")

    # --- Weather & traffic ---
    has_rain: bool = Field(description="It is raining")
    weather_severity: float = Field(ge=0, le=100, description="Rain intensity (%)")
    traffic_intensity: float = Field(
        ge=0, le=100,
        description="Traffic intensity (%). Surcharge starts above 30%.",
    )

    # --- Special scenarios ---
    has_special_event: bool = Field(description="Special event in the pickup region")
    surge_zone: SurgeZone = Field(description="Demand zone tier: none, low, medium or high")


DEFAULT_PARAMETERS = SimulationParameters(
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
"""Starting point of the simulator: a calm midday economy trip, no surcharges."""
