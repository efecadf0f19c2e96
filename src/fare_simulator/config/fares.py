"""Fare tables — per-vehicle tariffs and surge-zone multipliers.

Both tables are process-wide constants.  They are exposed as read-only
mappings of frozen models so no caller can change a tariff at runtime.
"""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field


class VehicleFare(BaseModel):
    """Tariff of one vehicle category (generic currency units)."""

    model_config = ConfigDict(frozen=True)

    base_fare: float = Field(ge=0, description="Flag-fall charged on every trip")
    per_km_rate: float = Field(ge=0, description="Charge per kilometre travelled")


class SurgeTier(BaseModel):
    """Multiplier and display name of one demand zone."""

    model_config = ConfigDict(frozen=True)

    multiplier: float = Field(ge=1.0, description="Final multiplicative adjustment")
    label: str = Field(description="Tier name shown in the breakdown")


VEHICLE_FARES: Mapping[str, VehicleFare] = MappingProxyType({
    "economy": VehicleFare(base_fare=500, per_km_rate=180),
    "comfort": VehicleFare(base_fare=800, per_km_rate=250),
    "premium": VehicleFare(base_fare=1200, per_km_rate=380),
    "xl": VehicleFare(base_fare=1000, per_km_rate=280),
})

SURGE_ZONES: Mapping[str, SurgeTier] = MappingProxyType({
    "none": SurgeTier(multiplier=1.0, label="Nenhuma"),
    "low": SurgeTier(multiplier=1.2, label="Baixa"),
    "medium": SurgeTier(multiplier=1.5, label="Média"),
    "high": SurgeTier(multiplier=2.0, label="Alta"),
})
