"""Pricing rules — one pure evaluator per surcharge.

Every evaluator has the signature::

    (running_total, params) -> (new_total, PriceBreakdownItem | None)

and returns ``(running_total, None)`` when its condition does not hold.
``PRICING_RULES`` fixes the evaluation order; each surcharge is computed
on the total accumulated by the rules before it, so the order changes
the price.
"""

from __future__ import annotations

from typing import Callable

from fare_simulator.config.fares import SURGE_ZONES, VEHICLE_FARES
from fare_simulator.config.parameters import SimulationParameters
from fare_simulator.models.results import Impact, PriceBreakdownItem

RuleOutcome = tuple[float, PriceBreakdownItem | None]
PricingRule = Callable[[float, SimulationParameters], RuleOutcome]

RUSH_HOUR_RATE = 0.35
NIGHT_RATE = 0.20
HOLIDAY_RATE = 0.25
SPECIAL_EVENT_RATE = 0.30

NIGHT_END_HOUR = 6
RAIN_MAX_RATE = 0.4
TRAFFIC_THRESHOLD = 30
TRAFFIC_RATE = 0.5


def format_number(value: float) -> str:
    """Render a number the way it appears in labels: ``10`` not ``10.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _surcharge(
    running_total: float,
    charge: float,
    label: str,
    multiplier: float,
    impact: Impact,
) -> RuleOutcome:
    item = PriceBreakdownItem(label=label, value=charge, multiplier=multiplier, impact=impact)
    return running_total + charge, item


# ═══════════════════════════════════════════════════════════════════════════
# Base fare
# ═══════════════════════════════════════════════════════════════════════════

def base_and_distance(params: SimulationParameters) -> tuple[float, float, list[PriceBreakdownItem]]:
    """Starting point of every price: vehicle base fare + distance cost.

    Returns ``(base_fare, distance_cost, items)``.
    """
    fare = VEHICLE_FARES[params.vehicle_type]
    base_fare = fare.base_fare
    distance_cost = params.distance * fare.per_km_rate

    if params.distance > 20:
        distance_impact: Impact = "high"
    elif params.distance > 10:
        distance_impact = "medium"
    else:
        distance_impact = "low"

    items = [
        PriceBreakdownItem(label="Tarifa Base", value=base_fare, impact="medium"),
        PriceBreakdownItem(
            label=f"Distância ({format_number(params.distance)} km)",
            value=distance_cost,
            impact=distance_impact,
        ),
    ]
    return base_fare, distance_cost, items


# ═══════════════════════════════════════════════════════════════════════════
# Surcharges, in evaluation order
# ═══════════════════════════════════════════════════════════════════════════

def rush_hour(running_total: float, params: SimulationParameters) -> RuleOutcome:
    """+35% when the rush-hour flag is set.  ``hour`` is not consulted."""
    if not params.is_rush_hour:
        return running_total, None
    return _surcharge(running_total, running_total * RUSH_HOUR_RATE, "Horário de Pico", 1.35, "high")


def night_fare(running_total: float, params: SimulationParameters) -> RuleOutcome:
    """+20% for trips starting between 00:00 and 05:59."""
    if not 0 <= params.hour < NIGHT_END_HOUR:
        return running_total, None
    return _surcharge(running_total, running_total * NIGHT_RATE, "Tarifa Noturna", 1.20, "medium")


def holiday(running_total: float, params: SimulationParameters) -> RuleOutcome:
    """+25% on holidays."""
    if not params.is_holiday:
        return running_total, None
    return _surcharge(running_total, running_total * HOLIDAY_RATE, "Feriado", 1.25, "high")


def rain(running_total: float, params: SimulationParameters) -> RuleOutcome:
    """Up to +40%, scaled linearly by weather severity."""
    if not (params.has_rain and params.weather_severity > 0):
        return running_total, None
    multiplier = 1 + (params.weather_severity / 100) * RAIN_MAX_RATE
    return _surcharge(
        running_total,
        running_total * (multiplier - 1),
        f"Chuva ({format_number(params.weather_severity)}% intensidade)",
        multiplier,
        "high" if params.weather_severity > 60 else "medium",
    )


def traffic(running_total: float, params: SimulationParameters) -> RuleOutcome:
    """Half a percent per traffic point above 30 (max +35% at 100)."""
    if not params.traffic_intensity > TRAFFIC_THRESHOLD:
        return running_total, None
    multiplier = 1 + ((params.traffic_intensity - TRAFFIC_THRESHOLD) / 100) * TRAFFIC_RATE
    return _surcharge(
        running_total,
        running_total * (multiplier - 1),
        f"Trânsito Intenso ({format_number(params.traffic_intensity)}%)",
        multiplier,
        "high" if params.traffic_intensity > 70 else "medium",
    )


def special_event(running_total: float, params: SimulationParameters) -> RuleOutcome:
    """+30% when a special event is happening nearby."""
    if not params.has_special_event:
        return running_total, None
    return _surcharge(
        running_total, running_total * SPECIAL_EVENT_RATE, "Evento Especial na Região", 1.30, "high",
    )


def surge_zone(running_total: float, params: SimulationParameters) -> RuleOutcome:
    """Demand-zone multiplier, applied last."""
    if params.surge_zone == "none":
        return running_total, None
    tier = SURGE_ZONES[params.surge_zone]
    return _surcharge(
        running_total,
        running_total * (tier.multiplier - 1),
        f"Tarifa Dinâmica - Zona {tier.label}",
        tier.multiplier,
        "high",
    )


PRICING_RULES: tuple[PricingRule, ...] = (
    rush_hour,
    night_fare,
    holiday,
    rain,
    traffic,
    special_event,
    surge_zone,
)
