"""Fare calculator — base fare + distance, then the surcharge chain.

The surcharges are folded left over ``PRICING_RULES``: each rule sees the
total accumulated so far and may add to it.  Nothing is rounded until the
final output fields.
"""

from __future__ import annotations

import logging
import math

from fare_simulator.config.fares import SURGE_ZONES
from fare_simulator.config.parameters import SimulationParameters
from fare_simulator.engine.rules import PRICING_RULES, PricingRule, base_and_distance
from fare_simulator.models.results import PriceBreakdownItem, PriceResult

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int) -> float:
    """Round to ``digits`` decimals with halves going up (not to even)."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def fold_rules(
    running_total: float,
    params: SimulationParameters,
    rules: tuple[PricingRule, ...] = PRICING_RULES,
) -> tuple[float, list[PriceBreakdownItem]]:
    """Thread ``running_total`` through ``rules`` in order.

    Returns the final total and the items of the rules that applied.
    """
    items: list[PriceBreakdownItem] = []
    for rule in rules:
        running_total, item = rule(running_total, params)
        if item is not None:
            items.append(item)
    return running_total, items


def compute_price(params: SimulationParameters) -> PriceResult:
    """Compute the total price and its itemized breakdown.

    Pure and deterministic: ``params`` must already be validated, and the
    same input always gives the same result.
    """
    base_fare, distance_cost, breakdown = base_and_distance(params)
    comparison_price = base_fare + distance_cost

    total, surcharges = fold_rules(comparison_price, params)
    breakdown.extend(surcharges)

    surge_multiplier = 1.0
    if params.surge_zone != "none":
        surge_multiplier = SURGE_ZONES[params.surge_zone].multiplier

    percentage_change = (total - comparison_price) / comparison_price * 100

    logger.debug(
        "Priced %s trip of %s km: %d surcharge(s), total %.2f",
        params.vehicle_type, params.distance, len(surcharges), total,
    )

    return PriceResult(
        total_price=round_half_up(total, 2),
        base_fare=round_half_up(comparison_price, 2),
        breakdown=breakdown,
        surge_multiplier=surge_multiplier,
        percentage_change=round_half_up(percentage_change, 1),
    )
