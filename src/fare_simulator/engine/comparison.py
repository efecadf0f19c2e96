"""What-if comparison — reprice the current trip with factors switched off.

Shows how much each group of conditions contributes by removing it:
rush hour, rain, heavy traffic, and finally everything at once.
"""

from __future__ import annotations

from typing import Any

from fare_simulator.config.parameters import SimulationParameters
from fare_simulator.engine.calculator import compute_price, round_half_up
from fare_simulator.models.results import ComparedScenario, ScenarioComparison

LIGHT_TRAFFIC = 20

WHAT_IF_VARIANTS: list[tuple[str, dict[str, Any]]] = [
    ("Atual", {}),
    ("Sem Pico", {"is_rush_hour": False}),
    ("Sem Chuva", {"has_rain": False, "weather_severity": 0}),
    ("Trânsito Leve", {"traffic_intensity": LIGHT_TRAFFIC}),
    ("Base", {
        "is_rush_hour": False,
        "has_rain": False,
        "weather_severity": 0,
        "traffic_intensity": LIGHT_TRAFFIC,
        "has_special_event": False,
        "surge_zone": "none",
        "is_holiday": False,
    }),
]
"""(label, overrides) pairs.  The first entry is the unchanged trip."""


def compare_scenarios(params: SimulationParameters) -> ScenarioComparison:
    """Price every what-if variant of ``params``, in ``WHAT_IF_VARIANTS`` order."""
    scenarios: list[ComparedScenario] = []
    for index, (label, overrides) in enumerate(WHAT_IF_VARIANTS):
        variant = params.model_copy(update=overrides)
        result = compute_price(variant)
        scenarios.append(ComparedScenario(
            label=label,
            total_price=result.total_price,
            is_current=index == 0,
        ))

    prices = [s.total_price for s in scenarios]
    max_price = max(prices)
    min_price = min(prices)
    return ScenarioComparison(
        scenarios=scenarios,
        max_price=max_price,
        min_price=min_price,
        difference=round_half_up(max_price - min_price, 2),
    )
