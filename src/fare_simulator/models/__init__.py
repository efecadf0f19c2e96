"""Result models — engine output contracts."""

from fare_simulator.models.results import (
    ComparedScenario,
    PriceBreakdownItem,
    PriceResult,
    ScenarioComparison,
)

__all__ = [
    "ComparedScenario",
    "PriceBreakdownItem",
    "PriceResult",
    "ScenarioComparison",
]
