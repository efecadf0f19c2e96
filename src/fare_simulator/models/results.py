"""Result types — the contract between the engine, the API and its clients.

Field names follow Python conventions; JSON output uses the camelCase
aliases (``totalPrice``, ``surgeMultiplier`` ...) that clients expect.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Impact = Literal["low", "medium", "high"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ═══════════════════════════════════════════════════════════════════════════
# Price calculation
# ═══════════════════════════════════════════════════════════════════════════

class PriceBreakdownItem(_CamelModel):
    """One line of the itemized price, produced by one applied rule."""

    label: str
    """Human-readable rule name, e.g. ``"Horário de Pico"``."""

    value: float
    """Amount this rule added to the running total when it was applied.
    Unrounded; display layers format it."""

    multiplier: float | None = None
    """Factor the running total was scaled by.  ``None`` for the base
    and distance lines."""

    impact: Impact
    """How strongly this line moves the price."""


class PriceResult(_CamelModel):
    """Outcome of one ``compute_price`` call."""

    total_price: float
    """Final price, rounded to 2 decimals."""

    base_fare: float
    """Vehicle base fare **plus** distance cost, rounded to 2 decimals.
    The name is kept for wire compatibility."""

    breakdown: list[PriceBreakdownItem]
    """Applied rules in evaluation order.  Inactive rules are absent."""

    surge_multiplier: float
    """Surge-zone multiplier when a zone applied, else 1.0."""

    percentage_change: float
    """Change versus the no-surcharge price (%), rounded to 1 decimal."""


# ═══════════════════════════════════════════════════════════════════════════
# Scenario comparison
# ═══════════════════════════════════════════════════════════════════════════

class ComparedScenario(_CamelModel):
    """Price of one what-if variant of the current parameters."""

    label: str
    total_price: float
    is_current: bool


class ScenarioComparison(_CamelModel):
    """Side-by-side prices of the what-if variants."""

    scenarios: list[ComparedScenario]
    max_price: float
    min_price: float
    difference: float
    """max_price − min_price, rounded to 2 decimals."""
