"""Sensitivity / tornado analysis for a single trip.

Vary one numeric input at a time to a low and a high value, reprice, and
measure the swing.  Bars are sorted by impact on the total price.

Default sweep set:
  - distance at 50% and 150% of its current value
  - weather severity 0 → 100
  - traffic intensity 0 → 100
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, get_args

from fare_simulator.config.parameters import SimulationParameters
from fare_simulator.engine.calculator import compute_price, round_half_up

Sweep = tuple[str, str, float, float]
"""(display name, parameter attribute, low value, high value)."""

NumericParameter = Literal["distance", "hour", "weather_severity", "traffic_intensity"]
NUMERIC_PARAMETERS: tuple[str, ...] = get_args(NumericParameter)


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Attribute of ``SimulationParameters`` that was swept."""

    base_value: float
    """Value in the base trip."""

    low_value: float
    """Swept low value, after clamping to the field bounds."""

    high_value: float
    """Swept high value, after clamping to the field bounds."""

    price_at_low: float
    price_at_high: float

    delta_price: float
    """abs(price_at_high − price_at_low) — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    base_price: float
    """Total price of the unmodified trip."""

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_price (descending)."""


def default_sweeps(params: SimulationParameters) -> list[Sweep]:
    """Sweep set used when the caller does not provide one."""
    return [
        ("Distance", "distance", params.distance * 0.5, params.distance * 1.5),
        ("Weather severity", "weather_severity", 0.0, 100.0),
        ("Traffic intensity", "traffic_intensity", 0.0, 100.0),
    ]


def _get_field_bound(name: str, attr: str) -> Any:
    """Read a ``ge``/``le`` constraint from the parameter model."""
    for meta in SimulationParameters.model_fields[name].metadata:
        if hasattr(meta, attr):
            return getattr(meta, attr)
    return None


def _clamp(name: str, value: float) -> float:
    low = _get_field_bound(name, "ge")
    high = _get_field_bound(name, "le")
    if low is not None:
        value = max(value, low)
    if high is not None:
        value = min(value, high)
    if SimulationParameters.model_fields[name].annotation is int:
        value = round(value)
    return value


def _price_with(params: SimulationParameters, name: str, value: float) -> float:
    variant = SimulationParameters.model_validate({**params.model_dump(), name: value})
    return compute_price(variant).total_price


def run_sensitivity(
    params: SimulationParameters,
    sweeps: list[Sweep] | None = None,
) -> SensitivityResult:
    """Run the sweep set against ``params``.

    Parameters
    ----------
    params : SimulationParameters
        Base trip.
    sweeps : list[tuple[name, attribute, low, high]] | None
        Parameter sweeps. None = ``default_sweeps(params)``.

    Raises
    ------
    ValueError
        If a sweep names something other than a numeric parameter.
    """
    if sweeps is None:
        sweeps = default_sweeps(params)

    base_price = compute_price(params).total_price
    bars: list[TornadoBar] = []

    for name, path, low, high in sweeps:
        if path not in NUMERIC_PARAMETERS:
            raise ValueError(f"Cannot sweep '{path}': expected one of {', '.join(NUMERIC_PARAMETERS)}")

        low_val = _clamp(path, low)
        high_val = _clamp(path, high)
        price_low = _price_with(params, path, low_val)
        price_high = _price_with(params, path, high_val)

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=float(getattr(params, path)),
            low_value=float(low_val),
            high_value=float(high_val),
            price_at_low=price_low,
            price_at_high=price_high,
            delta_price=round_half_up(abs(price_high - price_low), 2),
        ))

    bars.sort(key=lambda b: b.delta_price, reverse=True)

    return SensitivityResult(base_price=base_price, bars=bars)
