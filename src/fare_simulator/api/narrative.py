"""Narrative generator — plain-text explanation of a price.

Turns a ``PriceResult`` into a short report a student can read next to
the numbers: what the trip is, which rules fired and by how much, and
which surcharge moved the price the most.
"""

from __future__ import annotations

from fare_simulator.config.parameters import SimulationParameters
from fare_simulator.models.results import PriceResult

# base fare + distance lines always come first
_FIXED_LINES = 2


def generate_narrative(result: PriceResult, params: SimulationParameters) -> str:
    """Generate a plain-text narrative for one price calculation.

    Returns a text block covering:
      1. Trip summary
      2. Line-by-line breakdown
      3. Verdict: total, change versus the no-surcharge price, main driver
    """
    sections: list[str] = []

    # ── 1. Trip ──
    sections.append("=" * 60)
    sections.append("TRIP")
    sections.append("=" * 60)
    sections.append(
        f"Vehicle: {params.vehicle_type}\n"
        f"Distance: {params.distance:g} km\n"
        f"Start hour: {params.hour:02d}:00\n"
        f"Surge zone: {params.surge_zone}"
    )

    # ── 2. Breakdown ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("PRICE BREAKDOWN (in evaluation order)")
    sections.append("=" * 60)
    for item in result.breakdown:
        factor = f"  x{item.multiplier:.3f}" if item.multiplier is not None else ""
        sections.append(f"  {item.label:40s} {item.value:12.2f}  [{item.impact}]{factor}")

    # ── 3. Verdict ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("VERDICT")
    sections.append("=" * 60)
    sections.append(
        f"Price without surcharges: {result.base_fare:.2f}\n"
        f"Total price: {result.total_price:.2f} ({result.percentage_change:+.1f}%)\n"
        f"Surge multiplier: {result.surge_multiplier:.1f}x"
    )

    surcharges = result.breakdown[_FIXED_LINES:]
    if not surcharges:
        sections.append("No surcharge applies: the price is the base fare plus distance.")
    else:
        top = max(surcharges, key=lambda item: item.value)
        share = top.value / sum(item.value for item in surcharges) * 100
        sections.append(
            f"{len(surcharges)} surcharge(s) applied. Largest driver: {top.label} "
            f"(+{top.value:.2f}, {share:.0f}% of all surcharges)."
        )
        if surcharges[-1].label.startswith("Tarifa Dinâmica"):
            sections.append(
                "The surge zone is applied last, so it multiplies every earlier surcharge too."
            )

    return "\n".join(sections)
