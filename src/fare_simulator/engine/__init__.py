"""Engine — fare calculation, what-if comparison and sensitivity sweeps."""

from fare_simulator.engine.calculator import compute_price, fold_rules
from fare_simulator.engine.rules import PRICING_RULES, base_and_distance
from fare_simulator.engine.comparison import compare_scenarios
from fare_simulator.engine.sensitivity import SensitivityResult, TornadoBar, run_sensitivity

__all__ = [
    "compute_price",
    "fold_rules",
    "base_and_distance",
    "PRICING_RULES",
    "compare_scenarios",
    "run_sensitivity",
    "SensitivityResult",
    "TornadoBar",
]
