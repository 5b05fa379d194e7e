"""Physical models: operating conditions, resistance/power, fuel and efficiency."""

from .conditions import (
    KNOTS_TO_MS,
    SEA_STATE_DESCRIPTIONS,
    OperatingConditions,
    round_fixed,
    round_half_up,
)
from .resistance import PowerBreakdown, ResistancePowerModel, VesselParticulars
from .fuel import FuelModel, FuelResult
from .efficiency import EfficiencyModel, EfficiencyResult

__all__ = [
    "KNOTS_TO_MS",
    "SEA_STATE_DESCRIPTIONS",
    "OperatingConditions",
    "round_fixed",
    "round_half_up",
    "PowerBreakdown",
    "ResistancePowerModel",
    "VesselParticulars",
    "FuelModel",
    "FuelResult",
    "EfficiencyModel",
    "EfficiencyResult",
]
