"""Preset operating scenarios for quick evaluation."""

from typing import Dict

from rorohybrid.errors import UnknownScenarioError
from rorohybrid.models.conditions import OperatingConditions


# Input snapshot shown before the operator touches any control
DEFAULT_CONDITIONS = OperatingConditions(
    speed=17.0, sea_state=4, cargo=75.0, wind=8.0, wave=1.5, battery=50.0,
)

PRESET_SCENARIOS: Dict[str, OperatingConditions] = {
    # Harbour manoeuvring on a well-charged battery
    "port": OperatingConditions(
        speed=10.0, sea_state=2, cargo=50.0, wind=5.0, wave=0.5, battery=70.0,
    ),
    # Open-sea transit at service speed
    "cruise": OperatingConditions(
        speed=17.0, sea_state=3, cargo=75.0, wind=8.0, wave=1.5, battery=50.0,
    ),
    "rough": OperatingConditions(
        speed=14.0, sea_state=6, cargo=100.0, wind=18.0, wave=4.0, battery=40.0,
    ),
    # Low battery, diesel carries the load
    "charging": OperatingConditions(
        speed=16.0, sea_state=3, cargo=50.0, wind=6.0, wave=1.0, battery=25.0,
    ),
}


def get_scenario(name: str) -> OperatingConditions:
    """Look up a preset scenario by name (case-insensitive)."""
    key = name.strip().lower()
    if key not in PRESET_SCENARIOS:
        raise UnknownScenarioError(name, PRESET_SCENARIOS.keys())
    return PRESET_SCENARIOS[key]
