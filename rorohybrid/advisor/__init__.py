"""Advisor: power split decisions, voyage simulation and baseline comparison."""

from .decision import (
    DECISION_RULES,
    DecisionEngine,
    DecisionRule,
    PowerMode,
    Recommendation,
)
from .simulation import (
    SimulationEngine,
    SimulationFrame,
    SimulationResult,
    SimulationSummary,
    run_seeded_simulation,
)
from .comparison import (
    ComparisonEngine,
    ComparisonResult,
    ComparisonScenario,
    SavingsSummary,
    ScenarioName,
)
from .scenarios import DEFAULT_CONDITIONS, PRESET_SCENARIOS, get_scenario

__all__ = [
    "DECISION_RULES",
    "DecisionEngine",
    "DecisionRule",
    "PowerMode",
    "Recommendation",
    "SimulationEngine",
    "SimulationFrame",
    "SimulationResult",
    "SimulationSummary",
    "run_seeded_simulation",
    "ComparisonEngine",
    "ComparisonResult",
    "ComparisonScenario",
    "SavingsSummary",
    "ScenarioName",
    "DEFAULT_CONDITIONS",
    "PRESET_SCENARIOS",
    "get_scenario",
]
