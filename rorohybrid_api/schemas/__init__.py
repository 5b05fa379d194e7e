"""
Hybrid advisor API pydantic schemas.

Re-exports all schema classes:
    from rorohybrid_api.schemas import OperatingConditionsModel, ...
"""

# Advisor
from .advisor import (  # noqa: F401
    DecisionRuleModel,
    OperatingConditionsModel,
    RecommendationResponse,
    ScenarioListResponse,
    ScenarioModel,
)

# Simulation / comparison
from .simulation import (  # noqa: F401
    ComparisonRequest,
    ComparisonResponse,
    ComparisonScenarioModel,
    SavingsSummaryModel,
    SimulationFrameModel,
    SimulationRequest,
    SimulationResponse,
    SimulationSummaryModel,
)
