"""
Power split advisor API router.

Handles single-snapshot recommendations, preset scenarios and the
decision rule table.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from rorohybrid.advisor.decision import DECISION_RULES, DEFAULT_RULE_NAME, DecisionEngine
from rorohybrid.advisor.scenarios import DEFAULT_CONDITIONS, PRESET_SCENARIOS
from rorohybrid.errors import UnknownScenarioError
from rorohybrid.metrics import metrics
from rorohybrid.models.conditions import SEA_STATE_DESCRIPTIONS
from rorohybrid_api.schemas import (
    DecisionRuleModel,
    OperatingConditionsModel,
    RecommendationResponse,
    ScenarioListResponse,
    ScenarioModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/advisor", tags=["Advisor"])

_engine = DecisionEngine()


def _recommend(conditions) -> dict:
    with metrics.timer("recommendation"):
        recommendation = _engine.recommend(conditions)
    metrics.increment("recommendations_served")
    return recommendation.to_dict()


@router.post("/recommend", response_model=RecommendationResponse)
async def recommend(request: OperatingConditionsModel):
    """Recommend a diesel/electric power split for the given conditions."""
    return _recommend(request.to_conditions())


@router.get("/scenarios", response_model=ScenarioListResponse)
async def list_scenarios():
    """List preset scenarios, the default snapshot and sea-state labels."""
    return {
        "scenarios": [
            {"name": name, "conditions": conditions.to_dict()}
            for name, conditions in PRESET_SCENARIOS.items()
        ],
        "default": DEFAULT_CONDITIONS.to_dict(),
        "sea_states": SEA_STATE_DESCRIPTIONS,
    }


@router.get("/scenarios/{name}", response_model=RecommendationResponse)
async def recommend_scenario(name: str):
    """Recommendation for a named preset scenario."""
    try:
        with metrics.timer("recommendation"):
            recommendation = _engine.recommend_scenario(name)
    except UnknownScenarioError as e:
        raise HTTPException(status_code=404, detail=str(e))
    metrics.increment("recommendations_served")
    return recommendation.to_dict()


@router.get("/rules", response_model=List[DecisionRuleModel])
async def list_rules():
    """Decision rules in evaluation order; the first match wins."""
    rules = [
        {
            "order": index,
            "name": rule.name,
            "description": rule.description,
            "mode": rule.mode.label_en,
            "diesel_ratio": rule.mode.diesel_ratio,
            "electric_ratio": rule.mode.electric_ratio,
        }
        for index, rule in enumerate(DECISION_RULES, start=1)
    ]
    rules.append({
        "order": len(DECISION_RULES) + 1,
        "name": DEFAULT_RULE_NAME,
        "description": "no other rule matched",
        "mode": _engine.default_mode.label_en,
        "diesel_ratio": _engine.default_mode.diesel_ratio,
        "electric_ratio": _engine.default_mode.electric_ratio,
    })
    return rules
