"""Recommendation API schemas."""

from typing import Dict, List

from pydantic import BaseModel, Field

from rorohybrid.advisor.scenarios import DEFAULT_CONDITIONS
from rorohybrid.models.conditions import OperatingConditions


class OperatingConditionsModel(BaseModel):
    """Operating condition snapshot.

    Defaults are the snapshot the operator console opens with.
    """
    speed: float = Field(DEFAULT_CONDITIONS.speed, gt=0, le=30, allow_inf_nan=False, description="Speed through water (knots)")
    sea_state: int = Field(DEFAULT_CONDITIONS.sea_state, ge=1, le=7, description="Douglas sea state")
    cargo: float = Field(DEFAULT_CONDITIONS.cargo, ge=0, le=100, allow_inf_nan=False, description="Cargo load (%)")
    wind: float = Field(DEFAULT_CONDITIONS.wind, ge=0, le=60, allow_inf_nan=False, description="Wind speed (m/s)")
    wave: float = Field(DEFAULT_CONDITIONS.wave, ge=0, le=15, allow_inf_nan=False, description="Significant wave height (m)")
    battery: float = Field(DEFAULT_CONDITIONS.battery, ge=0, le=100, allow_inf_nan=False, description="Battery state of charge (%)")

    def to_conditions(self) -> OperatingConditions:
        return OperatingConditions(**self.model_dump())


class RecommendationResponse(BaseModel):
    """Power split recommendation."""
    mode: str
    mode_ar: str
    rule: str
    total_power_kw: int
    diesel_power_kw: int
    electric_power_kw: int
    diesel_ratio: float
    electric_ratio: float
    diesel_share_percent: int
    electric_share_percent: int
    fuel_tons_per_hour: float
    sfoc_g_per_kwh: float
    engine_load_percent: int
    fuel_savings_percent: int
    battery_utilization_percent: int
    system_efficiency_percent: int


class ScenarioModel(BaseModel):
    name: str
    conditions: OperatingConditionsModel


class ScenarioListResponse(BaseModel):
    scenarios: List[ScenarioModel]
    default: OperatingConditionsModel
    sea_states: Dict[int, str]


class DecisionRuleModel(BaseModel):
    order: int
    name: str
    description: str
    mode: str
    diesel_ratio: float
    electric_ratio: float
