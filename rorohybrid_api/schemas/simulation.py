"""Simulation and comparison API schemas."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from rorohybrid_api.schemas.advisor import OperatingConditionsModel


class SimulationRequest(BaseModel):
    """Request for a 24-hour voyage simulation."""
    seed: Optional[int] = Field(None, ge=0, description="Seed for reproducible sea-state jitter")
    initial_soc: float = Field(50.0, ge=20, le=90, description="Battery state of charge at hour 0 (%)")


class SimulationFrameModel(BaseModel):
    hour: int
    conditions: OperatingConditionsModel
    mode: str
    total_power_kw: int
    diesel_power_kw: int
    electric_power_kw: int
    fuel_tons: float
    battery_soc: float
    cumulative_fuel_tons: float


class SimulationSummaryModel(BaseModel):
    total_fuel_tons: float
    average_battery_soc: float
    co2_reduction_kg: float


class ComparisonScenarioModel(BaseModel):
    name: str
    fuel_tons: float
    co2_tons: float
    cost_usd: float
    efficiency_percent: int


class SavingsSummaryModel(BaseModel):
    daily_fuel_savings_tons: float
    daily_fuel_savings_percent: float
    annual_fuel_savings_tons: float
    annual_co2_reduction_tons: float
    annual_cost_savings_usd: float


class ComparisonRequest(BaseModel):
    """Request for a baseline comparison of a daily fuel figure."""
    ai_fuel_tons: float = Field(..., ge=0, allow_inf_nan=False, description="Daily fuel under the advisor (t)")


class ComparisonResponse(BaseModel):
    scenarios: Dict[str, ComparisonScenarioModel]
    savings: SavingsSummaryModel


class SimulationResponse(BaseModel):
    seed: Optional[int]
    hourly: List[SimulationFrameModel]
    summary: SimulationSummaryModel
    comparison: ComparisonResponse
