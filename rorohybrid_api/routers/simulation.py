"""
Voyage simulation and baseline comparison API router.
"""

import logging

from fastapi import APIRouter

from rorohybrid.advisor.comparison import ComparisonEngine
from rorohybrid.advisor.simulation import SimulationEngine
from rorohybrid.config import settings as engine_settings
from rorohybrid.metrics import metrics
from rorohybrid_api.schemas import (
    ComparisonRequest,
    ComparisonResponse,
    SimulationRequest,
    SimulationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Simulation"])


def _comparison_engine() -> ComparisonEngine:
    return ComparisonEngine(
        fuel_price_usd_per_ton=engine_settings.fuel_price_usd_per_ton,
        voyage_days_per_year=engine_settings.voyage_days_per_year,
    )


@router.post("/api/simulation/run", response_model=SimulationResponse)
async def run_simulation(request: SimulationRequest):
    """
    Run a voyage simulation and compare it against the baselines.

    Without a seed the sea-state jitter differs between calls.
    """
    seed = request.seed if request.seed is not None else engine_settings.sim_seed
    kwargs = {"hours": engine_settings.sim_hours, "initial_soc": request.initial_soc}
    if seed is not None:
        engine = SimulationEngine.seeded(seed, **kwargs)
    else:
        engine = SimulationEngine(**kwargs)

    with metrics.timer("simulation_run"):
        result = engine.run()
        comparison = _comparison_engine().compare(result.summary)

    metrics.increment("simulations_run")
    metrics.set_gauge("last_simulation_fuel_tons", result.summary.total_fuel_tons)

    return {
        "seed": seed,
        "hourly": [frame.to_dict() for frame in result.frames],
        "summary": result.summary.to_dict(),
        "comparison": comparison.to_dict(),
    }


@router.post("/api/comparison", response_model=ComparisonResponse)
async def compare(request: ComparisonRequest):
    """Compare a daily advisor fuel figure against the fixed baselines."""
    with metrics.timer("comparison"):
        comparison = _comparison_engine().compare_fuel(request.ai_fuel_tons)
    return comparison.to_dict()
