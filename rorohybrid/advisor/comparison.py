"""
Baseline comparison for a simulated voyage day.

Baselines are fixed multipliers on the advisor's fuel figure rather than
independent simulations. Savings are projected to a year of operation.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from rorohybrid.advisor.simulation import SimulationSummary
from rorohybrid.errors import DomainError
from rorohybrid.models.conditions import require_finite


logger = logging.getLogger(__name__)


class ScenarioName(Enum):
    """Operating policies compared against each other."""
    DIESEL_ONLY = "diesel_only"
    AI_OPTIMIZED = "ai_optimized"
    ELECTRIC_PRIORITY = "electric_priority"


@dataclass(frozen=True)
class ComparisonScenario:
    """Projected daily figures for one operating policy."""
    name: ScenarioName
    fuel_tons: float
    co2_tons: float
    cost_usd: float
    efficiency_percent: int  # Nominal label, not recomputed

    def to_dict(self) -> dict:
        return {
            "name": self.name.value,
            "fuel_tons": self.fuel_tons,
            "co2_tons": self.co2_tons,
            "cost_usd": self.cost_usd,
            "efficiency_percent": self.efficiency_percent,
        }


@dataclass(frozen=True)
class SavingsSummary:
    """Advisor savings relative to diesel-only operation."""
    daily_fuel_savings_tons: float
    daily_fuel_savings_percent: float
    annual_fuel_savings_tons: float
    annual_co2_reduction_tons: float
    annual_cost_savings_usd: float

    def to_dict(self) -> dict:
        return {
            "daily_fuel_savings_tons": self.daily_fuel_savings_tons,
            "daily_fuel_savings_percent": self.daily_fuel_savings_percent,
            "annual_fuel_savings_tons": self.annual_fuel_savings_tons,
            "annual_co2_reduction_tons": self.annual_co2_reduction_tons,
            "annual_cost_savings_usd": self.annual_cost_savings_usd,
        }


@dataclass(frozen=True)
class ComparisonResult:
    scenarios: Dict[ScenarioName, ComparisonScenario]
    savings: SavingsSummary

    def to_dict(self) -> dict:
        return {
            "scenarios": {
                name.value: scenario.to_dict()
                for name, scenario in self.scenarios.items()
            },
            "savings": self.savings.to_dict(),
        }


class ComparisonEngine:
    """
    Contrasts advisor fuel burn with fixed-policy baselines.

    Example usage:
        result = ComparisonEngine().compare(simulation.summary)
        print(result.savings.annual_cost_savings_usd)
    """

    # Baseline fuel relative to the advisor's
    FUEL_MULTIPLIERS = {
        ScenarioName.DIESEL_ONLY: 1.068,
        ScenarioName.AI_OPTIMIZED: 1.0,
        ScenarioName.ELECTRIC_PRIORITY: 1.025,
    }

    # Nominal system efficiency labels (%)
    EFFICIENCY_LABELS = {
        ScenarioName.DIESEL_ONLY: 42,
        ScenarioName.AI_OPTIMIZED: 68,
        ScenarioName.ELECTRIC_PRIORITY: 55,
    }

    CO2_FACTOR = 3.17  # t CO2 per t fuel
    FUEL_PRICE_USD_PER_TON = 700.0
    VOYAGE_DAYS_PER_YEAR = 48

    def __init__(
        self,
        fuel_price_usd_per_ton: float = FUEL_PRICE_USD_PER_TON,
        voyage_days_per_year: int = VOYAGE_DAYS_PER_YEAR,
    ):
        require_finite("fuel_price_usd_per_ton", fuel_price_usd_per_ton)
        if fuel_price_usd_per_ton < 0:
            raise DomainError(
                "fuel_price_usd_per_ton", fuel_price_usd_per_ton, "must not be negative",
            )
        if voyage_days_per_year < 0:
            raise DomainError(
                "voyage_days_per_year", voyage_days_per_year, "must not be negative",
            )
        self.fuel_price_usd_per_ton = fuel_price_usd_per_ton
        self.voyage_days_per_year = voyage_days_per_year

    def compare(self, summary: SimulationSummary) -> ComparisonResult:
        """Compare a simulation summary against the baselines."""
        return self.compare_fuel(summary.total_fuel_tons)

    def compare_fuel(self, ai_fuel_tons: float) -> ComparisonResult:
        """
        Compare a daily advisor fuel figure against the baselines.

        Args:
            ai_fuel_tons: Fuel burned over the day under the advisor (t)

        Returns:
            ComparisonResult with the three scenarios and savings block
        """
        require_finite("ai_fuel_tons", ai_fuel_tons)
        if ai_fuel_tons < 0:
            raise DomainError("ai_fuel_tons", ai_fuel_tons, "must not be negative")

        scenarios = {
            name: self._scenario(name, ai_fuel_tons * multiplier)
            for name, multiplier in self.FUEL_MULTIPLIERS.items()
        }

        diesel_only_fuel = scenarios[ScenarioName.DIESEL_ONLY].fuel_tons
        daily = diesel_only_fuel - ai_fuel_tons
        daily_pct = daily / diesel_only_fuel * 100.0 if diesel_only_fuel > 0 else 0.0
        annual = daily * self.voyage_days_per_year

        savings = SavingsSummary(
            daily_fuel_savings_tons=daily,
            daily_fuel_savings_percent=daily_pct,
            annual_fuel_savings_tons=annual,
            annual_co2_reduction_tons=annual * self.CO2_FACTOR,
            annual_cost_savings_usd=annual * self.fuel_price_usd_per_ton,
        )

        logger.info(
            f"Comparison: AI {ai_fuel_tons:.2f} t vs diesel-only "
            f"{diesel_only_fuel:.2f} t, annual savings {annual:.1f} t "
            f"(${savings.annual_cost_savings_usd:,.0f})"
        )

        return ComparisonResult(scenarios=scenarios, savings=savings)

    def _scenario(self, name: ScenarioName, fuel_tons: float) -> ComparisonScenario:
        return ComparisonScenario(
            name=name,
            fuel_tons=fuel_tons,
            co2_tons=fuel_tons * self.CO2_FACTOR,
            cost_usd=fuel_tons * self.fuel_price_usd_per_ton,
            efficiency_percent=self.EFFICIENCY_LABELS[name],
        )
