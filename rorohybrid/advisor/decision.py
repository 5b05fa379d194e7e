"""
Rule-based power split advisor.

Selects how required propulsive power is divided between the diesel engine
and the battery-electric drive. The rules form an ordered cascade: they are
evaluated top to bottom and the first matching rule decides the mode. When
no rule matches the default 50/50 split applies.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from rorohybrid.advisor.scenarios import get_scenario
from rorohybrid.models.conditions import OperatingConditions, round_fixed, round_half_up
from rorohybrid.models.efficiency import EfficiencyModel
from rorohybrid.models.fuel import FuelModel
from rorohybrid.models.resistance import ResistancePowerModel


logger = logging.getLogger(__name__)


class PowerMode(Enum):
    """Propulsion modes. Value is the English label."""
    ELECTRIC_ONLY = "Electric Only"
    DIESEL_ONLY = "Diesel Only"
    HYBRID_75_25 = "Hybrid 75-25"
    HYBRID_50_50 = "Hybrid 50-50"
    HYBRID_25_75 = "Hybrid 25-75"

    @property
    def label_en(self) -> str:
        return self.value

    @property
    def label_ar(self) -> str:
        return _ARABIC_LABELS[self]

    @property
    def diesel_ratio(self) -> float:
        return _DIESEL_RATIOS[self]

    @property
    def electric_ratio(self) -> float:
        return 1.0 - _DIESEL_RATIOS[self]


_ARABIC_LABELS = {
    PowerMode.ELECTRIC_ONLY: "كهرباء فقط",
    PowerMode.DIESEL_ONLY: "ديزل فقط",
    PowerMode.HYBRID_75_25: "هجين 75-25",
    PowerMode.HYBRID_50_50: "هجين 50-50",
    PowerMode.HYBRID_25_75: "هجين 25-75",
}

# Diesel share of total power; the electric drive takes the rest
_DIESEL_RATIOS = {
    PowerMode.ELECTRIC_ONLY: 0.0,
    PowerMode.DIESEL_ONLY: 1.0,
    PowerMode.HYBRID_75_25: 0.75,
    PowerMode.HYBRID_50_50: 0.5,
    PowerMode.HYBRID_25_75: 0.25,
}


@dataclass(frozen=True)
class DecisionRule:
    """One row of the decision cascade."""
    name: str
    description: str
    predicate: Callable[[OperatingConditions], bool]
    mode: PowerMode

    def matches(self, conditions: OperatingConditions) -> bool:
        return bool(self.predicate(conditions))


DECISION_RULES: Tuple[DecisionRule, ...] = (
    DecisionRule(
        name="low_speed_charged_battery",
        description="speed < 12 kts and battery > 40%",
        predicate=lambda c: c.speed < 12 and c.battery > 40,
        mode=PowerMode.ELECTRIC_ONLY,
    ),
    DecisionRule(
        name="high_speed_or_low_battery",
        description="speed > 18 kts or battery < 30%",
        predicate=lambda c: c.speed > 18 or c.battery < 30,
        mode=PowerMode.DIESEL_ONLY,
    ),
    DecisionRule(
        name="heavy_weather",
        description="sea state >= 5 or wave height > 3 m",
        predicate=lambda c: c.sea_state >= 5 or c.wave > 3,
        mode=PowerMode.HYBRID_75_25,
    ),
    DecisionRule(
        name="laden_at_speed",
        description="cargo >= 75% and speed >= 15 kts",
        predicate=lambda c: c.cargo >= 75 and c.speed >= 15,
        mode=PowerMode.HYBRID_50_50,
    ),
    DecisionRule(
        name="charged_battery_calm_sea",
        description="battery > 60% and sea state <= 3",
        predicate=lambda c: c.battery > 60 and c.sea_state <= 3,
        mode=PowerMode.HYBRID_25_75,
    ),
)

DEFAULT_RULE_NAME = "default"
DEFAULT_MODE = PowerMode.HYBRID_50_50


@dataclass(frozen=True)
class Recommendation:
    """Power split recommendation for one snapshot."""
    mode: PowerMode
    rule: str  # Name of the rule that fired
    total_power_kw: int
    diesel_power_kw: int
    electric_power_kw: int
    diesel_ratio: float
    electric_ratio: float

    # Fuel
    fuel_tons_per_hour: float  # 2 decimal places
    sfoc_g_per_kwh: float
    engine_load_percent: int

    # Efficiency scores (%)
    fuel_savings_percent: int
    battery_utilization_percent: int
    system_efficiency_percent: int

    @property
    def diesel_share_percent(self) -> int:
        if self.total_power_kw <= 0:
            return 0
        return round_half_up(self.diesel_power_kw / self.total_power_kw * 100)

    @property
    def electric_share_percent(self) -> int:
        if self.total_power_kw <= 0:
            return 0
        return round_half_up(self.electric_power_kw / self.total_power_kw * 100)

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.label_en,
            "mode_ar": self.mode.label_ar,
            "rule": self.rule,
            "total_power_kw": self.total_power_kw,
            "diesel_power_kw": self.diesel_power_kw,
            "electric_power_kw": self.electric_power_kw,
            "diesel_ratio": self.diesel_ratio,
            "electric_ratio": self.electric_ratio,
            "diesel_share_percent": self.diesel_share_percent,
            "electric_share_percent": self.electric_share_percent,
            "fuel_tons_per_hour": self.fuel_tons_per_hour,
            "sfoc_g_per_kwh": self.sfoc_g_per_kwh,
            "engine_load_percent": self.engine_load_percent,
            "fuel_savings_percent": self.fuel_savings_percent,
            "battery_utilization_percent": self.battery_utilization_percent,
            "system_efficiency_percent": self.system_efficiency_percent,
        }


class DecisionEngine:
    """
    Recommends a diesel/electric power split for a snapshot.

    Example usage:
        engine = DecisionEngine()
        rec = engine.recommend(OperatingConditions(
            speed=17, sea_state=3, cargo=75, wind=8, wave=1.5, battery=50,
        ))
        print(rec.mode.label_en, rec.diesel_power_kw, rec.electric_power_kw)
    """

    def __init__(
        self,
        power_model: Optional[ResistancePowerModel] = None,
        fuel_model: Optional[FuelModel] = None,
        efficiency_model: Optional[EfficiencyModel] = None,
        rules: Sequence[DecisionRule] = DECISION_RULES,
        default_mode: PowerMode = DEFAULT_MODE,
    ):
        self.power_model = power_model or ResistancePowerModel()
        self.fuel_model = fuel_model or FuelModel()
        self.efficiency_model = efficiency_model or EfficiencyModel()
        self.rules = tuple(rules)
        self.default_mode = default_mode

    def select_mode(self, conditions: OperatingConditions) -> Tuple[str, PowerMode]:
        """First matching rule's (name, mode); the default when none match."""
        for rule in self.rules:
            if rule.matches(conditions):
                return rule.name, rule.mode
        return DEFAULT_RULE_NAME, self.default_mode

    def recommend(self, conditions: OperatingConditions) -> Recommendation:
        """
        Evaluate a snapshot.

        Args:
            conditions: Operating condition snapshot

        Returns:
            Recommendation with power split, fuel burn and efficiency scores
        """
        total_power = self.power_model.compute_required_power(conditions)
        rule_name, mode = self.select_mode(conditions)

        diesel_power = round_half_up(total_power * mode.diesel_ratio)
        electric_power = round_half_up(total_power * mode.electric_ratio)

        fuel = self.fuel_model.compute_fuel(diesel_power)
        efficiency = self.efficiency_model.compute_efficiency(
            diesel_power, electric_power, total_power,
        )

        logger.debug(
            f"Rule '{rule_name}' -> {mode.label_en}: total={total_power:.0f} kW, "
            f"diesel={diesel_power} kW, electric={electric_power} kW, "
            f"fuel={fuel.fuel_tons_per_hour:.2f} t/h"
        )

        return Recommendation(
            mode=mode,
            rule=rule_name,
            total_power_kw=round_half_up(total_power),
            diesel_power_kw=diesel_power,
            electric_power_kw=electric_power,
            diesel_ratio=mode.diesel_ratio,
            electric_ratio=mode.electric_ratio,
            fuel_tons_per_hour=round_fixed(fuel.fuel_tons_per_hour, 2),
            sfoc_g_per_kwh=fuel.sfoc_g_per_kwh,
            engine_load_percent=round_half_up(fuel.engine_load_percent),
            fuel_savings_percent=efficiency.fuel_savings_percent,
            battery_utilization_percent=efficiency.battery_utilization_percent,
            system_efficiency_percent=efficiency.overall_efficiency_percent,
        )

    def recommend_scenario(self, name: str) -> Recommendation:
        """Evaluate a named preset scenario."""
        return self.recommend(get_scenario(name))
