"""System efficiency scores for a diesel/electric power split."""

from dataclasses import dataclass

from rorohybrid.errors import DomainError
from rorohybrid.models.conditions import require_finite, round_half_up


@dataclass(frozen=True)
class EfficiencyResult:
    """Rounded efficiency scores (%)."""
    overall_efficiency_percent: int
    fuel_savings_percent: int
    battery_utilization_percent: int


class EfficiencyModel:
    """
    Scores a power split by source efficiency, fuel saved against an
    all-diesel plant, and how hard the battery is being used.
    """

    DIESEL_THERMAL_EFF = 0.42
    ELECTRIC_MOTOR_EFF = 0.95
    BATTERY_ROUND_TRIP_EFF = 0.90

    # Reference burn used for the savings score (t/kWh)
    REFERENCE_FUEL_T_PER_KWH = 0.000175

    # Nominal battery system power (kW)
    BATTERY_NOMINAL_KW = 4000.0

    def compute_efficiency(
        self,
        diesel_power_kw: float,
        electric_power_kw: float,
        total_power_kw: float,
    ) -> EfficiencyResult:
        """
        Efficiency scores for a power split.

        Args:
            diesel_power_kw: Diesel share (kW)
            electric_power_kw: Electric share (kW)
            total_power_kw: Total required power (kW)

        Returns:
            EfficiencyResult with integer percentages
        """
        require_finite("diesel_power_kw", diesel_power_kw)
        require_finite("electric_power_kw", electric_power_kw)
        require_finite("total_power_kw", total_power_kw)
        if total_power_kw <= 0:
            raise DomainError("total_power_kw", total_power_kw, "must be greater than 0")

        diesel_share = diesel_power_kw / total_power_kw
        electric_share = electric_power_kw / total_power_kw

        overall = (
            diesel_share * self.DIESEL_THERMAL_EFF
            + electric_share * self.ELECTRIC_MOTOR_EFF * self.BATTERY_ROUND_TRIP_EFF
        ) * 100.0

        all_diesel_fuel = total_power_kw * self.REFERENCE_FUEL_T_PER_KWH
        hybrid_fuel = diesel_power_kw * self.REFERENCE_FUEL_T_PER_KWH
        fuel_savings = (all_diesel_fuel - hybrid_fuel) / all_diesel_fuel * 100.0

        battery_utilization = electric_power_kw / self.BATTERY_NOMINAL_KW * 100.0

        return EfficiencyResult(
            overall_efficiency_percent=round_half_up(overall),
            fuel_savings_percent=round_half_up(fuel_savings),
            battery_utilization_percent=round_half_up(battery_utilization),
        )
