"""
Ship resistance and propulsive power model for a hybrid Ro-Ro vessel.

Converts an operating-condition snapshot into required shaft power using:
- ITTC-1957 frictional resistance
- Froude-scaled wave-making resistance
- Aerodynamic drag of the superstructure in relative wind
- Empirical multipliers for sea state / wave height and cargo load
- Hull, propeller, relative-rotative and transmission efficiencies
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from rorohybrid.errors import DomainError
from rorohybrid.models.conditions import OperatingConditions


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VesselParticulars:
    """Vessel particulars. Defaults are for a 15,000 DWT Ro-Ro."""

    length: float = 180.0  # Length (m)
    beam: float = 26.0  # Beam (m)
    draft: float = 8.5  # Draft (m)
    displacement: float = 22000.0  # Displacement (t)
    dwt: float = 15000.0  # Deadweight (t)

    # Height of the above-water frontal profile used for air drag (m)
    windage_height: float = 15.0

    @property
    def wetted_surface(self) -> float:
        """Wetted surface area (m²)."""
        return (
            self.length
            * (2 * self.draft + self.beam)
            * np.sqrt((self.beam + self.draft) / self.beam)
        )

    @property
    def frontal_area(self) -> float:
        """Above-water frontal area (m²)."""
        return self.beam * self.windage_height


@dataclass(frozen=True)
class PowerBreakdown:
    """Intermediate resistance components and resulting power for one snapshot."""

    speed_ms: float
    frictional_resistance_n: float
    wave_resistance_n: float
    air_resistance_n: float
    wave_factor: float  # Added resistance multiplier (sea state, wave height)
    load_factor: float  # Cargo load multiplier
    total_resistance_n: float
    effective_power_kw: float
    delivered_power_kw: float
    total_power_kw: float  # Shaft power including transmission losses


class ResistancePowerModel:
    """
    Required propulsive power from operating conditions.

    Stateless: every call is a pure function of the vessel particulars and
    the snapshot passed in.
    """

    # Seawater properties
    RHO_SW = 1028.0  # Seawater density (kg/m³)
    NU_SW = 1.19e-6  # Kinematic viscosity (m²/s)
    GRAVITY = 9.81  # m/s²

    # Air properties
    RHO_AIR = 1.225  # Air density (kg/m³)
    AIR_DRAG_COEFF = 0.8

    # Wave-making coefficient: Cw = WAVE_COEFF * Fn^4
    WAVE_COEFF = 0.095

    # Added resistance multipliers
    SEA_STATE_STEP = 0.05  # Per Douglas step above calm
    WAVE_HEIGHT_COEFF = 0.1  # Applied to (Hs/2)^1.5
    CARGO_LOAD_COEFF = 0.12  # At 100% cargo

    # Propulsion efficiency
    HULL_EFFICIENCY = 0.98
    PROP_EFFICIENCY = 0.65
    RELATIVE_ROTATIVE_EFF = 0.98
    TRANSMISSION_LOSS = 1.03

    def __init__(self, particulars: Optional[VesselParticulars] = None):
        self.particulars = particulars or VesselParticulars()

    def compute_required_power(self, conditions: OperatingConditions) -> float:
        """
        Required shaft power for the given conditions.

        Args:
            conditions: Operating condition snapshot

        Returns:
            Total required power (kW)
        """
        return self.compute_breakdown(conditions).total_power_kw

    def compute_breakdown(self, conditions: OperatingConditions) -> PowerBreakdown:
        """
        Resistance components and power chain for the given conditions.

        Args:
            conditions: Operating condition snapshot

        Returns:
            PowerBreakdown with forces in N and powers in kW
        """
        if conditions.speed <= 0:
            raise DomainError("speed", conditions.speed, "must be greater than 0")

        p = self.particulars
        speed_ms = conditions.speed_ms
        wetted_surface = p.wetted_surface

        rf = self._frictional_resistance(speed_ms, wetted_surface)
        rw = self._wave_resistance(speed_ms, wetted_surface)
        ra = self._air_resistance(speed_ms, conditions.wind)

        wave_factor = self.added_resistance_factor(conditions.sea_state, conditions.wave)
        load_factor = 1 + (conditions.cargo / 100.0) * self.CARGO_LOAD_COEFF

        total_resistance = (rf + rw + ra) * wave_factor * load_factor

        effective_power = total_resistance * speed_ms  # W
        delivered_power = effective_power / (
            self.HULL_EFFICIENCY
            * self.PROP_EFFICIENCY
            * self.RELATIVE_ROTATIVE_EFF
        )
        shaft_power = delivered_power * self.TRANSMISSION_LOSS

        breakdown = PowerBreakdown(
            speed_ms=float(speed_ms),
            frictional_resistance_n=float(rf),
            wave_resistance_n=float(rw),
            air_resistance_n=float(ra),
            wave_factor=float(wave_factor),
            load_factor=float(load_factor),
            total_resistance_n=float(total_resistance),
            effective_power_kw=float(effective_power / 1000.0),
            delivered_power_kw=float(delivered_power / 1000.0),
            total_power_kw=float(shaft_power / 1000.0),
        )
        logger.debug(
            f"Power at {conditions.speed:.2f} kts: Rf={rf / 1000:.1f} kN, "
            f"Rw={rw / 1000:.1f} kN, Ra={ra / 1000:.1f} kN, "
            f"P={breakdown.total_power_kw:.0f} kW"
        )
        return breakdown

    def _frictional_resistance(self, speed_ms: float, wetted_surface: float) -> float:
        """Frictional resistance (N), ITTC-1957 correlation line."""
        reynolds = speed_ms * self.particulars.length / self.NU_SW
        cf = 0.075 / (np.log10(reynolds) - 2) ** 2
        return 0.5 * self.RHO_SW * wetted_surface * cf * speed_ms**2

    def _wave_resistance(self, speed_ms: float, wetted_surface: float) -> float:
        """Wave-making resistance (N)."""
        froude = speed_ms / np.sqrt(self.GRAVITY * self.particulars.length)
        cw = self.WAVE_COEFF * froude**4
        return 0.5 * self.RHO_SW * wetted_surface * cw * speed_ms**2

    def _air_resistance(self, speed_ms: float, wind_ms: float) -> float:
        """
        Air resistance (N) of the frontal profile.

        Wind is taken as lateral to the course, so the apparent wind is the
        vector sum of forward speed and wind speed.
        """
        relative_wind = np.sqrt(speed_ms**2 + wind_ms**2)
        return (
            0.5
            * self.RHO_AIR
            * self.particulars.frontal_area
            * self.AIR_DRAG_COEFF
            * relative_wind**2
        )

    @classmethod
    def added_resistance_factor(cls, sea_state: int, wave_height_m: float) -> float:
        """Multiplier for added resistance; increases with sea state and Hs."""
        return (
            1
            + (sea_state - 1) * cls.SEA_STATE_STEP
            + (wave_height_m / 2.0) ** 1.5 * cls.WAVE_HEIGHT_COEFF
        )
