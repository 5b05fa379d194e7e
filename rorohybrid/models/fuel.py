"""
Main engine fuel consumption model.

Maps diesel power draw to engine load and a stepped SFOC curve. The curve
is deliberately non-monotonic: the engine is most economical between 50%
and 75% load and SFOC rises again towards MCR.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from rorohybrid.errors import DomainError
from rorohybrid.models.conditions import require_finite


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FuelResult:
    """Fuel burn for a given diesel power draw."""
    fuel_tons_per_hour: float
    sfoc_g_per_kwh: float
    engine_load_percent: float


class FuelModel:
    """Diesel fuel consumption at a given power draw."""

    MCR_KW = 12600.0  # Rated maximum power (kW)

    # (upper load % bound, SFOC g/kWh), evaluated in order; first bound the
    # load falls below wins.
    SFOC_TABLE: Tuple[Tuple[float, float], ...] = (
        (25.0, 195.0),
        (50.0, 180.0),
        (75.0, 170.0),
        (90.0, 172.0),
    )
    SFOC_ABOVE_TABLE = 178.0

    def __init__(self, mcr_kw: float = MCR_KW):
        require_finite("mcr_kw", mcr_kw)
        if mcr_kw <= 0:
            raise DomainError("mcr_kw", mcr_kw, "must be greater than 0")
        self.mcr_kw = mcr_kw

    @classmethod
    def sfoc_for_load(cls, load_percent: float) -> float:
        """
        SFOC at a given engine load.

        Args:
            load_percent: Engine load as % of MCR

        Returns:
            SFOC in g/kWh
        """
        for upper_bound, sfoc in cls.SFOC_TABLE:
            if load_percent < upper_bound:
                return sfoc
        return cls.SFOC_ABOVE_TABLE

    def compute_fuel(self, diesel_power_kw: float) -> FuelResult:
        """
        Fuel burn rate for a diesel power draw.

        Args:
            diesel_power_kw: Power delivered by the diesel engine (kW)

        Returns:
            FuelResult with burn rate (t/h), SFOC (g/kWh) and load (%)
        """
        require_finite("diesel_power_kw", diesel_power_kw)
        if diesel_power_kw < 0:
            raise DomainError("diesel_power_kw", diesel_power_kw, "must not be negative")

        load_percent = diesel_power_kw / self.mcr_kw * 100.0
        sfoc = self.sfoc_for_load(load_percent)

        # g/kWh * kW = g/h; grams to metric tons
        fuel_tons_per_hour = diesel_power_kw * sfoc / 1_000_000.0

        if load_percent > 100.0:
            logger.warning(
                f"Diesel demand {diesel_power_kw:.0f} kW exceeds MCR "
                f"{self.mcr_kw:.0f} kW ({load_percent:.0f}% load)"
            )

        return FuelResult(
            fuel_tons_per_hour=fuel_tons_per_hour,
            sfoc_g_per_kwh=sfoc,
            engine_load_percent=load_percent,
        )
